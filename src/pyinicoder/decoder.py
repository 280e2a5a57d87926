# -*- encoding: utf-8 -*-
# @File   : decoder.py
# @Time   : 2024/10/15 20:03:51
# @Author : Kariko Lin

import logging
from collections.abc import Mapping
from typing import Any

from .coercion import from_text
from .errors import MissingError, UnsupportedError
from .ini.model import Document, Scalar, Section
from .ini.parser import parse_document
from .shape import Field, FieldKind, RecordShape, resolve_shape

Level = Mapping[str, Scalar | Section]


class IniDecoder:
    """INI text (or `Document`) -> record.

    Keys not described by the shape are ignored.
    """

    def decode(self, shape: RecordShape | type, text: str) -> Any:
        return self.decode_document(shape, parse_document(text))

    def decode_document(
        self, shape: RecordShape | type, document: Document
    ) -> Any:
        return self._decode_level(resolve_shape(shape), document, 0)

    def _decode_level(self, shape: RecordShape, level: Level,
                      depth: int) -> Any:
        values: dict[str, Any] = {}
        for f in shape:
            if f.kind.is_record:
                values[f.name] = self._decode_record(f, level, depth)
            else:
                values[f.name] = self._decode_scalar(f, level)

        if logging.getLogger().isEnabledFor(logging.DEBUG):
            known = {f.name for f in shape}
            for k in level:
                if k not in known:
                    logging.debug(f'{shape}: "{k}" is not a field, ignored.')
        return shape.build(values)

    @staticmethod
    def _decode_scalar(f: Field, level: Level) -> Any:
        entry = level.get(f.name)
        if entry is None and f.optional:
            return None
        if not isinstance(entry, Scalar):
            raise MissingError(f'key "{f.name}" not found.', key=f.name)
        # empty means None, but an empty str is still a str.
        if f.optional and not entry.raw and f.kind is not FieldKind.STR:
            return None
        return from_text(entry.raw, f.kind, key=f.name)

    def _decode_record(self, f: Field, level: Level, depth: int) -> Any:
        if depth > 0:
            raise UnsupportedError(
                f'"{f.name}" would be a section inside a section.',
                key=f.name)
        entry = level.get(f.name)
        if entry is None and f.optional:
            return None
        if not isinstance(entry, Section):
            raise MissingError(f'section [{f.name}] not found.', key=f.name)
        return self._decode_level(f.shape, entry, depth + 1)


def decode(shape: RecordShape | type, text: str) -> Any:
    """Parse INI `text` into a record of `shape`.

    `shape` may be a `RecordShape`, or a dataclass type.

    Raises:
        UnsupportedError: the shape nests records more than one level.
        MissingError: a required key or section is absent.
        MalformedError: a line can't be tokenized,
        or a value can't be converted to its field type.
    """
    return IniDecoder().decode(shape, text)
