# -*- encoding: utf-8 -*-
# @File   : encoder.py
# @Time   : 2024/10/15 21:36:12
# @Author : Kariko Lin

"""Record -> INI text.

Scalars of the top record become free pairs, nested records become
sections. A record nested in a nested record has nowhere to go,
thus `UnsupportedError`.

Note: the order of lines in output is NOT guaranteed,
except that free pairs always come before sections.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any

from .coercion import to_text
from .errors import MissingError, UnsupportedError
from .ini.parser import serialize
from .shape import Field, RecordShape, resolve_shape, shape_of

Staged = dict[str, str | dict[str, str]]


class IniEncoder:
    def __init__(
        self, *,
        delimiter: str = ' = ',
        blank_lines: int = 1
    ) -> None:
        self._delimiter = delimiter
        self._blank_lines = blank_lines

    @staticmethod
    def _shape_for(
        record: Any, shape: RecordShape | type | None
    ) -> RecordShape:
        if shape is not None:
            return resolve_shape(shape)
        if dataclasses.is_dataclass(record) and not isinstance(record, type):
            return shape_of(type(record))
        raise UnsupportedError(
            f'{type(record).__name__} is not a record, '
            'only records (with fields) can be written as INI.')

    @staticmethod
    def _field_value(record: Any, f: Field) -> Any:
        try:
            if isinstance(record, Mapping):
                return record[f.name]
            return getattr(record, f.name)
        except (KeyError, AttributeError):
            raise MissingError(
                f'record {type(record).__name__} has no "{f.name}".',
                key=f.name) from None

    def stage(
        self, record: Any, shape: RecordShape | type | None = None
    ) -> Staged:
        """Walk through `record` without printing.

        Returns a fresh dict of `{key: text}` and `{section: {key: text}}`.
        """
        return self._stage_level(record, self._shape_for(record, shape), 0)

    def _stage_level(self, record: Any, shape: RecordShape,
                     depth: int) -> Staged:
        staged: Staged = {}
        for f in shape:
            # depth limit is about the shape, whatever the value is.
            if f.kind.is_record and depth > 0:
                raise UnsupportedError(
                    f'"{f.name}" would be a section inside a section.',
                    key=f.name)
            value = self._field_value(record, f)
            if value is None:
                if f.optional:
                    continue
                raise UnsupportedError(
                    f'"{f.name}" is None but not optional.', key=f.name)
            if f.kind.is_record:
                staged[f.name] = self._stage_level(value, f.shape, depth + 1)
            else:
                staged[f.name] = to_text(value, f.kind, key=f.name)
        return staged

    def encode(
        self, record: Any, shape: RecordShape | type | None = None
    ) -> str:
        return serialize(
            self.stage(record, shape),
            delimiter=self._delimiter,
            blank_lines=self._blank_lines)


def encode(record: Any, shape: RecordShape | type | None = None) -> str:
    """Write `record` as INI text.

    `shape` may be omitted for dataclass instances.

    Raises:
        UnsupportedError: `record` is not a record,
        or records are nested more than one level.
        MalformedError: a value doesn't fit its field type.
    """
    return IniEncoder().encode(record, shape)
