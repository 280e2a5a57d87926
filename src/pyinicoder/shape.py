# -*- encoding: utf-8 -*-
# @File   : shape.py
# @Time   : 2024/10/14 21:30:02
# @Author : Kariko Lin

"""Record shapes, i.e. what the encoder/decoder walks through.

A shape is an ordered list of `Field`s. You may write one by hand:

    ```python
    PERSON = RecordShape((
        Field(name='name', kind=FieldKind.STR),
        Field(name='age', kind=FieldKind.UINT8),
    ))
    ```

or simply let `shape_of()` read it from a dataclass.
"""

import dataclasses
import types
import typing
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import cache
from typing import Any

from .errors import UnsupportedError
from .ini.consts import ROOT_SECTION

# key of `dataclasses.field(metadata=...)` to override the derived kind.
METADATA_KEY = 'ini'


class FieldKind(str, Enum):
    BOOL = 'bool'
    INT = 'int'  # 64 bits, samely UINT.
    INT8 = 'int8'
    INT16 = 'int16'
    INT32 = 'int32'
    INT64 = 'int64'
    UINT = 'uint'
    UINT8 = 'uint8'
    UINT16 = 'uint16'
    UINT32 = 'uint32'
    UINT64 = 'uint64'
    FLOAT = 'float'
    DOUBLE = 'double'
    STR = 'str'
    RECORD = 'record'

    @property
    def is_record(self) -> bool:
        return self is FieldKind.RECORD


@dataclass(frozen=True, kw_only=True)
class Field:
    name: str
    kind: FieldKind
    # only for `FieldKind.RECORD`.
    shape: 'RecordShape | None' = None
    optional: bool = False

    def __post_init__(self) -> None:
        if self.kind.is_record and self.shape is None:
            raise UnsupportedError(
                f'record field "{self.name}" has no nested shape.',
                key=self.name)
        # `[root]` leads back to the free pairs, never a section.
        if self.kind.is_record and self.name == ROOT_SECTION:
            raise UnsupportedError(
                f'record field can\'t be named "{ROOT_SECTION}".',
                key=self.name)


@dataclass(frozen=True)
class RecordShape:
    fields: tuple[Field, ...]
    # called as `factory(**values)` when decoding.
    factory: Callable[..., Any] = dict
    name: str = ''

    def __iter__(self):
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __str__(self) -> str:
        return self.name or '<anonymous record>'

    def build(self, values: Mapping[str, Any]) -> Any:
        return self.factory(**values)


_PRIMITIVES: dict[type, FieldKind] = {
    bool: FieldKind.BOOL,
    int: FieldKind.INT,
    float: FieldKind.DOUBLE,
    str: FieldKind.STR,
}


def _unwrap_optional(hint: Any) -> tuple[Any, bool]:
    """`X | None` -> `(X, True)`."""
    if typing.get_origin(hint) in (typing.Union, types.UnionType):
        args = [i for i in typing.get_args(hint) if i is not type(None)]
        if len(args) == 1:
            return args[0], True
    return hint, False


def _derive_field(
    owner: type, dc_field: dataclasses.Field, hint: Any,
    pending: frozenset[type]
) -> Field:
    hint, optional = _unwrap_optional(hint)
    kind = dc_field.metadata.get(METADATA_KEY)

    if kind is None:
        if dataclasses.is_dataclass(hint) and isinstance(hint, type):
            kind = FieldKind.RECORD
        elif hint in _PRIMITIVES:
            kind = _PRIMITIVES[hint]
        else:
            # list, dict, tuple... all those have no INI expression.
            raise UnsupportedError(
                f'{owner.__name__}.{dc_field.name}: '
                f'type {hint!r} has no INI representation.',
                key=dc_field.name)
    kind = FieldKind(kind)

    if not kind.is_record:
        return Field(name=dc_field.name, kind=kind, optional=optional)
    if not (dataclasses.is_dataclass(hint) and isinstance(hint, type)):
        raise UnsupportedError(
            f'{owner.__name__}.{dc_field.name} is marked as record, '
            f'but {hint!r} is not a dataclass.',
            key=dc_field.name)
    if hint is owner or hint in pending:
        raise UnsupportedError(
            f'{owner.__name__}.{dc_field.name}: '
            f'recursive record {hint.__name__}.',
            key=dc_field.name)
    return Field(
        name=dc_field.name, kind=kind, optional=optional,
        shape=_shape_of(hint, pending | {owner}))


def _shape_of(cls: type, pending: frozenset[type]) -> RecordShape:
    if not (dataclasses.is_dataclass(cls) and isinstance(cls, type)):
        raise UnsupportedError(
            f'{cls!r} is not a dataclass, unable to derive its shape.')
    hints = typing.get_type_hints(cls)
    return RecordShape(
        tuple(
            _derive_field(cls, i, hints[i.name], pending)
            for i in dataclasses.fields(cls)
            if i.init
        ),
        factory=cls,
        name=cls.__name__)


@cache
def shape_of(cls: type) -> RecordShape:
    """Derive the `RecordShape` of a dataclass type.

    - `bool`, `int`, `float`, `str` map to `BOOL`, `INT`, `DOUBLE`, `STR`;
    - nested dataclasses map to `RECORD`;
    - `X | None` makes an optional field;
    - `field(metadata={'ini': FieldKind.UINT8})` overrides the kind;
    - a record field named `root` is refused, `[root]` means no section.

    Raises `UnsupportedError` on containers and other unknown types.
    Note that nesting depth is NOT checked here, but on coding.
    """
    return _shape_of(cls, frozenset())


def resolve_shape(shape: RecordShape | type) -> RecordShape:
    """Accept either a shape or a dataclass type."""
    if isinstance(shape, RecordShape):
        return shape
    return shape_of(shape)
