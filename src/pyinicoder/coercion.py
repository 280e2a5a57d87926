# -*- encoding: utf-8 -*-
# @File   : coercion.py
# @Time   : 2024/10/14 22:17:45
# @Author : Kariko Lin

"""Text <-> primitive conversion.

CAUTION: booleans are PERMISSIVE on purpose. Only `false` (case insensitive)
and `0` are false, *anything else*, even `1`, an empty string or some
random word, is true. Older INIs out there rely on this.
"""

from re import IGNORECASE
from re import compile as regex
from typing import Any

from .errors import MalformedError
from .shape import FieldKind

INTEGER_RANGES: dict[FieldKind, tuple[int, int]] = {
    FieldKind.INT: (-(1 << 63), (1 << 63) - 1),
    FieldKind.INT8: (-(1 << 7), (1 << 7) - 1),
    FieldKind.INT16: (-(1 << 15), (1 << 15) - 1),
    FieldKind.INT32: (-(1 << 31), (1 << 31) - 1),
    FieldKind.INT64: (-(1 << 63), (1 << 63) - 1),
    FieldKind.UINT: (0, (1 << 64) - 1),
    FieldKind.UINT8: (0, (1 << 8) - 1),
    FieldKind.UINT16: (0, (1 << 16) - 1),
    FieldKind.UINT32: (0, (1 << 32) - 1),
    FieldKind.UINT64: (0, (1 << 64) - 1),
}
FLOATS = (FieldKind.FLOAT, FieldKind.DOUBLE)

# `int()` / `float()` alone are too kind: they take `1_000` or ` 1 `.
_INTEGER = regex(r'[+-]?[0-9]+')
_DECIMAL = regex(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?'
    r'|inf|infinity|nan)',
    IGNORECASE)


def to_bool(raw: str) -> bool:
    match raw.lower():
        case 'false' | '0':
            return False
        case _:
            return True


def to_int(raw: str, kind: FieldKind = FieldKind.INT, *,
           key: str | None = None) -> int:
    if not _INTEGER.fullmatch(raw):
        raise MalformedError(f'"{raw}" is not an integer.', key=key)
    ret = int(raw)
    lo, hi = INTEGER_RANGES[kind]
    if not lo <= ret <= hi:
        raise MalformedError(
            f'{raw} overflows {kind.value} [{lo}, {hi}].', key=key)
    return ret


def to_float(raw: str, *, key: str | None = None) -> float:
    if not _DECIMAL.fullmatch(raw):
        raise MalformedError(f'"{raw}" is not a number.', key=key)
    return float(raw)


def from_text(raw: str, kind: FieldKind, *, key: str | None = None) -> Any:
    """Coerce a raw INI value into `kind`."""
    if kind is FieldKind.BOOL:
        return to_bool(raw)
    elif kind in INTEGER_RANGES:
        return to_int(raw, kind, key=key)
    elif kind in FLOATS:
        return to_float(raw, key=key)
    elif kind is FieldKind.STR:
        return raw
    raise MalformedError(f'{kind.value} is not a scalar kind.', key=key)


def to_text(value: Any, kind: FieldKind, *, key: str | None = None) -> str:
    """Render `value` as it should be written after `key = `."""
    # bool is an int subclass, always check it first.
    if kind is FieldKind.BOOL:
        if isinstance(value, bool):
            return 'true' if value else 'false'
    elif kind in INTEGER_RANGES:
        if isinstance(value, int) and not isinstance(value, bool):
            lo, hi = INTEGER_RANGES[kind]
            if not lo <= value <= hi:
                raise MalformedError(
                    f'{value} overflows {kind.value} [{lo}, {hi}].', key=key)
            return str(value)
    elif kind in FLOATS:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return repr(float(value))
    elif kind is FieldKind.STR:
        if isinstance(value, str):
            if '\n' in value or '\r' in value:
                raise MalformedError(
                    f'{value!r} spans lines, INI values can\'t.', key=key)
            return value
    raise MalformedError(
        f'unable to write {type(value).__name__} {value!r} as {kind.value}.',
        key=key)
