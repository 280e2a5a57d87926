# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/14 21:08:37
# @Author : Kariko Lin

"""All the failures `encode()` / `decode()` may throw.

Catch `IniCodingError` if you don't care which one it is.
"""


class IniCodingError(Exception):
    """Base of INI coding errors.

    `key` is the field (or INI key) being processed, if known;
    `line` is the 1-based line number, only for tokenizing errors.
    """
    def __init__(
        self, message: str, *,
        key: str | None = None,
        line: int | None = None
    ) -> None:
        super().__init__(message)
        self.key = key
        self.line = line

    def __str__(self) -> str:
        msg = super().__str__()
        if self.line is not None:
            msg = f'line {self.line}: {msg}'
        return msg


class UnsupportedError(IniCodingError):
    """Structures INI cannot express, e.g. sections inside sections."""
    pass


class MissingError(IniCodingError):
    """A required key or section is absent."""
    pass


class MalformedError(IniCodingError):
    """Text that can't be tokenized, or can't be coerced to the field type."""
    pass
