# -*- encoding: utf-8 -*-
# @File   : files.py
# @Time   : 2024/10/16 00:12:09
# @Author : Kariko Lin

from typing import TypeVar

from .abstract import FileHandler
from .decoder import IniDecoder
from .encoder import IniEncoder
from .ini.parser import IniParser
from .shape import RecordShape, resolve_shape

T = TypeVar('T')


class IniRecordFile(FileHandler[T]):
    """Read / write records of one shape from / into an INI file.

        ```python
        conf = IniRecordFile('settings.ini', Configuration).read()
        ```

    Encoding is guessed with `chardet` if the given one doesn't work.
    """

    def __init__(
        self, filename: str, shape: RecordShape | type,
        encoding: str | None = None, *,
        delimiter: str = ' = ',
        blank_lines: int = 1
    ) -> None:
        super().__init__(filename)
        self._shape = resolve_shape(shape)
        self._parser = IniParser(filename, encoding)
        self._encoder = IniEncoder(
            delimiter=delimiter, blank_lines=blank_lines)

    @property
    def shape(self) -> RecordShape:
        return self._shape

    def read(self) -> T:
        return IniDecoder().decode_document(self._shape, self._parser.read())

    def write(self, instance: T) -> None:
        self._parser.writetext(self._encoder.encode(instance, self._shape))

    def __str__(self) -> str:
        return f'{self._shape}: {self._parser}'
