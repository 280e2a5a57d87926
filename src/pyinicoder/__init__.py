# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/14 20:01:52
# @Author : Kariko Lin

"""Records <-> two-level INI text.

    ```python
    @dataclass
    class Person:
        name: str
        age: int

    @dataclass
    class Configuration:
        id: int
        person: Person

    text = encode(Configuration(101, Person('rocky', 21)))
    conf = decode(Configuration, text)
    ```
"""

import logging

from .decoder import IniDecoder, decode
from .encoder import IniEncoder, encode
from .errors import (
    IniCodingError,
    MalformedError,
    MissingError,
    UnsupportedError
)
from .files import IniRecordFile
from .ini import Document, IniParser, Scalar, Section, parse_document
from .shape import Field, FieldKind, RecordShape, shape_of

__all__ = [
    'encode', 'decode', 'IniEncoder', 'IniDecoder',
    'IniCodingError', 'UnsupportedError', 'MissingError', 'MalformedError',
    'Document', 'Scalar', 'Section', 'parse_document',
    'IniParser', 'IniRecordFile',
    'Field', 'FieldKind', 'RecordShape', 'shape_of'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
