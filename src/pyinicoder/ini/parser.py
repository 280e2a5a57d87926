# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/15 01:04:45
# @Author : Kariko Lin

"""Text <-> `Document`.

`parse_document()` and `serialize()` are pure functions on strings,
while `IniParser` deals with files (and their unknown encodings).
"""

import logging
from collections.abc import Mapping
from io import StringIO

import chardet

from ..abstract import FileHandler
from ..errors import MalformedError
from .consts import ROOT_SECTION
from .model import Document
from .tokenizer import Assignment, SectionHeader, tokenize_line

# staged form of a document: a value is either a raw str,
# or a section dict of raw strs.
Entries = Mapping[str, str | Mapping[str, str]]


def parse_document(text: str) -> Document:
    """Tokenize `text` line by line and build a `Document`.

    Any malformed line aborts the whole parsing.
    """
    entries: dict[str, str | dict[str, str]] = {}
    title = ROOT_SECTION
    for lineno, line in enumerate(text.split('\n'), 1):
        try:
            token = tokenize_line(line)
        except MalformedError as e:
            e.line = lineno
            raise

        match token:
            case None:
                continue
            case SectionHeader(name=''):
                logging.warning(f'line {lineno}: empty section title ignored.')
            case SectionHeader(name=name):
                title = name
                # a header alone still declares an (empty) section.
                if title != ROOT_SECTION:
                    _open_section(entries, title, lineno)
            case Assignment(key=key, value=value) if title == ROOT_SECTION:
                if isinstance(entries.get(key), dict):
                    logging.warning(
                        f'line {lineno}: "{key}" replaces section [{key}].')
                entries[key] = value
            case Assignment(key=key, value=value):
                _open_section(entries, title, lineno)[key] = value
    return Document(entries)


def _open_section(
    entries: dict[str, str | dict[str, str]], title: str, lineno: int
) -> dict[str, str]:
    section = entries.get(title)
    if not isinstance(section, dict):
        if section is not None:
            logging.warning(
                f'line {lineno}: section [{title}] '
                f'replaces "{title} = {section}".')
        section = entries[title] = {}
    return section


def serialize(
    entries: Entries, *,
    delimiter: str = ' = ',
    blank_lines: int = 1
) -> str:
    """Free pairs first, then each section after blank line(s)."""
    ret = StringIO()
    sections: list[tuple[str, Mapping[str, str]]] = []
    for k, v in entries.items():
        if isinstance(v, str):
            ret.write(f'{k}{delimiter}{v}\n')
        else:
            sections.append((k, v))
    for name, pairs in sections:
        ret.write('\n' * blank_lines)
        ret.write(f'[{name}]\n')
        for k, v in pairs.items():
            ret.write(f'{k}{delimiter}{v}\n')
    return ret.getvalue()


class IniParser(FileHandler[Document]):
    def __init__(self, filename: str, encoding: str | None = None) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # chardet may still be wrong on short CJK files.
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            logging.warning(
                f'{filename}: not {codec["encoding"]}, falling back to gbk.')
            buf = raw.decode('gbk')
        return StringIO(buf, newline=None)

    def readtext(self) -> str:
        """Read the whole file as `str`, guessing the encoding if needed."""
        try:
            # `encoding=None` means the locale default.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return fp.read()
        except UnicodeDecodeError:
            logging.info(f'{self._fn}: guessing encoding with chardet.')
            return self._decode_file(self._fn).read()

    def read(self) -> Document:
        return parse_document(self.readtext())

    def writetext(self, text: str) -> None:
        with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
            fp.write(text)

    def write(
        self, instance: Document, *,
        delimiter: str = ' = ',
        blank_lines: int = 1
    ) -> None:
        """Save the document.

        Comments and blank lines of the source are gone.
        """
        self.writetext(serialize(
            instance.to_dict(), delimiter=delimiter, blank_lines=blank_lines))

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
