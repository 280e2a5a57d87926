# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/15 00:57:10
# @Author : Kariko Lin

"""
Basically a two-level INI structure: free pairs at the top of file,
then sections of pairs. Sections never contain sections.

Both `Document` and `Section` are READ ONLY once parsed.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Scalar:
    """An undecoded value. Quotes, if any, are still there."""
    raw: str

    def __str__(self) -> str:
        return self.raw


class Section(Mapping[str, Scalar]):
    """INI 小节。只有键值对，不会再套小节。"""

    def __init__(self, name: str, pairs: Mapping[str, str]) -> None:
        self._name = name
        self.__raw: dict[str, Scalar] = {
            k: Scalar(v) for k, v in pairs.items()}

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> Scalar:
        return self.__raw[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__raw))

    def to_dict(self) -> dict[str, str]:
        return {k: v.raw for k, v in self.__raw.items()}


class Document(Mapping[str, Scalar | Section]):
    """INI 文件表示。形如：

        ```ini
        key = val  ; free pairs, stored right in the root.

        [section]
        key233 = val666
        ```

    `doc['key']` gives a `Scalar`, `doc['section']` gives a `Section`.
    """

    def __init__(
        self, entries: Mapping[str, str | Mapping[str, str]] | None = None
    ) -> None:
        self.__raw: dict[str, Scalar | Section] = {}
        for k, v in (entries or {}).items():
            self.__raw[k] = (
                Scalar(v) if isinstance(v, str) else Section(k, v))

    def __getitem__(self, key: str) -> Scalar | Section:
        return self.__raw[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __repr__(self) -> str:
        return 'Document { .scalars = %d, .sections = %d }' % (
            len(self.header), len(self.sections))

    @property
    def header(self) -> dict[str, Scalar]:
        """Pairs not belonging to any section."""
        return {k: v for k, v in self.__raw.items() if isinstance(v, Scalar)}

    @property
    def sections(self) -> dict[str, Section]:
        return {k: v for k, v in self.__raw.items() if isinstance(v, Section)}

    def to_dict(self) -> dict[str, str | dict[str, str]]:
        return {
            k: v.raw if isinstance(v, Scalar) else v.to_dict()
            for k, v in self.__raw.items()
        }
