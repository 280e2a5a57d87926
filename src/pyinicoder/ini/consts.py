# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/15 00:41:20
# @Author : Kariko Lin

from enum import Enum, auto

# where pairs without any section header go.
ROOT_SECTION = 'root'

WHITESPACES = (' ', '\t')
COMMENT_MARKS = ('#', ';')


class TokenState(Enum):
    VARIABLE = auto()  # scanning a key
    VALUE = auto()  # after `=`
    TITLE = auto()  # inside `[...]`
    SINGLE_QUOTE = auto()
    DOUBLE_QUOTE = auto()

    @property
    def quoted(self) -> bool:
        return self in (TokenState.SINGLE_QUOTE, TokenState.DOUBLE_QUOTE)


QUOTES = {
    "'": TokenState.SINGLE_QUOTE,
    '"': TokenState.DOUBLE_QUOTE,
}
