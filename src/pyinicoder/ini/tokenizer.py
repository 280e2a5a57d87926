# -*- encoding: utf-8 -*-
# @File   : tokenizer.py
# @Time   : 2024/10/15 01:12:33
# @Author : Kariko Lin

"""Per-line INI tokenizer.

Some behaviors look odd but are kept for compatibility:
- whitespaces out of quotes are DROPPED, not trimmed. `a = b c` gives `bc`.
- quote marks are KEPT. `a = 'b c'` gives `'b c'`, quotes included.
- `[`, `]`, `=` are dropped where they mean nothing, e.g. `a = b=c` gives `bc`.
- a comment mark inside quotes makes the whole line ignored.
"""

from typing import NamedTuple

from ..errors import MalformedError
from .consts import COMMENT_MARKS, QUOTES, WHITESPACES, TokenState


class SectionHeader(NamedTuple):
    name: str


class Assignment(NamedTuple):
    key: str
    value: str


Token = SectionHeader | Assignment


def tokenize_line(line: str) -> Token | None:
    """Parse one physical line (without `\\n`).

    Returns `None` for comments and blank lines.
    Raises `MalformedError` on unterminated quotes / titles,
    or a key without `=`.
    """
    cache = ''
    state = TokenState.VARIABLE
    stack: list[TokenState] = []
    variable: str | None = None

    for c in line:
        match c:
            case _ if c in WHITESPACES:
                if state.quoted:
                    cache += c
            case '[':
                if state is TokenState.VARIABLE:
                    cache = ''
                    stack.append(state)
                    state = TokenState.TITLE
            case ']':
                if state is TokenState.TITLE:
                    # anything after `]` is ignored.
                    state = stack.pop()
                    return SectionHeader(cache)
            case '=':
                if state is TokenState.VARIABLE:
                    variable = cache
                    cache = ''
                    state = TokenState.VALUE
            case _ if c in COMMENT_MARKS:
                if state is TokenState.VALUE and variable is not None:
                    return Assignment(variable, cache)
                return None
            case _ if c in QUOTES:
                if state is QUOTES[c]:
                    state = stack.pop()
                else:
                    stack.append(state)
                    state = QUOTES[c]
                cache += c
            case _:
                cache += c

    if state is TokenState.VALUE and variable is not None:
        return Assignment(variable, cache)
    if state is TokenState.VARIABLE and not cache:
        return None

    match state:
        case TokenState.SINGLE_QUOTE | TokenState.DOUBLE_QUOTE:
            reason = 'unterminated quote'
        case TokenState.TITLE:
            reason = 'unterminated section title'
        case _:
            reason = f'expected "=" after "{cache}"'
    raise MalformedError(f'{reason}: {line!r}')
