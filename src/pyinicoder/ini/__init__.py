# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/15 01:16:53
# @Author : Kariko Lin

from .consts import ROOT_SECTION, TokenState
from .model import Document, Scalar, Section
from .parser import IniParser, parse_document, serialize
from .tokenizer import Assignment, SectionHeader, tokenize_line
