"""Tests for the structural decoder."""

import pytest

from pyinicoder import (
    Field,
    FieldKind,
    IniDecoder,
    MalformedError,
    MissingError,
    RecordShape,
    UnsupportedError,
    decode,
    parse_document,
)
from records import (
    Configuration,
    Holder,
    Nick,
    Outer,
    Person,
    Place,
    WithOptional,
    sample_configuration,
)

CONFIGURATION_INI = """\
id = 101
tag = mynotes

[person]
name = rocky
age = 21

[place]
location = china
history = 1000
"""

FLAG = RecordShape((Field(name="flag", kind=FieldKind.BOOL),))


# ---------------------------------------------------------------------------
# happy paths
# ---------------------------------------------------------------------------

def test_decode_configuration():
    assert decode(Configuration, CONFIGURATION_INI) == sample_configuration()


def test_decode_sections_in_any_order():
    text = ("[place]\nhistory = 1000\nlocation = china\n"
            "[person]\nage = 21\nname = rocky\n"
            "[root]\ntag = mynotes\nid = 101\n")
    assert decode(Configuration, text) == sample_configuration()


def test_decode_ignores_unknown_keys():
    text = "name = rocky\nage = 21\nhobby = climbing\n[extra]\nx = 1\n"
    assert decode(Person, text) == Person("rocky", 21)


def test_decode_keeps_quotes():
    assert decode(Person, "name = 'rocky b'\nage = 1\n").name == "'rocky b'"


def test_decode_strips_whitespace():
    record = decode(Person, "name = rocky b\nage = 2 1\n")
    assert record == Person("rockyb", 21)


@pytest.mark.parametrize("raw, expected", [
    ("TRUE", True),
    ("0", False),
    ("yes", True),
    ("", True),
    ("false", False),
])
def test_decode_bool(raw, expected):
    assert decode(FLAG, f"flag = {raw}\n") == {"flag": expected}


def test_decode_handwritten_nested_shape():
    inner = RecordShape((Field(name="x", kind=FieldKind.UINT8),))
    shape = RecordShape((
        Field(name="n", kind=FieldKind.DOUBLE),
        Field(name="sub", kind=FieldKind.RECORD, shape=inner),
    ))
    assert decode(shape, "n = 1.5\n[sub]\nx = 7\n") == {
        "n": 1.5, "sub": {"x": 7}}


def test_decode_document():
    doc = parse_document(CONFIGURATION_INI)
    conf = IniDecoder().decode_document(Configuration, doc)
    assert conf.place == Place("china", 1000)


# ---------------------------------------------------------------------------
# optional fields
# ---------------------------------------------------------------------------

def test_decode_optional_absent():
    assert decode(WithOptional, "name = a\n") == WithOptional("a")


def test_decode_optional_empty():
    record = decode(WithOptional, "name = a\nnickname =\nscore =\n")
    assert record.score is None
    # an empty str stays a str.
    assert record.nickname == ""


def test_decode_empty_section():
    assert decode(Holder, "id = 1\n[opt]\n") == Holder(1, Nick(None))


def test_decode_optional_present():
    text = "name = a\nnickname = b\n[extra]\nname = c\nage = 3\n"
    assert decode(WithOptional, text) == WithOptional(
        "a", "b", Person("c", 3))


# ---------------------------------------------------------------------------
# failures
# ---------------------------------------------------------------------------

def test_decode_malformed_integer():
    with pytest.raises(MalformedError) as info:
        decode(Person, "name = rocky\nage = abc\n")
    assert info.value.key == "age"


def test_decode_malformed_line():
    with pytest.raises(MalformedError):
        decode(Person, "name = 'rocky\nage = 1\n")


def test_decode_missing_key():
    with pytest.raises(MissingError) as info:
        decode(Person, "name = rocky\n")
    assert info.value.key == "age"


def test_decode_missing_section():
    text = "id = 1\ntag = t\n[person]\nname = a\nage = 1\n"
    with pytest.raises(MissingError) as info:
        decode(Configuration, text)
    assert info.value.key == "place"


def test_decode_scalar_where_section_expected():
    text = ("id = 1\ntag = t\nplace = here\n"
            "[person]\nname = a\nage = 1\n")
    with pytest.raises(MissingError):
        decode(Configuration, text)


def test_decode_section_where_scalar_expected():
    with pytest.raises(MissingError):
        decode(Person, "age = 1\n[name]\nfirst = rocky\n")


def test_decode_two_levels_unsupported():
    with pytest.raises(UnsupportedError):
        decode(Outer, "[inner]\na = 1\nx = 2\n")


def test_decode_nothing_partial():
    # failure in the second section, no record at all.
    text = CONFIGURATION_INI.replace("history = 1000", "history = old")
    with pytest.raises(MalformedError):
        decode(Configuration, text)
