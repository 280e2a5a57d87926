"""Tests for reading / writing records through files."""

from pyinicoder import IniRecordFile
from records import Configuration, sample_configuration


def test_write_then_read(tmp_path):
    path = str(tmp_path / "conf.ini")
    handler = IniRecordFile(path, Configuration, "utf-8")
    handler.write(sample_configuration())
    assert handler.read() == sample_configuration()


def test_written_layout(tmp_path):
    path = tmp_path / "conf.ini"
    IniRecordFile(str(path), Configuration, delimiter="=").write(
        sample_configuration())
    lines = path.read_text(encoding="utf-8").splitlines()
    assert "id=101" in lines
    assert "[person]" in lines


def test_read_existing(tmp_path):
    path = tmp_path / "conf.ini"
    path.write_text(
        "; written by hand\n"
        "id = 101\ntag = mynotes\n"
        "[person]\nname = rocky   ; the name\nage = 21\n"
        "[place]\nlocation = china\nhistory = 1000\n",
        encoding="utf-8")
    handler = IniRecordFile(str(path), Configuration)
    assert handler.read() == sample_configuration()
    assert str(handler).startswith("Configuration: ")
