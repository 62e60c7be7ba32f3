"""Tests for dictionary file persistence."""

import json
from datetime import datetime

import pytest

from wordbook.core.definition import Definition
from wordbook.core.dictionary import Dictionary
from wordbook.core.errors import FormatError
from wordbook.core.storage import dump_dictionary, parse_dictionary


@pytest.fixture
def dictionary():
    d = Dictionary("Ye Olde Dictionary")
    d.weak_define("adorbs", Definition("synonym for adorable", datetime(2019, 12, 22, 21, 9)))
    d.weak_define("Bingo Bango Presto", Definition("what you say if you're cool", datetime(2020, 1, 10, 20, 31)))
    d.weak_define("ewey", Definition('a synonym for "ew", but with more disgust', datetime(2019, 12, 4, 20, 54)))
    return d


def test_round_trip(dictionary, tmp_path):
    path = tmp_path / "test.dict"
    dictionary.save(path)
    loaded = Dictionary.load(path)

    assert loaded == dictionary
    assert loaded.name == "Ye Olde Dictionary"
    assert loaded.lookup("ewey").entry_date == datetime(2019, 12, 4, 20, 54)


def test_round_trip_keeps_access_counts(dictionary, tmp_path):
    dictionary.render()
    dictionary.lookup("adorbs").read()
    path = tmp_path / "test.dict"
    dictionary.save(path)

    loaded = Dictionary.load(path)
    assert loaded.lookup("adorbs").access_count == 2
    assert loaded.lookup("ewey").access_count == 1


def test_save_does_not_read(dictionary, tmp_path):
    dictionary.save(tmp_path / "test.dict")
    assert all(d.access_count == 0 for d in dictionary.entries.values())


def test_file_is_json(dictionary):
    data = json.loads(dump_dictionary(dictionary))
    assert data["format"] == "wordbook.dictionary"
    assert data["version"] == 1
    assert data["definitions"]["adorbs"]["entry_date"] == "2019-12-22T21:09:00"


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        Dictionary.load(tmp_path / "nope.dict")


def test_not_json():
    with pytest.raises(FormatError):
        parse_dictionary("this is not a dictionary")


def test_wrong_format_tag(dictionary):
    data = json.loads(dump_dictionary(dictionary))
    data["format"] = "something.else"
    with pytest.raises(FormatError):
        parse_dictionary(json.dumps(data))


def test_negative_access_count(dictionary):
    data = json.loads(dump_dictionary(dictionary))
    data["definitions"]["adorbs"]["access_count"] = -3
    with pytest.raises(FormatError):
        parse_dictionary(json.dumps(data))


def test_binary_file(tmp_path):
    path = tmp_path / "binary.dict"
    path.write_bytes(b"\xff\xfe\x00garbage\x9c")
    with pytest.raises(FormatError):
        Dictionary.load(path)


def test_dates_with_utc_offset_are_rejected(dictionary):
    data = json.loads(dump_dictionary(dictionary))
    data["definitions"]["adorbs"]["entry_date"] = "2020-01-01T00:00:00Z"
    with pytest.raises(FormatError):
        parse_dictionary(json.dumps(data))
