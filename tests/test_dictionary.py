"""Tests for Dictionary."""

from datetime import datetime

import pytest

from wordbook.core.definition import Definition
from wordbook.core.dictionary import Dictionary, SearchResult
from wordbook.core.errors import NotFound


def defn(text: str, minute: int = 0) -> Definition:
    return Definition(text, datetime(2020, 1, 1, 0, minute))


@pytest.fixture
def dictionary():
    d = Dictionary("Test")
    d.weak_define("cat", defn("a feline"))
    d.weak_define("dog", defn("definitionless"))
    return d


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        Dictionary("")


# === Define ===

def test_weak_define_adds_absent_word():
    d = Dictionary("Test")
    assert d.weak_define("cat", defn("a small feline")) is True
    assert d.lookup("cat").read() == "a small feline"


def test_weak_define_keeps_existing(dictionary):
    assert dictionary.weak_define("cat", defn("something else")) is False
    assert dictionary.lookup("cat").read() == "a feline"


def test_strong_define_new_word():
    d = Dictionary("Test")
    assert d.strong_define("cat", defn("a small feline")) is False
    assert d.lookup("cat").read() == "a small feline"


def test_strong_define_overwrites(dictionary):
    assert dictionary.strong_define("cat", defn("a domesticated feline")) is True
    assert dictionary.lookup("cat").read() == "a domesticated feline"


def test_strong_define_resets_access_count(dictionary):
    dictionary.lookup("cat").read()
    dictionary.strong_define("cat", defn("a domesticated feline"))
    assert dictionary.lookup("cat").access_count == 0


def test_keys_are_case_sensitive(dictionary):
    assert dictionary.lookup("Cat") is None
    assert dictionary.weak_define("Cat", defn("a big feline")) is True
    assert len(dictionary) == 3


# === Remove / lookup ===

def test_remove_then_lookup(dictionary):
    assert dictionary.remove("cat") is True
    assert dictionary.lookup("cat") is None
    assert "cat" not in dictionary


def test_remove_absent(dictionary):
    assert dictionary.remove("bird") is False
    assert len(dictionary) == 2


def test_lookup_does_not_read(dictionary):
    definition = dictionary.lookup("cat")
    assert definition.access_count == 0


# === Dates ===

def test_change_entry_date(dictionary):
    old = dictionary.change_entry_date("cat", datetime(2019, 6, 1, 12, 0))
    assert old == datetime(2020, 1, 1, 0, 0)
    assert dictionary.lookup("cat").entry_date == datetime(2019, 6, 1, 12, 0)


def test_change_entry_date_missing(dictionary):
    with pytest.raises(NotFound):
        dictionary.change_entry_date("bird", datetime(2019, 1, 1))


def test_date_sorted_words():
    d = Dictionary("Test")
    d.weak_define("late", defn("x", 30))
    d.weak_define("early", defn("x", 5))
    d.weak_define("b-tie", defn("x", 10))
    d.weak_define("a-tie", defn("x", 10))
    assert d.date_sorted_words() == ["early", "a-tie", "b-tie", "late"]


# === Search ===

def test_search_scores_every_entry(dictionary):
    results = dictionary.search_all("e")
    assert sorted(results, key=lambda r: r.line) == [
        SearchResult("cat:\ta feline", 2),
        SearchResult("dog:\tdefinitionless", 2),
    ]


def test_search_includes_zero_scores(dictionary):
    results = {r.line: r.score for r in dictionary.search_all("feline")}
    assert results == {"cat:\ta feline": 1, "dog:\tdefinitionless": 0}


def test_search_counts_non_overlapping_matches():
    d = Dictionary("Test")
    d.weak_define("aaaa", defn("x"))
    [result] = d.search_all("aa")
    assert result.score == 2


def test_search_reads_every_definition(dictionary):
    dictionary.search_all("zzz")
    assert dictionary.lookup("cat").access_count == 1
    assert dictionary.lookup("dog").access_count == 1


# === Render ===

def test_render_sorted_case_insensitively():
    d = Dictionary("Words")
    d.weak_define("banana", defn("yellow"))
    d.weak_define("Apple", defn("red"))
    d.weak_define("cherry", defn("small"))
    assert d.render() == "Words\n\nApple:\tred\nbanana:\tyellow\ncherry:\tsmall"


def test_render_empty_dictionary():
    assert Dictionary("Empty").render() == "Empty\n"


def test_render_counts_accesses(dictionary):
    dictionary.render()
    assert dictionary.lookup("cat").access_count == 1


def test_equality(dictionary):
    other = Dictionary("Test")
    other.weak_define("cat", defn("a feline"))
    other.weak_define("dog", defn("definitionless"))
    assert other == dictionary
    other.remove("dog")
    assert other != dictionary
