"""Tests for Definition."""

from datetime import datetime

import pytest

from wordbook.core.definition import Definition


def test_new_definition_has_no_accesses():
    d = Definition("a small feline", datetime(2020, 1, 1))
    assert d.access_count == 0
    assert d.entry_date == datetime(2020, 1, 1)


def test_read_counts_accesses():
    d = Definition("a small feline", datetime(2020, 1, 1))
    assert d.read() == "a small feline"
    assert d.read() == "a small feline"
    assert d.access_count == 2


def test_change_date_returns_previous():
    d = Definition("x", datetime(2020, 5, 5, 10, 30))
    old = d.change_date(datetime(2019, 1, 1))
    assert old == datetime(2020, 5, 5, 10, 30)
    assert d.entry_date == datetime(2019, 1, 1)


def test_change_date_does_not_touch_accesses():
    d = Definition("x", datetime(2020, 1, 1))
    d.read()
    d.change_date(datetime(2021, 1, 1))
    assert d.access_count == 1


def test_equality_includes_access_count():
    d1 = Definition("x", datetime(2020, 1, 1))
    d2 = Definition("x", datetime(2020, 1, 1))
    assert d1 == d2
    d1.read()
    assert d1 != d2


def test_negative_access_count_rejected():
    with pytest.raises(ValueError):
        Definition("x", datetime(2020, 1, 1), access_count=-1)
