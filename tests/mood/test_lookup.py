"""Tests for date-keyed entry lookup."""

from datetime import date, datetime

import pytest

from mood.lookup import date_key, find_by_date, index_by_date, valid_entries


class TestDateKey:
    def test_date(self):
        assert date_key(date(2024, 3, 7)) == "2024-03-07"

    def test_datetime_drops_time(self):
        assert date_key(datetime(2024, 3, 7, 23, 59)) == "2024-03-07"

    def test_iso_string_with_time(self):
        assert date_key("2024-03-07T10:00:00Z") == "2024-03-07"

    def test_garbage_string_raises(self):
        with pytest.raises(ValueError):
            date_key("not-a-date")


class TestFindByDate:
    def test_found(self, sample_entries):
        entry = find_by_date(sample_entries, date(2024, 1, 9))
        assert entry is not None
        assert entry.mood == 2

    def test_missing_returns_none(self, sample_entries):
        assert find_by_date(sample_entries, date(2024, 1, 2)) is None

    def test_empty(self):
        assert find_by_date([], "2024-01-01") is None

    def test_first_match_in_given_order(self, make_entry):
        first = make_entry(2, "2024-01-05", entry_id="first")
        second = make_entry(5, "2024-01-05", entry_id="second")
        assert find_by_date([first, second], "2024-01-05").id == "first"
        assert find_by_date([second, first], "2024-01-05").id == "second"

    def test_skips_malformed(self, make_entry):
        broken = make_entry(0, "2024-01-05", entry_id="broken")
        good = make_entry(3, "2024-01-05", entry_id="good")
        assert find_by_date([broken, good], "2024-01-05").id == "good"
        assert find_by_date([broken], "2024-01-05") is None

    def test_idempotent(self, sample_entries):
        assert find_by_date(sample_entries, "2024-01-08") == find_by_date(sample_entries, "2024-01-08")


def test_index_matches_find_by_date(make_entry):
    entries = [
        make_entry(4, "2024-02-01", entry_id="a"),
        make_entry(1, "2024-02-01", entry_id="b"),
        make_entry(3, "2024-02-02", entry_id="c"),
        make_entry(None, "2024-02-03", entry_id="d"),
    ]
    index = index_by_date(entries)
    assert set(index) == {"2024-02-01", "2024-02-02"}
    for key, entry in index.items():
        assert find_by_date(entries, key) is entry


def test_valid_entries_filters_out_of_range(make_entry):
    entries = [make_entry(m, "2024-01-01") for m in (None, 0, 1, 5, 6, True)]
    assert [e.mood for e in valid_entries(entries)] == [1, 5]
