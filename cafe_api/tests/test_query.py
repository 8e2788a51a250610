from __future__ import annotations

import pytest
from pydantic import ValidationError

from cafe_api.directory.models import CafeQuery, ParseResult, QueryError
from cafe_api.directory.query import MAX_COUNT, parse_query

DIRECTORY = {"moscow": ("Мир кофе", "Сладкоежка"), "tula": ("Самовар",)}


class TestCity:
    def test_missing_city(self):
        result = parse_query(None, None, None, DIRECTORY)
        assert not result.ok
        assert result.error is QueryError.invalid_city
        assert result.query is None

    def test_unknown_city(self):
        assert parse_query("omsk", None, None, DIRECTORY).error is QueryError.invalid_city

    def test_city_is_case_sensitive(self):
        assert parse_query("Tula", None, None, DIRECTORY).error is QueryError.invalid_city

    def test_city_checked_before_count(self):
        assert parse_query("omsk", "na", None, DIRECTORY).error is QueryError.invalid_city


class TestCount:
    @pytest.mark.parametrize("raw", ["na", "-1", "+1", " 1", "1 ", "1_000", "1.0", "١٢", "0x10"])
    def test_invalid_count(self, raw):
        assert parse_query("tula", raw, None, DIRECTORY).error is QueryError.invalid_count

    @pytest.mark.parametrize("raw, want", [("0", 0), ("7", 7), ("007", 7), ("100", 100)])
    def test_valid_count(self, raw, want):
        result = parse_query("tula", raw, None, DIRECTORY)
        assert result.ok
        assert result.query.count == want

    @pytest.mark.parametrize("raw", [None, ""])
    def test_absent_count_is_unbounded(self, raw):
        assert parse_query("tula", raw, None, DIRECTORY).query.count is None

    @pytest.mark.parametrize("raw", ["1" * 5000, "9" * 40, "0" * 5000 + "9" * 30])
    def test_huge_count_is_clamped(self, raw):
        result = parse_query("tula", raw, None, DIRECTORY)
        assert result.ok
        assert result.query.count == MAX_COUNT

    def test_long_zero_padded_count(self):
        assert parse_query("tula", "0" * 5000 + "3", None, DIRECTORY).query.count == 3
        assert parse_query("tula", "0" * 5000, None, DIRECTORY).query.count == 0


class TestSearch:
    def test_search_passthrough(self):
        result = parse_query("moscow", None, "  КоФе ", DIRECTORY)
        assert result.query == CafeQuery(city="moscow", count=None, search="  КоФе ")

    def test_absent_search_is_empty(self):
        assert parse_query("moscow", None, None, DIRECTORY).query.search == ""


def test_error_messages():
    assert QueryError.invalid_city.value == "unknown city"
    assert QueryError.invalid_count.value == "incorrect count"


class TestParseResult:
    def test_needs_query_or_error(self):
        with pytest.raises(ValidationError):
            ParseResult()

    def test_rejects_query_and_error_together(self):
        with pytest.raises(ValidationError):
            ParseResult(query=CafeQuery(city="tula"), error=QueryError.invalid_city)

    def test_error_only_is_not_ok(self):
        result = ParseResult(error=QueryError.invalid_count)
        assert not result.ok
        assert result.query is None
