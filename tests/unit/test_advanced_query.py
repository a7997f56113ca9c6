"""
Unit tests for bootcamp_api.application.services.advanced_query
"""
from datetime import datetime, timezone

import pytest
from bootcamp_api.application.services.advanced_query import (
    DEFAULT_LIMIT,
    DEFAULT_SORT,
    MAX_LIMIT,
    coerce_value,
    parse_advanced_query,
    parse_filters,
    parse_sort,
)
from bootcamp_api.domain.exceptions import BadRequestError


class TestCoerceValue:

    @pytest.mark.parametrize(
        "name, raw, expected",
        [
            ("housing", "true", True),
            ("accept_gi", "False", False),
            ("average_cost", "10000", 10000),
            ("average_rating", "4.5", 4.5),
            ("location.city", "Boston", "Boston"),
        ],
    )
    def test_coercion(self, name, raw, expected):
        assert coerce_value(name, raw) == expected

    def test_zipcodes_keep_leading_zeros(self):
        assert coerce_value("location.zipcode", "02215") == "02215"

    def test_created_at_parsed_as_utc(self):
        value = coerce_value("created_at", "2024-05-01")
        assert value == datetime(2024, 5, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("name, raw", [("housing", "yes"), ("average_cost", "cheap"), ("created_at", "May")])
    def test_wrong_type_rejected(self, name, raw):
        with pytest.raises(BadRequestError):
            coerce_value(name, raw)


class TestParseFilters:

    def test_equality_filter(self):
        assert parse_filters({"housing": "true"}) == {"housing": True}

    def test_comparison_operators_combine(self):
        filters = parse_filters({"average_cost[gte]": "5000", "average_cost[lt]": "10000"})
        assert filters == {"average_cost": {"$gte": 5000, "$lt": 10000}}

    def test_in_operator_splits_on_commas(self):
        filters = parse_filters({"careers[in]": "Business,UI/UX"})
        assert filters == {"careers": {"$in": ["Business", "UI/UX"]}}

    def test_nested_location_field(self):
        assert parse_filters({"location.state": "MA"}) == {"location.state": "MA"}

    def test_reserved_keys_are_skipped(self):
        assert parse_filters({"select": "name", "sort": "name", "page": "2", "limit": "5"}) == {}

    def test_unknown_field_rejected(self):
        with pytest.raises(BadRequestError, match="Cannot query on field 'password'"):
            parse_filters({"password": "x"})

    def test_unknown_operator_rejected(self):
        with pytest.raises(BadRequestError, match="Unsupported query operator 'ne'"):
            parse_filters({"average_cost[ne]": "1"})

    def test_mongo_operator_injection_rejected(self):
        with pytest.raises(BadRequestError):
            parse_filters({"$where": "1"})


class TestParseSort:

    def test_default_sort_is_newest_first(self):
        assert parse_sort(None) == DEFAULT_SORT

    def test_descending_prefix(self):
        assert parse_sort("-average_cost,name") == [("average_cost", -1), ("name", 1)]


class TestParseAdvancedQuery:

    def test_defaults(self):
        query = parse_advanced_query({})
        assert query.filters == {}
        assert query.select is None
        assert query.page == 1
        assert query.limit == DEFAULT_LIMIT
        assert query.skip == 0

    def test_page_and_limit(self):
        query = parse_advanced_query({"page": "3", "limit": "10", "select": "name, description"})
        assert query.skip == 20
        assert query.select == ["name", "description"]

    def test_limit_is_capped(self):
        assert parse_advanced_query({"limit": "5000"}).limit == MAX_LIMIT

    @pytest.mark.parametrize("params", [{"page": "0"}, {"limit": "abc"}, {"page": "-1"}])
    def test_invalid_paging_rejected(self, params):
        with pytest.raises(BadRequestError):
            parse_advanced_query(params)
