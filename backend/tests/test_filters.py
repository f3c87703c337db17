"""
Testes unitários para paginação e filtros tipados.
"""

import uuid
from datetime import date, datetime, timezone

import pytest
from sqlalchemy.dialects import postgresql

from app.core.errors import ObjectInvalidQueryFilters
from app.core.filters import (
    FieldType,
    Pagination,
    build_filter,
    contains_pattern,
    escape_like,
    parse_pagination,
)
from app.models.active_plan import ActivePlan
from app.models.author import Author
from app.models.reservation import Reservation

RESERVATION_FIELDS = {
    "user": FieldType.IDENTIFIER,
    "room": FieldType.IDENTIFIER,
    "start_date": FieldType.DATE,
    "people": FieldType.NUMBER,
}


def compile_sql(clause) -> str:
    return str(clause.compile(dialect=postgresql.dialect()))


class TestParsePagination:

    def test_valid_values_from_query_string(self):
        pagination = parse_pagination("2", "5", "room")
        assert pagination == Pagination(page=2, limit=5)
        assert pagination.offset(total=50) == 5

    def test_none_limit_returns_everything(self):
        pagination = parse_pagination("1", "none", "room")
        assert pagination.limit is None
        assert pagination.offset(total=12) == 0

    def test_none_limit_is_case_insensitive(self):
        assert parse_pagination(1, "NONE", "room").limit is None

    @pytest.mark.parametrize(
        "page,limit",
        [("0", "10"), ("-1", "10"), ("abc", "10"), ("1", "0"), ("1", "-5"), ("1", "ten"), (None, "10")],
    )
    def test_invalid_values_raise(self, page, limit):
        with pytest.raises(ObjectInvalidQueryFilters) as exc_info:
            parse_pagination(page, limit, "room")
        assert exc_info.value.name == "RoomInvalidQueryFilters"


class TestPaginationMetadata:

    @pytest.mark.parametrize(
        "total,limit,expected_pages",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (21, 10, 3), (100, 7, 15)],
    )
    def test_total_pages_is_ceiling(self, total, limit, expected_pages):
        meta = Pagination(page=1, limit=limit).metadata(total)
        assert meta["totalPages"] == expected_pages
        assert meta["totalItems"] == total
        assert meta["pageSize"] == limit

    def test_no_limit_uses_total_as_page_size(self):
        meta = Pagination(page=1, limit=None).metadata(7)
        assert meta == {"totalItems": 7, "totalPages": 1, "currentPage": 1, "pageSize": 7}

    def test_no_limit_with_empty_table(self):
        meta = Pagination(page=1, limit=None).metadata(0)
        assert meta["totalPages"] == 0
        assert meta["pageSize"] == 0

    def test_offset_for_page_three(self):
        assert Pagination(page=3, limit=10).offset(total=25) == 20

    def test_no_limit_second_page_starts_after_every_record(self):
        pagination = Pagination(page=2, limit=None)
        assert pagination.offset(total=3) == 3
        assert pagination.metadata(3)["pageSize"] == 3


class TestLikePatterns:

    def test_escape_like_wildcards(self):
        assert escape_like("50%_off") == "50\\%\\_off"

    def test_escape_like_backslash(self):
        assert escape_like("a\\b") == "a\\\\b"

    def test_contains_pattern(self):
        assert contains_pattern("Jo") == "%Jo%"


class TestBuildFilter:

    def test_field_outside_allow_list_raises(self):
        with pytest.raises(ObjectInvalidQueryFilters):
            build_filter(Reservation, RESERVATION_FIELDS, "password", "x", "reservation")

    def test_identifier_maps_to_foreign_key_column(self):
        room_id = uuid.uuid4()
        clause = build_filter(Reservation, RESERVATION_FIELDS, "room", str(room_id), "reservation")
        assert clause.left.name == "room_id"
        assert clause.right.value == room_id

    def test_invalid_identifier_raises(self):
        with pytest.raises(ObjectInvalidQueryFilters):
            build_filter(Reservation, RESERVATION_FIELDS, "user", "not-a-uuid", "reservation")

    def test_number_is_coerced(self):
        clause = build_filter(Reservation, RESERVATION_FIELDS, "people", "4", "reservation")
        assert clause.right.value == 4

    def test_invalid_number_raises(self):
        with pytest.raises(ObjectInvalidQueryFilters):
            build_filter(Reservation, RESERVATION_FIELDS, "people", "four", "reservation")

    def test_string_is_case_insensitive_contains(self):
        fields = {"name": FieldType.STRING}
        clause = build_filter(Author, fields, "name", "mach_", "author")
        assert "ILIKE" in compile_sql(clause).upper()
        assert clause.right.value == "%mach\\_%"

    def test_date_only_matches_whole_day(self):
        clause = build_filter(Reservation, RESERVATION_FIELDS, "start_date", "2030-01-07", "reservation")
        sql = compile_sql(clause)
        assert ">=" in sql
        assert "<" in sql

    def test_date_column_uses_date_bounds(self):
        fields = {"birthdate": FieldType.DATE}
        clause = build_filter(Author, fields, "birthdate", "1839-06-21", "author")
        lower, upper = clause.clauses
        assert lower.right.value == date(1839, 6, 21)
        assert upper.right.value == date(1839, 6, 22)

    def test_invalid_date_raises(self):
        with pytest.raises(ObjectInvalidQueryFilters):
            build_filter(Reservation, RESERVATION_FIELDS, "start_date", "07/01/2030", "reservation")

    def test_aware_value_on_local_column_is_made_naive(self):
        aware = datetime(2030, 1, 7, 10, 0, tzinfo=timezone.utc)
        clause = build_filter(
            Reservation, RESERVATION_FIELDS, "start_date", aware.isoformat(), "reservation"
        )
        assert clause.right.value.tzinfo is None
        assert clause.right.value == aware.astimezone().replace(tzinfo=None)

    def test_naive_value_on_aware_column_is_taken_as_utc(self):
        fields = {"ending_date": FieldType.DATE}
        clause = build_filter(ActivePlan, fields, "ending_date", "2030-01-07T10:00:00", "active_plan")
        assert clause.right.value == datetime(2030, 1, 7, 10, 0, tzinfo=timezone.utc)

    def test_whole_day_on_aware_column_uses_utc_bounds(self):
        fields = {"ending_date": FieldType.DATE}
        clause = build_filter(ActivePlan, fields, "ending_date", "2030-01-07", "active_plan")
        lower, upper = clause.clauses
        assert lower.right.value == datetime(2030, 1, 7, tzinfo=timezone.utc)
        assert upper.right.value == datetime(2030, 1, 8, tzinfo=timezone.utc)
