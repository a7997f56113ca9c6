"""
Advanced-results query decoration for list endpoints.

Turns a flat query string into a Mongo filter document plus select, sort and
pagination settings:

    ?average_cost[lte]=10000&careers[in]=Business,UI/UX&select=name,photo&sort=-average_cost&page=2&limit=10

Reserved keys are `select`, `sort`, `page` and `limit`. Any other key is a
filter on a known bootcamp field, optionally with one of the operators
gt, gte, lt, lte or in.
"""
# Standard library imports
import re
from datetime import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

# Local application imports
from ...domain.constants import BootcampFields
from ...domain.exceptions import BadRequestError
from ...utils.datetime_utils import ensure_utc

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 25
MAX_LIMIT = 100
DEFAULT_SORT: List[Tuple[str, int]] = [(BootcampFields.CREATED_AT, -1)]

RESERVED_KEYS = frozenset({"select", "sort", "page", "limit"})
OPERATORS = frozenset({"gt", "gte", "lt", "lte", "in"})

_KEY_PATTERN = re.compile(r"^(?P<field>[\w.]+)(?:\[(?P<op>\w+)\])?$")
_INT_PATTERN = re.compile(r"^-?\d+$")
_FLOAT_PATTERN = re.compile(r"^-?\d*\.\d+$")


@dataclass
class BootcampQuery:
    """Parsed list query"""
    filters: Dict[str, Any] = field(default_factory=dict)
    select: Optional[List[str]] = None
    sort: List[Tuple[str, int]] = field(default_factory=lambda: list(DEFAULT_SORT))
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def coerce_value(name: str, raw: str) -> Any:
    """
    Convert a query-string value to the type stored for `name`

    Text fields (including zipcodes) stay strings so leading zeros survive.

    Raises:
        BadRequestError: If the value does not fit the field's type
    """
    if name in BootcampFields.BOOLEAN:
        lowered = raw.lower()
        if lowered in ("true", "false"):
            return lowered == "true"
        raise BadRequestError(f"Field '{name}' expects true or false")

    if name in BootcampFields.NUMERIC:
        if _INT_PATTERN.match(raw):
            return int(raw)
        if _FLOAT_PATTERN.match(raw):
            return float(raw)
        raise BadRequestError(f"Field '{name}' expects a number")

    if name in BootcampFields.DATETIME:
        try:
            return ensure_utc(datetime.fromisoformat(raw))
        except ValueError:
            raise BadRequestError(f"Field '{name}' expects an ISO 8601 date")

    return raw


def _parse_positive_int(name: str, raw: Optional[str], default: int) -> int:
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise BadRequestError(f"Query parameter '{name}' must be an integer")
    if value < 1:
        raise BadRequestError(f"Query parameter '{name}' must be at least 1")
    return value


def _check_field(name: str) -> None:
    if name not in BootcampFields.QUERYABLE:
        raise BadRequestError(f"Cannot query on field '{name}'")


def parse_sort(raw: Optional[str]) -> List[Tuple[str, int]]:
    """Parse `name,-average_cost` into [("name", 1), ("average_cost", -1)]."""
    if not raw:
        return list(DEFAULT_SORT)

    sort: List[Tuple[str, int]] = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        direction = -1 if item.startswith("-") else 1
        name = item.lstrip("-+")
        _check_field(name)
        sort.append((name, direction))
    return sort or list(DEFAULT_SORT)


def parse_select(raw: Optional[str]) -> Optional[List[str]]:
    if not raw:
        return None
    fields = [item.strip() for item in raw.split(",") if item.strip()]
    return fields or None


def parse_filters(params: Mapping[str, str]) -> Dict[str, Any]:
    filters: Dict[str, Any] = {}

    for key, raw_value in params.items():
        if key in RESERVED_KEYS:
            continue

        match = _KEY_PATTERN.match(key)
        if not match:
            raise BadRequestError(f"Invalid query parameter '{key}'")

        name, op = match.group("field"), match.group("op")
        _check_field(name)

        if op is None:
            filters[name] = coerce_value(name, raw_value)
            continue

        if op not in OPERATORS:
            raise BadRequestError(f"Unsupported query operator '{op}'")

        if op == "in":
            value: Any = [
                coerce_value(name, part.strip()) for part in raw_value.split(",") if part.strip()
            ]
        else:
            value = coerce_value(name, raw_value)

        # Several operators on the same field combine into one condition
        condition = filters.setdefault(name, {})
        if not isinstance(condition, dict):
            raise BadRequestError(f"Field '{name}' has both an equality and an operator filter")
        condition[f"${op}"] = value

    return filters


def parse_advanced_query(params: Mapping[str, str]) -> BootcampQuery:
    """
    Build a BootcampQuery from request query parameters

    Args:
        params: Query parameters (e.g. dict(request.query_params))

    Returns:
        BootcampQuery with filters, select, sort and pagination

    Raises:
        BadRequestError: If a field, operator or paging value is invalid
    """
    limit = _parse_positive_int("limit", params.get("limit"), DEFAULT_LIMIT)
    return BootcampQuery(
        filters=parse_filters(params),
        select=parse_select(params.get("select")),
        sort=parse_sort(params.get("sort")),
        page=_parse_positive_int("page", params.get("page"), DEFAULT_PAGE),
        limit=min(limit, MAX_LIMIT),
    )
