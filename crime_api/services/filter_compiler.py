# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Filter compiler: untrusted query parameters -> one parameterized SELECT.

Each recognized key contributes exactly one predicate fragment and its bound
parameter. Fragments are AND-joined; membership lists are bound as expanding
parameters so every value gets its own placeholder. Ordering is always
``date_time`` ascending and the row cap is always bound as ``:limit``.
"""
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import bindparam, text
from sqlalchemy.sql.elements import TextClause

from crime_api.core.config import settings
from crime_api.core.exceptions import ValidationError
from crime_api.metrics import FILTER_REJECTIONS

# Plain ASCII decimal only: no sign other than "-", no "_" separators.
INTEGER_TOKEN = re.compile(r"-?[0-9]+")

BASE_QUERY = "SELECT * FROM Incidents"
ORDER_BY = "ORDER BY date_time ASC"

# key -> (bound parameter name, fragment)
DATE_FILTERS = {
    "start_date": ("start_date", "DATE(date_time) >= DATE(:start_date)"),
    "end_date":   ("end_date",   "DATE(date_time) <= DATE(:end_date)"),
}
MEMBERSHIP_FILTERS = {
    "code":         ("codes",         "code IN :codes"),
    "grid":         ("grids",         "police_grid IN :grids"),
    "neighborhood": ("neighborhoods", "neighborhood_number IN :neighborhoods"),
}


@dataclass
class IncidentFilter:
    fragments: List[str] = field(default_factory=list)
    params: Dict[str, Any] = field(default_factory=dict)
    limit: int = 1000

    @property
    def where_clause(self) -> str:
        if not self.fragments:
            return ""
        return "WHERE " + " AND ".join(self.fragments)

    @property
    def sql(self) -> str:
        parts = [BASE_QUERY, self.where_clause, ORDER_BY, "LIMIT :limit"]
        return " ".join(p for p in parts if p)

    @property
    def bound_params(self) -> Dict[str, Any]:
        return {**self.params, "limit": self.limit}

    def statement(self) -> TextClause:
        stmt = text(self.sql)
        expanding = [bindparam(name, expanding=True)
                     for name, _ in MEMBERSHIP_FILTERS.values() if name in self.params]
        return stmt.bindparams(*expanding) if expanding else stmt


def parse_int(key: str, raw: str) -> int:
    token = raw.strip()
    if not INTEGER_TOKEN.fullmatch(token):
        raise _reject(key, raw, "not an integer")
    return int(token)


def parse_int_list(key: str, raw: str) -> List[int]:
    return [parse_int(key, token) for token in raw.split(",")]


def parse_date(key: str, raw: str) -> str:
    try:
        return date.fromisoformat(raw.strip()).isoformat()
    except ValueError:
        raise _reject(key, raw, "expected YYYY-MM-DD") from None


def parse_limit(raw: str) -> int:
    limit = parse_int("limit", raw)
    # limit=0 is rejected with 400, not answered with an empty list.
    if limit < 1:
        raise _reject("limit", raw, "must be a positive integer")
    return limit


def compile_filter(params: Mapping[str, Optional[str]],
                   default_limit: Optional[int] = None) -> IncidentFilter:
    """Validate raw request parameters and build an ``IncidentFilter``.

    Unrecognized keys are ignored. A key whose value is ``None`` counts as
    absent; any other value must validate or ``ValidationError`` is raised.
    """
    incident_filter = IncidentFilter(
        limit=default_limit if default_limit is not None else settings.DEFAULT_INCIDENT_LIMIT,
    )

    for key, (name, fragment) in DATE_FILTERS.items():
        raw = params.get(key)
        if raw is not None:
            incident_filter.params[name] = parse_date(key, raw)
            incident_filter.fragments.append(fragment)

    for key, (name, fragment) in MEMBERSHIP_FILTERS.items():
        raw = params.get(key)
        if raw is not None:
            incident_filter.params[name] = parse_int_list(key, raw)
            incident_filter.fragments.append(fragment)

    raw_limit = params.get("limit")
    if raw_limit is not None:
        incident_filter.limit = parse_limit(raw_limit)

    return incident_filter


def _reject(key: str, raw: str, reason: str) -> ValidationError:
    FILTER_REJECTIONS.labels(key=key).inc()
    return ValidationError(key, raw, reason)
