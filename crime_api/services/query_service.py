# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Read-side business logic: incident listings and reference lookups."""
from typing import Any, Dict, List, Optional

from crime_api.core.exceptions import NotFoundError
from crime_api.core.logging import get_logger
from crime_api.metrics import INCIDENT_QUERIES, INCIDENT_ROWS_RETURNED
from crime_api.repositories.storage_gateway import StorageGateway
from crime_api.services.filter_compiler import IncidentFilter
from crime_api.services.formatters import format_date, format_time

logger = get_logger(__name__)

CODES_QUERY = "SELECT code, incident_type FROM Codes ORDER BY code"
NEIGHBORHOODS_QUERY = (
    "SELECT neighborhood_number, neighborhood_name FROM Neighborhoods "
    "ORDER BY neighborhood_number"
)


def _row_to_incident(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "case_number": row["case_number"],
        "date": format_date(row["date_time"]),
        "time": format_time(row["date_time"]),
        "code": row["code"],
        "incident": row["incident"],
        "police_grid": row["police_grid"],
        "neighborhood_number": row["neighborhood_number"],
        "block": row["block"],
    }


def _membership(raw: Optional[str]) -> Optional[List[str]]:
    # Reference lookups match on the decimal text of the key; tokens are not
    # parsed as integers.
    return raw.split(",") if raw else None


class QueryService:
    def __init__(self, gateway: StorageGateway):
        self._gateway = gateway

    async def list_incidents(self, incident_filter: IncidentFilter) -> List[Dict[str, Any]]:
        INCIDENT_QUERIES.inc()
        logger.info("Listing incidents sql=%s params=%s",
                    incident_filter.sql, incident_filter.bound_params)
        rows = await self._gateway.read_rows(
            incident_filter.statement(), incident_filter.bound_params,
        )
        INCIDENT_ROWS_RETURNED.observe(len(rows))
        return [_row_to_incident(r) for r in rows]

    async def list_codes(self, code_filter: Optional[str] = None) -> List[Dict[str, Any]]:
        rows = await self._gateway.read_rows(CODES_QUERY)
        wanted = _membership(code_filter)
        result = [
            {"code": r["code"], "type": r["incident_type"]}
            for r in rows
            if wanted is None or str(r["code"]) in wanted
        ]
        if not result:
            raise NotFoundError(f"No codes match {code_filter!r}")
        return result

    async def list_neighborhoods(self, id_filter: Optional[str] = None) -> List[Dict[str, Any]]:
        rows = await self._gateway.read_rows(NEIGHBORHOODS_QUERY)
        wanted = _membership(id_filter)
        result = [
            {"id": r["neighborhood_number"], "name": r["neighborhood_name"]}
            for r in rows
            if wanted is None or str(r["neighborhood_number"]) in wanted
        ]
        if not result:
            raise NotFoundError(f"No neighborhoods match {id_filter!r}")
        return result
