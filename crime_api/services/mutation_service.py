# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Write-side business logic.

Removing an incident is two separate store calls, an existence check then
the delete. They do not share a transaction: a concurrent delete landing in
between turns the second call into a no-op and the request still succeeds.
"""
from typing import Any, Dict, Union

from crime_api.core.exceptions import NotFoundError
from crime_api.core.logging import get_logger
from crime_api.metrics import INCIDENTS_REMOVED
from crime_api.repositories.storage_gateway import StorageGateway

logger = get_logger(__name__)

CaseNumber = Union[str, int]

EXISTS_QUERY = "SELECT case_number FROM Incidents WHERE case_number = :case_number"
DELETE_QUERY = "DELETE FROM Incidents WHERE case_number = :case_number"


class MutationService:
    def __init__(self, gateway: StorageGateway):
        self._gateway = gateway

    async def remove_incident(self, case_number: CaseNumber) -> None:
        params = {"case_number": case_number}

        rows = await self._gateway.read_rows(EXISTS_QUERY, params)
        if not rows:
            logger.warning("Remove rejected, unknown case_number=%s", case_number)
            raise NotFoundError("Invalid case number")

        await self._gateway.execute(DELETE_QUERY, params)
        INCIDENTS_REMOVED.inc()
        logger.info("Incident removed case_number=%s", case_number)

    async def accept_new_incident(self, body: Dict[str, Any]) -> None:
        # TODO: persist once the write path and its validation rules are agreed.
        logger.info("New incident received fields=%s", sorted(body))
