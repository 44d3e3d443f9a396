# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: incident listing, creation stub, and removal."""
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from crime_api.core.dependencies import get_mutation_service, get_query_service
from crime_api.core.exceptions import CrimeApiError, NotFoundError, StorageError
from crime_api.core.logging import get_logger
from crime_api.schemas import (
    IncidentOut, IncidentQuery, NewIncidentRequest, RemoveIncidentRequest,
)
from crime_api.services.filter_compiler import compile_filter
from crime_api.services.mutation_service import MutationService
from crime_api.services.query_service import QueryService

logger = get_logger(__name__)

router = APIRouter(tags=["Incidents"])


@router.get("/incidents", response_model=List[IncidentOut])
async def list_incidents(query: IncidentQuery = Depends(),
                         service: QueryService = Depends(get_query_service)):
    try:
        incident_filter = compile_filter(query.model_dump())
        return await service.list_incidents(incident_filter)
    except (CrimeApiError, ValueError) as exc:
        logger.warning("Incident query rejected: %s", exc)
        return PlainTextResponse("Invalid request", status_code=400)


@router.put("/new-incident")
async def new_incident(body: Optional[NewIncidentRequest] = None,
                       service: MutationService = Depends(get_mutation_service)):
    await service.accept_new_incident(body.model_dump(exclude_none=True) if body else {})
    return PlainTextResponse("OK", status_code=200)


@router.delete("/remove-incident")
async def remove_incident(body: RemoveIncidentRequest,
                          service: MutationService = Depends(get_mutation_service)):
    try:
        await service.remove_incident(body.case_number)
    except NotFoundError as exc:
        return PlainTextResponse(str(exc), status_code=500)
    except StorageError:
        return PlainTextResponse("500 Internal Server Error", status_code=500)
    return PlainTextResponse("OK", status_code=200)
