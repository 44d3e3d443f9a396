# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: incident-type codes and neighborhoods reference data."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from crime_api.core.dependencies import get_query_service
from crime_api.core.exceptions import NotFoundError, StorageError
from crime_api.schemas import CodeOut, NeighborhoodOut
from crime_api.services.query_service import QueryService

router = APIRouter(tags=["Lookups"])


def _not_found() -> PlainTextResponse:
    return PlainTextResponse("404 Not Found", status_code=404)


def _server_error() -> PlainTextResponse:
    return PlainTextResponse("500 Internal Server Error", status_code=500)


@router.get("/codes", response_model=List[CodeOut])
async def list_codes(code: Optional[str] = Query(default=None),
                     service: QueryService = Depends(get_query_service)):
    try:
        return await service.list_codes(code)
    except NotFoundError:
        return _not_found()
    except StorageError:
        return _server_error()


@router.get("/neighborhoods", response_model=List[NeighborhoodOut])
async def list_neighborhoods(id: Optional[str] = Query(default=None),
                             service: QueryService = Depends(get_query_service)):
    try:
        return await service.list_neighborhoods(id)
    except NotFoundError:
        return _not_found()
    except StorageError:
        return _server_error()
