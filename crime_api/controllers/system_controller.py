# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""System endpoints: health, readiness, metrics."""
from fastapi import APIRouter, Depends, HTTPException
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from crime_api.core.config import settings
from crime_api.core.dependencies import get_storage_gateway
from crime_api.core.exceptions import StorageError
from crime_api.repositories.storage_gateway import StorageGateway

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check():
    return {"status": "ok", "service": settings.SERVICE_NAME, "version": settings.SERVICE_VERSION}


@router.get("/health/ready")
async def readiness_check(gateway: StorageGateway = Depends(get_storage_gateway)):
    try:
        await gateway.verify_connection()
        return {"status": "ok", "database": "connected"}
    except StorageError as exc:
        raise HTTPException(status_code=503, detail=f"Database unavailable: {exc.operation}")


@router.get("/metrics")
def prometheus_metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
