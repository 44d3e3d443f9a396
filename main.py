# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Crime Incident API
==================
Read/write query interface over the St. Paul crime incident store.

    GET    /codes            incident-type lookup
    GET    /neighborhoods    neighborhood lookup
    GET    /incidents        filtered incident listing, ordered by date_time
    PUT    /new-incident     accepted, not persisted
    DELETE /remove-incident  existence-checked delete

Port: 8000
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from crime_api.controllers import incident_controller, lookup_controller, system_controller
from crime_api.core.config import settings
from crime_api.core.dependencies import get_storage_gateway
from crime_api.core.exceptions import StorageError
from crime_api.core.logging import get_logger
from crime_api.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    gateway = get_storage_gateway()
    await gateway.open()
    try:
        await gateway.verify_connection()
        logger.info("Now connected to %s", settings.DATABASE_URL)
    except StorageError:
        logger.warning("Could not reach the incident store, DB may not be ready yet")
    yield
    await gateway.close()
    logger.info("Shutting down, storage engine disposed")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Crime Incident API",
    description="Filtered incident listings, code lookups, and incident removal.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")
    return PlainTextResponse("500 Internal Server Error", status_code=500)


app.include_router(system_controller.router)
app.include_router(lookup_controller.router)
app.include_router(incident_controller.router)


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
