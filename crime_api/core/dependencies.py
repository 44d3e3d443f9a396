# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""FastAPI dependency injection wiring."""
from crime_api.core.config import settings
from crime_api.repositories.storage_gateway import StorageGateway
from crime_api.services.mutation_service import MutationService
from crime_api.services.query_service import QueryService

_gateway = StorageGateway(settings.DATABASE_URL)
_query_service = QueryService(_gateway)
_mutation_service = MutationService(_gateway)


def get_storage_gateway() -> StorageGateway:
    return _gateway


def get_query_service() -> QueryService:
    return _query_service


def get_mutation_service() -> MutationService:
    return _mutation_service
