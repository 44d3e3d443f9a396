# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package; re-exports StorageGateway."""
from crime_api.repositories.storage_gateway import StorageGateway

__all__ = ["StorageGateway"]
