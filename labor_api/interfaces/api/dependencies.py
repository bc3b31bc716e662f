from collections.abc import Generator

from fastapi import Depends

from labor_api.application.services.registry_service import RegistryService
from labor_api.infrastructure.config import get_settings
from labor_api.infrastructure.duckdb_connection import get_connection
from labor_api.infrastructure.repositories.duckdb_storage import DuckDBStorage


def get_storage() -> Generator[DuckDBStorage, None, None]:
    # cursor = own DuckDB connection to the same database, one per request
    cursor = get_connection().cursor()
    try:
        yield DuckDBStorage(cursor)
    finally:
        cursor.close()


def get_registry_service(
    storage: DuckDBStorage = Depends(get_storage),  # noqa: B008
) -> RegistryService:
    return RegistryService(storage, global_tax_id=get_settings().global_tax_id)
