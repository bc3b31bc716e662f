from __future__ import annotations

from collections.abc import Generator

import duckdb
import pytest

from labor_api.application.services.registry_service import RegistryService
from labor_api.domain.integrity.graph import EntityType
from labor_api.infrastructure.duckdb_connection import apply_schema
from labor_api.infrastructure.repositories.duckdb_storage import DuckDBStorage


@pytest.fixture()
def conn() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """Fresh in-memory DuckDB with the application schema."""
    c = duckdb.connect(":memory:")
    apply_schema(c)
    yield c
    c.close()


@pytest.fixture()
def storage(conn: duckdb.DuckDBPyConnection) -> DuckDBStorage:
    return DuckDBStorage(conn)


@pytest.fixture()
def service(storage: DuckDBStorage) -> RegistryService:
    return RegistryService(storage)


@pytest.fixture()
def seeded(storage: DuckDBStorage) -> dict[str, int]:
    """Two principals, one contractor under the first, one union."""
    north = storage.create(EntityType.PRINCIPAL, {"name": "Minera Norte"})
    south = storage.create(EntityType.PRINCIPAL, {"name": "Minera Sur"})
    contractor = storage.create(
        EntityType.CONTRACTOR,
        {"principal_id": north["id"], "name": "Servicios Andes", "tax_id": "76.123.456-7"},
    )
    union = storage.create(EntityType.UNION, {"name": "Sindicato Uno", "federation": None, "union_type": None})
    return {
        "north": north["id"],
        "south": south["id"],
        "contractor": contractor["id"],
        "union": union["id"],
    }
