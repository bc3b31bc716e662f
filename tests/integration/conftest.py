# tests/integration/conftest.py
from __future__ import annotations

from collections.abc import Generator

import duckdb
import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """In-memory DuckDB with the schema and deterministic rows (ids from sequences)."""
    from labor_api.infrastructure.duckdb_connection import apply_schema

    conn = duckdb.connect(":memory:")
    apply_schema(conn)

    # --- Principals: 1 with a contractor, 2 empty ---
    conn.execute("INSERT INTO principals (name) VALUES ('Minera Norte'), ('Minera Sur')")

    # --- Contractor ---
    conn.execute("""
        INSERT INTO contractors (principal_id, name, tax_id) VALUES
        (1, 'Servicios Andes', '76.123.456-7')
    """)

    # --- Unions: 1 used by a negotiation, 2 free ---
    conn.execute("""
        INSERT INTO unions (name, federation, union_type) VALUES
        ('Sindicato Uno', 'Federacion Minera', 'Empresa'),
        ('Sindicato Dos', NULL, NULL)
    """)

    # --- Negotiation ---
    conn.execute("""
        INSERT INTO negotiations (contractor_id, union_id, contract_label, status,
                                  start_date, total_headcount, unionized_headcount,
                                  unionized_percentage)
        VALUES (1, 1, 'CB-2024', 'Open', '2024-01-15', 100, 34, 34.00)
    """)

    # --- Roles ---
    conn.execute("INSERT INTO roles (name) VALUES ('Administrador'), ('Consulta')")
    conn.execute("""
        INSERT INTO accounts (first_name, last_name, username, email, role_id) VALUES
        ('Ana', 'Rojas', 'arojas', 'ana@example.cl', 1)
    """)

    yield conn
    conn.close()


@pytest.fixture()
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """FastAPI TestClient with the in-memory DuckDB injected."""
    from labor_api.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    from labor_api.infrastructure.config import get_settings
    get_settings.cache_clear()

    from labor_api.interfaces.api.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def admin() -> dict[str, str]:
    """Identity headers set upstream for an administrator."""
    return {"X-Auth-User": "admin", "X-Auth-Roles": "Administrador"}


@pytest.fixture()
def viewer() -> dict[str, str]:
    return {"X-Auth-User": "viewer", "X-Auth-Roles": "Consulta"}
