# labor_api/infrastructure/repositories/duckdb_storage.py
from __future__ import annotations

import threading
from collections.abc import Generator, Mapping
from contextlib import contextmanager

import duckdb

from labor_api.domain.integrity.graph import EntityType, spec_for
from labor_api.domain.integrity.storage import Record

_TABLES: dict[EntityType, str] = {
    EntityType.PRINCIPAL: "principals",
    EntityType.CONTRACTOR: "contractors",
    EntityType.UNION: "unions",
    EntityType.NEGOTIATION: "negotiations",
    EntityType.MONITORING_RECORD: "monitoring_records",
    EntityType.ROLE: "roles",
    EntityType.ACCOUNT: "accounts",
}

# One writer at a time per process: guard reads and the write they protect
# must not interleave with another request's.
_WRITE_LOCK = threading.RLock()


class DuckDBStorage:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn
        self._in_transaction = False

    @contextmanager
    def transaction(self) -> Generator[None, None, None]:
        with _WRITE_LOCK:
            if self._in_transaction:
                yield
                return
            self._conn.begin()
            self._in_transaction = True
            try:
                yield
            except BaseException:
                self._conn.rollback()
                raise
            else:
                self._conn.commit()
            finally:
                self._in_transaction = False

    def find_by_id(self, entity: EntityType, record_id: int) -> Record | None:
        cur = self._conn.execute(
            f"SELECT * FROM {_TABLES[entity]} WHERE id = ?",  # noqa: S608
            [record_id],
        )
        return self._hydrate(cur, cur.fetchone())

    def find_one(
        self,
        entity: EntityType,
        where: Mapping[str, object],
        exclude_id: int | None = None,
    ) -> Record | None:
        clause, params = self._where(entity, where)
        if exclude_id is not None:
            clause += " AND id <> ?"
            params.append(exclude_id)
        cur = self._conn.execute(
            f"SELECT * FROM {_TABLES[entity]} WHERE {clause} ORDER BY id LIMIT 1",  # noqa: S608
            params,
        )
        return self._hydrate(cur, cur.fetchone())

    def count(self, entity: EntityType, where: Mapping[str, object]) -> int:
        clause, params = self._where(entity, where)
        row = self._conn.execute(
            f"SELECT count(*) FROM {_TABLES[entity]} WHERE {clause}",  # noqa: S608
            params,
        ).fetchone()
        return int(row[0]) if row else 0

    def list_all(self, entity: EntityType) -> list[Record]:
        cur = self._conn.execute(f"SELECT * FROM {_TABLES[entity]} ORDER BY id")  # noqa: S608
        names = [d[0] for d in cur.description]
        return [dict(zip(names, row)) for row in cur.fetchall()]

    def create(self, entity: EntityType, fields: Mapping[str, object]) -> Record:
        columns = self._writable(entity, fields)
        placeholders = ", ".join("?" for _ in columns)
        cur = self._conn.execute(
            f"INSERT INTO {_TABLES[entity]} ({', '.join(columns)}) "  # noqa: S608
            f"VALUES ({placeholders}) RETURNING *",
            [fields[c] for c in columns],
        )
        record = self._hydrate(cur, cur.fetchone())
        if record is None:
            raise RuntimeError(f"insert into {_TABLES[entity]} returned no row")
        return record

    def update(self, entity: EntityType, record_id: int, fields: Mapping[str, object]) -> Record:
        columns = self._writable(entity, fields)
        if columns:
            assignments = ", ".join(f"{c} = ?" for c in columns)
            self._conn.execute(
                f"UPDATE {_TABLES[entity]} SET {assignments} WHERE id = ?",  # noqa: S608
                [*(fields[c] for c in columns), record_id],
            )
        record = self.find_by_id(entity, record_id)
        if record is None:
            raise RuntimeError(f"{entity.value} {record_id} vanished during update")
        return record

    def delete(self, entity: EntityType, record_id: int) -> None:
        self._conn.execute(f"DELETE FROM {_TABLES[entity]} WHERE id = ?", [record_id])  # noqa: S608

    def ping(self) -> bool:
        """Raw SELECT 1, used by the health endpoint."""
        row = self._conn.execute("SELECT 1").fetchone()
        return bool(row and row[0] == 1)

    def _writable(self, entity: EntityType, fields: Mapping[str, object]) -> list[str]:
        """Only declared columns reach SQL; `id` is never written."""
        allowed = spec_for(entity).fields
        return [c for c in allowed if c in fields]

    def _where(self, entity: EntityType, where: Mapping[str, object]) -> tuple[str, list[object]]:
        allowed = {"id", *spec_for(entity).fields}
        clauses: list[str] = []
        params: list[object] = []
        for column, value in where.items():
            if column not in allowed:
                raise ValueError(f"unknown column {column!r} for {entity.value}")
            if value is None:
                clauses.append(f"{column} IS NULL")
            elif isinstance(value, str):
                clauses.append(f"trim({column}) = ?")
                params.append(value.strip())
            else:
                clauses.append(f"{column} = ?")
                params.append(value)
        return (" AND ".join(clauses) or "TRUE"), params

    def _hydrate(
        self,
        cur: duckdb.DuckDBPyConnection,
        row: tuple | None,  # type: ignore[type-arg]
    ) -> Record | None:
        """Maps a DuckDB row to a dict keyed by column name."""
        if row is None:
            return None
        names = [d[0] for d in cur.description]
        return dict(zip(names, row))
