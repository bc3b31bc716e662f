# labor_api/domain/integrity/storage.py
from __future__ import annotations

from collections.abc import Mapping
from contextlib import AbstractContextManager
from typing import Any, Protocol

from .graph import EntityType

Record = dict[str, Any]


class Storage(Protocol):
    """Data-access capability the core needs. Records are plain dicts keyed by
    column name and always carry `id`.

    `transaction()` must run the guard reads and the write that follows them as
    one serialized unit; the guards alone do not close the check-then-act window.
    """

    def find_by_id(self, entity: EntityType, record_id: int) -> Record | None: ...
    def find_one(
        self,
        entity: EntityType,
        where: Mapping[str, object],
        exclude_id: int | None = None,
    ) -> Record | None: ...
    def count(self, entity: EntityType, where: Mapping[str, object]) -> int: ...
    def list_all(self, entity: EntityType) -> list[Record]: ...
    def create(self, entity: EntityType, fields: Mapping[str, object]) -> Record: ...
    def update(self, entity: EntityType, record_id: int, fields: Mapping[str, object]) -> Record: ...
    def delete(self, entity: EntityType, record_id: int) -> None: ...
    def transaction(self) -> AbstractContextManager[None]: ...
