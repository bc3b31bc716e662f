# labor_api/domain/integrity/deletion.py
from __future__ import annotations

from dataclasses import dataclass, field

from .graph import EntityType, children_of
from .storage import Storage


@dataclass(frozen=True)
class Blocked:
    entity: EntityType
    record_id: int
    dependents: dict[EntityType, int] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return sum(self.dependents.values())


class IntegrityGuard:
    """Refuses to delete a parent while any declared child still references it."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def check_deletable(self, entity: EntityType, record_id: int) -> Blocked | None:
        dependents: dict[EntityType, int] = {}
        for child, link in children_of(entity):
            n = self._storage.count(child, {link.field: record_id})
            if n > 0:
                dependents[child] = dependents.get(child, 0) + n
        if not dependents:
            return None
        return Blocked(entity=entity, record_id=record_id, dependents=dependents)
