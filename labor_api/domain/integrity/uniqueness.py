# labor_api/domain/integrity/uniqueness.py
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .graph import EntityType, UniqueRule
from .storage import Storage


@dataclass(frozen=True)
class Conflict:
    entity: EntityType
    code: str
    fields: tuple[str, ...]
    scope: str | None
    existing_id: int


def normalize_key(value: object) -> object:
    """Strings take part in uniqueness trimmed; everything else by equality."""
    return value.strip() if isinstance(value, str) else value


class UniquenessGuard:
    """Looks for a sibling record that already holds the candidate's values.

    Check-then-act: two concurrent callers can both pass unless the caller runs
    the check and the write in one `Storage.transaction()`.
    """

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def check_conflict(
        self,
        entity: EntityType,
        fields: Mapping[str, object],
        exclude_id: int | None = None,
        *,
        code: str = "DUPLICATE",
        scope: str | None = None,
    ) -> Conflict | None:
        where = {name: normalize_key(value) for name, value in fields.items()}
        existing = self._storage.find_one(entity, where, exclude_id=exclude_id)
        if existing is None:
            return None
        return Conflict(
            entity=entity,
            code=code,
            fields=tuple(where),
            scope=scope,
            existing_id=int(existing["id"]),
        )

    def check_rules(
        self,
        entity: EntityType,
        candidate: Mapping[str, object],
        rules: Iterable[UniqueRule],
        exclude_id: int | None = None,
    ) -> Conflict | None:
        """Each rule is evaluated on its own; the first conflict found wins."""
        for rule in rules:
            conflict = self.check_conflict(
                entity,
                {name: candidate.get(name) for name in rule.fields},
                exclude_id,
                code=rule.code,
                scope=rule.scope,
            )
            if conflict is not None:
                return conflict
        return None
