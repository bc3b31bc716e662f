# labor_api/application/services/registry_service.py
from __future__ import annotations

from collections.abc import Mapping

from labor_api.domain.integrity.deletion import IntegrityGuard
from labor_api.domain.integrity.errors import (
    BlockedDeletionError,
    ConflictError,
    NotFoundError,
    RecordNotFoundError,
    RuleViolation,
    ValidationError,
)
from labor_api.domain.integrity.graph import EntitySpec, EntityType, spec_for, unique_rules
from labor_api.domain.integrity.storage import Record, Storage
from labor_api.domain.integrity.uniqueness import UniquenessGuard
from labor_api.domain.monitoring.rules import resolve_start_date
from labor_api.domain.negotiation.entities import NegotiationDraft
from labor_api.domain.negotiation.rules import validate_negotiation
from labor_api.infrastructure.log import get_logger

logger = get_logger("registry")

# Required columns that an entity rule fills in when the caller leaves them out.
_DEFAULTED_FIELDS: dict[EntityType, frozenset[str]] = {
    EntityType.MONITORING_RECORD: frozenset({"start_date"}),
}


def _clean(value: object) -> object:
    """Strings are trimmed; blank strings count as absent."""
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class RegistryService:
    """Imperative Shell: sequences storage IO around the pure guards and rules.

    validate_* never write. create/update/delete run validation and the write
    inside one storage transaction, so a rejection leaves storage untouched.
    """

    def __init__(self, storage: Storage, *, global_tax_id: bool = False) -> None:
        self._storage = storage
        self._uniqueness = UniquenessGuard(storage)
        self._integrity = IntegrityGuard(storage)
        self._global_tax_id = global_tax_id

    # -- reads ----------------------------------------------------------------

    def get(self, entity: EntityType, record_id: int) -> Record:
        record = self._storage.find_by_id(entity, record_id)
        if record is None:
            raise RecordNotFoundError(entity, record_id)
        return record

    def list_all(self, entity: EntityType) -> list[Record]:
        return self._storage.list_all(entity)

    # -- validation -----------------------------------------------------------

    def validate_create(self, entity: EntityType, fields: Mapping[str, object]) -> Record:
        spec = spec_for(entity)
        candidate = {name: _clean(fields.get(name)) for name in spec.fields}
        return self._validate(spec, candidate, exclude_id=None)

    def validate_update(
        self,
        entity: EntityType,
        record_id: int,
        changes: Mapping[str, object],
    ) -> Record:
        """`changes` holds only the fields the caller set; an explicit None clears."""
        spec = spec_for(entity)
        current = self.get(entity, record_id)
        merged = {name: current.get(name) for name in spec.fields}
        merged.update({name: _clean(v) for name, v in changes.items() if name in spec.fields})
        return self._validate(spec, merged, exclude_id=record_id)

    def validate_delete(self, entity: EntityType, record_id: int) -> None:
        self.get(entity, record_id)
        blocked = self._integrity.check_deletable(entity, record_id)
        if blocked is not None:
            raise BlockedDeletionError(entity, record_id, blocked.dependents)

    # -- writes ---------------------------------------------------------------

    def create(self, entity: EntityType, fields: Mapping[str, object]) -> Record:
        try:
            with self._storage.transaction():
                record = self.validate_create(entity, fields)
                created = self._storage.create(entity, record)
        except RuleViolation as exc:
            logger.warning("create %s rejected: %s", entity.value, exc.message)
            raise
        logger.info("created %s %s", entity.value, created["id"])
        return created

    def update(self, entity: EntityType, record_id: int, changes: Mapping[str, object]) -> Record:
        try:
            with self._storage.transaction():
                record = self.validate_update(entity, record_id, changes)
                updated = self._storage.update(entity, record_id, record)
        except RuleViolation as exc:
            logger.warning("update %s %s rejected: %s", entity.value, record_id, exc.message)
            raise
        logger.info("updated %s %s", entity.value, record_id)
        return updated

    def delete(self, entity: EntityType, record_id: int) -> None:
        try:
            with self._storage.transaction():
                self.validate_delete(entity, record_id)
                self._storage.delete(entity, record_id)
        except RuleViolation as exc:
            logger.warning("delete %s %s rejected: %s", entity.value, record_id, exc.message)
            raise
        logger.info("deleted %s %s", entity.value, record_id)

    # -- steps ----------------------------------------------------------------

    def _validate(self, spec: EntitySpec, candidate: Record, exclude_id: int | None) -> Record:
        self._check_required(spec, candidate)
        parents = self._check_parents(spec, candidate)
        self._check_unique(spec, candidate, exclude_id)
        return self._apply_entity_rules(spec.entity, candidate, parents)

    def _check_required(self, spec: EntitySpec, candidate: Record) -> None:
        defaulted = _DEFAULTED_FIELDS.get(spec.entity, frozenset())
        for name in spec.required:
            if name not in defaulted and candidate.get(name) is None:
                raise ValidationError(f"{name} is required")

    def _check_parents(self, spec: EntitySpec, candidate: Record) -> dict[str, Record]:
        parents: dict[str, Record] = {}
        for link in spec.parents:
            ref = candidate.get(link.field)
            if ref is None:
                continue
            parent = self._storage.find_by_id(link.parent, int(ref))  # type: ignore[call-overload]
            if parent is None:
                raise NotFoundError(link.parent, ref, link.field)
            parents[link.field] = parent
        return parents

    def _check_unique(self, spec: EntitySpec, candidate: Record, exclude_id: int | None) -> None:
        rules = unique_rules(spec.entity, global_tax_id=self._global_tax_id)
        conflict = self._uniqueness.check_rules(spec.entity, candidate, rules, exclude_id)
        if conflict is not None:
            raise ConflictError(
                spec.entity,
                conflict.code,
                conflict.fields,
                conflict.scope,
                conflict.existing_id,
            )

    def _apply_entity_rules(
        self,
        entity: EntityType,
        candidate: Record,
        parents: dict[str, Record],
    ) -> Record:
        if entity is EntityType.NEGOTIATION:
            draft = validate_negotiation(NegotiationDraft.from_record(candidate))
            return {**candidate, **draft.to_record()}
        if entity is EntityType.MONITORING_RECORD:
            negotiation = parents.get("negotiation_id", {})
            start = resolve_start_date(candidate.get("start_date"), negotiation.get("start_date"))  # type: ignore[arg-type]
            return {**candidate, "start_date": start}
        return candidate
