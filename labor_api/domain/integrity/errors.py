# labor_api/domain/integrity/errors.py
from __future__ import annotations

from .graph import EntityType


class RuleViolation(Exception):
    """Local, synchronous, non-retryable rejection. Raised before any write."""

    code = "RULE_VIOLATION"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def details(self) -> dict[str, object]:
        return {}


class NotFoundError(RuleViolation):
    """A referenced parent record does not exist."""

    code = "REFERENCE_NOT_FOUND"

    def __init__(self, entity: EntityType, record_id: object, field: str) -> None:
        super().__init__(f"{entity.value} {record_id} referenced by {field} does not exist")
        self.entity = entity
        self.record_id = record_id
        self.field = field

    def details(self) -> dict[str, object]:
        return {"entity": self.entity.value, "id": self.record_id, "field": self.field}


class RecordNotFoundError(RuleViolation):
    """The record targeted by an update/delete does not exist."""

    code = "NOT_FOUND"

    def __init__(self, entity: EntityType, record_id: int) -> None:
        super().__init__(f"{entity.value} {record_id} not found")
        self.entity = entity
        self.record_id = record_id

    def details(self) -> dict[str, object]:
        return {"entity": self.entity.value, "id": self.record_id}


class ConflictError(RuleViolation):
    def __init__(
        self,
        entity: EntityType,
        code: str,
        fields: tuple[str, ...],
        scope: str | None,
        existing_id: int,
    ) -> None:
        where = f" within {scope}" if scope else ""
        super().__init__(
            f"{entity.value} with the same ({', '.join(fields)}) already exists{where}"
        )
        self.code = code
        self.entity = entity
        self.fields = fields
        self.scope = scope
        self.existing_id = existing_id

    def details(self) -> dict[str, object]:
        return {
            "fields": list(self.fields),
            "scope": self.scope,
            "existing_id": self.existing_id,
        }


class ValidationError(RuleViolation):
    """A date/numeric business rule failed; the message names the rule."""

    code = "VALIDATION_FAILED"


class BlockedDeletionError(RuleViolation):
    code = "DELETE_BLOCKED"

    def __init__(self, entity: EntityType, record_id: int, dependents: dict[EntityType, int]) -> None:
        self.count = sum(dependents.values())
        kinds = ", ".join(child.value for child in dependents)
        super().__init__(
            f"cannot delete {entity.value} {record_id}: {self.count} dependent {kinds} record(s)"
        )
        self.entity = entity
        self.record_id = record_id
        self.dependents = dependents

    def details(self) -> dict[str, object]:
        return {
            "count": self.count,
            "dependents": {child.value: n for child, n in self.dependents.items()},
        }
