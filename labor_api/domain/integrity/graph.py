# labor_api/domain/integrity/graph.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntityType(str, Enum):
    PRINCIPAL = "principal"
    CONTRACTOR = "contractor"
    UNION = "union"
    NEGOTIATION = "negotiation"
    MONITORING_RECORD = "monitoring_record"
    ROLE = "role"
    ACCOUNT = "account"


@dataclass(frozen=True)
class ParentLink:
    field: str
    parent: EntityType


@dataclass(frozen=True)
class UniqueRule:
    """Field set that may not repeat. `scope` is the reference field that bounds
    the rule (None = unique platform-wide)."""
    code: str
    fields: tuple[str, ...]
    scope: str | None = None


@dataclass(frozen=True)
class EntitySpec:
    entity: EntityType
    fields: tuple[str, ...]  # persisted columns, id excluded; all mutable
    required: tuple[str, ...]
    parents: tuple[ParentLink, ...] = ()
    unique: tuple[UniqueRule, ...] = ()

    def parent_of(self, field: str) -> EntityType | None:
        for link in self.parents:
            if link.field == field:
                return link.parent
        return None


CONTRACTOR_NAME = UniqueRule("DUPLICATE_CONTRACTOR_NAME", ("name", "principal_id"), scope="principal_id")
CONTRACTOR_TAX_ID = UniqueRule("DUPLICATE_TAX_ID", ("tax_id", "principal_id"), scope="principal_id")
CONTRACTOR_TAX_ID_GLOBAL = UniqueRule("DUPLICATE_TAX_ID", ("tax_id",))

GRAPH: dict[EntityType, EntitySpec] = {
    EntityType.PRINCIPAL: EntitySpec(
        entity=EntityType.PRINCIPAL,
        fields=("name",),
        required=("name",),
    ),
    EntityType.CONTRACTOR: EntitySpec(
        entity=EntityType.CONTRACTOR,
        fields=("principal_id", "name", "tax_id"),
        required=("principal_id", "name", "tax_id"),
        parents=(ParentLink("principal_id", EntityType.PRINCIPAL),),
        unique=(CONTRACTOR_NAME, CONTRACTOR_TAX_ID),
    ),
    EntityType.UNION: EntitySpec(
        entity=EntityType.UNION,
        fields=("name", "federation", "union_type"),
        required=("name",),
    ),
    EntityType.NEGOTIATION: EntitySpec(
        entity=EntityType.NEGOTIATION,
        fields=(
            "contractor_id",
            "union_id",
            "contract_label",
            "status",
            "start_date",
            "end_date",
            "commercial_contract_expiry",
            "total_headcount",
            "unionized_headcount",
            "unionized_percentage",
        ),
        required=("contractor_id", "union_id", "contract_label"),
        parents=(
            ParentLink("contractor_id", EntityType.CONTRACTOR),
            ParentLink("union_id", EntityType.UNION),
        ),
        unique=(
            UniqueRule(
                "DUPLICATE_NEGOTIATION",
                ("contractor_id", "union_id", "contract_label"),
                scope="contractor_id",
            ),
        ),
    ),
    EntityType.MONITORING_RECORD: EntitySpec(
        entity=EntityType.MONITORING_RECORD,
        fields=("negotiation_id", "start_date", "comments"),
        required=("negotiation_id", "start_date"),
        parents=(ParentLink("negotiation_id", EntityType.NEGOTIATION),),
    ),
    EntityType.ROLE: EntitySpec(
        entity=EntityType.ROLE,
        fields=("name",),
        required=("name",),
        unique=(UniqueRule("DUPLICATE_ROLE_NAME", ("name",)),),
    ),
    EntityType.ACCOUNT: EntitySpec(
        entity=EntityType.ACCOUNT,
        fields=("first_name", "last_name", "username", "email", "role_id"),
        required=("first_name", "last_name", "username", "email", "role_id"),
        parents=(ParentLink("role_id", EntityType.ROLE),),
        unique=(
            UniqueRule("DUPLICATE_USERNAME", ("username",)),
            UniqueRule("DUPLICATE_EMAIL", ("email",)),
        ),
    ),
}


def spec_for(entity: EntityType) -> EntitySpec:
    return GRAPH[entity]


def children_of(entity: EntityType) -> list[tuple[EntityType, ParentLink]]:
    """Reverse edges: (child type, link) for every child that references `entity`."""
    return [
        (spec.entity, link)
        for spec in GRAPH.values()
        for link in spec.parents
        if link.parent is entity
    ]


def unique_rules(entity: EntityType, *, global_tax_id: bool = False) -> tuple[UniqueRule, ...]:
    """Uniqueness rules for the type. For Contractor, `global_tax_id` swaps the
    per-principal tax_id rule for the platform-wide variant."""
    rules = GRAPH[entity].unique
    if entity is EntityType.CONTRACTOR and global_tax_id:
        return tuple(CONTRACTOR_TAX_ID_GLOBAL if r is CONTRACTOR_TAX_ID else r for r in rules)
    return rules
