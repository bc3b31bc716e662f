from datetime import date
from decimal import Decimal

import pytest

from labor_api.application.services.registry_service import RegistryService
from labor_api.domain.integrity.errors import (
    BlockedDeletionError,
    ConflictError,
    NotFoundError,
    RecordNotFoundError,
    ValidationError,
)
from labor_api.domain.integrity.graph import EntityType
from labor_api.infrastructure.repositories.duckdb_storage import DuckDBStorage


def _negotiation(seeded: dict[str, int], **kwargs: object) -> dict[str, object]:
    fields: dict[str, object] = {
        "contractor_id": seeded["contractor"],
        "union_id": seeded["union"],
        "contract_label": "CB-2024",
    }
    fields.update(kwargs)
    return fields


# --- create ---

def test_create_contractor(service: RegistryService, seeded: dict[str, int]) -> None:
    created = service.create(
        EntityType.CONTRACTOR,
        {"principal_id": seeded["north"], "name": "  Transportes Sur ", "tax_id": "99.999.999-9"},
    )
    assert created["name"] == "Transportes Sur"
    assert created["principal_id"] == seeded["north"]


def test_create_with_missing_parent_rejected(service: RegistryService, storage: DuckDBStorage) -> None:
    with pytest.raises(NotFoundError) as err:
        service.create(EntityType.CONTRACTOR, {"principal_id": 42, "name": "X", "tax_id": "1"})
    assert err.value.field == "principal_id"
    assert storage.count(EntityType.CONTRACTOR, {}) == 0


def test_create_missing_required_field_rejected(service: RegistryService) -> None:
    with pytest.raises(ValidationError, match="name is required"):
        service.create(EntityType.PRINCIPAL, {"name": "   "})


def test_duplicate_contractor_name_in_same_principal_rejected(
    service: RegistryService, seeded: dict[str, int]
) -> None:
    with pytest.raises(ConflictError) as err:
        service.create(
            EntityType.CONTRACTOR,
            {"principal_id": seeded["north"], "name": "Servicios Andes", "tax_id": "11.111.111-1"},
        )
    assert err.value.code == "DUPLICATE_CONTRACTOR_NAME"
    assert err.value.existing_id == seeded["contractor"]


def test_duplicate_tax_id_in_same_principal_rejected(service: RegistryService, seeded: dict[str, int]) -> None:
    with pytest.raises(ConflictError) as err:
        service.create(
            EntityType.CONTRACTOR,
            {"principal_id": seeded["north"], "name": "Otra", "tax_id": "76.123.456-7"},
        )
    assert err.value.code == "DUPLICATE_TAX_ID"


def test_same_name_and_tax_id_under_other_principal_allowed(
    service: RegistryService, seeded: dict[str, int]
) -> None:
    created = service.create(
        EntityType.CONTRACTOR,
        {"principal_id": seeded["south"], "name": "Servicios Andes", "tax_id": "76.123.456-7"},
    )
    assert created["principal_id"] == seeded["south"]


def test_global_tax_id_scope_rejects_across_principals(
    storage: DuckDBStorage, seeded: dict[str, int]
) -> None:
    service = RegistryService(storage, global_tax_id=True)
    with pytest.raises(ConflictError, match="tax_id"):
        service.create(
            EntityType.CONTRACTOR,
            {"principal_id": seeded["south"], "name": "Otra", "tax_id": "76.123.456-7"},
        )


def test_negotiation_derives_unionized_headcount(service: RegistryService, seeded: dict[str, int]) -> None:
    created = service.create(
        EntityType.NEGOTIATION,
        _negotiation(seeded, total_headcount=100, unionized_percentage=Decimal("33.5")),
    )
    assert created["unionized_headcount"] == 34


def test_negotiation_closed_auto_fills_end_date(service: RegistryService, seeded: dict[str, int]) -> None:
    created = service.create(
        EntityType.NEGOTIATION,
        _negotiation(seeded, status="Closed", start_date=date(2024, 6, 10)),
    )
    assert created["end_date"] == date(2027, 6, 10)


def test_duplicate_negotiation_label_trimmed(service: RegistryService, seeded: dict[str, int]) -> None:
    service.create(EntityType.NEGOTIATION, _negotiation(seeded))
    with pytest.raises(ConflictError) as err:
        service.create(EntityType.NEGOTIATION, _negotiation(seeded, contract_label="  CB-2024  "))
    assert err.value.code == "DUPLICATE_NEGOTIATION"


def test_negotiation_rule_failure_writes_nothing(
    service: RegistryService, storage: DuckDBStorage, seeded: dict[str, int]
) -> None:
    with pytest.raises(ValidationError, match="inconsistent"):
        service.create(
            EntityType.NEGOTIATION,
            _negotiation(
                seeded,
                total_headcount=100,
                unionized_percentage=Decimal("30"),
                unionized_headcount=40,
            ),
        )
    assert storage.count(EntityType.NEGOTIATION, {}) == 0


def test_negotiation_with_missing_union_rejected(service: RegistryService, seeded: dict[str, int]) -> None:
    with pytest.raises(NotFoundError) as err:
        service.create(EntityType.NEGOTIATION, _negotiation(seeded, union_id=999))
    assert err.value.entity is EntityType.UNION


def test_monitoring_record_defaults_to_negotiation_start(
    service: RegistryService, seeded: dict[str, int]
) -> None:
    negotiation = service.create(EntityType.NEGOTIATION, _negotiation(seeded, start_date=date(2024, 3, 1)))
    record = service.create(EntityType.MONITORING_RECORD, {"negotiation_id": negotiation["id"]})
    assert record["start_date"] == date(2024, 3, 1)


def test_monitoring_record_without_any_date_rejected(
    service: RegistryService, seeded: dict[str, int]
) -> None:
    negotiation = service.create(EntityType.NEGOTIATION, _negotiation(seeded))
    with pytest.raises(ValidationError, match="startDate is required"):
        service.create(EntityType.MONITORING_RECORD, {"negotiation_id": negotiation["id"]})


def test_account_requires_existing_role(service: RegistryService) -> None:
    with pytest.raises(NotFoundError):
        service.create(
            EntityType.ACCOUNT,
            {"first_name": "Ana", "last_name": "Rojas", "username": "arojas", "email": "a@x.cl", "role_id": 7},
        )


# --- update ---

def test_noop_update_does_not_conflict_with_itself(service: RegistryService, seeded: dict[str, int]) -> None:
    current = service.get(EntityType.CONTRACTOR, seeded["contractor"])
    same = {k: v for k, v in current.items() if k != "id"}
    assert service.validate_update(EntityType.CONTRACTOR, seeded["contractor"], same) == same
    assert service.update(EntityType.CONTRACTOR, seeded["contractor"], same) == current


def test_noop_negotiation_update_is_idempotent(service: RegistryService, seeded: dict[str, int]) -> None:
    created = service.create(
        EntityType.NEGOTIATION,
        _negotiation(seeded, total_headcount=100, unionized_headcount=34, start_date=date(2024, 1, 15)),
    )
    unchanged = {k: v for k, v in created.items() if k != "id"}
    assert service.update(EntityType.NEGOTIATION, created["id"], unchanged) == created


def test_update_into_sibling_name_rejected(service: RegistryService, seeded: dict[str, int]) -> None:
    other = service.create(
        EntityType.CONTRACTOR,
        {"principal_id": seeded["north"], "name": "Transportes Sur", "tax_id": "22"},
    )
    with pytest.raises(ConflictError):
        service.update(EntityType.CONTRACTOR, other["id"], {"name": "Servicios Andes"})


def test_update_moving_principal_checks_new_scope(service: RegistryService, seeded: dict[str, int]) -> None:
    service.create(
        EntityType.CONTRACTOR,
        {"principal_id": seeded["south"], "name": "Servicios Andes", "tax_id": "33"},
    )
    with pytest.raises(ConflictError):
        service.update(EntityType.CONTRACTOR, seeded["contractor"], {"principal_id": seeded["south"]})


def test_update_missing_record(service: RegistryService) -> None:
    with pytest.raises(RecordNotFoundError):
        service.update(EntityType.PRINCIPAL, 404, {"name": "X"})


def test_update_validates_merged_negotiation(service: RegistryService, seeded: dict[str, int]) -> None:
    created = service.create(EntityType.NEGOTIATION, _negotiation(seeded, start_date=date(2024, 1, 15)))
    with pytest.raises(ValidationError, match="term exceeds 36 months"):
        service.update(EntityType.NEGOTIATION, created["id"], {"end_date": date(2027, 1, 16)})


def test_update_derives_percentage_from_merged_state(
    service: RegistryService, seeded: dict[str, int]
) -> None:
    created = service.create(EntityType.NEGOTIATION, _negotiation(seeded, total_headcount=100))
    updated = service.update(EntityType.NEGOTIATION, created["id"], {"unionized_headcount": 34})
    assert updated["unionized_percentage"] == Decimal("34.00")


def test_update_can_clear_optional_field(service: RegistryService, seeded: dict[str, int]) -> None:
    created = service.create(EntityType.NEGOTIATION, _negotiation(seeded, status="Open"))
    updated = service.update(EntityType.NEGOTIATION, created["id"], {"status": None})
    assert updated["status"] is None


def test_monitoring_update_null_date_follows_new_negotiation(
    service: RegistryService, seeded: dict[str, int]
) -> None:
    first = service.create(EntityType.NEGOTIATION, _negotiation(seeded, start_date=date(2024, 1, 1)))
    second = service.create(
        EntityType.NEGOTIATION,
        _negotiation(seeded, contract_label="CB-2025", start_date=date(2025, 1, 1)),
    )
    record = service.create(
        EntityType.MONITORING_RECORD,
        {"negotiation_id": first["id"], "start_date": date(2024, 6, 1)},
    )
    moved = service.update(
        EntityType.MONITORING_RECORD,
        record["id"],
        {"negotiation_id": second["id"], "start_date": None},
    )
    assert moved["start_date"] == date(2025, 1, 1)


# --- delete ---

def test_delete_principal_with_contractor_blocked(
    service: RegistryService, storage: DuckDBStorage, seeded: dict[str, int]
) -> None:
    with pytest.raises(BlockedDeletionError) as err:
        service.delete(EntityType.PRINCIPAL, seeded["north"])
    assert err.value.count == 1
    assert storage.find_by_id(EntityType.PRINCIPAL, seeded["north"]) is not None


def test_delete_principal_without_contractors(
    service: RegistryService, storage: DuckDBStorage, seeded: dict[str, int]
) -> None:
    service.delete(EntityType.PRINCIPAL, seeded["south"])
    assert storage.find_by_id(EntityType.PRINCIPAL, seeded["south"]) is None


def test_delete_negotiation_with_monitoring_blocked(service: RegistryService, seeded: dict[str, int]) -> None:
    negotiation = service.create(EntityType.NEGOTIATION, _negotiation(seeded, start_date=date(2024, 1, 1)))
    service.create(EntityType.MONITORING_RECORD, {"negotiation_id": negotiation["id"]})
    with pytest.raises(BlockedDeletionError) as err:
        service.delete(EntityType.NEGOTIATION, negotiation["id"])
    assert err.value.dependents == {EntityType.MONITORING_RECORD: 1}


def test_delete_role_with_accounts_blocked(service: RegistryService) -> None:
    role = service.create(EntityType.ROLE, {"name": "Administrador"})
    service.create(
        EntityType.ACCOUNT,
        {"first_name": "Ana", "last_name": "Rojas", "username": "arojas", "email": "a@x.cl", "role_id": role["id"]},
    )
    with pytest.raises(BlockedDeletionError):
        service.validate_delete(EntityType.ROLE, role["id"])


def test_delete_missing_record(service: RegistryService) -> None:
    with pytest.raises(RecordNotFoundError):
        service.delete(EntityType.UNION, 123)
