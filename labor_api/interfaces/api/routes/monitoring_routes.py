from fastapi import APIRouter, Depends, Path

from labor_api.application.dtos.common import DeletedDTO
from labor_api.application.dtos.monitoring_dto import (
    MonitoringRecordCreateDTO,
    MonitoringRecordDTO,
    MonitoringRecordUpdateDTO,
)
from labor_api.application.services.registry_service import RegistryService
from labor_api.domain.integrity.graph import EntityType
from labor_api.interfaces.api.dependencies import get_registry_service
from labor_api.interfaces.api.security import Identity, get_identity, require_admin

router = APIRouter(tags=["monitoring"])

_ENTITY = EntityType.MONITORING_RECORD


@router.get("/monitoring-records", response_model=list[MonitoringRecordDTO])
def list_monitoring_records(
    _: Identity = Depends(get_identity),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> list[MonitoringRecordDTO]:
    return [MonitoringRecordDTO.model_validate(r) for r in service.list_all(_ENTITY)]


@router.get("/monitoring-records/{record_id}", response_model=MonitoringRecordDTO)
def get_monitoring_record(
    record_id: int = Path(gt=0),
    _: Identity = Depends(get_identity),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> MonitoringRecordDTO:
    return MonitoringRecordDTO.model_validate(service.get(_ENTITY, record_id))


@router.post("/monitoring-records", response_model=MonitoringRecordDTO, status_code=201)
def create_monitoring_record(
    payload: MonitoringRecordCreateDTO,
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> MonitoringRecordDTO:
    return MonitoringRecordDTO.model_validate(service.create(_ENTITY, payload.model_dump()))


@router.put("/monitoring-records/{record_id}", response_model=MonitoringRecordDTO)
def update_monitoring_record(
    payload: MonitoringRecordUpdateDTO,
    record_id: int = Path(gt=0),
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> MonitoringRecordDTO:
    changes = payload.model_dump(exclude_unset=True)
    return MonitoringRecordDTO.model_validate(service.update(_ENTITY, record_id, changes))


@router.delete("/monitoring-records/{record_id}", response_model=DeletedDTO)
def delete_monitoring_record(
    record_id: int = Path(gt=0),
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> DeletedDTO:
    service.delete(_ENTITY, record_id)
    return DeletedDTO(id=record_id)
