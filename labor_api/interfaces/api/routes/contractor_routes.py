from fastapi import APIRouter, Depends, Path

from labor_api.application.dtos.common import DeletedDTO
from labor_api.application.dtos.contractor_dto import (
    ContractorCreateDTO,
    ContractorDTO,
    ContractorUpdateDTO,
)
from labor_api.application.services.registry_service import RegistryService
from labor_api.domain.integrity.graph import EntityType
from labor_api.interfaces.api.dependencies import get_registry_service
from labor_api.interfaces.api.security import Identity, get_identity, require_admin

router = APIRouter(tags=["contractors"])

_ENTITY = EntityType.CONTRACTOR


@router.get("/contractors", response_model=list[ContractorDTO])
def list_contractors(
    _: Identity = Depends(get_identity),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> list[ContractorDTO]:
    return [ContractorDTO.model_validate(r) for r in service.list_all(_ENTITY)]


@router.get("/contractors/{record_id}", response_model=ContractorDTO)
def get_contractor(
    record_id: int = Path(gt=0),
    _: Identity = Depends(get_identity),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> ContractorDTO:
    return ContractorDTO.model_validate(service.get(_ENTITY, record_id))


@router.post("/contractors", response_model=ContractorDTO, status_code=201)
def create_contractor(
    payload: ContractorCreateDTO,
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> ContractorDTO:
    return ContractorDTO.model_validate(service.create(_ENTITY, payload.model_dump()))


@router.put("/contractors/{record_id}", response_model=ContractorDTO)
def update_contractor(
    payload: ContractorUpdateDTO,
    record_id: int = Path(gt=0),
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> ContractorDTO:
    changes = payload.model_dump(exclude_unset=True)
    return ContractorDTO.model_validate(service.update(_ENTITY, record_id, changes))


@router.delete("/contractors/{record_id}", response_model=DeletedDTO)
def delete_contractor(
    record_id: int = Path(gt=0),
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> DeletedDTO:
    service.delete(_ENTITY, record_id)
    return DeletedDTO(id=record_id)
