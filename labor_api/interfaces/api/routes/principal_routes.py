from fastapi import APIRouter, Depends, Path

from labor_api.application.dtos.common import DeletedDTO
from labor_api.application.dtos.principal_dto import (
    PrincipalCreateDTO,
    PrincipalDTO,
    PrincipalUpdateDTO,
)
from labor_api.application.services.registry_service import RegistryService
from labor_api.domain.integrity.graph import EntityType
from labor_api.interfaces.api.dependencies import get_registry_service
from labor_api.interfaces.api.security import Identity, get_identity, require_admin

router = APIRouter(tags=["principals"])

_ENTITY = EntityType.PRINCIPAL


@router.get("/principals", response_model=list[PrincipalDTO])
def list_principals(
    _: Identity = Depends(get_identity),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> list[PrincipalDTO]:
    return [PrincipalDTO.model_validate(r) for r in service.list_all(_ENTITY)]


@router.get("/principals/{record_id}", response_model=PrincipalDTO)
def get_principal(
    record_id: int = Path(gt=0),
    _: Identity = Depends(get_identity),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> PrincipalDTO:
    return PrincipalDTO.model_validate(service.get(_ENTITY, record_id))


@router.post("/principals", response_model=PrincipalDTO, status_code=201)
def create_principal(
    payload: PrincipalCreateDTO,
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> PrincipalDTO:
    return PrincipalDTO.model_validate(service.create(_ENTITY, payload.model_dump()))


@router.put("/principals/{record_id}", response_model=PrincipalDTO)
def update_principal(
    payload: PrincipalUpdateDTO,
    record_id: int = Path(gt=0),
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> PrincipalDTO:
    changes = payload.model_dump(exclude_unset=True)
    return PrincipalDTO.model_validate(service.update(_ENTITY, record_id, changes))


@router.delete("/principals/{record_id}", response_model=DeletedDTO)
def delete_principal(
    record_id: int = Path(gt=0),
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> DeletedDTO:
    service.delete(_ENTITY, record_id)
    return DeletedDTO(id=record_id)
