from fastapi import APIRouter, Depends, Path

from labor_api.application.dtos.common import DeletedDTO
from labor_api.application.dtos.role_dto import (
    RoleCreateDTO,
    RoleDTO,
    RoleUpdateDTO,
)
from labor_api.application.services.registry_service import RegistryService
from labor_api.domain.integrity.graph import EntityType
from labor_api.interfaces.api.dependencies import get_registry_service
from labor_api.interfaces.api.security import Identity, get_identity, require_admin

router = APIRouter(tags=["roles"])

_ENTITY = EntityType.ROLE


@router.get("/roles", response_model=list[RoleDTO])
def list_roles(
    _: Identity = Depends(get_identity),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> list[RoleDTO]:
    return [RoleDTO.model_validate(r) for r in service.list_all(_ENTITY)]


@router.get("/roles/{record_id}", response_model=RoleDTO)
def get_role(
    record_id: int = Path(gt=0),
    _: Identity = Depends(get_identity),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> RoleDTO:
    return RoleDTO.model_validate(service.get(_ENTITY, record_id))


@router.post("/roles", response_model=RoleDTO, status_code=201)
def create_role(
    payload: RoleCreateDTO,
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> RoleDTO:
    return RoleDTO.model_validate(service.create(_ENTITY, payload.model_dump()))


@router.put("/roles/{record_id}", response_model=RoleDTO)
def update_role(
    payload: RoleUpdateDTO,
    record_id: int = Path(gt=0),
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> RoleDTO:
    changes = payload.model_dump(exclude_unset=True)
    return RoleDTO.model_validate(service.update(_ENTITY, record_id, changes))


@router.delete("/roles/{record_id}", response_model=DeletedDTO)
def delete_role(
    record_id: int = Path(gt=0),
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> DeletedDTO:
    service.delete(_ENTITY, record_id)
    return DeletedDTO(id=record_id)
