from fastapi import APIRouter, Depends, Path

from labor_api.application.dtos.common import DeletedDTO
from labor_api.application.dtos.union_dto import (
    UnionCreateDTO,
    UnionDTO,
    UnionUpdateDTO,
)
from labor_api.application.services.registry_service import RegistryService
from labor_api.domain.integrity.graph import EntityType
from labor_api.interfaces.api.dependencies import get_registry_service
from labor_api.interfaces.api.security import Identity, get_identity, require_admin

router = APIRouter(tags=["unions"])

_ENTITY = EntityType.UNION


@router.get("/unions", response_model=list[UnionDTO])
def list_unions(
    _: Identity = Depends(get_identity),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> list[UnionDTO]:
    return [UnionDTO.model_validate(r) for r in service.list_all(_ENTITY)]


@router.get("/unions/{record_id}", response_model=UnionDTO)
def get_union(
    record_id: int = Path(gt=0),
    _: Identity = Depends(get_identity),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> UnionDTO:
    return UnionDTO.model_validate(service.get(_ENTITY, record_id))


@router.post("/unions", response_model=UnionDTO, status_code=201)
def create_union(
    payload: UnionCreateDTO,
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> UnionDTO:
    return UnionDTO.model_validate(service.create(_ENTITY, payload.model_dump()))


@router.put("/unions/{record_id}", response_model=UnionDTO)
def update_union(
    payload: UnionUpdateDTO,
    record_id: int = Path(gt=0),
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> UnionDTO:
    changes = payload.model_dump(exclude_unset=True)
    return UnionDTO.model_validate(service.update(_ENTITY, record_id, changes))


@router.delete("/unions/{record_id}", response_model=DeletedDTO)
def delete_union(
    record_id: int = Path(gt=0),
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> DeletedDTO:
    service.delete(_ENTITY, record_id)
    return DeletedDTO(id=record_id)
