from fastapi import APIRouter, Depends, Path

from labor_api.application.dtos.common import DeletedDTO
from labor_api.application.dtos.negotiation_dto import (
    NegotiationCreateDTO,
    NegotiationDTO,
    NegotiationUpdateDTO,
)
from labor_api.application.services.registry_service import RegistryService
from labor_api.domain.integrity.graph import EntityType
from labor_api.interfaces.api.dependencies import get_registry_service
from labor_api.interfaces.api.security import Identity, get_identity, require_admin

router = APIRouter(tags=["negotiations"])

_ENTITY = EntityType.NEGOTIATION


@router.get("/negotiations", response_model=list[NegotiationDTO])
def list_negotiations(
    _: Identity = Depends(get_identity),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> list[NegotiationDTO]:
    return [NegotiationDTO.model_validate(r) for r in service.list_all(_ENTITY)]


@router.get("/negotiations/{record_id}", response_model=NegotiationDTO)
def get_negotiation(
    record_id: int = Path(gt=0),
    _: Identity = Depends(get_identity),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> NegotiationDTO:
    return NegotiationDTO.model_validate(service.get(_ENTITY, record_id))


@router.post("/negotiations", response_model=NegotiationDTO, status_code=201)
def create_negotiation(
    payload: NegotiationCreateDTO,
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> NegotiationDTO:
    return NegotiationDTO.model_validate(service.create(_ENTITY, payload.model_dump()))


@router.put("/negotiations/{record_id}", response_model=NegotiationDTO)
def update_negotiation(
    payload: NegotiationUpdateDTO,
    record_id: int = Path(gt=0),
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> NegotiationDTO:
    changes = payload.model_dump(exclude_unset=True)
    return NegotiationDTO.model_validate(service.update(_ENTITY, record_id, changes))


@router.delete("/negotiations/{record_id}", response_model=DeletedDTO)
def delete_negotiation(
    record_id: int = Path(gt=0),
    _: Identity = Depends(require_admin),  # noqa: B008
    service: RegistryService = Depends(get_registry_service),  # noqa: B008
) -> DeletedDTO:
    service.delete(_ENTITY, record_id)
    return DeletedDTO(id=record_id)
