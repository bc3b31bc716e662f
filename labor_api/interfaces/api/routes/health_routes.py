from fastapi import APIRouter, Depends, HTTPException

from labor_api.application.dtos.common import HealthDTO
from labor_api.infrastructure.repositories.duckdb_storage import DuckDBStorage
from labor_api.interfaces.api.dependencies import get_storage

router = APIRouter()


@router.get("/health", response_model=HealthDTO)
def health(storage: DuckDBStorage = Depends(get_storage)) -> HealthDTO:  # noqa: B008
    if not storage.ping():
        raise HTTPException(status_code=503, detail="Database unavailable")
    return HealthDTO(status="ok", database=True)
