from pydantic import BaseModel, ConfigDict


class InputModel(BaseModel):
    """Request bodies: whitespace trimmed, unknown keys rejected."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")


class DeletedDTO(BaseModel):
    id: int
    deleted: bool = True


class HealthDTO(BaseModel):
    status: str
    database: bool
