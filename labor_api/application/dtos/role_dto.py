from pydantic import BaseModel, Field

from .common import InputModel


class RoleCreateDTO(InputModel):
    name: str = Field(min_length=3, max_length=100)


class RoleUpdateDTO(InputModel):
    name: str | None = Field(default=None, min_length=3, max_length=100)


class RoleDTO(BaseModel):
    id: int
    name: str
