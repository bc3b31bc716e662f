from pydantic import BaseModel, Field

from .common import InputModel


class UnionCreateDTO(InputModel):
    name: str = Field(min_length=1, max_length=100)
    federation: str | None = Field(default=None, max_length=100)
    union_type: str | None = Field(default=None, max_length=50)


class UnionUpdateDTO(InputModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    federation: str | None = Field(default=None, max_length=100)
    union_type: str | None = Field(default=None, max_length=50)


class UnionDTO(BaseModel):
    id: int
    name: str
    federation: str | None
    union_type: str | None
