from pydantic import BaseModel, Field

from .common import InputModel


class PrincipalCreateDTO(InputModel):
    name: str = Field(min_length=1, max_length=100)


class PrincipalUpdateDTO(InputModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)


class PrincipalDTO(BaseModel):
    id: int
    name: str
