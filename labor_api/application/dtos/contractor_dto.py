from pydantic import BaseModel, Field

from .common import InputModel


class ContractorCreateDTO(InputModel):
    principal_id: int = Field(gt=0)
    name: str = Field(min_length=1, max_length=100)
    tax_id: str = Field(min_length=1, max_length=100)


class ContractorUpdateDTO(InputModel):
    principal_id: int | None = Field(default=None, gt=0)
    name: str | None = Field(default=None, min_length=1, max_length=100)
    tax_id: str | None = Field(default=None, min_length=1, max_length=100)


class ContractorDTO(BaseModel):
    id: int
    principal_id: int
    name: str
    tax_id: str
