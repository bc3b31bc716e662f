from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from .common import InputModel


class NegotiationCreateDTO(InputModel):
    contractor_id: int = Field(gt=0)
    union_id: int = Field(gt=0)
    contract_label: str = Field(min_length=1, max_length=100)
    status: str | None = Field(default=None, max_length=50)
    start_date: date | None = None
    end_date: date | None = None
    commercial_contract_expiry: date | None = None
    total_headcount: int | None = Field(default=None, ge=0)
    unionized_headcount: int | None = Field(default=None, ge=0)
    unionized_percentage: Decimal | None = Field(
        default=None, ge=0, le=100, max_digits=5, decimal_places=2
    )


class NegotiationUpdateDTO(InputModel):
    """Partial update: only keys present in the body are applied."""

    contractor_id: int | None = Field(default=None, gt=0)
    union_id: int | None = Field(default=None, gt=0)
    contract_label: str | None = Field(default=None, min_length=1, max_length=100)
    status: str | None = Field(default=None, max_length=50)
    start_date: date | None = None
    end_date: date | None = None
    commercial_contract_expiry: date | None = None
    total_headcount: int | None = Field(default=None, ge=0)
    unionized_headcount: int | None = Field(default=None, ge=0)
    unionized_percentage: Decimal | None = Field(
        default=None, ge=0, le=100, max_digits=5, decimal_places=2
    )


class NegotiationDTO(BaseModel):
    id: int
    contractor_id: int
    union_id: int
    contract_label: str
    status: str | None
    start_date: date | None
    end_date: date | None
    commercial_contract_expiry: date | None
    total_headcount: int | None
    unionized_headcount: int | None
    unionized_percentage: Decimal | None
