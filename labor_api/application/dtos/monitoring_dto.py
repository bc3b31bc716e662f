from datetime import date

from pydantic import BaseModel, Field

from .common import InputModel


class MonitoringRecordCreateDTO(InputModel):
    negotiation_id: int = Field(gt=0)
    start_date: date | None = None  # defaults to the negotiation's start_date
    comments: str | None = None


class MonitoringRecordUpdateDTO(InputModel):
    """start_date: null re-applies the negotiation's start_date."""

    negotiation_id: int | None = Field(default=None, gt=0)
    start_date: date | None = None
    comments: str | None = None


class MonitoringRecordDTO(BaseModel):
    id: int
    negotiation_id: int
    start_date: date
    comments: str | None
