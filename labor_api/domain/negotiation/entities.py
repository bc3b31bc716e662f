# labor_api/domain/negotiation/entities.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from datetime import date
from decimal import Decimal

CLOSED_STATUS = "Closed"


@dataclass(frozen=True)
class NegotiationDraft:
    """Candidate negotiation: persisted state merged with requested changes.
    Every non-key attribute is explicitly optional; None means absent."""
    contractor_id: int | None = None
    union_id: int | None = None
    contract_label: str | None = None
    status: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    commercial_contract_expiry: date | None = None
    total_headcount: int | None = None
    unionized_headcount: int | None = None
    unionized_percentage: Decimal | None = None

    @property
    def is_closed(self) -> bool:
        return self.status is not None and self.status.strip() == CLOSED_STATUS

    @classmethod
    def from_record(cls, record: Mapping[str, object]) -> NegotiationDraft:
        values = {f.name: record.get(f.name) for f in fields(cls)}
        pct = values["unionized_percentage"]
        if pct is not None and not isinstance(pct, Decimal):
            values["unionized_percentage"] = Decimal(str(pct))
        return cls(**values)  # type: ignore[arg-type]

    def to_record(self) -> dict[str, object]:
        return asdict(self)
