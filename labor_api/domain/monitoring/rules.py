# labor_api/domain/monitoring/rules.py
from __future__ import annotations

from datetime import date

from labor_api.domain.integrity.errors import ValidationError


def resolve_start_date(requested: date | None, negotiation_start: date | None) -> date:
    """A monitoring record without its own start date follows the start date of
    the negotiation it belongs to."""
    if requested is not None:
        return requested
    if negotiation_start is not None:
        return negotiation_start
    raise ValidationError("startDate is required: negotiation has no startDate to default to")
