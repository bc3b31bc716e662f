# labor_api/domain/negotiation/rules.py
#
# Pure core for negotiation consistency: no IO, takes a draft, returns a draft
# with derived values or raises ValidationError. Rules run in a fixed order and
# the first failure wins.
from __future__ import annotations

from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal

from labor_api.domain.integrity.errors import ValidationError

from .entities import NegotiationDraft
from .terms import add_months, months_between

MAX_TERM_MONTHS = 36

_ONE = Decimal("1")
_CENT = Decimal("0.01")
_HUNDRED = Decimal("100")


def headcount_from_percentage(total: int, percentage: Decimal) -> int:
    """round(total * pct / 100), half away from zero."""
    return int((Decimal(total) * percentage / _HUNDRED).quantize(_ONE, rounding=ROUND_HALF_UP))


def percentage_from_headcount(total: int, unionized: int) -> Decimal:
    """unionized / total as a 2-decimal percentage. Zero headcount gives 0."""
    if total == 0:
        return Decimal("0.00")
    return (Decimal(unionized) / Decimal(total) * _HUNDRED).quantize(_CENT, rounding=ROUND_HALF_UP)


def fill_closed_end_date(draft: NegotiationDraft) -> NegotiationDraft:
    if draft.is_closed and draft.start_date is not None and draft.end_date is None:
        return replace(draft, end_date=add_months(draft.start_date, MAX_TERM_MONTHS))
    return draft


def check_dates(draft: NegotiationDraft) -> None:
    start, end = draft.start_date, draft.end_date
    if start is not None and end is not None:
        if end < start:
            raise ValidationError("endDate before startDate")
        term = months_between(start, end)
        # a 36-month term may run up to the same day-of-month, not past it
        if term > MAX_TERM_MONTHS or (
            term == MAX_TERM_MONTHS and end > add_months(start, MAX_TERM_MONTHS)
        ):
            raise ValidationError(f"term exceeds {MAX_TERM_MONTHS} months")

    expiry = draft.commercial_contract_expiry
    if end is not None and expiry is not None and end > expiry:
        raise ValidationError("endDate exceeds commercial expiry")


def check_headcounts(draft: NegotiationDraft) -> None:
    total, unionized, pct = (
        draft.total_headcount,
        draft.unionized_headcount,
        draft.unionized_percentage,
    )
    if total is not None and total < 0:
        raise ValidationError("totalHeadcount must be >= 0")
    if unionized is not None and unionized < 0:
        raise ValidationError("unionizedHeadcount must be >= 0")
    if pct is not None and not (Decimal("0") <= pct <= _HUNDRED):
        raise ValidationError("unionizedPercentage must be between 0 and 100")
    if total is not None and unionized is not None and unionized > total:
        raise ValidationError("unionizedHeadcount exceeds totalHeadcount")


def derive_headcounts(draft: NegotiationDraft) -> NegotiationDraft:
    total, unionized, pct = (
        draft.total_headcount,
        draft.unionized_headcount,
        draft.unionized_percentage,
    )
    if total is None:
        return draft
    if pct is not None and unionized is None:
        return replace(draft, unionized_headcount=headcount_from_percentage(total, pct))
    if unionized is not None and pct is None:
        return replace(draft, unionized_percentage=percentage_from_headcount(total, unionized))
    if unionized is not None and pct is not None:
        expected = headcount_from_percentage(total, pct)
        if expected != unionized:
            raise ValidationError(
                f"inconsistent headcount/percentage: expected {expected} unionized, got {unionized}"
            )
    return draft


def validate_negotiation(draft: NegotiationDraft) -> NegotiationDraft:
    """Auto-fill, check and derive. Returns the draft with derived fields applied.

    Raises:
        ValidationError: with the failing rule's description.
    """
    draft = fill_closed_end_date(draft)
    check_dates(draft)
    check_headcounts(draft)
    return derive_headcounts(draft)
