"""
Cross-section synchronisation for the Organisation Information workbook.

Qualifications → Pricing
    Pricing rows are keyed by qualification code (case-insensitive, a
    missing code is the empty string). Identity columns (name, type, NQF
    level, credits) always mirror the qualification; the pricing columns
    are the user's. Pricing rows whose qualification was removed are kept.

Current → Historical student statistics
    Historical rows are a snapshot of the current rows marked completed,
    with totals and outcome percentages recomputed. The snapshot is taken
    automatically only while the historical table is empty; ``refresh``
    rebuilds it on request.
"""

import logging
from decimal import ROUND_HALF_EVEN, Decimal

from workbook_app.documents.org_info import GenderBreakdown, PricingRow, StudentHistoricalRow

logger = logging.getLogger(__name__)

_HUNDRED = Decimal(100)
_TWO_PLACES = Decimal("0.01")


def _code_key(code):
    return (code or "").casefold()


def _copy_identity(row, qualification):
    row.qualification_name = qualification.name
    row.type = qualification.type
    row.nqf_level = qualification.nqf_level
    row.credits = qualification.credits


# ── Qualifications → Pricing ────────────────────────────────────────────────


def sync_pricing(qualifications, pricing) -> None:
    """Ensure one pricing row per qualification and refresh identity columns.

    Args:
        qualifications: QualificationsSection (source, unchanged).
        pricing:        PricingSection (updated in place).
    """
    by_code = {}
    for row in pricing.items:
        by_code.setdefault(_code_key(row.code), row)

    for qualification in qualifications.items:
        key = _code_key(qualification.code)
        row = by_code.get(key)
        if row is None:
            row = PricingRow(code=qualification.code)
            pricing.items.append(row)
            by_code[key] = row
        _copy_identity(row, qualification)


def apply_pricing_identity(qualifications, pricing) -> None:
    """Overwrite identity columns on posted pricing rows that match a qualification.

    No rows are added or removed; unmatched rows keep whatever was posted.
    """
    source = {}
    for qualification in qualifications.items:
        source.setdefault(_code_key(qualification.code), qualification)

    for row in pricing.items:
        qualification = source.get(_code_key(row.code))
        if qualification is not None:
            _copy_identity(row, qualification)


# ── Current → Historical ────────────────────────────────────────────────────


def _percent(part, total):
    if total <= 0:
        return None
    return (Decimal(part) * _HUNDRED / Decimal(total)).quantize(_TWO_PLACES, rounding=ROUND_HALF_EVEN)


def _breakdown(source):
    return GenderBreakdown(
        m=source.m or 0,
        md=source.md or 0,
        f=source.f or 0,
        fd=source.fd or 0,
    )


def build_historical_row(current_row) -> StudentHistoricalRow:
    row = StudentHistoricalRow(
        programme_type=current_row.programme_type,
        african=_breakdown(current_row.african),
        coloured=_breakdown(current_row.coloured),
        indian=_breakdown(current_row.indian),
        white=_breakdown(current_row.white),
    )
    total = sum(race.total() for race in row.races())
    sc = current_row.sc or 0
    pr = current_row.pr or 0
    di = current_row.di or 0

    row.total = total
    row.sc, row.pr, row.di = sc, pr, di
    row.sc_percent = _percent(sc, total)
    row.pr_percent = _percent(pr, total)
    row.di_percent = _percent(di, total)
    row.var = total - (sc + pr + di)
    return row


def build_historical_rows(current):
    return [build_historical_row(r) for r in current.rows if r.completed]


def _sync_period(historical, current):
    if current.period_from is not None:
        historical.period_from = current.period_from
    if current.period_to is not None:
        historical.period_to = current.period_to
    if current.months is not None:
        historical.months = current.months


def prefill_historical(document) -> bool:
    """Sync the reporting period and snapshot completed rows if none exist yet.

    Returns True when rows were prefilled.
    """
    historical = document.student_historical
    current = document.student_current
    _sync_period(historical, current)
    if historical.rows:
        return False
    historical.rows = build_historical_rows(current)
    return True


def refresh_historical(document) -> None:
    """Rebuild historical rows from completed current rows, discarding edits."""
    historical = document.student_historical
    current = document.student_current
    historical.rows = build_historical_rows(current)
    _sync_period(historical, current)
    logger.info(
        "Historical student rows rebuilt: %d rows",
        len(historical.rows),
        extra={"event_type": "historical_refreshed"},
    )
