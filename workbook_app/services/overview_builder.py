"""
Organisation Information overview (wizard step 2).

``build_overview`` returns a derived copy of the document with the overview
sections filled in from the editable sections. The copy is for display only
and is never persisted; the stored document is not modified.

Derivations:
    section1   years registered (from the accreditation date), board size,
               number of campuses (only where the user left them blank)
    section3   qualification tally by programme type, registration-status
               and province groupings
    section4   delivery modes inferred from each qualification's mode text
               (a flag the user already ticked is never cleared)
    section5   historical student totals
    section6   employee statistics by race (from employment positions)
    section7   current student totals
"""

import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from workbook_app.catalogs.org_info import PROGRAMME_TYPES_ORDERED, UNSPECIFIED
from workbook_app.documents.org_info import EmployeeStatRow, NamedCount, QualificationTally

_RACES = ("african", "coloured", "indian", "white")
_ONE_PLACE = Decimal("0.1")
_HUNDRED = Decimal(100)

# (substrings that must all appear, section4 flag); checked on lower-cased mode text
_DELIVERY_MODE_RULES = (
    (("full", "person"), "full_time_in_person"),
    (("part", "person"), "part_time_in_person"),
    (("distance",), "distance_learning"),
    (("blend",), "blended_learning"),
    (("online",), "online_e_learning"),
    (("e-learning",), "online_e_learning"),
    (("elearning",), "online_e_learning"),
    (("workplace",), "workplace_based"),
)


def build_overview(document, today=None):
    """Return a derived copy of ``document`` with the overview sections built."""
    today = today or datetime.now(timezone.utc).date()
    d = document.model_copy(deep=True)

    _fill_section1(d, today)
    d.section3.qualifications = tally_programme_types(d.qualifications.items)
    d.section3.registration_statuses = _group_counts(
        q.registered_accredited_status for q in d.qualifications.items
    )
    d.section3.active_provinces = _group_counts(s.province for s in d.campuses.sites)
    _derive_delivery_modes(d)
    if d.student_historical.rows:
        _fill_historical_totals(d)
    d.section6.employee_stats = build_employee_stats(d.employment.positions)
    if d.student_current.rows:
        _fill_current_totals(d)
    return d


# ── Section 1 ───────────────────────────────────────────────────────────────


def _fill_section1(d, today):
    s1 = d.section1
    since = s1.registered_accredited_since
    if not (s1.years_reg_accredited or "").strip() and since is not None:
        years = max(0, math.floor((today - since).days / 365.25))
        s1.years_reg_accredited = str(years)

    if not (s1.board_of_directors or "").strip():
        total = d.board.total_directors
        if total is None:
            total = len(d.board.directors)
        if total > 0:
            s1.board_of_directors = str(total)

    if not (s1.campuses_sites or "").strip():
        sites = len(d.campuses.sites)
        if sites > 0:
            s1.campuses_sites = str(sites)


# ── Section 3 ───────────────────────────────────────────────────────────────


def tally_programme_types(qualifications):
    """Count qualifications per programme type.

    Types are matched case-insensitively; the first spelling seen is shown.
    Canonical programme types come first in their fixed order, then any
    other types alphabetically. Only types that occur are listed.
    """
    counts = {}
    labels = {}
    for q in qualifications:
        t = q.type
        if not (t or "").strip():
            continue
        key = t.casefold()
        labels.setdefault(key, t)
        counts[key] = counts.get(key, 0) + 1

    ordered = [pt.casefold() for pt in PROGRAMME_TYPES_ORDERED if pt.casefold() in counts]
    extras = sorted((k for k in counts if k not in ordered), key=lambda k: labels[k])

    return [
        QualificationTally(name=labels[key], offered=counts[key] > 0, quantity=counts[key])
        for key in ordered + extras
    ]


def _group_counts(values):
    counts = {}
    for value in values:
        name = value.strip() if (value or "").strip() else UNSPECIFIED
        counts[name] = counts.get(name, 0) + 1
    return [
        NamedCount(name=name, count=counts[name])
        for name in sorted(counts, key=lambda n: (n.casefold(), n))
    ]


# ── Section 4 ───────────────────────────────────────────────────────────────


def _derive_delivery_modes(d):
    found = set()
    for q in d.qualifications.items:
        mode = (q.mode_of_delivery or "").lower()
        for needles, flag in _DELIVERY_MODE_RULES:
            if all(n in mode for n in needles):
                found.add(flag)
    for flag in found:
        setattr(d.section4, flag, True)


# ── Sections 5 and 7 ────────────────────────────────────────────────────────


def _sum(rows, attr):
    return sum(getattr(r, attr) or 0 for r in rows)


def _enrolled(rows):
    if any(r.total is not None for r in rows):
        return _sum(rows, "total")
    return sum(race.total() for r in rows for race in r.races())


def _gender_totals(rows):
    male = female = disabled = 0
    for r in rows:
        for race in r.races():
            male += race.m or 0
            female += race.f or 0
            disabled += (race.md or 0) + (race.fd or 0)
    return male, female, disabled


def _fill_outcomes(section, rows):
    section.enrolled = _enrolled(rows)
    section.successful_completion = _sum(rows, "sc")
    section.resubmission_reassessment = _sum(rows, "pr")
    section.drop_offs_incomplete = _sum(rows, "di")

    male, female, disabled = _gender_totals(rows)
    if male > 0:
        section.male = male
    if female > 0:
        section.female = female
    if disabled > 0:
        section.disabled = disabled


def _fill_historical_totals(d):
    s5 = d.section5
    historical = d.student_historical
    _fill_outcomes(s5, historical.rows)
    if s5.period_from is None:
        s5.period_from = historical.period_from
    if s5.period_to is None:
        s5.period_to = historical.period_to
    if s5.months is None:
        s5.months = historical.months


def _fill_current_totals(d):
    s7 = d.section7
    current = d.student_current
    _fill_outcomes(s7, current.rows)
    s7.in_process = _sum(current.rows, "ip")
    if not (s7.period_text or "").strip() and current.period_from and current.period_to:
        s7.period_text = f"{current.period_from:%Y-%m-%d} to {current.period_to:%Y-%m-%d}"
    if s7.months is None:
        s7.months = current.months


# ── Section 6 ───────────────────────────────────────────────────────────────


def _stat_percent(part, employ):
    if employ <= 0:
        return None
    value = (Decimal(part) * _HUNDRED / Decimal(employ)).quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)
    return min(max(value, Decimal(0)), _HUNDRED)


def _stat_row(label, m, md, f, fd):
    employ = m + md + f + fd
    disabled = md + fd
    return EmployeeStatRow(
        group=label,
        employ=employ,
        disabled=disabled,
        d_percent=_stat_percent(disabled, employ),
        male=m,
        male_percent=_stat_percent(m, employ),
        male_disabled=md,
        male_disabled_percent=_stat_percent(md, employ),
        female=f,
        female_percent=_stat_percent(f, employ),
        female_disabled=fd,
        female_disabled_percent=_stat_percent(fd, employ),
    )


def build_employee_stats(positions):
    """Total / African / Coloured / Indian / White rows; empty without positions."""
    if not positions:
        return []

    sums = {}
    for race in _RACES:
        counts = [getattr(p, race) for p in positions]
        sums[race] = (
            sum(c.m or 0 for c in counts),
            sum(c.md or 0 for c in counts),
            sum(c.f or 0 for c in counts),
            sum(c.fd or 0 for c in counts),
        )
    total = tuple(sum(values) for values in zip(*sums.values()))

    return [_stat_row("Total", *total)] + [
        _stat_row(race.capitalize(), *sums[race]) for race in _RACES
    ]
