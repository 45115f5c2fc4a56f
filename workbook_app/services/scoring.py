"""
Grid scoring.

Counts compliance indicators over a grid's rows:

    criteria        all rows
    compliant       CI 3
    non_compliant   CI 2
    not_applicable  CI 1
    applicable      compliant + non_compliant

``percent`` is compliant / applicable (0.0 when nothing is applicable), so
rows marked not-applicable or left unscored never pull a score down.
"""

from collections import OrderedDict
from typing import NamedTuple

from workbook_app.documents.grid import CI_COMPLIANT, CI_NOT_APPLICABLE, CI_NOT_COMPLIANT


class GridScore(NamedTuple):
    criteria: int
    compliant: int
    non_compliant: int
    not_applicable: int

    @property
    def applicable(self) -> int:
        return self.compliant + self.non_compliant

    @property
    def percent(self) -> float:
        return self.compliant / self.applicable if self.applicable else 0.0

    @property
    def non_compliant_percent(self) -> float:
        return self.non_compliant / self.applicable if self.applicable else 0.0

    def to_dict(self):
        return {
            "criteria": self.criteria,
            "compliant": self.compliant,
            "non_compliant": self.non_compliant,
            "not_applicable": self.not_applicable,
            "applicable": self.applicable,
            "percent": self.percent,
            "non_compliant_percent": self.non_compliant_percent,
        }


def score(rows) -> GridScore:
    rows = list(rows or [])
    return GridScore(
        criteria=len(rows),
        compliant=sum(1 for r in rows if r.ci == CI_COMPLIANT),
        non_compliant=sum(1 for r in rows if r.ci == CI_NOT_COMPLIANT),
        not_applicable=sum(1 for r in rows if r.ci == CI_NOT_APPLICABLE),
    )


def rollup(scores) -> GridScore:
    """Sum several grid scores; the percentage is recomputed from the sums."""
    scores = list(scores)
    return GridScore(
        criteria=sum(s.criteria for s in scores),
        compliant=sum(s.compliant for s in scores),
        non_compliant=sum(s.non_compliant for s in scores),
        not_applicable=sum(s.not_applicable for s in scores),
    )


def _part_sort_key(part_code):
    # "GEL 1.10" sorts after "GEL 1.9"
    prefix, _, number = (part_code or "").rpartition(" ")
    pieces = []
    for piece in number.split("."):
        pieces.append((0, int(piece), "") if piece.isdigit() else (1, 0, piece))
    return prefix, pieces


def part_breakdown(rows):
    """Score each part_code group; returns [(part_code, GridScore)] ordered by part."""
    groups = OrderedDict()
    for row in rows or []:
        groups.setdefault(row.part_code or "", []).append(row)
    return [
        (code, score(groups[code]))
        for code in sorted(groups, key=_part_sort_key)
    ]


def compliance_overview(sections, labels):
    """Per-section scores plus an overall rollup, for summary pages.

    Args:
        sections: mapping of section key → grid section, in display order.
        labels:   mapping of section key → display label.
    """
    entries = []
    scores = []
    for key, section in sections.items():
        s = score(section.rows)
        scores.append(s)
        entries.append({"key": key, "label": labels.get(key, key), **s.to_dict()})
    return {"sections": entries, "overall": rollup(scores).to_dict()}
