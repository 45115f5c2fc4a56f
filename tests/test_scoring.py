"""Tests for grid scoring and compliance rollups."""

import pytest

from workbook_app.documents.grid import GridRow, TqaSiteSection
from workbook_app.services.scoring import GridScore, compliance_overview, part_breakdown, rollup, score


def _rows(*cis, part="GEL 1.1"):
    return [GridRow(part_code=part, ci=ci) for ci in cis]


def test_score_counts_each_indicator():
    s = score(_rows(3, 3, 2, 1, None))
    assert s == GridScore(criteria=5, compliant=2, non_compliant=1, not_applicable=1)
    assert s.applicable == 3
    assert s.percent == pytest.approx(2 / 3)
    assert s.non_compliant_percent == pytest.approx(1 / 3)


def test_score_without_applicable_rows_is_zero():
    s = score(_rows(1, None, 1))
    assert s.applicable == 0
    assert s.percent == 0.0
    assert score([]).criteria == 0


def test_rollup_recomputes_percent_from_sums():
    total = rollup([score(_rows(3)), score(_rows(2, 2, 2))])
    assert total.criteria == 4
    assert total.compliant == 1
    assert total.percent == pytest.approx(0.25)


def test_part_breakdown_orders_numerically():
    rows = _rows(3, part="GEL 1.10") + _rows(2, part="GEL 1.9") + _rows(3, 3, part="GEL 1.2")
    codes = [code for code, _ in part_breakdown(rows)]
    assert codes == ["GEL 1.2", "GEL 1.9", "GEL 1.10"]
    assert dict(part_breakdown(rows))["GEL 1.2"].compliant == 2


def test_compliance_overview_labels_and_overall():
    sections = {
        "site_readiness": TqaSiteSection(rows=[{"ci": 3}, {"ci": 2}]),
        "risk": TqaSiteSection(rows=[{"ci": 3}, {"ci": 1}]),
    }
    result = compliance_overview(sections, {"site_readiness": "SITE READINESS (P2):"})
    assert [e["label"] for e in result["sections"]] == ["SITE READINESS (P2):", "risk"]
    assert result["sections"][0]["percent"] == pytest.approx(0.5)
    assert result["overall"]["criteria"] == 4
    assert result["overall"]["applicable"] == 3
    assert result["overall"]["percent"] == pytest.approx(2 / 3)
