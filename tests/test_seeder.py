"""Tests for catalog seeding.

Coverage:
  1. Catalog part / row counts per category
  2. Seeding fills an empty grid and is idempotent
  3. A grid with any row (even edited) is never re-seeded
  4. Training QA: parts alone block re-seeding; equipment gets blank rows
  5. Default approvals and at-least-one-row editors
"""

import pytest

from workbook_app.catalogs.quality_assurance import QA_CATALOGS
from workbook_app.catalogs.training_qa import EQUIPMENT_BLANK_ROWS, TQA_CATALOGS
from workbook_app.documents.grid import GridPart, TqaRow
from workbook_app.documents.org_info import DirectorRow, OrgInfoDocument
from workbook_app.documents.quality_assurance import QaDocument
from workbook_app.documents.training_qa import TqaDocument
from workbook_app.services import seeder

QA_COUNTS = {
    "gel": (7, 33),
    "spr": (6, 26),
    "tla": (8, 45),
    "lsw": (8, 47),
    "sce": (7, 43),
    "rle": (5, 40),
    "qmi": (7, 37),
    "sec": (5, 29),
    "lcr": (5, 29),
}

TQA_COUNTS = {
    "site_readiness": (6, 25),
    "facilitator": (6, 19),
    "learner": (5, 13),
    "admin_support": (8, 23),
    "risk": (3, 7),
}


@pytest.mark.parametrize("key,counts", QA_COUNTS.items())
def test_qa_catalog_counts(key, counts):
    catalog = QA_CATALOGS[key]
    assert (len(catalog.parts), len(catalog.rows)) == counts


@pytest.mark.parametrize("key,counts", TQA_COUNTS.items())
def test_tqa_catalog_counts(key, counts):
    catalog = TQA_CATALOGS[key]
    assert (len(catalog.parts), len(catalog.rows)) == counts


def test_catalog_rows_reference_existing_parts():
    for catalog in list(QA_CATALOGS.values()) + list(TQA_CATALOGS.values()):
        part_codes = {code for code, _, _ in catalog.parts}
        assert {part for part, _, _ in catalog.rows} <= part_codes, catalog.key


class TestQualityAssuranceSeeding:
    def test_seed_fills_empty_grid(self):
        doc = QaDocument.create_default()
        assert seeder.seed_quality_assurance(doc, "gel") is True
        assert len(doc.gel.parts) == 7
        assert len(doc.gel.rows) == 33
        first = doc.gel.rows[0]
        assert first.part_code == "GEL 1.1"
        assert first.action
        assert first.ci is None

    def test_seed_is_idempotent(self):
        doc = QaDocument.create_default()
        seeder.seed_quality_assurance(doc, "spr")
        assert seeder.seed_quality_assurance(doc, "spr") is False
        assert len(doc.spr.rows) == 26
        assert len(doc.spr.parts) == 6

    def test_edited_grid_never_reseeded(self):
        doc = QaDocument.create_default()
        seeder.seed_quality_assurance(doc, "gel")
        doc.gel.rows = doc.gel.rows[:2]
        doc.gel.rows[0].ci = 3
        assert seeder.seed_quality_assurance(doc, "gel") is False
        assert len(doc.gel.rows) == 2


class TestTrainingQaSeeding:
    def test_seed_uses_requirement_text(self):
        doc = TqaDocument.create_default()
        seeder.seed_training_qa(doc, "site_readiness")
        assert len(doc.site_readiness.rows) == 25
        assert doc.site_readiness.rows[0].requirement
        assert doc.site_readiness.rows[0].action is None
        assert isinstance(doc.site_readiness.rows[0], TqaRow)

    def test_parts_without_rows_block_seeding(self):
        doc = TqaDocument.create_default()
        doc.risk.parts.append(GridPart(part_code="6.1", title="Custom"))
        assert seeder.seed_training_qa(doc, "risk") is False
        assert doc.risk.rows == []

    def test_equipment_gets_blank_rows_once(self):
        doc = TqaDocument.create_default()
        assert seeder.seed_training_qa(doc, "equipment") is True
        assert len(doc.equipment.rows) == EQUIPMENT_BLANK_ROWS
        assert seeder.seed_training_qa(doc, "equipment") is False
        assert len(doc.equipment.rows) == EQUIPMENT_BLANK_ROWS


class TestOrgInfoSeeding:
    def test_default_approvals(self):
        doc = OrgInfoDocument.create_default()
        assert seeder.ensure_default_approvals(doc.section1) is True
        assert len(doc.section1.approvals) == 10
        assert doc.section1.approvals[-1].is_other is True
        assert seeder.ensure_default_approvals(doc.section1) is False

    def test_at_least_one_row(self):
        doc = OrgInfoDocument.create_default()
        assert seeder.ensure_at_least_one(doc.board.directors, DirectorRow) is True
        assert seeder.ensure_at_least_one(doc.board.directors, DirectorRow) is False
        assert len(doc.board.directors) == 1
