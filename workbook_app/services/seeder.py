"""
Section seeding: idempotent population of grids and repeating lists.

Rules:
    - A grid is seeded from its catalog only while it has no rows; once any
      row exists (even one the user edited) the catalog is never re-applied.
    - Training QA grids also stay untouched once they have parts.
    - Repeating editors (directors, positions, sites, qualifications) always
      show at least one blank row.

Every ``ensure_*`` returns True when it changed the section, so the caller
knows whether the document needs saving.
"""

import logging

from workbook_app.catalogs.org_info import DEFAULT_APPROVALS
from workbook_app.catalogs.quality_assurance import QA_CATALOGS
from workbook_app.catalogs.training_qa import EQUIPMENT_BLANK_ROWS, TQA_CATALOGS
from workbook_app.documents.grid import GridPart, TqaRow
from workbook_app.documents.org_info import ApprovalRow

logger = logging.getLogger(__name__)


def ensure_seed(section, catalog, *, require_no_parts=False) -> bool:
    """Append the catalog's parts and rows to an unseeded grid section."""
    if section.rows:
        return False
    if require_no_parts and section.parts:
        return False

    row_model = section.ROW_MODEL
    section.parts.extend(
        GridPart(part_code=code, title=title, description=description)
        for code, title, description in catalog.parts
    )
    section.rows.extend(
        row_model(part_code=part_code, code=code, **{catalog.row_text_field: text})
        for part_code, code, text in catalog.rows
    )
    logger.info(
        "Seeded %s: %d parts, %d rows",
        catalog.key, len(catalog.parts), len(catalog.rows),
        extra={"event_type": "section_seeded"},
    )
    return True


def ensure_blank_rows(section, count=EQUIPMENT_BLANK_ROWS) -> bool:
    """Give the equipment register its blank rows, once."""
    if section.parts or section.rows:
        return False
    section.rows.extend(TqaRow() for _ in range(count))
    return True


def ensure_default_approvals(section1) -> bool:
    if section1.approvals:
        return False
    section1.approvals.extend(
        ApprovalRow(name=name, is_other=is_other) for name, is_other in DEFAULT_APPROVALS
    )
    return True


def ensure_at_least_one(rows, row_model) -> bool:
    if rows:
        return False
    rows.append(row_model())
    return True


# ── Whole-document helpers ──────────────────────────────────────────────────


def seed_quality_assurance(document, key) -> bool:
    return ensure_seed(document.get_section(key), QA_CATALOGS[key])


def seed_training_qa(document, key) -> bool:
    if key == "equipment":
        return ensure_blank_rows(document.equipment)
    return ensure_seed(document.get_section(key), TQA_CATALOGS[key], require_no_parts=True)
