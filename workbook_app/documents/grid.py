"""
Compliance grid sections.

A grid section is a list of parts (headed groups of criteria) and a list of
rows. Each row carries a compliance indicator:

    CI 3 = compliant   CI 2 = not compliant   CI 1 = not applicable   None = unscored

Quality Assurance grids (GEL, SPR, ...) carry an assessment header;
Training QA grids carry a site header and, for the equipment register,
per-item quantity columns.
"""

from datetime import date
from typing import ClassVar

from pydantic import Field, ValidationInfo, field_validator

from workbook_app.documents.base import DocumentModel, is_lenient

CI_COMPLIANT = 3
CI_NOT_COMPLIANT = 2
CI_NOT_APPLICABLE = 1
CI_VALUES = (CI_COMPLIANT, CI_NOT_COMPLIANT, CI_NOT_APPLICABLE)


class GridPart(DocumentModel):
    part_code: str = ""
    title: str | None = None
    description: str | None = None


class GridRow(DocumentModel):
    part_code: str = ""
    code: str | None = None
    requirement: str | None = None
    action: str | None = None
    ci: int | None = None
    corrective_action: str | None = None
    assigned_to: str | None = None
    close_out_date: date | None = None
    closed_out: bool = False
    verified_by: str | None = None

    @field_validator("ci", mode="before")
    @classmethod
    def _check_ci(cls, value, info: ValidationInfo):
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        try:
            ci = int(value)
        except (TypeError, ValueError):
            ci = None
        if ci in CI_VALUES and str(value).strip() == str(ci):
            return ci
        if is_lenient(info):
            return None
        raise ValueError("ci must be 1, 2, 3 or empty")


class GridSection(DocumentModel):
    ROW_MODEL: ClassVar[type[GridRow]] = GridRow

    parts: list[GridPart] = Field(default_factory=list)
    rows: list[GridRow] = Field(default_factory=list)


# ── Quality Assurance ───────────────────────────────────────────────────────


class QaGridSection(GridSection):
    """One of the nine Quality Assurance assessment categories."""

    organisation: str | None = None
    department: str | None = None
    appetd_reg_no: str | None = None
    assessment_date: date | None = None
    ca_verification: date | None = None
    reassessment_date: date | None = None


# ── Training QA ─────────────────────────────────────────────────────────────


class TqaRow(GridRow):
    # Equipment register columns (Part 2 equipment only)
    item: str | None = None
    specification: str | None = None
    allocation: str | None = None
    ratio_qty: str | None = None
    pp: str | None = None
    qty_req: int | None = None
    qty_avail: int | None = None
    variance: int | None = None
    rate: int | None = None


class TqaGridSection(DocumentModel):
    ROW_MODEL: ClassVar[type[GridRow]] = TqaRow

    parts: list[GridPart] = Field(default_factory=list)
    rows: list[TqaRow] = Field(default_factory=list)


class TqaSiteSection(TqaGridSection):
    """Site-headed Training QA grid (parts 2 to 6, except equipment)."""

    training_provider: str | None = None
    site: str | None = None
    assessment_date: date | None = None


class TqaEquipmentSection(TqaGridSection):
    training_provider: str | None = None
    qualification_title: str | None = None
    number_of_learners: int | None = None
