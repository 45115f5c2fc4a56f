"""
Quality Assurance workbook document.

Pages 1-4 are free-form (overview, guide, summary, institution info);
pages 5-13 are the nine assessment grids, each seeded from its catalog.
"""

from datetime import date, datetime

from pydantic import Field

from workbook_app.documents.base import DocumentModel, WorkbookDocument
from workbook_app.documents.grid import QaGridSection

# Grid section keys in wizard order (steps 5..13)
QA_GRID_KEYS = ("gel", "spr", "tla", "lsw", "sce", "rle", "qmi", "sec", "lcr")


class QaOverview(DocumentModel):
    notes: str | None = None


class QaGuide(DocumentModel):
    pass


class QaSummary(DocumentModel):
    high_level_summary: str | None = None


class QaInfo(DocumentModel):
    appetd_reg_no: str | None = None
    trading_name: str | None = None
    organisation_type: str | None = None
    site_department: str | None = None
    street_address1: str | None = None
    street_address2: str | None = None
    town: str | None = None
    suburb: str | None = None
    province: str | None = None
    zip: str | None = None
    contact_person: str | None = None
    contact_number: str | None = None
    email: str | None = None

    # Assessment panel
    assessment_date: date | None = None
    organisation_info: str | None = None
    accreditation_status: str | None = None
    supporting_docs_submitted: str | None = None
    ca_implementation_deadline_days: int | None = None
    reassessment_deadline_days: int | None = None
    ca_verification_date: date | None = None
    reassessment_date: date | None = None

    assessor_full_name: str | None = None
    assessor_organisation: str | None = None
    assessor_contact_number: str | None = None
    assessor_email: str | None = None

    # Signatures (data URLs) and when they were captured
    org_representative_signature: str | None = None
    assessor_signature: str | None = None
    org_signed_at_utc: datetime | None = None
    assessor_signed_at_utc: datetime | None = None


class QaDocument(WorkbookDocument):
    overview: QaOverview = Field(default_factory=QaOverview)
    guide: QaGuide = Field(default_factory=QaGuide)
    summary: QaSummary = Field(default_factory=QaSummary)
    info: QaInfo = Field(default_factory=QaInfo)

    gel: QaGridSection = Field(default_factory=QaGridSection)
    spr: QaGridSection = Field(default_factory=QaGridSection)
    tla: QaGridSection = Field(default_factory=QaGridSection)
    lsw: QaGridSection = Field(default_factory=QaGridSection)
    sce: QaGridSection = Field(default_factory=QaGridSection)
    rle: QaGridSection = Field(default_factory=QaGridSection)
    qmi: QaGridSection = Field(default_factory=QaGridSection)
    sec: QaGridSection = Field(default_factory=QaGridSection)
    lcr: QaGridSection = Field(default_factory=QaGridSection)

    SECTION_MODELS = {
        "overview": QaOverview,
        "guide": QaGuide,
        "summary": QaSummary,
        "info": QaInfo,
        **{key: QaGridSection for key in QA_GRID_KEYS},
    }
