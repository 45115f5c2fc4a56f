"""
Training Quality Assurance workbook document.

    guide, general        free-form pages (general keeps unknown keys)
    site_readiness        Part 2 grid
    equipment             Part 2 equipment register (blank rows, no catalog)
    facilitator           Part 3 grid
    learner               Part 4 grid
    admin_support         Part 5 grid
    risk                  Part 6 grid
"""

from datetime import date

from pydantic import ConfigDict, Field

from workbook_app.documents.base import DocumentModel, WorkbookDocument
from workbook_app.documents.grid import TqaEquipmentSection, TqaSiteSection

# Site-headed grids that contribute to the compliance overview, in page order
TQA_GRID_KEYS = ("site_readiness", "facilitator", "learner", "admin_support", "risk")


class TqaGuide(DocumentModel):
    notes: str | None = None


class TqaGeneral(DocumentModel):
    """General programme / site details. Unrecognised keys are kept."""

    model_config = ConfigDict(extra="allow")

    training_provider: str | None = None
    site: str | None = None
    start_date: date | None = None
    end_date: date | None = None

    programme_name: str | None = None
    programme_code: str | None = None
    unit_standard: str | None = None
    nqf_level: str | None = None
    credits: str | None = None

    qualification_course_title: str | None = None
    saqa_id: str | None = None
    qcto_id: str | None = None

    site_name_location: str | None = None
    target_learner_group: str | None = None
    site_representative_name: str | None = None
    qa_assessor_name: str | None = None
    qa_assessor_contact_number: str | None = None

    number_of_learners: int | None = None
    province: str | None = None
    site_assessment_date: date | None = None
    site_representative_contact_number: str | None = None

    seta_or_authority: str | None = None
    accreditation_number: str | None = None

    facilitator: str | None = None
    assessor: str | None = None
    moderator: str | None = None

    learner_count: int | None = None
    delivery_mode: str | None = None

    contact_person: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None

    notes: str | None = None


class TqaDocument(WorkbookDocument):
    guide: TqaGuide = Field(default_factory=TqaGuide)
    general: TqaGeneral = Field(default_factory=TqaGeneral)

    site_readiness: TqaSiteSection = Field(default_factory=TqaSiteSection)
    equipment: TqaEquipmentSection = Field(default_factory=TqaEquipmentSection)
    facilitator: TqaSiteSection = Field(default_factory=TqaSiteSection)
    learner: TqaSiteSection = Field(default_factory=TqaSiteSection)
    admin_support: TqaSiteSection = Field(default_factory=TqaSiteSection)
    risk: TqaSiteSection = Field(default_factory=TqaSiteSection)

    SECTION_MODELS = {
        "guide": TqaGuide,
        "general": TqaGeneral,
        "site_readiness": TqaSiteSection,
        "equipment": TqaEquipmentSection,
        "facilitator": TqaSiteSection,
        "learner": TqaSiteSection,
        "admin_support": TqaSiteSection,
        "risk": TqaSiteSection,
    }
