"""
Organisation Information workbook document.

Sections (wizard step in brackets):
    section1             administrative / head-office details + approvals   [3]
    section2             overview marker, no inputs                          [2]
    section3             qualification / registration / province tallies   (derived)
    section4             delivery-mode flags                               (derived)
    section5             historical student totals                         (derived)
    section6             employee statistics                               (derived)
    section7             current student totals                            (derived)
    section8             notes
    board                board of directors                                  [4]
    employment           staff by position, race and gender                  [5]
    campuses             campus / site register                              [6]
    qualifications       qualifications and courses offered                  [7]
    pricing              per-qualification pricing (identity from [7])       [8]
    student_historical   completed cohorts (prefilled from [10])             [9]
    student_current      current cohorts                                     [10]
"""

from datetime import date
from decimal import Decimal

from pydantic import Field, ValidationInfo, field_validator

from workbook_app.documents.base import DocumentModel, WorkbookDocument, is_lenient

APPROVAL_EXPIRED = 1
APPROVAL_PENDING = 2
APPROVAL_CURRENT = 3


# ── Section 1: administrative / head office ─────────────────────────────────


class ApprovalRow(DocumentModel):
    name: str = ""
    is_other: bool = False
    other_specify: str | None = None
    # 1 = expired / revoked, 2 = pending, 3 = current
    status: int | None = None
    date: str | None = None
    future: bool = False

    @field_validator("status", mode="before")
    @classmethod
    def _check_status(cls, value, info: ValidationInfo):
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        if value in (APPROVAL_EXPIRED, APPROVAL_PENDING, APPROVAL_CURRENT):
            return value
        if isinstance(value, str) and value.strip() in ("1", "2", "3"):
            return int(value)
        if is_lenient(info):
            return None
        raise ValueError("status must be 1, 2, 3 or empty")


class Section1(DocumentModel):
    appetd_reg_no: str | None = None
    years_reg_accredited: str | None = None
    legal_registered_name: str | None = None
    trading_name: str | None = None
    company_npc_npo_reg_no: str | None = None
    bbbee_level: str | None = None
    registered_accredited_since: date | None = None
    type_of_institution: str | None = None
    other_specify: str | None = None

    street_address1: str | None = None
    street_address2: str | None = None
    town_city: str | None = None
    province: str | None = None
    local_municipality: str | None = None
    post_code: str | None = None
    district_municipality: str | None = None

    postal_address: str | None = None
    postal_town_city: str | None = None
    postal_province: str | None = None
    postal_post_code: str | None = None

    general_contact_no: str | None = None
    general_email: str | None = None
    website_url: str | None = None

    approvals: list[ApprovalRow] = Field(default_factory=list)

    board_of_directors: str | None = None
    campuses_sites: str | None = None


class Section2(DocumentModel):
    pass


# ── Derived overview sections ───────────────────────────────────────────────


class QualificationTally(DocumentModel):
    name: str = ""
    offered: bool = False
    quantity: int | None = None


class NamedCount(DocumentModel):
    name: str = ""
    count: int | None = None


class Section3(DocumentModel):
    qualifications: list[QualificationTally] = Field(default_factory=list)
    registration_statuses: list[NamedCount] = Field(default_factory=list)
    active_provinces: list[NamedCount] = Field(default_factory=list)


class Section4(DocumentModel):
    full_time_in_person: bool = False
    part_time_in_person: bool = False
    distance_learning: bool = False
    blended_learning: bool = False
    online_e_learning: bool = False
    workplace_based: bool = False
    other: bool = False
    other_text: str | None = None


class Section5(DocumentModel):
    period_from: date | None = None
    period_to: date | None = None
    months: int | None = None
    enrolled: int | None = None
    male: int | None = None
    female: int | None = None
    disabled: int | None = None
    successful_completion: int | None = None
    resubmission_reassessment: int | None = None
    drop_offs_incomplete: int | None = None


class EmployeeStatRow(DocumentModel):
    group: str = ""
    employ: int | None = None
    disabled: int | None = None
    d_percent: Decimal | None = None
    male: int | None = None
    male_percent: Decimal | None = None
    male_disabled: int | None = None
    male_disabled_percent: Decimal | None = None
    female: int | None = None
    female_percent: Decimal | None = None
    female_disabled: int | None = None
    female_disabled_percent: Decimal | None = None


class Section6(DocumentModel):
    employee_stats: list[EmployeeStatRow] = Field(default_factory=list)


class Section7(DocumentModel):
    period_text: str | None = None
    months: int | None = None
    enrolled: int | None = None
    male: int | None = None
    female: int | None = None
    disabled: int | None = None
    in_process: int | None = None
    successful_completion: int | None = None
    resubmission_reassessment: int | None = None
    drop_offs_incomplete: int | None = None


class Section8(DocumentModel):
    notes: str | None = None


# ── Board of directors ──────────────────────────────────────────────────────


class DirectorRow(DocumentModel):
    surname: str | None = None
    first_name: str | None = None
    second_name: str | None = None
    title: str | None = None
    reference: str | None = None
    appointed: date | None = None
    designation: str | None = None
    gender: str | None = None
    ethnic: str | None = None

    disability: bool = False
    gov_sec_interest: bool = False
    prev_employ_by_gov: bool = False
    clear_credit_score: bool = False
    clear_criminal_record: bool = False
    valid_qualifications: bool = False
    suspension_from_csd: bool = False
    judgements_issued_by_court: bool = False


class BoardSection(DocumentModel):
    total_directors: int | None = None
    directors: list[DirectorRow] = Field(default_factory=list)


# ── Employment ──────────────────────────────────────────────────────────────


class GenderBreakdown(DocumentModel):
    """Male, male disabled, female, female disabled."""

    m: int | None = None
    md: int | None = None
    f: int | None = None
    fd: int | None = None

    def total(self) -> int:
        return (self.m or 0) + (self.md or 0) + (self.f or 0) + (self.fd or 0)


class RaceTotals(DocumentModel):
    african: int | None = None
    coloured: int | None = None
    indian: int | None = None
    white: int | None = None
    total: int | None = None


class EmploymentSummary(DocumentModel):
    total_male: RaceTotals = Field(default_factory=RaceTotals)
    male_disabled: RaceTotals = Field(default_factory=RaceTotals)
    total_female: RaceTotals = Field(default_factory=RaceTotals)
    female_disabled: RaceTotals = Field(default_factory=RaceTotals)


class EmploymentPosition(DocumentModel):
    position_function: str | None = None
    emp_type: str | None = None
    african: GenderBreakdown = Field(default_factory=GenderBreakdown)
    coloured: GenderBreakdown = Field(default_factory=GenderBreakdown)
    indian: GenderBreakdown = Field(default_factory=GenderBreakdown)
    white: GenderBreakdown = Field(default_factory=GenderBreakdown)
    totals: GenderBreakdown = Field(default_factory=GenderBreakdown)


class EmploymentSection(DocumentModel):
    summary: EmploymentSummary = Field(default_factory=EmploymentSummary)
    positions: list[EmploymentPosition] = Field(default_factory=list)


# ── Campuses / qualifications / pricing ─────────────────────────────────────


class CampusSiteRow(DocumentModel):
    site_id: str | None = None
    campus_site_name: str | None = None
    street_address1: str | None = None
    street_address2: str | None = None
    city_town: str | None = None
    postal_code: str | None = None
    province: str | None = None
    gps_latitude: str | None = None
    gps_longitude: str | None = None
    district_municipality: str | None = None
    local_municipality: str | None = None
    contact_no: str | None = None
    contact_email: str | None = None


class CampusesSection(DocumentModel):
    sites: list[CampusSiteRow] = Field(default_factory=list)


class QualificationCourseRow(DocumentModel):
    code: str | None = None
    type: str | None = None
    saqa_id: str | None = None
    qualification_code: str | None = None
    learnership_code: str | None = None
    ofo_code: str | None = None
    name: str | None = None
    mode_of_delivery: str | None = None
    nqf_level: str | None = None
    credits: int | None = None
    saqa_field_of_study: str | None = None
    cesm: str | None = None
    registered_accredited_status: str | None = None
    status_date: date | None = None
    suitably_qualified_staff: bool | None = None
    student_staff_ratio: str | None = None


class QualificationsSection(DocumentModel):
    items: list[QualificationCourseRow] = Field(default_factory=list)


class PricingRow(DocumentModel):
    # Identity fields, copied from the matching qualification
    code: str | None = None
    qualification_name: str | None = None
    type: str | None = None
    nqf_level: str | None = None
    credits: int | None = None

    duration_unit: str | None = None
    duration: Decimal | None = None
    notional_hours: int | None = None

    registration: Decimal | None = None
    admin: Decimal | None = None
    facilitation: Decimal | None = None
    train_materials: Decimal | None = None
    ppe_tools_equipment: Decimal | None = None
    overheads: Decimal | None = None
    assessment: Decimal | None = None
    re_assess: Decimal | None = None
    moderation: Decimal | None = None
    other: Decimal | None = None
    certification: Decimal | None = None

    total: Decimal | None = None
    ave_per_notional_hour: Decimal | None = None


class PricingSection(DocumentModel):
    items: list[PricingRow] = Field(default_factory=list)


# ── Student statistics ──────────────────────────────────────────────────────


class StudentHistoricalRow(DocumentModel):
    programme_type: str | None = None
    african: GenderBreakdown = Field(default_factory=GenderBreakdown)
    coloured: GenderBreakdown = Field(default_factory=GenderBreakdown)
    indian: GenderBreakdown = Field(default_factory=GenderBreakdown)
    white: GenderBreakdown = Field(default_factory=GenderBreakdown)

    total: int | None = None
    sc: int | None = None
    sc_percent: Decimal | None = None
    pr: int | None = None
    pr_percent: Decimal | None = None
    di: int | None = None
    di_percent: Decimal | None = None
    var: int | None = None

    def races(self):
        return (self.african, self.coloured, self.indian, self.white)


class StudentCurrentRow(StudentHistoricalRow):
    completed: bool = False
    ip: int | None = None
    ip_percent: Decimal | None = None


class StudentHistoricalSection(DocumentModel):
    period_from: date | None = None
    period_to: date | None = None
    months: int | None = None
    rows: list[StudentHistoricalRow] = Field(default_factory=list)


class StudentCurrentSection(DocumentModel):
    period_from: date | None = None
    period_to: date | None = None
    months: int | None = None
    rows: list[StudentCurrentRow] = Field(default_factory=list)


# ── Document root ───────────────────────────────────────────────────────────


class OrgInfoDocument(WorkbookDocument):
    section1: Section1 = Field(default_factory=Section1)
    section2: Section2 = Field(default_factory=Section2)
    section3: Section3 = Field(default_factory=Section3)
    section4: Section4 = Field(default_factory=Section4)
    section5: Section5 = Field(default_factory=Section5)
    section6: Section6 = Field(default_factory=Section6)
    section7: Section7 = Field(default_factory=Section7)
    section8: Section8 = Field(default_factory=Section8)

    board: BoardSection = Field(default_factory=BoardSection)
    employment: EmploymentSection = Field(default_factory=EmploymentSection)
    campuses: CampusesSection = Field(default_factory=CampusesSection)
    qualifications: QualificationsSection = Field(default_factory=QualificationsSection)
    pricing: PricingSection = Field(default_factory=PricingSection)
    student_historical: StudentHistoricalSection = Field(default_factory=StudentHistoricalSection)
    student_current: StudentCurrentSection = Field(default_factory=StudentCurrentSection)

    SECTION_MODELS = {
        "section1": Section1,
        "section2": Section2,
        "section3": Section3,
        "section4": Section4,
        "section5": Section5,
        "section6": Section6,
        "section7": Section7,
        "section8": Section8,
        "board": BoardSection,
        "employment": EmploymentSection,
        "campuses": CampusesSection,
        "qualifications": QualificationsSection,
        "pricing": PricingSection,
        "student_historical": StudentHistoricalSection,
        "student_current": StudentCurrentSection,
    }
