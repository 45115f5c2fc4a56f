"""
Training Quality Assurance readiness catalogs (Parts 2 to 6).

Part 2 also has an equipment register, which has no catalog: it starts
with ``EQUIPMENT_BLANK_ROWS`` empty rows for the provider to fill in.
"""

from workbook_app.catalogs import SectionCatalog

EQUIPMENT_BLANK_ROWS = 10


SITE_READINESS = SectionCatalog(
    key="site_readiness",
    title="Site Readiness",
    parts=(
        ("2.1", "Accessibility", None),
        ("2.2", "Health & Safety", None),
        ("2.3", "Facilities", None),
        ("2.4", "Cleanliness", None),
        ("2.5", "Internet/Connectivity", None),
        ("2.6", "Equipment", None),
    ),
    rows=(
        ("2.1", "2.1.1", "Venue accessible to all (including people with disabilities)"),
        ("2.2", "2.2.1", "Emergency exits clearly marked & accessible"),
        ("2.2", "2.2.2", "Emergency evacuation plan available & visible"),
        ("2.2", "2.2.3", "List of emergency contacts & numbers is available"),
        ("2.2", "2.2.4", "Fire extinguishers available (valid service dates)"),
        ("2.2", "2.2.5", "First aid kit available (contents & register checked)"),
        ("2.2", "2.2.6", "Training area free from hazards & safe for all"),
        ("2.2", "2.2.7", "Where required, PPE is available & use enforced"),
        ("2.3", "2.3.1", "Adequate seating/work areas (venue supports the training type)"),
        ("2.3", "2.3.2", "Adequate toilets (accessible, clean, water, toilet paper)"),
        ("2.3", "2.3.3", "Sufficient lighting & ventilation"),
        ("2.3", "2.3.4", "Reasonable noise levels (internal/external)"),
        ("2.3", "2.3.5", "Power points & electrical switches are working"),
        ("2.3", "2.3.6", "Power points not overloaded (no excessive extension cords)"),
        ("2.4", "2.4.1", "Venue is clean & hygienic"),
        ("2.4", "2.4.2", "Refuse/waste bins available (clean & emptied regularly)"),
        ("2.4", "2.4.3", "No smoking allowed (designated smoking areas with ashtrays)"),
        ("2.4", "2.4.4", "Separate area(s) provided for breaks & refreshments"),
        ("2.5", "2.5.1", "Wi-Fi or offline e-content available (if applicable)"),
        ("2.6", "2.6.1", "Equipment checklist (p2_equip) completed"),
        ("2.6", "2.6.2", "All equipment requirements & quantities are met"),
        ("2.6", "2.6.3", "All equipment is in good condition & fit for purpose"),
        ("2.6", "2.6.4", "All electrical/gas equipment tested & functioning correctly"),
        ("2.6", "2.6.5", "Equipment meets safety requirements & is free from hazards"),
        ("2.6", "2.6.6", "Presentation equipment available (projectors, laptops, whiteboards, etc.)"),
    ),
    row_text_field="requirement",
)


FACILITATOR = SectionCatalog(
    key="facilitator",
    title="Facilitator Readiness",
    parts=(
        ("3.1", "Qualifications", None),
        ("3.2", "Teaching Skills", None),
        ("3.3", "Course Material & Structure", None),
        ("3.4", "Venue & Equipment", None),
        ("3.5", "Learners", None),
        ("3.6", "Policies & Procedures", None),
    ),
    rows=(
        ("3.1", "3.1.1", "Relevant subject matter qualifications and/or proven expertise."),
        ("3.1", "3.1.2", "Registered Assessor/Moderator (if applicable/required)."),
        ("3.2", "3.2.1", "Observed sample session (delivery style, clarity, engagement, etc.)."),
        ("3.3", "3.3.1", "Confirmed receipt & review of all course materials (guides, slides, etc.)."),
        ("3.3", "3.3.2", "Facilitator is familiar with assessment process & requirements (summative, formative)."),
        ("3.3", "3.3.3", "Facilitator has a clear plan for delivery (timings, activities, assessments, etc.)."),
        ("3.4", "3.4.1", "Completed organisation/site induction."),
        ("3.4", "3.4.2", "Familiar with access controls, reporting lines & contingency plans."),
        ("3.4", "3.4.3", "Verified equipment availability & condition."),
        ("3.4", "3.4.4", "Understands material & consumable requirements (use, replenishment, costing, budget, etc.)."),
        ("3.4", "3.4.5", "Proficient with required teaching tools/platforms."),
        ("3.4", "3.4.6", "Knows/understands safety standards & emergency procedures (including PPE)."),
        ("3.5", "3.5.1", "Knows group size & general background."),
        ("3.5", "3.5.2", "List of learner names, emergency contacts, special needs, etc."),
        ("3.5", "3.5.3", "Understands confidentiality of learner information (POPI Act)."),
        ("3.6", "3.6.1", "Completed company-specific induction."),
        ("3.6", "3.6.2", "Familiar with company policies & procedures and how/where to access them."),
        ("3.6", "3.6.3", "Understands KPIs related to role and frequency of evaluation."),
        ("3.6", "3.6.4", "Familiar with process for managing & reporting learner performance & discipline."),
    ),
    row_text_field="requirement",
)


LEARNER = SectionCatalog(
    key="learner",
    title="Learner Preparedness",
    parts=(
        ("4.1", "Entry Requirements", None),
        ("4.2", "Attendance", None),
        ("4.3", "Learner Details", None),
        ("4.4", "Induction", None),
        ("4.5", "Materials", None),
    ),
    rows=(
        ("4.1", "4.1.1", "Learners meet entry requirements"),
        ("4.1", "4.1.2", "Learner prerequisites have been verified against course requirements"),
        ("4.1", "4.1.3", "RPL has been completed & verified (if applicable)"),
        ("4.1", "4.1.4", "All learner registration documents completed & submitted with supporting documents (Certified ID)"),
        ("4.2", "4.2.1", "Learner attendance is confirmed."),
        ("4.2", "4.2.3", "Learners informed – training venue(s), dates, times, objectives, contact person, etc. (clear communication)"),
        ("4.3", "4.3.1", "Learner registration details confirmed (correct spelling of names, contact information, etc.)"),
        ("4.3", "4.3.2", "Special needs identified; accommodation process in place (where feasible), handled confidentially"),
        ("4.4", "4.4.1", "Learner induction completed (signed code of conduct)"),
        ("4.4", "4.4.2", "Site-specific orientation/induction completed"),
        ("4.4", "4.4.3", "Health & safety induction completed"),
        ("4.4", "4.4.4", "Learners know & understand all requirements to successfully complete training & consequences of poor performance"),
        ("4.5", "4.5.1", "Learners informed how/when they will receive learning materials & resources (hard copy/digital?)"),
    ),
    row_text_field="requirement",
)


ADMIN_SUPPORT = SectionCatalog(
    key="admin_support",
    title="Admin & Support Systems",
    parts=(
        ("5.1", "On-Site Registration", None),
        ("5.2", "Learner Support", None),
        ("5.3", "Materials & Equipment", None),
        ("5.4", "Support Staff", None),
        ("5.5", "Feedback & Collection", None),
        ("5.6", "Data Protection (POPIA)", None),
        ("5.7", "Stakeholders", None),
        ("5.8", "Logistics", None),
    ),
    rows=(
        ("5.1", "5.1.1", "Clear process for learner sign-in"),
        ("5.1", "5.1.2", "Attendance registers ready & accurate"),
        ("5.1", "5.1.3", "Learner site access (name badges, access cards, passwords, etc.)"),
        ("5.2", "5.2.1", "Process for learners to raise queries or concerns"),
        ("5.2", "5.2.2", "Designated person/department to deal with learner queries & concerns"),
        ("5.2", "5.2.3", "Anonymous reporting system for ethical, compliance or integrity concerns"),
        ("5.2", "5.2.4", "Process for completion of assessments and workplace components"),
        ("5.3", "5.3.1", "Clear process for distributing materials (aligns with 4.5.1 Learner Preparedness)"),
        ("5.3", "5.3.2", "Available learner guides/workbooks/assessment sheets/workplace guides verified against learner numbers"),
        ("5.3", "5.3.3", "Access to and function of digital resources confirmed"),
        ("5.3", "5.3.4", "Process & responsible person for equipment issue and ongoing control"),
        ("5.3", "5.3.5", "Process & responsible person for repair and replacement of equipment"),
        ("5.3", "5.3.6", "Equipment availability & condition verified against Part 2: Equipment Register"),
        ("5.4", "5.4.1", "Support departments/staff roles & responsibilities clearly defined"),
        ("5.4", "5.4.2", "Process for support requests; contact information provided"),
        ("5.5", "5.5.1", "Learner feedback forms available; frequency & process for completion & submission"),
        ("5.5", "5.5.2", "Facilitator feedback & learner progress reporting — frequency & submission process"),
        ("5.5", "5.5.3", "Responsible person for collection, correlation & reporting on learner/facilitator feedback"),
        ("5.6", "5.6.1", "Learner registration & personal information handled securely (physical/digital)"),
        ("5.6", "5.6.2", "Data is only used for the intended purpose"),
        ("5.7", "5.7.1", "Community partner/employer actively involved & supportive"),
        ("5.7", "5.7.2", "Stakeholder MOUs in place; clear communication, meeting minutes & reporting structures"),
        ("5.8", "5.8.1", "Logistics in place for staff/learner transport & catering (if applicable)"),
    ),
    row_text_field="requirement",
)


RISK = SectionCatalog(
    key="risk",
    title="Risk & Contingency Planning",
    parts=(
        ("6.1", "Site Risk Assessment", None),
        ("6.2", "Contingency Plans", None),
        ("6.3", "Communication Protocols", None),
    ),
    rows=(
        ("6.1", "6.1.1", "Site risk assessment has been conducted & recorded"),
        ("6.1", "6.1.2", "All specific risks identified and mitigation actions implemented"),
        ("6.2", "6.2.1", "Current contingency plan in place"),
        ("6.2", "6.2.2", "Plan addresses identified risks (facilitator absence, learner dropouts, tech failures, power outages, etc.)"),
        ("6.2", "6.2.3", "Contingency plan tested; steps taken to address non-compliances"),
        ("6.3", "6.3.1", "Lines of communication clearly defined; contact information available and current"),
        ("6.3", "6.3.2", "Escalation process clearly defined with realistic timelines"),
    ),
    row_text_field="requirement",
)


# Document section key → catalog
TQA_CATALOGS = {
    "site_readiness": SITE_READINESS,
    "facilitator": FACILITATOR,
    "learner": LEARNER,
    "admin_support": ADMIN_SUPPORT,
    "risk": RISK,
}

# Compliance overview labels, in page order
TQA_OVERVIEW_LABELS = {
    "site_readiness": "SITE READINESS (P2):",
    "facilitator": "FACILITATOR READINESS (P3):",
    "learner": "LEARNER PREPAREDNESS (P4):",
    "admin_support": "ADMIN & SUPPORT SYSTEMS (P5):",
    "risk": "RISK & CONTINGENCY PLANNING (P6):",
}
