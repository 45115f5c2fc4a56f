"""
Quality Assurance assessment catalogs.

Nine categories, each a set of parts (the standard being assessed, with a
short description of what the assessor looks for) and the evidence rows
expected for each part.
"""

from workbook_app.catalogs import SectionCatalog


GEL = SectionCatalog(
    key="GEL",
    title="Governance, Ethics & Leadership",
    parts=(
        (
            "GEL 1.1",
            "The governing body provides ethical and effective leadership, demonstrating accountability, responsibility, fairness, and transparency",
            "Assesses if the board operates with integrity, sets an ethical tone, makes informed decisions in the best interest of the institution, oversees strategy implementation, ensures adequate resource allocation, holds management accountable, and manages conflicts of interest effectively.",
        ),
        (
            "GEL 1.2",
            "Clear distinction and balance of roles and responsibilities between the governing body and executive management are defined and implemented.",
            "Examines if there's a formal delegation of authority, clarity on strategic oversight (Board) versus operational management (Executive), and processes ensuring the Board doesn't unduly interfere in operations but receives adequate information for oversight.",
        ),
        (
            "GEL 1.3",
            "The governing body oversees and monitors the establishment and implementation of an effective risk management process and internal controls.",
            "Assesses if the Board understands key institutional risks, ensures a framework exists to identify, assess, mitigate, and monitor risks, receives regular risk reports, and oversees the adequacy of internal financial and operational controls.",
        ),
        (
            "GEL 1.4",
            "The governing body ensures the institution promotes and maintains an ethical culture, supported by a code of conduct/ethics.",
            "Looks at how the Board champions ethical behaviour, ensures an institutional Code of Conduct exists and is communicated, monitors ethical climate, and ensures mechanisms exist for reporting unethical conduct (whistleblowing).",
        ),
        (
            "GEL 1.5",
            "Leadership demonstrates commitment to the QMS/EOMS, establishing a quality policy and objectives.",
            "Checks if top management actively participates in the QMS/EOMS, ensures its integration with strategy, sets measurable quality objectives, provides resources, and promotes a quality culture.",
        ),
        (
            "GEL 1.6",
            "The governing body ensures compliance with all applicable laws, regulations and non-binding rules, codes, and standards (including accreditation requirements).",
            "Assesses the process for identifying applicable legal/regulatory requirements, assigning responsibility for compliance, monitoring changes, receiving assurance on compliance status, and addressing non-compliance.",
        ),
        (
            "GEL 1.7",
            "Processes are in place for regular governing body performance evaluation and development.",
            "Examines if the Board assesses its own effectiveness, identifies areas for improvement, and implements development activities.",
        ),
    ),
    rows=(
        ("GEL 1.1", "1.1.1", "Signed Code of Conduct/Ethics for Governing Body members"),
        ("GEL 1.1", "1.1.2", "Minutes of Governing Body meetings (reflecting strategic discussions, ethical considerations, oversight questions, decision-making processes)"),
        ("GEL 1.1", "1.1.3", "Governing Body Charter/Terms of Reference"),
        ("GEL 1.1", "1.1.4", "Conflict of Interest Policy & Register"),
        ("GEL 1.1", "1.1.5", "Annual Report/Integrated Report"),
        ("GEL 1.2", "1.2.1", "Delegation of Authority Framework/Policy"),
        ("GEL 1.2", "1.2.2", "Terms of Reference for Board Committees & CEO/Principal"),
        ("GEL 1.2", "1.2.3", "Reporting structure documentation"),
        ("GEL 1.2", "1.2.4", "Relevant sections in Board meeting minutes showing appropriate reporting and delegation."),
        ("GEL 1.3", "1.3.1", "Risk Management Policy & Framework"),
        ("GEL 1.3", "1.3.2", "Strategic Risk Register"),
        ("GEL 1.3", "1.3.3", "Minutes of Governing Body/Audit & Risk Committee meetings discussing risk and controls"),
        ("GEL 1.3", "1.3.4", "Internal/External Audit reports on controls"),
        ("GEL 1.3", "1.3.5", "Management assurance reports on risk/controls."),
        ("GEL 1.4", "1.4.1", "Institutional Code of Conduct/Ethics Policy"),
        ("GEL 1.4", "1.4.2", "Communication records regarding the Code"),
        ("GEL 1.4", "1.4.3", "Staff/Learner survey results related to ethics"),
        ("GEL 1.4", "1.4.4", "Whistleblowing Policy & reports (anonymised summary)"),
        ("GEL 1.4", "1.4.5", "Board minutes discussing ethical culture."),
        ("GEL 1.5", "1.5.1", "Signed Quality Policy"),
        ("GEL 1.5", "1.5.2", "Documented Quality Objectives (SMART)"),
        ("GEL 1.5", "1.5.3", "Management Review minutes"),
        ("GEL 1.5", "1.5.4", "Communication records regarding quality policy/objectives"),
        ("GEL 1.5", "1.5.5", "Resource allocation evidence linked to quality initiatives."),
        ("GEL 1.6", "1.6.1", "Compliance Policy/Framework"),
        ("GEL 1.6", "1.6.2", "Legal/Regulatory Compliance Register"),
        ("GEL 1.6", "1.6.3", "Reports to the Governing Body/Committees on compliance status"),
        ("GEL 1.6", "1.6.4", "Accreditation certificates/letter"),
        ("GEL 1.6", "1.6.5", "External audit reports"),
        ("GEL 1.6", "1.6.6", "Internal compliance checklists/reports."),
        ("GEL 1.7", "1.7.1", "Policy/Procedure for Governing Body Evaluation"),
        ("GEL 1.7", "1.7.2", "Records of past evaluations (e.g., questionnaires, reports)"),
        ("GEL 1.7", "1.7.3", "Board development plan/records of training attended."),
    ),
)

SPR = SectionCatalog(
    key="SPR",
    title="Strategic Planning & Review",
    parts=(
        (
            "SPR 2.1",
            "A documented strategic plan exists, aligned with the institution's mission, vision, context, and stakeholder needs, incorporating clear objectives and performance indicators.",
            "Assesses the existence, relevance, and quality of the strategic plan. It should define the institution's direction, be based on analysis (SWOT/PESTLE), reflect stakeholder input, and include measurable goals (KPIs) to track progress.",
        ),
        (
            "SPR 2.2",
            "Strategic planning considers the external environment, internal capabilities, interested party requirements, and identifies strategic risks and opportunities.",
            "",
        ),
        (
            "SPR 2.3",
            "Risk management processes are embedded in strategic and operational planning to identify, assess, mitigate, monitor, and report on risks impacting institutional objectives.",
            "Looks beyond just having a risk register; assesses if risk thinking is integral to planning and decision-making at all levels. Are potential risks considered when setting objectives or planning activities? Are mitigation actions part of operational plans?",
        ),
        (
            "SPR 2.4",
            "Resource allocation (financial, human, physical) is aligned with strategic objectives and planned activities.",
            "Assesses if budgeting and resource planning processes directly support the achievement of strategic goals. Are funds, staff time, and facilities prioritised for strategic initiatives?",
        ),
        (
            "SPR 2.5",
            "Strategic objectives and plans are effectively communicated to relevant internal and external stakeholders.",
            "Examines how the strategy is shared with staff, learners, and other stakeholders to ensure understanding, buy-in, and alignment of effort.",
        ),
        (
            "SPR 2.6",
            "Progress towards strategic objectives is regularly monitored, evaluated, and reported to the governing body and relevant stakeholders.",
            "Assesses the system for tracking performance against KPIs, analysing progress, identifying deviations, taking corrective action, and reporting findings upwards and outwards where appropriate.",
        ),
    ),
    rows=(
        ("SPR 2.1", "2.1.1", "Documented Strategic Plan (current)"),
        ("SPR 2.1", "2.1.2", "Institutional Mission & Vision statements"),
        ("SPR 2.1", "2.1.3", "Environmental scanning documentation (SWOT/PESTLE analysis)"),
        ("SPR 2.1", "2.1.4", "Records of stakeholder consultations during planning"),
        ("SPR 2.1", "2.1.5", "List of strategic objectives with associated KPIs and targets."),
        ("SPR 2.2", "2.2.1", "Evidence within the Strategic Plan or supporting documents (market analysis, resource reviews, stakeholder needs, risk/opportunity summaries linked to strategy)"),
        ("SPR 2.3", "2.3.1", "Strategic Plan showing risk considerations"),
        ("SPR 2.3", "2.3.2", "Operational plans including risk mitigation actions"),
        ("SPR 2.3", "2.3.3", "Departmental risk registers"),
        ("SPR 2.3", "2.3.4", "Project management documentation showing risk assessment"),
        ("SPR 2.3", "2.3.5", "Management meeting minutes discussing operational risks"),
        ("SPR 2.3", "2.3.6", "Risk Management Policy & Procedures."),
        ("SPR 2.4", "2.4.1", "Annual Budget linked to Strategic Plan objectives"),
        ("SPR 2.4", "2.4.2", "Business cases for major projects/initiatives showing strategic alignment"),
        ("SPR 2.4", "2.4.3", "Staffing plans reflecting strategic priorities"),
        ("SPR 2.4", "2.4.4", "Capital expenditure plans linked to strategy"),
        ("SPR 2.4", "2.4.5", "Management reports showing resource allocation vs plan"),
        ("SPR 2.5", "2.5.1", "Internal communication plan/records (emails, newsletters, meeting presentations)"),
        ("SPR 2.5", "2.5.2", "Staff meeting minutes discussing strategy"),
        ("SPR 2.5", "2.5.3", "Public-facing documents summarising strategic direction (website section, annual report)"),
        ("SPR 2.5", "2.5.4", "Learner communication materials mentioning relevant goals."),
        ("SPR 2.6", "2.6.1", "Performance dashboards/reports showing progress against KPIs"),
        ("SPR 2.6", "2.6.2", "Management meeting minutes discussing strategic performance"),
        ("SPR 2.6", "2.6.3", "Reports to the Governing Body on strategic progress"),
        ("SPR 2.6", "2.6.4", "Annual Performance Reviews/Reports"),
        ("SPR 2.6", "2.6.5", "Evidence of adjustments made based on performance monitoring"),
    ),
)

TLA = SectionCatalog(
    key="TLA",
    title="Teaching, Learning & Assessment",
    parts=(
        (
            "TLA 3.1",
            "Programme design and curriculum development are aligned with the NQF, relevant occupational standards (QCTO), qualification requirements (CHE/Umalusi), stated learning outcomes, and stakeholder/industry needs",
            "Assesses the process for designing/reviewing programmes. Ensures content is current, meets regulatory body specs (SAQA ID, credits, level), leads to defined outcomes, and incorporates input from employers/industry advisory groups to ensure relevance.",
        ),
        (
            "TLA 3.2",
            "Programmes promote student-centred learning, encouraging active engagement, critical thinking and the development of specified competencies.",
            "Examines the pedagogical approach embedded in the curriculum and teaching practices. Looks for evidence of activities beyond passive lectures, such as problem-based learning, case studies, group work, practical application, simulations, research tasks.",
        ),
        (
            "TLA 3.3",
            "Teaching and facilitation methodologies are appropriate for the learning outcomes, learner profiles, NQF level, and mode of delivery (face-to-face, online, blended).",
            "Assesses the appropriateness and variety of teaching methods used. Considers if methods suit the subject matter, learner cohort, complexity (NQF level), and delivery channel (online pedagogy differs from face-to-face).",
        ),
        (
            "TLA 3.4",
            "Assessment policies and procedures ensure assessments are fair, valid, reliable, sufficient, authentic, transparent, and consistently applied across all learners and sites.",
            "Examines the robustness of the assessment system: Fair, Valid, Reliable, Sufficient, Authentic, Transparent. Requires clear policies, well-designed tasks, marking guides, security, etc.",
        ),
        (
            "TLA 3.5",
            "A robust system for internal and external moderation of assessments is implemented to ensure consistency, fairness, and maintenance of standards.",
            "Assesses the quality assurance applied to marking/grading. Internal moderation occurs before results are finalised. External moderation is by external peers/regulators (SETA/QCTO/CHE).",
        ),
        (
            "TLA 3.6",
            "Timely, constructive feedback is provided to learners on their assessments to support learning and development.",
            "Examines the quality and timeliness of feedback. It should explain strengths/weaknesses and suggest improvements; turnaround times should be clear.",
        ),
        (
            "TLA 3.7",
            "Mechanisms are in place for the regular review and improvement of programme design, curriculum, teaching methods, and assessment practices, incorporating learner and stakeholder feedback.",
            "Assesses the cyclical nature of QA for programmes: formal review processes analysing data/feedback and resulting in action plans.",
        ),
        (
            "TLA 3.8",
            "Where applicable, work-integrated learning (WIL) or workplace experience components are effectively managed, monitored, and integrated with theoretical learning, involving relevant workplace partners",
            "Applicable for programmes with practical/workplace elements: planning, placements, monitoring, assessment in the workplace, communication with mentors, linking theory to practice.",
        ),
    ),
    rows=(
        ("TLA 3.1", "3.1.1", "Documented Programme/Curriculum Design & Review Policy/Procedure"),
        ("TLA 3.1", "3.1.2", "Programme specifications/qualification documents detailing outcomes"),
        ("TLA 3.1", "3.1.3", "NQF level, credits, SAQA ID linkage; Curriculum documents (syllabi, module descriptors)"),
        ("TLA 3.1", "3.1.4", "Minutes of programme review meetings"),
        ("TLA 3.1", "3.1.5", "Records of industry/stakeholder consultation (advisory committee minutes, surveys)"),
        ("TLA 3.1", "3.1.6", "Approval letters from QCTO/CHE/Umalusi"),
        ("TLA 3.2", "3.2.1", "Module guides/Lesson plans showing varied, active learning activities"),
        ("TLA 3.2", "3.2.2", "Examples of learner work demonstrating critical thinking/application (portfolios, projects)"),
        ("TLA 3.2", "3.2.3", "Learning platform (LMS) structure and activities (if applicable)"),
        ("TLA 3.2", "3.2.4", "Classroom observation reports"),
        ("TLA 3.2", "3.2.5", "Learner feedback on teaching methods"),
        ("TLA 3.3", "3.3.1", "Lesson plans/Module descriptors outlining teaching strategies"),
        ("TLA 3.3", "3.3.2", "Staff development records related to pedagogy/online teaching"),
        ("TLA 3.3", "3.3.3", "Examples of teaching materials (presentations, videos, interactive exercises)"),
        ("TLA 3.3", "3.3.4", "Classroom observation reports"),
        ("TLA 3.3", "3.3.5", "Learner feedback specifically on teaching effectiveness and appropriateness"),
        ("TLA 3.4", "3.4.1", "Documented Assessment Policy & Procedures (including plagiarism, appeals, reasonable adjustments)"),
        ("TLA 3.4", "3.4.2", "Sample assessment tasks (assignments, exams, practicals) clearly linked to learning outcomes"),
        ("TLA 3.4", "3.4.3", "Marking criteria/rubrics/memoranda"),
        ("TLA 3.4", "3.4.4", "Evidence of assessment validation/review process"),
        ("TLA 3.4", "3.4.5", "Secure storage procedures for assessments"),
        ("TLA 3.4", "3.4.6", "Policy on Assessment Appeals"),
        ("TLA 3.5", "3.5.1", "Moderation Policy & Procedures (Internal & External)"),
        ("TLA 3.5", "3.5.2", "Internal moderation reports/checklists"),
        ("TLA 3.5", "3.5.3", "Samples of moderated learner work"),
        ("TLA 3.5", "3.5.4", "External Moderation reports from SETA/QCTO/CHE or appointed moderators"),
        ("TLA 3.5", "3.5.5", "Minutes of assessment/moderation meetings"),
        ("TLA 3.5", "3.5.6", "Evidence of actions taken based on moderation findings"),
        ("TLA 3.6", "3.6.1", "Policy/guidelines on providing assessment feedback (including turnaround times)"),
        ("TLA 3.6", "3.6.2", "Sample marked learner assessments showing constructive comments"),
        ("TLA 3.6", "3.6.3", "Learner feedback surveys asking about quality/timeliness of assessment feedback"),
        ("TLA 3.6", "3.6.4", "Evidence of feedback provided through LMS (if applicable)"),
        ("TLA 3.7", "3.7.1", "Programme Review Policy/Procedure"),
        ("TLA 3.7", "3.7.2", "Annual/Periodic Programme Review Reports"),
        ("TLA 3.7", "3.7.3", "Analysis of learner feedback data (module surveys, focus groups)"),
        ("TLA 3.7", "3.7.4", "Analysis of stakeholder feedback (employer surveys, advisory boards)"),
        ("TLA 3.7", "3.7.5", "Minutes of meetings where programme improvements are discussed/approved"),
        ("TLA 3.7", "3.7.6", "Action plans resulting from reviews & evidence of implementation"),
        ("TLA 3.8", "3.8.1", "WIL Policy & Procedures"),
        ("TLA 3.8", "3.8.2", "Templates for workplace agreements/MOUs"),
        ("TLA 3.8", "3.8.3", "Learner logbooks/portfolios for workplace activities"),
        ("TLA 3.8", "3.8.4", "Workplace assessment tools/criteria"),
        ("TLA 3.8", "3.8.5", "Records of communication/visits with workplace partners"),
        ("TLA 3.8", "3.8.6", "Learner/Employer feedback on WIL component"),
        ("TLA 3.8", "3.8.7", "QCTO requirements for workplace component"),
    ),
)

LSW = SectionCatalog(
    key="LSW",
    title="Learner Support & Wellbeing",
    parts=(
        (
            "LSW 4.1",
            "Admission policies and procedures are clear, fair, transparent, consistently applied, and compliant with regulatory requirements, including criteria for Recognition of Prior Learning (RPL) where applicable",
            "Assesses the entire process of learner entry: documented, non-discriminatory, consistently applied; includes RPL handling against programme requirements.",
        ),
        (
            "LSW 4.2",
            "Accurate and accessible information is provided to prospective learners regarding programmes, admission requirements, fees, and support services",
            "Quality and accessibility of pre-enrolment information, especially costs and entry rules; clarity on available support.",
        ),
        (
            "LSW 4.3",
            "Learner induction/orientation programmes effectively integrate new learners into the institutional environment and academic culture",
            "Covers essential info (policies, IT, support, academic expectations), timing and engagement.",
        ),
        (
            "LSW 4.4",
            "Adequate, accessible, and effective academic support services (e.g., tutoring, library services, IT support, language support) are available to learners",
            "Range, accessibility, quality and effectiveness of academic support; resourcing and promotion to learners.",
        ),
        (
            "LSW 4.5",
            "Appropriate psycho-social support services (e.g., counselling, career guidance, health services, support for learners with disabilities) are available and promoted",
            "Non-academic support: confidentiality, referral pathways, qualified staff, accessibility (incl. disabilities), awareness.",
        ),
        (
            "LSW 4.6",
            "Systems are in place to monitor learner progress, identify at-risk learners, and provide timely interventions",
            "Proactive measures: tracking, identification, interventions, timeliness, records.",
        ),
        (
            "LSW 4.7",
            "Learner records are managed accurately, securely, confidentially (in line with POPIA), and systematically throughout the learner lifecycle, including certification upon successful completion",
            "Integrity and security of data: capture, storage, access control, archiving, POPIA, certification accuracy/timeliness.",
        ),
        (
            "LSW 4.8",
            "Fair and transparent policies and procedures exist for handling learner complaints and appeals",
            "Clear steps, timelines, impartiality, record-keeping and communication of outcomes; information provided to learners.",
        ),
    ),
    rows=(
        ("LSW 4.1", "4.1.1", "Documented Admission Policy & Procedures"),
        ("LSW 4.1", "4.1.2", "Documented RPL Policy & Procedures"),
        ("LSW 4.1", "4.1.3", "Programme admission criteria"),
        ("LSW 4.1", "4.1.4", "Application forms"),
        ("LSW 4.1", "4.1.5", "Records demonstrating consistent application of criteria"),
        ("LSW 4.1", "4.1.6", "Sample RPL assessment records"),
        ("LSW 4.1", "4.1.7", "Communication templates for applicants (acceptance, rejection, RPL outcome)"),
        ("LSW 4.2", "4.2.1", "Website content"),
        ("LSW 4.2", "4.2.2", "Prospectus/brochures & Fees Schedule"),
        ("LSW 4.2", "4.2.3", "Programme information sheets"),
        ("LSW 4.2", "4.2.4", "Pre-enrolment advisory service records (if offered)"),
        ("LSW 4.2", "4.2.5", "Open day materials"),
        ("LSW 4.3", "4.3.1", "Induction/Orientation programme schedule and materials"),
        ("LSW 4.3", "4.3.2", "Learner feedback on induction"),
        ("LSW 4.3", "4.3.3", "Attendance records for induction events"),
        ("LSW 4.3", "4.3.4", "Online induction module content (if applicable)"),
        ("LSW 4.4", "4.4.1", "Service descriptions and operating hours for library"),
        ("LSW 4.4", "4.4.2", "IT support, academic support centre"),
        ("LSW 4.4", "4.4.3", "Usage statistics for support services"),
        ("LSW 4.4", "4.4.4", "Learner feedback on support services"),
        ("LSW 4.4", "4.4.5", "Staffing information for support services"),
        ("LSW 4.4", "4.4.6", "Policy on Academic Support"),
        ("LSW 4.5", "4.5.1", "Policy on Learner Support/Wellbeing"),
        ("LSW 4.5", "4.5.2", "Policy/Procedure for Supporting Learners with Disabilities"),
        ("LSW 4.5", "4.5.3", "Information brochures/webpages (counselling, health, careers)"),
        ("LSW 4.5", "4.5.4", "Records of awareness campaigns/workshops"),
        ("LSW 4.5", "4.5.5", "Confidential usage statistics (where appropriate)"),
        ("LSW 4.5", "4.5.6", "Staff qualifications for support roles"),
        ("LSW 4.5", "4.5.7", "Referral protocols"),
        ("LSW 4.6", "4.6.1", "LMS data/reports on attendance/progress"),
        ("LSW 4.6", "4.6.2", "Policy/Procedure for identifying and supporting at-risk learners"),
        ("LSW 4.6", "4.6.3", "Records of interventions/support plans (anonymised)"),
        ("LSW 4.6", "4.6.4", "Reports on retention/progression/completion rates"),
        ("LSW 4.6", "4.6.5", "Minutes of student progress review meetings"),
        ("LSW 4.7", "4.7.1", "Learner Records Management Policy/Procedure"),
        ("LSW 4.7", "4.7.2", "POPIA Compliance Policy relating to learner data"),
        ("LSW 4.7", "4.7.3", "Access control logs/permissions for learner database/LMS"),
        ("LSW 4.7", "4.7.4", "Sample learner record showing accuracy/completeness"),
        ("LSW 4.7", "4.7.5", "Data backup and security procedures documentation"),
        ("LSW 4.7", "4.7.6", "Certificate issuance procedure and sample certificate"),
        ("LSW 4.7", "4.7.7", "Training records for staff on POPIA/data handling"),
        ("LSW 4.8", "4.8.1", "Learner Complaints Policy & Procedure"),
        ("LSW 4.8", "4.8.2", "Learner Academic Appeals Policy & Procedure"),
        ("LSW 4.8", "4.8.3", "Standard forms for complaints/appeals"),
        ("LSW 4.8", "4.8.4", "Register/log of complaints/appeals and outcomes (anonymised)"),
        ("LSW 4.8", "4.8.5", "Communication templates for complainants/appellants"),
        ("LSW 4.8", "4.8.6", "Information provided to learners about these procedures"),
    ),
)

SCE = SectionCatalog(
    key="SCE",
    title="Staff Competence & Employment",
    parts=(
        (
            "SCE 5.1",
            "Staff (academic, administrative, support) possess appropriate qualifications, expertise, experience, and (where required) professional registration/accreditation for their roles",
            "Assesses if staff meet the required standards for their jobs, both formal qualifications and practical experience/skills. For academic staff, this includes subject matter and potentially pedagogical expertise. For assessors/moderators, requires relevant SETA/QCTO registration.",
        ),
        (
            "SCE 5.2",
            "Recruitment, selection, and induction processes are fair, transparent, and effective in appointing competent staff aligned with institutional values",
            "Examines how staff are hired and onboarded: equal opportunity, clear job descriptions/adverts, structured interviews/criteria, background checks (where appropriate), and comprehensive induction covering policies, procedures, systems, and culture.",
        ),
        (
            "SCE 5.3",
            "A systematic approach to performance management is implemented, including regular feedback, clear expectations, and alignment with institutional objectives",
            "Assesses how staff performance is managed and developed: documented processes, goal setting linked to institutional/departmental objectives, regular feedback, appraisal documentation, and links to development/recognition.",
        ),
        (
            "SCE 5.4",
            "Continuous professional development (CPD) opportunities are identified, planned, supported, and evaluated to enhance staff competence, including pedagogical skills for academic staff",
            "Examines commitment to staff growth: needs identification (e.g., performance reviews, strategy), plan/budget, access/support, diverse CPD (courses, workshops, mentoring, conferences), and impact evaluation.",
        ),
        (
            "SCE 5.5",
            "Staff are empowered, recognised, and rewarded for their contributions, fostering a positive organisational culture and high levels of engagement",
            "Assesses efforts to motivate and retain staff: delegation, involvement in decision-making, recognition schemes, fair remuneration/benefits, and initiatives promoting a supportive work environment.",
        ),
        (
            "SCE 5.6",
            "Sufficient numbers of appropriately qualified staff are appointed to support effective programme delivery, administration, and learner support services",
            "Assesses workload management and resourcing: staff-to-learner ratios (especially academic), administrative support capacity, specialist support availability, and processes for determining staffing needs.",
        ),
        (
            "SCE 5.7",
            "Effective internal communication mechanisms ensure staff are informed about institutional strategy, policies, and performance",
            "Assesses internal information flow: channels (meetings, emails, intranet, newsletters), clarity and timeliness, opportunities for two-way communication, and ensuring staff understand key directions and policy updates.",
        ),
    ),
    rows=(
        ("SCE 5.1", "5.1.1", "Staff files containing: CVs, certified copies of qualifications (SAQA verification for foreign qualifications)"),
        ("SCE 5.1", "5.1.2", "Professional registration certificates (e.g. SACE, HPCSA), SETA/QCTO Assessor/Moderator registration details"),
        ("SCE 5.1", "5.1.3", "Job descriptions outlining required qualifications/experience"),
        ("SCE 5.2", "5.2.1", "Recruitment & Selection Policy/Procedure"),
        ("SCE 5.2", "5.2.2", "Sample job adverts & job descriptions"),
        ("SCE 5.2", "5.2.3", "Standard interview questions/scoring sheets"),
        ("SCE 5.2", "5.2.4", "Records of selection panel composition"),
        ("SCE 5.2", "5.2.5", "Induction programme materials/checklist"),
        ("SCE 5.2", "5.2.6", "New staff feedback on induction process"),
        ("SCE 5.2", "5.2.7", "Equal Opportunities/Employment Equity Policy & reports (if applicable)"),
        ("SCE 5.3", "5.3.1", "Performance Management Policy/Procedure"),
        ("SCE 5.3", "5.3.2", "Performance appraisal forms/templates"),
        ("SCE 5.3", "5.3.3", "Records of completed appraisals (sample, anonymised if needed)"),
        ("SCE 5.3", "5.3.4", "Staff handbook outlining performance expectations"),
        ("SCE 5.3", "5.3.5", "Evidence of goal-setting processes"),
        ("SCE 5.3", "5.3.6", "Training materials for managers on appraisals/feedback"),
        ("SCE 5.4", "5.4.1", "Staff Development Policy/Procedure"),
        ("SCE 5.4", "5.4.2", "Training Needs Analysis (TNA) records/summaries"),
        ("SCE 5.4", "5.4.3", "Annual Staff Development Plan & Budget"),
        ("SCE 5.4", "5.4.4", "Records of internal/external training attended by staff"),
        ("SCE 5.4", "5.4.5", "CPD evaluation forms/reports"),
        ("SCE 5.4", "5.4.6", "Performance appraisal records showing development plan discussion"),
        ("SCE 5.4", "5.4.7", "Evidence of pedagogical training for academic staff"),
        ("SCE 5.4", "5.4.8", "Mentoring programme documentation (if applicable)"),
        ("SCE 5.5", "5.5.1", "Staff survey results (engagement, satisfaction)"),
        ("SCE 5.5", "5.5.2", "Employee Value Proposition documentation"),
        ("SCE 5.5", "5.5.3", "Remuneration & Benefits policy/structure"),
        ("SCE 5.5", "5.5.4", "Records of staff recognition programmes/awards"),
        ("SCE 5.5", "5.5.5", "Minutes of staff meetings showing participation/input"),
        ("SCE 5.5", "5.5.6", "Examples of delegated authority"),
        ("SCE 5.5", "5.5.7", "Communication strategy regarding staff contributions"),
        ("SCE 5.5", "5.5.8", "Exit interview analysis (anonymised themes)"),
        ("SCE 5.6", "5.6.1", "Staff organogram; staffing establishment data (headcount vs budgeted positions)"),
        ("SCE 5.6", "5.6.2", "Staff workload models/policies (if available)"),
        ("SCE 5.6", "5.6.3", "Analysis of staff-learner ratios per programme"),
        ("SCE 5.6", "5.6.4", "User feedback on adequacy of support staff (learner/academic staff surveys)"),
        ("SCE 5.6", "5.6.5", "Reports on turnaround times for administrative processes"),
        ("SCE 5.6", "5.6.6", "Relevant QCTO/CHE/Umalusi criteria on staffing levels"),
        ("SCE 5.7", "5.7.1", "Internal Communication Strategy/Policy"),
        ("SCE 5.7", "5.7.2", "Samples of internal communications (newsletters, emails, intranet posts)"),
        ("SCE 5.7", "5.7.3", "Minutes of all-staff or departmental meetings"),
        ("SCE 5.7", "5.7.4", "Staff feedback survey results related to communication effectiveness"),
        ("SCE 5.7", "5.7.5", "Organisation chart showing reporting lines"),
    ),
)

RLE = SectionCatalog(
    key="RLE",
    title="Resource Management & Learning Environment",
    parts=(
        (
            "RLE 6.1",
            "Financial resources are sufficient for institutional sustainability and are managed effectively, ethically, and transparently, with appropriate budgeting and financial controls",
            "Assesses financial health and management practices: planning/budgeting, adequacy of funding, monitoring & reporting, internal controls, ethical handling, adherence to standards, and audits.",
        ),
        (
            "RLE 6.2",
            "The physical learning environment (classrooms, workshops, labs, common areas) is safe, accessible, conducive to learning, adequately equipped, and compliant with OHSA regulations",
            "Suitability for teaching, safety features, accessibility, cleanliness, upkeep.",
        ),
        (
            "RLE 6.3",
            "Sufficient and relevant learning resources (e.g., library services, databases, textbooks, journals, equipment, software) are available, accessible, maintained, and regularly updated",
            "Adequacy and currency of physical/online resources, equipment/software & consumables; accessibility and maintenance.",
        ),
        (
            "RLE 6.4",
            "Information and Communication Technology (ICT) infrastructure is adequate, reliable, secure, and effectively supports teaching, learning, assessment, administration, and communication",
            "Network reliability & coverage, devices/labs, LMS & admin systems, cybersecurity, backup/DR, and IT support.",
        ),
        (
            "RLE 6.5",
            "Processes are in place for the planned maintenance and upgrading of physical infrastructure, equipment, and learning resources",
            "Proactive asset management: scheduled maintenance, replacement cycles, budgets, fault reporting, SLAs.",
        ),
    ),
    rows=(
        ("RLE 6.1", "6.1.1", "Audited Financial Statements (Annual)"),
        ("RLE 6.1", "6.1.2", "Management Accounts (monthly/quarterly)"),
        ("RLE 6.1", "6.1.3", "Annual Budget and budget monitoring reports"),
        ("RLE 6.1", "6.1.4", "Financial Policies & Procedures (procurement, payments, asset management)"),
        ("RLE 6.1", "6.1.5", "Internal control documentation"),
        ("RLE 6.1", "6.1.6", "External Audit Management Letter & responses"),
        ("RLE 6.1", "6.1.7", "Minutes of Finance Committee/Governing Body meetings discussing finances"),
        ("RLE 6.1", "6.1.8", "Evidence of financial sustainability planning (reserves policy, forecasts)"),
        ("RLE 6.2", "6.2.1", "Site inspection reports/checklists"),
        ("RLE 6.2", "6.2.2", "OHSA Compliance Certificate/Audit Report (if available)"),
        ("RLE 6.2", "6.2.3", "Documented emergency evacuation procedures & drill records"),
        ("RLE 6.2", "6.2.4", "Fire equipment service records"),
        ("RLE 6.2", "6.2.5", "Maintenance logs/schedule for buildings"),
        ("RLE 6.2", "6.2.6", "Photos/videos of facilities"),
        ("RLE 6.2", "6.2.7", "Accessibility audit (if conducted)"),
        ("RLE 6.2", "6.2.8", "Learner/Staff feedback surveys on facilities"),
        ("RLE 6.2", "6.2.9", "Timetables showing room utilisation"),
        ("RLE 6.3", "6.3.1", "Library catalogue & usage statistics"),
        ("RLE 6.3", "6.3.2", "E-resource subscription list & usage statistics"),
        ("RLE 6.3", "6.3.3", "Inventory lists for equipment/software per programme"),
        ("RLE 6.3", "6.3.4", "Resource acquisition policy/procedures"),
        ("RLE 6.3", "6.3.5", "Budget allocation for learning resources"),
        ("RLE 6.3", "6.3.6", "Maintenance logs for equipment"),
        ("RLE 6.3", "6.3.7", "Learner/Staff feedback on resource adequacy and accessibility"),
        ("RLE 6.3", "6.3.8", "Programme validation documents listing required resources"),
        ("RLE 6.4", "6.4.1", "ICT Strategy/Policy"),
        ("RLE 6.4", "6.4.2", "Network diagrams & specifications"),
        ("RLE 6.4", "6.4.3", "Wi-Fi coverage maps/reports"),
        ("RLE 6.4", "6.4.4", "LMS platform details & usage reports"),
        ("RLE 6.4", "6.4.5", "Inventory of computer hardware/software"),
        ("RLE 6.4", "6.4.6", "Cybersecurity policy & procedures (firewalls, anti-virus, access control)"),
        ("RLE 6.4", "6.4.7", "Data backup & disaster recovery plans/test results"),
        ("RLE 6.4", "6.4.8", "IT support helpdesk statistics (response times, issue resolution)"),
        ("RLE 6.4", "6.4.9", "User feedback (staff/learners) on ICT services"),
        ("RLE 6.5", "6.5.1", "Asset Management Policy/Register"),
        ("RLE 6.5", "6.5.2", "Planned maintenance schedules (buildings, equipment)"),
        ("RLE 6.5", "6.5.3", "IT hardware/software replacement plan"),
        ("RLE 6.5", "6.5.4", "Budget allocation for maintenance & capital replacement"),
        ("RLE 6.5", "6.5.5", "Records of fault reporting and resolution"),
        ("RLE 6.5", "6.5.6", "Service Level Agreements (SLAs) with maintenance providers"),
    ),
)

QMI = SectionCatalog(
    key="QMI",
    title="Quality Management, Monitoring & Improvement",
    parts=(
        (
            "QMI 7.1",
            "A documented Quality Management System (QMS) / Educational Organisation Management System (EOMS), aligned with ISO 21001 principles and regulatory requirements, is effectively implemented and maintained.",
            "Looks for a formal system (manual, policies, procedures), alignment with ISO 21001, integration across the institution and evidence of use.",
        ),
        (
            "QMI 7.2",
            "Regular monitoring and evaluation of educational provision, support services, and organisational processes are conducted using diverse data sources.",
            "Systematic gathering and analysis of performance data (pass rates, retention, satisfaction, complaints, etc.) from multiple methods.",
        ),
        (
            "QMI 7.3",
            "Learner satisfaction and other stakeholder feedback are systematically collected, analysed, and used to inform quality improvements.",
            "Regular surveys/focus groups; analysis and clear evidence of changes made from feedback.",
        ),
        (
            "QMI 7.4",
            "Internal audit processes are conducted periodically to verify conformance to the QMS/EOMS requirements and planned arrangements.",
            "Planned audits by trained auditors using checklists; reports and follow-up of findings.",
        ),
        (
            "QMI 7.5",
            "Formal management reviews of the QMS/EOMS are conducted regularly by top management to ensure suitability, adequacy, effectiveness, and strategic alignment.",
            "Planned reviews with defined agenda, decisions, actions and follow-up.",
        ),
        (
            "QMI 7.6",
            "A systematic approach exists for identifying, analysing, and addressing non-conformities and implementing corrective actions to prevent recurrence.",
            "Logging, root-cause analysis, actions, and effectiveness verification.",
        ),
        (
            "QMI 7.7",
            "A culture of continuous improvement is fostered, encouraging innovation and responsiveness to changing needs.",
            "Evidence that improvement is valued and acted upon, including innovation and benchmarking.",
        ),
    ),
    rows=(
        ("QMI 7.1", "7.1.1", "Quality Manual / EOMS Documentation"),
        ("QMI 7.1", "7.1.2", "Documented Quality Policy & Objectives"),
        ("QMI 7.1", "7.1.3", "Key quality-related policies and procedures"),
        ("QMI 7.1", "7.1.4", "Organisation chart showing quality responsibilities"),
        ("QMI 7.1", "7.1.5", "Records of QMS/EOMS training for staff"),
        ("QMI 7.1", "7.1.6", "Evidence of QMS processes being followed across departments"),
        ("QMI 7.2", "7.2.1", "Monitoring & Evaluation Framework/Policy"),
        ("QMI 7.2", "7.2.2", "Schedule of monitoring activities"),
        ("QMI 7.2", "7.2.3", "Examples of data collection tools (surveys, interview guides)"),
        ("QMI 7.2", "7.2.4", "Analysis reports (learner feedback, assessment results, retention/completion, staff & stakeholder input)"),
        ("QMI 7.2", "7.2.5", "Programme review reports incorporating monitoring data"),
        ("QMI 7.2", "7.2.6", "Minutes where monitoring data is discussed"),
        ("QMI 7.3", "7.3.1", "Feedback collection policy/schedule"),
        ("QMI 7.3", "7.3.2", "Standard feedback questionnaires/survey instruments"),
        ("QMI 7.3", "7.3.3", "Reports analysing feedback results (quantitative & qualitative)"),
        ("QMI 7.3", "7.3.4", "Examples of improvements implemented from feedback"),
        ("QMI 7.3", "7.3.5", "‘You said, we did’ communications"),
        ("QMI 7.4", "7.4.1", "Internal Audit Policy/Procedure; Annual Internal Audit Plan/Schedule"),
        ("QMI 7.4", "7.4.2", "Internal Auditor training records"),
        ("QMI 7.4", "7.4.3", "Internal Audit Checklists/Work Papers"),
        ("QMI 7.4", "7.4.4", "Completed Internal Audit Reports"),
        ("QMI 7.4", "7.4.5", "Records of corrective actions & verification of effectiveness"),
        ("QMI 7.5", "7.5.1", "Management Review Procedure"),
        ("QMI 7.5", "7.5.2", "Schedule for Management Reviews"),
        ("QMI 7.5", "7.5.3", "Agendas/Minutes showing required inputs, decisions and actions"),
        ("QMI 7.5", "7.5.4", "Action logs and evidence of follow-up"),
        ("QMI 7.6", "7.6.1", "Non-conformity & Corrective Action Procedure"),
        ("QMI 7.6", "7.6.2", "Register/log of non-conformities and corrective actions"),
        ("QMI 7.6", "7.6.3", "Records of root cause analysis"),
        ("QMI 7.6", "7.6.4", "Evidence of implemented corrective actions"),
        ("QMI 7.6", "7.6.5", "Records verifying effectiveness (follow-up audits, monitoring)"),
        ("QMI 7.7", "7.7.1", "Staff/learner suggestion schemes & actions taken"),
        ("QMI 7.7", "7.7.2", "Examples of innovations implemented"),
        ("QMI 7.7", "7.7.3", "Benchmarking activities and subsequent actions"),
        ("QMI 7.7", "7.7.4", "Agendas/minutes on external trends and proactive discussion"),
        ("QMI 7.7", "7.7.5", "Communication promoting improvement/innovation"),
        ("QMI 7.7", "7.7.6", "Staff survey results related to empowerment/improvement culture"),
    ),
)

SEC = SectionCatalog(
    key="SEC",
    title="Stakeholder Engagement & Communication",
    parts=(
        (
            "SEC 8.1",
            "Key stakeholders (learners, staff, alumni, employers, industry bodies, funders, community, regulators) are identified, and their needs and expectations considered in planning and operations",
            "Formal identification and processes (surveys/consultations/advisory boards) feed into strategic & operational planning.",
        ),
        (
            "SEC 8.2",
            "Effective strategies and mechanisms are implemented for proactive, regular, and meaningful engagement with key stakeholders",
            "Two-way engagement suitable for each group (employers, alumni, learner forums, funders, community).",
        ),
        (
            "SEC 8.3",
            "Information published about the institution and its programmes is accurate, objective, up-to-date, accessible, and sufficient for decisions",
            "Processes ensure factual correctness (accreditation, fees, outcomes), clarity, currency and accessibility.",
        ),
        (
            "SEC 8.4",
            "Partnerships with employers, industry, and the community are actively sought and managed to enhance relevance, WIL and employability",
            "Proactive relationships and tracking of outcomes (relevance, WIL success, employment).",
        ),
        (
            "SEC 8.5",
            "External communication strategies effectively manage the institution's reputation and relationship with the broader public and media",
            "Brand management, press/social media, and crisis communication planning.",
        ),
    ),
    rows=(
        ("SEC 8.1", "8.1.1", "Stakeholder Analysis/Mapping document"),
        ("SEC 8.1", "8.1.2", "Records of stakeholder surveys, consultations, focus groups"),
        ("SEC 8.1", "8.1.3", "Minutes of Industry Advisory Board meetings"),
        ("SEC 8.1", "8.1.4", "Analysis reports summarising stakeholder needs/expectations"),
        ("SEC 8.1", "8.1.5", "Evidence in plans showing consideration of stakeholder input"),
        ("SEC 8.2", "8.2.1", "Stakeholder Engagement Strategy/Plan"),
        ("SEC 8.2", "8.2.2", "Communication plan outlining activities per stakeholder group"),
        ("SEC 8.2", "8.2.3", "Records of engagement activities (invites/attendance, minutes, newsletters, web sections)"),
        ("SEC 8.2", "8.2.4", "Feedback mechanisms specifically for stakeholders"),
        ("SEC 8.3", "8.3.1", "Website content review"),
        ("SEC 8.3", "8.3.2", "Prospectus/brochure review"),
        ("SEC 8.3", "8.3.3", "Procedure for updating public information"),
        ("SEC 8.3", "8.3.4", "Internal sign-off process for publications/website content"),
        ("SEC 8.3", "8.3.5", "Checks for consistency across platforms"),
        ("SEC 8.3", "8.3.6", "Accessibility compliance evidence for website (if applicable)"),
        ("SEC 8.3", "8.3.7", "Accreditation status displayed correctly as per rules"),
        ("SEC 8.4", "8.4.1", "Records of industry partnerships/collaborations (MOUs, agreements)"),
        ("SEC 8.4", "8.4.2", "Minutes of Industry Advisory Committees"),
        ("SEC 8.4", "8.4.3", "Guest lecturer register/records"),
        ("SEC 8.4", "8.4.4", "WIL placement records/database"),
        ("SEC 8.4", "8.4.5", "Graduate destination surveys/statistics"),
        ("SEC 8.4", "8.4.6", "Records of community engagement projects"),
        ("SEC 8.4", "8.4.7", "Policy on external partnerships"),
        ("SEC 8.5", "8.5.1", "External Communication/Marketing Strategy"),
        ("SEC 8.5", "8.5.2", "Branding guidelines"),
        ("SEC 8.5", "8.5.3", "Sample press releases/media coverage"),
        ("SEC 8.5", "8.5.4", "Social media policy & platform management evidence"),
        ("SEC 8.5", "8.5.5", "Crisis Communication Plan"),
        ("SEC 8.5", "8.5.6", "Website ‘News’ section content"),
    ),
)

LCR = SectionCatalog(
    key="LCR",
    title="Legal Compliance & Reporting",
    parts=(
        (
            "LCR 9.1",
            "Systems are in place to identify, monitor, and ensure compliance with all relevant South African legislation and regulations (e.g., Higher Education Act, NQF Act, SDA, OHSA, POPIA, BCEA, LRA)",
            "Institutional approach to legal compliance: staying updated, implementing policies/procedures, training, monitoring, addressing non-compliance.",
        ),
        (
            "LCR 9.2",
            "Compliance with specific accreditation requirements and reporting timelines of relevant Quality Councils (QCTO, CHE, Umalusi) and SETAs is maintained",
            "Ongoing requirements beyond initial accreditation: reports, change notifications, standards, monitoring/re-accreditation.",
        ),
        (
            "LCR 9.3",
            "Policies and procedures related to information management comply with the Protection of Personal Information Act (POPIA)",
            "Information Officer, awareness, privacy notices, consent, DSARs, security, breach response, operator contracts.",
        ),
        (
            "LCR 9.4",
            "Accurate and timely statutory and regulatory reporting is submitted as required (e.g., to DHET, DoEL, SARS, CIPC)",
            "Mandatory reports such as HETMIS, WSP/ATR, tax returns, and CIPC annual returns.",
        ),
        (
            "LCR 9.5",
            "Integrated reporting or similar reporting mechanisms are used to provide stakeholders with a holistic view of performance",
            "Connect strategy, governance, performance and outlook across multiple capitals.",
        ),
    ),
    rows=(
        ("LCR 9.1", "9.1.1", "Compliance Management Policy/Framework"),
        ("LCR 9.1", "9.1.2", "Legal Register identifying applicable legislation and compliance status"),
        ("LCR 9.1", "9.1.3", "Records of legal updates received/reviewed"),
        ("LCR 9.1", "9.1.4", "Policies and procedures aligned with key legislation (OHSA, POPIA, HR policies for BCEA/LRA)"),
        ("LCR 9.1", "9.1.5", "Staff training records on key compliance areas (e.g., POPIA, OHSA)"),
        ("LCR 9.1", "9.1.6", "Internal compliance checklists/audits"),
        ("LCR 9.1", "9.1.7", "Reports to management/governance on compliance matters"),
        ("LCR 9.2", "9.2.1", "Current Accreditation Letters/Certificates from QCTO/CHE/Umalusi/SETAs"),
        ("LCR 9.2", "9.2.2", "Copies of annual reports/data submissions made to accrediting bodies"),
        ("LCR 9.2", "9.2.3", "Records of communication with accrediting bodies"),
        ("LCR 9.2", "9.2.4", "Evidence of participation in monitoring visits or re-accreditation processes"),
        ("LCR 9.2", "9.2.5", "Internal procedures for managing accreditation compliance/reporting"),
        ("LCR 9.3", "9.3.1", "POPIA Compliance Policy"),
        ("LCR 9.3", "9.3.2", "Appointment letter for Information Officer"),
        ("LCR 9.3", "9.3.3", "Privacy Notices (staff, learners, website)"),
        ("LCR 9.3", "9.3.5", "Consent forms/records"),
        ("LCR 9.3", "9.3.6", "Procedure for handling Data Subject Access Requests & records of requests handled"),
        ("LCR 9.3", "9.3.7", "Staff training records on POPIA"),
        ("LCR 9.3", "9.3.8", "Information security policies/procedures"),
        ("LCR 9.3", "9.3.9", "Data breach incident response plan"),
        ("LCR 9.3", "9.3.10", "Contracts/DPAs with third-party operators"),
        ("LCR 9.4", "9.4.1", "Copies of key statutory reports submitted (e.g., WSP/ATR, HETMIS submission confirmation)"),
        ("LCR 9.4", "9.4.2", "SARS returns, CIPC annual return confirmation"),
        ("LCR 9.4", "9.4.3", "Internal calendar/checklist for statutory reporting deadlines"),
        ("LCR 9.4", "9.4.4", "Procedures for compiling and submitting statutory reports"),
        ("LCR 9.5", "9.5.1", "Annual Integrated Report (if produced)"),
        ("LCR 9.5", "9.5.2", "Annual Report covering governance, strategy, educational and financial performance, social impact, stakeholder relations"),
        ("LCR 9.5", "9.5.3", "Reporting framework used (e.g., IIRC Framework, GRI Standards)"),
        ("LCR 9.5", "9.5.4", "Evidence linking strategy, risks, performance and outlook in reporting"),
    ),
)


# Document section key → catalog, in wizard order
QA_CATALOGS = {
    "gel": GEL,
    "spr": SPR,
    "tla": TLA,
    "lsw": LSW,
    "sce": SCE,
    "rle": RLE,
    "qmi": QMI,
    "sec": SEC,
    "lcr": LCR,
}
