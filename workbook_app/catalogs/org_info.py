"""Reference lists for the Organisation Information workbook."""

SOUTH_AFRICA_PROVINCES = (
    "Eastern Cape",
    "Free State",
    "Gauteng",
    "KwaZulu-Natal",
    "Limpopo",
    "Mpumalanga",
    "Northern Cape",
    "North West",
    "Western Cape",
)

# Canonical programme types, in the order the overview lists them.
# The spelling of "Skills Programmme" matches stored data; do not correct it.
PROGRAMME_TYPES_ORDERED = (
    "Short Course (Non Credit)",
    "Short Course (Credit Bearing)",
    "Skills Programmme",
    "General Certificate",
    "General Occupational Certificate",
    "Elementary Certificate",
    "Elementary Occupational Certificate",
    "Intermediate Certificate",
    "Intermediate Occupational Certificate",
    "National Certificate",
    "National Occupational Certificate",
    "Higher Certificate",
    "Higher Occupational Certificate",
    "Advanced Occupational Certificate",
    "Occupational Diploma",
    "Diploma",
    "Advanced Certificate",
    "Advanced Occupational Diploma",
    "Advanced Diploma",
    "Specialised Occupational Diploma",
    "Bachelor's Degree",
    "Postgraduate Diploma",
    "Bachelor's Honours Degree",
    "Master's Degree",
    "Professional Master's Degree",
    "Doctoral Degree",
    "Professional Doctorate",
)

# (name, is_other) rows seeded into Section 1 approvals
DEFAULT_APPROVALS = (
    ("Quality Council for Trades & Occupations (QCTO)", False),
    ("Umalusi Standards & Guidelines for Quality", False),
    ("Council on Higher Education Quality Assurance Framework", False),
    ("King IV Report Principles Corporate Governance", False),
    ("Independent Code of Governance for Non-Profit Organisations", False),
    ("African Standards & Guidelines for Quality Assurance", False),
    ("European Standards & Guidelines for Quality Assurance", False),
    ("ISO 21001:2018 - Education Organisation Management Systems (EOMS)", False),
    ("Investors in People", False),
    ("Other (specify)", True),
)

UNSPECIFIED = "(Unspecified)"
