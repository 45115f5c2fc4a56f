"""
Workbook JSON documents.

Each workbook kind has one root document model; ``DOCUMENT_TYPES`` maps the
stored ``workbook_type`` value to it.
"""

from workbook_app.documents.org_info import OrgInfoDocument
from workbook_app.documents.quality_assurance import QaDocument
from workbook_app.documents.training_qa import TqaDocument

DOCUMENT_TYPES = {
    "org_info": OrgInfoDocument,
    "quality_assurance": QaDocument,
    "training_qa": TqaDocument,
}


def document_class(workbook_type):
    try:
        return DOCUMENT_TYPES[workbook_type]
    except KeyError:
        raise ValueError(f"Unknown workbook type: {workbook_type}") from None
