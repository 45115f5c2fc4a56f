"""
Workbook document persistence.

Documents live as JSON text in ``WorkbookSubmission.data``. Loading is
tolerant: invalid JSON, an empty value or a non-object root yields the
default document, and a section that fails validation falls back to its
default while the remaining sections load normally. Each fallback is
logged at WARNING with the workbook id; nothing is raised to the caller.

Saving replaces the whole ``data`` value and stamps ``updated_at``; the
caller owns the transaction (commit / rollback).
"""

import json
import logging
from datetime import datetime, timezone

from pydantic import ValidationError as PydanticValidationError

from workbook_app.documents import document_class
from workbook_app.documents.base import LENIENT

logger = logging.getLogger(__name__)


def parse_document(raw, doc_cls, *, workbook_id=None):
    """Parse stored JSON text into ``doc_cls``; never raises on bad content."""
    if not raw or not raw.strip():
        return doc_cls.create_default()

    try:
        payload = json.loads(raw)
    except ValueError:
        logger.warning(
            "Stored workbook document is not valid JSON; using defaults",
            extra={"workbook_id": workbook_id, "event_type": "document_fallback"},
        )
        return doc_cls.create_default()

    if not isinstance(payload, dict):
        logger.warning(
            "Stored workbook document root is %s, expected an object; using defaults",
            type(payload).__name__,
            extra={"workbook_id": workbook_id, "event_type": "document_fallback"},
        )
        return doc_cls.create_default()

    sections = {}
    for key, model in doc_cls.SECTION_MODELS.items():
        if key not in payload or payload[key] is None:
            continue
        try:
            sections[key] = model.model_validate(payload[key], context=LENIENT)
        except PydanticValidationError as exc:
            logger.warning(
                "Section %s of stored workbook document is invalid (%d errors); using defaults",
                key, exc.error_count(),
                extra={"workbook_id": workbook_id, "event_type": "section_fallback"},
            )
    return doc_cls(**sections)


def load_document(workbook):
    return parse_document(
        workbook.data,
        document_class(workbook.workbook_type),
        workbook_id=workbook.id,
    )


def dump_document(document) -> str:
    return document.model_dump_json()


def save_document(workbook, document) -> None:
    workbook.data = dump_document(document)
    workbook.updated_at = datetime.now(timezone.utc)


def touch(workbook) -> None:
    workbook.updated_at = datetime.now(timezone.utc)
