"""
Company-scoped query helpers.

Every workbook or submission lookup by id goes through these helpers
instead of ``db.session.get(Model, pk)``. A non-privileged caller can only
reach records of their own company; a record of another company is
reported exactly like a missing one (NotFoundError → 404), so existence is
never disclosed across companies.

Usage:
    wb = get_scoped_workbook(workbook_id, identity)
    sub = get_scoped_submission(submission_id, identity)
"""

import logging

from sqlalchemy import select

from workbook_app.core.exceptions import ForbiddenError, NotFoundError
from workbook_app.models import db
from workbook_app.models.submission import Submission, WorkbookSubmission

logger = logging.getLogger(__name__)


def _get_scoped(model, resource, pk, identity):
    if identity is None:
        raise ForbiddenError("Authentication required")

    stmt = select(model).where(model.id == pk)
    if not identity.is_privileged:
        stmt = stmt.where(model.company_id == identity.company_id)

    result = db.session.execute(stmt).scalar_one_or_none()
    if result is None:
        logger.debug(
            "get_scoped: %s id=%s not found for company %s",
            resource, pk, identity.company_id,
        )
        raise NotFoundError(resource=resource, resource_id=pk, company_id=identity.company_id)
    return result


def get_scoped_workbook(workbook_id, identity) -> WorkbookSubmission:
    return _get_scoped(WorkbookSubmission, "Workbook", workbook_id, identity)


def get_scoped_submission(submission_id, identity) -> Submission:
    return _get_scoped(Submission, "Submission", submission_id, identity)


def require_company(identity) -> str:
    """Return the caller's company id, or refuse a non-privileged caller without one."""
    if identity is None:
        raise ForbiddenError("Authentication required")
    if not identity.company_id:
        raise ForbiddenError("Your user is not linked to a company.")
    return identity.company_id


def require_privileged(identity) -> None:
    if identity is None or not identity.is_privileged:
        raise ForbiddenError("Administrator role required")
