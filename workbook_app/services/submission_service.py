"""
Submission bundle service.

A bundle groups one workbook of each kind. Its status has two halves:

    derived   draft / in_progress / completed, recomputed from the children
              on every read and stored back when it drifted
    locked    submitted (user), approved / rejected (administrator); never
              recomputed again

Operations return ``(dict, None)`` on success and ``(None, err)`` for
transitions that are not allowed; lookups outside the caller's company
raise NotFoundError, missing rights raise ForbiddenError.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import or_, select

from workbook_app.core.exceptions import ValidationError
from workbook_app.models import db
from workbook_app.models.company import Company
from workbook_app.models.submission import (
    BUNDLE_ACTIVE_STATUSES,
    BUNDLE_STATUSES,
    BUNDLE_WORKBOOK_TITLES,
    DECISIONS,
    REQUIRED_WORKBOOK_COUNT,
    WORKBOOK_TYPES,
    Submission,
    derive_bundle_status,
    is_workbook_complete,
    validate_bundle_transition,
)
from workbook_app.services.helpers.scoped_queries import (
    get_scoped_submission,
    require_company,
    require_privileged,
)
from workbook_app.services.workbook_service import new_workbook
from workbook_app.utils.errors import E

logger = logging.getLogger(__name__)


def _now():
    return datetime.now(timezone.utc)


def _transition_error(submission, message):
    return {
        "error": message,
        "code": E.INVALID_TRANSITION,
        "status": 409,
        "details": {"current_status": submission.status},
    }


def refresh_status(submission) -> bool:
    """Recompute a non-locked bundle's status from its children.

    Returns True when the stored status changed (caller commits).
    """
    if submission.is_locked:
        return False
    derived = derive_bundle_status(w.status for w in submission.workbooks)
    if derived == submission.status:
        return False
    submission.status = derived
    submission.updated_at = _now()
    return True


def _refresh_and_commit(submissions):
    changed = False
    for submission in submissions:
        changed = refresh_status(submission) or changed
    if changed:
        db.session.commit()


# ── User operations ─────────────────────────────────────────────────────────


def start_submission(identity) -> dict:
    """Return the caller's active bundle, or create one with three draft workbooks.

    The returned dict carries ``created`` so the caller can tell the two apart.

    Raises:
        ForbiddenError: caller is not linked to a company.
    """
    company_id = require_company(identity)

    existing = db.session.execute(
        select(Submission)
        .where(
            Submission.company_id == company_id,
            Submission.owner_user_id == identity.user_id,
            Submission.status.in_(BUNDLE_ACTIVE_STATUSES),
        )
        .order_by(Submission.created_at.desc())
    ).scalars().first()
    if existing is not None:
        _refresh_and_commit([existing])
        return {**existing.to_dict(include_children=True), "created": False}

    submission = Submission(company_id=company_id, owner_user_id=identity.user_id, status="draft")
    db.session.add(submission)
    db.session.flush()

    stamp = f"{_now():%Y-%m-%d %H:%M}"
    for workbook_type in WORKBOOK_TYPES:
        submission.workbooks.append(new_workbook(
            workbook_type,
            identity.user_id,
            company_id,
            f"{BUNDLE_WORKBOOK_TITLES[workbook_type]} - {stamp}",
            submission_id=submission.id,
        ))
    db.session.commit()

    logger.info(
        "Submission bundle created",
        extra={"submission_id": submission.id, "company_id": company_id,
               "user_id": identity.user_id, "event_type": "submission_created"},
    )
    return {**submission.to_dict(include_children=True), "created": True}


def list_submissions(identity) -> list[dict]:
    """Bundles visible to the caller, newest first.

    Privileged callers see every bundle; company users see their company's;
    a user without a company sees only the bundles they own.
    """
    stmt = select(Submission).order_by(Submission.created_at.desc())
    if not identity.is_privileged:
        if identity.company_id:
            stmt = stmt.where(Submission.company_id == identity.company_id)
        else:
            stmt = stmt.where(Submission.owner_user_id == identity.user_id)

    submissions = list(db.session.execute(stmt).scalars())
    _refresh_and_commit(submissions)
    return [s.to_dict() for s in submissions]


def get_submission(submission_id, identity) -> dict:
    submission = get_scoped_submission(submission_id, identity)
    _refresh_and_commit([submission])
    return submission.to_dict(include_children=True)


def submit_submission(submission_id, identity):
    """Send a bundle for review once all three workbooks have left draft."""
    submission = get_scoped_submission(submission_id, identity)

    if submission.is_locked:
        return None, _transition_error(submission, "This submission has already been finalized.")

    refresh_status(submission)
    all_complete = (
        len(submission.workbooks) == REQUIRED_WORKBOOK_COUNT
        and all(is_workbook_complete(w.status) for w in submission.workbooks)
    )
    if not all_complete or not validate_bundle_transition(submission.status, "submitted"):
        db.session.commit()
        return None, _transition_error(
            submission, "All three workbooks must be completed before submitting.",
        )

    submission.status = "submitted"
    submission.updated_at = _now()
    db.session.commit()

    logger.info(
        "Submission bundle submitted",
        extra={"submission_id": submission.id, "user_id": identity.user_id,
               "event_type": "submission_submitted"},
    )
    return submission.to_dict(include_children=True), None


def delete_submission(submission_id, identity):
    """Delete a draft bundle and its workbooks."""
    submission = get_scoped_submission(submission_id, identity)
    refresh_status(submission)

    if submission.status != "draft":
        db.session.commit()
        return None, _transition_error(submission, "Only draft submissions can be deleted.")

    deleted_id = submission.id
    db.session.delete(submission)
    db.session.commit()

    logger.info(
        "Submission bundle deleted",
        extra={"submission_id": deleted_id, "user_id": identity.user_id,
               "event_type": "submission_deleted"},
    )
    return {"deleted": True, "id": deleted_id}, None


# ── Administrator operations ────────────────────────────────────────────────


def admin_list_submissions(identity, q=None, status=None) -> list[dict]:
    """All bundles, optionally filtered by company name / owner id and status.

    Statuses are refreshed before the status filter applies, so the filter
    sees the derived value.
    """
    require_privileged(identity)

    stmt = select(Submission).outerjoin(Company, Submission.company_id == Company.id)
    if q and q.strip():
        term = f"%{q.strip().lower()}%"
        stmt = stmt.where(or_(
            db.func.lower(Company.name).like(term),
            db.func.lower(Submission.owner_user_id).like(term),
        ))
    if status and status not in BUNDLE_STATUSES:
        raise ValidationError(
            f"Invalid status '{status}'",
            details={"status": f"Must be one of: {', '.join(sorted(BUNDLE_STATUSES))}"},
        )

    submissions = list(db.session.execute(stmt.order_by(Submission.created_at.desc())).scalars())
    _refresh_and_commit(submissions)
    if status:
        submissions = [s for s in submissions if s.status == status]
    return [s.to_dict() for s in submissions]


def decide_submission(submission_id, decision, note, identity):
    """Approve or reject a submitted bundle.

    Args:
        decision: "approve" or "reject" (case-insensitive).
        note:     optional reason; stored trimmed, blank becomes None.

    Returns:
        (bundle_dict, None) on success.
        (None, {"error", "status": 400}) for an unknown decision.
        (None, {"error", "status": 409}) when the bundle is not 'submitted'.
    """
    require_privileged(identity)
    submission = get_scoped_submission(submission_id, identity)

    new_status = DECISIONS.get(decision.strip().lower()) if isinstance(decision, str) else None
    if new_status is None:
        return None, {
            "error": "Unknown decision. Choose approve or reject.",
            "code": E.VALIDATION_INVALID,
            "status": 400,
        }

    if submission.status != "submitted" or not validate_bundle_transition(submission.status, new_status):
        return None, _transition_error(
            submission, "Only bundles with status 'submitted' can be approved or rejected.",
        )

    now = _now()
    submission.status = new_status
    submission.decision_note = (note.strip() or None) if isinstance(note, str) else None
    submission.decided_by_user_id = identity.user_id
    submission.decided_at_utc = now
    submission.updated_at = now
    db.session.commit()

    logger.info(
        "Submission bundle %s",
        new_status,
        extra={"submission_id": submission.id, "user_id": identity.user_id,
               "status": new_status, "event_type": "submission_decided"},
    )
    return submission.to_dict(include_children=True), None
