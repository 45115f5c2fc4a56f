"""
Workbook Management Service
Submission bundle and workbook models.

Models:
    - Submission:          a bundle owning exactly three workbooks (one per kind)
                           and the administrator's approve / reject decision
    - WorkbookSubmission:  one workbook; ``data`` holds its JSON document

Architecture:
    Company ──1:N──▶ Submission ──1:3──▶ WorkbookSubmission
    Company ──1:N──▶ WorkbookSubmission  (standalone workbooks have no bundle)

Lifecycle states:
    WorkbookSubmission:  draft → completed   (submitted / approved exist in stored
                                              data but nothing sets them any more)
    Submission:          draft → in_progress → completed   (derived from children on read)
                         completed → submitted              (user action)
                         submitted → approved | rejected     (administrator decision)

The bundle's draft/in_progress/completed status is never trusted as stored:
``derive_bundle_status`` recomputes it from the three children whenever the
bundle is read and is not yet terminal.
"""

import uuid
from datetime import datetime, timezone

from workbook_app.models import db


# ── Constants ────────────────────────────────────────────────────────────────

WORKBOOK_ORG_INFO = "org_info"
WORKBOOK_QUALITY_ASSURANCE = "quality_assurance"
WORKBOOK_TRAINING_QA = "training_qa"

# Order is the order the bundle creates (and lists) its children
WORKBOOK_TYPES = (WORKBOOK_ORG_INFO, WORKBOOK_QUALITY_ASSURANCE, WORKBOOK_TRAINING_QA)

# Title prefixes; the creation time (UTC, "%Y-%m-%d %H:%M") is appended
WORKBOOK_TITLES = {
    WORKBOOK_ORG_INFO: "Organisation Information",
    WORKBOOK_QUALITY_ASSURANCE: "Quality Assurance",
    WORKBOOK_TRAINING_QA: "Training QA",
}
BUNDLE_WORKBOOK_TITLES = {
    WORKBOOK_ORG_INFO: "New Org Info",
    WORKBOOK_QUALITY_ASSURANCE: "New QA Workbook",
    WORKBOOK_TRAINING_QA: "New Training QA Workbook",
}

WORKBOOK_STATUSES = {"draft", "submitted", "approved", "completed"}

BUNDLE_STATUSES = {
    "draft", "in_progress", "completed",
    "submitted", "approved", "rejected",
}

# Reached only by explicit user / administrator action; never recomputed
BUNDLE_LOCKED_STATUSES = frozenset({"submitted", "approved", "rejected"})
# A user may hold at most one bundle in these states per company
BUNDLE_ACTIVE_STATUSES = frozenset({"draft", "in_progress", "completed"})

BUNDLE_TRANSITIONS = {
    "draft": ["in_progress", "completed"],
    "in_progress": ["draft", "completed"],
    "completed": ["draft", "in_progress", "submitted"],
    "submitted": ["approved", "rejected"],
    "approved": [],
    "rejected": [],
}

DECISIONS = {"approve": "approved", "reject": "rejected"}

REQUIRED_WORKBOOK_COUNT = len(WORKBOOK_TYPES)


def validate_bundle_transition(old_status, new_status):
    """Return True if Submission status transition is valid."""
    return new_status in BUNDLE_TRANSITIONS.get(old_status, [])


def is_workbook_complete(status):
    """A workbook counts as complete whenever it has left draft."""
    return status != "draft"


def derive_bundle_status(workbook_statuses):
    """Recompute a non-locked bundle status from its children's statuses.

    completed    all required children present and none in draft
    in_progress  at least one child has left draft
    draft        otherwise
    """
    statuses = list(workbook_statuses)
    any_progress = any(is_workbook_complete(s) for s in statuses)
    all_complete = (
        len(statuses) == REQUIRED_WORKBOOK_COUNT
        and all(is_workbook_complete(s) for s in statuses)
    )
    if all_complete:
        return "completed"
    if any_progress:
        return "in_progress"
    return "draft"


# ═════════════════════════════════════════════════════════════════════════════
# 1. Submission
# ═════════════════════════════════════════════════════════════════════════════


class Submission(db.Model):
    """
    Bundle of three workbooks submitted together for approval.

    Business rules:
    - Created with three draft children, one per workbook type.
    - decision_note / decided_by_user_id / decided_at_utc are written once,
      by the transition out of 'submitted'.
    - Deleting a bundle deletes its workbooks (only allowed while draft).
    """

    __tablename__ = "submissions"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_user_id = db.Column(db.String(64), nullable=False, index=True)
    company_id = db.Column(
        db.String(36),
        db.ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    status = db.Column(
        db.String(20), nullable=False, default="draft",
        comment="draft | in_progress | completed | submitted | approved | rejected",
    )

    # Administrator decision metadata
    decision_note = db.Column(db.String(2000), nullable=True)
    decided_by_user_id = db.Column(db.String(64), nullable=True)
    decided_at_utc = db.Column(db.DateTime(timezone=True), nullable=True)

    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        db.CheckConstraint(
            "status IN ('draft','in_progress','completed','submitted','approved','rejected')",
            name="ck_submission_status",
        ),
    )

    company = db.relationship("Company")
    workbooks = db.relationship(
        "WorkbookSubmission", back_populates="submission",
        cascade="all, delete-orphan", order_by="WorkbookSubmission.id",
    )

    @property
    def is_locked(self) -> bool:
        return self.status in BUNDLE_LOCKED_STATUSES

    def to_dict(self, include_children=False):
        result = {
            "id": self.id,
            "owner_user_id": self.owner_user_id,
            "company_id": self.company_id,
            "company_name": self.company.name if self.company else None,
            "status": self.status,
            "decision_note": self.decision_note,
            "decided_by_user_id": self.decided_by_user_id,
            "decided_at_utc": self.decided_at_utc.isoformat() if self.decided_at_utc else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "workbook_count": len(self.workbooks),
        }
        if include_children:
            result["workbooks"] = [w.to_dict() for w in self.workbooks]
        return result

    def __repr__(self):
        return f"<Submission {self.id} [{self.status}]>"


# ═════════════════════════════════════════════════════════════════════════════
# 2. WorkbookSubmission
# ═════════════════════════════════════════════════════════════════════════════


class WorkbookSubmission(db.Model):
    """
    One workbook and its JSON document.

    ``data`` is an opaque JSON text blob owned by the document store
    (services/document_store.py); no column-level schema is enforced, so
    every read goes through the tolerant document parser.
    """

    __tablename__ = "workbook_submissions"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False)
    company_id = db.Column(
        db.String(36),
        db.ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = db.Column(db.String(200), nullable=False)
    workbook_type = db.Column(
        db.String(30), nullable=False,
        comment="org_info | quality_assurance | training_qa",
    )
    data = db.Column(db.Text, nullable=True, comment="Workbook JSON document")
    status = db.Column(
        db.String(20), nullable=False, default="draft",
        comment="draft | submitted | approved | completed",
    )
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )

    submission_id = db.Column(
        db.String(36),
        db.ForeignKey("submissions.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    __table_args__ = (
        db.CheckConstraint(
            "status IN ('draft','submitted','approved','completed')",
            name="ck_workbook_submission_status",
        ),
        db.CheckConstraint(
            "workbook_type IN ('org_info','quality_assurance','training_qa')",
            name="ck_workbook_submission_type",
        ),
    )

    company = db.relationship("Company")
    submission = db.relationship("Submission", back_populates="workbooks")

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "company_id": self.company_id,
            "company_name": self.company.name if self.company else None,
            "title": self.title,
            "workbook_type": self.workbook_type,
            "status": self.status,
            "submission_id": self.submission_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<WorkbookSubmission {self.id}: {self.workbook_type} [{self.status}]>"
