"""
Workbook wizard service.

Each workbook kind is a fixed sequence of steps. A step shows (GET) and
replaces (POST) at most one document section:

    GET   load → prepare (seed / sync; saved only if it changed anything) → view
    POST  load → validate posted section → replace it → re-derive → save → redirect

Navigation (``nav``):
    prev     previous step; from step 1 back to the workbook list
    save     workbook list
    next     next step; on the final step the workbook becomes 'completed'
             and the caller returns to the list
    refresh  (Organisation Information step 9 only) rebuild the historical
             student rows and stay on the step

Every POST answers with a redirect descriptor:
    {"target": "step", "step": n}   or   {"target": "list"}

Business rule failures come back as ``(None, {"error", "status", ...})``;
lookups outside the caller's company raise NotFoundError.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Callable, NamedTuple

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import or_, select

from workbook_app.catalogs.quality_assurance import QA_CATALOGS
from workbook_app.catalogs.training_qa import TQA_OVERVIEW_LABELS
from workbook_app.core.exceptions import NotFoundError, ValidationError
from workbook_app.documents import document_class
from workbook_app.documents.org_info import (
    CampusSiteRow,
    DirectorRow,
    EmploymentPosition,
    QualificationCourseRow,
)
from workbook_app.documents.quality_assurance import QA_GRID_KEYS
from workbook_app.documents.training_qa import TQA_GRID_KEYS
from workbook_app.models import db
from workbook_app.models.company import Company
from workbook_app.models.submission import (
    WORKBOOK_ORG_INFO,
    WORKBOOK_QUALITY_ASSURANCE,
    WORKBOOK_STATUSES,
    WORKBOOK_TITLES,
    WORKBOOK_TRAINING_QA,
    WORKBOOK_TYPES,
    WorkbookSubmission,
)
from workbook_app.services import document_store, seeder, synchronizer
from workbook_app.services.helpers.scoped_queries import get_scoped_workbook, require_company
from workbook_app.services.overview_builder import build_overview
from workbook_app.services.scoring import compliance_overview, part_breakdown, rollup, score
from workbook_app.utils.errors import E

logger = logging.getLogger(__name__)

NAV_PREV = "prev"
NAV_SAVE = "save"
NAV_NEXT = "next"
NAV_REFRESH = "refresh"


class Step(NamedTuple):
    """One wizard step.

    section      document section key shown / posted; None for nav-only pages
    prepare      GET hook, (document) -> None; may seed or sync in place
    after_apply  POST hook run after the posted section replaced the old one
    view         GET hook returning extra read-only payload, (document) -> dict
    """

    number: int
    name: str
    section: str | None = None
    default_nav: str = NAV_NEXT
    prepare: Callable | None = None
    after_apply: Callable | None = None
    view: Callable | None = None
    refresh: Callable | None = None


# ── Step hooks ──────────────────────────────────────────────────────────────


def _ensure_row(section_key, list_attr, row_model):
    def hook(document):
        seeder.ensure_at_least_one(getattr(document.get_section(section_key), list_attr), row_model)
    return hook


def _seed_qa(key):
    def hook(document):
        seeder.seed_quality_assurance(document, key)
    return hook


def _seed_tqa(key):
    def hook(document):
        seeder.seed_training_qa(document, key)
    return hook


def _prepare_approvals(document):
    seeder.ensure_default_approvals(document.section1)


def _prepare_pricing(document):
    synchronizer.sync_pricing(document.qualifications, document.pricing)


def _reapply_pricing_identity(document):
    synchronizer.apply_pricing_identity(document.qualifications, document.pricing)


def _view_overview(document):
    return {"overview": build_overview(document).model_dump(mode="json")}


def _view_qa_summary(document):
    scores = []
    for key in QA_GRID_KEYS:
        s = score(document.get_section(key).rows)
        scores.append(s)
    categories = [
        {"key": key, "title": QA_CATALOGS[key].title, **s.to_dict()}
        for key, s in zip(QA_GRID_KEYS, scores)
    ]
    gel_parts = [
        {"part_code": code, **s.to_dict()}
        for code, s in part_breakdown(document.gel.rows)
    ]
    return {
        "scores": categories,
        "overall": rollup(scores).to_dict(),
        "gel_parts": gel_parts,
    }


def _view_tqa_compliance(document):
    sections = {key: document.get_section(key) for key in TQA_GRID_KEYS}
    return {"compliance": compliance_overview(sections, TQA_OVERVIEW_LABELS)}


# ── Step registries ─────────────────────────────────────────────────────────

ORG_INFO_STEPS = (
    Step(1, "guide"),
    Step(2, "overview", view=_view_overview),
    Step(3, "section1", "section1", prepare=_prepare_approvals),
    Step(4, "board", "board", prepare=_ensure_row("board", "directors", DirectorRow)),
    Step(5, "employment", "employment", prepare=_ensure_row("employment", "positions", EmploymentPosition)),
    Step(6, "campuses", "campuses", prepare=_ensure_row("campuses", "sites", CampusSiteRow)),
    Step(7, "qualifications", "qualifications",
         prepare=_ensure_row("qualifications", "items", QualificationCourseRow)),
    Step(8, "pricing", "pricing", default_nav=NAV_SAVE,
         prepare=_prepare_pricing, after_apply=_reapply_pricing_identity),
    Step(9, "student_historical", "student_historical", default_nav=NAV_SAVE,
         prepare=synchronizer.prefill_historical, refresh=synchronizer.refresh_historical),
    Step(10, "student_current", "student_current", default_nav=NAV_SAVE),
)

QA_STEPS = (
    Step(1, "overview", "overview"),
    Step(2, "guide"),
    Step(3, "summary", "summary", view=_view_qa_summary),
    Step(4, "info", "info"),
) + tuple(
    Step(5 + i, key, key, prepare=_seed_qa(key), after_apply=_seed_qa(key))
    for i, key in enumerate(QA_GRID_KEYS)
)

TQA_STEPS = (
    Step(1, "guide", "guide"),
    Step(2, "general", "general", view=_view_tqa_compliance),
    Step(3, "site_readiness", "site_readiness", default_nav=NAV_SAVE,
         prepare=_seed_tqa("site_readiness"), after_apply=_seed_tqa("site_readiness")),
    Step(4, "equipment", "equipment",
         prepare=_seed_tqa("equipment"), after_apply=_seed_tqa("equipment")),
    Step(5, "facilitator", "facilitator",
         prepare=_seed_tqa("facilitator"), after_apply=_seed_tqa("facilitator")),
    Step(6, "learner", "learner",
         prepare=_seed_tqa("learner"), after_apply=_seed_tqa("learner")),
    Step(7, "admin_support", "admin_support",
         prepare=_seed_tqa("admin_support"), after_apply=_seed_tqa("admin_support")),
    Step(8, "risk", "risk", default_nav=NAV_SAVE,
         prepare=_seed_tqa("risk"), after_apply=_seed_tqa("risk")),
)

STEP_REGISTRIES = {
    WORKBOOK_ORG_INFO: ORG_INFO_STEPS,
    WORKBOOK_QUALITY_ASSURANCE: QA_STEPS,
    WORKBOOK_TRAINING_QA: TQA_STEPS,
}


def steps_for(workbook_type):
    return STEP_REGISTRIES[workbook_type]


def _resolve_step(workbook, number) -> Step:
    steps = steps_for(workbook.workbook_type)
    if not isinstance(number, int) or not 1 <= number <= len(steps):
        raise NotFoundError(resource="Step", resource_id=number)
    return steps[number - 1]


def _allowed_navs(step):
    navs = [NAV_PREV, NAV_SAVE, NAV_NEXT]
    if step.refresh is not None:
        navs.append(NAV_REFRESH)
    return navs


def redirect_for(step_number, total_steps, nav) -> dict:
    """Where the caller goes after a POST with ``nav`` on ``step_number``."""
    if nav == NAV_PREV:
        if step_number <= 1:
            return {"target": "list"}
        return {"target": "step", "step": step_number - 1}
    if nav == NAV_NEXT and step_number < total_steps:
        return {"target": "step", "step": step_number + 1}
    if nav == NAV_REFRESH:
        return {"target": "step", "step": step_number}
    return {"target": "list"}


def _step_info(step, total):
    return {
        "number": step.number,
        "name": step.name,
        "total": total,
        "is_final": step.number == total,
        "section": step.section,
        "default_nav": step.default_nav,
        "navs": _allowed_navs(step),
    }


def _stamp_title(prefix):
    return f"{prefix} - {datetime.now(timezone.utc):%Y-%m-%d %H:%M}"


# ── Public API: wizard ──────────────────────────────────────────────────────


def get_step(workbook_id, step_number, identity) -> dict:
    """Render one wizard step.

    Seeding / synchronisation done by the step's prepare hook is persisted
    immediately, but only when it actually changed the document.

    Raises:
        NotFoundError: unknown workbook, other company's workbook, or bad step.
    """
    workbook = get_scoped_workbook(workbook_id, identity)
    step = _resolve_step(workbook, step_number)
    steps = steps_for(workbook.workbook_type)
    document = document_store.load_document(workbook)

    if step.prepare is not None:
        before = document_store.dump_document(document)
        step.prepare(document)
        if document_store.dump_document(document) != before:
            document_store.save_document(workbook, document)
            db.session.commit()
            logger.info(
                "Step %d prepared and saved",
                step.number,
                extra={"workbook_id": workbook.id, "step": step.number, "event_type": "step_prepared"},
            )

    result = {
        "workbook": workbook.to_dict(),
        "step": _step_info(step, len(steps)),
        "section": (
            document.get_section(step.section).model_dump(mode="json")
            if step.section else None
        ),
    }
    if step.view is not None:
        result.update(step.view(document))
    return result


def post_step(workbook_id, step_number, identity, nav=None, section=None):
    """Apply one wizard step and return where to go next.

    Args:
        nav:     prev | save | next (| refresh); defaults per step.
        section: posted section payload (dict). It replaces the stored section
                 wholesale; omit it on nav-only pages.

    Returns:
        ({"redirect": {...}, "workbook": {...}}, None) on success.
        (None, {"error", "status", ...}) when nav or the section is invalid;
        nothing is persisted in that case and the posted section is echoed.
    """
    workbook = get_scoped_workbook(workbook_id, identity)
    step = _resolve_step(workbook, step_number)
    total = len(steps_for(workbook.workbook_type))

    raw_nav = nav or step.default_nav
    nav = raw_nav.strip().lower() if isinstance(raw_nav, str) else None
    if nav not in _allowed_navs(step):
        return None, {
            "error": f"Unknown nav {raw_nav!r}. Must be one of: {', '.join(_allowed_navs(step))}",
            "code": E.VALIDATION_INVALID,
            "status": 400,
        }

    document = document_store.load_document(workbook)

    if nav == NAV_REFRESH:
        step.refresh(document)
        document_store.save_document(workbook, document)
        db.session.commit()
        return {"redirect": redirect_for(step.number, total, nav), "workbook": workbook.to_dict()}, None

    if step.section is not None and section is not None:
        model = document_class(workbook.workbook_type).section_model(step.section)
        if not isinstance(section, dict):
            return None, {
                "error": "section must be a JSON object",
                "status": 422,
                "section": section,
            }
        try:
            posted = model.model_validate(section)
        except PydanticValidationError as exc:
            return None, {
                "error": f"Section '{step.section}' is invalid",
                "status": 422,
                "details": {"errors": json.loads(exc.json(include_url=False))},
                "section": section,
            }
        document.replace_section(step.section, posted)
        if step.after_apply is not None:
            step.after_apply(document)
        document_store.save_document(workbook, document)
    else:
        document_store.touch(workbook)

    completed = nav == NAV_NEXT and step.number == total
    if completed:
        workbook.status = "completed"

    db.session.commit()

    logger.info(
        "Step %d saved (nav=%s)",
        step.number, nav,
        extra={
            "workbook_id": workbook.id,
            "workbook_type": workbook.workbook_type,
            "step": step.number,
            "nav": nav,
            "event_type": "step_saved",
        },
    )
    if completed:
        logger.info(
            "Workbook completed",
            extra={"workbook_id": workbook.id, "workbook_type": workbook.workbook_type,
                   "event_type": "workbook_completed"},
        )

    return {"redirect": redirect_for(step.number, total, nav), "workbook": workbook.to_dict()}, None


# ── Public API: workbook records ────────────────────────────────────────────


def new_workbook(workbook_type, user_id, company_id, title, submission_id=None) -> WorkbookSubmission:
    """Build (not commit) a draft workbook with a default document."""
    document = document_class(workbook_type).create_default()
    workbook = WorkbookSubmission(
        user_id=user_id,
        company_id=company_id,
        title=title,
        workbook_type=workbook_type,
        status="draft",
        submission_id=submission_id,
    )
    document_store.save_document(workbook, document)
    return workbook


def start_workbook(workbook_type, identity, company_id=None) -> dict:
    """Create a standalone workbook.

    Company users always create for their own company; privileged users must
    name the company.

    Raises:
        ValidationError: unknown type, or privileged caller without company_id.
        ForbiddenError:  company user not linked to a company.
        NotFoundError:   named company does not exist.
    """
    if workbook_type not in WORKBOOK_TYPES:
        raise ValidationError(
            f"Invalid workbook_type '{workbook_type}'",
            details={"workbook_type": f"Must be one of: {', '.join(WORKBOOK_TYPES)}"},
        )

    if identity is not None and identity.is_privileged:
        if not company_id:
            raise ValidationError("company_id is required", details={"company_id": "required"})
        if db.session.get(Company, company_id) is None:
            raise NotFoundError(resource="Company", resource_id=company_id)
    else:
        company_id = require_company(identity)

    workbook = new_workbook(
        workbook_type, identity.user_id, company_id, _stamp_title(WORKBOOK_TITLES[workbook_type]),
    )
    db.session.add(workbook)
    db.session.commit()

    logger.info(
        "Workbook created",
        extra={"workbook_id": workbook.id, "workbook_type": workbook_type,
               "company_id": company_id, "event_type": "workbook_created"},
    )
    return workbook.to_dict()


def list_workbooks(identity, q=None, company_id=None, workbook_type=None, status=None) -> list[dict]:
    """Workbooks visible to the caller, most recently updated first.

    ``q`` matches title, owner id or company name (case-insensitive).
    """
    stmt = select(WorkbookSubmission).outerjoin(Company, WorkbookSubmission.company_id == Company.id)

    if not (identity is not None and identity.is_privileged):
        stmt = stmt.where(WorkbookSubmission.company_id == require_company(identity))

    if company_id:
        stmt = stmt.where(WorkbookSubmission.company_id == company_id)
    if workbook_type:
        stmt = stmt.where(WorkbookSubmission.workbook_type == workbook_type)
    if status:
        if status not in WORKBOOK_STATUSES:
            raise ValidationError(f"Invalid status '{status}'")
        stmt = stmt.where(WorkbookSubmission.status == status)
    if q and q.strip():
        term = f"%{q.strip().lower()}%"
        stmt = stmt.where(or_(
            db.func.lower(WorkbookSubmission.title).like(term),
            db.func.lower(WorkbookSubmission.user_id).like(term),
            db.func.lower(Company.name).like(term),
        ))

    stmt = stmt.order_by(WorkbookSubmission.updated_at.desc(), WorkbookSubmission.id.desc())
    return [w.to_dict() for w in db.session.execute(stmt).scalars()]


def show_workbook(workbook_id, identity) -> dict:
    """Read-only view of the whole document."""
    workbook = get_scoped_workbook(workbook_id, identity)
    document = document_store.load_document(workbook)
    result = {
        "workbook": workbook.to_dict(),
        "document": document.model_dump(mode="json"),
    }
    if workbook.workbook_type == WORKBOOK_TRAINING_QA:
        result.update(_view_tqa_compliance(document))
    return result


def open_workbook(workbook_id, identity) -> dict:
    """Entry point of the wizard: always step 1."""
    workbook = get_scoped_workbook(workbook_id, identity)
    return {"workbook": workbook.to_dict(), "redirect": {"target": "step", "step": 1}}
