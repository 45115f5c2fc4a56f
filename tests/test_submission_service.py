"""Tests for submission bundles.

Coverage:
  1. start: three draft workbooks; the active bundle is reused
  2. Status derivation from the children (draft / in_progress / completed)
  3. submit requires all three workbooks out of draft; locked afterwards
  4. delete only while draft (status refreshed first), cascades to workbooks
  5. Administrator list / decide: rights, unknown decision, wrong state
"""

import pytest

from workbook_app.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from workbook_app.middleware.identity_context import Identity
from workbook_app.models import db
from workbook_app.models.submission import Submission, WorkbookSubmission, derive_bundle_status
from workbook_app.services import submission_service as svc
from workbook_app.services import workbook_service

FINAL_STEPS = {"org_info": 10, "quality_assurance": 13, "training_qa": 8}


def _complete(bundle, identity, types=None):
    for wb in bundle["workbooks"]:
        if types is None or wb["workbook_type"] in types:
            _, err = workbook_service.post_step(
                wb["id"], FINAL_STEPS[wb["workbook_type"]], identity, nav="next",
            )
            assert err is None


def _submitted_bundle(identity):
    bundle = svc.start_submission(identity)
    _complete(bundle, identity)
    result, err = svc.submit_submission(bundle["id"], identity)
    assert err is None
    return result


# ═════════════════════════════════════════════════════════════════════════
# Pure status derivation
# ═════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("statuses,expected", [
    (["draft", "draft", "draft"], "draft"),
    (["completed", "draft", "draft"], "in_progress"),
    (["completed", "completed", "completed"], "completed"),
    (["submitted", "approved", "completed"], "completed"),
    (["completed", "completed"], "in_progress"),
    ([], "draft"),
])
def test_derive_bundle_status(statuses, expected):
    assert derive_bundle_status(statuses) == expected


# ═════════════════════════════════════════════════════════════════════════
# User side
# ═════════════════════════════════════════════════════════════════════════


class TestStartSubmission:
    def test_creates_three_draft_workbooks(self, user, company):
        bundle = svc.start_submission(user)
        assert bundle["created"] is True
        assert bundle["status"] == "draft"
        assert bundle["company_id"] == company.id
        assert [w["workbook_type"] for w in bundle["workbooks"]] == [
            "org_info", "quality_assurance", "training_qa",
        ]
        assert all(w["status"] == "draft" for w in bundle["workbooks"])
        assert bundle["workbooks"][0]["title"].startswith("New Org Info - ")
        assert all(w["submission_id"] == bundle["id"] for w in bundle["workbooks"])

    def test_reuses_active_bundle(self, user):
        first = svc.start_submission(user)
        second = svc.start_submission(user)
        assert second["created"] is False
        assert second["id"] == first["id"]
        assert db.session.query(Submission).count() == 1

    def test_new_bundle_after_submit(self, user):
        submitted = _submitted_bundle(user)
        fresh = svc.start_submission(user)
        assert fresh["created"] is True
        assert fresh["id"] != submitted["id"]

    def test_requires_company(self):
        with pytest.raises(ForbiddenError):
            svc.start_submission(Identity(user_id="loner"))


class TestStatusRefresh:
    def test_status_follows_children_on_read(self, user):
        bundle = svc.start_submission(user)
        _complete(bundle, user, types={"org_info"})
        assert svc.get_submission(bundle["id"], user)["status"] == "in_progress"

        _complete(bundle, user)
        assert svc.get_submission(bundle["id"], user)["status"] == "completed"
        assert svc.list_submissions(user)[0]["status"] == "completed"

    def test_list_scoping(self, user, other_user, admin):
        svc.start_submission(user)
        svc.start_submission(other_user)
        assert len(svc.list_submissions(user)) == 1
        assert len(svc.list_submissions(admin)) == 2

    def test_cross_company_not_found(self, user, other_user):
        bundle = svc.start_submission(user)
        with pytest.raises(NotFoundError):
            svc.get_submission(bundle["id"], other_user)


class TestSubmit:
    def test_submit_requires_all_complete(self, user):
        bundle = svc.start_submission(user)
        _complete(bundle, user, types={"org_info", "training_qa"})
        result, err = svc.submit_submission(bundle["id"], user)
        assert result is None
        assert err["status"] == 409
        assert err["details"]["current_status"] == "in_progress"

    def test_submit_locks_bundle(self, user):
        submitted = _submitted_bundle(user)
        assert submitted["status"] == "submitted"

        _, err = svc.submit_submission(submitted["id"], user)
        assert err["status"] == 409
        assert svc.get_submission(submitted["id"], user)["status"] == "submitted"


class TestDelete:
    def test_delete_draft_cascades(self, user):
        bundle = svc.start_submission(user)
        result, err = svc.delete_submission(bundle["id"], user)
        assert err is None
        assert result == {"deleted": True, "id": bundle["id"]}
        assert db.session.query(WorkbookSubmission).count() == 0

    def test_delete_refreshes_status_first(self, user):
        bundle = svc.start_submission(user)
        _complete(bundle, user, types={"quality_assurance"})
        result, err = svc.delete_submission(bundle["id"], user)
        assert result is None
        assert err["status"] == 409
        assert err["details"]["current_status"] == "in_progress"
        assert db.session.get(Submission, bundle["id"]) is not None


# ═════════════════════════════════════════════════════════════════════════
# Administrator side
# ═════════════════════════════════════════════════════════════════════════


class TestAdmin:
    def test_admin_only(self, user):
        submitted = _submitted_bundle(user)
        with pytest.raises(ForbiddenError):
            svc.admin_list_submissions(user)
        with pytest.raises(ForbiddenError):
            svc.decide_submission(submitted["id"], "approve", None, user)

    def test_admin_list_filters(self, user, other_user, admin):
        _submitted_bundle(user)
        svc.start_submission(other_user)
        assert len(svc.admin_list_submissions(admin)) == 2
        assert len(svc.admin_list_submissions(admin, status="submitted")) == 1
        assert len(svc.admin_list_submissions(admin, q="beta")) == 1
        assert len(svc.admin_list_submissions(admin, q="USER-1")) == 1
        with pytest.raises(ValidationError):
            svc.admin_list_submissions(admin, status="archived")

    def test_admin_list_refreshes_status_before_filtering(self, user, admin):
        bundle = svc.start_submission(user)
        _complete(bundle, user)
        listed = svc.admin_list_submissions(admin)
        assert listed[0]["status"] == "completed"
        assert [s["id"] for s in svc.admin_list_submissions(admin, status="completed")] == [bundle["id"]]
        assert svc.admin_list_submissions(admin, status="draft") == []
        db.session.expire_all()
        assert db.session.get(Submission, bundle["id"]).status == "completed"

    def test_approve_stamps_decision(self, user, admin):
        submitted = _submitted_bundle(user)
        result, err = svc.decide_submission(submitted["id"], " Approve ", "  looks good  ", admin)
        assert err is None
        assert result["status"] == "approved"
        assert result["decision_note"] == "looks good"
        assert result["decided_by_user_id"] == "admin-1"
        assert result["decided_at_utc"] is not None

    def test_reject_with_blank_note(self, user, admin):
        submitted = _submitted_bundle(user)
        result, _ = svc.decide_submission(submitted["id"], "reject", "   ", admin)
        assert result["status"] == "rejected"
        assert result["decision_note"] is None

    def test_unknown_decision(self, user, admin):
        submitted = _submitted_bundle(user)
        result, err = svc.decide_submission(submitted["id"], "maybe", None, admin)
        assert result is None
        assert err["status"] == 400
        assert svc.get_submission(submitted["id"], admin)["status"] == "submitted"

    def test_non_string_decision_is_unknown(self, user, admin):
        submitted = _submitted_bundle(user)
        result, err = svc.decide_submission(submitted["id"], 1, None, admin)
        assert result is None
        assert err["status"] == 400

    def test_decide_requires_submitted(self, user, admin):
        bundle = svc.start_submission(user)
        _, err = svc.decide_submission(bundle["id"], "approve", None, admin)
        assert err["status"] == 409

        submitted = _submitted_bundle(Identity(user_id="user-3", company_id=user.company_id))
        svc.decide_submission(submitted["id"], "approve", None, admin)
        _, err = svc.decide_submission(submitted["id"], "reject", None, admin)
        assert err["status"] == 409
        assert err["details"]["current_status"] == "approved"

    def test_decided_bundle_is_never_recomputed(self, user, admin):
        submitted = _submitted_bundle(user)
        svc.decide_submission(submitted["id"], "reject", "missing evidence", admin)
        workbook = db.session.get(WorkbookSubmission, submitted["workbooks"][0]["id"])
        workbook.status = "draft"
        db.session.commit()
        assert svc.get_submission(submitted["id"], user)["status"] == "rejected"
