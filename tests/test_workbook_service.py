"""Tests for the workbook wizard service.

Coverage:
  1. start / list / show / open workbooks, company scoping
  2. Navigation redirects and completion on the final step
  3. GET prepare hooks: seeding persisted once, nothing saved when unchanged
  4. POST: strict validation (422, nothing persisted), re-seed after apply
  5. Pricing and historical synchronisation through the wizard
  6. Malformed stored documents recover with defaults
  7. Sequential saves of different sections both persist
"""

import json
import logging

import pytest

from workbook_app.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from workbook_app.documents.org_info import DirectorRow
from workbook_app.middleware.identity_context import Identity
from workbook_app.models import db
from workbook_app.models.submission import WorkbookSubmission
from workbook_app.services import workbook_service as svc
from workbook_app.services.workbook_service import redirect_for


def _start(identity, workbook_type="org_info"):
    return svc.start_workbook(workbook_type, identity)


def _stored(workbook_id):
    db.session.expire_all()
    return json.loads(db.session.get(WorkbookSubmission, workbook_id).data)


# ═════════════════════════════════════════════════════════════════════════
# Records
# ═════════════════════════════════════════════════════════════════════════


class TestStartWorkbook:
    def test_company_user_creates_for_own_company(self, user, company):
        wb = _start(user, "quality_assurance")
        assert wb["company_id"] == company.id
        assert wb["status"] == "draft"
        assert wb["title"].startswith("Quality Assurance - ")
        assert wb["submission_id"] is None

    def test_invalid_type(self, user):
        with pytest.raises(ValidationError):
            _start(user, "payroll")

    def test_user_without_company_forbidden(self):
        with pytest.raises(ForbiddenError):
            _start(Identity(user_id="loner"))

    def test_admin_must_name_company(self, admin, company):
        with pytest.raises(ValidationError):
            svc.start_workbook("org_info", admin)
        with pytest.raises(NotFoundError):
            svc.start_workbook("org_info", admin, company_id="no-such-company")
        wb = svc.start_workbook("org_info", admin, company_id=company.id)
        assert wb["company_id"] == company.id
        assert wb["user_id"] == "admin-1"


class TestListAndScope:
    def test_list_is_company_scoped(self, user, other_user, admin):
        _start(user)
        _start(user, "training_qa")
        _start(other_user)
        assert len(svc.list_workbooks(user)) == 2
        assert len(svc.list_workbooks(other_user)) == 1
        assert len(svc.list_workbooks(admin)) == 3

    def test_list_filters(self, user, admin, other_company):
        _start(user)
        _start(user, "training_qa")
        assert [w["workbook_type"] for w in svc.list_workbooks(user, workbook_type="training_qa")] == ["training_qa"]
        assert len(svc.list_workbooks(user, q="organisation")) == 1
        assert len(svc.list_workbooks(admin, q="acme")) == 2
        assert svc.list_workbooks(admin, company_id=other_company.id) == []
        with pytest.raises(ValidationError):
            svc.list_workbooks(user, status="archived")

    def test_cross_company_is_not_found(self, user, other_user, admin):
        wb = _start(user)
        with pytest.raises(NotFoundError):
            svc.show_workbook(wb["id"], other_user)
        with pytest.raises(NotFoundError):
            svc.get_step(wb["id"], 3, other_user)
        assert svc.show_workbook(wb["id"], admin)["workbook"]["id"] == wb["id"]

    def test_open_goes_to_step_one(self, user):
        wb = _start(user)
        assert svc.open_workbook(wb["id"], user)["redirect"] == {"target": "step", "step": 1}

    def test_show_training_qa_includes_compliance(self, user):
        wb = _start(user, "training_qa")
        result = svc.show_workbook(wb["id"], user)
        assert "compliance" in result
        assert result["compliance"]["overall"]["criteria"] == 0


# ═════════════════════════════════════════════════════════════════════════
# Navigation
# ═════════════════════════════════════════════════════════════════════════


class TestRedirects:
    @pytest.mark.parametrize("step,nav,expected", [
        (1, "prev", {"target": "list"}),
        (4, "prev", {"target": "step", "step": 3}),
        (4, "next", {"target": "step", "step": 5}),
        (4, "save", {"target": "list"}),
        (10, "next", {"target": "list"}),
        (9, "refresh", {"target": "step", "step": 9}),
    ])
    def test_redirect_for(self, step, nav, expected):
        assert redirect_for(step, 10, nav) == expected

    def test_next_on_final_step_completes(self, user):
        wb = _start(user, "training_qa")
        result, err = svc.post_step(wb["id"], 8, user, nav="next")
        assert err is None
        assert result["redirect"] == {"target": "list"}
        assert result["workbook"]["status"] == "completed"

    def test_save_on_final_step_does_not_complete(self, user):
        wb = _start(user, "training_qa")
        result, _ = svc.post_step(wb["id"], 8, user, nav="save")
        assert result["workbook"]["status"] == "draft"

    def test_default_nav_per_step(self, user):
        wb = _start(user)
        result, _ = svc.post_step(wb["id"], 1, user)
        assert result["redirect"] == {"target": "step", "step": 2}
        result, _ = svc.post_step(wb["id"], 8, user)
        assert result["redirect"] == {"target": "list"}

    def test_invalid_nav(self, user):
        wb = _start(user)
        result, err = svc.post_step(wb["id"], 2, user, nav="sideways")
        assert result is None
        assert err["status"] == 400

    def test_non_string_nav_is_rejected(self, user):
        wb = _start(user)
        result, err = svc.post_step(wb["id"], 2, user, nav=1)
        assert result is None
        assert err["status"] == 400

    def test_refresh_only_where_supported(self, user):
        wb = _start(user)
        _, err = svc.post_step(wb["id"], 8, user, nav="refresh")
        assert err["status"] == 400
        result, err = svc.post_step(wb["id"], 9, user, nav="refresh")
        assert err is None
        assert result["redirect"] == {"target": "step", "step": 9}

    @pytest.mark.parametrize("step", [0, 11, 99])
    def test_unknown_step(self, user, step):
        wb = _start(user)
        with pytest.raises(NotFoundError):
            svc.get_step(wb["id"], step, user)

    def test_step_counts(self, user):
        for workbook_type, total in (("org_info", 10), ("quality_assurance", 13), ("training_qa", 8)):
            wb = _start(user, workbook_type)
            assert svc.get_step(wb["id"], 1, user)["step"]["total"] == total


# ═════════════════════════════════════════════════════════════════════════
# GET prepare hooks
# ═════════════════════════════════════════════════════════════════════════


class TestGetStep:
    def test_qa_grid_seeded_and_persisted_once(self, user):
        wb = _start(user, "quality_assurance")
        page = svc.get_step(wb["id"], 5, user)
        assert page["step"]["section"] == "gel"
        assert len(page["section"]["rows"]) == 33
        assert len(_stored(wb["id"])["gel"]["rows"]) == 33

        again = svc.get_step(wb["id"], 5, user)
        assert len(again["section"]["rows"]) == 33

    def test_unchanged_prepare_does_not_save(self, user):
        wb = _start(user, "quality_assurance")
        svc.get_step(wb["id"], 13, user)
        db.session.expire_all()
        before = db.session.get(WorkbookSubmission, wb["id"]).updated_at
        svc.get_step(wb["id"], 13, user)
        db.session.expire_all()
        assert db.session.get(WorkbookSubmission, wb["id"]).updated_at == before

    def test_org_info_editors_get_one_blank_row(self, user):
        wb = _start(user)
        assert len(svc.get_step(wb["id"], 3, user)["section"]["approvals"]) == 10
        assert len(svc.get_step(wb["id"], 4, user)["section"]["directors"]) == 1
        assert len(svc.get_step(wb["id"], 6, user)["section"]["sites"]) == 1

    def test_overview_view(self, user):
        wb = _start(user)
        svc.post_step(wb["id"], 7, user, section={"items": [{"code": "Q1", "type": "Diploma"}]})
        page = svc.get_step(wb["id"], 2, user)
        assert page["section"] is None
        assert page["overview"]["section3"]["qualifications"][0]["name"] == "Diploma"

    def test_qa_summary_scores(self, user):
        wb = _start(user, "quality_assurance")
        gel = svc.get_step(wb["id"], 5, user)["section"]
        for row, ci in zip(gel["rows"], (3, 3, 2, 1)):
            row["ci"] = ci
        _, err = svc.post_step(wb["id"], 5, user, section=gel)
        assert err is None

        summary = svc.get_step(wb["id"], 3, user)
        gel_score = summary["scores"][0]
        assert gel_score["key"] == "gel"
        assert (gel_score["criteria"], gel_score["compliant"], gel_score["applicable"]) == (33, 2, 3)
        assert summary["overall"]["compliant"] == 2
        assert summary["gel_parts"][0]["part_code"] == "GEL 1.1"
        assert summary["gel_parts"][0]["compliant"] == 2

    def test_tqa_general_compliance(self, user):
        wb = _start(user, "training_qa")
        risk = svc.get_step(wb["id"], 8, user)["section"]
        risk["rows"][0]["ci"] = 3
        risk["rows"][1]["ci"] = 2
        svc.post_step(wb["id"], 8, user, section=risk, nav="save")

        page = svc.get_step(wb["id"], 2, user)
        labels = [s["label"] for s in page["compliance"]["sections"]]
        assert labels[-1] == "RISK & CONTINGENCY PLANNING (P6):"
        assert page["compliance"]["sections"][-1]["percent"] == pytest.approx(0.5)


# ═════════════════════════════════════════════════════════════════════════
# POST apply
# ═════════════════════════════════════════════════════════════════════════


class TestPostStep:
    def test_invalid_section_echoed_and_not_persisted(self, user):
        wb = _start(user, "quality_assurance")
        gel = svc.get_step(wb["id"], 5, user)["section"]
        gel["rows"][0]["ci"] = 7
        result, err = svc.post_step(wb["id"], 5, user, section=gel)
        assert result is None
        assert err["status"] == 422
        assert err["section"] is gel
        assert err["details"]["errors"]
        assert _stored(wb["id"])["gel"]["rows"][0]["ci"] is None

    def test_non_object_section(self, user):
        wb = _start(user)
        _, err = svc.post_step(wb["id"], 3, user, section=["not", "a", "dict"])
        assert err["status"] == 422

    def test_emptied_grid_reseeded_after_apply(self, user):
        wb = _start(user, "quality_assurance")
        _, err = svc.post_step(wb["id"], 6, user, section={"organisation": "Acme", "parts": [], "rows": []})
        assert err is None
        stored = _stored(wb["id"])["spr"]
        assert stored["organisation"] == "Acme"
        assert len(stored["rows"]) == 26

    def test_equipment_register_keeps_edits(self, user, caplog):
        wb = _start(user, "training_qa")
        equipment = svc.get_step(wb["id"], 4, user)["section"]
        assert len(equipment["rows"]) == 10
        equipment["rows"][0]["item"] = "Laptop"
        equipment["rows"][0]["qty_req"] = 3
        _, err = svc.post_step(wb["id"], 4, user, section=equipment)
        assert err is None

        with caplog.at_level(logging.WARNING):
            again = svc.get_step(wb["id"], 4, user)["section"]
        assert len(again["rows"]) == 10
        assert again["rows"][0]["item"] == "Laptop"
        assert again["rows"][0]["qty_req"] == 3
        assert "using defaults" not in caplog.text

    def test_unnamed_approval_row_keeps_section(self, user):
        wb = _start(user)
        section1 = svc.get_step(wb["id"], 3, user)["section"]
        section1["trading_name"] = "Acme"
        section1["approvals"].append({"name": "", "is_other": True, "other_specify": "Board", "status": ""})
        _, err = svc.post_step(wb["id"], 3, user, section=section1)
        assert err is None

        page = svc.get_step(wb["id"], 3, user)["section"]
        assert page["trading_name"] == "Acme"
        assert len(page["approvals"]) == 11
        assert page["approvals"][-1]["other_specify"] == "Board"

    def test_sequential_saves_of_different_sections(self, user):
        wb = _start(user)
        svc.post_step(wb["id"], 3, user, section={"trading_name": "Acme"})
        svc.post_step(wb["id"], 4, user, section={"total_directors": 3, "directors": []})
        stored = _stored(wb["id"])
        assert stored["section1"]["trading_name"] == "Acme"
        assert stored["board"]["total_directors"] == 3

    def test_same_section_last_write_wins(self, user):
        wb = _start(user)
        svc.post_step(wb["id"], 3, user, section={"trading_name": "First"})
        svc.post_step(wb["id"], 3, user, section={"legal_registered_name": "Second"})
        stored = _stored(wb["id"])["section1"]
        assert stored["trading_name"] is None
        assert stored["legal_registered_name"] == "Second"

    def test_nav_only_post_keeps_document(self, user):
        wb = _start(user)
        svc.post_step(wb["id"], 3, user, section={"trading_name": "Acme"})
        svc.post_step(wb["id"], 3, user, nav="next")
        assert _stored(wb["id"])["section1"]["trading_name"] == "Acme"


class TestWizardSynchronisation:
    def test_pricing_follows_qualifications_and_keeps_orphans(self, user):
        wb = _start(user)
        svc.post_step(wb["id"], 7, user, section={"items": [
            {"code": "Q1", "name": "Plumbing", "type": "Diploma", "credits": 120},
            {"code": "Q2", "name": "Welding", "type": "Diploma", "credits": 60},
        ]})

        pricing = svc.get_step(wb["id"], 8, user)["section"]
        assert [r["code"] for r in pricing["items"]] == ["Q1", "Q2"]
        assert pricing["items"][0]["qualification_name"] == "Plumbing"

        pricing["items"][0]["qualification_name"] = "edited"
        pricing["items"][0]["registration"] = "150.00"
        pricing["items"].append({"code": "ZZ", "qualification_name": "Manual row"})
        _, err = svc.post_step(wb["id"], 8, user, section=pricing)
        assert err is None

        stored = _stored(wb["id"])["pricing"]["items"]
        assert stored[0]["qualification_name"] == "Plumbing"
        assert stored[0]["registration"] == "150.00"
        assert stored[2]["qualification_name"] == "Manual row"

        svc.post_step(wb["id"], 7, user, section={"items": [{"code": "q1", "name": "Plumbing NQF4"}]})
        pricing = svc.get_step(wb["id"], 8, user)["section"]
        assert [r["code"] for r in pricing["items"]] == ["Q1", "Q2", "ZZ"]
        assert pricing["items"][0]["qualification_name"] == "Plumbing NQF4"

    def test_historical_prefill_edit_and_refresh(self, user):
        wb = _start(user)
        svc.post_step(wb["id"], 10, user, section={
            "period_from": "2024-01-01",
            "period_to": "2024-12-31",
            "months": 12,
            "rows": [
                {"programme_type": "Diploma", "completed": True,
                 "african": {"m": 5, "f": 3}, "sc": 4, "pr": 2, "di": 1},
                {"programme_type": "Short Course", "completed": False, "white": {"m": 1}},
            ],
        })

        historical = svc.get_step(wb["id"], 9, user)["section"]
        assert historical["months"] == 12
        assert len(historical["rows"]) == 1
        row = historical["rows"][0]
        assert (row["total"], row["sc_percent"], row["var"]) == (8, "50.00", 1)

        row["sc"] = 99
        svc.post_step(wb["id"], 9, user, section=historical)
        assert svc.get_step(wb["id"], 9, user)["section"]["rows"][0]["sc"] == 99

        svc.post_step(wb["id"], 9, user, nav="refresh")
        assert svc.get_step(wb["id"], 9, user)["section"]["rows"][0]["sc"] == 4


class TestMalformedStoredDocument:
    def test_recovers_with_defaults(self, user, caplog):
        wb = _start(user)
        record = db.session.get(WorkbookSubmission, wb["id"])
        record.data = "{not valid"
        db.session.commit()

        page = svc.get_step(wb["id"], 4, user)
        assert page["section"]["directors"] == [DirectorRow().model_dump(mode="json")]
        assert any("not valid JSON" in r.getMessage() for r in caplog.records)
        assert "board" in _stored(wb["id"])
