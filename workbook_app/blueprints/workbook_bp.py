"""
Workbook Blueprint: workbook records and the step wizard.

Endpoints:
    POST   /api/v1/workbooks                       start a standalone workbook
    GET    /api/v1/workbooks                       list (?q=&company_id=&workbook_type=&status=)
    GET    /api/v1/workbooks/<id>                  read-only view of the whole document
    GET    /api/v1/workbooks/<id>/open             wizard entry point (redirect to step 1)
    GET    /api/v1/workbooks/<id>/steps/<n>        render step n (runs seeding / sync)
    POST   /api/v1/workbooks/<id>/steps/<n>        apply step n  {nav?, section?}

The POST response carries a redirect descriptor:
    {"target": "step", "step": n}   or   {"target": "list"}
"""

import logging

from flask import Blueprint, jsonify, request

from workbook_app.blueprints import body_str, json_body, register_error_handlers
from workbook_app.middleware.identity_context import current_identity
from workbook_app.services import workbook_service
from workbook_app.utils.errors import outcome_error

logger = logging.getLogger(__name__)

workbook_bp = Blueprint("workbooks", __name__, url_prefix="/api/v1")
register_error_handlers(workbook_bp)


@workbook_bp.route("/workbooks", methods=["POST"])
def create_workbook():
    data = json_body()
    workbook = workbook_service.start_workbook(
        (body_str(data, "workbook_type") or "").strip(),
        current_identity(),
        company_id=body_str(data, "company_id"),
    )
    return jsonify(workbook), 201


@workbook_bp.route("/workbooks", methods=["GET"])
def list_workbooks():
    items = workbook_service.list_workbooks(
        current_identity(),
        q=request.args.get("q"),
        company_id=request.args.get("company_id"),
        workbook_type=request.args.get("workbook_type"),
        status=request.args.get("status"),
    )
    return jsonify({"items": items, "total": len(items)}), 200


@workbook_bp.route("/workbooks/<int:workbook_id>", methods=["GET"])
def show_workbook(workbook_id):
    return jsonify(workbook_service.show_workbook(workbook_id, current_identity())), 200


@workbook_bp.route("/workbooks/<int:workbook_id>/open", methods=["GET"])
def open_workbook(workbook_id):
    return jsonify(workbook_service.open_workbook(workbook_id, current_identity())), 200


@workbook_bp.route("/workbooks/<int:workbook_id>/steps/<int:step>", methods=["GET"])
def get_step(workbook_id, step):
    return jsonify(workbook_service.get_step(workbook_id, step, current_identity())), 200


@workbook_bp.route("/workbooks/<int:workbook_id>/steps/<int:step>", methods=["POST"])
def post_step(workbook_id, step):
    data = json_body()
    result, err = workbook_service.post_step(
        workbook_id,
        step,
        current_identity(),
        nav=body_str(data, "nav"),
        section=data.get("section"),
    )
    if err:
        return outcome_error(err)
    return jsonify(result), 200
