"""
Submission Blueprint: bundles of three workbooks submitted together.

Endpoints (user):
    POST   /api/v1/submissions                     start (or resume) the caller's bundle
    GET    /api/v1/submissions                     list visible bundles
    GET    /api/v1/submissions/<id>                bundle with its workbooks
    POST   /api/v1/submissions/<id>/submit         send for review
    DELETE /api/v1/submissions/<id>                delete a draft bundle

Endpoints (administrator, ``admin`` blueprint):
    GET    /api/v1/admin/submissions               review queue (?q=&status=)
    POST   /api/v1/admin/submissions/<id>/decide   {decision: approve|reject, note?}
"""

import logging

from flask import Blueprint, jsonify, request

from workbook_app.blueprints import body_str, json_body, register_error_handlers
from workbook_app.middleware.identity_context import current_identity
from workbook_app.services import submission_service
from workbook_app.utils.errors import outcome_error

logger = logging.getLogger(__name__)

submission_bp = Blueprint("submissions", __name__, url_prefix="/api/v1/submissions")
admin_bp = Blueprint("admin", __name__, url_prefix="/api/v1/admin/submissions")
register_error_handlers(submission_bp)
register_error_handlers(admin_bp)


# ═════════════════════════════════════════════════════════════════════════
# User side
# ═════════════════════════════════════════════════════════════════════════


@submission_bp.route("", methods=["POST"])
def start_submission():
    bundle = submission_service.start_submission(current_identity())
    return jsonify(bundle), 201 if bundle["created"] else 200


@submission_bp.route("", methods=["GET"])
def list_submissions():
    items = submission_service.list_submissions(current_identity())
    return jsonify({"items": items, "total": len(items)}), 200


@submission_bp.route("/<submission_id>", methods=["GET"])
def get_submission(submission_id):
    return jsonify(submission_service.get_submission(submission_id, current_identity())), 200


@submission_bp.route("/<submission_id>/submit", methods=["POST"])
def submit_submission(submission_id):
    result, err = submission_service.submit_submission(submission_id, current_identity())
    if err:
        return outcome_error(err)
    return jsonify(result), 200


@submission_bp.route("/<submission_id>", methods=["DELETE"])
def delete_submission(submission_id):
    result, err = submission_service.delete_submission(submission_id, current_identity())
    if err:
        return outcome_error(err)
    return jsonify(result), 200


# ═════════════════════════════════════════════════════════════════════════
# Administrator review
# ═════════════════════════════════════════════════════════════════════════


@admin_bp.route("", methods=["GET"])
def admin_list_submissions():
    items = submission_service.admin_list_submissions(
        current_identity(),
        q=request.args.get("q"),
        status=request.args.get("status") or None,
    )
    return jsonify({"items": items, "total": len(items)}), 200


@admin_bp.route("/<submission_id>/decide", methods=["POST"])
def decide_submission(submission_id):
    data = json_body()
    result, err = submission_service.decide_submission(
        submission_id,
        body_str(data, "decision"),
        body_str(data, "note"),
        current_identity(),
    )
    if err:
        return outcome_error(err)
    return jsonify(result), 200
