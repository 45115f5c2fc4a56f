"""
Workbook Management Service
Blueprint registry.

    workbooks     /api/v1/workbooks           wizard and workbook records
    submissions   /api/v1/submissions         user side of submission bundles
    admin         /api/v1/admin/submissions   administrator review
    health        /api/v1/health              probes
    catalogs      /api/v1/catalogs            reference lists
"""

import logging

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from workbook_app.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from workbook_app.utils.errors import E, api_error

logger = logging.getLogger(__name__)


def json_body() -> dict:
    """Request JSON as a dict; anything else is treated as an empty body."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def body_str(data, key):
    """String field of a JSON body, or None when absent.

    Raises:
        ValidationError: the field is present but not a string.
    """
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ValidationError(f"'{key}' must be a string", details={key: "Must be a string"})


def register_error_handlers(bp):
    """Map service exceptions to JSON responses for one blueprint."""

    @bp.errorhandler(NotFoundError)
    def _handle_not_found(error: NotFoundError):
        logger.info("Not found: %s", error, extra={"path": request.path})
        return api_error(E.NOT_FOUND, f"{error.resource} not found")

    @bp.errorhandler(ForbiddenError)
    def _handle_forbidden(error: ForbiddenError):
        return api_error(E.FORBIDDEN, str(error))

    @bp.errorhandler(ValidationError)
    def _handle_validation(error: ValidationError):
        return api_error(E.VALIDATION_INVALID, str(error), status=422, details=error.details or None)

    @bp.errorhandler(Exception)
    def _handle_unexpected(error: Exception):
        if isinstance(error, HTTPException):
            return jsonify({"error": error.description}), error.code
        logger.exception("Unexpected error in %s endpoint=%s", bp.name, request.endpoint)
        return api_error(E.INTERNAL, "Internal server error")
