"""Standardised API error responses.

Usage
-----
    from workbook_app.utils.errors import api_error, E

    return api_error(E.NOT_FOUND, "Workbook not found")
    return api_error(E.VALIDATION_INVALID, "Unknown nav value", details={"nav": nav})
"""

from __future__ import annotations

from flask import jsonify


# ── Error code constants ──────────────────────────────────────────────
class E:
    """Machine-readable error code constants (``ERR_`` prefix)."""

    # Validation – HTTP 400 / 422
    VALIDATION_REQUIRED = "ERR_VALIDATION_REQUIRED"
    VALIDATION_INVALID = "ERR_VALIDATION_INVALID"
    VALIDATION_SECTION = "ERR_VALIDATION_SECTION"

    # Not-found – HTTP 404
    NOT_FOUND = "ERR_NOT_FOUND"

    # State machine – HTTP 409
    INVALID_TRANSITION = "ERR_INVALID_TRANSITION"

    # Permissions – HTTP 403
    FORBIDDEN = "ERR_FORBIDDEN"

    # Server – HTTP 500
    INTERNAL = "ERR_INTERNAL"


# ── Default HTTP status mapping ───────────────────────────────────────
_DEFAULT_STATUS: dict[str, int] = {
    E.VALIDATION_REQUIRED: 400,
    E.VALIDATION_INVALID: 400,
    E.VALIDATION_SECTION: 422,
    E.NOT_FOUND: 404,
    E.INVALID_TRANSITION: 409,
    E.FORBIDDEN: 403,
    E.INTERNAL: 500,
}


def api_error(
    code: str,
    message: str,
    *,
    status: int | None = None,
    details: dict | None = None,
):
    """Return a standard JSON error response.

    Parameters
    ----------
    code : str
        Machine-readable error code (use ``E.*`` constants).
    message : str
        Human-readable explanation for developers / UI.
    status : int, optional
        HTTP status override.  Falls back to ``_DEFAULT_STATUS[code]``,
        then to ``400``.
    details : dict, optional
        Extra structured payload (field errors, echoed section, etc.).

    Returns
    -------
    tuple[Response, int]
        ``(jsonify(body), http_status)`` – drop-in for Flask views.
    """

    http_status = status or _DEFAULT_STATUS.get(code, 400)

    body: dict = {
        "error": message,
        "code": code,
    }
    if details:
        body["details"] = details

    return jsonify(body), http_status


def outcome_error(err: dict):
    """Render a service ``(None, err_dict)`` outcome as an API error response.

    Services put ``error``, ``status`` and optionally ``code`` / ``details``
    in the dict; anything else (e.g. the echoed ``section``) is folded into
    ``details`` so the client can re-render its form.
    """
    status = err.get("status", 400)
    code = err.get("code") or {
        404: E.NOT_FOUND,
        403: E.FORBIDDEN,
        409: E.INVALID_TRANSITION,
        422: E.VALIDATION_SECTION,
    }.get(status, E.VALIDATION_INVALID)
    details = dict(err.get("details") or {})
    if "section" in err:
        details["section"] = err["section"]
    return api_error(code, err.get("error", "Request failed"), status=status, details=details or None)
