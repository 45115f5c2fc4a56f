"""
Rate limiting configuration.

Applies per-blueprint rate limits using Flask-Limiter. The Limiter
instance is created in workbook_app/__init__.py with no default limits;
this module applies limits per route category:

    workbooks, submissions   WORKBOOK_API_RATE_LIMIT  (default 300/minute)
    admin                    ADMIN_API_RATE_LIMIT     (default 120/minute)
    health, catalogs         exempt

Callers are keyed by the X-User-Id gateway header when present, else remote IP.

Usage:
    from workbook_app.middleware.rate_limiter import init_rate_limits
    init_rate_limits(app, limiter)
"""

import logging

from flask import request as flask_request

logger = logging.getLogger(__name__)


def caller_rate_limit_key():
    """Dynamic rate limit key: gateway user id if present, else remote IP."""
    user_id = (flask_request.headers.get("X-User-Id") or "").strip()
    if user_id:
        return f"user:{user_id}"
    return flask_request.remote_addr or "unknown"


def init_rate_limits(app, limiter):
    """Apply rate limits to API blueprints. Disabled in testing mode."""
    if app.config.get("TESTING"):
        app.logger.info("Rate limiter disabled (TESTING=True)")
        return

    workbook_limit = app.config.get("WORKBOOK_API_RATE_LIMIT", "300/minute")
    admin_limit = app.config.get("ADMIN_API_RATE_LIMIT", "120/minute")

    for bp_name in ("workbooks", "submissions"):
        bp = app.blueprints.get(bp_name)
        if bp:
            limiter.limit(workbook_limit, key_func=caller_rate_limit_key)(bp)

    bp = app.blueprints.get("admin")
    if bp:
        limiter.limit(admin_limit, key_func=caller_rate_limit_key)(bp)

    for bp_name in ("health", "catalogs"):
        bp = app.blueprints.get(bp_name)
        if bp:
            limiter.exempt(bp)

    app.logger.info(
        "Rate limiter configured: workbooks=%s admin=%s",
        workbook_limit, admin_limit,
    )
