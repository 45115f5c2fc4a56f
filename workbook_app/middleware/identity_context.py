"""
Identity context middleware: exposes the caller's identity facts to services.

Authentication happens upstream (reverse proxy / gateway). By the time a
request reaches this service the gateway has set:

    X-User-Id      opaque user identifier (required for API calls)
    X-Company-Id   company the user belongs to (absent for admins / unlinked users)
    X-User-Role    comma-separated role names; PRIVILEGED_ROLE marks an administrator

This middleware:
  1. Parses those headers into an ``Identity`` stored on ``g.identity``
  2. Rejects API requests without a user id (401)
  3. Leaves scoping decisions to the service layer; it never filters data

Chain order:
  timing.py  →  identity_context.py  →  route handler
"""

import logging
from dataclasses import dataclass

from flask import current_app, g, jsonify, request

logger = logging.getLogger(__name__)

# Paths that skip identity resolution (unauthenticated paths only)
IDENTITY_SKIP_PREFIXES = (
    "/api/v1/health",
    "/api/v1/catalogs/",
)


@dataclass(frozen=True)
class Identity:
    """Who is calling: the three facts the core consumes."""

    user_id: str
    company_id: str | None = None
    is_privileged: bool = False


def _parse_identity() -> Identity | None:
    user_id = (request.headers.get("X-User-Id") or "").strip()
    if not user_id:
        return None
    company_id = (request.headers.get("X-Company-Id") or "").strip() or None
    roles = {
        r.strip().lower()
        for r in (request.headers.get("X-User-Role") or "").split(",")
        if r.strip()
    }
    privileged_role = current_app.config.get("PRIVILEGED_ROLE", "SuperAdmin").lower()
    return Identity(
        user_id=user_id,
        company_id=company_id,
        is_privileged=privileged_role in roles,
    )


def current_identity() -> Identity | None:
    """Return the identity resolved for the current request (None if anonymous)."""
    return getattr(g, "identity", None)


def init_identity_context(app):
    """Register identity context middleware as a before_request hook."""

    @app.before_request
    def _identity_context():
        g.identity = None

        if not request.path.startswith("/api/v1/"):
            return None

        for prefix in IDENTITY_SKIP_PREFIXES:
            if request.path.startswith(prefix):
                return None

        identity = _parse_identity()
        if identity is None:
            logger.warning(
                "Rejected request without X-User-Id",
                extra={"path": request.path, "request_id": getattr(g, "request_id", None)},
            )
            return jsonify({"error": "Authentication required", "code": "ERR_UNAUTHENTICATED"}), 401

        g.identity = identity
        return None

    logger.info("Identity context middleware installed")
