"""
Service-wide exception hierarchy.

Services raise these for lookup and authorisation failures; blueprints
register handlers against them once and get consistent HTTP status codes.
Expected business-rule failures (invalid step input, bundle transitions
that are not allowed) are returned as ``(None, err_dict)`` outcomes
instead, so the caller can re-render without unwinding the request.

Usage:
    from workbook_app.core.exceptions import NotFoundError, ForbiddenError

    raise NotFoundError(resource="Workbook", resource_id=42)
    raise ForbiddenError("Your user is not linked to a company.")
"""


class NotFoundError(Exception):
    """Raised when a requested record does not exist within the caller's scope.

    Security note: Used for BOTH genuinely missing records AND cross-company
    access attempts. A 403 would confirm the record exists; a 404 does not.

    Args:
        resource: Human-readable entity name (e.g. "Workbook", "Submission").
        resource_id: The PK that was looked up. Included in logs, not in HTTP response.
        company_id: Optional scope that was enforced. For debug logging only.
    """

    def __init__(
        self,
        resource: str,
        resource_id: int | str | None = None,
        company_id: str | None = None,
    ) -> None:
        self.resource = resource
        self.resource_id = resource_id
        self.company_id = company_id
        msg = f"{resource}"
        if resource_id is not None:
            msg += f" id={resource_id}"
        msg += " not found"
        if company_id is not None:
            msg += f" (company={company_id})"
        super().__init__(msg)


class ForbiddenError(Exception):
    """Raised when the caller is identified but lacks rights for the operation.

    Typical cases: a company user with no company link, or a non-privileged
    user calling an administrator-only operation. Maps to HTTP 403.
    """

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)


class ValidationError(Exception):
    """Raised when well-formed input violates a business rule.

    Maps to HTTP 422 in blueprint error handlers.

    Args:
        message: Human-readable explanation of what failed.
        details: Optional field-level breakdown for structured API responses.
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message)

