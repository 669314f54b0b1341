# /app/core/exceptions.py

"""
The error taxonomy for the website lifecycle.

Every failure the services report to a caller is one of these classes. Each
carries a machine-readable `kind` plus a human-readable message, and may carry
extra context (for example the id of a record left in the pending state).
The routers translate them into HTTP responses; the services never import
anything from FastAPI.
"""

from typing import Any, Dict


class WebsiteServiceError(Exception):
    kind = "error"

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context

    def to_detail(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": self.message, **self.context}


class InvalidRequestError(WebsiteServiceError, ValueError):
    """Malformed or missing input. Raised before any side effect."""
    kind = "validation"


class WebsiteNotFoundError(WebsiteServiceError):
    kind = "not_found"


class WebsiteNotReadyError(WebsiteServiceError):
    """The record exists but generation has not completed yet."""
    kind = "not_ready"


class GenerationFailedError(WebsiteServiceError):
    """The generator service failed or returned an unusable response."""
    kind = "upstream"


class AccessDeniedError(WebsiteServiceError):
    kind = "authorization"


class PlanRequiredError(AccessDeniedError):
    """The caller's plan tier does not include the requested feature."""
