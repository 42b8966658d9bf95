"""
recipe_api.errors

Error taxonomy shared by services and the API boundary.

Responsibilities:
- Define request-terminal errors raised by services and the authorization guard.
- Carry a stable machine-readable `code` next to the human message.
"""

from __future__ import annotations


class RecipeApiError(Exception):
    code = "ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(RecipeApiError):
    # Message names the missing entity ("Recipe not found" / "Comment not found").
    code = "NOT_FOUND"


class AuthorizationDeniedError(RecipeApiError):
    code = "FORBIDDEN"


class ConflictError(RecipeApiError):
    code = "CONFLICT"


class UnknownRoleError(LookupError):
    """
    Raised when the role registry is queried with a name it does not know.

    This is a configuration/programming error, not a request error, so it does
    not derive from `RecipeApiError` and surfaces as a 500.
    """


# --- Module Notes -----------------------------------------------------------
# HTTP status mapping lives in `api.exception_handlers`; nothing here knows about HTTP.
