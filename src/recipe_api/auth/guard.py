"""
recipe_api.auth.guard

Authorization guard.

Responsibilities:
- Decide whether a principal's role grants a single required right.
"""

from __future__ import annotations

from recipe_api.auth.models import Principal
from recipe_api.auth.roles import Right, rights_for
from recipe_api.errors import AuthorizationDeniedError


def is_allowed(principal: Principal, right: Right) -> bool:
    return right in rights_for(principal.role)


def ensure_allowed(principal: Principal, right: Right) -> None:
    if not is_allowed(principal, right):
        raise AuthorizationDeniedError("Forbidden")


# --- Module Notes -----------------------------------------------------------
# No hierarchy and no multi-right checks: each protected operation needs one right.
