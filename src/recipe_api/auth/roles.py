"""
recipe_api.auth.roles

Static role registry.

Responsibilities:
- Enumerate the rights understood by the service.
- Map each known role to the exact set of rights it grants.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from types import MappingProxyType

from recipe_api.errors import UnknownRoleError


class Right(enum.StrEnum):
    # Values are carried over verbatim from the public API contract.
    get_users = "getUsers"
    manage_users = "manageUsers"
    manage_recipes = "manageRecipes"
    get_recipes = "getRecipes"


_ALL_ROLES: dict[str, list[Right]] = {
    "user": [],
    "admin": [
        Right.get_users,
        Right.manage_users,
        Right.manage_recipes,
        Right.get_recipes,
    ],
}

DEFAULT_ROLE = "user"

ROLES: tuple[str, ...] = tuple(_ALL_ROLES)

ROLE_RIGHTS: Mapping[str, frozenset[Right]] = MappingProxyType(
    {role: frozenset(rights) for role, rights in _ALL_ROLES.items()}
)


def rights_for(role: str) -> frozenset[Right]:
    try:
        return ROLE_RIGHTS[role]
    except KeyError as e:
        raise UnknownRoleError(f"unknown role: {role!r}") from e


# --- Module Notes -----------------------------------------------------------
# The table is frozen at import; there is no runtime role escalation.
