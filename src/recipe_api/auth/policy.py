"""
recipe_api.auth.policy

Declarative operation -> required right table.

Responsibilities:
- Name every HTTP operation the service exposes.
- Declare, in one place, which right each operation requires (or `None`).
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from types import MappingProxyType

from recipe_api.auth.roles import Right


class Operation(enum.StrEnum):
    recipes_create = "recipes.create"
    recipes_list = "recipes.list"
    recipes_get = "recipes.get"
    recipes_update = "recipes.update"
    recipes_delete = "recipes.delete"

    comments_create = "comments.create"
    comments_list = "comments.list"
    comments_get = "comments.get"
    comments_update = "comments.update"
    comments_delete = "comments.delete"

    users_create = "users.create"
    users_list = "users.list"
    users_get = "users.get"


OPERATION_RIGHTS: Mapping[Operation, Right | None] = MappingProxyType(
    {
        Operation.recipes_create: Right.manage_recipes,
        Operation.recipes_list: Right.get_recipes,
        Operation.recipes_get: Right.get_recipes,
        Operation.recipes_update: Right.manage_recipes,
        Operation.recipes_delete: Right.manage_recipes,
        # Only comment creation is guarded; the other comment routes are open.
        # See DESIGN.md before tightening these.
        Operation.comments_create: Right.manage_recipes,
        Operation.comments_list: None,
        Operation.comments_get: None,
        Operation.comments_update: None,
        Operation.comments_delete: None,
        Operation.users_create: Right.manage_users,
        Operation.users_list: Right.get_users,
        Operation.users_get: Right.get_users,
    }
)


def required_right(operation: Operation) -> Right | None:
    return OPERATION_RIGHTS[operation]
