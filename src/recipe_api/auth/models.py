"""
recipe_api.auth.models

Auth domain models.

Responsibilities:
- Define the authenticated identity type (`Principal`) injected into endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller identity with exactly one assigned role.
    """

    subject: str
    role: str


# --- Module Notes -----------------------------------------------------------
# `subject` is what recipes record as `creator` and comments as `author`.
