"""
recipe_api.auth.deps

FastAPI dependency functions for authentication and authorization.

Responsibilities:
- Convert a bearer token into a typed `Principal`.
- Build per-operation dependencies from the declarative right table.
"""

from __future__ import annotations

from collections.abc import Callable

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.status import HTTP_401_UNAUTHORIZED

from recipe_api.api.deps import settings_dep
from recipe_api.auth.guard import ensure_allowed
from recipe_api.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from recipe_api.auth.models import Principal
from recipe_api.auth.policy import Operation, required_right
from recipe_api.auth.roles import ROLES
from recipe_api.settings import Settings

_bearer = HTTPBearer(auto_error=False)


def jwt_config(settings: Settings) -> JwtConfig:
    return JwtConfig(
        alg=settings.jwt_alg,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        secret=settings.jwt_secret,
    )


def get_principal(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(settings_dep),
) -> Principal:
    if creds is None or not creds.credentials:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Missing bearer token")

    try:
        payload = decode_and_validate(cfg=jwt_config(settings), token=creds.credentials)
    except JwtValidationError as e:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=f"Invalid token: {e}") from e

    subject = str(payload.get("sub", ""))
    role = payload.get("role")
    if not subject:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid token subject")
    # Unknown roles stop here so the guard never queries the registry with them.
    if not isinstance(role, str) or role not in ROLES:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid token role")

    return Principal(subject=subject, role=role)


def authorize(operation: Operation) -> Callable[..., Principal | None]:
    """
    Dependency factory keyed by operation.

    Operations whose table entry is `None` get a dependency that neither
    authenticates nor authorizes and yields `None`.
    """

    right = required_right(operation)
    if right is None:

        def _open() -> None:
            return None

        return _open

    def _guarded(principal: Principal = Depends(get_principal)) -> Principal:
        ensure_allowed(principal, right)
        return principal

    return _guarded


# --- Module Notes -----------------------------------------------------------
# Routers never name rights directly; they declare `Depends(authorize(Operation.x))`.
