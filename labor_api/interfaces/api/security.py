# labor_api/interfaces/api/security.py
#
# Identity is established upstream (the gateway verifies the token) and handed
# over in X-Auth-User / X-Auth-Roles. This module only compares role names.
from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, Header, HTTPException

from labor_api.infrastructure.config import get_settings


@dataclass(frozen=True)
class Identity:
    username: str
    roles: tuple[str, ...] = ()


def get_identity(
    x_auth_user: str | None = Header(default=None),
    x_auth_roles: str | None = Header(default=None),
) -> Identity:
    if not x_auth_user or not x_auth_user.strip():
        raise HTTPException(status_code=401, detail="Authentication required")
    roles = tuple(r.strip() for r in (x_auth_roles or "").split(",") if r.strip())
    return Identity(username=x_auth_user.strip(), roles=roles)


def require_admin(identity: Identity = Depends(get_identity)) -> Identity:  # noqa: B008
    if get_settings().admin_role not in identity.roles:
        raise HTTPException(status_code=403, detail="Role not allowed")
    return identity
