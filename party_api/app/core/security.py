"""
Static bearer-key authorization for the organizer routes.

Organizers authenticate with a single shared key sent as
``Authorization: Bearer <key>``.  ``authorize`` is the pure check;
``require_admin`` wraps it as a FastAPI dependency.  Every failure
(missing header, another scheme, wrong key, or no key configured at
all) raises the same ``AuthorizationError`` so the response never
reveals which case applied.
"""

import hmac
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .errors import AuthorizationError

security = HTTPBearer(auto_error=False)


def authorize(presented_token: Optional[str], configured_key: Optional[str]) -> bool:
    """Return ``True`` only if ``presented_token`` equals ``configured_key``.

    Without a configured key nothing is authorized.  The comparison is
    constant-time.
    """
    if not configured_key or presented_token is None:
        return False
    return hmac.compare_digest(
        presented_token.encode("utf-8"), configured_key.encode("utf-8")
    )


def require_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> None:
    """Dependency that admits only requests carrying the admin key."""
    token = credentials.credentials if credentials is not None else None
    if not authorize(token, request.app.state.settings.api_key):
        raise AuthorizationError()
