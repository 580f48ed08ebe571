"""
LinkVault Backend — Shared-Password Auth Gate
===============================================

What:  Decides whether a request may perform write operations.
How:   Two layers:
       1. PasswordGate.authorize(credential) -> bool
          A pure capability check. It knows nothing about HTTP, so the
          credential could come from a query string, a header or a hashed
          form without touching this class.
       2. FastAPI dependencies that pull the credential out of the request
          (currently the `password` query parameter) and consult the gate.
Who:   Mutating routes depend on `require_password`; the bookmark listing
       and /api/auth/check use `is_authenticated`.

Security notes:
    There is one shared password for the whole service and no identity,
    session or rate limiting. The password travels in the URL, so it can
    end up in proxy and browser history unless the service sits behind TLS.
    Comparison is constant-time.
"""

import logging
import secrets
from typing import Optional

from fastapi import Depends, Query

from linkvault.config import settings
from linkvault.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


class PasswordGate:
    """
    Capability check against a single configured secret.

    An empty credential never authorizes, even when the configured password
    is itself empty.
    """

    def __init__(self, password: str):
        self._password = password

    def authorize(self, credential: Optional[str]) -> bool:
        if not credential or not self._password:
            return False
        return secrets.compare_digest(
            credential.encode("utf-8"), self._password.encode("utf-8")
        )


# Built once from the startup configuration and never mutated
password_gate = PasswordGate(settings.auth.password)


def get_password_gate() -> PasswordGate:
    """Dependency hook; tests override it to swap the configured secret."""
    return password_gate


def password_credential(
    password: Optional[str] = Query(
        default=None,
        description="Shared password that unlocks write operations",
    ),
) -> Optional[str]:
    """Extract the caller's credential from the request."""
    return password


def is_authenticated(
    credential: Optional[str] = Depends(password_credential),
    gate: PasswordGate = Depends(get_password_gate),
) -> bool:
    """True when the request carries the correct password."""
    return gate.authorize(credential)


def require_password(authenticated: bool = Depends(is_authenticated)) -> None:
    """
    Gate for mutating routes.

    Raises:
        AuthorizationError: wrong or missing password (→ 401). The route
        handler is never invoked.
    """
    if not authenticated:
        logger.warning("Rejected write request: bad or missing password")
        raise AuthorizationError()
