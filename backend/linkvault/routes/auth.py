"""
LinkVault Backend — Auth Check Route
======================================

What:  GET /api/auth/check?password=... tells the UI whether a password is
       correct before it offers editing controls.
"""

from fastapi import APIRouter, Depends

from linkvault.auth import is_authenticated
from linkvault.schemas.common import AuthCheckResponse

router = APIRouter(prefix="/api", tags=["Auth"])


@router.get(
    "/auth/check",
    response_model=AuthCheckResponse,
    summary="Check the shared password",
)
async def check_auth(authenticated: bool = Depends(is_authenticated)) -> AuthCheckResponse:
    return AuthCheckResponse(authenticated=authenticated)
