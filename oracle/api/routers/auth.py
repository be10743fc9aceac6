"""Dashboard login route."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing_extensions import Annotated

from oracle.api.dependencies import get_credential_verifier
from oracle.auth import CredentialVerifier

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


class LoginRequest(BaseModel):
    """Request model for dashboard login."""

    username: str
    password: str


@router.post("/login")
async def login(
    request: LoginRequest,
    verifier: Annotated[CredentialVerifier, Depends(get_credential_verifier)],
):
    """Check credentials with the configured verifier."""
    result = verifier.verify(request.username, request.password)
    if not result.authenticated:
        logger.warning(f"Refused login for {request.username!r}")
        return JSONResponse(status_code=401, content={"error": "Invalid credentials"})
    return {
        "authenticated": True,
        "username": result.username,
        "token": result.token,
    }
