from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
import logging

from schemas.auth import Token, TokenRequest
from services.security import MissingClaim, issue_access_token


router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/jwt", response_model=Token)
async def issue_token(payload: TokenRequest) -> Token:
    try:
        access_token = issue_access_token(payload.email)
    except MissingClaim:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email is required")
    logger.info("auth.token_issued", extra={"email": payload.email})
    return Token(access_token=access_token, token=access_token)
