from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import logging
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from core.config import settings
from schemas.auth import TokenClaims


bearer_scheme = HTTPBearer(auto_error=False)
logger = logging.getLogger(__name__)


class MissingClaim(ValueError):
    """Raised when a token is requested without an email."""


class InvalidToken(Exception):
    """Raised when a bearer token fails signature, expiry or claim checks."""


def issue_access_token(email: Optional[str], expires_delta: Optional[timedelta] = None) -> str:
    if not email or not str(email).strip():
        raise MissingClaim("email")
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode = {"email": email, "iat": now, "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> TokenClaims:
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise InvalidToken(str(exc)) from exc
    email = payload.get("email")
    if not email:
        raise InvalidToken("token carries no email claim")
    return TokenClaims(email=email, exp=payload.get("exp"))


async def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenClaims:
    if credentials is None:
        logger.info("auth.credentials_missing")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized access",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return decode_access_token(credentials.credentials)
    except InvalidToken as exc:
        logger.warning("auth.token_rejected", extra={"reason": str(exc)})
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden access")
