from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, field_validator


class TokenRequest(BaseModel):
    email: str

    @field_validator("email")
    @classmethod
    def _email_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("email must not be empty")
        return value


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    # Same value as access_token, for clients reading {"token": ...}
    token: str


class TokenClaims(BaseModel):
    email: str
    exp: Optional[int] = None
