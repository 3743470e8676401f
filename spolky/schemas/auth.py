"""
Schémata autentizace / Authentication schemas.
Login, tokens, refresh.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Požadavek na přihlášení / Login request."""
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=200)


class TokenResponse(BaseModel):
    """Odpověď s tokeny / Token response."""
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class RefreshRequest(BaseModel):
    """Požadavek na obnovení / Refresh request."""
    refresh_token: str
