"""
FastAPI dependencies for authentication.

Provides ``db_session`` and ``get_current_user`` dependencies that
are used across all protected routes.
"""

from __future__ import annotations

from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import verify_token
from database.session import get_db_session

_bearer_scheme = HTTPBearer(auto_error=False)


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
) -> Dict[str, Any]:
    """
    Extract and verify the Bearer token, returning the ``{userId, email}``
    claim of the authenticated user.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Bearer token",
        )

    payload = verify_token(credentials.credentials)
    claim = payload.get("userId")
    if not isinstance(claim, dict) or "userId" not in claim:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )
    return claim
