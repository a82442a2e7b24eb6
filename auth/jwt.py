"""
JWT access token creation and verification.

Tokens are HS256-signed with ``config.jwt_secret`` (env var: ``JWT_SECRET``)
and expire ``config.jwt_expiry_seconds`` after issuance (one hour by default).
The payload carries the user under ``userId``::

    {"userId": {"userId": "...", "email": "..."}, "exp": 1700000000}
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping

import jwt
from fastapi import HTTPException, status

from config.settings import config

logger = logging.getLogger(__name__)


def generate_token(user: Mapping[str, Any]) -> str:
    """Create a signed token for ``user`` (needs ``userId`` and ``email``)."""
    payload = {
        "userId": {"userId": user["userId"], "email": user["email"]},
        "exp": datetime.now(timezone.utc) + timedelta(seconds=config.jwt_expiry_seconds),
    }
    return jwt.encode(payload, config.jwt_secret, algorithm=config.jwt_algorithm)


def verify_token(token: str) -> Dict[str, Any]:
    """
    Verify ``token`` and return its payload.

    Raises ``HTTPException(401)`` on invalid or expired tokens.
    """
    try:
        return jwt.decode(token, config.jwt_secret, algorithms=[config.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as exc:
        logger.info("Rejected invalid token: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )
