"""
Auth API routes — register, login.

Route prefix: /auth
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from api.middleware import FieldValidationError
from auth.dependencies import db_session
from auth.jwt import generate_token
from auth.password import hash_password, verify_password
from database.helpers import create_user_with_default_organisation, get_user_by_email
from utils.schemas import AuthResponse, FieldError, LoginRequest, RegisterRequest, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _auth_payload(user: Any, message: str) -> Dict[str, Any]:
    user_out = UserOut.from_model(user)
    token = generate_token({"userId": user_out.userId, "email": user_out.email})
    return {
        "status": "success",
        "message": message,
        "data": {"accessToken": token, "user": user_out},
    }


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    req: RegisterRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Register a new user together with their default organisation."""
    try:
        user = await create_user_with_default_organisation(
            session,
            first_name=req.firstName,
            last_name=req.lastName,
            email=req.email,
            password_hash=hash_password(req.password),
            phone=req.phone,
        )
        await session.commit()
    except IntegrityError:
        await session.rollback()
        logger.warning("Registration rejected, duplicate email or userId: %s", req.email)
        raise FieldValidationError([FieldError(field="email", message="Duplicate entry")])

    logger.info("Registered user %s (%s)", user.email, user.user_id)
    return _auth_payload(user, "Registration successful")


@router.post("/login", response_model=AuthResponse)
async def login(
    req: LoginRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Login with email + password."""
    user = await get_user_by_email(session, req.email)

    if user is None or not verify_password(req.password, user.password):
        logger.warning("Failed login for %s", req.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication failed",
        )

    logger.info("Login: %s (%s)", user.email, user.user_id)
    return _auth_payload(user, "Login successful")
