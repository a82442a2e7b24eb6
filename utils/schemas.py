"""
Pydantic schemas for requests and responses.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError


# ═══════════════════════════════════════════════════════════════════════════════
# Auth — requests
# ═══════════════════════════════════════════════════════════════════════════════


class RegisterRequest(BaseModel):
    firstName: str = Field(..., min_length=1, max_length=255)
    lastName: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)
    phone: Optional[str] = Field(None, max_length=64)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        # bcrypt only accepts 72 bytes of input
        if len(v.encode()) > 72:
            raise PydanticCustomError("password_too_long", "Password cannot be longer than 72 bytes")
        return v


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


# ═══════════════════════════════════════════════════════════════════════════════
# Auth — responses
# ═══════════════════════════════════════════════════════════════════════════════


class UserOut(BaseModel):
    userId: str
    firstName: str
    lastName: str
    email: str
    phone: Optional[str] = None

    @classmethod
    def from_model(cls, user: Any) -> "UserOut":
        return cls(
            userId=user.user_id,
            firstName=user.first_name,
            lastName=user.last_name,
            email=user.email,
            phone=user.phone,
        )


class AuthData(BaseModel):
    accessToken: str
    user: UserOut


class AuthResponse(BaseModel):
    status: str = "success"
    message: str
    data: AuthData


# ═══════════════════════════════════════════════════════════════════════════════
# Organisations
# ═══════════════════════════════════════════════════════════════════════════════


class OrganisationOut(BaseModel):
    orgId: str
    name: str
    description: Optional[str] = None

    @classmethod
    def from_model(cls, org: Any) -> "OrganisationOut":
        return cls(orgId=org.org_id, name=org.name, description=org.description)


class OrganisationResponse(BaseModel):
    status: str = "success"
    message: str
    data: OrganisationOut


class OrganisationListResponse(BaseModel):
    status: str = "success"
    message: str
    data: Dict[str, List[OrganisationOut]]


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class FieldError(BaseModel):
    field: str
    message: str
