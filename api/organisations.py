"""
Organisation routes (read-only, authenticated).

Route prefix: /api/organisations
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user
from database.helpers import (
    OrganisationAccessError,
    get_organisation_data,
    list_user_organisations,
)
from utils.schemas import OrganisationListResponse, OrganisationOut, OrganisationResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["organisations"])


@router.get("", response_model=OrganisationListResponse)
async def list_organisations(
    session: AsyncSession = Depends(db_session),
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> Dict[str, Any]:
    """Every organisation the caller belongs to."""
    orgs = await list_user_organisations(session, current_user["userId"])
    return {
        "status": "success",
        "message": "Organisations retrieved",
        "data": {"organisations": [OrganisationOut.from_model(o) for o in orgs]},
    }


@router.get("/{org_id}", response_model=OrganisationResponse)
async def get_organisation(
    org_id: str,
    session: AsyncSession = Depends(db_session),
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> Dict[str, Any]:
    """A single organisation, if the caller is a member."""
    try:
        org = await get_organisation_data(session, current_user["userId"], org_id)
    except OrganisationAccessError as exc:
        logger.warning("User %s denied access to organisation %s", current_user["userId"], org_id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))

    return {
        "status": "success",
        "message": "Organisation retrieved",
        "data": OrganisationOut.from_model(org),
    }
