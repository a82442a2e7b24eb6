"""
Database helper functions — user lookup, registration and organisation access.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Organisation, User, UserOrganisation
from utils.helpers import generate_unique_id

logger = logging.getLogger(__name__)


class OrganisationAccessError(Exception):
    """Raised when a user has no membership row for the requested organisation."""

    def __init__(self, message: str = "User does not have access to this organisation"):
        super().__init__(message)


async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def create_user_with_default_organisation(
    session: AsyncSession,
    *,
    first_name: str,
    last_name: str,
    email: str,
    password_hash: str,
    phone: str | None = None,
) -> User:
    """
    Add a ``User``, its default ``Organisation`` and the membership row.

    Rows are flushed but not committed; a duplicate email or userId
    surfaces as ``sqlalchemy.exc.IntegrityError`` from the flush.
    """
    user = User(
        user_id=generate_unique_id(f"{first_name}-{last_name}"),
        first_name=first_name,
        last_name=last_name,
        email=email,
        password=password_hash,
        phone=phone,
    )
    organisation = Organisation(
        org_id=generate_unique_id(f"{first_name}-org"),
        name=f"{first_name}'s Organisation",
    )
    session.add_all([user, organisation])
    await session.flush()

    session.add(UserOrganisation(user_id=user.user_id, org_id=organisation.org_id))
    await session.flush()

    logger.debug("Created user %s with default organisation %s", user.user_id, organisation.org_id)
    return user


async def get_organisation_data(
    session: AsyncSession,
    user_id: str,
    org_id: str,
) -> Organisation:
    """
    Return the organisation ``org_id`` if ``user_id`` is a member of it.

    Raises ``OrganisationAccessError`` when no membership row exists.
    """
    result = await session.execute(
        select(UserOrganisation).where(
            UserOrganisation.user_id == user_id,
            UserOrganisation.org_id == org_id,
        )
    )
    if result.scalar_one_or_none() is None:
        raise OrganisationAccessError()

    result = await session.execute(
        select(Organisation).where(Organisation.org_id == org_id)
    )
    org = result.scalar_one_or_none()
    if org is None:
        # membership row left behind by a deleted organisation
        raise OrganisationAccessError()
    return org


async def list_user_organisations(session: AsyncSession, user_id: str) -> List[Organisation]:
    """Every organisation ``user_id`` belongs to, ordered by name."""
    result = await session.execute(
        select(Organisation)
        .join(UserOrganisation, UserOrganisation.org_id == Organisation.org_id)
        .where(UserOrganisation.user_id == user_id)
        .order_by(Organisation.name.asc())
    )
    return list(result.scalars().all())
