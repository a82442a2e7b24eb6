"""
SQLAlchemy ORM models for users, organisations and memberships.
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, String, Text
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    user_id = Column("userId", String(255), primary_key=True, unique=True, nullable=False)
    first_name = Column("firstName", String(255), nullable=False)
    last_name = Column("lastName", String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    phone = Column(String(64))

    memberships = relationship("UserOrganisation", back_populates="user", cascade="all, delete-orphan")


class Organisation(Base):
    __tablename__ = "organisations"

    org_id = Column("orgId", String(255), primary_key=True, nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text)

    memberships = relationship("UserOrganisation", back_populates="organisation", cascade="all, delete-orphan")


class UserOrganisation(Base):
    __tablename__ = "user_organisations"

    user_id = Column(
        "userId",
        String(255),
        ForeignKey("users.userId", ondelete="CASCADE"),
        primary_key=True,
    )
    org_id = Column(
        "orgId",
        String(255),
        ForeignKey("organisations.orgId", ondelete="CASCADE"),
        primary_key=True,
    )

    user = relationship("User", back_populates="memberships")
    organisation = relationship("Organisation", back_populates="memberships")
