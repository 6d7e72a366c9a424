"""
SQLAlchemy ORM models -- schema for the Investify onboarding backend.

Tables
------
users          -- founders (demo user + anyone who logged in by email)
companies      -- one company per user, with KYC / financials flags
documents      -- uploaded pitch documents (PDF / XLSX / PPTX)
notifications  -- per-user activity feed
messages       -- per-company chat
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .database import Base

# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(320), unique=True, nullable=False, index=True)
    created_at = Column(DateTime, default=func.now())

    companies = relationship("Company", back_populates="user")
    notifications = relationship("Notification", back_populates="user")


# ---------------------------------------------------------------------------
# Companies & documents
# ---------------------------------------------------------------------------

class Company(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(512), nullable=False)
    sector = Column(String(256), nullable=False)
    target_raise = Column(Float, default=0)
    revenue = Column(Float, default=0)
    kyc_verified = Column(Boolean, default=False, nullable=False)
    financials_linked = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=func.now())

    user = relationship("User", back_populates="companies")
    # newest upload first, chat oldest first
    documents = relationship(
        "Document",
        back_populates="company",
        order_by=lambda: [Document.created_at.desc(), Document.id.desc()],
    )
    messages = relationship(
        "Message",
        back_populates="company",
        order_by=lambda: [Message.created_at, Message.id],
    )


class Document(Base):
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)
    name = Column(String(512), nullable=False)
    mime_type = Column(String(128), nullable=False)
    size = Column(Integer, default=0)
    path = Column(String(1024), nullable=False)
    created_at = Column(DateTime, default=func.now())

    company = relationship("Company", back_populates="documents")


# ---------------------------------------------------------------------------
# Notifications & chat
# ---------------------------------------------------------------------------

class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    type = Column(String(64), nullable=False)  # kyc_completed, financials_linked, file_uploaded
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, default=func.now())
    read_at = Column(DateTime, nullable=True)

    user = relationship("User", back_populates="notifications")


class Message(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)
    sender = Column(String(128), nullable=False)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime, default=func.now())

    company = relationship("Company", back_populates="messages")
