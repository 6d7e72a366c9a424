"""Pydantic schemas for FastAPI request / response models.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, Optional, TypeVar, Union

from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class ApiResponse(BaseModel, Generic[T]):
    """Envelope every endpoint answers with."""
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

class LoginRequest(BaseModel):
    email: EmailStr


class LoginResult(CamelModel):
    user_id: int
    email: str


class UserOut(CamelModel):
    id: int
    email: str


# ---------------------------------------------------------------------------
# Company
# ---------------------------------------------------------------------------

class CompanyCreate(CamelModel):
    name: str = Field(min_length=1)
    sector: str = Field(min_length=1)
    target_raise: float = Field(ge=0)
    revenue: float = Field(ge=0)


class CompanyOut(CamelModel):
    id: int
    user_id: int
    name: str
    sector: str
    target_raise: float
    revenue: float
    kyc_verified: bool = False
    financials_linked: bool = False
    created_at: Optional[datetime] = None


class DocumentOut(CamelModel):
    id: int
    company_id: int
    name: str
    mime_type: str
    size: int
    created_at: Optional[datetime] = None


class MessageOut(CamelModel):
    id: int
    company_id: int
    sender: str
    text: str
    created_at: Optional[datetime] = None


class CompanyDetail(CompanyOut):
    documents: list[DocumentOut] = []
    messages: list[MessageOut] = []


# ---------------------------------------------------------------------------
# KYC / financials
# ---------------------------------------------------------------------------

class KycStatus(BaseModel):
    verified: bool


class FinancialsLinkRequest(BaseModel):
    token: str = Field(min_length=1)


class FinancialsStatus(BaseModel):
    financials_linked: bool


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

class FileInfo(CamelModel):
    id: int
    name: str
    size: int
    uploaded_at: Optional[datetime] = None


# ---------------------------------------------------------------------------
# Score
# ---------------------------------------------------------------------------

class ScoreData(BaseModel):
    score: int = Field(ge=0, le=100)
    reasons: list[str] = []


class BreakdownCategory(CamelModel):
    status: bool
    points: Union[int, float]
    max_points: int
    description: str
    current: Optional[Union[int, float]] = None
    required: Optional[int] = None
    max_value: Optional[Union[int, float]] = Field(default=None, alias="max")


class BreakdownData(CamelModel):
    kyc_verified: BreakdownCategory
    financials_linked: BreakdownCategory
    documents: BreakdownCategory
    revenue: BreakdownCategory


# ---------------------------------------------------------------------------
# Notifications & chat
# ---------------------------------------------------------------------------

class NotificationOut(CamelModel):
    id: int
    message: str
    type: str
    created_at: Optional[datetime] = None
    read_at: Optional[datetime] = None


class UnreadCount(BaseModel):
    count: int


class MessageCreate(BaseModel):
    sender: Optional[str] = None
    text: Optional[str] = None

    @field_validator("sender", "text", mode="before")
    @classmethod
    def _text_only(cls, value):
        # anything but a string counts as missing
        return value if isinstance(value, str) else None
