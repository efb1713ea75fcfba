"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from datetime import date, datetime, timezone
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.domain.user import User


class UserRequest(BaseModel):
    """Request model for user creation and update."""

    name: str = Field(..., min_length=1, description="User's full name", examples=["John Doe"])
    email: EmailStr = Field(..., description="User's email address", examples=["john.doe@example.com"])
    phone: str = Field(
        ...,
        min_length=1,
        description="User's phone number with country code",
        examples=["+5511999999999"],
    )
    birthday: date = Field(..., description="User's date of birth (must be in the past)")

    @field_validator("name", "phone")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("birthday")
    @classmethod
    def in_the_past(cls, value: date) -> date:
        if value >= date.today():
            raise ValueError("Birthday must be in the past")
        return value

    def to_domain(self, user_id: Optional[UUID] = None) -> User:
        """Build the domain entity, keeping ``user_id`` when given."""
        fields = {
            "name": self.name,
            "email": str(self.email),
            "phone": self.phone,
            "birthday": self.birthday,
        }
        if user_id is not None:
            fields["id"] = user_id
        return User(**fields)


class UserResponse(BaseModel):
    """Response model with all user details."""

    id: UUID
    name: str
    email: str
    phone: str
    birthday: date

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            birthday=user.birthday,
        )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: int
    error: str
    message: str
    path: str
