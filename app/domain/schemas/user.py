"""Pydantic schemas for the user admin API. Strict validation, no infrastructure."""

from pydantic import BaseModel, Field, field_validator

from app.domain.models.user import UserRole


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class UserRoleChangeRequest(BaseModel):
    """Request schema for changing a user's role."""

    role: str = Field(..., min_length=1, description="Target role name, case-insensitive")

    @field_validator("role")
    @classmethod
    def role_must_be_known(cls, v: str) -> str:
        """Normalize to upper case and reject unknown roles."""
        normalized = v.strip().upper()
        if normalized not in UserRole.__members__:
            raise ValueError(f"unknown role '{v}'")
        return normalized


# ---------------------------------------------------------------------------
# Response schema
# ---------------------------------------------------------------------------

class UserResponse(BaseModel):
    user_id: int
    email: str
    role: UserRole

    model_config = {"from_attributes": True}
