"""
Pydantic schemas for the CVKing auth endpoints.
"""
from pydantic import AliasChoices, BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """Request body for POST /auth/login."""
    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., min_length=1, description="Account password")

    class Config:
        json_schema_extra = {
            "example": {
                "email": "jobseeker@example.com",
                "password": "123321"
            }
        }


class LoginResponse(BaseModel):
    """
    Response body of POST /auth/login.

    Older backend builds answer with `access_token`, newer ones with
    `accessToken`; both are accepted.
    """
    access_token: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("accessToken", "access_token"),
    )

    class Config:
        extra = "ignore"
