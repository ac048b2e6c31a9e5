"""
Pydantic schemas for file uploads.
"""
from typing import Literal, Optional
from pydantic import BaseModel, Field

UploadType = Literal["resume", "avatar", "company-logo"]


class ValidationResult(BaseModel):
    """Outcome of client-side file validation."""
    valid: bool = Field(..., description="Whether the file may be uploaded")
    error: Optional[str] = Field(None, description="Human-readable reason when invalid")


class UploadResponse(BaseModel):
    """Body returned by POST /upload."""
    url: str = Field(..., min_length=1, description="Server-assigned URL of the stored file")

    class Config:
        extra = "ignore"
        json_schema_extra = {
            "example": {
                "url": "/uploads/resumes/resume-123.pdf"
            }
        }
