"""
Pydantic schemas for job application requests.
"""
from typing import Optional
from pydantic import BaseModel, Field


class ApplicationCreate(BaseModel):
    """Request body for POST /applications."""
    job_id: str = Field(..., alias="jobId", min_length=1, description="Job being applied to")
    cover_letter: Optional[str] = Field(None, alias="coverLetter", description="Cover letter text")
    source: str = Field("WEBSITE", description="Where the application came from")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "jobId": "07f937e3-6391-4ccf-80cd-d0e809479839",
                "coverLetter": "Test application from automated script",
                "source": "WEBSITE"
            }
        }
