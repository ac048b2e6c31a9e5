"""
Pydantic schemas for job posting requests.
"""
from typing import Optional
from pydantic import BaseModel, Field


class JobCreate(BaseModel):
    """
    Request body for POST /jobs.

    Only the fields the backend requires are declared; anything else the
    caller passes is forwarded untouched.
    """
    title: str = Field(..., min_length=1, max_length=255, description="Job title")
    company_id: str = Field(..., alias="companyId", min_length=1, description="Owning company ID")
    description: Optional[str] = Field(None, description="Job description")

    class Config:
        populate_by_name = True
        extra = "allow"
        json_schema_extra = {
            "example": {
                "title": "Test Job",
                "companyId": "83e2bb91-7875-4fa1-b736-bcdff14722d1",
                "description": "Test description"
            }
        }
