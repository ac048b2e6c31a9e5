import uuid
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from cvking.db.base import Base


class JobSeekerProfile(Base):
    """Candidate profile; one per user, tracks how complete the profile is."""
    __tablename__ = "job_seeker_profiles"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id"), unique=True, nullable=False)
    profile_completion = Column("profileCompletion", Integer, default=0)
    last_updated_at = Column("lastUpdatedAt", DateTime, server_default=func.now())
    created_at = Column("createdAt", DateTime, server_default=func.now())
    updated_at = Column("updatedAt", DateTime, server_default=func.now(), onupdate=func.now())
