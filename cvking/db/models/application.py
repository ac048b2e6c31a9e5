import uuid
from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from cvking.db.base import Base


class Application(Base):
    __tablename__ = "applications"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    job_id = Column("jobId", String(36), ForeignKey("jobs.id"), index=True)
    user_id = Column("userId", String(36), ForeignKey("users.id"), index=True)
    cover_letter = Column("coverLetter", Text, nullable=True)
    source = Column(String(20), default="WEBSITE")
    status = Column(String(20), default="PENDING")
    created_at = Column("createdAt", DateTime, server_default=func.now())
