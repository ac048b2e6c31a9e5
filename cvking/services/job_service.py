import logging
from typing import Optional

from sqlalchemy.orm import Session

from cvking.db.models.job import Job

logger = logging.getLogger(__name__)


def get_published_job(db: Session) -> Optional[Job]:
    """First published job, used as the target of application smoke tests."""
    job = db.query(Job).filter(Job.status == "published").order_by(Job.created_at, Job.id).first()
    if job is None:
        logger.warning("No published job found")
    return job
