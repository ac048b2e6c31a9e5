"""
Print the ID of a published job to use in application smoke tests.
Run: python -m scripts.get_job_id
"""
import sys
import os
import logging

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cvking.core.config import LOG_LEVEL
from cvking.core.logging_config import setup_logging
from cvking.db.session import SessionLocal
from cvking.services.job_service import get_published_job

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging(LOG_LEVEL)
    db = SessionLocal()
    try:
        job = get_published_job(db)
        if job is None:
            return 1
        print(f"Job found: {job.id} - {job.title}")
    except Exception as e:
        logger.error(f"Error getting job ID: {e}", exc_info=True)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
