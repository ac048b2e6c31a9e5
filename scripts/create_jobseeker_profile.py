"""
Give the job seeker example account a profile if it has none.
Run: python -m scripts.create_jobseeker_profile [--email jobseeker@example.com]
"""
import sys
import os
import argparse
import logging

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cvking.core.config import LOG_LEVEL
from cvking.core.logging_config import setup_logging
from cvking.db.session import SessionLocal
from cvking.services.user_service import DEFAULT_PROFILE_COMPLETION, ensure_job_seeker_profile

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create a job seeker profile")
    parser.add_argument("--email", default="jobseeker@example.com", help="Job seeker account email")
    parser.add_argument("--completion", type=int, default=DEFAULT_PROFILE_COMPLETION, help="Initial completion percentage")
    args = parser.parse_args(argv)

    setup_logging(LOG_LEVEL)
    db = SessionLocal()
    try:
        profile, created = ensure_job_seeker_profile(db, args.email, args.completion)
        if created:
            print(f"Created job seeker profile: {profile.id}")
        else:
            print(f"Job seeker profile already exists: {profile.id}")
    except LookupError as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        logger.error(f"Error creating job seeker profile: {e}", exc_info=True)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
