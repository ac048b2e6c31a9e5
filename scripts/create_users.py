"""
Create (or refresh) the admin, employer, HR and job seeker example accounts.
Run: python -m scripts.create_users
"""
import sys
import os
import argparse
import logging

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cvking.core.config import LOG_LEVEL, SEED_PASSWORD
from cvking.core.logging_config import setup_logging
from cvking.core.security import hash_password
from cvking.db.session import SessionLocal
from cvking.services.user_service import seed_default_users

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed the example user accounts")
    parser.add_argument("--password", default=SEED_PASSWORD, help="Password for every seeded account")
    args = parser.parse_args(argv)

    setup_logging(LOG_LEVEL)
    db = SessionLocal()
    try:
        users = seed_default_users(db, hash_password(args.password))
        print("Created users:")
        for user in users:
            print(f"- {user.email}: {user.first_name} {user.last_name} (ID: {user.id})")
    except Exception as e:
        logger.error(f"Error creating users: {e}", exc_info=True)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
