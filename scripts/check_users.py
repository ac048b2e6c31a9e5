"""
List users with a preview of their password hash.
Run: python -m scripts.check_users
"""
import sys
import os
import logging

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cvking.core.config import LOG_LEVEL
from cvking.core.logging_config import setup_logging
from cvking.db.session import SessionLocal
from cvking.services.user_service import list_users

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging(LOG_LEVEL)
    db = SessionLocal()
    try:
        users = list_users(db)
        print("Users in database:")
        for i, user in enumerate(users, start=1):
            print(f"{i}. {user.describe()}")
    except Exception as e:
        logger.error(f"Error checking users: {e}", exc_info=True)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
