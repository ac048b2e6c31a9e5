"""
Reset the password of the example accounts.
Run: python -m scripts.update_password [--password 123321] [--email a@example.com ...]
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
from cvking.services.user_service import DEFAULT_USER_EMAILS, update_passwords

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Reset user passwords")
    parser.add_argument("--email", action="append", dest="emails", help="Account to update (repeatable)")
    parser.add_argument("--password", default=SEED_PASSWORD, help="New plain-text password")
    parser.add_argument("--hash", dest="password_hash", help="Use this bcrypt hash instead of hashing --password")
    args = parser.parse_args(argv)

    setup_logging(LOG_LEVEL)
    emails = args.emails or DEFAULT_USER_EMAILS
    db = SessionLocal()
    try:
        password_hash = args.password_hash or hash_password(args.password)
        updated = update_passwords(db, emails, password_hash)
        print(f"Updated password for {updated} user(s): {', '.join(emails)}")
    except Exception as e:
        logger.error(f"Error updating password: {e}", exc_info=True)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
