"""
Print the column layout of one or more CVKing tables.
Run: python -m scripts.check_tables job_seeker_profiles companies --verbose
"""
import sys
import os
import argparse
import logging

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cvking.core.config import LOG_LEVEL
from cvking.core.logging_config import setup_logging
from cvking.db.session import engine
from cvking.services.inspection_service import describe_table, format_columns

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Describe CVKing table columns")
    parser.add_argument("tables", nargs="*", default=["job_seeker_profiles"], help="Tables to describe")
    parser.add_argument("--verbose", action="store_true", help="Show nullability and defaults")
    args = parser.parse_args(argv)

    setup_logging(LOG_LEVEL)
    try:
        for table in args.tables:
            print(f"{table} table columns:")
            for line in format_columns(describe_table(engine, table), verbose=args.verbose):
                print(line)
    except Exception as e:
        logger.error(f"Error checking tables: {e}", exc_info=True)
        return 1
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
