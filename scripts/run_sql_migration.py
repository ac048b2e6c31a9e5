"""
Apply a SQL migration file, then show the resulting table layout.
Run: python -m scripts.run_sql_migration add-missing-company-columns.sql [--table companies]
"""
import sys
import os
import argparse
import logging

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cvking.core import config
from cvking.core.logging_config import setup_logging
from cvking.db.session import engine
from cvking.services.inspection_service import describe_table, format_columns
from cvking.services.migration_service import run_sql_file

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run a SQL migration file")
    parser.add_argument("path", help="SQL file to execute")
    parser.add_argument("--table", default="companies", help="Table to describe afterwards (default: companies)")
    args = parser.parse_args(argv)

    setup_logging(config.LOG_LEVEL)
    logger.info(f"Connecting to {config.DB_HOST}:{config.DB_PORT} as {config.DB_USER}, database {config.DB_NAME}")
    try:
        count = run_sql_file(engine, args.path)
        print(f"SQL migration executed successfully ({count} statements)")

        print(f"Updated {args.table} table structure:")
        for line in format_columns(describe_table(engine, args.table)):
            print(line)
    except Exception as e:
        logger.error(f"SQL migration failed: {e}", exc_info=True)
        return 1
    finally:
        engine.dispose()
        logger.info("Database connection closed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
