"""
Count rows, show sample data and list columns for every CVKing table.
Run: python -m scripts.check_database_data [--tables users jobs] [--sample 3]
"""
import sys
import os
import argparse
import json
import logging

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cvking.core.config import LOG_LEVEL
from cvking.core.logging_config import setup_logging
from cvking.db.session import engine
from cvking.services.inspection_service import check_tables, DatabaseReport

logger = logging.getLogger(__name__)


def print_report(report: DatabaseReport):
    print("=" * 80)
    for table in report.tables:
        print(f"\nTABLE: {table.name.upper()}")
        print("-" * 60)
        if table.error:
            print(f"Error checking table {table.name}: {table.error}")
            continue
        print(f"Records: {table.record_count}")
        if table.sample_rows:
            print(f"Sample data ({len(table.sample_rows)} records):")
            for i, row in enumerate(table.sample_rows, start=1):
                print(f"  {i}. {json.dumps(row, default=str, indent=2)}")
        else:
            print("No data in this table")
        print(f"Columns ({len(table.columns)}): {', '.join(table.columns)}")

    print("\n" + "=" * 80)
    print("DATABASE DATA SUMMARY")
    print("=" * 80)
    print(f"Total Tables Checked: {report.total_tables}")
    print(f"Tables with Data: {len(report.tables_with_data)}")
    print(f"Tables without Data: {len(report.tables_without_data)}")
    print(f"Tables with Errors: {len(report.failed_tables)}")
    print(f"Total Records: {report.total_records}")

    print(f"\nTABLES WITH DATA ({len(report.tables_with_data)}):")
    for table in report.tables_with_data:
        print(f"  - {table.name}: {table.record_count} records")
    print(f"\nTABLES WITHOUT DATA ({len(report.tables_without_data)}):")
    for table in report.tables_without_data:
        print(f"  - {table.name}: 0 records")

    print("\nRECOMMENDATIONS:")
    for tip in report.recommendations():
        print(f"  {tip}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Check data in all CVKing tables")
    parser.add_argument("--tables", nargs="+", help="Only check these tables")
    parser.add_argument("--sample", type=int, default=3, help="Sample rows per table (default: 3)")
    args = parser.parse_args(argv)

    setup_logging(LOG_LEVEL)
    logger.info("Connecting to database...")
    try:
        report = check_tables(engine, args.tables, sample_limit=args.sample)
    except Exception as e:
        logger.error(f"Database connection failed: {e}", exc_info=True)
        return 1
    finally:
        engine.dispose()
        logger.info("Database connection closed")

    print_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
