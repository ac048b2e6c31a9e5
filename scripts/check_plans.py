"""
Show the subscription plans table and the active FREE plans.
Run: python -m scripts.check_plans [--free-only]
"""
import sys
import os
import argparse
import logging

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cvking.core.config import LOG_LEVEL
from cvking.core.logging_config import setup_logging
from cvking.db.session import SessionLocal, engine
from cvking.services.inspection_service import describe_table, format_columns
from cvking.services.plan_service import get_free_plans, list_plans, plan_to_dict

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Check CVKing subscription plans")
    parser.add_argument("--free-only", action="store_true", help="Only list active FREE plans")
    args = parser.parse_args(argv)

    setup_logging(LOG_LEVEL)
    db = SessionLocal()
    try:
        if not args.free_only:
            print("Subscription plans table columns:")
            for line in format_columns(describe_table(engine, "subscription_plans")):
                print(line)

        free_plans = get_free_plans(db)
        print(f"Free plans ({len(free_plans)}):")
        for plan in free_plans:
            print(f"  {plan_to_dict(plan)}")

        if not args.free_only:
            all_plans = list_plans(db)
            print(f"All plans ({len(all_plans)}):")
            for plan in all_plans:
                print(f"  {plan_to_dict(plan)}")
    except Exception as e:
        logger.error(f"Error checking plans: {e}", exc_info=True)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
