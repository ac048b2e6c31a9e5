"""
Smoke test: log in as an employer and post a job.
Run: python -m scripts.smoke_test_job --company-id <uuid>
"""
import sys
import os
import argparse
import logging

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cvking.core.config import API_BASE_URL, LOG_LEVEL, SEED_PASSWORD
from cvking.core.errors import ApiError
from cvking.core.logging_config import setup_logging
from cvking.services.api_client import CVKingClient, log_api_error

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create a job through the API")
    parser.add_argument("--base-url", default=API_BASE_URL)
    parser.add_argument("--email", default="employer@example.com")
    parser.add_argument("--password", default=SEED_PASSWORD)
    parser.add_argument("--company-id", required=True)
    parser.add_argument("--title", default="Test Job")
    parser.add_argument("--description", default="Test description")
    args = parser.parse_args(argv)

    setup_logging(LOG_LEVEL)
    with CVKingClient(args.base_url) as client:
        try:
            client.login(args.email, args.password)
            job = client.create_job(args.title, args.company_id, args.description)
        except ApiError as e:
            log_api_error(e, logger)
            return 1
    logger.info(f"Job created successfully: {job}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
