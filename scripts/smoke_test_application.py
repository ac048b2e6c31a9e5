"""
Smoke test: log in as the job seeker and apply to a job.
Run: python -m scripts.smoke_test_application --job-id <uuid>
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
    parser = argparse.ArgumentParser(description="Create an application through the API")
    parser.add_argument("--base-url", default=API_BASE_URL)
    parser.add_argument("--email", default="jobseeker@example.com")
    parser.add_argument("--password", default=SEED_PASSWORD)
    parser.add_argument("--job-id", required=True, help="Published job to apply to (see scripts.get_job_id)")
    parser.add_argument("--cover-letter", default="Test application from automated script")
    args = parser.parse_args(argv)

    setup_logging(LOG_LEVEL)
    with CVKingClient(args.base_url) as client:
        try:
            client.login(args.email, args.password)
            logger.info("Login successful, got token")
            application = client.create_application(args.job_id, args.cover_letter)
        except ApiError as e:
            log_api_error(e, logger)
            return 1
    logger.info(f"Application created successfully: {application}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
