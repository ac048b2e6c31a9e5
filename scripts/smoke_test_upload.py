"""
Smoke test: validate a local file and upload it.
Run: python -m scripts.smoke_test_upload path/to/resume.pdf [--type resume]
"""
import sys
import os
import argparse
import logging

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cvking.core.config import API_BASE_URL, LOG_LEVEL, SEED_PASSWORD, UPLOAD_MAX_SIZE_MB
from cvking.core.errors import ApiError, UploadValidationError
from cvking.core.logging_config import setup_logging
from cvking.services.api_client import CVKingClient, log_api_error
from cvking.services.upload_service import LocalFile, validate_file

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Upload a file through the API")
    parser.add_argument("path", help="File to upload")
    parser.add_argument("--type", default="resume", choices=["resume", "avatar", "company-logo"])
    parser.add_argument("--max-size-mb", type=float, default=UPLOAD_MAX_SIZE_MB)
    parser.add_argument("--validate-only", action="store_true", help="Check the file without uploading")
    parser.add_argument("--base-url", default=API_BASE_URL)
    parser.add_argument("--email", default="jobseeker@example.com")
    parser.add_argument("--password", default=SEED_PASSWORD)
    args = parser.parse_args(argv)

    setup_logging(LOG_LEVEL)
    try:
        file = LocalFile.from_path(args.path)
    except OSError as e:
        logger.error(f"Cannot read {args.path}: {e}")
        return 1

    result = validate_file(file, args.max_size_mb)
    if not result.valid:
        logger.error(result.error)
        return 1
    logger.info(f"{file.filename} ({file.content_type}, {file.size} bytes) passed validation")
    if args.validate_only:
        return 0

    with CVKingClient(args.base_url) as client:
        try:
            client.login(args.email, args.password)
            url = client.upload_file(file, args.type)
        except UploadValidationError as e:
            logger.error(str(e))
            return 1
        except ApiError as e:
            log_api_error(e, logger)
            return 1
    print(url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
