"""
Client for the CVKing REST API, used by the smoke-test scripts.

Log in once, then reuse the bearer token for the calls under test.
"""
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from cvking.core.config import API_BASE_URL, API_TIMEOUT
from cvking.core.errors import ApiError
from cvking.core.logging_config import sanitize_log_data
from cvking.schemas.application import ApplicationCreate
from cvking.schemas.auth import LoginRequest, LoginResponse
from cvking.schemas.job import JobCreate
from cvking.schemas.upload import UploadType
from cvking.services import upload_service
from cvking.services.upload_service import LocalFile

logger = logging.getLogger(__name__)


class CVKingClient:
    """
    Thin wrapper over an httpx.Client.

    Pass `http_client` to reuse a configured client (tests hand in a
    FastAPI TestClient); otherwise one is created for `base_url` and
    closed with this object.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        http_client: Optional[httpx.Client] = None,
        timeout: float = API_TIMEOUT,
    ):
        self._owns_client = http_client is None
        self.http = http_client if http_client is not None else httpx.Client(base_url=base_url, timeout=timeout)
        self.token: Optional[str] = None

    def close(self):
        if self._owns_client:
            self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    # ----- internals -----

    def _auth_headers(self) -> Dict[str, str]:
        if not self.token:
            raise ApiError(None, message="Not logged in: call login() first")
        return {"Authorization": f"Bearer {self.token}"}

    def _post(self, path: str, payload: dict, auth: bool = True) -> Any:
        headers = self._auth_headers() if auth else None
        try:
            response = self.http.post(path, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"POST {path} failed: {e}")
            raise ApiError(None, str(e)) from e

        if response.is_error:
            error = ApiError.from_response(response)
            logger.warning(f"POST {path} returned {response.status_code}: {error.message}")
            raise error

        logger.debug(f"POST {path} returned {response.status_code}")
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _build(schema, **data):
        """Validate a request body before anything is sent."""
        try:
            return schema(**data)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            logger.warning(f"Invalid {schema.__name__}: {problems}")
            errors = e.errors(include_url=False, include_context=False, include_input=False)
            raise ApiError(None, errors, f"Invalid request: {problems}") from e

    # ----- endpoints -----

    def login(self, email: str, password: str) -> str:
        """Log in and keep the access token for subsequent calls."""
        payload = self._build(LoginRequest, email=email, password=password).model_dump(mode="json")
        body = self._post("/auth/login", payload, auth=False)
        try:
            self.token = LoginResponse.model_validate(body).access_token
        except ValidationError as e:
            raise ApiError(200, body, "Login response did not include an access token") from e
        logger.info(f"Logged in as {email}")
        return self.token

    def create_application(self, job_id: str, cover_letter: Optional[str] = None, source: str = "WEBSITE") -> Any:
        payload = self._build(ApplicationCreate, job_id=job_id, cover_letter=cover_letter, source=source)
        return self._post("/applications", payload.model_dump(by_alias=True, exclude_none=True))

    def create_job(self, title: str, company_id: str, description: Optional[str] = None, **extra) -> Any:
        payload = self._build(JobCreate, title=title, company_id=company_id, description=description, **extra)
        return self._post("/jobs", payload.model_dump(by_alias=True, exclude_none=True))

    def upload_file(self, file: LocalFile, type: UploadType = "resume") -> str:
        return upload_service.upload_file(self.http, file, type, headers=self._auth_headers())


def log_api_error(error: ApiError, log: logging.Logger = logger):
    """Log status, body and message of a failed call; credentials in a dict body are redacted."""
    detail = sanitize_log_data(error.detail) if isinstance(error.detail, dict) else error.detail
    log.error(f"Error: {detail}")
    log.error(f"Status: {error.status_code}")
    if error.message:
        log.error(f"Error message: {error.message}")
