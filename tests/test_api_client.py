"""
Tests for the CVKing API client against an in-process stub of the API.
"""
import logging

import httpx
import pytest
from fastapi.testclient import TestClient

from cvking.core.errors import ApiError, UploadValidationError
from cvking.services.api_client import CVKingClient, log_api_error
from cvking.services.upload_service import BYTES_PER_MB, LocalFile

VALID_EMAIL = "jobseeker@example.com"
VALID_PASSWORD = "123321"
TOKEN = "test-token"


@pytest.fixture
def build_stub_api(stub_api_factory):
    return stub_api_factory


@pytest.fixture
def api(build_stub_api):
    return build_stub_api()


@pytest.fixture
def client(api):
    return CVKingClient(http_client=TestClient(api))


@pytest.fixture
def logged_in(client):
    client.login(VALID_EMAIL, VALID_PASSWORD)
    return client


def test_login_stores_token(client, api):
    token = client.login(VALID_EMAIL, VALID_PASSWORD)

    assert token == TOKEN
    assert client.token == TOKEN
    assert api.state.received["login"] == {"email": VALID_EMAIL, "password": VALID_PASSWORD}


def test_login_accepts_snake_case_token(build_stub_api):
    client = CVKingClient(http_client=TestClient(build_stub_api(token_key="access_token")))
    assert client.login(VALID_EMAIL, VALID_PASSWORD) == TOKEN


def test_login_without_token_in_response(build_stub_api):
    client = CVKingClient(http_client=TestClient(build_stub_api(token_key="user")))
    with pytest.raises(ApiError) as exc_info:
        client.login(VALID_EMAIL, VALID_PASSWORD)
    assert "access token" in exc_info.value.message
    assert client.token is None


def test_login_wrong_password(client):
    with pytest.raises(ApiError) as exc_info:
        client.login(VALID_EMAIL, "wrong")

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == {"detail": "Invalid credentials"}
    assert client.token is None


def test_create_application(logged_in, api):
    result = logged_in.create_application("07f937e3", "Test application from automated script")

    assert result["id"] == "app-1"
    assert api.state.received["application"] == {
        "jobId": "07f937e3",
        "coverLetter": "Test application from automated script",
        "source": "WEBSITE",
    }


def test_create_application_omits_missing_cover_letter(logged_in, api):
    logged_in.create_application("07f937e3")
    assert "coverLetter" not in api.state.received["application"]


def test_create_application_rejected(logged_in):
    with pytest.raises(ApiError) as exc_info:
        logged_in.create_application("closed-job")
    assert exc_info.value.status_code == 400
    assert "not accepting" in exc_info.value.message


def test_calls_require_login(client, api):
    with pytest.raises(ApiError) as exc_info:
        client.create_application("07f937e3")

    assert exc_info.value.status_code is None
    assert "application" not in api.state.received


def test_create_job(logged_in, api):
    job = logged_in.create_job("Test Job", "83e2bb91", "Test description", location="Hanoi")

    assert job["status"] == "published"
    assert api.state.received["job"] == {
        "title": "Test Job",
        "companyId": "83e2bb91",
        "description": "Test description",
        "location": "Hanoi",
    }


def test_upload_file(logged_in, api):
    file = LocalFile("resume.pdf", "application/pdf", b"%PDF-1.4 test")

    url = logged_in.upload_file(file)

    assert url == "/uploads/resume/resume.pdf"
    assert api.state.received["upload"] == {
        "filename": "resume.pdf",
        "content_type": "application/pdf",
        "size": len(b"%PDF-1.4 test"),
        "type": "resume",
    }


def test_upload_file_with_type_tag(logged_in, api):
    logged_in.upload_file(LocalFile("notes.txt", "text/plain", b"hello"), type="avatar")
    assert api.state.received["upload"]["type"] == "avatar"


def test_upload_rejects_invalid_type_without_request(logged_in, api):
    with pytest.raises(UploadValidationError, match="File type not supported"):
        logged_in.upload_file(LocalFile("photo.png", "image/png", b"\x89PNG"))
    assert "upload" not in api.state.received


def test_upload_rejects_oversized_file_without_request(logged_in, api):
    big = LocalFile("big.pdf", "application/pdf", b"0" * (6 * BYTES_PER_MB))
    with pytest.raises(UploadValidationError, match="File size must be less than 5MB"):
        logged_in.upload_file(big)
    assert "upload" not in api.state.received


def test_transport_error_becomes_api_error():
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    http = httpx.Client(base_url="http://cvking.invalid", transport=httpx.MockTransport(refuse))
    client = CVKingClient(http_client=http)

    with pytest.raises(ApiError) as exc_info:
        client.login(VALID_EMAIL, VALID_PASSWORD)
    assert exc_info.value.status_code is None
    assert "Connection refused" in exc_info.value.message


def test_client_closes_only_its_own_http_client(api):
    shared = TestClient(api)
    with CVKingClient(http_client=shared):
        pass
    assert shared.is_closed is False

    with CVKingClient("http://localhost:3001") as owned:
        http = owned.http
    assert http.is_closed is True


def test_login_invalid_email_raises_api_error(client, api):
    with pytest.raises(ApiError) as exc_info:
        client.login("admin@cvking.local", VALID_PASSWORD)

    error = exc_info.value
    assert error.status_code is None
    assert error.message.startswith("Invalid request: email")
    assert VALID_PASSWORD not in str(error.detail)
    assert "login" not in api.state.received


def test_create_application_invalid_job_id(logged_in, api):
    with pytest.raises(ApiError) as exc_info:
        logged_in.create_application("")

    assert exc_info.value.status_code is None
    assert "Invalid request" in exc_info.value.message
    assert "application" not in api.state.received


def test_create_job_empty_title(logged_in, api):
    with pytest.raises(ApiError) as exc_info:
        logged_in.create_job("", "83e2bb91", "Test description")

    assert exc_info.value.status_code is None
    assert exc_info.value.message.startswith("Invalid request: title")
    assert "job" not in api.state.received


def logged_in_client(api):
    client = CVKingClient(http_client=TestClient(api))
    client.login(VALID_EMAIL, VALID_PASSWORD)
    return client


@pytest.mark.parametrize("status_code", [413, 500])
def test_upload_server_rejection(build_stub_api, status_code):
    api = build_stub_api(upload_status=status_code, upload_body={"message": "Upload failed"})
    client = logged_in_client(api)

    with pytest.raises(ApiError) as exc_info:
        client.upload_file(LocalFile("resume.pdf", "application/pdf", b"%PDF-1.4"))

    assert exc_info.value.status_code == status_code
    assert exc_info.value.message == "Upload failed"
    assert api.state.received["upload"]["filename"] == "resume.pdf"


def test_upload_response_without_url(build_stub_api):
    client = logged_in_client(build_stub_api(upload_body={"id": "file-1"}))

    with pytest.raises(ApiError) as exc_info:
        client.upload_file(LocalFile("resume.pdf", "application/pdf", b"%PDF-1.4"))

    assert exc_info.value.status_code == 200
    assert exc_info.value.message == "Upload response did not include a URL"


def test_upload_response_not_json(build_stub_api):
    client = logged_in_client(build_stub_api(upload_body="stored"))

    with pytest.raises(ApiError) as exc_info:
        client.upload_file(LocalFile("resume.pdf", "application/pdf", b"%PDF-1.4"))

    assert exc_info.value.detail == "stored"


def test_upload_unknown_type_tag(logged_in, api):
    with pytest.raises(UploadValidationError, match="Unsupported upload type"):
        logged_in.upload_file(LocalFile("resume.pdf", "application/pdf", b"%PDF-1.4"), type="bogus")
    assert "upload" not in api.state.received


def test_log_api_error_redacts_credentials(caplog):
    error = ApiError(400, {"message": "Bad request", "password": "123321", "accessToken": "abc"})

    with caplog.at_level(logging.ERROR):
        log_api_error(error, logging.getLogger("cvking.tests"))

    assert "123321" not in caplog.text
    assert "abc'" not in caplog.text
    assert "***REDACTED***" in caplog.text
    assert "Status: 400" in caplog.text
    assert "Error message: Bad request" in caplog.text
