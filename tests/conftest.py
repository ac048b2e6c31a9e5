"""
Shared fixtures: an in-memory SQLite database with the CVKing tables.
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cvking.db.base import Base
import cvking.db.models  # noqa: F401  registers every model on Base.metadata


TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory database for each test."""
    test_engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    try:
        yield test_engine
    finally:
        Base.metadata.drop_all(bind=test_engine)
        test_engine.dispose()


@pytest.fixture(scope="function")
def db(engine):
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


VALID_EMAIL = "jobseeker@example.com"
VALID_PASSWORD = "123321"
TOKEN = "test-token"


def build_stub_api(token_key="accessToken", upload_status=200, upload_body=None):
    """
    Minimal CVKing API that records what it received.

    upload_status / upload_body replace the normal /upload answer.
    """
    from fastapi import Depends, FastAPI, File, Form, Header, HTTPException, UploadFile
    from fastapi.responses import JSONResponse, PlainTextResponse

    api = FastAPI()
    api.state.received = {}

    def require_token(authorization: str = Header(None)):
        if authorization != f"Bearer {TOKEN}":
            raise HTTPException(status_code=401, detail="Unauthorized")

    @api.post("/auth/login")
    def login(body: dict):
        api.state.received["login"] = body
        if body.get("email") != VALID_EMAIL or body.get("password") != VALID_PASSWORD:
            raise HTTPException(status_code=401, detail="Invalid credentials")
        return {token_key: TOKEN}

    @api.post("/applications", status_code=201, dependencies=[Depends(require_token)])
    def create_application(body: dict):
        api.state.received["application"] = body
        if body.get("jobId") == "closed-job":
            raise HTTPException(status_code=400, detail="Job is not accepting applications")
        return {"id": "app-1", **body}

    @api.post("/jobs", status_code=201, dependencies=[Depends(require_token)])
    def create_job(body: dict):
        api.state.received["job"] = body
        return {"id": "job-1", "status": "published", **body}

    @api.post("/upload", dependencies=[Depends(require_token)])
    async def upload(file: UploadFile = File(...), type: str = Form(...)):
        content = await file.read()
        api.state.received["upload"] = {
            "filename": file.filename,
            "content_type": file.content_type,
            "size": len(content),
            "type": type,
        }
        if isinstance(upload_body, str):
            return PlainTextResponse(upload_body, status_code=upload_status)
        if upload_body is not None or upload_status != 200:
            return JSONResponse(upload_body or {}, status_code=upload_status)
        return {"url": f"/uploads/{type}/{file.filename}"}

    return api


@pytest.fixture
def stub_api_factory():
    return build_stub_api
