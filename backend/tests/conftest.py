import os

# must be set before config / core.database are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("ADMIN_USERNAME", None)
os.environ.pop("ADMIN_PASSWORD", None)

import pytest
from fastapi import Request
from fastapi.testclient import TestClient
from core.database import SessionLocal, engine
from models import Base
from models.users import UserRole
from main import app
from api.auth.schemas import UserResponseSchema
from api.auth.security import get_current_user, oauth2_scheme

ROLE_HEADER = "X-Test-Role"


async def user_from_role_header(request: Request):
    """Authenticates test clients by role header; falls back to the real bearer token check."""
    role = request.headers.get(ROLE_HEADER)
    if role is None:
        return get_current_user(await oauth2_scheme(request))
    return UserResponseSchema(id=1, username=f"test-{role}", email=None, role=UserRole(role))


@pytest.fixture(autouse=True)
def clean_db():
    """Gives every test empty tables."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    app.dependency_overrides[get_current_user] = user_from_role_header
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def test_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


@pytest.fixture
def anonymous_client():
    return TestClient(app)


@pytest.fixture
def operator_client():
    return TestClient(app, headers={ROLE_HEADER: UserRole.operator.value})


@pytest.fixture
def reviewer_client():
    return TestClient(app, headers={ROLE_HEADER: UserRole.reviewer.value})


@pytest.fixture
def admin_client():
    return TestClient(app, headers={ROLE_HEADER: UserRole.admin.value})


@pytest.fixture
def make_inspection(test_db):
    from models.inspections import Inspection

    def _make(camera_id="CAM-01", image_url="https://images.example/aoi/1.png"):
        inspection = Inspection(camera_id=camera_id, image_url=image_url, status="completed")
        test_db.add(inspection)
        test_db.commit()
        test_db.refresh(inspection)
        return inspection

    return _make


@pytest.fixture
def detection_payload():
    def _payload(inspection_id, match_score, **extra):
        payload = {
            "inspection_id": inspection_id,
            "bbox_x1": 100,
            "bbox_y1": 80,
            "bbox_x2": 300,
            "bbox_y2": 180,
            "crop_url": "https://images.example/aoi/crop.png",
            "ocr_text": "LM358N",
            "ocr_confidence": 0.93,
            "match_score": match_score,
        }
        payload.update(extra)
        return payload

    return _payload
