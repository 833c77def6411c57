import os

# must be set before the app (and its settings) is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import io
import itertools
import json

import pytest
from fastapi.testclient import TestClient
from PIL import Image as PILImage
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from ads_online.core.security import hash_password
from ads_online.database import Base, get_db
from ads_online.models.user import Role, User

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

_phone_numbers = itertools.count(1000000)

def make_image(color=(255, 0, 0), size=(4, 4), image_format="PNG") -> bytes:
    buffer = io.BytesIO()
    PILImage.new("RGB", size, color).save(buffer, format=image_format)
    return buffer.getvalue()

def count_rows(model) -> int:
    db = TestingSessionLocal()
    try:
        return db.query(model).count()
    finally:
        db.close()

@pytest.fixture
def db_session(client):
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def client():
    Base.metadata.create_all(bind=engine)
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def make_user(client):
    """Factory: stores a user and returns its id, credentials and auth tuple"""
    def _make_user(role=Role.USER, password="password123"):
        number = next(_phone_numbers)
        username = f"user{number}@mail.ru"
        db = TestingSessionLocal()
        try:
            user = User(
                username=username,
                password=hash_password(password),
                first_name="Ivan",
                last_name="Petrov",
                phone=f"+7 (9{str(number)[:2]}) {str(number)[2:5]}-{str(number)[5:7]}-00",
                role=role,
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            return {
                "id": user.id,
                "username": username,
                "password": password,
                "auth": (username, password),
            }
        finally:
            db.close()
    return _make_user

@pytest.fixture
def user(make_user):
    return make_user()

@pytest.fixture
def other_user(make_user):
    return make_user()

@pytest.fixture
def admin(make_user):
    return make_user(role=Role.ADMIN)

@pytest.fixture
def make_ad(client):
    """Factory: creates an ad through the API"""
    def _make_ad(owner, title="Old bicycle", price=1500, description="Good condition, barely used", image=None):
        response = client.post(
            "/ads",
            data={"properties": json.dumps({"title": title, "price": price, "description": description})},
            files={"image": ("ad.png", image or make_image(), "image/png")},
            auth=owner["auth"],
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _make_ad

@pytest.fixture
def make_comment(client):
    """Factory: creates a comment through the API"""
    def _make_comment(owner, ad_id, text="Is it still available?"):
        response = client.post(
            f"/ads/{ad_id}/comments",
            json={"text": text},
            auth=owner["auth"],
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _make_comment
