"""
Shared fixtures for the MX backend tests.

Every test gets a fresh in-memory SQLite database and an uploads directory
under tmp_path; nothing talks to Postgres, R2 or Mapbox.
"""
import os
import tempfile

# Settings and the engine are built at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["STORAGE_BACKEND"] = "local"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="mx-uploads-")
os.environ["MAPBOX_ACCESS_TOKEN"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.deps import get_db, get_storage
from app.core.storage import LocalStorage
from app.main import app
from app.models import Base


@pytest.fixture()
def db_session():
    """
    Session bound to a private in-memory database.

    StaticPool keeps the single connection alive so every request sees the same tables.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def upload_root(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture()
def client(db_session, upload_root):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: LocalStorage(root=upload_root, base_url="http://testserver")
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def parent_payload():
    return {
        "parent_store_name": "Spice Route Foods",
        "registered_phone": "9876543210",
        "merchant_type": "LOCAL",
        "owner_name": "Asha Verma",
        "owner_email": "asha@example.com",
    }


@pytest.fixture
def parent(client, parent_payload):
    """A registered parent merchant: {success, id, parent_merchant_id}."""
    r = client.post("/api/parent-merchant", json=parent_payload)
    assert r.status_code == 200, r.text
    return r.json()


def register_store_payload(parent: dict, **step1) -> dict:
    return {
        "step1": {
            "store_name": "Spice Route Indiranagar",
            "store_display_name": "Spice Route",
            "store_email": "indiranagar@spiceroute.in",
            "store_phones": ["9123456780", ""],
            **step1,
        },
        "step2": {
            "full_address": "12 100 Feet Road, Indiranagar",
            "city": "Bengaluru",
            "state": "Karnataka",
            "postal_code": "560038",
            "country": "India",
            "latitude": 12.971598701,
            "longitude": 77.640461802,
        },
        "storeSetup": {
            "cuisine_types": ["North Indian", ""],
            "food_categories": ["Veg"],
            "avg_preparation_time_minutes": 25,
            "min_order_amount": 150,
            "delivery_radius_km": 5,
            "is_pure_veg": True,
            "store_hours": {
                "monday": {"open": "09:00", "close": "22:00"},
                "tuesday": {"open": "09:00", "close": "22:00"},
                "sunday": {"open": "", "close": ""},
            },
        },
        "logoUrl": "http://testserver/uploads/logo.png",
        "galleryUrls": ["http://testserver/uploads/g1.png"],
        "documentUrls": [
            {"type": "PAN_IMAGE", "url": "http://testserver/uploads/pan.jpg", "name": "pan.jpg"},
            {"type": "AADHAR_FRONT", "url": "http://testserver/uploads/aadhar.jpg"},
            {"type": "MENU_CARD", "url": "http://testserver/uploads/menu.pdf"},
        ],
        "parentInfo": {"id": parent["id"], "parent_merchant_id": parent["parent_merchant_id"]},
    }


@pytest.fixture
def store_id(client, parent):
    """store_id (GMMC...) of a store registered for the parent fixture."""
    r = client.post("/api/register-store", json=register_store_payload(parent))
    assert r.status_code == 200, r.text
    return r.json()["storeId"]
