"""
Test configuration for the NRC management backend.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select

from nrc.config import Settings
from nrc.database import Database
from nrc.main import create_app
from nrc.beds.models import Bed
from nrc.core.bootstrap import seed_sample_data

# In-memory database shared by every session of a test (StaticPool)
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def database():
    """
    Create a fresh database for each test.
    """
    database = Database(TEST_DATABASE_URL)
    database.create_tables()
    yield database
    database.drop_tables()
    database.dispose()


@pytest.fixture(scope="function")
def db(database, request):
    """
    Session for arranging and inspecting data directly.
    """
    # When the test also uses the client, set it up first so the app's
    # shutdown (which disposes the engine) runs after this session closes.
    if "client" in request.fixturenames:
        request.getfixturevalue("client")
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def app_settings():
    return Settings(database_url=TEST_DATABASE_URL, seed_sample_data=False, environment="test")


@pytest.fixture(scope="function")
def client(database, app_settings):
    """
    Create a test client bound to the test database.
    """
    app = create_app(app_settings, database)
    with TestClient(app) as client:
        yield client


@pytest.fixture(scope="function")
def beds(db):
    """
    Seed the sample hospital and return its bed ids keyed by bed number.
    """
    seed_sample_data(db)
    return {bed.number: bed.id for bed in db.scalars(select(Bed))}


def make_patient_payload(**overrides):
    """Registration body for a child with normal nutrition status."""
    payload = {
        "name": "Aarav Kumar",
        "age": 3,
        "type": "child",
        "contactNumber": "+91 9876500001",
        "address": "Ward 4, Sadar Bazaar",
        "weight": 11.2,
        "height": 88.0,
        "nutritionStatus": "normal",
        "riskScore": 20,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def patient_payload():
    return make_patient_payload


@pytest.fixture
def create_patient(client):
    """Register a patient through the API and return the response body."""
    def _create(**overrides):
        response = client.post("/api/patients/", json=make_patient_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()
    return _create
