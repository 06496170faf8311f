import pytest

from app import create_app
from config import TestConfig
from extensions import db as _db
from models.patient import Patient
from repositories.patient_repository import PatientRepository
from services.patient_service import PatientService


@pytest.fixture()
def app():
    """
    Flask app bound to an in-memory SQLite database, with the schema created
    and an app context pushed for the duration of the test.
    """
    app = create_app(TestConfig)
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def db(app):
    return _db


@pytest.fixture()
def repository(db) -> PatientRepository:
    return PatientRepository(db)


@pytest.fixture()
def service(repository) -> PatientService:
    return PatientService(repository)


@pytest.fixture()
def jane() -> Patient:
    return Patient(
        first_name="Jane",
        last_name="Doe",
        date_of_birth="1990-01-01",
        email="jane@x.com",
        phone_number="555-1234",
    )
