import click

from app import create_app
from extensions import db
from models.patient import Patient
from repositories.patient_repository import PatientRepository
from services.patient_service import PatientService
from utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

MENU = (
    "1. Create Patient",
    "2. Read Patient",
    "3. Update Patient",
    "4. Delete Patient",
    "5. List Patients",
)

# Nhập "-" để xóa trắng một trường
CLEAR = "-"

# (thuộc tính, nhãn nhập liệu)
FIELDS = (
    ("first_name", "first name"),
    ("last_name", "last name"),
    ("date_of_birth", "date of birth (YYYY-MM-DD)"),
    ("email", "email"),
    ("phone_number", "phone number"),
)


@click.command()
def main():
    """Patient records console.

    When updating, press Enter to keep a value or type - to clear it.
    """
    app = create_app()
    setup_logging(app.config["LOG_LEVEL"])
    with app.app_context():
        try:
            db.create_all()
            service = PatientService(PatientRepository(db))
            run_menu(service)
        finally:
            db.engine.dispose()


def run_menu(service):
    for line in MENU:
        click.echo(line)

    raw = click.prompt("Enter choice", default="", show_default=False)
    try:
        choice = int(raw)
    except ValueError:
        choice = None
    logger.debug("Menu choice %r", raw)

    if choice == 1:
        create_patient(service)
    elif choice == 2:
        read_patient(service)
    elif choice == 3:
        update_patient(service)
    elif choice == 4:
        delete_patient(service)
    elif choice == 5:
        list_patients(service)
    else:
        click.echo("Invalid choice.")


def _prompt_fields(patient, label_prefix="Enter"):
    for attr, label in FIELDS:
        current = getattr(patient, attr) or ""
        value = click.prompt(f"{label_prefix} {label}", default=current, show_default=bool(current))
        if value == CLEAR:
            value = ""
        setattr(patient, attr, value)


def _prompt_patient_id():
    return click.prompt("Enter Patient ID", type=int)


def create_patient(service):
    patient = Patient()
    _prompt_fields(patient)
    service.create_patient(patient)
    click.echo(f"Patient created successfully (ID: {patient.patient_id}).")


def read_patient(service):
    patient = service.get_patient_by_id(_prompt_patient_id())
    if patient is None:
        click.echo("Patient not found.")
        return
    click.echo(f"Patient ID: {patient.patient_id}")
    click.echo(f"Name: {patient.first_name} {patient.last_name}")
    click.echo(f"Date of Birth: {patient.date_of_birth}")
    click.echo(f"Email: {patient.email}")
    click.echo(f"Phone: {patient.phone_number}")


def update_patient(service):
    patient = service.get_patient_by_id(_prompt_patient_id())
    if patient is None:
        click.echo("Patient not found.")
        return
    _prompt_fields(patient, label_prefix="Enter new")
    service.update_patient(patient)
    click.echo("Patient updated successfully.")


def delete_patient(service):
    service.delete_patient(_prompt_patient_id())
    click.echo("Patient deleted successfully.")


def list_patients(service):
    patients = service.get_all_patients()
    if not patients:
        click.echo("No patients found.")
        return
    for p in patients:
        click.echo(f"{p.patient_id}: {p.first_name} {p.last_name} | {p.date_of_birth} | {p.email} | {p.phone_number}")


if __name__ == '__main__':
    main()
