from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from extensions import db, transaction
from models.patient import PATIENT_FIELDS, Patient
from utils.logging import get_logger

logger = get_logger(__name__)


class PatientRepository:
    # Mỗi thao tác mở session riêng; bản ghi trả về đã tách khỏi session

    def __init__(self, database=db):
        self.db = database

    def create(self, patient):
        with transaction(self.db.engine) as session:
            session.add(patient)
        logger.debug("Created patient %s", patient.patient_id)
        return patient

    def get_by_id(self, patient_id):
        with Session(self.db.engine) as session:
            patient = session.get(Patient, patient_id)
        if patient is None:
            logger.info("Patient %s not found", patient_id)
        return patient

    def update(self, patient):
        with transaction(self.db.engine) as session:
            stored = None
            if patient.patient_id is not None:
                stored = session.get(Patient, patient.patient_id)
            if stored is None:
                raise StaleDataError(f"Patient {patient.patient_id} does not exist")
            # Ghi đè toàn bộ bản ghi
            for field in PATIENT_FIELDS:
                setattr(stored, field, getattr(patient, field))
        logger.debug("Updated patient %s", patient.patient_id)
        return patient

    def delete(self, patient_id):
        with transaction(self.db.engine) as session:
            patient = session.get(Patient, patient_id)
            if patient is None:
                logger.info("Delete skipped, patient %s not found", patient_id)
                return
            session.delete(patient)
        logger.debug("Deleted patient %s", patient_id)

    def list_all(self):
        with Session(self.db.engine) as session:
            return session.scalars(self.db.select(Patient).order_by(Patient.patient_id)).all()
