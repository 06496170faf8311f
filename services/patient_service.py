class PatientService:
    # Chỉ chuyển tiếp xuống repository

    def __init__(self, repository):
        self.repository = repository

    def create_patient(self, patient):
        return self.repository.create(patient)

    def get_patient_by_id(self, patient_id):
        return self.repository.get_by_id(patient_id)

    def update_patient(self, patient):
        return self.repository.update(patient)

    def delete_patient(self, patient_id):
        self.repository.delete(patient_id)

    def get_all_patients(self):
        return self.repository.list_all()
