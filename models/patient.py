from extensions import db

# Các trường được ghi đè khi cập nhật (mọi cột trừ khóa chính)
PATIENT_FIELDS = ('first_name', 'last_name', 'date_of_birth', 'email', 'phone_number')


class Patient(db.Model):
    __tablename__ = 'patients'

    patient_id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100))
    last_name = db.Column(db.String(100))
    date_of_birth = db.Column(db.String(20))  # lưu dạng text, không kiểm tra định dạng
    email = db.Column(db.String(255))
    phone_number = db.Column(db.String(50))

    def __repr__(self):
        return f'<Patient {self.patient_id} {self.first_name} {self.last_name}>'
