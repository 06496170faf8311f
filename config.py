class Config:
    # Mọi khóa đều có thể ghi đè bằng biến môi trường PATIENTS_<KEY>
    SQLALCHEMY_DATABASE_URI = 'sqlite:///patients.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = False

    LOG_LEVEL = 'WARNING'


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
