from flask import Flask
from config import Config
from extensions import db


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.from_prefixed_env('PATIENTS')
    db.init_app(app)

    # Đăng ký bảng với metadata trước khi create_all
    from models import patient  # noqa: F401

    return app
