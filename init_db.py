from app import create_app
from extensions import db
from models.patient import Patient  # noqa: F401


def main():
    app = create_app()
    with app.app_context():
        db.drop_all()
        db.create_all()
        print("Database recreated successfully.")


if __name__ == '__main__':
    main()
