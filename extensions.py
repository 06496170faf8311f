from contextlib import contextmanager

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.orm import Session

db = SQLAlchemy()


@contextmanager
def transaction(engine=None):
    """Session riêng cho một thao tác: commit khi thành công, rollback rồi ném lại lỗi."""
    if engine is None:
        engine = db.engine
    with Session(engine, expire_on_commit=False) as session, session.begin():
        yield session
