from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from product_api.core.settings import get_settings

settings = get_settings()
SQLALCHEMY_DATABASE_URL = settings.database_url

connect_args = {"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args, echo=settings.database_echo)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
        Database session generator.

        Opens a session and closes it once the request is done, so it can be used
        as a FastAPI dependency.

        Yields:
            SessionLocal: an open SQLAlchemy session.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
