# /app/db/database.py

import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# The deployed environment sets DATABASE_URL; the default is a local SQLite file.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./student_performance.db")

# The 'check_same_thread' argument is only needed for SQLite.
engine_args = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, **engine_args)

# Each instance of SessionLocal is an independent database session.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    """Creates any missing tables. Alembic remains the source of truth in production."""
    # Importing the registry makes sure every model is attached to Base.metadata.
    from app.db.base import Base
    Base.metadata.create_all(bind=engine)


# Dependency to get a DB session. This will be used in our API routers.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
