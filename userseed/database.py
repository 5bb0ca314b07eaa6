# userseed/database.py

import os
from contextlib import contextmanager
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from userseed.models import Base


load_dotenv()


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/app.db")


def create_db_engine(url: str):
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args)


def create_session_factory(bind):
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=bind
    )


def init_db(bind):
    Base.metadata.create_all(bind=bind)


@contextmanager
def db_session(session_factory):
    """
    Yields a session, commits when the block finishes and rolls back
    (re-raising the original error) when it fails.
    """
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
