# userseed/seeds/seed_001_users.py

from sqlalchemy import insert
from sqlalchemy.orm import Session
from userseed.core.utils import truncate_table
from userseed.models.user import User


USERS = [
    {"id": 1, "username": "patrick", "password": "pass"},
    {"id": 2, "username": "notpatrick", "password": "pass"},
    {"id": 3, "username": "verypatrick", "password": "pass"},
]


def run(db: Session):
    truncate_table(db, User.__tablename__)
    db.execute(insert(User), USERS)
