# userseed/core/utils.py

from sqlalchemy import text
from sqlalchemy.orm import Session


def truncate_table(db: Session, table_name: str):
    """
    Removes every row from the table and resets its identity counter where
    the engine keeps one. A missing table raises the driver's error.
    """
    dialect = db.get_bind().dialect
    quoted = dialect.identifier_preparer.quote(table_name)

    if dialect.name == "sqlite":
        db.execute(text(f"DELETE FROM {quoted}"))
        if _has_sqlite_sequence(db):
            db.execute(
                text("DELETE FROM sqlite_sequence WHERE name = :name"),
                {"name": table_name}
            )
    elif dialect.name == "postgresql":
        db.execute(text(f"TRUNCATE {quoted} RESTART IDENTITY"))
    else:
        db.execute(text(f"TRUNCATE TABLE {quoted}"))


def _has_sqlite_sequence(db: Session) -> bool:
    # sqlite_sequence only exists once an AUTOINCREMENT table has been created
    row = db.execute(
        text("SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'sqlite_sequence'")
    ).first()
    return row is not None
