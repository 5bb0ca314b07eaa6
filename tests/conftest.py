"""
Shared pytest fixtures: every test gets its own SQLite database file.
"""
import importlib
import pytest
from sqlalchemy import text

from userseed.database import create_db_engine, create_session_factory, init_db


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'seed.db'}"


@pytest.fixture
def engine(db_url):
    engine = create_db_engine(db_url)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def schema(engine):
    """Creates the users table."""
    init_db(engine)
    return engine


@pytest.fixture
def fetch_users(engine):
    def _fetch():
        with engine.connect() as conn:
            rows = conn.execute(text("SELECT id, username, password FROM users ORDER BY id"))
            return [tuple(r) for r in rows]
    return _fetch


@pytest.fixture
def make_seed_package(tmp_path, monkeypatch):
    """
    Writes a throwaway seeds package to disk and imports it.
    Usage: make_seed_package({"a_first": "def run(db): ..."})
    """
    def _make(files):
        name = f"seedpkg_{tmp_path.name}"
        pkg = tmp_path / name
        pkg.mkdir()
        (pkg / "__init__.py").write_text("")
        for module, source in files.items():
            (pkg / f"{module}.py").write_text(source)
        monkeypatch.syspath_prepend(str(tmp_path))
        importlib.invalidate_caches()
        return importlib.import_module(name)
    return _make
