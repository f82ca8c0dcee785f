import sys

import pytest

# Permet d'importer le package depuis "src/" quand on lance pytest a la racine du repo.
if "src" not in sys.path:
    sys.path.insert(0, "src")


class FakeClock:
    """Horloge injectable dans GameService : avance uniquement quand le test le demande."""

    def __init__(self, now: int = 1_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def isolated_db_path(monkeypatch, tmp_path):
    # Aucun test ne doit toucher ./data/shifumi.db
    from shifumi.db import connection

    path = tmp_path / "data" / "shifumi-test.db"
    monkeypatch.setattr(connection, "DB_PATH", str(path))
    return path


@pytest.fixture
def db(isolated_db_path):
    """Base SQLite temporaire avec le schéma initialisé."""
    from shifumi.db.schema import init_db

    init_db()
    return isolated_db_path


@pytest.fixture
def clock():
    return FakeClock()
