from __future__ import annotations

from typing import Any


class FakeCursor:
    """Cursor minimaliste pour les repos (fetchone/fetchall/lastrowid)."""

    def __init__(self, *, one: Any = None, all: Any = None, lastrowid: Any = None):
        self._one = one
        self._all = all
        self.lastrowid = lastrowid

    def fetchone(self):
        return self._one

    def fetchall(self):
        return self._all


class FakeConn:
    """Connexion minimaliste pour les tests de repos.

    - Enregistre les appels à execute dans `calls`
    - `changes` pilote la réponse à "SELECT changes()"
    - Permet de configurer le prochain cursor via `set_next`
    """

    def __init__(self, *, changes: int = 1):
        self.calls: list[tuple[str, tuple]] = []
        self.changes = changes
        self._next = FakeCursor(one=None, all=[])

    def set_next(self, *, one=None, all=None, lastrowid=None):
        self._next = FakeCursor(one=one, all=all, lastrowid=lastrowid)

    def execute(self, sql: str, params: tuple = ()):
        sql = sql.strip()
        self.calls.append((sql, params))
        if sql == "SELECT changes()":
            return FakeCursor(one=(self.changes,))
        return self._next


class FakeConnCM:
    """Context manager qui renvoie une FakeConn."""

    def __init__(self, conn: FakeConn):
        self.conn = conn
        self.entered = 0
        self.exited = 0

    def __enter__(self):
        self.entered += 1
        return self.conn

    def __exit__(self, exc_type, exc, tb):
        self.exited += 1
        return False
