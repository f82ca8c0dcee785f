from __future__ import annotations

from shifumi.db.connection import get_conn
from shifumi.db.repo import ledger_repo as mod
from tests._fakes._db_fakes import FakeConn, FakeConnCM


def test_ledger_get_balance_unknown_returns_zero(monkeypatch):
    conn = FakeConn()
    conn.set_next(one=None)
    monkeypatch.setattr(mod, "get_conn", lambda: FakeConnCM(conn), raising=True)

    assert mod.ledger_get_balance("x") == 0
    assert conn.calls == [("SELECT balance FROM ledger WHERE identity=?", ("x",))]


def test_ledger_add_balance_creates_then_updates(db):
    assert mod.ledger_add_balance("a", 5) == 5
    assert mod.ledger_add_balance("a", 2) == 7
    assert mod.ledger_get_balance("a") == 7


def test_ledger_add_balance_in_given_conn(db):
    with get_conn() as conn:
        assert mod.ledger_add_balance("b", 1, conn=conn) == 1
        assert mod.ledger_get_balance("b", conn=conn) == 1

    assert mod.ledger_get_balance("b") == 1
