from sqlite3 import Connection

from ..connection import get_conn

# ------------ Ledger -----------
def ledger_get_balance(identity: str, *, conn: Connection | None = None) -> int:
    """Retourne le solde retirable d'une identité (0 si inconnue)."""
    if conn is None:
        with get_conn() as conn2:
            return ledger_get_balance(identity, conn=conn2)
    row = conn.execute(
        "SELECT balance FROM ledger WHERE identity=?",
        (identity,),
    ).fetchone()
    return int(row[0]) if row else 0


def ledger_add_balance(identity: str, amount: int, *, conn: Connection | None = None) -> int:
    """Ajoute amount au solde et retourne le nouveau solde."""
    if conn is None:
        with get_conn() as conn2:
            return ledger_add_balance(identity, amount, conn=conn2)
    conn.execute(
        "INSERT OR IGNORE INTO ledger(identity) VALUES (?)",
        (identity,),
    )
    conn.execute(
        "UPDATE ledger SET balance = balance + ? WHERE identity=?",
        (int(amount), identity),
    )
    return ledger_get_balance(identity, conn=conn)
