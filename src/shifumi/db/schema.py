from .connection import get_conn


def _table_columns(conn, table: str) -> set[str]:
    """Retourne la liste des colonnes d'une table (SQLite)."""
    rows = conn.execute(f"PRAGMA table_info({table});").fetchall()
    return {str(r[1]) for r in rows}


def migrate_db():
    """Migration douce (sans perte) pour les anciennes DB.

    Important : `CREATE TABLE IF NOT EXISTS` ne met *pas* à jour le schéma
    d'une table existante. Donc si la base existe déjà, il faut ajouter les
    colonnes manquantes via `ALTER TABLE`.
    """

    with get_conn() as conn:
        # --- games : colonnes de suivi ajoutées après la première version ---
        cols = _table_columns(conn, "games")
        if cols:
            # (name, sql_type)
            wanted = [
                ("outcome", "TEXT"),
                ("finished_at", "INTEGER"),
            ]

            for name, sql_type in wanted:
                if name not in cols:
                    conn.execute(f"ALTER TABLE games ADD COLUMN {name} {sql_type};")

def init_db():
    with get_conn() as conn:
        conn.executescript("""
        -- -------------------- Game system --------------------
        -- game_id est attribué par le moteur (0, 1, 2, ...), jamais réutilisé.
        CREATE TABLE IF NOT EXISTS games (
            game_id         INTEGER PRIMARY KEY,
            player1         TEXT    NOT NULL,
            player2         TEXT,
            stake           INTEGER NOT NULL CHECK(stake >= 0),
            status          TEXT    NOT NULL CHECK(status IN ('WAITING_FOR_OPPONENT','ACTIVE','FINISHED')),
            step_duration   INTEGER NOT NULL CHECK(step_duration > 0),
            next_deadline   INTEGER NOT NULL,
            commitment1     TEXT,
            move2           INTEGER CHECK(move2 IS NULL OR move2 IN (1, 2, 3)),
            move1_revealed  INTEGER CHECK(move1_revealed IS NULL OR move1_revealed IN (1, 2, 3)),
            outcome         TEXT,
            created_at      INTEGER NOT NULL,
            finished_at     INTEGER
        );

        -- Accélère la recherche des parties réclamables (status + next_deadline)
        CREATE INDEX IF NOT EXISTS idx_games_status_deadline
            ON games(status, next_deadline);

        -- -------------------- Ledger --------------------
        CREATE TABLE IF NOT EXISTS ledger (
            identity    TEXT    NOT NULL PRIMARY KEY,
            balance     INTEGER NOT NULL DEFAULT 0 CHECK(balance >= 0)
        );
        """)

    # Migration douce pour DB déjà en prod (ajout de colonnes manquantes)
    migrate_db()
