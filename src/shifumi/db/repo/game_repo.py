"""Module de gestion des parties, contenant les fonctions nécessaires pour créer, récupérer et faire évoluer les parties dans la base de données."""

from sqlite3 import Connection, Cursor, Row
from typing import Any

from shifumi.db.connection import get_conn
from shifumi.exceptions.game import GameInsertFailed


def _execute_in_conn(
    conn: Connection,
    sql: str,
    params: tuple[Any, ...] = (),
) -> Cursor:
    """Exécute une requête SQL avec les paramètres spécifiés dans une connexion donnée, et retourne le curseur résultant."""
    return conn.execute(sql, params)


def _changed_one_row(conn: Connection) -> bool:
    changes = _execute_in_conn(conn, "SELECT changes()").fetchone()[0]
    return changes == 1


def create_game(
    player1: str,
    stake: int,
    step_duration: int,
    next_deadline: int,
    created_at: int,
    *,
    conn: Connection | None = None,
) -> int:
    """Crée une partie en attente d'adversaire et retourne son identifiant (0 pour la première partie, puis +1)."""
    if conn is None:
        with get_conn() as conn2:
            return create_game(player1, stake, step_duration, next_deadline, created_at, conn=conn2)

    cursor = _execute_in_conn(conn, """
            INSERT INTO games(
                game_id,
                player1,
                player2,
                stake,
                status,
                step_duration,
                next_deadline,
                commitment1,
                move2,
                move1_revealed,
                outcome,
                created_at,
                finished_at
            )
            VALUES (
                (SELECT COALESCE(MAX(game_id) + 1, 0) FROM games),
                ?, NULL, ?, 'WAITING_FOR_OPPONENT', ?, ?, NULL, NULL, NULL, NULL, ?, NULL
            )
        """, (player1, stake, step_duration, next_deadline, created_at))

    if cursor.lastrowid is None:
        raise GameInsertFailed()
    return cursor.lastrowid


def get_game_by_id(game_id: int, *, conn: Connection | None = None) -> Row | None:
    """Retourne les informations d'une partie à partir de son identifiant, ou None si elle n'existe pas."""
    if conn is None:
        with get_conn() as conn2:
            return get_game_by_id(game_id, conn=conn2)
    row = _execute_in_conn(conn, """
            SELECT *
            FROM games
            WHERE game_id = ?
        """, (game_id,)).fetchone()
    return row


def transition_status(
    game_id: int,
    from_status: str,
    to_status: str,
    next_deadline: int | None,
    *,
    conn: Connection | None = None,
) -> bool:
    """Fait la transition d'une partie d'un status à un autre uniquement si le status actuel correspond à celui attendu, et retourne True si la transition a été effectuée, ou False sinon.

    `next_deadline=None` conserve l'échéance courante.
    """
    if conn is None:
        with get_conn() as conn2:
            return transition_status(game_id, from_status, to_status, next_deadline, conn=conn2)

    _execute_in_conn(conn, """
            UPDATE games
            SET
                status=?,
                next_deadline=COALESCE(?, next_deadline)
            WHERE game_id =?
            AND status =?
        """, (to_status, next_deadline, game_id, from_status))

    return _changed_one_row(conn)


def update_game_if_status(
    game_id: int,
    required_status: str,
    *,
    player2: str | None = None,
    stake: int | None = None,
    next_deadline: int | None = None,
    move1_revealed: int | None = None,
    outcome: str | None = None,
    finished_at: int | None = None,
    conn: Connection | None = None,
) -> bool:
    """Met à jour les informations d'une partie uniquement si son status correspond à celui requis, et retourne True si la mise à jour a été effectuée, ou False sinon."""
    if all(v is None for v in (player2, stake, next_deadline, move1_revealed, outcome, finished_at)):
        return False

    if conn is None:
        with get_conn() as conn2:
            return update_game_if_status(
                game_id,
                required_status,
                player2=player2,
                stake=stake,
                next_deadline=next_deadline,
                move1_revealed=move1_revealed,
                outcome=outcome,
                finished_at=finished_at,
                conn=conn2,
            )

    _execute_in_conn(conn, """
            UPDATE games
            SET
                player2         = COALESCE(?, player2),
                stake           = COALESCE(?, stake),
                next_deadline   = COALESCE(?, next_deadline),
                move1_revealed  = COALESCE(?, move1_revealed),
                outcome         = COALESCE(?, outcome),
                finished_at     = COALESCE(?, finished_at)
            WHERE game_id=?
            AND status=?
        """, (player2, stake, next_deadline, move1_revealed, outcome, finished_at, game_id, required_status))

    return _changed_one_row(conn)


def set_commitment_if_unset(
    game_id: int,
    commitment: str,
    next_deadline: int,
    *,
    conn: Connection | None = None,
) -> bool:
    """Enregistre l'engagement du premier joueur uniquement s'il n'est pas déjà défini (partie ACTIVE), et retourne True si l'écriture a eu lieu."""
    if conn is None:
        with get_conn() as conn2:
            return set_commitment_if_unset(game_id, commitment, next_deadline, conn=conn2)

    _execute_in_conn(conn, """
            UPDATE games
            SET commitment1=?, next_deadline=?
            WHERE game_id=?
            AND status='ACTIVE'
            AND commitment1 IS NULL
        """, (commitment, next_deadline, game_id))

    return _changed_one_row(conn)


def set_move2_if_unset(
    game_id: int,
    move: int,
    next_deadline: int,
    *,
    conn: Connection | None = None,
) -> bool:
    """Enregistre le coup du second joueur uniquement si l'engagement existe et que le coup n'est pas déjà défini, et retourne True si l'écriture a eu lieu."""
    if conn is None:
        with get_conn() as conn2:
            return set_move2_if_unset(game_id, move, next_deadline, conn=conn2)

    _execute_in_conn(conn, """
            UPDATE games
            SET move2=?, next_deadline=?
            WHERE game_id=?
            AND status='ACTIVE'
            AND commitment1 IS NOT NULL
            AND move2 IS NULL
        """, (move, next_deadline, game_id))

    return _changed_one_row(conn)


def list_claimable_games(now_ts: int, *, conn: Connection | None = None) -> list[Row]:
    """Retourne la liste des parties ACTIVE dont l'échéance est atteinte, triées par échéance."""
    if conn is None:
        with get_conn() as conn2:
            return list_claimable_games(now_ts, conn=conn2)
    rows = _execute_in_conn(conn, """
            SELECT *
            FROM games
            WHERE status = 'ACTIVE'
              AND next_deadline <= ?
            ORDER BY next_deadline ASC, game_id ASC
        """, (now_ts,)).fetchall()
    return rows
