"""Module de fonctions utilitaires pour la gestion des parties, utilisées en interne dans les différentes étapes (création, coups, résolution, etc.)."""

from sqlite3 import Connection, Row
from typing import Any

from shifumi.db.repo import game_repo
from shifumi.exceptions import game as exc
from shifumi.features.game import constants
from shifumi.features.game._internal.outcome import split_stake
from shifumi.features.ledger import ledger
from shifumi.utils.timestamp import add_duration


def get_game_or_raise(game_id: int, *, conn: Connection | None = None) -> Row:
    """Retourne la ligne de partie correspondante à l'identifiant fourni, ou lève GameNotFound si aucune partie n'est trouvée."""
    game = game_repo.get_game_by_id(game_id, conn=conn)
    if not game:
        raise exc.GameNotFound(game_id)
    return game


def assert_status(game: Row, *expected: str) -> None:
    """Lève InvalidGameState si la partie n'est pas dans un des status attendus."""
    status = game["status"]
    if status not in expected:
        raise exc.InvalidGameState(game["game_id"], status)


def assert_player1(game: Row, caller: str) -> None:
    """Lève NotAuthorizedPlayer si l'appelant n'est pas le premier joueur."""
    if caller != game["player1"]:
        raise exc.NotAuthorizedPlayer(caller, constants.ROLE_PLAYER1)


def assert_player2(game: Row, caller: str) -> None:
    """Lève NotAuthorizedPlayer si l'appelant n'est pas le second joueur."""
    if game["player2"] is None or caller != game["player2"]:
        raise exc.NotAuthorizedPlayer(caller, constants.ROLE_PLAYER2)


def assert_before_deadline(game: Row, now: int) -> None:
    """Lève DeadlineExceeded si la fenêtre de l'étape courante est passée (now >= next_deadline)."""
    deadline = game["next_deadline"]
    if now >= deadline:
        raise exc.DeadlineExceeded(game["game_id"], deadline)


def assert_deadline_reached(game: Row, now: int) -> None:
    """Lève DeadlineNotYetReached si l'échéance n'est pas encore atteinte."""
    deadline = game["next_deadline"]
    if now < deadline:
        raise exc.DeadlineNotYetReached(game["game_id"], deadline)


def next_deadline(now: int, step_duration: int) -> int:
    """Retourne l'échéance de la prochaine étape (now + step_duration), ArithmeticOverflow si elle déborde."""
    return add_duration(now, step_duration)


def is_valid_amount(value: object) -> bool:
    """Indique si la valeur est un entier (hors booléen) positif ou nul."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def finish_game(game: Row, outcome: str, now: int, *, conn: Connection) -> list[tuple[str, int]]:
    """Termine une partie ACTIVE : crédite le registre selon l'issue puis passe la partie en FINISHED.

    Retourne les crédits effectués. Doit être appelée dans la transaction de l'opération.
    """
    game_id = game["game_id"]
    stake = game["stake"]
    payouts = split_stake(outcome, game["player1"], game["player2"], stake)

    # Transaction: status + payout + finished_at dans la même connexion
    if not game_repo.transition_status(
        game_id,
        from_status=constants.GAME_STATUS_ACTIVE,
        to_status=constants.GAME_STATUS_FINISHED,
        next_deadline=None,
        conn=conn,
    ):
        raise exc.GameAlreadyHandled(game_id, constants.GAME_STATUS_ACTIVE)

    for identity, amount in payouts:
        ledger.credit(identity, amount, conn=conn)

    game_repo.update_game_if_status(
        game_id,
        required_status=constants.GAME_STATUS_FINISHED,
        outcome=outcome,
        finished_at=now,
        conn=conn,
    )
    return payouts


def build_event(name: str, **fields: Any) -> dict[str, Any]:
    """Construit une notification émise par une opération."""
    return {"name": name, **fields}


def build_snapshot(game_row: Row, *, events: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    """Construit un snapshot de la partie à partir de la ligne SQLite, dans un format prêt à être renvoyé à l'appelant."""
    result: dict[str, Any] = {
        "game": {
            "id": game_row["game_id"],
            "player1": game_row["player1"],
            "player2": game_row["player2"],
            "stake": game_row["stake"],
            "status": game_row["status"],
            "step_duration": game_row["step_duration"],
            "next_deadline": game_row["next_deadline"],
            "commitment1": game_row["commitment1"],
            "move2": game_row["move2"],
            "move1_revealed": game_row["move1_revealed"],
            "outcome": game_row["outcome"],
        }
    }

    if events is not None:
        result["events"] = events
    return result
