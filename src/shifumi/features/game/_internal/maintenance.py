"""Module de résolution des parties abandonnées : réclamation (claim) après échéance et recherche des parties réclamables."""

from sqlite3 import Connection
from typing import Any

from shifumi.db.repo import game_repo
from shifumi.features.game import constants
from shifumi.features.game._internal import helpers
from shifumi.features.game._internal.outcome import claim_outcome


def claim_game(caller: str, game_id: int, *, now: int, conn: Connection) -> dict[str, Any]:
    """Résout une partie ACTIVE dont l'échéance est passée, au profit du joueur qui n'a pas manqué son étape.

    Ouvert à tout appelant : `caller` n'est utilisé que pour la notification.
    """
    game = helpers.get_game_or_raise(game_id, conn=conn)
    helpers.assert_status(game, constants.GAME_STATUS_ACTIVE)
    helpers.assert_deadline_reached(game, now)

    outcome = claim_outcome(game)
    helpers.finish_game(game, outcome, now, conn=conn)

    game = helpers.get_game_or_raise(game_id, conn=conn)
    events = [
        helpers.build_event(constants.EVENT_CLAIMED, id=game_id, outcome=outcome, stake=game["stake"], claimer=caller),
    ]
    return helpers.build_snapshot(game, events=events)


def list_claimable_game_ids(now: int, *, conn: Connection | None = None) -> list[int]:
    """Retourne les identifiants des parties ACTIVE dont l'échéance est atteinte, triés par échéance."""
    return [int(row["game_id"]) for row in game_repo.list_claimable_games(now, conn=conn)]
