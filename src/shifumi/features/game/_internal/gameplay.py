from sqlite3 import Connection
from typing import Any

from shifumi.db.repo import game_repo
from shifumi.exceptions import game as exc
from shifumi.features.game import constants
from shifumi.features.game._internal import helpers
from shifumi.features.game._internal.commitment import matches_commitment
from shifumi.features.game._internal.outcome import compute_outcome


def commit_first_move(caller: str, game_id: int, commitment: str, *, now: int, conn: Connection) -> dict[str, Any]:
    """Enregistre l'engagement du premier joueur et ouvre la fenêtre du second coup."""
    game = helpers.get_game_or_raise(game_id, conn=conn)
    helpers.assert_status(game, constants.GAME_STATUS_ACTIVE)
    helpers.assert_player1(game, caller)

    if game["commitment1"]:
        raise exc.CommitmentAlreadySet(game_id, game["status"])

    if not isinstance(commitment, str) or not commitment:
        raise exc.EmptyCommitment()
    try:
        commitment.encode("utf-8")
    except UnicodeEncodeError as e:
        raise exc.InvalidCommitment() from e

    helpers.assert_before_deadline(game, now)
    deadline = helpers.next_deadline(now, game["step_duration"])

    if not game_repo.set_commitment_if_unset(game_id, commitment, deadline, conn=conn):
        raise exc.GameAlreadyHandled(game_id, constants.GAME_STATUS_ACTIVE)

    game = helpers.get_game_or_raise(game_id, conn=conn)
    events = [helpers.build_event(constants.EVENT_FIRST_MOVED, player=caller, id=game_id, commitment=commitment)]
    return helpers.build_snapshot(game, events=events)


def play_second_move(caller: str, game_id: int, move: int, *, now: int, conn: Connection) -> dict[str, Any]:
    """Enregistre le coup en clair du second joueur et ouvre la fenêtre de révélation."""
    game = helpers.get_game_or_raise(game_id, conn=conn)
    helpers.assert_status(game, constants.GAME_STATUS_ACTIVE)
    helpers.assert_player2(game, caller)

    if not game["commitment1"]:
        raise exc.MissingFirstMove(game_id, game["status"])
    if game["move2"] is not None:
        raise exc.MoveAlreadySet(game_id, game["status"])

    if isinstance(move, bool) or move not in constants.MOVES:
        raise exc.InvalidMove(move)

    helpers.assert_before_deadline(game, now)
    deadline = helpers.next_deadline(now, game["step_duration"])

    if not game_repo.set_move2_if_unset(game_id, move, deadline, conn=conn):
        raise exc.GameAlreadyHandled(game_id, constants.GAME_STATUS_ACTIVE)

    game = helpers.get_game_or_raise(game_id, conn=conn)
    events = [helpers.build_event(constants.EVENT_SECOND_MOVED, player=caller, id=game_id, move=move)]
    return helpers.build_snapshot(game, events=events)


def reveal_first_move(
    caller: str,
    game_id: int,
    move: int,
    secret: str | bytes,
    *,
    now: int,
    conn: Connection,
) -> dict[str, Any]:
    """Vérifie la révélation du premier joueur contre son engagement, puis résout et paie la partie."""
    game = helpers.get_game_or_raise(game_id, conn=conn)
    helpers.assert_status(game, constants.GAME_STATUS_ACTIVE)
    helpers.assert_player1(game, caller)

    if game["move2"] is None:
        raise exc.MissingSecondMove(game_id, game["status"])

    if isinstance(move, bool) or move not in constants.MOVES:
        raise exc.InvalidMove(move)

    helpers.assert_before_deadline(game, now)

    if not matches_commitment(game["commitment1"], game_id, move, secret):
        raise exc.CommitmentMismatch(game_id)

    if not game_repo.update_game_if_status(
        game_id,
        required_status=constants.GAME_STATUS_ACTIVE,
        move1_revealed=move,
        conn=conn,
    ):
        raise exc.GameAlreadyHandled(game_id, constants.GAME_STATUS_ACTIVE)

    outcome = compute_outcome(move, game["move2"])
    helpers.finish_game(game, outcome, now, conn=conn)

    game = helpers.get_game_or_raise(game_id, conn=conn)
    events = [
        helpers.build_event(constants.EVENT_REVEALED, player=caller, id=game_id, move=move),
        helpers.build_event(constants.EVENT_OUTCOME, id=game_id, outcome=outcome, stake=game["stake"]),
    ]
    return helpers.build_snapshot(game, events=events)
