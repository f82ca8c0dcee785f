from sqlite3 import Connection
from typing import Any

from shifumi.db.repo import game_repo
from shifumi.exceptions import game as exc
from shifumi.features.game import constants
from shifumi.features.game._internal import helpers
from shifumi.features.game.deposits import DepositGateway
from shifumi.features.ledger import ledger


def start_game(
    caller: str,
    step_duration: int,
    deposit: int,
    *,
    now: int,
    deposits: DepositGateway,
    conn: Connection,
) -> dict[str, Any]:
    if isinstance(step_duration, bool) or not isinstance(step_duration, int) or step_duration <= 0:
        raise exc.InvalidStepDuration(step_duration)

    if not helpers.is_valid_amount(deposit):
        raise exc.InvalidDeposit(deposit)
    if deposit > ledger.MAX_BALANCE:
        raise exc.ArithmeticOverflow("mise", deposit)

    deadline = helpers.next_deadline(now, step_duration)

    deposits.take_deposit(caller, deposit)
    game_id = game_repo.create_game(caller, deposit, step_duration, deadline, now, conn=conn)

    game = helpers.get_game_or_raise(game_id, conn=conn)
    events = [helpers.build_event(constants.EVENT_STARTED, id=game_id, owner=caller, stake=deposit)]
    return helpers.build_snapshot(game, events=events)


def decline_game(caller: str, game_id: int, *, now: int, conn: Connection) -> dict[str, Any]:
    game = helpers.get_game_or_raise(game_id, conn=conn)
    helpers.assert_status(game, constants.GAME_STATUS_WAITING)
    helpers.assert_player1(game, caller)

    # Pas de contrôle d'échéance : le premier joueur peut toujours annuler tant que personne n'a rejoint.
    if not game_repo.transition_status(
        game_id,
        from_status=constants.GAME_STATUS_WAITING,
        to_status=constants.GAME_STATUS_FINISHED,
        next_deadline=None,
        conn=conn,
    ):
        raise exc.GameAlreadyHandled(game_id, constants.GAME_STATUS_WAITING)

    ledger.credit(caller, game["stake"], conn=conn)

    game_repo.update_game_if_status(
        game_id,
        required_status=constants.GAME_STATUS_FINISHED,
        outcome=constants.OUTCOME_DECLINED,
        finished_at=now,
        conn=conn,
    )

    game = helpers.get_game_or_raise(game_id, conn=conn)
    events = [helpers.build_event(constants.EVENT_DECLINED, owner=caller, id=game_id)]
    return helpers.build_snapshot(game, events=events)


def join_game(
    caller: str,
    game_id: int,
    deposit: int,
    *,
    now: int,
    deposits: DepositGateway,
    conn: Connection,
) -> dict[str, Any]:
    game = helpers.get_game_or_raise(game_id, conn=conn)
    helpers.assert_status(game, constants.GAME_STATUS_WAITING)

    if caller == game["player1"]:
        raise exc.NotAuthorizedPlayer(caller, constants.ROLE_OPPONENT)

    stake = game["stake"]
    if not helpers.is_valid_amount(deposit) or deposit != stake:
        raise exc.DepositMismatch(deposit, stake)

    helpers.assert_before_deadline(game, now)

    new_stake = stake + deposit
    if new_stake > ledger.MAX_BALANCE:
        raise exc.ArithmeticOverflow("mise", new_stake)
    deadline = helpers.next_deadline(now, game["step_duration"])

    deposits.take_deposit(caller, deposit)

    if not game_repo.transition_status(
        game_id,
        from_status=constants.GAME_STATUS_WAITING,
        to_status=constants.GAME_STATUS_ACTIVE,
        next_deadline=deadline,
        conn=conn,
    ):
        raise exc.GameAlreadyHandled(game_id, constants.GAME_STATUS_WAITING)

    game_repo.update_game_if_status(
        game_id,
        required_status=constants.GAME_STATUS_ACTIVE,
        player2=caller,
        stake=new_stake,
        conn=conn,
    )

    game = helpers.get_game_or_raise(game_id, conn=conn)
    events = [helpers.build_event(constants.EVENT_JOINED, player=caller, id=game_id)]
    return helpers.build_snapshot(game, events=events)
