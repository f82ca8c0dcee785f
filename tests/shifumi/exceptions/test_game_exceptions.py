from __future__ import annotations

import pytest

from shifumi.exceptions import game as mod
from shifumi.exceptions.base import AppError


def test_all_game_errors_are_app_errors():
    for cls in (
        mod.GameNotFound,
        mod.NotAuthorizedPlayer,
        mod.InvalidGameState,
        mod.InvalidArgument,
        mod.DeadlineExceeded,
        mod.DeadlineNotYetReached,
        mod.CommitmentMismatch,
        mod.ArithmeticOverflow,
        mod.GameAlreadyHandled,
    ):
        assert issubclass(cls, mod.GameError)
        assert issubclass(cls, AppError)


@pytest.mark.parametrize(
    "cls",
    [mod.CommitmentAlreadySet, mod.MoveAlreadySet, mod.MissingFirstMove, mod.MissingSecondMove],
)
def test_state_subclasses_keep_game_and_status(cls):
    e = cls(3, "ACTIVE")

    assert isinstance(e, mod.InvalidGameState)
    assert e.game_id == 3
    assert e.status == "ACTIVE"
    assert "3" in str(e)


def test_invalid_game_state_default_message():
    e = mod.InvalidGameState(1, "FINISHED")
    assert "FINISHED" in str(e)


def test_argument_errors_keep_their_values():
    assert mod.InvalidStepDuration(0).step_duration == 0
    assert mod.InvalidDeposit(-1).deposit == -1
    mismatch = mod.DepositMismatch(3, 4)
    assert (mismatch.deposit, mismatch.expected) == (3, 4)
    assert mod.InvalidMove(9).move == 9
    assert mod.InvalidAmount(-2).amount == -2
    assert mod.InvalidGameId(-1).game_id == -1
    for cls in (mod.InvalidSecret, mod.InvalidCommitment, mod.EmptyCommitment):
        assert isinstance(cls(), mod.InvalidArgument)


def test_deadline_errors():
    assert mod.DeadlineExceeded(1, 50).deadline == 50
    assert mod.DeadlineNotYetReached(1, 60).deadline == 60


def test_overflow_errors():
    e = mod.LedgerOverflow("a", 2**63)

    assert isinstance(e, mod.ArithmeticOverflow)
    assert e.identity == "a"
    assert e.value == 2**63
    assert "a" in e.what


def test_repository_errors():
    assert isinstance(mod.GameInsertFailed(), mod.GameRepositoryError)
    e = mod.GameAlreadyHandled(2, "ACTIVE")
    assert (e.game_id, e.expected_status) == (2, "ACTIVE")


def test_not_authorized_player():
    e = mod.NotAuthorizedPlayer("x", "player1")
    assert (e.caller, e.required_role) == ("x", "player1")
