from typing import Final

# Moves (encodage partagé par tous les clients pour que les engagements concordent)
MOVE_ROCK: Final[int] = 1
MOVE_PAPER: Final[int] = 2
MOVE_SCISSORS: Final[int] = 3

MOVES: Final[list[int]] = [
    MOVE_ROCK,
    MOVE_PAPER,
    MOVE_SCISSORS,
]

# Game Status
GAME_STATUS_WAITING: Final[str] = "WAITING_FOR_OPPONENT"
GAME_STATUS_ACTIVE: Final[str] = "ACTIVE"
GAME_STATUS_FINISHED: Final[str] = "FINISHED"

# Outcomes
OUTCOME_DRAW: Final[str] = "DRAW"
OUTCOME_PLAYER1_WINS: Final[str] = "PLAYER1_WINS"
OUTCOME_PLAYER2_WINS: Final[str] = "PLAYER2_WINS"
OUTCOME_DECLINED: Final[str] = "DECLINED"

# Roles
ROLE_PLAYER1: Final[str] = "player1"
ROLE_PLAYER2: Final[str] = "player2"
ROLE_OPPONENT: Final[str] = "adversaire (différent de player1)"

# Events
EVENT_STARTED: Final[str] = "started"
EVENT_DECLINED: Final[str] = "declined"
EVENT_JOINED: Final[str] = "joined"
EVENT_FIRST_MOVED: Final[str] = "first_moved"
EVENT_SECOND_MOVED: Final[str] = "second_moved"
EVENT_REVEALED: Final[str] = "revealed"
EVENT_OUTCOME: Final[str] = "outcome"
EVENT_CLAIMED: Final[str] = "claimed"
