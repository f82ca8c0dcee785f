"""Règles de résolution : issue d'une révélation, issue d'une réclamation, répartition de la mise."""

from sqlite3 import Row

from shifumi.exceptions import game as exc
from shifumi.features.game import constants


def compute_outcome(move1: int, move2: int) -> str:
    """Retourne l'issue pour deux coups révélés.

    Chaque coup bat celui qui vaut un de moins, cycliquement (Feuille > Pierre, Ciseaux > Feuille, Pierre > Ciseaux).
    """
    if move1 not in constants.MOVES:
        raise exc.InvalidMove(move1)
    if move2 not in constants.MOVES:
        raise exc.InvalidMove(move2)

    match ((move1 - move2) % 3 + 3) % 3:
        case 0:
            return constants.OUTCOME_DRAW
        case 1:
            return constants.OUTCOME_PLAYER1_WINS
        case _:
            return constants.OUTCOME_PLAYER2_WINS


def claim_outcome(game: Row) -> str:
    """Retourne l'issue d'une partie ACTIVE dont l'échéance est passée, selon l'étape manquée.

    - pas d'engagement : le premier joueur n'a pas joué, le second gagne ;
    - engagement sans second coup : le second joueur n'a pas joué, le premier gagne ;
    - second coup sans révélation : le premier joueur perd (abandon ou triche, même sanction).
    """
    if not game["commitment1"]:
        return constants.OUTCOME_PLAYER2_WINS
    if game["move2"] is None:
        return constants.OUTCOME_PLAYER1_WINS
    return constants.OUTCOME_PLAYER2_WINS


def split_stake(outcome: str, player1: str, player2: str, stake: int) -> list[tuple[str, int]]:
    """Retourne les crédits [(identité, montant), ...] d'une issue ; leur somme vaut toujours `stake`.

    En cas d'égalité sur une mise impaire, l'unité restante revient au premier joueur.
    """
    match outcome:
        case constants.OUTCOME_DRAW:
            half = stake // 2
            return [(player1, half + stake % 2), (player2, half)]

        case constants.OUTCOME_PLAYER1_WINS:
            return [(player1, stake)]

        case constants.OUTCOME_PLAYER2_WINS:
            return [(player2, stake)]

        case _:
            raise exc.InvalidArgument(f"Issue inconnue: {outcome}")
