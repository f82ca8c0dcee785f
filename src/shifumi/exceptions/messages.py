from __future__ import annotations

from shifumi.exceptions.base import AppError
from shifumi.exceptions.game import (
    ArithmeticOverflow,
    CommitmentAlreadySet,
    CommitmentMismatch,
    DeadlineExceeded,
    DeadlineNotYetReached,
    DepositMismatch,
    EmptyCommitment,
    GameAlreadyHandled,
    GameNotFound,
    InvalidArgument,
    InvalidGameState,
    InvalidMove,
    InvalidStepDuration,
    LedgerOverflow,
    MissingFirstMove,
    MissingSecondMove,
    MoveAlreadySet,
    NotAuthorizedPlayer,
)


def game_error_message(e: AppError) -> str:
    # Messages courts pour l'hôte (pas trop techniques)
    match e:
        case GameNotFound():
            return "⚠️ Cette partie n'existe pas."

        case NotAuthorizedPlayer(required_role=role):
            return f"⛔ Action réservée au rôle {role}."

        case CommitmentAlreadySet():
            return "⚠️ Ton coup est déjà engagé."

        case MoveAlreadySet():
            return "⚠️ Tu as déjà joué."

        case MissingFirstMove():
            return "⏳ Le premier joueur ne s'est pas encore engagé."

        case MissingSecondMove():
            return "⏳ Le second joueur n'a pas encore joué."

        case InvalidGameState():
            return "⚠️ Cette partie ne permet pas cette action dans son état actuel."

        case InvalidStepDuration():
            return "⚠️ La durée d'une étape doit être positive."

        case DepositMismatch(expected=expected):
            return f"💸 Le dépôt doit être exactement de {expected}."

        case EmptyCommitment():
            return "⚠️ Engagement vide."

        case InvalidMove():
            return "⚠️ Coup invalide."

        case InvalidArgument():
            return "⚠️ Paramètre invalide."

        case DeadlineExceeded():
            return "⌛ Délai dépassé : la partie peut être réclamée."

        case DeadlineNotYetReached():
            return "⏳ Le délai n'est pas encore écoulé."

        case CommitmentMismatch():
            return "❌ Le coup révélé ne correspond pas à l'engagement."

        case LedgerOverflow() | ArithmeticOverflow():
            return "❌ Montant ou durée hors limites."

        case GameAlreadyHandled():
            return "ℹ️ Cette partie a déjà été traitée."

        case _:
            # fallback: garde un message générique, pas le détail technique
            return "❌ Une erreur est survenue."
