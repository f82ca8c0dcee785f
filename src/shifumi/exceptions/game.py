"""Module de définition des exceptions personnalisées liées aux parties de Shifumi.

Chaque refus d'une opération du moteur correspond à une catégorie :
introuvable, non autorisé, état invalide, argument invalide, délai dépassé,
délai non atteint, engagement incorrect ou dépassement arithmétique.
"""

from shifumi.exceptions.base import AppError


class GameError(AppError):
    """Base de toutes les erreurs liées aux parties."""

# ---------------- internal errors ----------------
class GameRepositoryError(GameError):
    """Erreur technique liée à la persistance des parties."""

class GameInsertFailed(GameRepositoryError):
    """Impossible de récupérer l'ID de la partie après insertion."""

    def __init__(self) -> None:
        """Initialise l'exception avec un message indiquant l'échec de la récupération de l'ID de la partie."""
        super().__init__("Partie insérée mais impossible de récupérer son ID.")

class GameAlreadyHandled(GameRepositoryError):
    """Exception levée lorsqu'une mise à jour conditionnelle ne trouve plus la partie dans l'état attendu."""

    def __init__(self, game_id: int, expected_status: str) -> None:
        """Initialise l'exception avec l'identifiant de la partie concernée et le status attendu qui n'est plus valide."""
        super().__init__(f"Partie {game_id} n'est plus dans l'état attendu: {expected_status}.")
        self.game_id = game_id
        self.expected_status = expected_status


# ---------------- NotFound ----------------
class GameNotFound(GameError):
    """Exception levée lorsqu'une partie n'existe pas."""

    def __init__(self, game_id: int) -> None:
        """Initialise l'exception avec l'identifiant de la partie concernée."""
        super().__init__(f"La partie {game_id} n'existe pas.")
        self.game_id = game_id


# ---------------- Unauthorized ----------------
class NotAuthorizedPlayer(GameError):
    """Exception levée lorsqu'un appelant n'a pas le rôle requis par l'opération."""

    def __init__(self, caller: str, required_role: str) -> None:
        """Initialise l'exception avec l'identité de l'appelant et le rôle requis."""
        super().__init__(f"Le joueur {caller} n'a pas l'autorisation d'agir ({required_role} requis).")
        self.caller = caller
        self.required_role = required_role


# ---------------- InvalidState ----------------
class InvalidGameState(GameError):
    """Exception levée lorsqu'une opération est tentée hors de l'état requis."""

    def __init__(self, game_id: int, status: str, message: str | None = None) -> None:
        """Initialise l'exception avec l'identifiant de la partie et son status courant."""
        super().__init__(message or f"Le status {status} ne permet pas cette action sur la partie {game_id}.")
        self.game_id = game_id
        self.status = status

class CommitmentAlreadySet(InvalidGameState):
    """Le premier joueur a déjà déposé son engagement."""

    def __init__(self, game_id: int, status: str) -> None:
        """Initialise l'exception pour la partie concernée."""
        super().__init__(game_id, status, f"L'engagement du premier joueur est déjà enregistré (partie {game_id}).")

class MoveAlreadySet(InvalidGameState):
    """Le second joueur a déjà joué."""

    def __init__(self, game_id: int, status: str) -> None:
        """Initialise l'exception pour la partie concernée."""
        super().__init__(game_id, status, f"Le coup du second joueur est déjà enregistré (partie {game_id}).")

class MissingFirstMove(InvalidGameState):
    """Le second coup est tenté avant l'engagement du premier joueur."""

    def __init__(self, game_id: int, status: str) -> None:
        """Initialise l'exception pour la partie concernée."""
        super().__init__(game_id, status, f"Le premier joueur ne s'est pas encore engagé (partie {game_id}).")

class MissingSecondMove(InvalidGameState):
    """La révélation est tentée avant le coup du second joueur."""

    def __init__(self, game_id: int, status: str) -> None:
        """Initialise l'exception pour la partie concernée."""
        super().__init__(game_id, status, f"Le second joueur n'a pas encore joué (partie {game_id}).")


# ---------------- InvalidArgument ----------------
class InvalidArgument(GameError):
    """Argument refusé par une opération du moteur."""

class InvalidStepDuration(InvalidArgument):
    """La durée d'une étape doit être strictement positive."""

    def __init__(self, step_duration: int) -> None:
        """Initialise l'exception avec la durée refusée."""
        super().__init__(f"Durée d'étape invalide: {step_duration} (doit être > 0).")
        self.step_duration = step_duration

class InvalidDeposit(InvalidArgument):
    """Un dépôt doit être un entier positif ou nul."""

    def __init__(self, deposit: int) -> None:
        """Initialise l'exception avec le dépôt refusé."""
        super().__init__(f"Dépôt invalide: {deposit}.")
        self.deposit = deposit

class DepositMismatch(InvalidArgument):
    """Le dépôt du second joueur doit égaler la mise de la partie."""

    def __init__(self, deposit: int, expected: int) -> None:
        """Initialise l'exception avec le dépôt reçu et la mise attendue."""
        super().__init__(f"Le dépôt ({deposit}) ne correspond pas à la mise attendue ({expected}).")
        self.deposit = deposit
        self.expected = expected

class EmptyCommitment(InvalidArgument):
    """L'engagement fourni est vide."""

    def __init__(self) -> None:
        """Initialise l'exception sans attributs supplémentaires, car le message d'erreur est générique."""
        super().__init__("L'engagement fourni est vide.")

class InvalidCommitment(InvalidArgument):
    """L'engagement fourni n'est pas encodable en UTF-8."""

    def __init__(self) -> None:
        """Initialise l'exception sans attributs supplémentaires."""
        super().__init__("L'engagement fourni n'est pas encodable en UTF-8.")

class InvalidMove(InvalidArgument):
    """Le coup joué n'est pas Pierre (1), Feuille (2) ou Ciseaux (3)."""

    def __init__(self, move: object) -> None:
        """Initialise l'exception avec le coup refusé."""
        super().__init__(f"Le coup joué n'est pas un coup valide: {move!r}.")
        self.move = move

class InvalidGameId(InvalidArgument):
    """L'identifiant de partie doit être un entier positif ou nul, encodable sur 32 octets."""

    def __init__(self, game_id: object) -> None:
        """Initialise l'exception avec l'identifiant refusé."""
        super().__init__(f"Identifiant de partie invalide: {game_id!r}.")
        self.game_id = game_id

class InvalidSecret(InvalidArgument):
    """Le secret n'est pas encodable en UTF-8."""

    def __init__(self) -> None:
        """Initialise l'exception sans attributs supplémentaires, le secret n'est jamais recopié dans le message."""
        super().__init__("Le secret fourni n'est pas encodable en UTF-8.")

class InvalidAmount(InvalidArgument):
    """Un crédit du registre doit être positif ou nul."""

    def __init__(self, amount: int) -> None:
        """Initialise l'exception avec le montant refusé."""
        super().__init__(f"Montant invalide: {amount}.")
        self.amount = amount


# ---------------- Deadlines ----------------
class DeadlineExceeded(GameError):
    """La fenêtre de l'étape courante est dépassée, la partie ne peut plus qu'être réclamée (claim)."""

    def __init__(self, game_id: int, deadline: int) -> None:
        """Initialise l'exception avec l'identifiant de la partie et l'échéance dépassée."""
        super().__init__(f"L'échéance ({deadline}) de la partie {game_id} est dépassée.")
        self.game_id = game_id
        self.deadline = deadline

class DeadlineNotYetReached(GameError):
    """Une réclamation (claim) est tentée avant l'échéance."""

    def __init__(self, game_id: int, deadline: int) -> None:
        """Initialise l'exception avec l'identifiant de la partie et l'échéance à attendre."""
        super().__init__(f"L'échéance ({deadline}) de la partie {game_id} n'est pas encore atteinte.")
        self.game_id = game_id
        self.deadline = deadline


# ---------------- CommitmentMismatch ----------------
class CommitmentMismatch(GameError):
    """Le coup et le secret révélés ne correspondent pas à l'engagement enregistré."""

    def __init__(self, game_id: int) -> None:
        """Initialise l'exception avec l'identifiant de la partie concernée."""
        super().__init__(f"Le coup révélé ne correspond pas à l'engagement de la partie {game_id}.")
        self.game_id = game_id


# ---------------- ArithmeticOverflow ----------------
class ArithmeticOverflow(GameError):
    """Un calcul (échéance, mise, solde) dépasserait la plage entière stockable."""

    def __init__(self, what: str, value: int) -> None:
        """Initialise l'exception avec la grandeur concernée et la valeur qui déborde."""
        super().__init__(f"Dépassement arithmétique sur {what}: {value}.")
        self.what = what
        self.value = value

class LedgerOverflow(ArithmeticOverflow):
    """Le crédit ferait déborder le solde d'une identité."""

    def __init__(self, identity: str, value: int) -> None:
        """Initialise l'exception avec l'identité concernée et le solde qui déborde."""
        super().__init__(f"solde de {identity}", value)
        self.identity = identity
