"""Module de service pour les parties, servant de façade applicative au moteur (machine à états, échéances, séquestre).

Chaque opération lit l'horloge une seule fois, s'exécute dans une unique transaction SQLite
et notifie les abonnés avant le commit : soit tout est appliqué, soit rien.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from sqlite3 import Connection
from typing import Any

from shifumi.db.connection import get_conn
from shifumi.exceptions.base import AppError
from shifumi.exceptions import game as exc
from shifumi.features.game._internal import flow, gameplay, helpers, maintenance
from shifumi.features.game._internal.commitment import compute_commitment
from shifumi.features.game.deposits import DepositGateway, PrepaidDeposits
from shifumi.features.ledger import ledger
from shifumi.utils.timestamp import now_ts

log = logging.getLogger(__name__)

GameListener = Callable[[dict[str, Any]], None]


@dataclass(slots=True)
class GameService:
    """Façade applicative du moteur de parties (création, coups, révélation, réclamation et lecture)."""

    mode_flag: bool = False
    clock: Callable[[], int] = now_ts
    deposits: DepositGateway = field(default_factory=PrepaidDeposits)
    _listeners: list[GameListener] = field(default_factory=list, repr=False)

    # -------------------------- abonnements --------------------------

    def subscribe(self, listener: GameListener) -> None:
        """Abonne un callback aux notifications émises (appelé dans la transaction de l'opération)."""
        self._listeners.append(listener)

    def _run(self, operation: str, action: Callable[[int, Connection], dict[str, Any]]) -> dict[str, Any]:
        now = self.clock()
        try:
            with get_conn() as conn:
                snapshot = action(now, conn)
                for event in snapshot.get("events", []):
                    for listener in self._listeners:
                        listener(event)
        except AppError as e:
            log.debug("%s refusé: %s", operation, e)
            raise

        game = snapshot["game"]
        log.info("%s ok (partie %s, status %s, mise %s)", operation, game["id"], game["status"], game["stake"])
        return snapshot

    # -------------------------- opérations --------------------------

    def start(self, caller: str, step_duration: int, deposit: int) -> dict[str, Any]:
        """Crée une partie en séquestrant le dépôt du premier joueur."""
        return self._run(
            "start",
            lambda now, conn: flow.start_game(caller, step_duration, deposit, now=now, deposits=self.deposits, conn=conn),
        )

    def decline(self, caller: str, game_id: int) -> dict[str, Any]:
        """Annule une partie que personne n'a rejointe et rembourse le premier joueur."""
        return self._run("decline", lambda now, conn: flow.decline_game(caller, game_id, now=now, conn=conn))

    def join(self, caller: str, game_id: int, deposit: int) -> dict[str, Any]:
        """Rejoint une partie en déposant une mise égale à celle du premier joueur."""
        return self._run(
            "join",
            lambda now, conn: flow.join_game(caller, game_id, deposit, now=now, deposits=self.deposits, conn=conn),
        )

    def move1(self, caller: str, game_id: int, commitment: str) -> dict[str, Any]:
        """Enregistre l'engagement (empreinte) du premier joueur."""
        return self._run(
            "move1",
            lambda now, conn: gameplay.commit_first_move(caller, game_id, commitment, now=now, conn=conn),
        )

    def move2(self, caller: str, game_id: int, move: int) -> dict[str, Any]:
        """Enregistre le coup en clair du second joueur."""
        return self._run(
            "move2",
            lambda now, conn: gameplay.play_second_move(caller, game_id, move, now=now, conn=conn),
        )

    def reveal(self, caller: str, game_id: int, move: int, secret: str | bytes) -> dict[str, Any]:
        """Révèle le coup du premier joueur, résout la partie et crédite le registre."""
        return self._run(
            "reveal",
            lambda now, conn: gameplay.reveal_first_move(caller, game_id, move, secret, now=now, conn=conn),
        )

    def claim(self, caller: str, game_id: int) -> dict[str, Any]:
        """Résout une partie dont l'étape courante a été manquée."""
        return self._run("claim", lambda now, conn: maintenance.claim_game(caller, game_id, now=now, conn=conn))

    def claim_expired_games(self, caller: str) -> list[dict[str, Any]]:
        """Réclame toutes les parties réclamables et retourne les snapshots des parties résolues.

        Une partie résolue entre-temps par un autre appel est ignorée.
        """
        resolved: list[dict[str, Any]] = []
        for game_id in self.list_claimable_games():
            try:
                resolved.append(self.claim(caller, game_id))
            except (exc.InvalidGameState, exc.DeadlineNotYetReached, exc.GameAlreadyHandled) as e:
                # quelqu'un l'a déjà résolue / elle n'est plus réclamable
                log.info("Partie %s ignorée par la réclamation groupée: %s", game_id, e)
        return resolved

    # -------------------------- lecture --------------------------

    def list_claimable_games(self) -> list[int]:
        """Retourne les identifiants des parties réclamables à l'instant présent."""
        return maintenance.list_claimable_game_ids(self.clock())

    def get_game(self, game_id: int) -> dict[str, Any]:
        """Retourne un snapshot de la partie (GameNotFound si inconnue)."""
        return helpers.build_snapshot(helpers.get_game_or_raise(game_id))

    def balance_of(self, identity: str) -> int:
        """Retourne le solde retirable d'une identité."""
        return ledger.balance_of(identity)

    def compute_commitment(self, game_id: int, move: int, secret: str | bytes) -> str:
        """Calcule l'empreinte à transmettre à `move1` pour (game_id, move, secret)."""
        return compute_commitment(game_id, move, secret)
