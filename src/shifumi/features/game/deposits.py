"""Définit le protocole (interface) par lequel le moteur encaisse les dépôts auprès de l'hôte."""

from __future__ import annotations

import logging
from typing import Protocol

log = logging.getLogger(__name__)


class DepositGateway(Protocol):
    """Interface que doit implémenter l'hôte pour encaisser un dépôt lors de `start` et `join`.

    Une exception levée ici annule toute l'opération en cours.
    """

    def take_deposit(self, caller: str, amount: int) -> None:
        """Encaisse `amount` auprès de `caller` et le place sous séquestre."""
        ...


class PrepaidDeposits:
    """Passerelle par défaut : le dépôt est supposé déjà transféré par le contexte de l'appel."""

    def take_deposit(self, caller: str, amount: int) -> None:
        log.debug("Dépôt de %s reçu de %s", amount, caller)
