"""Module définissant les services utilisés par Shifumi, regroupant les différentes fonctionnalités en un seul endroit pour une gestion centralisée."""

from dataclasses import dataclass

from shifumi.features.game.game_service import GameService
from shifumi.features.ledger.ledger_service import LedgerService


@dataclass(slots=True)
class Services:
    """Classe regroupant les différents services de Shifumi, facilitant l'accès et la gestion de ces fonctionnalités."""

    game: GameService
    ledger: LedgerService
