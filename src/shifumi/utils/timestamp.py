"""Utilitaires pour la gestion des timestamps, avec des fonctions pour obtenir le timestamp actuel et calculer une échéance sans débordement."""

from datetime import UTC, datetime
from typing import Final

from shifumi.exceptions.game import ArithmeticOverflow, InvalidArgument

# Plage d'un INTEGER SQLite (entier signé 64 bits).
MAX_TIMESTAMP: Final[int] = 2**63 - 1


def now_ts() -> int:
    """Retourne le timestamp actuel en secondes depuis l'époque Unix."""
    return int(datetime.now(UTC).timestamp())

def add_duration(timestamp: int, seconds: int) -> int:
    """Retourne `timestamp + seconds`.

    Lève ArithmeticOverflow si le résultat dépasse la plage stockable, au lieu de le tronquer.
    """
    if seconds < 0:
        raise InvalidArgument(f"Durée négative interdite: {seconds}")

    result = timestamp + seconds
    if result > MAX_TIMESTAMP:
        raise ArithmeticOverflow("échéance", result)
    return result
