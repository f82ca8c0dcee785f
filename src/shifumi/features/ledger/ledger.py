"""Registre des gains retirables : crédit par le moteur, lecture par identité.

Le moteur ne débite jamais ; le retrait est une opération externe.
"""

import logging
from sqlite3 import Connection
from typing import Final

from shifumi.db.repo import ledger_repo
from shifumi.exceptions import game as exc

log = logging.getLogger(__name__)

# Plage d'un INTEGER SQLite (entier signé 64 bits).
MAX_BALANCE: Final[int] = 2**63 - 1


def credit(identity: str, amount: int, *, conn: Connection | None = None) -> int:
    """Crédite `amount` au solde de `identity` et retourne le nouveau solde.

    Lève InvalidAmount pour un montant négatif et LedgerOverflow si le solde dépasserait la plage stockable.
    Avec `conn`, le crédit fait partie de la transaction de l'appelant.
    """
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
        raise exc.InvalidAmount(amount)

    current = ledger_repo.ledger_get_balance(identity, conn=conn)
    if current + amount > MAX_BALANCE:
        raise exc.LedgerOverflow(identity, current + amount)

    new_balance = ledger_repo.ledger_add_balance(identity, amount, conn=conn)
    log.debug("Crédit de %s pour %s (solde: %s)", amount, identity, new_balance)
    return new_balance


def balance_of(identity: str, *, conn: Connection | None = None) -> int:
    """Retourne le solde retirable d'une identité (0 si inconnue)."""
    return ledger_repo.ledger_get_balance(identity, conn=conn)
