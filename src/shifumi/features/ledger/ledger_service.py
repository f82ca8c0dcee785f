"""Module de service pour le registre des soldes, servant de façade applicative pour le crédit et la consultation."""

from dataclasses import dataclass
from sqlite3 import Connection

from shifumi.features.ledger import ledger


@dataclass(slots=True)
class LedgerService:
    """Façade applicative du registre (crédit par le moteur, lecture par identité)."""

    def credit(self, identity: str, amount: int, *, conn: Connection | None = None) -> int:
        """Crédite un montant au solde d'une identité et retourne le nouveau solde."""
        return ledger.credit(identity, amount, conn=conn)

    def balance_of(self, identity: str) -> int:
        """Retourne le solde retirable d'une identité."""
        return ledger.balance_of(identity)
