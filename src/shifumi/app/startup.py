import logging
import time

from shifumi.app.services import Services
from shifumi.config import MODE_FLAG
from shifumi.db.schema import init_db
from shifumi.features.game.game_service import GameService
from shifumi.features.ledger.ledger_service import LedgerService

log = logging.getLogger(__name__)


def step(name: str, fn, *, critical: bool = True, logger: logging.Logger | None = None):
    start = time.perf_counter()
    if logger is None :
        logger = log
    try:
        result = fn()
        ms = (time.perf_counter() - start) * 1000
        label = f"{name} ({result})" if result is not None else name
        logger.info("✅ %-53s %8.1f ms", label, ms)
        return result
    except Exception:
        ms = (time.perf_counter() - start) * 1000
        logger.exception("❌ %-50s %8.1f ms", name, ms)
        if critical:
            raise
        return None

def init_services(*, mode_flag: bool = MODE_FLAG) -> Services:
    return Services(
        game=GameService(mode_flag=mode_flag),
        ledger=LedgerService(),
    )

def startup() -> Services | None:
    step("Initialisation de la base de données", init_db)
    services = step("Initialisation des services", init_services)
    if services is not None:
        log.info("Mode du moteur: %s", services.game.mode_flag)
    return services
