import logging
import time

from shifumi.app.services import Services
from shifumi.app.startup import startup
from shifumi.config import LOG_LEVEL
from shifumi.exceptions.internal import ServicesNotInitialized
from shifumi.utils.logging import setup_logging

from .banner import startup_banner

log = logging.getLogger(__name__)


def main(started_at: float) -> Services:
    setup_logging(LOG_LEVEL)
    print(startup_banner())

    services = startup()
    if services is None:
        raise ServicesNotInitialized()

    log.info("⏳ Moteur prêt en %.1f ms", (time.perf_counter() - started_at) * 1000)
    return services


def run() -> None:
    main(time.perf_counter())
