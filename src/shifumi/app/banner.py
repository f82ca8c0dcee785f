import sys
from datetime import datetime

from shifumi.config import DB_PATH
from shifumi.version import VERSION


def startup_banner(started_at: datetime | None = None) -> str:
    started_at = started_at or datetime.now()
    now = started_at.strftime("%Y-%m-%d %H:%M:%S")
    py = sys.version.split()[0]

    info = [
        f"Shifumi v{VERSION}",
        f"Python {py} | SQLite {DB_PATH}",
        f"Started at {now}",
    ]
    w = max(len(x) for x in info) + 2
    box = ["┌" + "─" * w + "┐"] + [f"│ {x.ljust(w-1)}│" for x in info] + ["└" + "─" * w + "┘"]

    return "\n".join(box) + "\n"
