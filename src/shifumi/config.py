"""Module de configuration de Shifumi, chargé de lire les variables d'environnement nécessaires au fonctionnement du moteur.

Comme le chemin de la base de données, l'option de construction du moteur et le niveau de log.
"""

import logging
import os
from typing import Final

from dotenv import load_dotenv

from shifumi.defaults import DB_PATH_DEFAULT, LOG_LEVEL_DEFAULT, MODE_FLAG_DEFAULT
from shifumi.exceptions.config import InvalidEnvVar

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def env_str_optional(name: str) -> str | None:
    """Récupère une variable d'environnement optionnelle et retourne None si elle n'est pas définie ou est vide."""
    value = os.getenv(name)
    return value if value else None


def env_bool_optional(name: str, default: bool) -> bool:
    """Récupère une variable d'environnement booléenne (1/0, true/false, yes/no, on/off), ou la valeur par défaut si absente."""
    value = env_str_optional(name)
    if value is None:
        return default

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise InvalidEnvVar(name, "booléen (true/false)")


def env_log_level_optional(name: str, default: str) -> int:
    """Récupère un niveau de log (DEBUG, INFO, ...) et le convertit en constante du module logging."""
    value = (env_str_optional(name) or default).strip().upper()
    level = logging.getLevelName(value)
    if not isinstance(level, int):
        raise InvalidEnvVar(name, "niveau de log (DEBUG, INFO, WARNING, ERROR)")
    return level


load_dotenv()

# === Base de données ===
DB_PATH: Final[str] = env_str_optional("SHIFUMI_DB_PATH") or DB_PATH_DEFAULT

# === Moteur de jeu ===
MODE_FLAG: Final[bool] = env_bool_optional("SHIFUMI_MODE_FLAG", MODE_FLAG_DEFAULT)

# === Logging ===
LOG_LEVEL: Final[int] = env_log_level_optional("SHIFUMI_LOG_LEVEL", LOG_LEVEL_DEFAULT)
