"""Valeurs par défaut centralisées.

Objectif : ne pas dupliquer les mêmes valeurs (chemins, niveaux de log, options moteur) dans plusieurs fichiers.
Le reste du code doit importer depuis ici.
"""

from __future__ import annotations

from typing import Final

# -------------------- Base de données --------------------
DB_PATH_DEFAULT: Final[str] = "./data/shifumi.db"

# -------------------- Moteur de jeu --------------------
# Option de construction du moteur, sans effet observable sur les parties.
MODE_FLAG_DEFAULT: Final[bool] = False

# -------------------- Logging --------------------
LOG_LEVEL_DEFAULT: Final[str] = "INFO"
