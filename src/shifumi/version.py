"""Module pour la gestion de la version de Shifumi.

Définit une constante VERSION qui peut être utilisée dans tout le projet pour référencer la version actuelle.
"""
from typing import Final

VERSION: Final[str] = "0.3.0"
