"""Module définissant les exceptions liées à la configuration de l'application (variables d'environnement, .env, etc.)."""

from shifumi.exceptions.base import AppError


class ConfigError(AppError):
    """Erreur de configuration (variables d'environnement, .env, etc.)."""

class InvalidEnvVar(ConfigError):
    """Erreur indiquant qu'une variable d'environnement a une valeur invalide ou mal formatée."""

    def __init__(self, name: str, expected: str) -> None:
        """Initialise l'exception avec le nom de la variable d'environnement concernée et une description du format attendu."""
        super().__init__(f"Variable d'environnement invalide: {name} (attendu: {expected})")
        self.name = name
        self.expected = expected
