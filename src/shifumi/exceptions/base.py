"""Module contenant la base pour les exceptions personnalisées de Shifumi."""

class AppError(Exception):
    """Classe de base pour les exceptions personnalisées de Shifumi.

    Toutes les exceptions spécifiques à l'application devraient hériter de cette classe.
    Cela permet à l'hôte de capturer tous les refus métier en attrapant simplement `AppError`.
    """
