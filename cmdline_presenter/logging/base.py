"""Interface abstraite pour le journal de diagnostic.

Ce journal est distinct des fichiers miroirs du présentateur : il
trace les événements internes (commande lancée, échec, arrêt) et non
le texte affiché à l'utilisateur.
"""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Interface pour le journal de diagnostic."""

    @abstractmethod
    def log_debug(self, message: str) -> None:
        """Trace un message de mise au point."""
        pass

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Trace un message d'information."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Trace un avertissement."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Trace une erreur."""
        pass
