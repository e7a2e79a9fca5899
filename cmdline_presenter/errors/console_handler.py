"""
    ConsoleErrorHandler (messages utilisateur sur stderr)
"""
import sys
from typing import TextIO

from cmdline_presenter.errors.base import ErrorHandler
from cmdline_presenter.errors.exceptions import (ApplicationError,
                                                 CommandAbortedError,
                                                 ConfigurationError,
                                                 DirectoryNotFoundError,
                                                 ValidationError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche une solution adaptée au type d'erreur.
    Écrit sur stderr pour ne pas polluer le rendu du script.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base des erreurs connues.
            solutions: Dictionnaire {TypeException: "message solution"},
                       consulté avant les solutions par défaut.
            stream: Flux de sortie (défaut: sys.stderr).
        """
        self.base_error_type = base_error_type
        self.solutions = solutions or {}
        self.stream = stream

    def _print(self, message: str) -> None:
        print(message, file=self.stream or sys.stderr)

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur avec un message destiné à l'utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: Exception) -> str:
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution
        if isinstance(error, DirectoryNotFoundError):
            return "Créez le répertoire ou corrigez le chemin de l'étape."
        if isinstance(error, (ConfigurationError, ValidationError)):
            return "Vérifiez votre fichier de configuration."
        if isinstance(error, CommandAbortedError):
            return "Consultez la sortie de la commande en échec ci-dessus."
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: Exception) -> None:
        self._print(f"\n🛑 {type(error).__name__}: {error}")
        self._print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        self._print(f"\n💥 Erreur inattendue: {error}")
        self._print(f"Type: {type(error).__name__}")
        self._print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec "
            "ces informations."
        )
