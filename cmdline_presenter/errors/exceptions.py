"""
Exceptions personnalisées de cmdline_presenter.

Un échec de commande (code retour non nul) n'est pas une exception :
il est consigné dans has_error / last_error du présentateur. Seules
la mauvaise configuration et l'arrêt sur erreur en lèvent une.
"""
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from cmdline_presenter.commands.base import CommandResult


class ApplicationError(Exception):
    """Exception de base pour toute l'application."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour les erreurs de configuration."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de configuration ou de script invalide."""
    pass


class DirectoryNotFoundError(ConfigurationError):
    """Le répertoire cible d'une commande n'existe pas.

    Erreur fatale : l'appelant est mal configuré, aucune commande
    n'a été lancée.
    """

    def __init__(self, directory: str) -> None:
        """Initialise l'erreur.

        Args:
            directory: Répertoire introuvable.
        """
        super().__init__(f"Répertoire introuvable : {directory}")
        self.directory = directory


class ValidationError(ApplicationError):
    """Contenu de script refusé par le schéma (champ manquant, vide
    ou inconnu)."""
    pass


class CommandError(ApplicationError):
    """Exception de base pour les erreurs liées aux commandes."""
    pass


class CommandAbortedError(CommandError):
    """Arrêt complet demandé après l'échec d'une commande.

    Levée quand break_on_all_errors est actif. L'appelant de plus
    haut niveau est responsable de la conversion en sortie de
    processus (voir exit_code).
    """

    def __init__(
        self,
        result: Optional["CommandResult"] = None,
        exit_code: int = 1,
    ) -> None:
        """Initialise l'erreur.

        Args:
            result: Résultat de la commande en échec.
            exit_code: Code de sortie suggéré pour le processus.
        """
        if result is not None:
            message = (
                f"Arrêt après l'échec de : {result.command} "
                f"(code {result.return_code})"
            )
        else:
            message = "Arrêt après l'échec d'une commande"
        super().__init__(message)
        self.result = result
        self.exit_code = exit_code
