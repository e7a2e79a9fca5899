"""Module d'exécution de commandes shell.

Classes disponibles :
    CommandResult : Résultat immuable d'une exécution.
    CommandExecutor : Interface abstraite pour les exécuteurs.
    LinuxCommandExecutor : Exécuteur concret via subprocess.
"""

from cmdline_presenter.commands.base import (
    CommandResult,
    CommandExecutor,
)
from cmdline_presenter.commands.runner import LinuxCommandExecutor

__all__ = [
    "CommandResult",
    "CommandExecutor",
    "LinuxCommandExecutor",
]
