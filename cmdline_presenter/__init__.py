"""
cmdline_presenter - Exécution et présentation de scripts shell.

Le même script Python s'exécute en terminal (commandes lancées,
sortie colorée) ou produit, hors terminal, un document HTML copiable
comme script bash.

Modules disponibles:
- console: Présentateur de commandes (CommandPresenter), rendus
  terminal et document, table des styles
- commands: Exécution de commandes shell (LinuxCommandExecutor)
- filesystem: Fichiers miroirs en ajout seul (LinuxTextAppender)
- logging: Journal de diagnostic (Logger, FileLogger)
- config: Réglages et scripts validés par pydantic
- errors: Exceptions et handlers d'erreurs
"""

__version__ = "1.0.0"

from cmdline_presenter.logging import Logger, FileLogger
from cmdline_presenter.config import (
    ConfigLoader,
    FileConfigLoader,
    LoggingSettings,
    PresenterSettings,
    ScriptFile,
    ScriptStep,
)
from cmdline_presenter.filesystem import TextAppender, LinuxTextAppender
from cmdline_presenter.commands import (
    CommandResult,
    CommandExecutor,
    LinuxCommandExecutor,
)
from cmdline_presenter.console import (
    CommandPresenter,
    RunMode,
    OutputRenderer,
    TerminalRenderer,
    DocumentRenderer,
    split_command,
)
from cmdline_presenter.errors import (
    ApplicationError,
    CommandAbortedError,
    ConfigurationError,
    DirectoryNotFoundError,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "LoggingSettings",
    "PresenterSettings",
    "ScriptFile",
    "ScriptStep",
    # Filesystem
    "TextAppender",
    "LinuxTextAppender",
    # Commands
    "CommandResult",
    "CommandExecutor",
    "LinuxCommandExecutor",
    # Console
    "CommandPresenter",
    "RunMode",
    "OutputRenderer",
    "TerminalRenderer",
    "DocumentRenderer",
    "split_command",
    # Errors
    "ApplicationError",
    "CommandAbortedError",
    "ConfigurationError",
    "DirectoryNotFoundError",
]
