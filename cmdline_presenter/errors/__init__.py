"""Module de gestion des erreurs."""

from cmdline_presenter.errors.base import ErrorHandler, ErrorHandlerChain
from cmdline_presenter.errors.exceptions import (ApplicationError,
                                                 CommandAbortedError,
                                                 CommandError,
                                                 ConfigurationError,
                                                 DirectoryNotFoundError,
                                                 FileConfigurationError,
                                                 ValidationError)
from cmdline_presenter.errors.console_handler import ConsoleErrorHandler
from cmdline_presenter.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "DirectoryNotFoundError",
    "ValidationError",
    "CommandError",
    "CommandAbortedError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
]
