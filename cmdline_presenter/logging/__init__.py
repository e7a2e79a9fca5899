"""Module de journalisation de diagnostic."""

from cmdline_presenter.logging.base import Logger
from cmdline_presenter.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
