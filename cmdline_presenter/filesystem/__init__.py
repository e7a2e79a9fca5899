"""Module d'écriture des fichiers miroirs."""

from cmdline_presenter.filesystem.base import TextAppender
from cmdline_presenter.filesystem.linux import LinuxTextAppender

__all__ = [
    "TextAppender",
    "LinuxTextAppender",
]
