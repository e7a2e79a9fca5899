"""Implémentation Linux de l'ajout de texte dans un fichier."""

import fcntl
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from cmdline_presenter.filesystem.base import TextAppender
from cmdline_presenter.logging.base import Logger

HEADER_DATE_FORMAT = "%Y-%m-%d %I:%M"


class LinuxTextAppender(TextAppender):
    """
    Ajout de texte avec verrou exclusif (fcntl.flock).

    À la création, le fichier reçoit un en-tête daté suivi de deux
    sauts de ligne ; les répertoires parents sont créés au besoin.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Initialise l'appender.

        Args:
            logger: Journal de diagnostic optionnel
            clock: Source de l'heure de l'en-tête (injectable en test)
        """
        self.logger = logger
        self._clock = clock

    def _write(self, path: Path, data: str) -> None:
        with open(path, "a", encoding="utf-8") as f:
            fcntl.flock(f, fcntl.LOCK_EX)
            try:
                f.write(data)
            finally:
                fcntl.flock(f, fcntl.LOCK_UN)

    def append(
        self, file_path: str, text: str, new_line_count: int = 1
    ) -> None:
        """
        Ajoute du texte à la fin du fichier, en le créant au besoin.

        Raises:
            OSError: Si le fichier ne peut pas être écrit
        """
        path = Path(file_path)
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            header = self._clock().strftime(HEADER_DATE_FORMAT)
            self._write(path, header + "\n\n")
            if self.logger:
                self.logger.log_info(f"Fichier miroir créé : {file_path}")
        elif new_line_count > 0:
            self._write(path, "\n" * new_line_count)
        self._write(path, text)
