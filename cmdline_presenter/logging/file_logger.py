"""Journal de diagnostic écrit dans un fichier."""

import logging
import os
from typing import Any, Mapping, Optional

from cmdline_presenter.logging.base import Logger

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class FileLogger(Logger):
    """
    Journal de diagnostic adossé au module logging.

    Caractéristiques:
    - Un logger nommé par fichier (pas de handlers dupliqués)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque message
    - Pas de propagation vers le logger racine
    - Sortie console optionnelle (stderr, pour ne pas se mêler
      au rendu du présentateur sur stdout)
    """

    def __init__(
        self,
        log_file: str,
        config: Optional[Mapping[str, Any]] = None,
        console_output: bool = False
    ) -> None:
        """
        Initialise le journal.

        Args:
            log_file: Chemin du fichier de diagnostic
            config: Section "logging" optionnelle
                    Clés supportées: level, format
            console_output: Dupliquer les messages sur stderr
        """
        self.log_file = log_file

        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        config = config or {}
        level_name = str(config.get("level", "INFO")).upper()
        log_format = config.get("format", DEFAULT_FORMAT)
        log_level = getattr(logging, level_name, logging.INFO)

        self.logger = logging.getLogger(f"cmdline_presenter.{log_file}")
        self.logger.setLevel(log_level)

        if not self.logger.handlers:
            formatter = logging.Formatter(log_format)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.handler = file_handler

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)
        else:
            self.handler = self.logger.handlers[0]

        self.logger.propagate = False

    def _flush(self) -> None:
        """Force l'écriture immédiate sur le disque."""
        if self.handler:
            self.handler.flush()

    def log_debug(self, message: str) -> None:
        self.logger.debug(message)
        self._flush()

    def log_info(self, message: str) -> None:
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        self.logger.error(message)
        self._flush()

    def close(self) -> None:
        """Détache et ferme les handlers de ce journal."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
