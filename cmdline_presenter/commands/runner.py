"""Exécuteur de commandes shell Linux via subprocess.

Ce module fournit LinuxCommandExecutor, une implémentation concrète
de CommandExecutor. La commande est transmise telle quelle au shell
(les enchaînements && et ; sont donc exécutés comme une seule unité)
et la sortie d'erreur est fusionnée dans la sortie standard.

Le répertoire de travail est passé au processus enfant : le
répertoire courant du processus Python n'est jamais modifié.

Example :
    Exécution avec journal de diagnostic :

        from cmdline_presenter.commands import LinuxCommandExecutor
        from cmdline_presenter.logging import FileLogger

        executor = LinuxCommandExecutor(
            logger=FileLogger("/var/log/presenter/debug.log"),
        )
        result = executor.run_shell("echo hi && echo bye", cwd="/tmp")
        print(result.output)  # ["hi", "bye"]
"""

import shutil
import subprocess  # nosec B404
import time
from typing import Dict, Optional

from cmdline_presenter.commands.base import (
    CommandExecutor,
    CommandResult,
)
from cmdline_presenter.logging.base import Logger


class LinuxCommandExecutor(CommandExecutor):
    """Exécuteur de commandes shell via subprocess.

    Attributes:
        _logger: Journal de diagnostic optionnel.
        _env: Environnement complet transmis au shell (None = hérité).
        _shell: Shell utilisé (défaut: /bin/sh).
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        env: Optional[Dict[str, str]] = None,
        shell: Optional[str] = None,
    ) -> None:
        """Initialise l'exécuteur.

        Args:
            logger: Journal de diagnostic optionnel.
            env: Environnement du shell. None pour hériter de
                os.environ.
            shell: Chemin d'un shell alternatif (ex: /bin/bash).
        """
        self._logger = logger
        self._env = env
        self._shell = shell

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    @staticmethod
    def _split_lines(raw: str) -> list[str]:
        """Découpe la sortie en lignes sans espaces de fin."""
        return [line.rstrip() for line in raw.splitlines()]

    def run_shell(self, command: str, cwd: str) -> CommandResult:
        """Exécute la commande et capture la sortie fusionnée.

        Une erreur système au lancement (shell introuvable, droits)
        produit un résultat en échec de code -1 plutôt qu'une
        exception.

        Args:
            command: Ligne de commande complète.
            cwd: Répertoire de travail, supposé existant.

        Returns:
            CommandResult avec les lignes capturées.
        """
        self._log(f"Exécution dans {cwd} : {command}")
        start = time.monotonic()
        try:
            proc = subprocess.run(  # nosec B602
                command,
                shell=True,
                executable=self._shell,
                cwd=cwd,
                env=self._env,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            )
        except OSError as e:
            duration = time.monotonic() - start
            self._log_error(f"Erreur système : {e}")
            return CommandResult(
                command=command,
                cwd=cwd,
                return_code=-1,
                output=[str(e)],
                success=False,
                duration=duration,
            )

        duration = time.monotonic() - start
        if proc.returncode != 0:
            self._log_error(
                f"Code retour {proc.returncode} : {command}"
            )
        return CommandResult(
            command=command,
            cwd=cwd,
            return_code=proc.returncode,
            output=self._split_lines(proc.stdout or ""),
            success=proc.returncode == 0,
            duration=duration,
        )

    def command_exists(self, program: str) -> bool:
        path = self._env.get("PATH") if self._env else None
        return shutil.which(program, path=path) is not None
