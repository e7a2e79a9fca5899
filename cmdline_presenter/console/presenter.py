"""Présentateur de commandes shell.

CommandPresenter affiche chaque étape d'un script (commentaire, puis
commande) et, selon le mode d'exécution, la lance et affiche son
résultat. Le même code produit :

    - en terminal : exécution immédiate, sortie colorée ANSI ;
    - hors terminal : un document HTML copiable comme script bash,
      sans exécution sauf pour les étapes marquées always_run.

Tout le texte affiché peut être dupliqué dans un fichier miroir et
dans un fichier de notes clés.

Example :
    Déroulé d'un petit script :

        from cmdline_presenter import CommandPresenter

        with CommandPresenter("/var/log/deploy/output.log") as presenter:
            presenter.break_on_all_errors = True
            presenter.exec_me("/srv/app", "git pull", "mise à jour")
            lines = presenter.exec_me(
                "/srv/app", "git rev-parse HEAD", "révision",
                always_run=True,
            )
"""

import os
import pprint
import sys
from typing import Any, List, Optional, TextIO

from cmdline_presenter.commands.base import CommandExecutor, CommandResult
from cmdline_presenter.commands.runner import LinuxCommandExecutor
from cmdline_presenter.config.settings import PresenterSettings
from cmdline_presenter.console.mode import RunMode, resolve_run_mode
from cmdline_presenter.console.renderer import (
    OutputRenderer,
    select_renderer,
)
from cmdline_presenter.console.styles import is_error_style
from cmdline_presenter.errors.exceptions import (
    CommandAbortedError,
    DirectoryNotFoundError,
)
from cmdline_presenter.filesystem.base import TextAppender
from cmdline_presenter.filesystem.linux import LinuxTextAppender
from cmdline_presenter.logging.base import Logger
from cmdline_presenter.logging.file_logger import FileLogger


def split_command(command: str) -> List[str]:
    """Découpe une ligne de commande pour l'affichage.

    Découpe sur "&&", puis chaque segment sur ";", et retire les
    espaces autour de chaque sous-commande. Purement visuel : la
    commande reste exécutée d'un seul tenant.

    Args:
        command: Ligne de commande complète.

    Returns:
        Sous-commandes dans leur ordre d'origine.
    """
    return [
        part.strip()
        for segment in command.split("&&")
        for part in segment.split(";")
    ]


class CommandPresenter:
    """Exécute et présente des commandes shell, une à la fois.

    Le présentateur est un objet explicite que l'appelant construit
    une fois et passe d'appel en appel. L'en-tête du document est
    émis à la construction, le pied à la fermeture (close() ou sortie
    du bloc with), une seule fois chacun.

    Attributes:
        log_file_location: Fichier miroir principal (None ou "" =
            désactivé).
        key_notes_file_location: Fichier miroir des notes clés.
        make_key_notes: Active le miroir des notes clés.
        break_on_all_errors: Lève CommandAbortedError au premier
            échec de commande.
        error_message: Texte affiché après chaque sortie en erreur.
    """

    SUCCESS_MARKER = "✔✔✔"
    STOP_MARKER = "------ STOPPED -----"

    def __init__(
        self,
        log_file_location: Optional[str] = None,
        key_notes_file_location: Optional[str] = None,
        make_key_notes: bool = False,
        run_mode: RunMode = RunMode.UNRESOLVED,
        break_on_all_errors: bool = False,
        error_message: str = "",
        executor: Optional[CommandExecutor] = None,
        appender: Optional[TextAppender] = None,
        renderer: Optional[OutputRenderer] = None,
        stream: Optional[TextIO] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialise le présentateur et émet l'en-tête éventuel.

        Args:
            log_file_location: Fichier miroir principal.
            key_notes_file_location: Fichier miroir des notes clés.
            make_key_notes: Active le miroir des notes clés.
            run_mode: Mode initial (UNRESOLVED = détection au premier
                exec_me).
            break_on_all_errors: Arrêt complet au premier échec.
            error_message: Texte ajouté après chaque sortie en erreur.
            executor: Exécuteur de commandes (défaut:
                LinuxCommandExecutor).
            appender: Écriture des fichiers miroirs (défaut:
                LinuxTextAppender).
            renderer: Stratégie de rendu (défaut: selon que le flux
                est un terminal ou non).
            stream: Flux de sortie (défaut: sys.stdout à l'écriture).
            logger: Journal de diagnostic optionnel.
        """
        self.log_file_location = log_file_location
        self.key_notes_file_location = key_notes_file_location
        self.make_key_notes = make_key_notes
        self.break_on_all_errors = break_on_all_errors
        self.error_message = error_message

        self._logger = logger
        self._stream = stream
        self._executor = executor or LinuxCommandExecutor(logger=logger)
        self._appender = appender or LinuxTextAppender(logger=logger)
        self._renderer = renderer or select_renderer(stream)

        self._run_mode = run_mode
        self._verbose = True
        self._has_error = False
        self._last_error = ""
        self._closed = False

        self._emit(self._renderer.format_header())

    @classmethod
    def from_settings(
        cls,
        settings: PresenterSettings,
        **kwargs: Any,
    ) -> "CommandPresenter":
        """Construit un présentateur depuis des réglages validés.

        Un FileLogger est créé si settings.diagnostic_log est défini
        et qu'aucun logger n'est fourni.

        Args:
            settings: Réglages validés par pydantic.
            **kwargs: Collaborateurs transmis au constructeur
                (executor, appender, renderer, stream, logger).

        Returns:
            Nouveau présentateur.
        """
        if settings.diagnostic_log and "logger" not in kwargs:
            kwargs["logger"] = FileLogger(
                settings.diagnostic_log,
                config=settings.logging.model_dump(),
            )
        return cls(
            log_file_location=settings.log_file_location,
            key_notes_file_location=settings.key_notes_file_location,
            make_key_notes=settings.make_key_notes,
            run_mode=RunMode.from_flag(settings.run_immediately),
            break_on_all_errors=settings.break_on_all_errors,
            error_message=settings.error_message,
            **kwargs,
        )

    # --- Cycle de vie ---

    def __enter__(self) -> "CommandPresenter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Émet le pied de document (ou les lignes vides finales).

        Sans effet si le présentateur est déjà fermé.
        """
        if self._closed:
            return
        self._closed = True
        self._emit(self._renderer.format_footer())

    @property
    def closed(self) -> bool:
        return self._closed

    # --- Réglages et état ---

    @property
    def run_mode(self) -> RunMode:
        return self._run_mode

    @run_mode.setter
    def run_mode(self, mode: RunMode) -> None:
        self._run_mode = mode

    @property
    def run_immediately(self) -> Optional[bool]:
        """Vue à trois états du mode : None, True ou False."""
        return self._run_mode.to_flag()

    @run_immediately.setter
    def run_immediately(self, value: Optional[bool]) -> None:
        self._run_mode = RunMode.from_flag(value)

    @property
    def interactive(self) -> bool:
        """True si le rendu vise un terminal."""
        return self._renderer.interactive

    @property
    def has_error(self) -> bool:
        """True si la dernière commande exécutée a échoué."""
        return self._has_error

    @property
    def last_error(self) -> str:
        """Sortie de la dernière commande en échec."""
        return self._last_error

    @property
    def verbose(self) -> bool:
        """Verbosité courante (celle de l'appel exec_me en cours, True
        en dehors)."""
        return self._verbose

    @property
    def logger(self) -> Optional[Logger]:
        return self._logger

    def command_exists(self, program: str) -> bool:
        """Indique si un programme est disponible dans le PATH."""
        return self._executor.command_exists(program)

    # --- Exécution ---

    def exec_me(
        self,
        current_directory: str,
        command: str,
        comment: str,
        always_run: bool = False,
        verbose: bool = True,
    ) -> List[str]:
        """Présente une commande puis l'exécute si le mode le permet.

        Args:
            current_directory: Répertoire dans lequel lancer la
                commande.
            command: Ligne de commande complète.
            comment: Commentaire affiché avant la commande.
            always_run: Exécuter même en mode RENDER_ONLY.
            verbose: False pour masquer tout sauf les erreurs.

        Returns:
            Lignes de sortie capturées, ou liste vide si la commande
            n'a pas été exécutée.

        Raises:
            DirectoryNotFoundError: Si current_directory n'existe pas
                (vérifié seulement quand la commande doit tourner).
            CommandAbortedError: Si la commande échoue et que
                break_on_all_errors est actif.
        """
        previous_verbose = self._verbose
        self._verbose = verbose
        try:
            return self._run_step(
                current_directory, command, comment, always_run
            )
        finally:
            self._verbose = previous_verbose

    def _run_step(
        self,
        current_directory: str,
        command: str,
        comment: str,
        always_run: bool,
    ) -> List[str]:
        self._has_error = False
        if self._run_mode is RunMode.UNRESOLVED:
            self._run_mode = resolve_run_mode(
                self._run_mode, self._renderer.interactive
            )
            if self._logger:
                self._logger.log_debug(
                    f"Mode d'exécution résolu : {self._run_mode.value}"
                )
        will_run = self._run_mode is RunMode.RUN_NOW or always_run

        self.new_line(1)
        self.colour_print(f"# {comment}", "dark_gray")
        if not will_run and self._verbose:
            self._emit(self._renderer.format_decoy(comment))

        # Le "cd" affiché rend le script copié exécutable tel quel
        self.colour_print(f"cd {current_directory}", "run")
        for sub_command in split_command(command):
            self.colour_print(sub_command, "run")

        if not will_run:
            return []

        if not os.path.isdir(current_directory):
            if self._logger:
                self._logger.log_error(
                    f"Répertoire introuvable : {current_directory}"
                )
            raise DirectoryNotFoundError(current_directory)

        result = self._executor.run_shell(command, current_directory)
        if result.success:
            self._report_success(result)
        else:
            self._report_failure(result)
        return list(result.output)

    def _report_success(self, result: CommandResult) -> None:
        if result.last_line:
            self.colour_print(result.last_line, "green")
        for line in result.output:
            self.colour_print(line, "blue")
        self.colour_print(self.SUCCESS_MARKER, "green", 1)
        self.new_line(2)

    def _report_failure(self, result: CommandResult) -> None:
        self._last_error = result.text
        self._has_error = True
        self.colour_print(result.text, "red")
        if self.error_message:
            self.colour_print(self.error_message, "red")

        if self.break_on_all_errors:
            if self._logger:
                self._logger.log_error(
                    f"Arrêt demandé après l'échec de : {result.command}"
                )
            self.close()
            self._emit(self._renderer.format_line_breaks(10))
            self._emit(self.STOP_MARKER)
            raise CommandAbortedError(result)

    # --- Affichage ---

    @staticmethod
    def _to_text(value: Any) -> str:
        """Convertit une valeur en texte lisible (pas un format
        machine)."""
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, (list, tuple, dict, set)):
            return pprint.pformat(value)
        return str(value)

    def colour_print(
        self,
        value: Any,
        colour: str = "dark_gray",
        new_line_count: int = 1,
    ) -> None:
        """Affiche une valeur stylée et la duplique dans les miroirs.

        Les miroirs reçoivent le texte brut précédé de new_line_count
        sauts de ligne, quel que soit le mode verbeux. L'affichage est
        masqué en mode non verbeux, sauf pour les styles d'erreur.

        Args:
            value: Valeur à afficher (les listes et dicts sont mis en
                forme lisiblement).
            colour: Nom de style (voir console.styles).
            new_line_count: Sauts de ligne avant le texte.
        """
        text = self._to_text(value)
        self._write_to_mirrors(text, new_line_count)
        if self._verbose or is_error_style(colour):
            self._emit(
                self._renderer.format_styled(text, colour, new_line_count)
            )

    def new_line(self, count: int = 1) -> None:
        """Émet des sauts de ligne (masqués en mode non verbeux)."""
        if self._verbose:
            self._emit(self._renderer.format_line_breaks(count))

    def _write_to_mirrors(self, text: str, new_line_count: int) -> None:
        if self.log_file_location:
            self._appender.append(
                self.log_file_location, text, new_line_count
            )
        if self.key_notes_file_location and self.make_key_notes:
            self._appender.append(
                self.key_notes_file_location, text, new_line_count
            )

    def _emit(self, text: str) -> None:
        if not text:
            return
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text)
        stream.flush()
