"""Point d'entrée en ligne de commande.

Déroule un fichier de script (TOML ou JSON) étape par étape :

    python -m cmdline_presenter deploy.toml
    python -m cmdline_presenter deploy.toml --format html > deploy.html

Codes de sortie :
    0 : toutes les étapes exécutées ont réussi
    1 : arrêt sur erreur, script invalide ou répertoire absent
    2 : au moins une étape a échoué sans arrêt du script
"""

import argparse
import sys
from typing import List, Optional

import pydantic

from cmdline_presenter.config.loader import FileConfigLoader
from cmdline_presenter.config.settings import ScriptFile
from cmdline_presenter.console.presenter import CommandPresenter
from cmdline_presenter.console.renderer import (
    DocumentRenderer,
    TerminalRenderer,
)
from cmdline_presenter.errors import (
    ApplicationError,
    ConsoleErrorHandler,
    ErrorHandlerChain,
    FileConfigurationError,
    LoggerErrorHandler,
    ValidationError,
)

EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_STEP_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmdline_presenter",
        description=(
            "Exécute un script de commandes, ou le rend sous forme "
            "de document HTML copiable."
        ),
    )
    parser.add_argument("script", help="Fichier de script .toml ou .json")
    parser.add_argument("--log-file", help="Fichier miroir principal")
    parser.add_argument("--key-notes", help="Fichier miroir des notes clés")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--run-now", dest="run_immediately", action="store_const",
        const=True, help="Exécuter les commandes",
    )
    mode.add_argument(
        "--render-only", dest="run_immediately", action="store_const",
        const=False, help="Afficher les commandes sans les exécuter",
    )
    parser.add_argument(
        "--break-on-errors", action="store_true",
        help="Arrêter le script au premier échec",
    )
    parser.add_argument(
        "--format", choices=("auto", "terminal", "html"), default="auto",
        help="Cible de rendu (auto: terminal si stdout est un TTY)",
    )
    return parser


def _load_script(path: str) -> ScriptFile:
    try:
        return FileConfigLoader().load(path, schema=ScriptFile)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Script invalide : {path}\n{e}") from e
    except (OSError, ValueError) as e:
        raise FileConfigurationError(str(e)) from e


def execute(args: argparse.Namespace, errors: ErrorHandlerChain) -> int:
    """Déroule le script décrit par args.

    Le LoggerErrorHandler du journal de diagnostic est ajouté à errors
    dès que le présentateur existe.

    Returns:
        EXIT_OK, ou EXIT_STEP_FAILED si une étape a échoué sans arrêt.

    Raises:
        ApplicationError: Script invalide, répertoire absent ou arrêt
            sur erreur.
    """
    script = _load_script(args.script)

    overrides = {}
    if args.log_file:
        overrides["log_file_location"] = args.log_file
    if args.key_notes:
        overrides["key_notes_file_location"] = args.key_notes
        overrides["make_key_notes"] = True
    if args.run_immediately is not None:
        overrides["run_immediately"] = args.run_immediately
    if args.break_on_errors:
        overrides["break_on_all_errors"] = True
    settings = script.presenter.model_copy(update=overrides)

    kwargs = {}
    if args.format == "terminal":
        kwargs["renderer"] = TerminalRenderer()
    elif args.format == "html":
        kwargs["renderer"] = DocumentRenderer()
    presenter = CommandPresenter.from_settings(settings, **kwargs)
    if presenter.logger:
        errors.add_handler(LoggerErrorHandler(presenter.logger))

    failed = False
    with presenter:
        for step in script.steps:
            presenter.exec_me(
                step.directory,
                step.command,
                step.comment,
                always_run=step.always_run,
                verbose=step.verbose,
            )
            failed = failed or presenter.has_error
    return EXIT_STEP_FAILED if failed else EXIT_OK


def run(argv: Optional[List[str]] = None) -> int:
    """Déroule un script et retourne le code de sortie."""
    args = build_parser().parse_args(argv)
    errors = ErrorHandlerChain().add_handler(ConsoleErrorHandler())
    try:
        return execute(args, errors)
    except ApplicationError as e:
        errors.handle(e)
        return getattr(e, "exit_code", EXIT_ABORTED)


def main() -> None:
    args = build_parser().parse_args()
    errors = ErrorHandlerChain().add_handler(ConsoleErrorHandler())
    try:
        code = execute(args, errors)
    except ApplicationError as e:
        errors.handle_and_exit(e, EXIT_ABORTED)
    sys.exit(code)


if __name__ == "__main__":
    main()
