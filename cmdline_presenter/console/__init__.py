"""Module de présentation et d'exécution de commandes.

Classes disponibles :
    CommandPresenter : Présente et exécute les étapes d'un script.
    RunMode : Mode d'exécution (indéterminé, immédiat, rendu seul).
    OutputRenderer : Interface abstraite de rendu.
    TerminalRenderer : Rendu ANSI pour un terminal.
    DocumentRenderer : Rendu HTML d'un script copiable.
"""

from cmdline_presenter.console.mode import RunMode, resolve_run_mode
from cmdline_presenter.console.presenter import (
    CommandPresenter,
    split_command,
)
from cmdline_presenter.console.renderer import (
    DocumentRenderer,
    OutputRenderer,
    TerminalRenderer,
    is_interactive,
    select_renderer,
)
from cmdline_presenter.console.styles import (
    DEFAULT_STYLE,
    STYLES,
    Style,
    get_style,
    is_error_style,
)

__all__ = [
    # Présentateur
    "CommandPresenter",
    "split_command",
    # Mode d'exécution
    "RunMode",
    "resolve_run_mode",
    # Rendu
    "OutputRenderer",
    "TerminalRenderer",
    "DocumentRenderer",
    "is_interactive",
    "select_renderer",
    # Styles
    "Style",
    "STYLES",
    "DEFAULT_STYLE",
    "get_style",
    "is_error_style",
]
