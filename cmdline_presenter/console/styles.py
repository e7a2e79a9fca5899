"""Table des styles d'affichage.

Chaque nom de style correspond à un code ANSI (terminal) et à une
couleur CSS (document HTML). Les alias partagent le même style ; un
nom inconnu retombe sur "notice".
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Style:
    """Style d'affichage pour les deux cibles de rendu.

    Attributes:
        ansi: Code SGR sans l'échappement (ex: "0;31").
        html: Couleur CSS (ex: "red", "#555").
    """

    ansi: str
    html: str


_BLACK = Style("0;30", "black")
_BLUE = Style("0;34", "blue")
_LIGHT_BLUE = Style("1;34", "lightblue")
_GREEN = Style("0;32", "green")
_LIGHT_GREEN = Style("1;32", "lightgreen")
_CYAN = Style("0;36", "cyan")
_LIGHT_CYAN = Style("1;36", "lightcyan")
_RED = Style("0;31", "red")
_LIGHT_RED = Style("1;31", "pink")
_PURPLE = Style("0;35", "purple")
_LIGHT_PURPLE = Style("1;35", "violet")
_BROWN = Style("0;33", "brown")
_YELLOW = Style("1;33", "yellow")
_LIGHT_GRAY = Style("0;37", "#999")
_WHITE = Style("1;37", "white")
_DARK_GRAY = Style("1;30", "#555")

STYLES: Dict[str, Style] = {
    "black": _BLACK,
    "blue": _BLUE,
    "light_blue": _LIGHT_BLUE,
    "green": _GREEN,
    "light_green": _LIGHT_GREEN,
    "cyan": _CYAN,
    "light_cyan": _LIGHT_CYAN,
    "red": _RED,
    "error": _RED,
    "light_red": _LIGHT_RED,
    "purple": _PURPLE,
    "run": _LIGHT_PURPLE,
    "light_purple": _LIGHT_PURPLE,
    "brown": _BROWN,
    "yellow": _YELLOW,
    "warning": _YELLOW,
    "light_gray": _LIGHT_GRAY,
    "white": _WHITE,
    "dark_gray": _DARK_GRAY,
    "notice": _LIGHT_GREEN,
}

DEFAULT_STYLE = "notice"

# Toujours affichés, même en mode non verbeux
ERROR_STYLES = frozenset({"red", "error"})


def get_style(name: str) -> Style:
    """Retourne le style associé à un nom, ou le style par défaut."""
    return STYLES.get(name, STYLES[DEFAULT_STYLE])


def is_error_style(name: str) -> bool:
    return name in ERROR_STYLES
