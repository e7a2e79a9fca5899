"""Rendu du texte du présentateur selon le contexte d'exécution.

Deux stratégies, choisies une fois à la construction du présentateur :
    TerminalRenderer : codes ANSI, sauts de ligne "\\n".
    DocumentRenderer : document HTML copiable comme script bash,
        texte échappé, sauts de ligne "<br />".

Les renderers ne font que produire des chaînes ; l'écriture sur le
flux est laissée au présentateur.
"""

import html
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from cmdline_presenter.console.styles import get_style

DOCUMENT_HEADER = """
<!DOCTYPE html>
<html lang="en-US">
<head>
<meta charset="UTF-8">
<title>Command line script</title>
</head>

<body>
    <pre><code class="sh">#!/bin/bash<br />"""

DOCUMENT_FOOTER = """
<style>
    html, body {padding: 0; margin: 0; min-height: 100%; height: 100%; background-color: #300a24; color: #fff;}
    pre {
        font-family: Consolas, Monaco, Lucida Console, Liberation Mono, DejaVu Sans Mono, Bitstream Vera Sans Mono, Courier New, monospace;
    }
    strong {display: block; color: teal;}
    i {color: green; font-style: normal;}
    .hljs-string {color: yellow;}
    .hljs-built_in {color: #ccc;}
</style>
</code></pre>
</body>
</html>

"""


def is_interactive(stream: Optional[TextIO] = None) -> bool:
    """Vérifie si le flux de sortie est un terminal interactif (TTY).

    Args:
        stream: Flux à tester (défaut: sys.stdout).

    Returns:
        True si le flux est un TTY, False sinon.
    """
    stream = stream if stream is not None else sys.stdout
    return hasattr(stream, "isatty") and stream.isatty()


class OutputRenderer(ABC):
    """Interface abstraite de rendu du présentateur.

    Attributes:
        interactive: True pour un rendu terminal ; pilote la
            résolution du mode d'exécution.
    """

    interactive: bool = False

    @abstractmethod
    def format_header(self) -> str:
        """Texte émis à la construction du présentateur."""
        pass

    @abstractmethod
    def format_footer(self) -> str:
        """Texte émis à la fermeture du présentateur."""
        pass

    @abstractmethod
    def format_line_breaks(self, count: int) -> str:
        """Retourne count sauts de ligne dans le format de la cible."""
        pass

    @abstractmethod
    def format_styled(
        self, text: str, style: str, new_line_count: int = 1
    ) -> str:
        """Formate un texte stylé précédé de ses sauts de ligne.

        Args:
            text: Texte brut à afficher.
            style: Nom de style (voir console.styles).
            new_line_count: Sauts de ligne demandés avant le texte.

        Returns:
            Chaîne prête à écrire sur le flux.
        """
        pass

    @abstractmethod
    def format_decoy(self, comment: str) -> str:
        """Ligne invisible reprenant le commentaire d'une étape non
        exécutée, pour que le script copié l'affiche à l'exécution.

        Args:
            comment: Commentaire de l'étape.

        Returns:
            La ligne, ou une chaîne vide si la cible n'en a pas.
        """
        pass


class TerminalRenderer(OutputRenderer):
    """Rendu ANSI coloré pour un terminal.

    Example :
        TerminalRenderer().format_styled("ls", "run")
        → "\\n\\033[1;35mls\\033[0m"
    """

    interactive = True

    RESET = "\033[0m"

    def format_header(self) -> str:
        return ""

    def format_footer(self) -> str:
        return self.format_line_breaks(3)

    def format_line_breaks(self, count: int) -> str:
        return "\n" * max(count, 0)

    def format_styled(
        self, text: str, style: str, new_line_count: int = 1
    ) -> str:
        code = get_style(style).ansi
        return (
            f"{self.format_line_breaks(new_line_count)}"
            f"\033[{code}m{text}{self.RESET}"
        )

    def format_decoy(self, comment: str) -> str:
        return ""


class DocumentRenderer(OutputRenderer):
    """Rendu HTML d'un script copiable.

    Un <div> compte lui-même pour un saut de ligne ; un <span> est
    utilisé quand aucun saut n'est demandé. Le texte est échappé.
    """

    interactive = False

    LINE_BREAK = "<br />"

    def format_header(self) -> str:
        return DOCUMENT_HEADER

    def format_footer(self) -> str:
        return DOCUMENT_FOOTER

    def format_line_breaks(self, count: int) -> str:
        return self.LINE_BREAK * max(count, 0)

    def format_styled(
        self, text: str, style: str, new_line_count: int = 1
    ) -> str:
        colour = get_style(style).html
        if new_line_count == 0:
            element = "span"
        else:
            element = "div"
            new_line_count -= 1
        return (
            f"{self.format_line_breaks(new_line_count)}"
            f'<{element} style="color: {colour}">'
            f"{html.escape(text)}</{element}>"
        )

    @staticmethod
    def _add_slashes(text: str) -> str:
        """Échappe \\, ' et " pour une chaîne shell entre guillemets."""
        return (
            text.replace("\\", "\\\\")
            .replace("'", "\\'")
            .replace('"', '\\"')
        )

    def format_decoy(self, comment: str) -> str:
        escaped = html.escape(self._add_slashes(comment), quote=False)
        return (
            '<div style="color: transparent">'
            f'tput setaf 33; echo " _____ : {escaped}" ____ </div>'
        )


def select_renderer(stream: Optional[TextIO] = None) -> OutputRenderer:
    """Choisit le renderer adapté au flux de sortie."""
    if is_interactive(stream):
        return TerminalRenderer()
    return DocumentRenderer()
