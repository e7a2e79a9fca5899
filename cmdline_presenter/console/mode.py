"""Mode d'exécution du présentateur."""

from enum import Enum
from typing import Optional


class RunMode(Enum):
    """Décide si les commandes sont exécutées ou seulement affichées.

    UNRESOLVED est résolu une seule fois, au premier exec_me, selon le
    contexte (terminal interactif ou document).
    """

    UNRESOLVED = "unresolved"
    RUN_NOW = "run_now"
    RENDER_ONLY = "render_only"

    @classmethod
    def from_flag(cls, run_immediately: Optional[bool]) -> "RunMode":
        """Convertit l'ancien drapeau à trois états (None/True/False)."""
        if run_immediately is None:
            return cls.UNRESOLVED
        return cls.RUN_NOW if run_immediately else cls.RENDER_ONLY

    def to_flag(self) -> Optional[bool]:
        if self is RunMode.UNRESOLVED:
            return None
        return self is RunMode.RUN_NOW


def resolve_run_mode(mode: RunMode, interactive: bool) -> RunMode:
    """Résout un mode indéterminé selon le contexte d'exécution.

    Un mode déjà fixé est retourné tel quel.

    Args:
        mode: Mode courant.
        interactive: True si la sortie est un terminal interactif.

    Returns:
        RUN_NOW en terminal, RENDER_ONLY en contexte document.
    """
    if mode is not RunMode.UNRESOLVED:
        return mode
    return RunMode.RUN_NOW if interactive else RunMode.RENDER_ONLY
