"""Interfaces abstraites et structures de données pour l'exécution
de commandes shell.

Ce module définit :
    - CommandResult : Résultat immuable d'une exécution de commande.
    - CommandExecutor : Interface abstraite pour les exécuteurs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class CommandResult:
    """Résultat de l'exécution d'une commande shell.

    La sortie d'erreur est fusionnée dans la sortie standard : output
    contient les deux, dans l'ordre d'émission.

    Attributes:
        command: Ligne de commande exécutée, telle quelle.
        cwd: Répertoire dans lequel la commande a tourné.
        return_code: Code de retour du processus.
        output: Lignes capturées, espaces de fin retirés.
        success: True si la commande a réussi (code 0).
        duration: Durée d'exécution en secondes.
    """

    command: str
    cwd: str
    return_code: int
    output: List[str] = field(default_factory=list)
    success: bool = True
    duration: float = 0.0

    @property
    def last_line(self) -> str:
        """Dernière ligne capturée, ou chaîne vide."""
        return self.output[-1] if self.output else ""

    @property
    def text(self) -> str:
        """Sortie complète, lignes jointes par des sauts de ligne."""
        return "\n".join(self.output)


class CommandExecutor(ABC):
    """Interface abstraite pour l'exécution de commandes shell."""

    @abstractmethod
    def run_shell(self, command: str, cwd: str) -> CommandResult:
        """Exécute une ligne de commande shell dans un répertoire.

        Args:
            command: Ligne de commande complète (&&, ; et tubes permis).
            cwd: Répertoire de travail de la commande.

        Returns:
            Résultat de l'exécution.
        """
        pass

    @abstractmethod
    def command_exists(self, program: str) -> bool:
        """Indique si un programme est disponible dans le PATH.

        Args:
            program: Nom du programme (ex: "git").

        Returns:
            True si le programme est trouvé.
        """
        pass
