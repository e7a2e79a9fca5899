"""Interface abstraite pour l'ajout de texte dans un fichier."""

from abc import ABC, abstractmethod


class TextAppender(ABC):
    """Interface pour les fichiers miroirs en ajout seul."""

    @abstractmethod
    def append(
        self, file_path: str, text: str, new_line_count: int = 1
    ) -> None:
        """
        Ajoute du texte à la fin d'un fichier.

        Args:
            file_path: Chemin du fichier miroir
            text: Texte à ajouter
            new_line_count: Sauts de ligne écrits avant le texte
                (ignoré quand le fichier est créé : l'en-tête daté
                les remplace)
        """
        pass
