"""Modèles pydantic des réglages du présentateur et des scripts.

Exemple de fichier de script TOML :

    [presenter]
    log_file_location = "/var/log/deploy/output.log"
    break_on_all_errors = true

    [[steps]]
    directory = "/srv/app"
    command = "git pull && composer install"
    comment = "mise à jour du code"
"""

from typing import List, Optional

from pydantic import BaseModel, field_validator


class LoggingSettings(BaseModel):
    """Réglages du journal de diagnostic (FileLogger)."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"

    model_config = {"extra": "forbid"}

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Niveau de journal inconnu : {v}")
        return level


class PresenterSettings(BaseModel):
    """Réglages d'un CommandPresenter.

    Attributes:
        log_file_location: Fichier miroir principal (vide = désactivé).
        key_notes_file_location: Fichier miroir des notes clés.
        make_key_notes: Active le miroir des notes clés.
        run_immediately: None pour détecter le contexte, True pour
            exécuter, False pour seulement afficher le script.
        break_on_all_errors: Arrêter tout le script au premier échec.
        error_message: Texte ajouté après chaque sortie en erreur.
        diagnostic_log: Fichier du journal de diagnostic (optionnel).
        logging: Niveau et format du journal de diagnostic.
    """

    log_file_location: Optional[str] = None
    key_notes_file_location: Optional[str] = None
    make_key_notes: bool = False
    run_immediately: Optional[bool] = None
    break_on_all_errors: bool = False
    error_message: str = ""
    diagnostic_log: Optional[str] = None
    logging: LoggingSettings = LoggingSettings()

    model_config = {"extra": "forbid"}


class ScriptStep(BaseModel):
    """Une étape de script : une commande lancée dans un répertoire."""

    directory: str
    command: str
    comment: str = ""
    always_run: bool = False
    verbose: bool = True

    model_config = {"extra": "forbid"}

    @field_validator("directory", "command")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("La valeur ne peut pas être vide")
        return v


class ScriptFile(BaseModel):
    """Fichier de script complet : réglages puis étapes ordonnées."""

    presenter: PresenterSettings = PresenterSettings()
    steps: List[ScriptStep] = []

    model_config = {"extra": "forbid"}
