"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe
CINETRAILER_, et peut optionnellement être fournie via un fichier .env.

Le seul réglage indispensable est le répertoire racine du stockage des affiches
(CINETRAILER_STORAGE_DIR) ; tous les autres ont une valeur par défaut.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de cinetrailer/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINETRAILER_.
    Exemple : CINETRAILER_STORAGE_DIR=/srv/cinetrailer/covers

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CINETRAILER_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Stockage des affiches
    storage_dir: Path = Field(default=Path("data/covers"))

    # Base de données
    database_url: str = Field(default="sqlite:///data/cinetrailer.db")

    # Pagination des listings
    admin_page_size: int = Field(default=5, ge=1)
    public_page_size: int = Field(default=20, ge=1)
    max_page_size: int = Field(default=100, ge=1)
    home_latest_count: int = Field(default=4, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinetrailer.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("storage_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    def clamp_page_size(self, size: int | None, default: int) -> int:
        """Ramène une taille de page demandée dans [1, max_page_size]."""
        if size is None:
            return default
        return max(1, min(size, self.max_page_size))
