"""
Configuration de tvdbclient via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe TVDB_,
et peut optionnellement être fournie via un fichier .env.

Les clés d'accès sont optionnelles - les clients concernés ne sont utilisables que si elles sont fournies.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tvdbclient.utils.constants import (
    API_BASE_URL,
    API_VERSION,
    DEFAULT_LANGUAGE,
    LEGACY_BASE_URL,
    USER_AGENT,
)


class Settings(BaseSettings):
    """Paramètres des clients TVDB avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe TVDB_.
    Exemple : TVDB_LANGUAGE=fr
    """

    model_config = SettingsConfigDict(
        env_prefix="TVDB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Accès (OPTIONNELS)
    api_key: Optional[str] = Field(default=None)
    token: Optional[str] = Field(default=None)

    language: str = Field(default=DEFAULT_LANGUAGE)

    # Endpoints
    legacy_base_url: str = Field(default=LEGACY_BASE_URL)
    api_base_url: str = Field(default=API_BASE_URL)
    api_version: str = Field(default=API_VERSION)
    user_agent: str = Field(default=USER_AGENT)

    # Logging (stderr, fichier JSON optionnel avec rotation)
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Normalise le code langue ISO 639-1 (deux lettres, minuscules)."""
        v = v.strip().lower()
        if len(v) != 2 or not v.isascii() or not v.isalpha():
            raise ValueError(f"Invalid ISO 639-1 language code: {v!r}")
        return v

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser() if v else None

    @property
    def legacy_enabled(self) -> bool:
        """Vérifie si l'API historique est utilisable (clé API requise)."""
        return bool(self.api_key)

    @property
    def auth_configured(self) -> bool:
        """Vérifie si l'API JSON peut s'authentifier (clé API ou token)."""
        return bool(self.api_key or self.token)
