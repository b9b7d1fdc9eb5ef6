"""
Fixtures pytest partagees pour les tests tvdbclient.

Ce module contient les fixtures communes utilisees dans les tests:
- Environnement isole des variables TVDB_* de la machine
- Settings de test avec chemins temporaires
"""

import os
from pathlib import Path

import pytest

from tvdbclient.config import Settings


@pytest.fixture(autouse=True)
def clean_tvdb_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Retire les variables TVDB_* pour que les tests ne dependent pas de la machine."""
    for name in list(os.environ):
        if name.upper().startswith("TVDB_"):
            monkeypatch.delenv(name)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec un fichier de log temporaire.

    Le fichier .env eventuel du repertoire courant est ignore.
    """
    return Settings(
        _env_file=None,
        api_key="TESTAPIKEY1234",
        token="test-jwt-token",
        language="fr",
        log_file=tmp_path / "logs" / "test.log",
    )
