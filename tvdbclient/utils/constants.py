"""
Constantes globales pour tvdbclient.

Ce module contient les constantes partagees par les deux clients:
- URLs de base des deux dialectes de l'API TVDB
- Version de l'API JSON (header Accept)
- Fournisseurs d'identifiants externes (IMDB, zap2it)
- Intervalles valides pour les fichiers de mises a jour
"""

import re

# Dialecte historique (XML/ZIP)
LEGACY_BASE_URL = "http://www.thetvdb.com/api"

# Dialecte JSON (JWT)
API_BASE_URL = "https://api-dev.thetvdb.com/"
API_VERSION = "1.2.0"
USER_AGENT = "tvdbclient"

DEFAULT_LANGUAGE = "en"

# Fournisseurs d'IDs externes, dans l'ordre d'enregistrement.
# Parcourus du dernier au premier: le dernier qui reconnait l'ID gagne.
REMOTE_PROVIDERS: dict[str, re.Pattern[str]] = {
    "imdbid": re.compile(r"^tt", re.IGNORECASE),
    "zap2it": re.compile(r"^ep", re.IGNORECASE),
}

# Intervalles des fichiers updates_<interval>.xml
UPDATE_INTERVALS = frozenset({"day", "week", "month", "all"})

# Cle racine utilisee par l'API pour signaler une erreur applicative
ERROR_KEY = "Error"

# Page HTML renvoyee avec un statut 200 par certains miroirs
NOT_FOUND_MARKER = "404 Not Found"
