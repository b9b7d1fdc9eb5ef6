"""
Conversion des documents XML TVDB en structures Python.

Reproduit les options de parsing attendues par les normaliseurs:
- texte rogne et espaces internes normalises
- attributs ignores, seul le contenu des elements compte
- un enfant unique n'est jamais enveloppe dans une liste: les listes
  n'apparaissent que pour des elements freres repetes
- un element vide vaut None (et non "")

Exemple:
    parse_xml("<Data><Series><id>1</id></Series></Data>")
    -> {"Data": {"Series": {"id": "1"}}}
"""

import re
import xml.etree.ElementTree as ET
from typing import Any

from tvdbclient.adapters.api.errors import ParseError

# Cle utilisee pour le texte d'un element qui a aussi des enfants
TEXT_KEY = "_"

_WHITESPACE_RUN = re.compile(r"\s{2,}")


def _normalize_text(text: str) -> str:
    """Rogne le texte et remplace les suites d'espaces par un seul espace."""
    return _WHITESPACE_RUN.sub(" ", text.strip()).strip()


def _element_text(element: ET.Element) -> str:
    """Concatene le texte propre de l'element et la queue de ses enfants."""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return _normalize_text("".join(parts))


def _convert(element: ET.Element) -> Any:
    text = _element_text(element)
    children = list(element)

    if not children:
        return text or None

    result: dict[str, Any] = {}
    for child in children:
        value = _convert(child)
        if child.tag not in result:
            result[child.tag] = value
        elif isinstance(result[child.tag], list):
            result[child.tag].append(value)
        else:
            result[child.tag] = [result[child.tag], value]

    if text:
        result[TEXT_KEY] = text
    return result


def parse_xml(data: str) -> dict[str, Any]:
    """
    Parse un document XML en dictionnaire imbrique.

    L'element racine est conserve comme unique cle de premier niveau.

    Args:
        data: Document XML (texte)

    Returns:
        Structure imbriquee {racine: contenu}

    Raises:
        ParseError: Si le document n'est pas du XML bien forme
    """
    try:
        root = ET.fromstring(data.lstrip("\ufeff"))
    except ET.ParseError as e:
        raise ParseError(f"Invalid XML document: {e}") from e
    return {root.tag: _convert(root)}
