"""
Adaptateurs de parsing des reponses de l'API.

- parse_xml : document XML -> dictionnaire imbrique
"""

from tvdbclient.adapters.parsing.xml_parser import parse_xml

__all__ = ["parse_xml"]
