"""
Tests de la conversion XML -> dictionnaire.
"""

import pytest

from tvdbclient.adapters.api.errors import ParseError
from tvdbclient.adapters.parsing.xml_parser import TEXT_KEY, parse_xml


class TestParseXml:
    """Tests de parse_xml."""

    def test_root_is_kept(self) -> None:
        assert parse_xml("<Data><Series><id>1</id></Series></Data>") == {
            "Data": {"Series": {"id": "1"}}
        }

    def test_single_child_is_not_wrapped(self) -> None:
        result = parse_xml("<Actors><Actor><Name>A</Name></Actor></Actors>")
        assert result["Actors"]["Actor"] == {"Name": "A"}

    def test_repeated_siblings_become_list(self) -> None:
        result = parse_xml("<Items><Series>1</Series><Series>2</Series><Series>3</Series></Items>")
        assert result == {"Items": {"Series": ["1", "2", "3"]}}

    def test_empty_element_is_none(self) -> None:
        assert parse_xml("<Data><NetworkID></NetworkID><Other/></Data>") == {
            "Data": {"NetworkID": None, "Other": None}
        }

    def test_empty_root(self) -> None:
        assert parse_xml("<Data>\n</Data>") == {"Data": None}

    def test_text_is_trimmed_and_normalized(self) -> None:
        result = parse_xml("<Data><Overview>\n  Walter   White,\n\tteacher  </Overview></Data>")
        assert result["Data"]["Overview"] == "Walter White, teacher"

    def test_attributes_are_ignored(self) -> None:
        result = parse_xml('<Data time="1442937120"><Series id="1">x</Series></Data>')
        assert result == {"Data": {"Series": "x"}}

    def test_mixed_content(self) -> None:
        result = parse_xml("<Data>before<id>1</id>after</Data>")
        assert result["Data"]["id"] == "1"
        assert result["Data"][TEXT_KEY] == "beforeafter"

    def test_values_stay_strings(self) -> None:
        result = parse_xml("<Data><Rating>9.3</Rating><id>81189</id></Data>")
        assert result["Data"] == {"Rating": "9.3", "id": "81189"}

    def test_declaration_and_bom(self) -> None:
        document = '\ufeff<?xml version="1.0" encoding="UTF-8" ?>\n<Items><Time>1</Time></Items>'
        assert parse_xml(document) == {"Items": {"Time": "1"}}

    def test_non_ascii_text(self) -> None:
        assert parse_xml("<Language><name>Français</name></Language>") == {
            "Language": {"name": "Français"}
        }

    @pytest.mark.parametrize("document", ["", "<Data>", "not xml", "<a></b>"])
    def test_malformed_document(self, document: str) -> None:
        with pytest.raises(ParseError):
            parse_xml(document)
