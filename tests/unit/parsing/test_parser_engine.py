"""Unit tests for the parser engine and the Result-returning parse layer."""

import pytest

from treelens.core.result import Err, Ok
from treelens.core.types import Language
from treelens.parsing.base import JsonParser, ParseError, load_json
from treelens.parsing.css.parser import CssRoot
from treelens.parsing.engine import ParserEngine, create_default_engine
from treelens.parsing.xml.tree import XmlTreeNode


class TestParserEngine:
    @pytest.fixture
    def engine(self):
        return create_default_engine()

    def test_registered_languages(self, engine):
        assert set(engine.registry.languages) == {Language.JSON, Language.XML, Language.CSS}

    def test_json_ok(self, engine):
        result = engine.parse('{"a": [1, 2]}', Language.JSON)

        assert isinstance(result, Ok)
        assert result.value.language == Language.JSON
        assert result.value.value == {"a": [1, 2]}

    def test_language_given_as_string(self, engine):
        result = engine.parse("[]", "json")
        assert result.is_ok()

    def test_invalid_json_is_err(self, engine):
        result = engine.parse('{"a": ', Language.JSON)

        assert isinstance(result, Err)
        assert isinstance(result.error, ParseError)
        assert result.error.language == "json"
        assert result.error.error_type == "JSONDecodeError"

    def test_nan_is_rejected(self, engine):
        assert engine.parse('{"a": NaN}', Language.JSON).is_err()
        assert engine.parse("[Infinity]", Language.JSON).is_err()

    def test_xml_and_css_values(self, engine):
        assert isinstance(engine.parse("<a/>", Language.XML).unwrap(), XmlTreeNode)
        assert isinstance(engine.parse(".a{}", Language.CSS).unwrap(), CssRoot)

    def test_unstructured_languages_are_unsupported(self, engine):
        for language in (Language.JAVASCRIPT, Language.TEXT, "yaml"):
            result = engine.parse("x", language)
            assert result.is_err()
            assert result.error.error_type == "unsupported"

    def test_empty_engine(self):
        engine = ParserEngine()
        assert engine.parse("{}", Language.JSON).is_err()

        engine.register(JsonParser())
        assert engine.parse("{}", Language.JSON).is_ok()


class TestLoadJson:
    def test_keeps_key_order(self):
        assert list(load_json('{"b": 1, "a": 2}')) == ["b", "a"]

    def test_rejects_constants(self):
        with pytest.raises(ValueError):
            load_json("-Infinity")
