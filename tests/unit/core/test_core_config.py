"""Unit tests for configuration settings."""

import pytest

from arglist.arguments.parser import ArgListParser
from arglist.core.config import ParserSettings, Settings


@pytest.mark.unit
class TestParserSettings:
    def test_default_values(self, monkeypatch):
        monkeypatch.delenv("ARGLIST_STRICT_TIME_UNITS", raising=False)
        monkeypatch.delenv("ARGLIST_LOG_PARSE_ERRORS", raising=False)

        settings = ParserSettings()

        assert settings.STRICT_TIME_UNITS is False
        assert settings.LOG_PARSE_ERRORS is True

    def test_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("ARGLIST_STRICT_TIME_UNITS", "true")
        monkeypatch.setenv("ARGLIST_LOG_PARSE_ERRORS", "false")

        settings = ParserSettings()

        assert settings.STRICT_TIME_UNITS is True
        assert settings.LOG_PARSE_ERRORS is False


@pytest.mark.unit
class TestSettings:
    def test_is_production_without_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "")

        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "dev-")

        assert Settings().is_production is False

    def test_nested_parser_settings(self):
        settings = Settings()

        assert isinstance(settings.parser, ParserSettings)

    def test_parser_defaults_come_from_settings(self, monkeypatch):
        import arglist.arguments.parser as parser_module

        strict = Settings(parser=ParserSettings(ARGLIST_STRICT_TIME_UNITS=True))
        monkeypatch.setattr(parser_module, "settings", strict)

        parser = ArgListParser()

        assert parser.strict_time_units is True

    def test_explicit_parser_options_override_settings(self):
        parser = ArgListParser(strict_time_units=True, log_errors=False)

        assert parser.strict_time_units is True
        assert parser.log_errors is False
