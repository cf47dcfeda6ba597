"""Tests for environment configuration."""

import dataclasses

import pytest

from mcp_server_travel_amadeus.config import (
    DEFAULT_HOSTNAME,
    AmadeusSettings,
    ConfigurationError,
    get_log_level,
)


class TestAmadeusSettings:
    def test_reads_all_values(self):
        settings = AmadeusSettings.from_env({
            "AMADEUS_CLIENT_ID": "abc",
            "AMADEUS_CLIENT_SECRET": "xyz",
            "AMADEUS_HOSTNAME": "test",
        })

        assert settings == AmadeusSettings(client_id="abc", client_secret="xyz", hostname="test")

    def test_hostname_defaults_to_production(self):
        settings = AmadeusSettings.from_env({"AMADEUS_CLIENT_ID": "abc", "AMADEUS_CLIENT_SECRET": "xyz"})

        assert settings.hostname == DEFAULT_HOSTNAME == "production"

    def test_empty_hostname_uses_default(self):
        settings = AmadeusSettings.from_env({
            "AMADEUS_CLIENT_ID": "abc",
            "AMADEUS_CLIENT_SECRET": "xyz",
            "AMADEUS_HOSTNAME": "",
        })

        assert settings.hostname == "production"

    @pytest.mark.parametrize("environ", [
        {},
        {"AMADEUS_CLIENT_ID": "abc"},
        {"AMADEUS_CLIENT_SECRET": "xyz"},
        {"AMADEUS_CLIENT_ID": "", "AMADEUS_CLIENT_SECRET": "xyz"},
    ])
    def test_missing_credentials(self, environ):
        with pytest.raises(ConfigurationError) as exc_info:
            AmadeusSettings.from_env(environ)

        message = str(exc_info.value)
        assert "AMADEUS_CLIENT_ID" in message
        assert "AMADEUS_CLIENT_SECRET" in message

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)

    def test_reads_process_environment_by_default(self, amadeus_env):
        assert AmadeusSettings.from_env().client_id == "test_client_id_12345"

    def test_masked_client_id(self):
        settings = AmadeusSettings("test_client_id_12345", "secret")
        assert settings.masked_client_id() == "test_cli..."

    def test_settings_are_frozen(self):
        settings = AmadeusSettings("abc", "xyz")
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.client_id = "other"


class TestLogLevel:
    def test_default(self):
        assert get_log_level({}) == "INFO"

    def test_normalized_to_upper_case(self):
        assert get_log_level({"AMADEUS_MCP_LOG_LEVEL": "debug"}) == "DEBUG"
