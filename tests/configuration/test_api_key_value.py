"""Tests for ApiKeyValue."""

import os

import pytest

from mailprefs.configuration.values import ApiKeyValue

KEY_FILE_PATH = os.path.join(os.path.dirname(os.path.realpath(__file__)), "hubspot_api_key")
BLANK_KEY_FILE_PATH = os.path.join(os.path.dirname(os.path.realpath(__file__)), "blank_api_key")


@pytest.fixture(autouse=True)
def _mock_clear_env(monkeypatch):
    """Reset environment variables."""
    monkeypatch.delenv("HUBSPOT_API_KEY", raising=False)
    monkeypatch.delenv("HUBSPOT_API_KEY_FILE", raising=False)
    monkeypatch.delenv("HUBSPOT_API_KEY_PATH", raising=False)


def test_api_key_default():
    """Test call with no environment variable."""
    value = ApiKeyValue(environ_prefix=None)
    assert value.setup("HUBSPOT_API_KEY") is None


def test_api_key_in_env(monkeypatch):
    """Test call with the key in an environment variable."""
    monkeypatch.setenv("HUBSPOT_API_KEY", " env-api-key ")
    value = ApiKeyValue(environ_prefix=None)
    assert value.setup("HUBSPOT_API_KEY") == "env-api-key"


def test_api_key_blank_in_env(monkeypatch):
    """Test a blank key leaves the provider unconfigured."""
    monkeypatch.setenv("HUBSPOT_API_KEY", "   ")
    value = ApiKeyValue("default-api-key", environ_prefix=None)
    assert value.setup("HUBSPOT_API_KEY") is None


def test_api_key_in_file(monkeypatch):
    """Test call with the key file environment variable, which wins over the key."""
    monkeypatch.setenv("HUBSPOT_API_KEY", "env-api-key")
    monkeypatch.setenv("HUBSPOT_API_KEY_FILE", KEY_FILE_PATH)
    value = ApiKeyValue(environ_prefix=None)
    assert value.setup("HUBSPOT_API_KEY") == "file-api-key"


def test_api_key_blank_file(monkeypatch):
    """Test a blank key file leaves the provider unconfigured."""
    monkeypatch.setenv("HUBSPOT_API_KEY_FILE", BLANK_KEY_FILE_PATH)
    value = ApiKeyValue(environ_prefix=None)
    assert value.setup("HUBSPOT_API_KEY") is None


def test_api_key_missing_file(monkeypatch, tmp_path):
    """Test a key file that does not exist raises."""
    monkeypatch.setenv("HUBSPOT_API_KEY_FILE", str(tmp_path / "missing"))
    value = ApiKeyValue(environ_prefix=None)
    with pytest.raises(ValueError, match="cannot be read"):
        value.setup("HUBSPOT_API_KEY")


def test_api_key_in_file_suffix(monkeypatch):
    """Test call with the key file environment variable and non default `file_suffix`."""
    monkeypatch.setenv("HUBSPOT_API_KEY_PATH", KEY_FILE_PATH)
    value = ApiKeyValue(environ_prefix=None, file_suffix="PATH")
    assert value.setup("HUBSPOT_API_KEY") == "file-api-key"


def test_api_key_required():
    """Test a required key raises when not set."""
    value = ApiKeyValue(environ_prefix=None, environ_required=True)
    with pytest.raises(ValueError, match="HUBSPOT_API_KEY_FILE"):
        value.setup("HUBSPOT_API_KEY")
