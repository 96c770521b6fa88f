# tests/test_config.py
import pydantic
import pytest

from webtools_geocoding.core.config import DEFAULT_ENDPOINT_URL, Settings


def test_defaults(monkeypatch):
    for name in ("ENDPOINT_URL", "REFERER", "TIMEOUT", "RESPONSE_SHAPE", "DEFAULT_LIMIT"):
        monkeypatch.delenv(f"WEBTOOLS_GEOCODING_{name}", raising=False)
    s = Settings(_env_file=None)
    assert s.endpoint_url == DEFAULT_ENDPOINT_URL
    assert s.referer is None
    assert s.response_shape == "features"
    assert s.default_limit == 5


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("WEBTOOLS_GEOCODING_REFERER", "https://example.europa.eu/")
    monkeypatch.setenv("WEBTOOLS_GEOCODING_TIMEOUT", "2.5")
    monkeypatch.setenv("WEBTOOLS_GEOCODING_RESPONSE_SHAPE", "locations")
    s = Settings(_env_file=None)
    assert s.referer == "https://example.europa.eu/"
    assert s.timeout == 2.5
    assert s.response_shape == "locations"


def test_rejects_bad_values(monkeypatch):
    monkeypatch.setenv("WEBTOOLS_GEOCODING_TIMEOUT", "0")
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None)


def test_settings_are_frozen():
    s = Settings(_env_file=None)
    with pytest.raises(pydantic.ValidationError):
        s.referer = "https://elsewhere.example/"
