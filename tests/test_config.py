from nhtsa_vin.config import (
    DEFAULT_TIMEOUT,
    build_http_options_from_env,
    merge_http_options,
)


def test_defaults_without_env():
    assert build_http_options_from_env() == {"timeout": DEFAULT_TIMEOUT, "verify": True}


def test_malformed_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("NHTSA_VIN_TIMEOUT", "soon")
    assert build_http_options_from_env()["timeout"] == DEFAULT_TIMEOUT
    monkeypatch.setenv("NHTSA_VIN_TIMEOUT", "-3")
    assert build_http_options_from_env()["timeout"] == DEFAULT_TIMEOUT


def test_verify_flag(monkeypatch):
    monkeypatch.setenv("NHTSA_VIN_VERIFY_TLS", "off")
    assert build_http_options_from_env()["verify"] is False
    monkeypatch.setenv("NHTSA_VIN_VERIFY_TLS", "Yes")
    assert build_http_options_from_env()["verify"] is True


def test_merge_keeps_unrelated_defaults():
    merged = merge_http_options({"headers": {"Accept": "application/json"}})
    assert merged["timeout"] == DEFAULT_TIMEOUT
    assert merged["verify"] is True
    assert merged["headers"] == {"Accept": "application/json"}
