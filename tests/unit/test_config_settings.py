import logging

import pytest

from ldap_rest_client.config import settings
from ldap_rest_client.config.settings import (
    ClientConfig,
    CookieAuthConfig,
    HmacAuthConfig,
    _load_secret_from_file,
    load_settings,
    normalize_config,
    validate_config,
)
from tests.conftest import SECRET


def make_config(**overrides):
    base = dict(
        base_url="https://ldap-rest.example.com",
        auth=HmacAuthConfig(service_id="test-service", secret=SECRET),
    )
    base.update(overrides)
    return ClientConfig(**base)


@pytest.fixture
def fake_run_secrets(monkeypatch, tmp_path):
    """Point /run/secrets at a temp directory."""
    real_path = settings.Path

    def fake_path(target):
        if str(target) == "/run/secrets":
            return tmp_path
        return real_path(target)

    monkeypatch.setattr(settings, "Path", fake_path)
    return tmp_path


@pytest.fixture
def clean_env(monkeypatch):
    for var in ("LDAP_REST_BASE_URL", "LDAP_REST_TIMEOUT", "LDAP_REST_SERVICE_ID", "LDAP_REST_SECRET"):
        monkeypatch.delenv(var, raising=False)


def test_valid_hmac_config_passes():
    validate_config(make_config())


def test_valid_cookie_config_passes():
    validate_config(make_config(auth=CookieAuthConfig()))
    validate_config(make_config(auth=None))


@pytest.mark.parametrize("base_url", ["", "   "])
def test_base_url_required(base_url):
    with pytest.raises(ValueError, match="base_url is required"):
        validate_config(make_config(base_url=base_url))


@pytest.mark.parametrize("base_url", ["not-a-url", "ldap-rest.example.com", "https://"])
def test_base_url_must_be_valid(base_url):
    with pytest.raises(ValueError, match="base_url must be a valid URL"):
        validate_config(make_config(base_url=base_url))


def test_service_id_required():
    with pytest.raises(ValueError, match="service_id is required for HMAC authentication"):
        validate_config(make_config(auth=HmacAuthConfig(service_id="", secret=SECRET)))


def test_secret_required():
    with pytest.raises(ValueError, match="secret is required for HMAC authentication"):
        validate_config(make_config(auth=HmacAuthConfig(service_id="svc", secret="")))


def test_short_secret_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="ldap_rest_client.config.settings"):
        validate_config(make_config(auth=HmacAuthConfig(service_id="svc", secret="short")))

    assert any("at least 32 characters (current: 5)" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("timeout", [0, -1, float("inf"), float("nan"), "30000", True])
def test_timeout_must_be_positive_number(timeout):
    with pytest.raises(ValueError, match="timeout must be a positive number"):
        validate_config(make_config(timeout=timeout))


def test_normalize_applies_defaults():
    cfg = normalize_config(ClientConfig(base_url="https://ldap-rest.example.com/"))
    assert cfg.base_url == "https://ldap-rest.example.com"
    assert cfg.auth == CookieAuthConfig()
    assert cfg.timeout == 30000


def test_normalize_keeps_explicit_values():
    auth = HmacAuthConfig(service_id="svc", secret=SECRET)
    cfg = normalize_config(ClientConfig(base_url="https://x.example.com", auth=auth, timeout=5000))
    assert cfg.auth is auth
    assert cfg.timeout == 5000


def test_hmac_config_repr_hides_secret():
    assert SECRET not in repr(HmacAuthConfig(service_id="svc", secret=SECRET))


def test_load_secret_prefers_run_secrets(fake_run_secrets, monkeypatch):
    (fake_run_secrets / "ldap_rest_secret").write_text("file-secret\n")
    monkeypatch.setenv("LDAP_REST_SECRET", "env-secret")
    assert _load_secret_from_file("ldap_rest_secret", "LDAP_REST_SECRET") == "file-secret"


def test_load_secret_falls_back_to_env(fake_run_secrets, monkeypatch):
    monkeypatch.setenv("LDAP_REST_SECRET", "env-secret")
    assert _load_secret_from_file("ldap_rest_secret", "LDAP_REST_SECRET") == "env-secret"


def test_load_secret_missing(fake_run_secrets, clean_env):
    assert _load_secret_from_file("ldap_rest_secret", "LDAP_REST_SECRET") is None


def test_load_settings_hmac(fake_run_secrets, clean_env, monkeypatch):
    monkeypatch.setenv("LDAP_REST_BASE_URL", "https://ldap-rest.example.com")
    monkeypatch.setenv("LDAP_REST_TIMEOUT", "5000")
    monkeypatch.setenv("LDAP_REST_SERVICE_ID", "registration-service")
    monkeypatch.setenv("LDAP_REST_SECRET", SECRET)

    cfg = load_settings()

    assert cfg.base_url == "https://ldap-rest.example.com"
    assert cfg.timeout == 5000
    assert cfg.auth == HmacAuthConfig(service_id="registration-service", secret=SECRET)


def test_load_settings_cookie_when_secret_missing(fake_run_secrets, clean_env, monkeypatch):
    monkeypatch.setenv("LDAP_REST_BASE_URL", "https://ldap-rest.example.com")
    monkeypatch.setenv("LDAP_REST_SERVICE_ID", "registration-service")

    cfg = load_settings()

    assert cfg.auth == CookieAuthConfig()
    assert cfg.timeout is None


def test_load_settings_requires_base_url(fake_run_secrets, clean_env):
    with pytest.raises(RuntimeError, match="LDAP_REST_BASE_URL is required"):
        load_settings()


def test_load_settings_rejects_bad_timeout(fake_run_secrets, clean_env, monkeypatch):
    monkeypatch.setenv("LDAP_REST_BASE_URL", "https://ldap-rest.example.com")
    monkeypatch.setenv("LDAP_REST_TIMEOUT", "soon")
    with pytest.raises(RuntimeError, match="LDAP_REST_TIMEOUT must be an integer"):
        load_settings()
