"""
Tests for AppConfig.from_env(). Uses monkeypatch to control environment
variables without polluting the real env.
"""

import pytest

from outage_checker.utils.env_util import AppConfig, ConfigError, split_emails

PORTAL_ENV = {"HEP_CITY": "1", "HEP_OFFICE": "4011"}
EMAIL_ENV = {
    "TO_EMAIL": "ana@example.com, marko@example.com",
    "FROM_EMAIL": "alerts@example.com",
    "SMTP_USERNAME": "alerts@example.com",
    "SMTP_PASSWORD": "app-password",
}


def set_env(monkeypatch, values):
    for key, val in values.items():
        monkeypatch.setenv(key, val)


# ─────────────────────────────────────────────────────────────────────────────
# Successful construction
# ─────────────────────────────────────────────────────────────────────────────


class TestFromEnvSuccess:
    def test_full_config(self, clean_env):
        set_env(clean_env, {**PORTAL_ENV, **EMAIL_ENV})
        config = AppConfig.from_env()
        assert config.region_id == "1"
        assert config.office_id == "4011"
        assert config.recipients == ["ana@example.com", "marko@example.com"]
        assert config.from_email == "alerts@example.com"
        assert config.smtp_username == "alerts@example.com"
        assert config.smtp_password == "app-password"
        assert config.can_send_email

    def test_smtp_defaults(self, clean_env):
        set_env(clean_env, {**PORTAL_ENV, **EMAIL_ENV})
        config = AppConfig.from_env()
        assert config.smtp_server == "smtp.gmail.com"
        assert config.smtp_port == 587

    def test_smtp_overrides(self, clean_env):
        set_env(clean_env, {**PORTAL_ENV, **EMAIL_ENV, "SMTP_SERVER": "mail.example.com", "SMTP_PORT": "2525"})
        config = AppConfig.from_env()
        assert config.smtp_server == "mail.example.com"
        assert config.smtp_port == 2525

    def test_dry_run_needs_only_portal_ids(self, clean_env):
        set_env(clean_env, PORTAL_ENV)
        config = AppConfig.from_env(require_email=False)
        assert config.region_id == "1"
        assert config.recipients == []
        assert config.from_email is None
        assert not config.can_send_email

    def test_config_is_frozen(self, clean_env):
        set_env(clean_env, PORTAL_ENV)
        config = AppConfig.from_env(require_email=False)
        with pytest.raises(Exception):
            config.region_id = "2"  # type: ignore


# ─────────────────────────────────────────────────────────────────────────────
# Missing / invalid values
# ─────────────────────────────────────────────────────────────────────────────


class TestFromEnvErrors:
    def test_missing_email_vars_listed(self, clean_env):
        set_env(clean_env, PORTAL_ENV)
        with pytest.raises(ConfigError) as exc:
            AppConfig.from_env()
        for key in EMAIL_ENV:
            assert key in str(exc.value)

    def test_portal_ids_required_even_in_dry_run(self, clean_env):
        with pytest.raises(ConfigError) as exc:
            AppConfig.from_env(require_email=False)
        assert "HEP_CITY" in str(exc.value)
        assert "HEP_OFFICE" in str(exc.value)

    def test_blank_value_counts_as_missing(self, clean_env):
        set_env(clean_env, {**PORTAL_ENV, **EMAIL_ENV, "SMTP_PASSWORD": "   "})
        with pytest.raises(ConfigError, match="SMTP_PASSWORD"):
            AppConfig.from_env()

    def test_bad_port(self, clean_env):
        set_env(clean_env, {**PORTAL_ENV, "SMTP_PORT": "abc"})
        with pytest.raises(ConfigError, match="SMTP_PORT"):
            AppConfig.from_env(require_email=False)

    def test_config_error_is_environment_error(self):
        assert issubclass(ConfigError, EnvironmentError)


class TestSplitEmails:
    def test_split(self):
        assert split_emails(" a@x.hr ,, b@x.hr ") == ["a@x.hr", "b@x.hr"]

    def test_empty(self):
        assert split_emails("") == []
        assert split_emails(None) == []
