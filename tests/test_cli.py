"""Tests for the indexgate CLI."""

from __future__ import annotations

import json
import logging

import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()

_ENV_VARS = (
    "SITE_DOMAIN",
    "SITE_URL",
    "PREVIEW_MARKERS",
    "SUBDOMAIN_MARKERS",
    "VERCEL_ENV",
    "APP_ENV",
    "NODE_ENV",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every command against an environment with no site settings."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield
    logging.basicConfig(level=logging.WARNING, force=True)


def _invoke(*args: str):
    return runner.invoke(app, ["--domain", "example.com", *args])


class TestClassifyCommand:
    def test_production_host(self) -> None:
        result = _invoke("classify", "www.example.com")
        assert result.exit_code == 0
        assert "www.example.com -> PRODUCTION_MAIN" in result.stdout

    def test_preview_host(self) -> None:
        result = _invoke("classify", "my-app-git-main.vercel.app")
        assert result.exit_code == 0
        assert "PREVIEW_DEPLOYMENT" in result.stdout

    def test_custom_domain(self) -> None:
        result = runner.invoke(app, ["--domain", "acme.io", "classify", "www.example.com"])
        assert result.exit_code == 0
        assert "UNKNOWN" in result.stdout

    def test_invalid_domain_exits_with_error(self) -> None:
        result = runner.invoke(app, ["--domain", "https://acme.io", "classify", "acme.io"])
        assert result.exit_code == 1
        assert "[error]" in result.output


class TestPolicyCommand:
    def test_indexable_text_output(self) -> None:
        result = _invoke("policy", "www.example.com", "--production")
        assert result.exit_code == 0
        assert "index, follow" in result.stdout
        assert "https://www.example.com" in result.stdout

    def test_blocked_outside_production(self) -> None:
        result = _invoke("policy", "www.example.com", "--no-production")
        assert result.exit_code == 0
        assert "noindex, nofollow" in result.stdout
        assert "(none)" in result.stdout

    def test_json_output(self) -> None:
        result = _invoke("policy", "staging.example.com", "--production", "--json")
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["category"] == "SUBDOMAIN_STAGING"
        assert payload["is_production"] is True
        assert payload["should_index"] is False
        assert payload["canonical_url"] is None

    def test_classifies_host_once(self, monkeypatch) -> None:
        import cli.main as cli_main

        calls = []
        real = cli_main.classify_host

        def counting(host, config):
            calls.append(host)
            return real(host, config)

        monkeypatch.setattr("cli.main.classify_host", counting)
        monkeypatch.setattr("indexgate.policy.engine.classify_host", counting)
        result = _invoke("policy", "www.example.com", "--production")
        assert result.exit_code == 0
        assert calls == ["www.example.com"]


class TestRobotsCommand:
    def test_indexable(self) -> None:
        result = _invoke("robots", "example.com", "--production", "--disallow", "/api/")
        assert result.exit_code == 0
        assert "Allow: /" in result.stdout
        assert "Disallow: /api/" in result.stdout
        assert "Sitemap: https://www.example.com/sitemap.xml" in result.stdout

    def test_blocked(self) -> None:
        result = _invoke("robots", "unknownhost.io", "--production")
        assert result.exit_code == 0
        assert result.stdout == "User-agent: *\nDisallow: /\n"


class TestEnvironment:
    def test_policy_follows_production_env(self, monkeypatch) -> None:
        monkeypatch.setenv("NODE_ENV", "production")
        result = _invoke("policy", "www.example.com", "--json")
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["is_production"] is True
        assert payload["should_index"] is True

    def test_policy_follows_preview_env(self, monkeypatch) -> None:
        monkeypatch.setenv("NODE_ENV", "production")
        monkeypatch.setenv("VERCEL_ENV", "preview")
        result = _invoke("policy", "www.example.com", "--json")
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["is_production"] is False
        assert payload["should_index"] is False

    def test_robots_follows_env(self, monkeypatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        result = _invoke("robots", "www.example.com")
        assert result.exit_code == 0
        assert "Sitemap: https://www.example.com/sitemap.xml" in result.stdout

    def test_site_domain_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("SITE_DOMAIN", "acme.io")
        result = runner.invoke(app, ["classify", "www.acme.io"])
        assert result.exit_code == 0
        assert "PRODUCTION_MAIN" in result.stdout

    def test_bad_site_domain_is_overridden_by_domain_option(self, monkeypatch) -> None:
        monkeypatch.setenv("SITE_DOMAIN", "localhost")
        result = _invoke("classify", "www.example.com")
        assert result.exit_code == 0
        assert "PRODUCTION_MAIN" in result.stdout

    def test_bad_site_domain_reports_error(self, monkeypatch) -> None:
        monkeypatch.setenv("SITE_DOMAIN", "localhost")
        result = runner.invoke(app, ["classify", "www.example.com"])
        assert result.exit_code == 1
        assert "[error]" in result.output
        assert "localhost" in result.output

    def test_bad_site_url_reports_error(self, monkeypatch) -> None:
        monkeypatch.setenv("SITE_URL", "www.example.com")
        result = runner.invoke(app, ["classify", "www.example.com"])
        assert result.exit_code == 1
        assert "[error]" in result.output


class TestVerbose:
    def test_verbose_enables_debug_logging(self) -> None:
        result = runner.invoke(
            app, ["--verbose", "--domain", "example.com", "classify", "example.com"]
        )
        assert result.exit_code == 0
        assert "PRODUCTION_MAIN" in result.stdout
        assert logging.getLogger().level == logging.DEBUG
