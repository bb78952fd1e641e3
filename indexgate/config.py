"""Centralised settings for indexgate.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

Settings are validated when they are loaded, not on import: call
:func:`get_settings` (cached) or :func:`load_settings` (fresh).  The
classifier never reads the environment itself; callers build a
:class:`DomainConfig` (usually via ``get_settings().domain_config()``) and
pass it in explicitly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

from indexgate.policy.domain import (
    DEFAULT_DOMAIN,
    DEFAULT_PREVIEW_MARKERS,
    DEFAULT_SUBDOMAIN_MARKERS,
    ConfigError,
    DomainConfig,
)

__all__ = [
    "DEFAULT_DOMAIN",
    "DEFAULT_PREVIEW_MARKERS",
    "DEFAULT_SUBDOMAIN_MARKERS",
    "DEPLOY_ENV_VARS",
    "ConfigError",
    "DomainConfig",
    "Settings",
    "detect_deploy_env",
    "get_settings",
    "load_settings",
]

logger = logging.getLogger(__name__)

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

# Checked in order; the first one set decides the deployment environment.
DEPLOY_ENV_VARS: Tuple[str, ...] = ("VERCEL_ENV", "APP_ENV", "NODE_ENV")


def _split_csv(raw: Optional[str], default: Tuple[str, ...]) -> Tuple[str, ...]:
    if raw is None or not raw.strip():
        return default
    return tuple(part for part in raw.split(",") if part.strip())


def detect_deploy_env(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the lower-cased deployment environment name.

    ``VERCEL_ENV`` wins over the generic variables because a Vercel preview
    build runs with ``NODE_ENV=production`` but ``VERCEL_ENV=preview``.
    """
    env = os.environ if environ is None else environ
    for var in DEPLOY_ENV_VARS:
        value = env.get(var)
        if value and value.strip():
            logger.debug("deploy environment %r taken from %s", value.strip(), var)
            return value.strip().lower()
    logger.debug("no deploy environment variable set; assuming development")
    return "development"


# ---------------------------------------------------------------------------
# Process settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Settings:
    site_domain: str = DEFAULT_DOMAIN
    site_url: Optional[str] = None
    preview_markers: Tuple[str, ...] = DEFAULT_PREVIEW_MARKERS
    subdomain_markers: Tuple[str, ...] = DEFAULT_SUBDOMAIN_MARKERS
    deploy_env: str = "development"
    log_level: str = "WARNING"
    _domain_config: Optional[DomainConfig] = field(default=None, repr=False, compare=False)

    @property
    def is_production(self) -> bool:
        """``True`` only for the production deployment environment."""
        return self.deploy_env == "production"

    def domain_config(self) -> DomainConfig:
        """Return the classifier configuration described by these settings."""
        if self._domain_config is not None:
            return self._domain_config
        return DomainConfig.for_domain(
            self.site_domain,
            preview_markers=self.preview_markers,
            subdomain_markers=self.subdomain_markers,
            canonical_url=self.site_url,
        )


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Assemble :class:`Settings` from *environ* (defaults to ``os.environ``).

    The domain configuration is validated eagerly so a bad ``SITE_DOMAIN``
    or ``SITE_URL`` fails at start-up rather than on the first request.

    Raises:
        ConfigError: If the resulting domain configuration is invalid.
    """
    env = os.environ if environ is None else environ

    preview = _split_csv(env.get("PREVIEW_MARKERS"), DEFAULT_PREVIEW_MARKERS)
    subdomain = _split_csv(env.get("SUBDOMAIN_MARKERS"), DEFAULT_SUBDOMAIN_MARKERS)
    domain = env.get("SITE_DOMAIN", DEFAULT_DOMAIN)
    site_url = env.get("SITE_URL") or None

    domain_config = DomainConfig.for_domain(
        domain,
        preview_markers=preview,
        subdomain_markers=subdomain,
        canonical_url=site_url,
    )

    return Settings(
        site_domain=domain,
        site_url=site_url,
        preview_markers=domain_config.preview_markers,
        subdomain_markers=domain_config.subdomain_markers,
        deploy_env=detect_deploy_env(env),
        log_level=env.get("LOG_LEVEL", "WARNING").upper(),
        _domain_config=domain_config,
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use.

    Raises:
        ConfigError: If the environment describes an invalid domain.
    """
    return load_settings()
