"""The classifier's immutable domain configuration.

Nothing here reads the environment; :mod:`indexgate.config` turns settings
into a :class:`DomainConfig`, and tests build one directly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple
from urllib.parse import urlsplit

DEFAULT_DOMAIN = "example.com"
DEFAULT_PREVIEW_MARKERS: Tuple[str, ...] = ("vercel.app", "netlify.app", "surge.sh")
DEFAULT_SUBDOMAIN_MARKERS: Tuple[str, ...] = ("staging.", "dev.", "test.")

_BAD_DOMAIN_CHARS = re.compile(r"[\s/:?#@]")


class ConfigError(ValueError):
    """Raised when the site configuration cannot produce a valid DomainConfig."""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _normalise_markers(markers: Iterable[str], kind: str) -> Tuple[str, ...]:
    if isinstance(markers, str):
        raise ConfigError(
            f"{kind.capitalize()} markers must be a collection of strings, got {markers!r}."
        )
    cleaned = []
    for marker in markers:
        value = marker.strip().lower()
        if not value:
            raise ConfigError(f"Empty {kind} marker in configuration.")
        if value not in cleaned:
            cleaned.append(value)
    return tuple(cleaned)


def _validate_site_url(url: str) -> str:
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigError(f"SITE_URL must be an absolute http(s) URL, got {url!r}.")
    return url.rstrip("/")


def _bare_domain(domain: str) -> str:
    bare = (domain or "").strip().lower()
    if bare.startswith("www."):
        bare = bare[len("www."):]
    labels = bare.split(".")
    # Trailing dots and empty labels would never equal a Host header value.
    if not bare or _BAD_DOMAIN_CHARS.search(bare) or len(labels) < 2 or not all(labels):
        raise ConfigError(f"Site domain must be a bare hostname, got {domain!r}.")
    return bare


# ---------------------------------------------------------------------------
# DomainConfig
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DomainConfig:
    """Immutable inputs to :func:`indexgate.policy.classify_host`.

    Prefer :meth:`for_domain`, which derives the bare and ``www.`` production
    hosts from one domain.  Direct construction is still normalised: hosts
    and markers are lower-cased and markers are validated.
    """

    production_hosts: frozenset[str]
    preview_markers: Tuple[str, ...] = DEFAULT_PREVIEW_MARKERS
    subdomain_markers: Tuple[str, ...] = DEFAULT_SUBDOMAIN_MARKERS
    canonical_url: str = "https://www." + DEFAULT_DOMAIN

    def __post_init__(self) -> None:
        if isinstance(self.production_hosts, str):
            raise ConfigError("production_hosts must be a collection of hostnames.")
        hosts = frozenset(host.strip().lower() for host in self.production_hosts)
        object.__setattr__(self, "production_hosts", hosts)
        object.__setattr__(
            self, "preview_markers", _normalise_markers(self.preview_markers, "preview")
        )
        object.__setattr__(
            self, "subdomain_markers", _normalise_markers(self.subdomain_markers, "subdomain")
        )

    @classmethod
    def for_domain(
        cls,
        domain: str,
        *,
        preview_markers: Iterable[str] = DEFAULT_PREVIEW_MARKERS,
        subdomain_markers: Iterable[str] = DEFAULT_SUBDOMAIN_MARKERS,
        canonical_url: Optional[str] = None,
    ) -> DomainConfig:
        """Build a config whose production hosts are *domain* and ``www.`` + *domain*.

        Raises:
            ConfigError: If *domain* is not a bare hostname (empty, a URL,
                a trailing dot or an empty label), if a marker collection is
                a plain string or holds an empty marker, or if
                *canonical_url* is not an absolute http(s) URL.
        """
        bare = _bare_domain(domain)
        url = _validate_site_url(canonical_url) if canonical_url else f"https://www.{bare}"

        return cls(
            production_hosts=frozenset({bare, f"www.{bare}"}),
            preview_markers=preview_markers,  # type: ignore[arg-type]
            subdomain_markers=subdomain_markers,  # type: ignore[arg-type]
            canonical_url=url,
        )
