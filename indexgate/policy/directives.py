"""Crawler-facing renderings of an :class:`IndexingPolicy`.

These helpers only build values (strings and dicts).  Emitting them as a
meta tag, an ``X-Robots-Tag`` header or a ``robots.txt`` response is left to
whatever serves the site.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional
from urllib.parse import urlsplit

from indexgate.policy.models import IndexingPolicy

INDEX_DIRECTIVE = "index, follow"
NOINDEX_DIRECTIVE = "noindex, nofollow, noarchive, nosnippet, noimageindex"


def robots_directive(policy: IndexingPolicy) -> str:
    """Return the robots meta / header value for *policy*."""
    if policy.should_index and policy.should_follow:
        return INDEX_DIRECTIVE
    return NOINDEX_DIRECTIVE


def robots_metadata(policy: IndexingPolicy) -> dict[str, Any]:
    """Return the ``robots`` metadata object used by Next.js ``metadata`` exports."""
    if policy.should_index:
        return {
            "index": True,
            "follow": True,
            "googleBot": {
                "index": True,
                "follow": True,
                "max-video-preview": -1,
                "max-image-preview": "large",
                "max-snippet": -1,
            },
        }
    return {
        "index": False,
        "follow": False,
        "nocache": True,
        "googleBot": {
            "index": False,
            "follow": False,
            "noimageindex": True,
            "nosnippet": True,
        },
    }


def canonical_for(policy: IndexingPolicy, path: str = "/") -> Optional[str]:
    """Return the canonical URL of *path*, or ``None`` when *policy* blocks indexing.

    Query strings and fragments are dropped; the site root maps to the bare
    canonical URL.
    """
    if not policy.should_index or policy.canonical_url is None:
        return None

    clean_path = urlsplit(path or "/").path
    if not clean_path.startswith("/"):
        clean_path = "/" + clean_path
    if clean_path == "/":
        return policy.canonical_url
    return policy.canonical_url.rstrip("/") + clean_path


def render_robots_txt(
    policy: IndexingPolicy,
    sitemap_path: str = "/sitemap.xml",
    disallow: Iterable[str] = (),
) -> str:
    """Return a ``robots.txt`` body for *policy*.

    An indexable site allows everything except *disallow* and advertises its
    sitemap; anything else disallows the whole site.
    """
    if not policy.should_index:
        return "User-agent: *\nDisallow: /\n"

    lines = ["User-agent: *", "Allow: /"]
    lines.extend(f"Disallow: {rule}" for rule in disallow)
    if policy.include_sitemap:
        sitemap_url = canonical_for(policy, sitemap_path)
        if sitemap_url:
            lines.append("")
            lines.append(f"Sitemap: {sitemap_url}")
    return "\n".join(lines) + "\n"
