"""Hostname → :class:`HostCategory` classification.

Checks run in a fixed order and the first match wins:

    empty → exact production host → preview marker → subdomain marker → unknown

so ``staging.preview.vercel.app`` is a preview deployment, not staging.
Only lower-casing is applied to the input.  Ports, trailing dots and
punycode are left as-is and simply fail to match, which lands the host in
``UNKNOWN`` and therefore blocks indexing.
"""

from __future__ import annotations

from typing import Optional

from indexgate.policy.domain import DomainConfig
from indexgate.policy.models import HostCategory, HostClassification


def _contains_any(hostname: str, markers) -> bool:
    return any(marker in hostname for marker in markers)


def classify_host(hostname: Optional[str], config: DomainConfig) -> HostClassification:
    """Classify *hostname* against *config*.

    Never raises: ``None``, empty strings and non-string values classify as
    :attr:`HostCategory.UNKNOWN`.
    """
    if not isinstance(hostname, str) or not hostname:
        return HostClassification(hostname="", category=HostCategory.UNKNOWN)

    host = hostname.lower()

    if host in config.production_hosts:
        category = HostCategory.PRODUCTION_MAIN
    elif _contains_any(host, config.preview_markers):
        category = HostCategory.PREVIEW_DEPLOYMENT
    elif _contains_any(host, config.subdomain_markers):
        category = HostCategory.SUBDOMAIN_STAGING
    else:
        category = HostCategory.UNKNOWN

    return HostClassification(hostname=host, category=category)
