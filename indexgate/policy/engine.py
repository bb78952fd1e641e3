"""Turn a host classification plus the deployment flag into an IndexingPolicy."""

from __future__ import annotations

from typing import Optional

from indexgate.policy.classifier import classify_host
from indexgate.policy.domain import DomainConfig
from indexgate.policy.models import HostCategory, HostClassification, IndexingPolicy

NOINDEX_POLICY = IndexingPolicy(
    should_index=False,
    should_follow=False,
    canonical_url=None,
    include_analytics=False,
    include_sitemap=False,
)


def build_policy(
    classification: HostClassification,
    is_production: bool,
    canonical_url: str,
) -> IndexingPolicy:
    """Return the policy for *classification* in the given environment.

    Indexing is allowed only on a production main host in a production
    deployment; every other combination gets :data:`NOINDEX_POLICY`.
    """
    should_index = bool(is_production) and classification.category is HostCategory.PRODUCTION_MAIN
    if not should_index:
        return NOINDEX_POLICY

    return IndexingPolicy(
        should_index=True,
        should_follow=True,
        canonical_url=canonical_url,
        include_analytics=True,
        include_sitemap=True,
    )


def resolve_policy(
    hostname: Optional[str],
    config: DomainConfig,
    is_production: bool,
) -> IndexingPolicy:
    """Classify *hostname* and build its policy in one call."""
    return build_policy(classify_host(hostname, config), is_production, config.canonical_url)
