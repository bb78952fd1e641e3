"""Policy package — host classification & indexing decisions."""

from indexgate.policy.classifier import classify_host
from indexgate.policy.directives import (
    INDEX_DIRECTIVE,
    NOINDEX_DIRECTIVE,
    canonical_for,
    render_robots_txt,
    robots_directive,
    robots_metadata,
)
from indexgate.policy.domain import ConfigError, DomainConfig
from indexgate.policy.engine import NOINDEX_POLICY, build_policy, resolve_policy
from indexgate.policy.models import HostCategory, HostClassification, IndexingPolicy

__all__ = [
    "classify_host",
    "ConfigError",
    "DomainConfig",
    "build_policy",
    "resolve_policy",
    "robots_directive",
    "robots_metadata",
    "canonical_for",
    "render_robots_txt",
    "INDEX_DIRECTIVE",
    "NOINDEX_DIRECTIVE",
    "NOINDEX_POLICY",
    "HostCategory",
    "HostClassification",
    "IndexingPolicy",
]
