"""Value types produced by the classifier and the policy engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class HostCategory(str, Enum):
    PRODUCTION_MAIN = "PRODUCTION_MAIN"
    SUBDOMAIN_STAGING = "SUBDOMAIN_STAGING"
    PREVIEW_DEPLOYMENT = "PREVIEW_DEPLOYMENT"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class HostClassification:
    """The category a single (lower-cased) hostname falls into."""

    hostname: str
    category: HostCategory


@dataclass(frozen=True)
class IndexingPolicy:
    """What crawlers and auxiliary integrations are allowed to do for a host.

    Every field derives from ``should_index``; a policy that blocks indexing
    never carries a canonical URL and never enables analytics or sitemaps.
    """

    should_index: bool
    should_follow: bool
    canonical_url: Optional[str]
    include_analytics: bool
    include_sitemap: bool

    def to_dict(self) -> dict:
        return {
            "should_index": self.should_index,
            "should_follow": self.should_follow,
            "canonical_url": self.canonical_url,
            "include_analytics": self.include_analytics,
            "include_sitemap": self.include_sitemap,
        }
