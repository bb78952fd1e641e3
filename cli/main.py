"""indexgate CLI — inspect how a hostname would be classified and indexed.

Usage:
    python cli/main.py --help

Commands:
    classify  → host category only
    policy    → full indexing policy (optionally as JSON)
    robots    → robots.txt body the policy implies
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from indexgate.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
import logging
import os
from typing import Optional

import typer

from indexgate.config import ConfigError, DomainConfig, Settings, load_settings
from indexgate.log import configure_logging
from indexgate.policy import (
    build_policy,
    canonical_for,
    classify_host,
    render_robots_txt,
    resolve_policy,
    robots_directive,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="indexgate",
    help="Decide whether a hostname should be indexed by search engines.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _domain_config(ctx: typer.Context) -> DomainConfig:
    return ctx.obj["domain_config"]


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj["settings"]


def _is_production(ctx: typer.Context, flag: Optional[bool]) -> bool:
    if flag is None:
        return _settings(ctx).is_production
    return flag


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------

@app.callback()
def main(
    ctx: typer.Context,
    domain: Optional[str] = typer.Option(
        None,
        "--domain",
        help="Production domain (overrides SITE_DOMAIN and ignores SITE_URL).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Resolve the domain configuration shared by every command."""
    environ = dict(os.environ)
    if domain is not None:
        environ["SITE_DOMAIN"] = domain
        environ.pop("SITE_URL", None)

    try:
        settings = load_settings(environ)
    except ConfigError as exc:
        typer.echo(f"[error] {exc}", err=True)
        raise typer.Exit(1)

    configure_logging("DEBUG" if verbose else settings.log_level)
    config = settings.domain_config()

    logger.debug("production hosts: %s", sorted(config.production_hosts))
    ctx.obj = {"settings": settings, "domain_config": config}


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command("classify")
def classify(
    ctx: typer.Context,
    host: str = typer.Argument(..., help="Hostname to classify (no port)."),
) -> None:
    """Print the category HOST falls into."""
    result = classify_host(host, _domain_config(ctx))
    typer.echo(f"[classify] {result.hostname or '(empty)'} -> {result.category.value}")


@app.command("policy")
def policy(
    ctx: typer.Context,
    host: str = typer.Argument(..., help="Hostname to evaluate (no port)."),
    production: Optional[bool] = typer.Option(
        None,
        "--production/--no-production",
        help="Force the deployment environment (default: from VERCEL_ENV / APP_ENV / NODE_ENV).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the policy as JSON."),
) -> None:
    """Print the indexing policy for HOST."""
    config = _domain_config(ctx)
    is_prod = _is_production(ctx, production)
    classification = classify_host(host, config)
    result = build_policy(classification, is_prod, config.canonical_url)

    if as_json:
        payload = {
            "hostname": classification.hostname,
            "category": classification.category.value,
            "is_production": is_prod,
            "robots": robots_directive(result),
            **result.to_dict(),
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.echo(f"[policy] Host      : {classification.hostname or '(empty)'}")
    typer.echo(f"[policy] Category  : {classification.category.value}")
    typer.echo(f"[policy] Production: {is_prod}")
    typer.echo(f"[policy] Robots    : {robots_directive(result)}")
    typer.echo(f"[policy] Canonical : {canonical_for(result) or '(none)'}")
    typer.echo(f"[policy] Analytics : {result.include_analytics}")
    typer.echo(f"[policy] Sitemap   : {result.include_sitemap}")


@app.command("robots")
def robots(
    ctx: typer.Context,
    host: str = typer.Argument(..., help="Hostname to evaluate (no port)."),
    production: Optional[bool] = typer.Option(
        None, "--production/--no-production", help="Force the deployment environment."
    ),
    disallow: list[str] = typer.Option(
        [], "--disallow", help="Extra path to disallow on an indexable site (repeatable)."
    ),
) -> None:
    """Print the robots.txt body HOST should serve."""
    result = resolve_policy(host, _domain_config(ctx), _is_production(ctx, production))
    typer.echo(render_robots_txt(result, disallow=disallow), nl=False)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
