"""Toolbox subcommands for the webtoolbox CLI.

Each command builds a toolbox from the environment, runs one operation and
prints the result to stdout. Toolbox errors become ``ClickException`` (exit
status 1). ``validate`` and ``token check`` exit with status 1 when the answer
is negative so they can be used in shell conditions.
"""

from __future__ import annotations

import logging

import click

from webtoolbox.bootstrap import bootstrap
from webtoolbox.domain.errors import ToolboxError
from webtoolbox.domain.tokens import DEFAULT_ALGORITHM, SUPPORTED_ALGORITHMS

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

SANITIZE_KINDS = {
    "html": "esc_html",
    "string": "sanitize_string",
    "key": "sanitize_key",
    "operator": "sanitize_operator",
    "condition": "sanitize_condition",
    "int": "sanitize_int",
    "email": "sanitize_email",
    "url": "sanitize_url",
}

VALIDATE_KINDS = ("string", "key", "email", "url", "datetime")
FORMAT_KINDS = ("datetime", "date", "time")


@click.command()
@click.argument("kind", type=click.Choice(sorted(SANITIZE_KINDS)))
@click.argument("value")
def sanitize(kind: str, value: str) -> None:
    """Print VALUE after running the KIND sanitizer on it."""
    toolbox = bootstrap()
    click.echo(getattr(toolbox, SANITIZE_KINDS[kind])(value))


@click.command()
@click.argument("kind", type=click.Choice(VALIDATE_KINDS))
@click.argument("value")
@click.option(
    "--format",
    "-f",
    "pattern",
    help="strftime pattern (required for KIND=datetime).",
)
@click.pass_context
def validate(ctx: click.Context, kind: str, value: str, pattern: str | None) -> None:
    """Check whether VALUE is valid for KIND; exit status 1 if not."""
    if kind == "datetime" and not pattern:
        raise click.UsageError("--format is required when KIND is 'datetime'.")
    if kind != "datetime" and pattern:
        raise click.UsageError("--format only applies when KIND is 'datetime'.")

    toolbox = bootstrap()
    if kind == "datetime":
        is_valid = toolbox.validate_datetime(value, pattern)
    else:
        is_valid = getattr(toolbox, f"validate_{kind}")(value)

    if is_valid:
        success(f"Valid {kind}.")
        return
    error(f"Invalid {kind}.")
    ctx.exit(1)


@click.command(name="format-datetime")
@click.argument("raw")
@click.option(
    "--format",
    "-f",
    "pattern",
    help="strftime pattern. Without it, the locale or default patterns apply.",
)
@click.option(
    "--kind",
    type=click.Choice(FORMAT_KINDS),
    default="datetime",
    show_default=True,
    help="Part to render when no --format is given.",
)
def format_datetime(raw: str, pattern: str | None, kind: str) -> None:
    """Parse RAW and print it formatted."""
    toolbox = bootstrap()
    logger.debug("Formatting %r with %s formatter", raw, toolbox.formatter.name)
    try:
        click.echo(toolbox.format_datetime(raw, format=pattern, kind=kind))
    except ToolboxError as e:
        raise click.ClickException(str(e)) from e


@click.group()
def token() -> None:
    """Generate and check HMAC tokens."""


@token.command()
@click.option("--salt", default="", help="Message to sign (random when omitted).")
@click.option(
    "--key",
    default="",
    help="HMAC key (defaults to WEBTOOLBOX_SECRET).",
)
@click.option(
    "--algorithm",
    type=click.Choice(sorted(SUPPORTED_ALGORITHMS), case_sensitive=False),
    default=DEFAULT_ALGORITHM,
    show_default=True,
)
def generate(salt: str, key: str, algorithm: str) -> None:
    """Print a new hex-encoded HMAC token."""
    if key:
        warn("--key is visible in shell history; prefer WEBTOOLBOX_SECRET.")
    toolbox = bootstrap()
    try:
        click.echo(toolbox.generate_token(salt=salt, key=key, algorithm=algorithm))
    except ToolboxError as e:
        raise click.ClickException(str(e)) from e


@token.command()
@click.argument("known")
@click.argument("candidate")
@click.pass_context
def check(ctx: click.Context, known: str, candidate: str) -> None:
    """Compare CANDIDATE to KNOWN in constant time; exit status 1 on mismatch."""
    toolbox = bootstrap()
    if toolbox.check_token(known, candidate):
        success("Tokens match.")
        return
    error("Tokens do not match.")
    ctx.exit(1)
