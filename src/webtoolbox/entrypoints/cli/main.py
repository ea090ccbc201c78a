"""webtoolbox CLI entry point.

The ``webtoolbox`` group (built with Click-Extra) sets up logging and then
hands over to one of the toolbox subcommands:

- ``webtoolbox sanitize KIND VALUE``: run a sanitizer.
- ``webtoolbox validate KIND VALUE``: run a validator (exit 1 if invalid).
- ``webtoolbox format-datetime RAW``: parse and render a datetime.
- ``webtoolbox token generate|check``: HMAC tokens.

Toolbox settings (locale, default patterns, secret) come from ``WEBTOOLBOX_*``
environment variables; see `webtoolbox.config`.

Examples
    $ webtoolbox sanitize key "User Name!"
    $ webtoolbox format-datetime 2023-01-15T10:30:00Z --format %Y-%m-%d
    $ WEBTOOLBOX_SECRET=s3cr3t webtoolbox token generate
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from webtoolbox import __version__
from webtoolbox.logging import LoggingSetup, configure_logging, log_startup

from .commands import format_datetime, sanitize, token, validate
from .helpers import parse_log_level

logger = logging.getLogger(__name__)

HELP = """webtoolbox command-line interface.

    Sanitize and validate untrusted input, render datetimes with the configured
    locale or default patterns, and generate or check HMAC tokens. Results go to
    stdout; logs and status messages go to stderr.
    """

DEFAULT_LOG_PATH = Path(user_log_dir("webtoolbox", appauthor=False)) / "latest.log"
LEVEL_STEP = 10


def effective_level(verbose_count: int, quiet_count: int) -> int:
    """Shift WARNING by one level per -v (down) or -q (up), clamped to DEBUG..CRITICAL."""
    level = logging.WARNING + LEVEL_STEP * (quiet_count - verbose_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    help="Log one level more than WARNING per repetition (-v INFO, -vv DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    help="Log one level less than WARNING per repetition (-q ERROR, -qq CRITICAL).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="DEBUG console output with timestamps, logger names and source paths.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=False,
    envvar="WEBTOOLBOX_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Buffer DEBUG records in memory and write them to --log-path once a "
        "WARNING is logged (for example a locale fallback)."
    ),
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="WEBTOOLBOX_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="WEBTOOLBOX_LOGGER_LEVELS",
    show_envvar=True,
    help="Minimum level for one logger as NAME=LEVEL (e.g. -L babel=INFO). Repeatable.",
)
@clickx.pass_context
def webtoolbox(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    flight_recorder: bool,
    log_path: Path,
    logger_levels: dict[str, int],
) -> None:
    """webtoolbox command-line interface."""
    setup = LoggingSetup(
        level=effective_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,
        recorder_path=log_path if flight_recorder else None,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(setup)
    log_startup(logger, setup, handlers, app_version=__version__)
    ctx.call_on_close(logging.shutdown)


for command in (sanitize, validate, format_datetime, token):
    webtoolbox.add_command(command)
