"""ARGUS UTILS CLI entry point.

Defines the top-level ``argus-utils`` command (via Click-Extra) and registers
the helper subcommands.

Currently available commands
- ``format``   — render a printf-style template.
- ``split``    — split text on a delimiter.
- ``b64``      — base64-encode text or a file, optionally URL-escaped.
- ``to-cifs``  — rewrite a UNC path as an ``smb://`` URI.
- ``to-unc``   — rewrite an ``smb://`` URI as a UNC path.
- ``str2bool`` — parse a service boolean.

Notes
- The CLI version is sourced from `argus_utils.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ argus-utils --version
    $ argus-utils to-cifs '\\\\nas\\recordings\\show.ts'
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from argus_utils import __version__
from argus_utils.interfaces.redactor import RedactorMode
from argus_utils.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .commands import b64, format_, split_, str2bool, to_cifs, to_unc
from .helpers import hyperlink, parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("argus-utils", appauthor=False, ensure_exists=True)) / "latest.log"
)


HELP = """ARGUS UTILS command-line interface.

    Text, binary and path helpers for an ARGUS TV recording service: format
    request strings, split responses, base64-encode payloads for transport, and
    turn the UNC paths the service reports into smb:// URIs a local player can
    open (and back).
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Samba URIs: " + hyperlink("https://www.iana.org/assignments/uri-schemes/prov/smb"),
        "  Base64    : " + hyperlink("https://datatracker.ietf.org/doc/html/rfc4648"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option("-v", "--verbose", "verbose_count", count=True, help="More console output (repeatable).")
@click.option("-q", "--quiet", "quiet_count", count=True, help="Less console output (repeatable).")
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything, with timestamps and logger names.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="ARGUS_UTILS_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="Where the flight recorder writes.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="ARGUS_UTILS_FLIGHT_RECORDER_CAPACITY",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    help="Buffer DEBUG records and write them to --log-path on a warning.",
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    default=False,
    help="Also write the flight recorder buffer on exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="ARGUS_UTILS_LOGGER_LEVELS",
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
    help="NAME=LEVEL threshold for one logger, e.g. -L argus_utils.utils.paths=DEBUG.",
)
@click.option(
    "--redactor-mode",
    type=click.Choice([mode.value for mode in RedactorMode], case_sensitive=False),
    default=RedactorMode.LENIENT.value,
    show_default=True,
    help="Mask only passwords in logged smb:// URIs (lenient) or user names too (strict).",
)
@clickx.pass_context
def argus_utils(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
    redactor_mode: str,
) -> None:
    """ARGUS UTILS command-line interface."""
    level = console_level(verbose_count, quiet_count)
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=ctx.color is not False)
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush,
            )
        )
    # Root passes everything; each handler applies its own threshold.
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush,
        logger_levels=logger_levels,
        redactor_mode=redactor_mode,
    )

    ctx.obj = {"redactor_mode": redactor_mode.lower()}
    ctx.call_on_close(logging.shutdown)


def console_level(verbose_count: int, quiet_count: int) -> int:
    """WARNING shifted one level per -v (down) or -q (up), clamped to DEBUG..CRITICAL."""
    level = logging.WARNING + 10 * (quiet_count - verbose_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


for command in (format_, split_, b64, to_cifs, to_unc, str2bool):
    argus_utils.add_command(command)
