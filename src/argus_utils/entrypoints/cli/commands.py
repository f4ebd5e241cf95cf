"""Helper subcommands for the ``argus-utils`` CLI.

Each command is a thin wrapper: parse arguments, call one helper, print the
result to **stdout**. Notices go to **stderr** so output can be piped.

Failure modes
- Helper argument errors (empty delimiter, path too short, template/argument
  mismatch) → ``ClickException`` with the helper's message.
- Unreadable ``--file`` or template file, unwritable ``--output`` →
  ``ClickException``.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import click

from argus_utils import config
from argus_utils.adapters.redactor import Redactor
from argus_utils.interfaces.credentials import StaticCredentials
from argus_utils.interfaces.redactor import RedactorMode
from argus_utils.utils import paths
from argus_utils.utils.b64 import b64_encode
from argus_utils.utils.errors import UtilsError
from argus_utils.utils.files import read_file_contents, write_file_contents
from argus_utils.utils.formatting import format_text_v
from argus_utils.utils.split import split
from argus_utils.utils.text import str_to_bool

from .helpers import warn

logger = logging.getLogger(__name__)


INT_PATTERN = re.compile(r"0|-?[1-9]\d*")
FLOAT_PATTERN = re.compile(r"-?(?:0|[1-9]\d*)\.\d+")


def _coerce(value: str) -> int | float | str:
    """Turn canonical numbers into ints/floats so ``%d``/``%f`` work.

    Anything that would not print back unchanged through ``%s`` (``007``,
    ``1_000``, ``1e5``, ``0.50``, ``nan``) stays text.
    """
    if INT_PATTERN.fullmatch(value):
        return int(value)
    if FLOAT_PATTERN.fullmatch(value) and str(float(value)) == value:
        return float(value)
    return value


def _redactor(ctx: click.Context) -> Redactor:
    mode = (ctx.obj or {}).get("redactor_mode", RedactorMode.LENIENT.value)
    return Redactor(RedactorMode(mode))


@click.command("format")
@click.argument("template")
@click.argument("args", nargs=-1)
@click.option(
    "--template-file",
    "template_file",
    is_flag=True,
    default=False,
    help="Treat TEMPLATE as a file path; its lines are joined without newlines.",
)
@click.option(
    "--output",
    "-o",
    "output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the rendered text to this file instead of stdout.",
)
def format_(
    template: str, args: tuple[str, ...], template_file: bool, output: Path | None
) -> None:
    """Render a printf-style TEMPLATE with ARGS.

    Numeric-looking ARGS are passed as numbers, everything else as text.
    """
    if template_file:
        if (contents := read_file_contents(template)) is None:
            raise click.ClickException(f"Cannot read template file {template}")
        template = contents
    try:
        max_capacity = config.get_format_max_capacity()
    except config.InvalidConfigValueError as e:
        raise click.ClickException(str(e)) from e
    try:
        rendered = format_text_v(
            template, [_coerce(a) for a in args], max_capacity=max_capacity
        )
    except UtilsError as e:
        raise click.ClickException(str(e)) from e
    if not rendered and template:
        logger.warning("Template rendered to an empty string")

    if output is None:
        click.echo(rendered)
    elif not write_file_contents(output, rendered):
        raise click.ClickException(f"Cannot write to {output}")


@click.command("split")
@click.argument("text")
@click.argument("delimiter")
@click.option(
    "--max",
    "max_strings",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Maximum number of pieces (0 = unlimited).",
)
def split_(text: str, delimiter: str, max_strings: int) -> None:
    """Split TEXT on DELIMITER, printing one piece per line."""
    try:
        pieces = split(text, delimiter, max_strings)
    except UtilsError as e:
        raise click.ClickException(str(e)) from e
    logger.debug("Split into %d piece(s)", len(pieces))
    for piece in pieces:
        click.echo(piece)


@click.command("b64")
@click.argument("text", required=False)
@click.option(
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Encode the bytes of this file instead of TEXT.",
)
@click.option(
    "--url-safe/--no-url-safe",
    default=False,
    show_default=True,
    help="Percent-escape '+', '/' and '=' in the output.",
)
def b64(text: str | None, file_path: Path | None, url_safe: bool) -> None:
    """Base64-encode TEXT (UTF-8) or the contents of --file."""
    if (text is None) == (file_path is None):
        raise click.UsageError("Provide exactly one of TEXT or --file.")
    if file_path is not None:
        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise click.ClickException(f"Cannot read {file_path}: {e}") from e
    else:
        data = (text or "").encode("utf-8")
    click.echo(b64_encode(data, url_encode=url_safe))


@click.command("to-cifs")
@click.argument("unc_name")
@click.option(
    "--with-credentials/--without-credentials",
    default=False,
    show_default=True,
    help="Insert the SMB account into the resulting URI.",
)
@click.option(
    "--user",
    default=None,
    help=f"SMB user name. Defaults to ${config.SMB_USER_ENV}.",
)
@click.option(
    "--password",
    default=None,
    help=f"SMB password. Defaults to ${config.SMB_PASS_ENV}.",
)
@click.pass_context
def to_cifs(
    ctx: click.Context,
    unc_name: str,
    with_credentials: bool,
    user: str | None,
    password: str | None,
) -> None:
    """Rewrite a UNC path (\\\\host\\share\\...) as an smb:// URI."""
    try:
        uri = paths.to_cifs(unc_name)
    except UtilsError as e:
        raise click.ClickException(str(e)) from e

    if with_credentials:
        env = config.get_smb_credentials()
        credentials = StaticCredentials(
            env.user() if user is None else user,
            env.password() if password is None else password,
        )
        result = paths.insert_user(credentials, uri)
        if not result.injected:
            warn("No SMB user configured; credentials not added.")
        uri = result.path
        logger.info("Resolved %s", _redactor(ctx).sanitize_uri(uri))
    click.echo(uri)


@click.command("to-unc")
@click.argument("cifs_name")
@click.pass_context
def to_unc(ctx: click.Context, cifs_name: str) -> None:
    """Rewrite an smb:// URI as a UNC path."""
    logger.debug("Converting %s", _redactor(ctx).sanitize_uri(cifs_name))
    try:
        click.echo(paths.to_unc(cifs_name))
    except UtilsError as e:
        raise click.ClickException(str(e)) from e


@click.command("str2bool")
@click.argument("value")
def str2bool(value: str) -> None:
    """Print 'true' if VALUE is exactly 'True', else 'false'."""
    click.echo("true" if str_to_bool(value) else "false")
