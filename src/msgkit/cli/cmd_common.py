# msgkit:header:start
#
#   project      : MsgKit
#   file         : cmd_common.py
#   file_relpath : src/msgkit/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""Helpers shared by MsgKit CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from msgkit.config.logging import get_logger
from msgkit.core.exit_codes import ExitCode
from msgkit.msg.io import MsgFormatError, load_msgs

if TYPE_CHECKING:
    from typing import TextIO

    from msgkit.config.logging import MsgkitLogger
    from msgkit.msg.model import Msgs

logger: MsgkitLogger = get_logger(__name__)


def read_msgs_or_exit(ctx: click.Context, stream: TextIO) -> Msgs:
    """Read a message document from ``stream`` or exit with ``USAGE_ERROR``.

    Malformed documents, undecodable bytes and read failures are all reported as a
    single ``Error: <name>: <reason>`` line on stderr.

    Args:
        ctx (click.Context): Current Click context.
        stream (TextIO): Open text stream (a file or stdin).

    Returns:
        Msgs: The loaded collection.
    """
    name: str = getattr(stream, "name", "<stream>")
    try:
        msgs: Msgs = load_msgs(stream.read())
    except (MsgFormatError, UnicodeDecodeError, OSError) as exc:
        logger.debug("Rejected message document %s", name, exc_info=True)
        click.echo(f"Error: {name}: {exc}", err=True)
        ctx.exit(ExitCode.USAGE_ERROR)
    logger.info("Read %d message(s) from %s", len(msgs), name)
    return msgs


def is_color_enabled(ctx: click.Context) -> bool:
    """Return True unless color was disabled on the group."""
    obj: dict[str, object] = ctx.find_root().obj or {}
    return bool(obj.get("color_enabled", True))


def exit_for(ctx: click.Context, msgs: Msgs) -> None:
    """Exit with ``FAILURE`` when ``msgs`` holds an error, ``SUCCESS`` otherwise."""
    code: ExitCode = ExitCode.FAILURE if msgs.group_by_kind().has_error() else ExitCode.SUCCESS
    ctx.exit(code)
