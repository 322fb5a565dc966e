# msgkit:header:start
#
#   project      : MsgKit
#   file         : summary.py
#   file_relpath : src/msgkit/cli/commands/summary.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""MsgKit `summary` command.

Prints per-kind counts for a serialized document and the first recorded error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from msgkit.cli.cmd_common import exit_for, is_color_enabled, read_msgs_or_exit
from msgkit.msg.model import MsgType

if TYPE_CHECKING:
    from msgkit.msg.model import AllMsgs, Msgs, MsgStats


@click.command(
    name="summary",
    help="Print per-kind message counts for FILE ('-' reads from stdin).",
)
@click.argument("stream", metavar="FILE", type=click.File("r", encoding="utf-8"))
@click.pass_context
def summary_command(ctx: click.Context, stream: TextIO) -> None:
    """Print counts per kind, the total and the first error, if any.

    Args:
        ctx (click.Context): Current Click context.
        stream (TextIO): The message document.
    """
    msgs: Msgs = read_msgs_or_exit(ctx, stream)
    color: bool = is_color_enabled(ctx)

    stats: MsgStats = msgs.stats()
    counts: dict[str, int] = stats.to_dict()
    for kind in (MsgType.ERROR, MsgType.WARN, MsgType.INFO, MsgType.SKIP):
        label: str = f"{kind.value:<5}: {counts[kind.value]}"
        click.echo(kind.color(label) if color and counts[kind.value] else label)
    click.echo(f"total: {stats.total}")

    grouped: AllMsgs = msgs.group_by_kind()
    first: BaseException | None = grouped.error()
    if first is not None:
        click.echo(f"first error: {first}")

    exit_for(ctx, msgs)
