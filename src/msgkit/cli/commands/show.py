# msgkit:header:start
#
#   project      : MsgKit
#   file         : show.py
#   file_relpath : src/msgkit/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""MsgKit `show` command.

Prints the messages of a serialized document, optionally restricted to a subset of
kinds and reordered by kind precedence (errors, warnings, infos, skips).
"""

from __future__ import annotations

from typing import Callable, TextIO

import click

from msgkit.cli.cmd_common import exit_for, is_color_enabled, read_msgs_or_exit
from msgkit.msg.model import Msgs
from msgkit.msg.render import render_msg_line

SELECTIONS: dict[str, Callable[[Msgs], Msgs]] = {
    "all": lambda msgs: msgs,
    "infos": Msgs.infos,
    "warns": Msgs.warns,
    "skips": Msgs.skips,
    "errors": Msgs.errors,
    "non-infos": Msgs.non_infos,
    "non-errors": Msgs.non_errors,
}


@click.command(
    name="show",
    help="Print the messages of FILE ('-' reads from stdin).",
)
@click.argument("stream", metavar="FILE", type=click.File("r", encoding="utf-8"))
@click.option(
    "--only",
    type=click.Choice(list(SELECTIONS)),
    default="all",
    show_default=True,
    help="Restrict output to a subset of message kinds.",
)
@click.option(
    "--grouped",
    is_flag=True,
    default=False,
    help="Order messages by kind: errors, warnings, infos, then skips.",
)
@click.option(
    "--yaml",
    "as_yaml",
    is_flag=True,
    default=False,
    help="Print each message as a YAML block instead of a single line.",
)
@click.pass_context
def show_command(
    ctx: click.Context,
    stream: TextIO,
    *,
    only: str,
    grouped: bool,
    as_yaml: bool,
) -> None:
    """Print the selected messages and exit with FAILURE if any error is present.

    Args:
        ctx (click.Context): Current Click context.
        stream (TextIO): The message document.
        only (str): Name of the selection in `SELECTIONS`.
        grouped (bool): Reorder by kind precedence.
        as_yaml (bool): Emit YAML blocks rather than one-line summaries.
    """
    msgs: Msgs = read_msgs_or_exit(ctx, stream)

    selected: Msgs = SELECTIONS[only](msgs)
    if grouped:
        selected = selected.group_by_kind().to_msgs()

    if as_yaml:
        selected.log(click.echo)
    else:
        color: bool = is_color_enabled(ctx)
        for msg in selected:
            click.echo(render_msg_line(msg, color=color))

    exit_for(ctx, msgs)
