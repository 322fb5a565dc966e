# msgkit:header:start
#
#   project      : MsgKit
#   file         : main.py
#   file_relpath : src/msgkit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""Click entry point for the MsgKit CLI.

Group-level options (verbosity, color) are resolved once and placed into ``ctx.obj``;
subcommands read them back through `msgkit.cli.cmd_common`.
"""

from __future__ import annotations

import click

from msgkit.cli.commands.show import show_command
from msgkit.cli.commands.summary import summary_command
from msgkit.cli.options import common_color_options, common_verbose_options, resolve_log_level
from msgkit.config.logging import get_logger, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, no_color: bool) -> None:
    """Initialize logging and color state on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    level: int | None = resolve_log_level(verbose)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    ctx.obj["color_enabled"] = not no_color
    ctx.color = not no_color
    logger.debug("CLI state: log_level=%s color=%s", level, not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="MsgKit CLI: inspect serialized diagnostic messages.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, no_color: bool) -> None:
    """Entry point for the MsgKit CLI."""
    init_common_state(ctx, verbose=verbose, no_color=no_color)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(show_command)

cli.add_command(summary_command)

if __name__ == "__main__":
    cli()
