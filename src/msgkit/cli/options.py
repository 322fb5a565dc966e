# msgkit:header:start
#
#   project      : MsgKit
#   file         : options.py
#   file_relpath : src/msgkit/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color) and their resolution
logic, so the group and its commands can stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from msgkit.config.logging import TRACE_LEVEL, resolve_env_log_level

P = ParamSpec("P")
R = TypeVar("R")


def resolve_log_level(verbose_count: int) -> int | None:
    """Resolve the logging level from ``MSGKIT_LOG_LEVEL`` and the ``-v`` count.

    The environment variable wins when set. Otherwise ``-v`` selects INFO, ``-vv``
    DEBUG and ``-vvv`` TRACE.

    Args:
        verbose_count (int): Number of times the verbose flag was passed.

    Returns:
        int | None: The logging level, or None to keep the default (CRITICAL).
    """
    level_env: int | None = resolve_env_log_level()
    if level_env is not None:
        return level_env
    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``-v/--verbose`` counting option to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    return click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify up to three times for more detail.",
    )(f)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` flag to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    return click.option(
        "--no-color",
        is_flag=True,
        default=False,
        help="Disable colored output.",
    )(f)
