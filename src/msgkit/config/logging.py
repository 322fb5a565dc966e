# msgkit:header:start
#
#   project      : MsgKit
#   file         : logging.py
#   file_relpath : src/msgkit/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""MsgKit logging: a TRACE level, colored stderr output and an env override.

`get_logger` hands out `MsgkitLogger` instances, which add ``trace()`` below DEBUG.
`setup_logging` installs a single `ChalkFormatter` handler on the root logger; the
level comes from the caller, else from ``MSGKIT_LOG_LEVEL``, else `DEFAULT_LOG_LEVEL`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Any, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

DEFAULT_LOG_LEVEL: Final[int] = logging.CRITICAL

LOG_LEVEL_ENV_VAR: Final[str] = "MSGKIT_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

_HANDLER_NAME: Final[str] = "msgkit"

logging.addLevelName(TRACE_LEVEL, "TRACE")


class MsgkitLogger(logging.Logger):
    """Logger with a ``trace()`` method for the TRACE level."""

    def trace(self, msg: object, *args: object, **kwargs: Any) -> None:
        """Log ``msg % args`` at TRACE level, attributed to the caller's frame."""
        if not self.isEnabledFor(TRACE_LEVEL):
            return
        kwargs.setdefault("stacklevel", 2)
        self._log(TRACE_LEVEL, msg, args, **kwargs)


logging.setLoggerClass(MsgkitLogger)


# Highest threshold first; anything below DEBUG uses the last color.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record with `yachalk` according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        text: str = super().format(record)
        for threshold, color in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return color(text)
        return chalk.blue(text)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``MSGKIT_LOG_LEVEL``, or None if unset or unknown.

    Any registered level name is accepted case-insensitively (including ``TRACE``,
    ``WARN``, ``FATAL`` and ``NOTSET``), as is a plain integer such as ``"10"``.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return logging.getLevelNamesMapping().get(raw.upper())


def setup_logging(level: int | None = None) -> None:
    """Install MsgKit's colored stderr handler on the root logger.

    A handler installed by an earlier call is replaced; handlers added by others are
    left alone.

    Args:
        level (int | None): Explicit level. None consults ``MSGKIT_LOG_LEVEL`` and falls
            back to `DEFAULT_LOG_LEVEL`. ``logging.NOTSET`` (0) is a valid choice.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = DEFAULT_LOG_LEVEL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for old in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(ChalkFormatter(DEBUG_LOG_FORMAT if level < logging.INFO else LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> MsgkitLogger:
    """Return the `MsgkitLogger` registered under ``name``."""
    return cast("MsgkitLogger", logging.getLogger(name))
