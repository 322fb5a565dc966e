# msgkit:header:start
#
#   project      : MsgKit
#   file         : types.py
#   file_relpath : src/msgkit/msg/types.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""Shared typing helpers for MsgKit messages.

`MsgPredicate` is the function value accepted by `Msgs.filter`; `MsgSink` is any
text-consuming callable used by the ``log*`` methods (``logger.info``, ``print``,
``list.append``, ...).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable

    from msgkit.msg.model import Msg

MsgPredicate: TypeAlias = "Callable[[Msg | None], bool]"
MsgSink: TypeAlias = "Callable[[str], object]"
