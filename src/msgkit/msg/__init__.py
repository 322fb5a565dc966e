# msgkit:header:start
#
#   project      : MsgKit
#   file         : __init__.py
#   file_relpath : src/msgkit/msg/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""Message primitives and helpers.

Design:
    - Messages are immutable `Msg` instances of one `MsgType` kind.
    - During an operation, messages are accumulated in a mutable `Msgs` collection.
    - `Msgs.group_by_kind` returns an `AllMsgs` snapshot with one bucket per kind.
    - ``str()`` on any of them renders YAML and never raises.
"""

from __future__ import annotations

from msgkit.msg.io import MsgFormatError, ReportedError, load_msgs, msgs_from_dict
from msgkit.msg.model import (
    AllMsgs,
    Msg,
    Msgs,
    MsgStats,
    MsgType,
    compute_msg_stats,
    is_err,
    is_info,
    is_not_err,
    is_not_info,
    is_skip,
    is_warn,
)
from msgkit.msg.render import render_msg_line, yaml_string
from msgkit.msg.types import MsgPredicate, MsgSink

__all__ = [
    "AllMsgs",
    "Msg",
    "MsgFormatError",
    "MsgPredicate",
    "MsgSink",
    "MsgStats",
    "MsgType",
    "Msgs",
    "ReportedError",
    "compute_msg_stats",
    "is_err",
    "is_info",
    "is_not_err",
    "is_not_info",
    "is_skip",
    "is_warn",
    "load_msgs",
    "msgs_from_dict",
    "render_msg_line",
    "yaml_string",
]
