# msgkit:header:start
#
#   project      : MsgKit
#   file         : __init__.py
#   file_relpath : src/msgkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""Runtime configuration for MsgKit.

MsgKit has no configuration files: the only runtime knob is the ``MSGKIT_LOG_LEVEL``
environment variable, resolved by [`msgkit.config.logging`][msgkit.config.logging].
"""

from __future__ import annotations
