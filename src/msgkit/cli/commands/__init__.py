# msgkit:header:start
#
#   project      : MsgKit
#   file         : __init__.py
#   file_relpath : src/msgkit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""MsgKit CLI commands."""

from __future__ import annotations
