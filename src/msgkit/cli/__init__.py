# msgkit:header:start
#
#   project      : MsgKit
#   file         : __init__.py
#   file_relpath : src/msgkit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""Command-line interface for inspecting serialized message documents."""

from __future__ import annotations
