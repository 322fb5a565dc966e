# msgkit:header:start
#
#   project      : MsgKit
#   file         : __init__.py
#   file_relpath : src/msgkit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""Core, UI-agnostic primitives shared across MsgKit.

Included modules:

- ``exit_codes``
  Centralized exit codes for the CLI.
"""

from __future__ import annotations
