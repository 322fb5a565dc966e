# msgkit:header:start
#
#   project      : MsgKit
#   file         : __init__.py
#   file_relpath : src/msgkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""MsgKit package.

MsgKit collects typed diagnostic messages (info, warn, skip, error) produced while a
larger operation runs, filters and groups them by kind, and renders them as YAML
text for logs. A small CLI inspects serialized message documents.
"""

from __future__ import annotations
