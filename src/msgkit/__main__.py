# msgkit:header:start
#
#   project      : MsgKit
#   file         : __main__.py
#   file_relpath : src/msgkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""Module entry point for running MsgKit via ``python -m msgkit``.

Examples:
    Summarize a serialized message document::

        python -m msgkit summary run.yaml
"""

from __future__ import annotations

from msgkit.cli.main import cli

if __name__ == "__main__":
    cli()
