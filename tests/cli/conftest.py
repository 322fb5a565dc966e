# msgkit:header:start
#
#   project      : MsgKit
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""CLI test helpers for running MsgKit against message documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from msgkit.cli.main import cli
from msgkit.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from msgkit.msg import Msgs


def run_cli(argv: Sequence[str], *, input_text: str | None = None) -> Result:
    """Invoke the CLI with ``argv`` and optional stdin text.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["summary", "run.yaml"]``.
        input_text (str | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv), input=input_text)


def assert_exit(result: Result, expected: ExitCode) -> None:
    """Assert the exit code, showing the output on failure."""
    assert result.exit_code == expected, result.output


@pytest.fixture
def msgs_file(tmp_path: Path, mixed_msgs: Msgs) -> Path:
    """Write the mixed collection as YAML and return its path."""
    path: Path = tmp_path / "run.yaml"
    path.write_text(str(mixed_msgs), encoding="utf-8")
    return path
