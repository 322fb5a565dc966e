# msgkit:header:start
#
#   project      : MsgKit
#   file         : exit_codes.py
#   file_relpath : src/msgkit/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 MsgKit contributors
#
# msgkit:header:end

"""Standardized exit codes used by the MsgKit CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the MsgKit CLI.

    Attributes:
        SUCCESS (int): The messages were read and contain no errors.
        FAILURE (int): The messages were read and contain at least one error.
        USAGE_ERROR (int): The input could not be read or is not a valid message document.

    Usage:
        ```python
        import subprocess
        from msgkit.core.exit_codes import ExitCode

        result = subprocess.run(["msgkit", "summary", "run.yaml"])
        if result.returncode == ExitCode.FAILURE:
            print("The run reported errors.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
