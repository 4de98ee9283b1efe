# topmark:header:start
#
#   project      : SerdeVal
#   file         : exit_codes.py
#   file_relpath : src/serdeval/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Exit codes for the SerdeVal CLI.

Validation failures and unreadable inputs both exit with ``FAILURE`` so that
shell scripts can use ``serdeval validate`` as a simple gate. Invalid options
exit with Click's usage error code.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SerdeVal CLI.

    Attributes:
        SUCCESS: Every input was valid (or the command had nothing to report).
        FAILURE: At least one input was invalid, undetectable or unreadable.
        USAGE_ERROR: Command-line invocation error (invalid flags/args); the
            value Click itself uses.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
