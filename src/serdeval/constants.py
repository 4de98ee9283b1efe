# topmark:header:start
#
#   project      : SerdeVal
#   file         : constants.py
#   file_relpath : src/serdeval/constants.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""SerdeVal Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    SERDEVAL_VERSION: str = get_version("serdeval")
except PackageNotFoundError:  # running from a source checkout
    SERDEVAL_VERSION = "0.0.0"

# Environment variable controlling the internal log level (e.g. "TRACE", "DEBUG", "10").
LOG_LEVEL_ENV_VAR: str = "SERDEVAL_LOG_LEVEL"

# Source name used for outcomes produced from standard input.
STDIN_SOURCE_NAME: str = "stdin"

MSG_UNABLE_TO_DETECT: str = "unable to detect format"
MSG_UNSUPPORTED_FORMAT: str = "unsupported format"
MSG_NO_STDIN: str = "no input: pass FILES or pipe data on stdin"
