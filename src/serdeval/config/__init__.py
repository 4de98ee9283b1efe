# topmark:header:start
#
#   project      : SerdeVal
#   file         : __init__.py
#   file_relpath : src/serdeval/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Runtime configuration for SerdeVal.

SerdeVal has no configuration files. Runtime behaviour is controlled through
environment variables (see `serdeval.constants`) and CLI options; this package
hosts the logging setup shared by the library and the CLI.
"""

from __future__ import annotations
