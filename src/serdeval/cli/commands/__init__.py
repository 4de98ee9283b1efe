# topmark:header:start
#
#   project      : SerdeVal
#   file         : __init__.py
#   file_relpath : src/serdeval/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""SerdeVal CLI subcommands (``validate``, ``detect``, ``formats``, ``version``)."""

from __future__ import annotations
