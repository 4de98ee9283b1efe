# topmark:header:start
#
#   project      : SerdeVal
#   file         : __main__.py
#   file_relpath : src/serdeval/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Module entry point for running SerdeVal via ``python -m serdeval``.

Delegates to `serdeval.cli.main.cli`, the same entry point as the
``serdeval`` console script.

Examples:
    Validate a file using the module interface::

        python -m serdeval validate config.yaml
"""

from __future__ import annotations

from serdeval.cli.main import cli

if __name__ == "__main__":
    cli()
