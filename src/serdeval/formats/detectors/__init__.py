# topmark:header:start
#
#   project      : SerdeVal
#   file         : __init__.py
#   file_relpath : src/serdeval/formats/detectors/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Content-based format predicates.

This package hosts lightweight, side-effect-free probes that inspect a
`DetectionInput` and report whether it looks like one specific format. They
never parse; they only scan for substrings and line shapes.

Submodules:
    text: The `DetectionInput` preprocessing and the predicate protocol.
    json_like: Jupyter notebooks, JSON Lines and JSON.
    devops: Dockerfile, HCL, GraphQL and Protobuf text format.
    documents: CSV, Markdown and requirements lists.
    markup: XML, INI, YAML and TOML.

Notes:
    Predicates are deliberately permissive; correctness comes from the order in
    which `serdeval.formats.cascade` consults them.
"""

from __future__ import annotations
