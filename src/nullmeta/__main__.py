# topmark:header:start
#
#   project      : NullMeta
#   file         : __main__.py
#   file_relpath : src/nullmeta/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running NullMeta via ``python -m nullmeta``.

Delegates directly to `nullmeta.cli.main.cli` so there is a single CLI entry
point regardless of how NullMeta is launched.

Examples:
    Analyze an exported bundle::

        python -m nullmeta analyze build/nullsafe-bundle.json
"""

from __future__ import annotations

from nullmeta.cli.main import cli

if __name__ == "__main__":
    cli()
