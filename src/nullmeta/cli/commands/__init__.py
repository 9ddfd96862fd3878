# topmark:header:start
#
#   project      : NullMeta
#   file         : __init__.py
#   file_relpath : src/nullmeta/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NullMeta subcommands."""
