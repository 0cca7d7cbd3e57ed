# topmark:header:start
#
#   project      : IniMark
#   file         : __init__.py
#   file_relpath : src/inimark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the ``inimark`` CLI."""
