# topmark:header:start
#
#   project      : IniMark
#   file         : __main__.py
#   file_relpath : src/inimark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running IniMark via ``python -m inimark``.

Delegates to `inimark.cli.main.cli`, the same entry point as the ``inimark``
console script.
"""

from __future__ import annotations

from inimark.cli.main import cli

if __name__ == "__main__":
    cli()
