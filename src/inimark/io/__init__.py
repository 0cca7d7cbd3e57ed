# topmark:header:start
#
#   project      : IniMark
#   file         : __init__.py
#   file_relpath : src/inimark/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File and text I/O for IniMark documents.

Submodules:
    - ``paths``: path validity checks.
    - ``parser``: in-memory parsing of document/section/property text.
    - ``loader``: bounded, resumable streaming load from files.
    - ``reader``: point lookups (one value, one section) that stream a file.
    - ``writer``: whole-document writes and the single-property upsert rewrite.

Nothing is re-exported here so the model can import ``paths`` without pulling
in the loader (which itself depends on the model).
"""
