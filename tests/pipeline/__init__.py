# topmark:header:start
#
#   project      : WhiteMark
#   file         : __init__.py
#   file_relpath : tests/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

