"""Character sets and defaults for the pool builder.

These are read-only lookup tables. The order of each string matters: the pool
builder concatenates them verbatim, which keeps pools reproducible in tests.
"""

from __future__ import annotations

import string

LETTERS_LOWER = string.ascii_lowercase
LETTERS_UPPER = string.ascii_uppercase
NUMBERS = string.digits
SYMBOLS = "!#$&()*+/"

# Visually confusable glyphs removed by `exclude_similar`.
SIMILAR_CHARACTERS = "il1o0O"

DEFAULT_LENGTH = 16
DEFAULT_INCLUDE_NUMBERS = True
DEFAULT_INCLUDE_SYMBOLS = True
DEFAULT_EXCLUDE_SIMILAR = False
