"""Defaults for building and querying the keyword index."""

# Characters removed from the end of a word before it is checked as a keyword.
TRAILING_PUNCTUATION = ".,?:;!'"

# Reject words whose stripped form still holds non-letters (digits, interior punctuation).
STRICT_KEYWORDS = True

# Maximum number of documents returned by a two-keyword search.
MAX_RESULTS = 5

DEFAULT_DOCS_FILE = "docs.txt"
DEFAULT_NOISE_WORDS_FILE = "noisewords.txt"
