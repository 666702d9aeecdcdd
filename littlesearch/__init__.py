from .analysis import Analyzer, get_keyword, normalize, strip_trailing_punctuation
from .index import (
    IndexBuilder, KeywordIndex, Occurrence, insert_last_occurrence, load_keywords, merge_keywords
)
from .search import Searcher
from .sources import iter_tokens, make_index, read_manifest, read_noise_words
