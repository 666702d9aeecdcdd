"""File-backed inputs: document manifest, noise words and document token streams."""

import logging
import os
from typing import FrozenSet, Iterator, List

from .analysis import Analyzer
from .config import STRICT_KEYWORDS
from .index import IndexBuilder, KeywordIndex

logger = logging.getLogger(__name__)


def _check_exists(path: str, what: str) -> None:
    if not os.path.exists(path):
        raise FileNotFoundError(f"{what} {path} not found.")


def iter_tokens(path: str) -> Iterator[str]:
    """Lazily yield the whitespace-separated tokens of a text file."""
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            yield from line.split()


def read_manifest(path: str) -> List[str]:
    _check_exists(path, "Documents file")
    return list(iter_tokens(path))


def read_noise_words(path: str) -> FrozenSet[str]:
    _check_exists(path, "Noise words file")
    return frozenset(iter_tokens(path))


def resolve_document(base_dir: str, name: str) -> str:
    return name if os.path.isabs(name) else os.path.join(base_dir, name)


def make_index(docs_file: str, noise_words_file: str, strict: bool = STRICT_KEYWORDS) -> KeywordIndex:
    """Build the keyword index for every document listed in ``docs_file``.

    Document names are resolved relative to the directory of ``docs_file``.
    A missing input aborts the whole build with FileNotFoundError.
    """
    noise_words = read_noise_words(noise_words_file)
    names = read_manifest(docs_file)
    base_dir = os.path.dirname(os.path.abspath(docs_file))
    logger.info("indexing %d documents (%d noise words)", len(names), len(noise_words))

    builder = IndexBuilder(Analyzer(noise_words, strict=strict))
    for name in names:
        path = resolve_document(base_dir, name)
        _check_exists(path, "Document")
        builder.add_document(name, iter_tokens(path))
    return builder.build()
