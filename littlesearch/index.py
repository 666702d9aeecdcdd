import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .analysis import Analyzer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Occurrence:
    document: str
    frequency: int = 1

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"


def load_keywords(document: str, tokens: Iterable[str], analyzer: Analyzer) -> Dict[str, Occurrence]:
    """Count the keywords of one document.

    ``tokens`` is consumed once; errors raised while reading it propagate.
    """
    keywords: Dict[str, Occurrence] = {}
    for kw in analyzer.keywords(tokens):
        occ = keywords.get(kw)
        if occ is None:
            keywords[kw] = Occurrence(document)
        else:
            keywords[kw] = replace(occ, frequency=occ.frequency + 1)
    return keywords


def insert_last_occurrence(occs: List[Occurrence], trace: Optional[List[int]] = None) -> None:
    """Move the last element of ``occs`` to its place by descending frequency.

    ``occs[:-1]`` must already be sorted. The new occurrence goes after every
    element with a frequency >= its own, so ties keep insertion order.
    Midpoints probed by the binary search are appended to ``trace``.
    """
    if len(occs) < 2:
        return

    key = occs.pop()
    front, end = 0, len(occs) - 1
    while front <= end:
        mid = (front + end) // 2
        if trace is not None:
            trace.append(mid)
        if key.frequency > occs[mid].frequency:
            end = mid - 1
        else:
            front = mid + 1
    occs.insert(front, key)


def merge_keywords(keywords: Dict[str, Occurrence],
                   index: Dict[str, List[Occurrence]]) -> Dict[str, List[Occurrence]]:
    for kw, occ in keywords.items():
        occs = index.get(kw)
        if occs is None:
            index[kw] = [occ]
        else:
            occs.append(occ)
            insert_last_occurrence(occs)
    return index


class KeywordIndex(Mapping):
    """Read-only keyword -> occurrences mapping produced by IndexBuilder.build()."""

    def __init__(self, postings: Dict[str, Tuple[Occurrence, ...]], documents: Tuple[str, ...]) -> None:
        self._postings = MappingProxyType(postings)
        self.documents = documents

    def __getitem__(self, keyword: str) -> Tuple[Occurrence, ...]:
        return self._postings[keyword]

    def __iter__(self) -> Iterator[str]:
        return iter(self._postings)

    def __len__(self) -> int:
        return len(self._postings)

    def __repr__(self) -> str:
        return f"KeywordIndex(keywords={len(self)}, documents={len(self.documents)})"

    def dump(self) -> Iterator[str]:
        for kw in sorted(self._postings):
            yield f"{kw}: [" + ", ".join(map(str, self._postings[kw])) + "]"


class IndexBuilder:
    def __init__(self, analyzer: Optional[Analyzer] = None) -> None:
        self.analyzer = analyzer if analyzer is not None else Analyzer()
        self.postings: Dict[str, List[Occurrence]] = {}
        self.documents: List[str] = []
        self._published = False

    def add_document(self, document: str, tokens: Iterable[str]) -> Dict[str, Occurrence]:
        if self._published:
            raise RuntimeError("index already built; start a new IndexBuilder")
        keywords = load_keywords(document, tokens, self.analyzer)
        merge_keywords(keywords, self.postings)
        self.documents.append(document)
        logger.debug("indexed %s: %d keywords", document, len(keywords))
        return keywords

    def build(self) -> KeywordIndex:
        self._published = True
        frozen = {kw: tuple(occs) for kw, occs in self.postings.items()}
        logger.info("built index: %d keywords over %d documents", len(frozen), len(self.documents))
        return KeywordIndex(frozen, tuple(self.documents))
