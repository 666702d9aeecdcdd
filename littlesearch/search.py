from typing import List, Optional, Sequence, Set

from .analysis import normalize
from .config import MAX_RESULTS
from .index import KeywordIndex, Occurrence


class Searcher:
    def __init__(self, index: KeywordIndex, max_results: int = MAX_RESULTS, unique: bool = False) -> None:
        self.idx = index
        self.max_results = max_results
        self.unique = unique

    def occurrences(self, keyword: str) -> Optional[Sequence[Occurrence]]:
        return self.idx.get(normalize(keyword))

    def search(self, kw1: str, kw2: str) -> Optional[List[str]]:
        """Documents containing kw1 or kw2, by descending frequency.

        Frequency ties between the two keywords go to kw1. Returns None when
        neither keyword is in the index. Unless ``unique`` is set, a document
        holding both keywords can be listed twice.
        """
        l1 = self.occurrences(kw1)
        l2 = self.occurrences(kw2)
        if l1 is None and l2 is None:
            return None
        l1 = l1 or ()
        l2 = l2 or ()

        out: List[str] = []
        seen: Set[str] = set()

        def emit(occ: Occurrence) -> None:
            if self.unique:
                if occ.document in seen:
                    return
                seen.add(occ.document)
            out.append(occ.document)

        i = j = 0
        while len(out) < self.max_results and (i < len(l1) or j < len(l2)):
            if j >= len(l2):
                emit(l1[i]); i += 1
            elif i >= len(l1):
                emit(l2[j]); j += 1
            elif l1[i].frequency > l2[j].frequency:
                emit(l1[i]); i += 1
            elif l2[j].frequency > l1[i].frequency:
                emit(l2[j]); j += 1
            else:
                emit(l1[i]); i += 1
                if len(out) < self.max_results:
                    emit(l2[j]); j += 1
        return out
