import pytest

from littlesearch.index import KeywordIndex, Occurrence
from littlesearch.search import Searcher


def _index(**lists) -> KeywordIndex:
    postings = {kw: tuple(Occurrence(d, f) for d, f in occs) for kw, occs in lists.items()}
    return KeywordIndex(postings, ())


@pytest.fixture
def hello_world() -> KeywordIndex:
    return _index(
        hello=[("A", 5), ("B", 3), ("C", 3), ("D", 1)],
        world=[("E", 5), ("F", 4)],
    )


def test_merge_example(hello_world: KeywordIndex) -> None:
    assert Searcher(hello_world).search("hello", "world") == ["A", "E", "F", "B", "C"]


def test_merge_is_case_insensitive(hello_world: KeywordIndex) -> None:
    assert Searcher(hello_world).search("HELLO", "World") == ["A", "E", "F", "B", "C"]


def test_neither_keyword_gives_none(hello_world: KeywordIndex) -> None:
    assert Searcher(hello_world).search("foo", "bar") is None


def test_only_second_keyword(hello_world: KeywordIndex) -> None:
    assert Searcher(hello_world).search("foo", "world") == ["E", "F"]


def test_only_first_keyword_capped() -> None:
    idx = _index(x=[(f"d{i}", 10 - i) for i in range(8)])
    assert Searcher(idx).search("x", "nope") == ["d0", "d1", "d2", "d3", "d4"]


def test_query_terms_are_not_stripped() -> None:
    idx = _index(day=[("A", 1)])
    assert Searcher(idx).search("day.", "Day!") is None


def test_tie_at_cap_emits_only_first_keyword() -> None:
    idx = _index(
        one=[("A", 9), ("B", 8), ("C", 7), ("D", 6), ("E", 2)],
        two=[("Z", 6), ("Y", 1)],
    )
    assert Searcher(idx).search("one", "two") == ["A", "B", "C", "D", "Z"]
    assert Searcher(idx, max_results=4).search("one", "two") == ["A", "B", "C", "D"]


def test_second_list_drains_after_first_exhausted() -> None:
    idx = _index(one=[("A", 9)], two=[("B", 4), ("C", 3), ("D", 2)])
    assert Searcher(idx).search("one", "two") == ["A", "B", "C", "D"]


def test_duplicates_kept_by_default() -> None:
    idx = _index(cat=[("A", 3), ("B", 1)], dog=[("A", 2), ("C", 1)])
    assert Searcher(idx).search("cat", "dog") == ["A", "A", "B", "C"]
    assert Searcher(idx).search("cat", "cat") == ["A", "A", "B", "B"]


def test_unique_keeps_first_appearance() -> None:
    idx = _index(cat=[("A", 3), ("B", 1)], dog=[("A", 2), ("C", 1), ("D", 1), ("E", 1), ("F", 1)])
    assert Searcher(idx, unique=True).search("cat", "dog") == ["A", "B", "C", "D", "E"]
    assert Searcher(idx, unique=True).search("cat", "cat") == ["A", "B"]


def test_result_is_never_empty_list_when_a_keyword_matches(hello_world: KeywordIndex) -> None:
    assert Searcher(hello_world).search("world", "zzz") == ["E", "F"]
    assert Searcher(hello_world).search("zzz", "zzz") is None
