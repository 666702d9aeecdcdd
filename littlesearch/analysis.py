import re
from typing import AbstractSet, Iterable, Iterator, Optional

from .config import STRICT_KEYWORDS, TRAILING_PUNCTUATION

_KEYWORD_RE = re.compile(r"[a-z]+")


def normalize(text: str) -> str:
    return text.lower()


def strip_trailing_punctuation(word: str) -> str:
    return word.rstrip(TRAILING_PUNCTUATION)


def get_keyword(word: str, noise_words: AbstractSet[str] = frozenset(),
                strict: bool = STRICT_KEYWORDS) -> Optional[str]:
    """Return ``word`` as a keyword, or None if it is not one.

    The word is lower-cased and stripped of trailing punctuation. It is rejected
    when nothing is left, when it is a noise word, or (strict mode) when the
    remainder is not made of the letters a-z only.
    """
    kw = strip_trailing_punctuation(normalize(word))
    if not kw or kw in noise_words:
        return None
    if strict and _KEYWORD_RE.fullmatch(kw) is None:
        return None
    return kw


class Analyzer:
    def __init__(self, noise_words: Iterable[str] = (), strict: bool = STRICT_KEYWORDS) -> None:
        self.noise_words: frozenset = frozenset(noise_words)
        self.strict = strict

    def get_keyword(self, word: str) -> Optional[str]:
        return get_keyword(word, self.noise_words, self.strict)

    def keywords(self, tokens: Iterable[str]) -> Iterator[str]:
        for tok in tokens:
            kw = self.get_keyword(tok)
            if kw is not None:
                yield kw
