"""Spanish text normalization, tokenization and n-gram counting."""

import re
import unicodedata
from collections import Counter
from typing import Iterable, List, NamedTuple, Union

from ..config.lexicon import SPANISH_STOPWORDS

_UNSUPPORTED_CHARS = re.compile(r"[^a-z0-9áéíóúñü\s.,:;\-_]")
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+|\n+")
_NON_WORD = re.compile(r"\W+")

MIN_TOKEN_LENGTH = 3
MIN_GRAM_LENGTH = 4


class NgramCount(NamedTuple):
    """A gram and the number of times it was seen."""

    term: str
    count: int


def normalize(text: str) -> str:
    """Lowercase, strip diacritics and blank out unsupported symbols."""
    decomposed = unicodedata.normalize("NFD", (text or "").lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _UNSUPPORTED_CHARS.sub(" ", stripped)


def split_sentences(text: str) -> List[str]:
    """Split text on sentence punctuation followed by whitespace, or on newlines."""
    parts = _SENTENCE_BOUNDARY.split(text or "")
    return [part.strip() for part in parts if part and part.strip()]


def tokenize(text: str) -> List[str]:
    """
    Normalize text and split it into content tokens.

    Tokens shorter than three characters and Spanish stopwords are dropped.
    """
    tokens = []
    for piece in normalize(text).split():
        token = _NON_WORD.sub("", piece)
        if len(token) < MIN_TOKEN_LENGTH or token in SPANISH_STOPWORDS:
            continue
        tokens.append(token)
    return tokens


def top_ngrams(texts: Union[str, Iterable[str]], n: int = 2, top: int = 50) -> List[NgramCount]:
    """
    Rank the most frequent grams of order 1..n across texts.

    Args:
        texts: Texts to scan; a single string is treated as one text
        n: Maximum gram order
        top: Maximum number of grams returned

    Returns:
        Grams sorted by count descending, ties in first-seen order
    """
    if isinstance(texts, str):
        texts = [texts]

    counts: Counter = Counter()
    for text in texts:
        tokens = tokenize(text)
        for start in range(len(tokens)):
            for order in range(1, n + 1):
                if start + order > len(tokens):
                    break
                gram = " ".join(tokens[start:start + order])
                if len(gram) < MIN_GRAM_LENGTH:
                    continue
                counts[gram] += 1

    # sorted() is stable and Counter keeps insertion order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [NgramCount(term, count) for term, count in ranked[:max(top, 0)]]
