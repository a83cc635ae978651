"""Lexicon-based sentence polarity counts."""

import re
from typing import Dict, Iterable, List

from ..config.lexicon import NEGATIONS, NEGATIVE_WORDS, POSITIVE_WORDS
from ..models.document import Document
from .text import split_sentences

_NON_WORD = re.compile(r"\W+")
NEGATION_WINDOW = 3


def _simple_tokens(sentence: str) -> List[str]:
    tokens = (_NON_WORD.sub("", piece) for piece in sentence.lower().split())
    return [token for token in tokens if token]


def score_sentence(sentence: str) -> int:
    """Sum of +1/-1 lexicon hits, flipped when a negation precedes the hit."""
    tokens = _simple_tokens(sentence)
    score = 0
    for i, token in enumerate(tokens):
        if token not in POSITIVE_WORDS and token not in NEGATIVE_WORDS:
            continue
        value = 1 if token in POSITIVE_WORDS else -1
        window = tokens[max(0, i - NEGATION_WINDOW):i]
        score += -value if any(word in NEGATIONS for word in window) else value
    return score


def compute_sentiment(documents: Iterable[Document]) -> Dict[str, int]:
    """Count positive, neutral and negative sentences across documents."""
    counts = {"positive": 0, "neutral": 0, "negative": 0, "total": 0}
    for document in documents:
        for sentence in split_sentences(document.text):
            if not _simple_tokens(sentence):
                continue
            score = score_sentence(sentence)
            counts["total"] += 1
            if score > 0:
                counts["positive"] += 1
            elif score < 0:
                counts["negative"] += 1
            else:
                counts["neutral"] += 1
    return counts
