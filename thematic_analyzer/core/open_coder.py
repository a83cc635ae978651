"""Open coding: anchor salient sentences to frequent corpus n-grams."""

import logging
from typing import Iterable, List, Optional, Sequence

from ..config.settings import Settings
from ..models.analysis_result import OpenCode
from ..models.document import Document
from ..utils.text import split_sentences, tokenize, top_ngrams

logger = logging.getLogger(__name__)


class OpenCoder:
    """Extracts coded quotes from documents using a global n-gram vocabulary."""

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize open coder."""
        self.settings = settings or Settings()

    def build_vocabulary(self, documents: Sequence[Document]) -> List[str]:
        """Rank the most frequent grams over all document texts."""
        ranked = top_ngrams(
            [doc.text for doc in documents],
            n=self.settings.vocabulary_max_order,
            top=self.settings.vocabulary_size,
        )
        return [gram.term for gram in ranked]

    def code_document(self, document: Document, vocabulary: Sequence[str]) -> List[OpenCode]:
        """Code each long-enough sentence with the first vocabulary gram it contains."""
        codes = []
        for sentence in split_sentences(document.text):
            if len(tokenize(sentence)) < self.settings.min_sentence_tokens:
                continue
            lowered = sentence.lower()
            matched = next((gram for gram in vocabulary if gram in lowered), None)
            if matched:
                codes.append(OpenCode(doc=document.name, code=matched, quote=sentence))
        return codes

    def deduplicate(self, codes: Iterable[OpenCode]) -> List[OpenCode]:
        """Keep the first code for each doc, code and quote prefix."""
        seen = set()
        unique = []
        for code in codes:
            key = code.dedup_key(self.settings.dedup_quote_prefix)
            if key in seen:
                continue
            seen.add(key)
            unique.append(code)
        return unique

    def code_documents(self, documents: Sequence[Document]) -> List[OpenCode]:
        """
        Run open coding over a corpus.

        Args:
            documents: Documents to code, in output order

        Returns:
            Deduplicated open codes in document and sentence order
        """
        vocabulary = self.build_vocabulary(documents)
        logger.debug(f"Open coding vocabulary: {len(vocabulary)} grams")

        codes: List[OpenCode] = []
        for document in documents:
            codes.extend(self.code_document(document, vocabulary))

        unique = self.deduplicate(codes)
        logger.info(f"Open coding produced {len(unique)} codes ({len(codes) - len(unique)} duplicates removed)")
        return unique
