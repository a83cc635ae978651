"""Utility functions and helpers."""

from .text import normalize, split_sentences, tokenize, top_ngrams
from .similarity import cosine_kmeans, cosine_similarity_sparse, tfidf_vectors
from .validators import validate_input_file, validate_transcript_file

__all__ = [
    "normalize", "split_sentences", "tokenize", "top_ngrams",
    "cosine_kmeans", "cosine_similarity_sparse", "tfidf_vectors",
    "validate_input_file", "validate_transcript_file",
]
