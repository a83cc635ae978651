"""TF-IDF vectors and cosine k-means for emergent category discovery."""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Union

import numpy as np
from scipy import sparse
from sklearn.feature_extraction import DictVectorizer
from sklearn.feature_extraction.text import TfidfVectorizer

from .text import tokenize

logger = logging.getLogger(__name__)

RandomState = Union[None, int, np.random.Generator]


@dataclass
class TfidfResult:
    """Weighted term vectors for a pseudo-corpus."""

    matrix: sparse.csr_matrix
    terms: List[str] = field(default_factory=list)
    document_frequency: Dict[str, int] = field(default_factory=dict)

    @property
    def vectors(self) -> List[Dict[str, float]]:
        """One term->weight map per document; absent terms are zero."""
        vectors = []
        indptr, indices, data = self.matrix.indptr, self.matrix.indices, self.matrix.data
        for i in range(self.matrix.shape[0]):
            span = slice(indptr[i], indptr[i + 1])
            vectors.append({self.terms[j]: float(w) for j, w in zip(indices[span], data[span])})
        return vectors


@dataclass
class KMeansResult:
    """Cluster label per vector plus the final centroids."""

    labels: List[int]
    centroids: np.ndarray
    iterations: int = 0


def _build_vectorizer() -> TfidfVectorizer:
    # Raw counts times smoothed idf: tf * (ln((N + 1) / (df + 1)) + 1)
    return TfidfVectorizer(
        tokenizer=tokenize,
        lowercase=False,
        token_pattern=None,
        norm=None,
        smooth_idf=True,
        sublinear_tf=False,
    )


def tfidf_vectors(texts: Sequence[str]) -> TfidfResult:
    """
    Vectorize a pseudo-corpus of short texts.

    Args:
        texts: Texts of the pseudo-documents, identified by position

    Returns:
        TfidfResult with one sparse row per text and the document frequency map
    """
    if not any(tokenize(text) for text in texts):
        # Nothing survives tokenization: every vector is empty
        return TfidfResult(matrix=sparse.csr_matrix((len(texts), 0), dtype=np.float64))

    vectorizer = _build_vectorizer()
    matrix = vectorizer.fit_transform(texts).tocsr()
    terms = vectorizer.get_feature_names_out().tolist()
    df_counts = np.asarray((matrix > 0).sum(axis=0)).ravel()

    logger.debug(f"TF-IDF vocabulary of {len(terms)} terms over {len(texts)} texts")
    return TfidfResult(
        matrix=matrix,
        terms=terms,
        document_frequency={term: int(count) for term, count in zip(terms, df_counts)},
    )


def smoothed_idf(document_frequency: int, corpus_size: int) -> float:
    """Inverse document frequency with add-one smoothing."""
    return math.log((corpus_size + 1) / (document_frequency + 1)) + 1


def cosine_similarity_sparse(a: Mapping[str, float], b: Mapping[str, float]) -> float:
    """Cosine similarity of two term->weight maps; zero vectors score 0."""
    dot = sum(weight * b.get(term, 0.0) for term, weight in a.items())
    norm_a = math.sqrt(sum(weight * weight for weight in a.values()))
    norm_b = math.sqrt(sum(weight * weight for weight in b.values()))
    denominator = norm_a * norm_b or 1.0
    return dot / denominator


def _cosine_matrix(vectors: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Pairwise cosine similarity, substituting 1 for zero denominators."""
    dots = vectors @ centroids.T
    denominators = np.outer(np.linalg.norm(vectors, axis=1), np.linalg.norm(centroids, axis=1))
    denominators[denominators == 0] = 1.0
    return dots / denominators


def _as_dense(vectors) -> np.ndarray:
    """Accept a sparse matrix, an array or a list of term->weight maps."""
    if sparse.issparse(vectors):
        return vectors.toarray().astype(np.float64)
    if isinstance(vectors, np.ndarray):
        return vectors.astype(np.float64)
    vectors = list(vectors)
    if vectors and isinstance(vectors[0], Mapping):
        return DictVectorizer(sparse=False).fit_transform(vectors).astype(np.float64)
    return np.asarray(vectors, dtype=np.float64)


def cosine_kmeans(
    vectors,
    k: int = 5,
    iters: int = 15,
    random_state: RandomState = None,
) -> KMeansResult:
    """
    Partition vectors into k clusters by cosine similarity.

    Initial centroids are k distinct vectors drawn at random, so results differ
    between runs unless a seed or generator is passed as random_state.

    Args:
        vectors: Sparse matrix, dense array or list of term->weight maps
        k: Requested number of clusters, clamped to the number of vectors
        iters: Maximum number of assign/update iterations
        random_state: Seed or numpy Generator for centroid initialization

    Returns:
        KMeansResult with a label per vector and the final centroids
    """
    data = _as_dense(vectors)
    n_vectors = data.shape[0] if data.ndim == 2 else 0
    if n_vectors == 0:
        return KMeansResult(labels=[], centroids=np.zeros((0, 0)))

    k = max(1, min(k, n_vectors))
    rng = np.random.default_rng(random_state)
    initial = rng.choice(n_vectors, size=k, replace=False)
    centroids = data[initial].copy()
    labels = np.zeros(n_vectors, dtype=int)

    iteration = 0
    for iteration in range(1, iters + 1):
        # argmax keeps the first centroid on ties
        assigned = _cosine_matrix(data, centroids).argmax(axis=1)
        changed = bool((assigned != labels).any())
        labels = assigned

        sums = np.zeros_like(centroids)
        np.add.at(sums, labels, data)
        counts = np.bincount(labels, minlength=k)
        centroids = sums / np.maximum(counts, 1)[:, np.newaxis]

        if not changed:
            break

    logger.debug(f"k-means with k={k} stopped after {iteration} iteration(s)")
    return KMeansResult(labels=labels.tolist(), centroids=centroids, iterations=iteration)
