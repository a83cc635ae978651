"""Category grouping: base-category matching plus emergent clustering."""

import logging
import math
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from ..config.lexicon import EMERGENT_PREFIX
from ..config.settings import Settings
from ..models.analysis_result import CategoryGroup, OpenCode
from ..models.document import BaseCategory
from ..utils.similarity import RandomState, cosine_kmeans, tfidf_vectors
from ..utils.text import top_ngrams

logger = logging.getLogger(__name__)

BaseCategoryLike = Union[BaseCategory, Mapping[str, Any]]


def as_base_category(item: BaseCategoryLike) -> BaseCategory:
    """Accept a BaseCategory or a {label, synonyms} mapping."""
    if isinstance(item, BaseCategory):
        return item
    return BaseCategory(label=item.get("label", ""), synonyms=tuple(item.get("synonyms") or ()))


class CategoryGrouper:
    """Assigns open codes to base categories and clusters the rest."""

    def __init__(self, settings: Optional[Settings] = None, random_state: RandomState = None):
        """Initialize category grouper."""
        self.settings = settings or Settings()
        if random_state is None:
            random_state = self.settings.random_seed
        self.random_state = random_state

    def assign_base(
        self,
        open_codes: Sequence[OpenCode],
        base_categories: Sequence[BaseCategoryLike],
    ) -> Tuple[List[CategoryGroup], List[OpenCode]]:
        """
        Place each code in the first base category whose label or synonym it contains.

        Returns:
            Tuple of (one group per base category in supplied order, unassigned codes)
        """
        categories = [as_base_category(item) for item in base_categories]
        groups = [
            CategoryGroup(category=category.label, synonyms=list(category.synonyms))
            for category in categories
        ]
        unassigned = []

        for code in open_codes:
            text = code.code.lower()
            for category, group in zip(categories, groups):
                if any(key in text for key in category.keys):
                    group.codes.append(code)
                    break
            else:
                unassigned.append(code)

        return groups, unassigned

    def emergent_cluster_count(self, unassigned_count: int) -> int:
        """Clusters to request: unassigned/20 rounded half up, clamped to 1..5."""
        estimate = math.floor(unassigned_count / self.settings.codes_per_emergent_cluster + 0.5)
        return min(self.settings.max_emergent_clusters, max(1, estimate))

    def discover_emergent(self, unassigned: Sequence[OpenCode]) -> List[CategoryGroup]:
        """Cluster unassigned codes by their quotes and label each cluster."""
        if not unassigned:
            return []

        # An int seed restarts every run; a Generator passed in is shared as given
        rng = np.random.default_rng(self.random_state)
        tfidf = tfidf_vectors([code.quote for code in unassigned])
        k = self.emergent_cluster_count(len(unassigned))
        result = cosine_kmeans(
            tfidf.matrix,
            k=k,
            iters=self.settings.kmeans_iterations,
            random_state=rng,
        )
        logger.debug(f"Clustered {len(unassigned)} unassigned codes with k={k}")

        emergent = []
        for index in range(k):
            members = [code for code, label in zip(unassigned, result.labels) if label == index]
            if not members:
                continue
            joined = " ".join(code.quote for code in members)
            top = top_ngrams([joined], n=self.settings.emergent_label_order, top=1)
            if top:
                category = f"{EMERGENT_PREFIX}: {top[0].term}"
            else:
                category = f"{EMERGENT_PREFIX} {index + 1}"
            emergent.append(CategoryGroup(category=category, codes=members))
        return emergent

    def group(
        self,
        open_codes: Sequence[OpenCode],
        base_categories: Sequence[BaseCategoryLike],
    ) -> List[CategoryGroup]:
        """
        Partition open codes into base groups followed by emergent groups.

        Args:
            open_codes: Codes produced by the open coder
            base_categories: Researcher categories in priority order

        Returns:
            Non-empty base groups in supplied order, then emergent groups by cluster index
        """
        groups, unassigned = self.assign_base(open_codes, base_categories)
        base_groups = [group for group in groups if group.codes]
        emergent = self.discover_emergent(unassigned)

        logger.info(f"Grouped {len(open_codes)} codes into {len(base_groups)} base "
                    f"and {len(emergent)} emergent categories")
        return base_groups + emergent
