"""Thematic and comparative synthesis over grouped open codes."""

import logging
from typing import Dict, List, Optional, Sequence

from ..config.lexicon import COMPARATIVE_DIMENSIONS
from ..config.settings import Settings
from ..models.analysis_result import CategoryGroup, ComparativeFinding, OpenCode, Quote, Theme
from ..models.document import Document
from ..utils.text import top_ngrams

logger = logging.getLogger(__name__)

EMPTY_MARKER = "—"
FINDING_SEPARATOR = " — "


def synthesize_themes(
    groups: Sequence[CategoryGroup],
    settings: Optional[Settings] = None,
) -> List[Theme]:
    """Build one theme per non-empty group with subthemes and sample quotes."""
    settings = settings or Settings()
    themes = []
    for group in groups:
        if not group.codes:
            continue
        subthemes = top_ngrams(
            [code.quote for code in group.codes],
            n=settings.subtheme_order,
            top=settings.subtheme_count,
        )
        quotes = [Quote(text=code.quote, doc=code.doc) for code in group.codes]
        themes.append(Theme(
            theme=group.category,
            subthemes=[gram.term for gram in subthemes],
            quotes=quotes[:settings.max_theme_quotes],
        ))
    logger.info(f"Synthesized {len(themes)} themes")
    return themes


def _has_value(value) -> bool:
    return value is not None and value != ""


def synthesize_comparison(
    documents: Sequence[Document],
    open_codes: Sequence[OpenCode],
    settings: Optional[Settings] = None,
) -> List[ComparativeFinding]:
    """
    Compare frequent code terms across metadata values.

    Args:
        documents: Documents carrying metadata
        open_codes: Codes to attribute to each document's buckets
        settings: Term count and gram order for each finding

    Returns:
        One finding per dimension with at least two distinct values
    """
    settings = settings or Settings()
    results = []
    for key, label in COMPARATIVE_DIMENSIONS:
        buckets: Dict[object, List[str]] = {}
        for document in documents:
            value = document.meta.get(key)
            if not _has_value(value):
                continue
            buckets.setdefault(value, []).append(document.name)

        if len(buckets) < 2:
            continue

        findings = []
        for value, names in buckets.items():
            members = set(names)
            codes = [code.code for code in open_codes if code.doc in members]
            top = top_ngrams(
                ["\n".join(codes)],
                n=settings.comparative_order,
                top=settings.comparative_term_count,
            )
            terms = ", ".join(gram.term for gram in top)
            findings.append(f"{value}: {terms or EMPTY_MARKER}")

        results.append(ComparativeFinding(dimension=label, findings=FINDING_SEPARATOR.join(findings)))

    logger.debug(f"Comparative synthesis covered {len(results)} dimensions")
    return results
