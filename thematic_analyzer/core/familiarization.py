"""Familiarization: a quick per-document overview before coding."""

from typing import List, Optional, Sequence

from ..config.lexicon import INTERLOCUTOR_PATTERN
from ..config.settings import Settings
from ..models.analysis_result import FamiliarizationSummary
from ..models.document import Document
from ..utils.text import split_sentences, top_ngrams

MAX_INTERLOCUTOR_MATCHES = 3


def detect_interlocutors(text: str) -> List[str]:
    """Speaker roles named in the first few 'role:' labels, in order of appearance."""
    matches = [m.group(1).lower() for m in INTERLOCUTOR_PATTERN.finditer(text)]
    return list(dict.fromkeys(matches[:MAX_INTERLOCUTOR_MATCHES]))


def summarize_document(document: Document, settings: Optional[Settings] = None) -> FamiliarizationSummary:
    settings = settings or Settings()
    frequent = [gram.term for gram in top_ngrams([document.text], 2, settings.familiarization_term_count)]
    interlocutors = detect_interlocutors(document.text)

    context = []
    if document.meta.country:
        context.append(f"País: {document.meta.country}")
    if document.meta.locality:
        context.append(f"Localidad: {document.meta.locality}")

    summary = (
        f"Temas frecuentes: {', '.join(frequent) or '—'}. "
        f"Interlocutores: {', '.join(interlocutors) or 'no detectado'}. "
        f"{' • '.join(context)}"
    )
    return FamiliarizationSummary(
        doc=document.name,
        summary=summary,
        frequent_terms=frequent,
        interlocutors=interlocutors,
        sentences=split_sentences(document.text)[:settings.familiarization_max_sentences],
    )


def familiarize(documents: Sequence[Document], settings: Optional[Settings] = None) -> List[FamiliarizationSummary]:
    """Summarize every document independently."""
    return [summarize_document(document, settings) for document in documents]
