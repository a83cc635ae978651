"""Data models and structures."""

from .document import BaseCategory, Document, DocumentMeta
from .analysis_result import (
    Analysis,
    CategoryGroup,
    ComparativeFinding,
    FamiliarizationSummary,
    OpenCode,
    Quote,
    Theme,
)

__all__ = [
    "BaseCategory", "Document", "DocumentMeta", "Analysis", "CategoryGroup",
    "ComparativeFinding", "FamiliarizationSummary", "OpenCode", "Quote", "Theme",
]
