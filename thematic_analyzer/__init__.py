"""Thematic Text Analysis Framework

Open coding, category grouping and thematic synthesis for Spanish-language
interview transcripts.
"""

__version__ = "1.0.0"
__author__ = "Qualitative Analysis Team"

from .core.analyzer import ThematicAnalyzer, run_full_analysis
from .models.analysis_result import Analysis
from .models.document import BaseCategory, Document, DocumentMeta

__all__ = [
    "ThematicAnalyzer",
    "run_full_analysis",
    "Analysis",
    "BaseCategory",
    "Document",
    "DocumentMeta",
]
