"""Core business logic for thematic analysis."""

from .analyzer import ThematicAnalyzer, run_full_analysis
from .open_coder import OpenCoder
from .category_grouper import CategoryGrouper
from .synthesis import synthesize_themes, synthesize_comparison
from .familiarization import familiarize

__all__ = [
    "ThematicAnalyzer",
    "run_full_analysis",
    "OpenCoder",
    "CategoryGrouper",
    "synthesize_themes",
    "synthesize_comparison",
    "familiarize",
]
