"""Analysis result models produced by the thematic pipeline."""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List

from ..config.lexicon import EMERGENT_PREFIX
from .document import Document


@dataclass(frozen=True)
class OpenCode:
    """A quote anchored to the first vocabulary gram it contains."""

    doc: str
    code: str
    quote: str

    def dedup_key(self, prefix_length: int = 40) -> str:
        return f"{self.doc}|{self.code}|{self.quote[:prefix_length]}"

    def to_dict(self) -> Dict[str, Any]:
        return {"doc": self.doc, "code": self.code, "quote": self.quote}


@dataclass
class CategoryGroup:
    """A base or emergent category and the open codes assigned to it."""

    category: str
    synonyms: List[str] = field(default_factory=list)
    codes: List[OpenCode] = field(default_factory=list)

    @property
    def is_emergent(self) -> bool:
        return self.category.startswith((f"{EMERGENT_PREFIX}:", f"{EMERGENT_PREFIX} "))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"category": self.category}
        if not self.is_emergent:
            data["synonyms"] = list(self.synonyms)
        data["codes"] = [code.to_dict() for code in self.codes]
        return data


@dataclass(frozen=True)
class Quote:
    """A representative quote and the document it came from."""

    text: str
    doc: str

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "doc": self.doc}


@dataclass
class Theme:
    """Subthemes and representative quotes synthesized from one category."""

    theme: str
    subthemes: List[str] = field(default_factory=list)
    quotes: List[Quote] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "theme": self.theme,
            "subthemes": list(self.subthemes),
            "quotes": [quote.to_dict() for quote in self.quotes],
        }


@dataclass(frozen=True)
class ComparativeFinding:
    """Frequent code terms per metadata value along one dimension."""

    dimension: str
    findings: str

    def to_dict(self) -> Dict[str, Any]:
        return {"dimension": self.dimension, "findings": self.findings}


@dataclass
class FamiliarizationSummary:
    """First-pass overview of a single document."""

    doc: str
    summary: str
    frequent_terms: List[str] = field(default_factory=list)
    interlocutors: List[str] = field(default_factory=list)
    sentences: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "doc": self.doc,
            "summary": self.summary,
            "frequentTerms": list(self.frequent_terms),
            "interlocutors": list(self.interlocutors),
            "sentences": list(self.sentences),
        }


@dataclass(frozen=True)
class Analysis:
    """Complete result of one pipeline run.

    Category labels are the only join key between ``grouped`` and ``themes``, so
    edits go through ``rename_category`` and ``remove_categories``, which
    return a new Analysis with both collections updated together.
    """

    docs: List[Document] = field(default_factory=list)
    familiarization: List[FamiliarizationSummary] = field(default_factory=list)
    open_codes: List[OpenCode] = field(default_factory=list)
    grouped: List[CategoryGroup] = field(default_factory=list)
    themes: List[Theme] = field(default_factory=list)
    comparative: List[ComparativeFinding] = field(default_factory=list)

    def get_categories(self) -> List[str]:
        """Get all category labels in output order."""
        return [group.category for group in self.grouped]

    def get_emergent_groups(self) -> List[CategoryGroup]:
        return [group for group in self.grouped if group.is_emergent]

    def get_theme(self, label: str):
        """Get the theme synthesized for a category label, or None."""
        for theme in self.themes:
            if theme.theme == label:
                return theme
        return None

    def rename_category(self, old_label: str, new_label: str) -> "Analysis":
        """
        Rename a category in both the groups and the themes.

        Emergent labels are not unique, so every group and theme sharing
        old_label is renamed.

        Args:
            old_label: Current category label
            new_label: Replacement label

        Returns:
            New Analysis; the original is left untouched
        """
        new_label = (new_label or "").strip()
        labels = self.get_categories()
        if old_label not in labels:
            raise KeyError(f"Unknown category: {old_label}")
        if not new_label:
            raise ValueError("New category label must not be empty")
        if new_label != old_label and new_label in labels:
            raise ValueError(f"Category already exists: {new_label}")

        grouped = [
            replace(group, category=new_label) if group.category == old_label else group
            for group in self.grouped
        ]
        themes = [
            replace(theme, theme=new_label) if theme.theme == old_label else theme
            for theme in self.themes
        ]
        return replace(self, grouped=grouped, themes=themes)

    def remove_categories(self, labels: Iterable[str]) -> "Analysis":
        """Drop categories and every theme that no longer matches a group."""
        removed = set(labels)
        grouped = [group for group in self.grouped if group.category not in removed]
        kept = {group.category for group in grouped}
        themes = [theme for theme in self.themes if theme.theme in kept]
        return replace(self, grouped=grouped, themes=themes)

    def get_statistics(self) -> Dict[str, Any]:
        """Get summary counts for display."""
        emergent = self.get_emergent_groups()
        return {
            "total_documents": len(self.docs),
            "total_open_codes": len(self.open_codes),
            "unique_codes": len({code.code for code in self.open_codes}),
            "total_categories": len(self.grouped),
            "base_categories": len(self.grouped) - len(emergent),
            "emergent_categories": len(emergent),
            "total_themes": len(self.themes),
            "comparative_dimensions": len(self.comparative),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "docs": [doc.to_dict() for doc in self.docs],
            "familiarization": [item.to_dict() for item in self.familiarization],
            "openCodes": [code.to_dict() for code in self.open_codes],
            "grouped": [group.to_dict() for group in self.grouped],
            "themes": [theme.to_dict() for theme in self.themes],
            "comparative": [finding.to_dict() for finding in self.comparative],
        }
