"""Configuration management for the thematic analyzer."""

import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from dotenv import load_dotenv


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass
class Settings:
    """Tunable parameters of the analysis pipeline."""

    # Open coding
    vocabulary_size: int = 60
    vocabulary_max_order: int = 3
    min_sentence_tokens: int = 6
    dedup_quote_prefix: int = 40

    # Emergent category discovery
    codes_per_emergent_cluster: int = 20
    max_emergent_clusters: int = 5
    kmeans_iterations: int = 10
    emergent_label_order: int = 3
    random_seed: Optional[int] = None

    # Thematic synthesis
    subtheme_count: int = 4
    subtheme_order: int = 2
    max_theme_quotes: int = 8

    # Comparative synthesis
    comparative_term_count: int = 3
    comparative_order: int = 2

    # Familiarization
    familiarization_term_count: int = 5
    familiarization_max_sentences: int = 50

    # Data processing and output
    output_dir: str = "output"
    data_encoding: str = "utf-8"
    encoding_fallbacks: list = None

    def __post_init__(self):
        """Initialize derived settings after object creation."""
        if self.encoding_fallbacks is None:
            self.encoding_fallbacks = [self.data_encoding, 'utf-8', 'latin-1', 'cp1252']

    @classmethod
    def from_env(cls, env_file: str = None) -> "Settings":
        """Create settings from environment variables."""
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        return cls(
            vocabulary_size=int(os.getenv("VOCABULARY_SIZE", "60")),
            vocabulary_max_order=int(os.getenv("VOCABULARY_MAX_ORDER", "3")),
            min_sentence_tokens=int(os.getenv("MIN_SENTENCE_TOKENS", "6")),
            dedup_quote_prefix=int(os.getenv("DEDUP_QUOTE_PREFIX", "40")),
            codes_per_emergent_cluster=int(os.getenv("CODES_PER_EMERGENT_CLUSTER", "20")),
            max_emergent_clusters=int(os.getenv("MAX_EMERGENT_CLUSTERS", "5")),
            kmeans_iterations=int(os.getenv("KMEANS_ITERATIONS", "10")),
            emergent_label_order=int(os.getenv("EMERGENT_LABEL_ORDER", "3")),
            random_seed=_optional_int(os.getenv("RANDOM_SEED")),
            subtheme_count=int(os.getenv("SUBTHEME_COUNT", "4")),
            subtheme_order=int(os.getenv("SUBTHEME_ORDER", "2")),
            max_theme_quotes=int(os.getenv("MAX_THEME_QUOTES", "8")),
            comparative_term_count=int(os.getenv("COMPARATIVE_TERM_COUNT", "3")),
            comparative_order=int(os.getenv("COMPARATIVE_ORDER", "2")),
            familiarization_term_count=int(os.getenv("FAMILIARIZATION_TERM_COUNT", "5")),
            familiarization_max_sentences=int(os.getenv("FAMILIARIZATION_MAX_SENTENCES", "50")),
            output_dir=os.getenv("OUTPUT_DIR", "output"),
            data_encoding=os.getenv("DATA_ENCODING", "utf-8"),
        )

    def validate(self) -> None:
        """Validate configuration settings."""
        positive_fields = [
            "vocabulary_size", "vocabulary_max_order", "codes_per_emergent_cluster",
            "max_emergent_clusters", "kmeans_iterations", "emergent_label_order",
            "subtheme_order", "comparative_order",
        ]
        for name in positive_fields:
            if getattr(self, name) < 1:
                raise ValueError(f"{name.upper()} must be at least 1")

        non_negative_fields = [
            "min_sentence_tokens", "dedup_quote_prefix", "subtheme_count",
            "max_theme_quotes", "comparative_term_count", "familiarization_term_count",
            "familiarization_max_sentences",
        ]
        for name in non_negative_fields:
            if getattr(self, name) < 0:
                raise ValueError(f"{name.upper()} must not be negative")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for display and report metadata."""
        return asdict(self)
