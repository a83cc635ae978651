"""Main thematic analyzer orchestrating all pipeline stages."""

import logging
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence

from tqdm import tqdm

from ..config.settings import Settings
from ..models.analysis_result import Analysis, OpenCode
from ..models.document import Document
from ..services.data_loader import DataLoader
from ..services.report_generator import ReportGenerator
from ..utils.sentiment import compute_sentiment
from ..utils.similarity import RandomState
from .category_grouper import BaseCategoryLike, CategoryGrouper
from .familiarization import summarize_document
from .open_coder import OpenCoder
from .synthesis import synthesize_comparison, synthesize_themes

logger = logging.getLogger(__name__)


class ThematicAnalyzer:
    """Main analyzer class orchestrating all components."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        random_state: RandomState = None,
        show_progress: bool = False
    ):
        """
        Initialize the thematic analyzer.

        Args:
            settings: Pipeline settings, defaults when omitted
            random_state: Seed or numpy Generator for emergent clustering;
                falls back to settings.random_seed, unseeded when both are None
            show_progress: Show a progress bar over documents
        """
        self.settings = settings or Settings()
        self.settings.validate()
        self.show_progress = show_progress

        self._initialize_components(random_state)

        self.current_analysis: Optional[Analysis] = None

        logger.debug("ThematicAnalyzer initialized")

    @classmethod
    def from_env(
        cls,
        env_file: Optional[str] = None,
        random_state: RandomState = None,
        show_progress: bool = False
    ) -> "ThematicAnalyzer":
        """Create analyzer from environment variables."""
        settings = Settings.from_env(env_file)
        return cls(settings, random_state, show_progress)

    def _initialize_components(self, random_state: RandomState):
        """Initialize all analyzer components."""
        self.open_coder = OpenCoder(self.settings)
        self.category_grouper = CategoryGrouper(self.settings, random_state=random_state)

        # Service components
        self.data_loader = DataLoader(settings=self.settings)
        self.report_generator = ReportGenerator(self.settings.output_dir)

    def analyze(
        self,
        documents: Sequence[Document],
        base_categories: Optional[Sequence[BaseCategoryLike]] = None
    ) -> Analysis:
        """
        Run the full pipeline over a corpus.

        Args:
            documents: Decoded documents in output order
            base_categories: Researcher categories in priority order

        Returns:
            Analysis aggregate for this run
        """
        documents = list(documents)
        base_categories = list(base_categories or [])
        logger.info(f"Starting analysis of {len(documents)} documents "
                    f"with {len(base_categories)} base categories")

        # Documents are independent until the global vocabulary is applied
        vocabulary = self.open_coder.build_vocabulary(documents)
        familiarization = []
        codes: List[OpenCode] = []
        for document in tqdm(documents, desc="Coding documents", disable=not self.show_progress):
            familiarization.append(summarize_document(document, self.settings))
            codes.extend(self.open_coder.code_document(document, vocabulary))
        open_codes = self.open_coder.deduplicate(codes)
        logger.info(f"Open coding produced {len(open_codes)} codes")

        grouped = self.category_grouper.group(open_codes, base_categories)
        themes = synthesize_themes(grouped, self.settings)
        comparative = synthesize_comparison(documents, open_codes, self.settings)

        self.current_analysis = Analysis(
            docs=documents,
            familiarization=familiarization,
            open_codes=open_codes,
            grouped=grouped,
            themes=themes,
            comparative=comparative,
        )

        stats = self.current_analysis.get_statistics()
        logger.info(f"Analysis completed successfully. "
                    f"{stats['total_categories']} categories "
                    f"({stats['emergent_categories']} emergent), "
                    f"{stats['total_themes']} themes")
        return self.current_analysis

    def analyze_files(
        self,
        input_paths: Sequence[str],
        categories_file: Optional[str] = None,
        metadata_file: Optional[str] = None
    ) -> Analysis:
        """Load transcripts, base categories and metadata, then analyze them."""
        documents = self.data_loader.load_documents(input_paths, metadata_file=metadata_file)
        base_categories = (
            self.data_loader.load_base_categories(categories_file) if categories_file else []
        )
        return self.analyze(documents, base_categories)

    def rename_category(self, old_label: str, new_label: str) -> Analysis:
        """Rename a category across groups and themes of the current analysis."""
        if not self.current_analysis:
            raise ValueError("No analysis available to edit")
        self.current_analysis = self.current_analysis.rename_category(old_label, new_label)
        logger.info(f"Renamed category '{old_label}' to '{new_label}'")
        return self.current_analysis

    def remove_categories(self, labels: Sequence[str]) -> Analysis:
        """Remove categories and their themes from the current analysis."""
        if not self.current_analysis:
            raise ValueError("No analysis available to edit")
        self.current_analysis = self.current_analysis.remove_categories(labels)
        return self.current_analysis

    def generate_report(
        self,
        report_title: str = "Análisis temático",
        write_excel: bool = True
    ) -> Dict[str, str]:
        """Generate JSON and Excel reports for the current analysis."""
        if not self.current_analysis:
            raise ValueError("No analysis available for reporting")

        return self.report_generator.generate_report(
            analysis=self.current_analysis,
            report_title=report_title,
            sentiment=compute_sentiment(self.current_analysis.docs),
            settings=self.settings,
            write_excel=write_excel
        )

    def get_analysis_summary(self, top_n: int = 5) -> Dict[str, Any]:
        """Get summary of current analysis."""
        if not self.current_analysis:
            return {"error": "No analysis available"}

        code_counts = Counter(code.code for code in self.current_analysis.open_codes)
        return {
            "statistics": self.current_analysis.get_statistics(),
            "top_categories": [
                {"name": group.category, "codes": len(group.codes)}
                for group in sorted(self.current_analysis.grouped, key=lambda g: len(g.codes), reverse=True)[:top_n]
            ],
            "top_codes": [
                {"code": code, "frequency": count}
                for code, count in code_counts.most_common(top_n)
            ],
            "sentiment": compute_sentiment(self.current_analysis.docs),
        }


def run_full_analysis(
    documents: Sequence[Document],
    base_categories: Optional[Sequence[BaseCategoryLike]] = None,
    settings: Optional[Settings] = None,
    random_state: RandomState = None
) -> Analysis:
    """
    Run the pipeline once with fresh components.

    Only the emergent clustering step depends on random_state; pass a seed for
    reproducible output.
    """
    analyzer = ThematicAnalyzer(settings=settings, random_state=random_state)
    return analyzer.analyze(documents, base_categories)
