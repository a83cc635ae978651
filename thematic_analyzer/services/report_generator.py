"""JSON and Excel reports for a thematic analysis."""

import os
import logging
from datetime import datetime
from typing import Any, Dict, Optional
import pandas as pd
import json

from ..models.analysis_result import Analysis

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Generates analysis reports in JSON and Excel formats."""

    def __init__(self, output_dir: str = "output"):
        """Initialize report generator."""
        self.output_dir = output_dir

    def generate_report(
        self,
        analysis: Analysis,
        report_title: str = "Análisis temático",
        sentiment: Optional[Dict[str, int]] = None,
        settings=None,
        write_excel: bool = True
    ) -> Dict[str, str]:
        """
        Write the analysis to the output directory.

        Returns:
            Dictionary mapping format to file path
        """
        os.makedirs(self.output_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        report_files = {}

        json_path = os.path.join(self.output_dir, f"analysis_{timestamp}.json")
        self._generate_json_report(analysis, report_title, sentiment, settings, json_path)
        report_files["json"] = json_path

        if write_excel:
            excel_path = os.path.join(self.output_dir, f"analysis_{timestamp}.xlsx")
            self._generate_excel_report(analysis, sentiment, excel_path)
            report_files["excel"] = excel_path

        logger.info(f"Generated report files: {list(report_files.keys())}")
        return report_files

    def _generate_json_report(
        self,
        analysis: Analysis,
        report_title: str,
        sentiment: Optional[Dict[str, int]],
        settings,
        file_path: str
    ) -> None:
        """Generate the JSON export of the full Analysis aggregate."""
        report: Dict[str, Any] = {
            "title": report_title,
            "generated_timestamp": datetime.now().isoformat(),
            "statistics": analysis.get_statistics(),
            "analysis": analysis.to_dict(),
        }
        if sentiment is not None:
            report["sentiment"] = sentiment
        if settings is not None:
            report["settings"] = settings.to_dict()

        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        logger.info(f"JSON report saved to: {file_path}")

    def _generate_excel_report(
        self,
        analysis: Analysis,
        sentiment: Optional[Dict[str, int]],
        file_path: str
    ) -> None:
        """Generate an Excel workbook with one sheet per pipeline stage."""
        stats = analysis.get_statistics()
        summary_rows = [[key.replace('_', ' ').capitalize(), value] for key, value in stats.items()]
        for label, value in (sentiment or {}).items():
            summary_rows.append([f"Sentiment {label}", value])

        codes_df = pd.DataFrame(
            [[code.doc, code.code, code.quote] for code in analysis.open_codes],
            columns=['Document', 'Code', 'Quote']
        )
        categories_df = pd.DataFrame(
            [
                [group.category, 'Emergent' if group.is_emergent else 'Base', code.code, code.quote, code.doc]
                for group in analysis.grouped
                for code in group.codes
            ],
            columns=['Category', 'Type', 'Code', 'Quote', 'Document']
        )
        themes_df = pd.DataFrame(
            [
                [theme.theme, ", ".join(theme.subthemes), quote.text, quote.doc]
                for theme in analysis.themes
                for quote in theme.quotes
            ],
            columns=['Theme', 'Subthemes', 'Quote', 'Document']
        )
        comparative_df = pd.DataFrame(
            [[finding.dimension, finding.findings] for finding in analysis.comparative],
            columns=['Dimension', 'Findings']
        )

        with pd.ExcelWriter(file_path, engine='openpyxl') as writer:
            pd.DataFrame(summary_rows, columns=['Metric', 'Value']).to_excel(writer, sheet_name='Summary', index=False)
            codes_df.to_excel(writer, sheet_name='Open Codes', index=False)
            categories_df.to_excel(writer, sheet_name='Categories', index=False)
            themes_df.to_excel(writer, sheet_name='Themes', index=False)
            comparative_df.to_excel(writer, sheet_name='Comparative', index=False)

        logger.info(f"Excel report saved to: {file_path}")
