"""File loading and report writing around the core pipeline."""

from .data_loader import DataLoader, parse_base_categories
from .report_generator import ReportGenerator

__all__ = ["DataLoader", "parse_base_categories", "ReportGenerator"]
