"""Simple validation utilities."""

import os
import pandas as pd
from typing import List, Tuple
from pathlib import Path

TRANSCRIPT_EXTENSIONS = ['.txt']
TABLE_EXTENSIONS = ['.xlsx', '.xls', '.csv']


def validate_transcript_file(file_path: str) -> Tuple[bool, str]:
    """Validate a transcript exists and is a plain-text file."""
    if not os.path.exists(file_path):
        return False, f"Transcript not found: {file_path}"

    file_ext = Path(file_path).suffix.lower()
    if file_ext not in TRANSCRIPT_EXTENSIONS:
        return False, f"Unsupported transcript format: {file_ext}. Use .txt"

    return True, "File validation successful"


def validate_input_file(file_path: str, required_columns: List[str]) -> Tuple[bool, str]:
    """
    Validate a metadata table exists and has required columns.

    Args:
        file_path: Path to the table
        required_columns: List of required column names

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not os.path.exists(file_path):
        return False, f"Input file not found: {file_path}"

    file_ext = Path(file_path).suffix.lower()
    if file_ext not in TABLE_EXTENSIONS:
        return False, f"Unsupported file format: {file_ext}. Use .xlsx, .xls, or .csv"

    try:
        if file_ext == '.csv':
            df = pd.read_csv(file_path, nrows=1)
        else:
            df = pd.read_excel(file_path, nrows=1)

        missing_columns = [col for col in required_columns if col not in df.columns]
        if missing_columns:
            available_cols = list(df.columns)
            return False, (f"Missing required columns: {missing_columns}. "
                          f"Available columns: {available_cols}")

        return True, "File validation successful"

    except Exception as e:
        return False, f"Error reading file: {str(e)}"
