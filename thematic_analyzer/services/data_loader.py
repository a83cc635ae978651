"""Loading transcripts, metadata tables and base categories."""

import pandas as pd
import logging
from typing import Dict, List, Optional, Sequence
from pathlib import Path

from ..models.document import BaseCategory, Document, DocumentMeta
from ..utils.validators import validate_input_file, validate_transcript_file

logger = logging.getLogger(__name__)

METADATA_KEY_COLUMN = 'name'


class DataLoader:
    """Builds Document records and base categories from files."""

    def __init__(self, settings=None):
        """Initialize data loader with settings."""
        self.settings = settings
        self.encoding = settings.data_encoding if settings else 'utf-8'

    def _encodings(self) -> List[str]:
        if self.settings:
            return self.settings.encoding_fallbacks
        return [self.encoding, 'utf-8', 'latin-1', 'cp1252']

    def read_text(self, file_path: str) -> str:
        """Read a text file, trying each configured encoding."""
        encodings_to_try = self._encodings()

        for encoding in encodings_to_try:
            try:
                text = Path(file_path).read_text(encoding=encoding)
                logger.debug(f"Read {file_path} with {encoding} encoding")
                return text
            except UnicodeDecodeError:
                continue

        raise ValueError(f"Unable to read {file_path} with any of the tried encodings: {encodings_to_try}")

    def expand_inputs(self, input_paths: Sequence[str]) -> List[Path]:
        """Expand directories into their .txt transcripts, keeping argument order."""
        paths = []
        for input_path in input_paths:
            path = Path(input_path)
            if path.is_dir():
                paths.extend(sorted(path.glob('*.txt')))
            else:
                paths.append(path)
        return paths

    def load_documents(
        self,
        input_paths: Sequence[str],
        metadata_file: Optional[str] = None
    ) -> List[Document]:
        """
        Load plain-text transcripts as documents.

        Args:
            input_paths: Transcript files or directories of .txt files
            metadata_file: Optional .csv/.xlsx table keyed by a 'name' column

        Returns:
            Documents with sequential ids starting at 1
        """
        metadata = self.load_metadata(metadata_file) if metadata_file else {}

        documents = []
        for path in self.expand_inputs(input_paths):
            is_valid, error_msg = validate_transcript_file(str(path))
            if not is_valid:
                raise ValueError(f"File validation failed: {error_msg}")

            meta = metadata.get(path.name) or metadata.get(path.stem) or DocumentMeta()
            documents.append(Document(
                id=len(documents) + 1,
                name=path.name,
                text=self.read_text(str(path)),
                meta=meta
            ))

        logger.info(f"Loaded {len(documents)} documents")
        return documents

    def load_metadata(self, file_path: str) -> Dict[str, DocumentMeta]:
        """Load per-document metadata from a table keyed by document name."""
        is_valid, error_msg = validate_input_file(file_path, [METADATA_KEY_COLUMN])
        if not is_valid:
            raise ValueError(f"File validation failed: {error_msg}")

        if Path(file_path).suffix.lower() == '.csv':
            df = self._load_csv(file_path)
        else:
            df = pd.read_excel(file_path)

        df = df.dropna(subset=[METADATA_KEY_COLUMN])
        metadata = {}
        for record in df.to_dict(orient='records'):
            name = str(record.pop(METADATA_KEY_COLUMN)).strip()
            metadata[name] = DocumentMeta.from_dict(record)

        logger.info(f"Loaded metadata for {len(metadata)} documents from {file_path}")
        return metadata

    def _load_csv(self, file_path: str) -> pd.DataFrame:
        """Load CSV file with encoding detection."""
        encodings_to_try = self._encodings()

        for encoding in encodings_to_try:
            try:
                return pd.read_csv(file_path, encoding=encoding)
            except UnicodeDecodeError:
                continue

        raise ValueError(f"Unable to load CSV file with any of the tried encodings: {encodings_to_try}")

    def load_base_categories(self, file_path: str) -> List[BaseCategory]:
        """Load base categories from a 'label | synonym | ...' text file."""
        if not Path(file_path).exists():
            raise ValueError(f"Categories file not found: {file_path}")
        return parse_base_categories(self.read_text(file_path))


def parse_base_categories(text: str) -> List[BaseCategory]:
    """Parse one base category per non-blank line; '#' starts a comment line."""
    categories = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        categories.append(BaseCategory.from_line(line))
    return categories
