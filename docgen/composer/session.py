"""
Composition Session State.

Per-document-type configuration owned by the composition layer. Each
document type has its own stamp and background settings; nothing is
shared across types and nothing is persisted.

Author: Document Tools Team
"""

from dataclasses import dataclass
from typing import Dict, Optional

from docgen.form_extractor.extractor import DocumentData
from docgen.form_extractor.models import DocumentType
from docgen.themes.background import BackgroundTheme
from docgen.themes.stamp import StampConfig


@dataclass
class DocumentConfig:
    """Stamp and background of one document type; None means not set."""
    stamp: Optional[StampConfig] = None
    background: Optional[BackgroundTheme] = None


class SessionState:
    """
    Session-scoped state for all document types.

    Holds the DocumentConfig of every type plus the last record generated
    for it, so that applying or clearing a theme can recompose the
    document without the form being submitted again.

    Example:
        >>> session = SessionState()
        >>> session.config_for(DocumentType.RECEIPT).stamp is None
        True
    """

    def __init__(self) -> None:
        self._configs: Dict[DocumentType, DocumentConfig] = {}
        self._records: Dict[DocumentType, DocumentData] = {}
        self.reset()

    def reset(self) -> None:
        """Back to the startup state: no stamps, no backgrounds, no records."""
        self._configs = {document_type: DocumentConfig() for document_type in DocumentType}
        self._records = {}

    def config_for(self, document_type: DocumentType) -> DocumentConfig:
        return self._configs[document_type]

    def record_for(self, document_type: DocumentType) -> Optional[DocumentData]:
        return self._records.get(document_type)

    def store_record(self, record: DocumentData) -> None:
        self._records[record.document_type] = record
