"""Document writing exports."""

from .document_writer import DocumentWriteError, ensure_all_written, write_documents
from .write_outcomes import DocumentWriteResult, WriteStatus

__all__ = [
    "DocumentWriteError",
    "DocumentWriteResult",
    "WriteStatus",
    "ensure_all_written",
    "write_documents",
]
