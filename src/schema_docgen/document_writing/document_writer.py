"""Bounded-concurrency document writer."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from schema_docgen.documentation.documentation_models import RenderedDocument

from .write_outcomes import DocumentWriteResult, WriteStatus


class DocumentWriteError(Exception):
    """Raised when one or more documents could not be written."""

    def __init__(self, failures: Sequence[DocumentWriteResult]) -> None:
        self.failures = tuple(failures)
        details = "; ".join(f"{failure.path}: {failure.error_message}" for failure in failures)
        super().__init__(f"Failed to write {len(self.failures)} document(s): {details}")


def write_documents(
    documents: Sequence[RenderedDocument], output_dir: Path | str, *, parallelism: int = 4
) -> list[DocumentWriteResult]:
    """Write every document and return one result per document, in input order."""
    destination = Path(output_dir)
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return [DocumentWriteResult.failed(destination / doc.file_name, exc) for doc in documents]

    max_workers = max(1, parallelism)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(_write_single, destination / document.file_name, document.body)
            for document in documents
        ]
        return [future.result() for future in futures]


def ensure_all_written(results: Sequence[DocumentWriteResult]) -> list[Path]:
    """Return the written paths, or raise listing every failed document."""
    failures = [result for result in results if result.status is WriteStatus.FAILED]
    if failures:
        raise DocumentWriteError(failures)
    return [result.path for result in results]


def _write_single(path: Path, body: str) -> DocumentWriteResult:
    try:
        path.write_text(body, encoding="utf-8")
        return DocumentWriteResult.written(path)
    except (OSError, ValueError) as exc:
        return DocumentWriteResult.failed(path, exc)
