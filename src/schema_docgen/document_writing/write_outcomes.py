"""Document writing domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class WriteStatus(str, Enum):
    """Document writing outcome status."""

    WRITTEN = "written"
    FAILED = "failed"


@dataclass(frozen=True)
class DocumentWriteResult:
    """Outcome of attempting to write one document."""

    path: Path
    status: WriteStatus
    error_message: str | None

    @staticmethod
    def written(path: Path) -> DocumentWriteResult:
        return DocumentWriteResult(path=path, status=WriteStatus.WRITTEN, error_message=None)

    @staticmethod
    def failed(path: Path, error: Exception) -> DocumentWriteResult:
        return DocumentWriteResult(path=path, status=WriteStatus.FAILED, error_message=str(error))
