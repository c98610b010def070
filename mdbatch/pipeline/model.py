from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

MEDIA_SHARED = "shared"
MEDIA_PER_DOCUMENT = "per-document"

CONVERTED = "converted"
FAILED = "failed"
SKIPPED = "skipped"


@dataclass
class BatchOptions:
    directory: str = "."
    fix_images: bool = True
    backup: bool = True
    source_ext: str = ".docx"
    output_ext: str = ".md"
    media_dir_name: str = "images"
    media_mode: str = MEDIA_SHARED
    overwrite: bool = True

    def __post_init__(self) -> None:
        if self.media_mode not in (MEDIA_SHARED, MEDIA_PER_DOCUMENT):
            raise ValueError(f"Unknown media mode: {self.media_mode!r}")
        if not self.source_ext.startswith("."):
            self.source_ext = "." + self.source_ext
        if not self.output_ext.startswith("."):
            self.output_ext = "." + self.output_ext
        if self.source_ext.lower() == self.output_ext.lower():
            raise ValueError(f"Source extension {self.source_ext!r} would overwrite the input documents")


@dataclass
class FileOutcome:
    source: str
    output: str
    status: str
    error: Optional[str] = None
    # None when the fix was not attempted
    fix_changes: Optional[int] = None
    fix_error: Optional[str] = None


@dataclass
class BatchReport:
    outcomes: List[FileOutcome] = field(default_factory=list)
    markdown_count: int = 0
    media_count: int = 0

    def _with_status(self, status: str) -> List[FileOutcome]:
        return [o for o in self.outcomes if o.status == status]

    @property
    def converted(self) -> List[FileOutcome]:
        return self._with_status(CONVERTED)

    @property
    def failed(self) -> List[FileOutcome]:
        return self._with_status(FAILED)

    @property
    def skipped(self) -> List[FileOutcome]:
        return self._with_status(SKIPPED)
