from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol


class ConverterUnavailable(RuntimeError):
    """The external converter cannot be found or does not report a version."""


@dataclass
class ConversionResult:
    ok: bool
    returncode: Optional[int] = None
    stderr: str = ""


class Converter(Protocol):
    """Anything that turns one source document into Markdown plus media files."""

    name: str

    def check(self) -> str:
        """Return the converter version string or raise ConverterUnavailable."""
        ...

    def convert(self, source: str, output: str, media_dir: str) -> ConversionResult:
        ...
