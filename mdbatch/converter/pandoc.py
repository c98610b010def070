"""Pandoc as the external DOCX → Markdown converter.

pypandoc is used to locate the pandoc binary and read its version; the
conversion itself is a plain synchronous subprocess so success is decided by
the exit status alone.
"""

from __future__ import annotations

import logging
import os
import subprocess
from typing import List, Optional

import pypandoc

from .base import ConversionResult, ConverterUnavailable

logger = logging.getLogger(__name__)


class PandocConverter:
    """Run pandoc once per document, extracting media into a given directory.

    Doxygen:
    - @param executable: Explicit pandoc binary; None means let pypandoc find one.
    - @param output_format: Pandoc writer name (default: markdown).
    - @param extra_args: Extra command-line arguments appended before -o.
    """

    name = "pandoc"

    def __init__(
        self,
        executable: Optional[str] = None,
        output_format: str = "markdown",
        extra_args: Optional[List[str]] = None,
    ) -> None:
        self.executable = executable
        self.output_format = output_format
        self.extra_args = list(extra_args or [])
        self._resolved: Optional[str] = None

    def check(self) -> str:
        """Return pandoc's version string.

        Doxygen:
        - @return: Version reported by pandoc, e.g. '3.1.9'.
        - @throws ConverterUnavailable: If pandoc is missing or reports nothing.

        pypandoc caches the first pandoc it resolves for the whole process, so
        with several converters the reported version is that of the first one.
        Conversions always run the explicit `executable` when one is given.
        """
        previous = os.environ.get("PYPANDOC_PANDOC")
        if self.executable:
            # pypandoc reads this before searching PATH and its bundled copy
            os.environ["PYPANDOC_PANDOC"] = self.executable
        try:
            version = pypandoc.get_pandoc_version()
            self._resolved = self.executable or pypandoc.get_pandoc_path()
        except (OSError, RuntimeError) as exc:
            raise ConverterUnavailable(f"pandoc is not available: {exc}") from exc
        finally:
            if self.executable:
                if previous is None:
                    os.environ.pop("PYPANDOC_PANDOC", None)
                else:
                    os.environ["PYPANDOC_PANDOC"] = previous
        if not version or not str(version).strip():
            raise ConverterUnavailable("pandoc did not report a version")
        return str(version).strip()

    @property
    def command_name(self) -> str:
        return self._resolved or self.executable or "pandoc"

    def build_command(self, source: str, output: str, media_dir: str, cwd: Optional[str] = None) -> List[str]:
        """Assemble the pandoc argument list.

        With `cwd` the media directory is made relative to it, so image links
        written into the Markdown stay relative to the output file.
        """
        if cwd:
            media_dir = os.path.relpath(media_dir, cwd)
        cmd = [self.command_name, source, "-t", self.output_format, f"--extract-media={media_dir}"]
        cmd.extend(self.extra_args)
        cmd.extend(["-o", output])
        return cmd

    def convert(self, source: str, output: str, media_dir: str) -> ConversionResult:
        cwd = os.path.dirname(os.path.abspath(output))
        cmd = self.build_command(os.path.abspath(source), os.path.abspath(output), media_dir, cwd=cwd)
        logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd)
        # No timeout: a hung pandoc blocks the run.
        proc = subprocess.run(cmd, cwd=cwd, capture_output=True, encoding="utf-8", errors="replace")
        if proc.returncode != 0:
            logger.debug("pandoc exited with %s: %s", proc.returncode, proc.stderr.strip())
        return ConversionResult(ok=proc.returncode == 0, returncode=proc.returncode, stderr=proc.stderr or "")
