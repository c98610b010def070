"""Batch pipeline: enumerate documents → convert each → fix image syntax.

`run_batch` is the single entry point used by the CLI. The converter is
injected so the orchestration can run against a fake in tests.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional

from mdbatch.converter import Converter, ConverterUnavailable
from mdbatch.markdown import fix_image_attributes

from .console import Console
from .model import (
    CONVERTED,
    FAILED,
    MEDIA_PER_DOCUMENT,
    SKIPPED,
    BatchOptions,
    BatchReport,
    FileOutcome,
)

logger = logging.getLogger(__name__)

# Word keeps "~$name.docx" owner files next to documents that are open
LOCK_FILE_PREFIX = "~$"


def find_source_documents(directory: str, source_ext: str = ".docx") -> List[str]:
    """Return sorted paths of immediate children of `directory` with `source_ext`."""
    ext = source_ext.lower()
    found: List[str] = []
    for name in sorted(os.listdir(directory)):
        if name.startswith(LOCK_FILE_PREFIX):
            continue
        path = os.path.join(directory, name)
        if os.path.isfile(path) and os.path.splitext(name)[1].lower() == ext:
            found.append(path)
    return found


def output_path_for(source: str, output_ext: str = ".md") -> str:
    return os.path.splitext(source)[0] + output_ext


def media_dir_for(source: str, options: BatchOptions) -> str:
    root = os.path.join(options.directory, options.media_dir_name)
    if options.media_mode == MEDIA_PER_DOCUMENT:
        stem = os.path.splitext(os.path.basename(source))[0]
        return os.path.join(root, stem)
    return root


def count_files(path: str) -> int:
    if not os.path.isdir(path):
        return 0
    return sum(len(files) for _, _, files in os.walk(path))


def _convert_one(source: str, options: BatchOptions, converter: Converter, out: Console) -> FileOutcome:
    output = output_path_for(source, options.output_ext)
    name = os.path.basename(source)

    if not options.overwrite and os.path.exists(output):
        out.info(f"Skipping {name}: {os.path.basename(output)} already exists")
        return FileOutcome(source=source, output=output, status=SKIPPED)

    media_dir = media_dir_for(source, options)
    os.makedirs(media_dir, exist_ok=True)

    out.step(f"Converting {name} → {os.path.basename(output)}")
    try:
        result = converter.convert(source, output, media_dir)
    except Exception as exc:
        # One broken invocation must not stop the remaining documents
        logger.debug("%s raised for %s", converter.name, source, exc_info=True)
        out.error(f"{name}: failed to run {converter.name}: {exc}")
        return FileOutcome(source=source, output=output, status=FAILED, error=str(exc))

    if not result.ok:
        detail = result.stderr.strip().splitlines()[-1] if result.stderr.strip() else ""
        message = f"{converter.name} exited with status {result.returncode}"
        if detail:
            message = f"{message}: {detail}"
        out.error(f"{name}: {message}")
        return FileOutcome(source=source, output=output, status=FAILED, error=message)

    outcome = FileOutcome(source=source, output=output, status=CONVERTED)
    if not options.fix_images:
        out.success(f"{name} converted")
        return outcome

    try:
        outcome.fix_changes = fix_image_attributes(output, backup=options.backup)
    except (OSError, UnicodeDecodeError) as exc:
        outcome.fix_error = str(exc)
        out.warning(f"{name}: image syntax fix failed: {exc}")
        return outcome

    if outcome.fix_changes:
        out.success(f"{name} converted, removed {outcome.fix_changes} image attribute block(s)")
    else:
        out.success(f"{name} converted, no image attributes to fix")
    return outcome


def run_batch(
    options: BatchOptions,
    converter: Converter,
    out: Optional[Console] = None,
) -> BatchReport:
    """Convert every source document in `options.directory` to Markdown.

    Doxygen:
    - @param options: What to convert and how (see BatchOptions).
    - @param converter: External converter capability (check + convert).
    - @param out: Console for status lines (default: colored Console).
    - @return: BatchReport with one FileOutcome per document.
    - @throws FileNotFoundError: If the directory does not exist.
    - @throws NotADirectoryError: If the path is not a directory.
    - @throws ConverterUnavailable: If the converter does not report a version.
    """
    out = out or Console()
    directory = options.directory

    if not os.path.exists(directory):
        raise FileNotFoundError(f"Directory not found: {directory}")
    if not os.path.isdir(directory):
        raise NotADirectoryError(f"Not a directory: {directory}")

    version = converter.check()
    if not version:
        raise ConverterUnavailable(f"{converter.name} did not report a version")
    out.info(f"Using {converter.name} {version}")

    report = BatchReport()
    sources = find_source_documents(directory, options.source_ext)
    if not sources:
        out.info(f"No {options.source_ext} files found in {directory}; nothing to do.")
        return report

    out.info(f"Found {len(sources)} {options.source_ext} file(s) in {directory}")
    claimed: Dict[str, str] = {}
    for source in sources:
        output = output_path_for(source, options.output_ext)
        if output in claimed:
            # a.docx and a.DOCX both map to a.md on case-sensitive filesystems
            message = f"{os.path.basename(output)} already produced from {os.path.basename(claimed[output])}"
            out.warning(f"Skipping {os.path.basename(source)}: {message}")
            report.outcomes.append(FileOutcome(source=source, output=output, status=SKIPPED, error=message))
            continue
        claimed[output] = source
        report.outcomes.append(_convert_one(source, options, converter, out))

    report.markdown_count = sum(1 for output in claimed if os.path.exists(output))
    report.media_count = count_files(os.path.join(directory, options.media_dir_name))

    out.info(
        f"Done: {len(report.converted)} converted, {len(report.failed)} failed, "
        f"{len(report.skipped)} skipped"
    )
    out.info(f"Markdown files: {report.markdown_count}, media files: {report.media_count}")
    for outcome in report.failed:
        logger.debug("Failed: %s (%s)", outcome.source, outcome.error)
    return report
