"""
Entry point for the DOCX → Markdown batch converter.

Converts every .docx in a folder with pandoc, extracting images into a shared
`images/` folder, then strips the `{width=... height=...}` attribute blocks
pandoc leaves after image references.

Packages:
- mdbatch.converter: pandoc wrapper and the Converter protocol
- mdbatch.markdown: image attribute cleanup
- mdbatch.pipeline: batch orchestration (`run_batch`)
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

from mdbatch.converter import ConverterUnavailable, PandocConverter
from mdbatch.markdown import fix_image_attributes, strip_image_attributes
from mdbatch.pipeline import BatchOptions, Console, run_batch
from mdbatch.pipeline.model import MEDIA_PER_DOCUMENT, MEDIA_SHARED

__all__ = [
    "PandocConverter",
    "fix_image_attributes",
    "strip_image_attributes",
    "BatchOptions",
    "run_batch",
]


def _cli(argv: Optional[List[str]] = None) -> int:
    """CLI for batch conversion.

    directory: Folder with .docx files (default: current directory)
    --no-fix: Skip removing image attribute blocks
    --no-backup: Do not keep <name>.md.bak before fixing
    --ext: Source extension (default: .docx)
    --media-dir: Media folder name inside the directory (default: images)
    --per-document-media: Extract images into images/<name>/ per document
    --skip-existing: Do not reconvert documents whose .md already exists
    --pandoc: Path to pandoc executable (overrides config/dependencies.json)
    --no-color: Plain console output
    --verbose: Debug logging
    """
    import argparse

    parser = argparse.ArgumentParser(description="Convert .docx files in a folder to Markdown with pandoc.")
    parser.add_argument("directory", nargs="?", default=".", help="Folder with documents (default: current directory)")
    parser.add_argument("--no-fix", action="store_true", help="Skip removing {...} attribute blocks after images")
    parser.add_argument("--no-backup", action="store_true", help="Do not write <name>.md.bak before fixing")
    parser.add_argument("--ext", type=str, default=".docx", help="Source file extension (default: .docx)")
    parser.add_argument("--media-dir", type=str, default="images", help="Media folder name (default: images)")
    parser.add_argument("--per-document-media", action="store_true", help="Extract images into <media-dir>/<name>/ per document")
    parser.add_argument("--skip-existing", action="store_true", help="Leave documents whose Markdown output already exists")
    parser.add_argument("--pandoc", type=str, help="Path to pandoc executable")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    out = Console(color=not args.no_color)

    pandoc_path = args.pandoc
    if not pandoc_path:
        from mdbatch.config import configure_dependencies
        pandoc_path = configure_dependencies()

    try:
        options = BatchOptions(
            directory=args.directory,
            fix_images=not args.no_fix,
            backup=not args.no_backup,
            source_ext=args.ext,
            media_dir_name=args.media_dir,
            media_mode=MEDIA_PER_DOCUMENT if args.per_document_media else MEDIA_SHARED,
            overwrite=not args.skip_existing,
        )
    except ValueError as e:
        out.error(str(e))
        raise SystemExit(2)

    try:
        run_batch(options, PandocConverter(executable=pandoc_path), out=out)
    except (FileNotFoundError, NotADirectoryError) as e:
        out.error(str(e))
        return 1
    except ConverterUnavailable as e:
        out.error(str(e))
        out.info("Install pandoc (https://pandoc.org/installing.html) or pass --pandoc.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(_cli())
