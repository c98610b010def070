from __future__ import annotations

import re
import shutil
from typing import Tuple

# ![alt](src) directly followed by a {...} attribute block
IMAGE_ATTRS_RE = re.compile(r"(!\[[^\]]*\]\([^)]*\))\{[^}]*\}")

BACKUP_SUFFIX = ".bak"


def strip_image_attributes(text: str) -> Tuple[str, int]:
    """Drop attribute blocks that pandoc appends to image references.

    `![a](b){width="3in"}` becomes `![a](b)`; everything else is left alone.
    Returns the new text and the number of blocks removed.
    """
    return IMAGE_ATTRS_RE.subn(r"\1", text)


def fix_image_attributes(path: str, backup: bool = True) -> int:
    """Rewrite a Markdown file in place without image attribute blocks.

    Doxygen:
    - @param path: Markdown file produced by the converter.
    - @param backup: Copy the file to `<path>.bak` before touching it.
    - @return: Number of attribute blocks removed (0 leaves the file as is).
    - @throws OSError: If the backup, read or write fails. Nothing is retried.
    """
    if backup:
        shutil.copyfile(path, path + BACKUP_SUFFIX)

    with open(path, "r", encoding="utf-8", newline="") as f:
        content = f.read()

    fixed, count = strip_image_attributes(content)
    if count == 0:
        return 0

    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(fixed)
    return count
