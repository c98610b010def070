"""Post-processing of converter Markdown output."""

from .images import (
    BACKUP_SUFFIX,
    fix_image_attributes,
    strip_image_attributes,
)

__all__ = [
    "BACKUP_SUFFIX",
    "fix_image_attributes",
    "strip_image_attributes",
]
