"""Batch DOCX → Markdown conversion through pandoc, with image syntax cleanup.

Packages:
- mdbatch.converter: external converter boundary (pandoc)
- mdbatch.markdown: Markdown post-processing (image attribute removal)
- mdbatch.pipeline: batch orchestration and console output
"""

__version__ = "0.1.0"
