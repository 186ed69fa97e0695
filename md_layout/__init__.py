"""
md_layout — silnik układu markdown → strony PDF (bez zależności od biblioteki PDF).

Publiczne API:
  wrap(line, max_width)                  -> list[str]
  extract_title(lines)                   -> str | None
  extract_signature(lines)               -> str | None
  extract_footer(lines)                  -> str | None
  extract_metadata(lines, options)       -> Metadata
  layout_body(lines, metadata, options)  -> LayoutResult
  render_toc(entries)                    -> list[RenderInstruction]
  cover_instructions(metadata)           -> list[RenderInstruction]
  plan_document(text, options)           -> DocumentPlan
"""

from .wrap import wrap
from .metadata import (
    extract_title,
    extract_signature,
    extract_footer,
    extract_metadata,
)
from .engine import LayoutEngine, layout_body
from .toc import render_toc, format_entry
from .cover import cover_instructions
from .pipeline import plan_document, split_lines

__all__ = [
    "wrap",
    "extract_title",
    "extract_signature",
    "extract_footer",
    "extract_metadata",
    "LayoutEngine",
    "layout_body",
    "render_toc",
    "format_entry",
    "cover_instructions",
    "plan_document",
    "split_lines",
]
