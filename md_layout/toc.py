"""
md_layout/toc.py — przebieg 2: strona spisu treści.

Wpisy muszą mieć już rozwiązane numery stron (po layout_body). Spis mieści
się na jednej stronie; nadmiarowe wpisy nie są przenoszone dalej.
"""

from __future__ import annotations

from collections.abc import Sequence

from data_model.layout import FontStyle, RenderInstruction, TocEntry
from md_layout.constants import (
    TOC_CHAPTER_X_MM,
    TOC_ENTRY_SIZE,
    TOC_HEADER_SIZE,
    TOC_HEADER_X_MM,
    TOC_HEADER_Y_MM,
    TOC_LEADER,
    TOC_PAGE_INDEX,
    TOC_START_Y_MM,
    TOC_STEP_MM,
    TOC_SUBCHAPTER_X_MM,
    TOC_TITLE,
)


def format_entry(entry: TocEntry) -> str:
    return f"{entry.label}{TOC_LEADER}{entry.page_number}"


def render_toc(entries: Sequence[TocEntry]) -> list[RenderInstruction]:
    """Nagłówek + jedna linia na wpis, w kolejności wystąpienia w dokumencie."""
    out = [RenderInstruction(
        page_index=TOC_PAGE_INDEX,
        text=TOC_TITLE,
        font_size=TOC_HEADER_SIZE,
        x_mm=TOC_HEADER_X_MM,
        y_mm=TOC_HEADER_Y_MM,
        font_style=FontStyle.BOLD,
    )]

    y = TOC_START_Y_MM
    for entry in entries:
        out.append(RenderInstruction(
            page_index=TOC_PAGE_INDEX,
            text=format_entry(entry),
            font_size=TOC_ENTRY_SIZE,
            x_mm=TOC_CHAPTER_X_MM if entry.is_chapter else TOC_SUBCHAPTER_X_MM,
            y_mm=y,
            font_style=FontStyle.REGULAR,
        ))
        y -= TOC_STEP_MM

    return out
