"""md_layout/cover.py — okładka: tytuł i podpis."""

from __future__ import annotations

from data_model.layout import FontStyle, Metadata, RenderInstruction
from md_layout.constants import (
    COVER_PAGE_INDEX,
    COVER_TITLE_SIZE,
    COVER_TITLE_X_MM,
    COVER_TITLE_Y_MM,
    SIGNATURE_SIZE,
    SIGNATURE_X_MM,
    SIGNATURE_Y_MM,
)


def cover_instructions(metadata: Metadata) -> list[RenderInstruction]:
    return [
        RenderInstruction(
            page_index=COVER_PAGE_INDEX,
            text=metadata.title,
            font_size=COVER_TITLE_SIZE,
            x_mm=COVER_TITLE_X_MM,
            y_mm=COVER_TITLE_Y_MM,
            font_style=FontStyle.BOLD,
        ),
        RenderInstruction(
            page_index=COVER_PAGE_INDEX,
            text=metadata.signature,
            font_size=SIGNATURE_SIZE,
            x_mm=SIGNATURE_X_MM,
            y_mm=SIGNATURE_Y_MM,
            font_style=FontStyle.REGULAR,
        ),
    ]
