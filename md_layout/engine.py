"""
md_layout/engine.py — silnik układu: linia po linii, strona po stronie.

Architektura:
  linie dokumentu → filtr (stopka, "Signature:")
  → kontrola przepełnienia strony → przełącznik ``` (InProse / InCodeBlock)
  → dyspozycja: kod | "# " rozdział | "## " podrozdział | proza (wrap)
  → RenderInstruction + TocEntry w kolejności źródła

Stan przebiegu (LayoutCursor) i bufor wyjścia (LayoutResult) należą wyłącznie
do jednej instancji LayoutEngine; nie ma stanu globalnego.

Kluczowe funkcje publiczne:
  layout_body(lines, metadata, options) -> LayoutResult
"""

from __future__ import annotations

from collections.abc import Iterable

from data_model.layout import (
    FontStyle,
    Layer,
    LayoutCursor,
    LayoutOptions,
    LayoutResult,
    Metadata,
    RenderInstruction,
    TocEntry,
)
from md_layout.constants import (
    BODY_LEFT_MM,
    BODY_SIZE,
    BOTTOM_MARGIN_MM,
    CHAPTER_MARKER,
    CHAPTER_SIZE,
    CODE_SIZE,
    FENCE,
    FIRST_CONTENT_PAGE_NUMBER,
    FOOTER_FORMAT,
    FOOTER_SIZE,
    FOOTER_X_MM,
    FOOTER_Y_MM,
    SIGNATURE_PREFIX,
    SUBCHAPTER_LEFT_MM,
    SUBCHAPTER_MARKER,
    SUBCHAPTER_SIZE,
    TOP_MARGIN_MM,
)
from md_layout.metadata import strip_marker
from md_layout.wrap import wrap


class LayoutEngine:
    """Jednorazowy przebieg układu; po run() instancja nie jest używana ponownie."""

    def __init__(self, metadata: Metadata, options: LayoutOptions | None = None) -> None:
        self.metadata = metadata
        self.options = options or LayoutOptions()
        self.cursor = LayoutCursor(
            current_page_index=FIRST_CONTENT_PAGE_NUMBER - 1,
            y_position=TOP_MARGIN_MM,
            page_number=FIRST_CONTENT_PAGE_NUMBER,
        )
        self.result = LayoutResult(page_number=FIRST_CONTENT_PAGE_NUMBER)

    # -----------------------------------------------------------------------
    # Przebieg
    # -----------------------------------------------------------------------

    def run(self, lines: Iterable[str]) -> LayoutResult:
        for line in lines:
            if self._is_skipped(line):
                continue

            self._ensure_room()

            if line.strip() == FENCE:
                self.cursor.in_code_block = not self.cursor.in_code_block
                continue

            if self.cursor.in_code_block:
                self._emit(line, CODE_SIZE, BODY_LEFT_MM, FontStyle.MONOSPACE)
            elif line.startswith(CHAPTER_MARKER):
                self._heading(strip_marker(line, CHAPTER_MARKER), is_chapter=True)
            elif line.startswith(SUBCHAPTER_MARKER):
                self._heading(strip_marker(line, SUBCHAPTER_MARKER), is_chapter=False)
            else:
                self._prose(line)

        # Ostatnia strona dostaje stopkę z bieżącym (nie zwiększonym) numerem.
        self._emit_footer()

        self.result.page_number = self.cursor.page_number
        self.result.ends_in_code_block = self.cursor.in_code_block
        return self.result

    # -----------------------------------------------------------------------
    # Dyspozycja
    # -----------------------------------------------------------------------

    def _is_skipped(self, line: str) -> bool:
        return line.startswith(SIGNATURE_PREFIX) or line == self.metadata.footer_text

    def _heading(self, label: str, is_chapter: bool) -> None:
        self.result.toc_entries.append(TocEntry(
            label=label,
            page_number=self.cursor.page_number,
            is_chapter=is_chapter,
        ))
        if is_chapter:
            self._emit(label, CHAPTER_SIZE, BODY_LEFT_MM, FontStyle.BOLD)
        else:
            self._emit(label, SUBCHAPTER_SIZE, SUBCHAPTER_LEFT_MM, FontStyle.BOLD)

    def _prose(self, line: str) -> None:
        for i, segment in enumerate(wrap(line, self.options.wrap_width)):
            # Każdy segment to osobna linia na stronie → osobna kontrola miejsca.
            if i:
                self._ensure_room()
            self._emit(segment, BODY_SIZE, BODY_LEFT_MM, FontStyle.REGULAR)

    # -----------------------------------------------------------------------
    # Strony i emisja
    # -----------------------------------------------------------------------

    def _ensure_room(self) -> None:
        if self.cursor.y_position >= BOTTOM_MARGIN_MM:
            return
        self._emit_footer()
        self.cursor.page_number += 1
        self.cursor.current_page_index += 1
        self.cursor.y_position = TOP_MARGIN_MM

    def _emit(self, text: str, size: float, x_mm: float, style: FontStyle) -> None:
        """Umieszcza linię na bieżącej pozycji; wysokość linii (mm) = rozmiar (pt)."""
        self.result.instructions.append(RenderInstruction(
            page_index=self.cursor.current_page_index,
            text=text,
            font_size=size,
            x_mm=x_mm,
            y_mm=self.cursor.y_position,
            font_style=style,
        ))
        self.cursor.y_position -= size

    def _emit_footer(self) -> None:
        self.result.instructions.append(RenderInstruction(
            page_index=self.cursor.current_page_index,
            text=FOOTER_FORMAT.format(page=self.cursor.page_number, text=self.metadata.footer_text),
            font_size=FOOTER_SIZE,
            x_mm=FOOTER_X_MM,
            y_mm=FOOTER_Y_MM,
            font_style=FontStyle.REGULAR,
            layer=Layer.FOOTER,
        ))


def layout_body(
    lines: Iterable[str],
    metadata: Metadata,
    options: LayoutOptions | None = None,
) -> LayoutResult:
    """Przebieg 1: układa treść od strony 3 i zbiera wpisy spisu treści."""
    return LayoutEngine(metadata, options).run(lines)
