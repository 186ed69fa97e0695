"""
pdf/writer.py — zapis DocumentPlan do pliku PDF przez PyMuPDF.

Architektura:
  DocumentPlan → PdfSink.new_document() (okładka)
  → add_page() × (page_count - 1)  (spis treści + strony treści)
  → place_text() dla każdej instrukcji, wg page_index
  → add_layer() dla stopek (osobna warstwa OCG na stronie)
  → save()

Układ współrzędnych: plan używa milimetrów od LEWEGO DOLNEGO rogu,
PyMuPDF — punktów od lewego górnego. Konwersja jest wyłącznie tutaj.

Kluczowe funkcje publiczne:
  write_pdf(plan, path)
"""

from __future__ import annotations

from pathlib import Path

import fitz  # PyMuPDF

from data_model.layout import DocumentPlan, FontStyle, Layer
from md_layout.constants import (
    COVER_PAGE_INDEX,
    PAGE_HEIGHT_MM,
    PAGE_WIDTH_MM,
    TOC_PAGE_INDEX,
)

_PT_PER_MM = 72.0 / 25.4

# Fonty Base-14 wbudowane w PyMuPDF — bez osadzania plików.
_FONT_NAMES: dict[FontStyle, str] = {
    FontStyle.REGULAR:   "helv",   # Helvetica
    FontStyle.BOLD:      "hebo",   # Helvetica-Bold
    FontStyle.MONOSPACE: "cour",   # Courier
}

_DOCUMENT_TITLE = "Markdown to PDF"


def mm_to_pt(mm: float) -> float:
    return mm * _PT_PER_MM


def _page_layer_name(page_index: int) -> str:
    if page_index == COVER_PAGE_INDEX:
        return "Cover Page"
    if page_index == TOC_PAGE_INDEX:
        return "Table of Contents"
    return "Content Page"


# ---------------------------------------------------------------------------
# Document Sink
# ---------------------------------------------------------------------------

class PdfSink:
    """
    Cienka warstwa nad fitz.Document: strony, warstwy (OCG) i runy tekstu.

    Identyfikatory stron to 0-based indeksy, identyfikatory warstw to xref
    obiektów OCG zwracane przez PyMuPDF.
    """

    def __init__(self) -> None:
        self.doc: fitz.Document | None = None
        self._heights_pt: dict[int, float] = {}

    def new_document(self, width_mm: float, height_mm: float, layer_name: str) -> tuple[int, int]:
        self.doc = fitz.open()
        self.doc.set_metadata({"title": _DOCUMENT_TITLE, "creator": "mdpdf"})
        return self.add_page(width_mm, height_mm, layer_name)

    def add_page(self, width_mm: float, height_mm: float, layer_name: str) -> tuple[int, int]:
        page = self._require_doc().new_page(width=mm_to_pt(width_mm), height=mm_to_pt(height_mm))
        self._heights_pt[page.number] = mm_to_pt(height_mm)
        return page.number, self.add_layer(page.number, layer_name)

    def add_layer(self, page_index: int, name: str) -> int:
        if page_index not in self._heights_pt:
            raise IndexError(f"Brak strony o indeksie {page_index}")
        return self._require_doc().add_ocg(name, on=True)

    def place_text(
        self,
        page_index: int,
        layer: int,
        text: str,
        font_size: float,
        x_mm: float,
        y_mm: float,
        font: FontStyle,
    ) -> None:
        if not text:
            return  # pusty run nie ma reprezentacji w PDF
        page = self._require_doc()[page_index]
        point = fitz.Point(mm_to_pt(x_mm), self._heights_pt[page_index] - mm_to_pt(y_mm))
        page.insert_text(
            point,
            text,
            fontsize=font_size,
            fontname=_FONT_NAMES[font],
            oc=layer,
        )

    def save(self, path: str | Path) -> None:
        self._require_doc().save(str(path), garbage=3, deflate=True)

    def close(self) -> None:
        if self.doc is not None:
            self.doc.close()
            self.doc = None

    def _require_doc(self) -> fitz.Document:
        if self.doc is None:
            raise RuntimeError("Dokument nie został utworzony (new_document)")
        return self.doc


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def write_pdf(plan: DocumentPlan, path: str | Path) -> None:
    """
    Zapisuje plan do pliku PDF.

    Wszystkie strony są alokowane z góry, więc kolejność emisji instrukcji
    nie wpływa na kolejność stron. Wyjątki PyMuPDF / OSError propagują się
    do wywołującego.
    """
    sink = PdfSink()
    try:
        body_layers: dict[int, int] = {}
        page, layer = sink.new_document(PAGE_WIDTH_MM, PAGE_HEIGHT_MM, _page_layer_name(0))
        body_layers[page] = layer
        for index in range(1, plan.page_count):
            page, layer = sink.add_page(PAGE_WIDTH_MM, PAGE_HEIGHT_MM, _page_layer_name(index))
            body_layers[page] = layer

        footer_layers: dict[int, int] = {}
        for instr in plan.instructions:
            if instr.layer is Layer.FOOTER:
                if instr.page_index not in footer_layers:
                    footer_layers[instr.page_index] = sink.add_layer(instr.page_index, "Footer Layer")
                layer = footer_layers[instr.page_index]
            else:
                layer = body_layers[instr.page_index]
            sink.place_text(
                instr.page_index,
                layer,
                instr.text,
                instr.font_size,
                instr.x_mm,
                instr.y_mm,
                instr.font_style,
            )

        sink.save(path)
    finally:
        sink.close()
