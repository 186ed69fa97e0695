"""
pdf/reader.py — odczyt runów tekstu z gotowego PDF (weryfikacja wyniku).

Architektura:
  pdf_path → fitz.open() → strony → bloki tekstu (PyMuPDF dict)
  → linie → spany → TextRun (mm od lewego dolnego rogu)

Współrzędne TextRun są w tym samym układzie co RenderInstruction, więc
wynik konwersji można porównywać z planem bezpośrednio.

Kluczowe funkcje publiczne:
  read_runs(path)  -> list[TextRun]
  page_texts(path) -> list[str]
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import fitz  # PyMuPDF

_MM_PER_PT = 25.4 / 72.0


@dataclass(frozen=True, slots=True)
class TextRun:
    page:   int      # 1-based
    text:   str
    font:   str      # nazwa fontu z PDF, np. "Helvetica-Bold"
    size:   float
    x_mm:   float
    y_mm:   float


def read_runs(path: str | Path) -> list[TextRun]:
    """Zwraca wszystkie niepuste spany tekstu w kolejności stron."""
    doc = fitz.open(str(path))
    try:
        runs: list[TextRun] = []
        for page in doc:
            runs.extend(_page_runs(page))
        return runs
    finally:
        doc.close()


def page_texts(path: str | Path) -> list[str]:
    """Zwykły tekst każdej strony (indeks listy = numer strony - 1)."""
    doc = fitz.open(str(path))
    try:
        return [page.get_text("text") for page in doc]
    finally:
        doc.close()


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _page_runs(page: fitz.Page) -> list[TextRun]:
    height = page.rect.height
    page_dict = page.get_text("dict", flags=fitz.TEXT_PRESERVE_WHITESPACE)
    runs: list[TextRun] = []
    for block in page_dict.get("blocks", []):
        if block.get("type") != 0:
            continue
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                text = span.get("text", "")
                if not text.strip():
                    continue
                x_pt, y_pt = span["origin"]
                runs.append(TextRun(
                    page=page.number + 1,
                    text=text,
                    font=span.get("font", ""),
                    size=span.get("size", 0.0),
                    x_mm=x_pt * _MM_PER_PT,
                    y_mm=(height - y_pt) * _MM_PER_PT,
                ))
    return runs
