"""
data_model/layout.py — struktury danych silnika układu strony.

Przepływ:
  tekst markdown → Metadata → LayoutCursor (przebieg 1) → LayoutResult
  → TocEntry (przebieg 2, spis treści) → DocumentPlan → PDF

Wszystkie współrzędne są w milimetrach, z początkiem w LEWYM DOLNYM rogu
strony (y rośnie w górę), tak jak w klasycznych bibliotekach PDF.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

DEFAULT_FOOTER_TEXT = "Generated with mdpdf"


# ---------------------------------------------------------------------------
# Enumy
# ---------------------------------------------------------------------------

class FontStyle(StrEnum):
    """Zamknięty zbiór krojów; mapowanie na fonty PDF robi writer."""
    REGULAR   = "regular"
    BOLD      = "bold"
    MONOSPACE = "monospace"


class Layer(StrEnum):
    """Warstwa strony, na którą trafia tekst (stopka jest odizolowana)."""
    BODY   = "body"
    FOOTER = "footer"


# ---------------------------------------------------------------------------
# Instrukcje renderowania i spis treści
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RenderInstruction:
    """
    Jeden run tekstu do umieszczenia na stronie.

    - page_index: 0-based indeks strony (0 = okładka, 1 = spis treści)
    - font_size:  rozmiar w punktach
    - x_mm, y_mm: punkt bazowy tekstu, od lewego dolnego rogu
    """
    page_index: int
    text:       str
    font_size:  float
    x_mm:       float
    y_mm:       float
    font_style: FontStyle = FontStyle.REGULAR
    layer:      Layer = Layer.BODY


@dataclass(frozen=True, slots=True)
class TocEntry:
    label:       str
    page_number: int     # 1-based numer strony w gotowym PDF
    is_chapter:  bool    # True = "# ", False = "## "


@dataclass(frozen=True, slots=True)
class Metadata:
    title:       str
    signature:   str
    footer_text: str


# ---------------------------------------------------------------------------
# Konfiguracja
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LayoutOptions:
    """
    Parametry przebiegu, które wolno zmieniać bez naruszania stałych układu.

    footer_override ma pierwszeństwo przed wykrytą ostatnią linią;
    detect_footer=False wyłącza traktowanie ostatniej linii jako stopki.
    """
    wrap_width:        int = 80
    footer_override:   str | None = None
    detect_footer:     bool = True
    default_title:     str = "Untitled"
    default_signature: str = "___________________"
    default_footer:    str = DEFAULT_FOOTER_TEXT


# ---------------------------------------------------------------------------
# Stan przebiegu i wynik
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class LayoutCursor:
    """Mutowalny stan jednego przebiegu; należy wyłącznie do silnika."""
    current_page_index: int
    y_position:         float
    page_number:        int
    in_code_block:      bool = False


@dataclass(slots=True)
class LayoutResult:
    """Wynik przebiegu 1: treść stron 3..N, stopki i wpisy spisu treści."""
    page_number:        int
    instructions:       list[RenderInstruction] = field(default_factory=list)
    toc_entries:        list[TocEntry] = field(default_factory=list)
    ends_in_code_block: bool = False

    @property
    def footer_count(self) -> int:
        return sum(1 for i in self.instructions if i.layer is Layer.FOOTER)


@dataclass(slots=True)
class DocumentPlan:
    """Kompletny, niezależny od biblioteki PDF opis dokumentu."""
    metadata:           Metadata
    page_count:         int
    instructions:       list[RenderInstruction]
    toc_entries:        list[TocEntry]
    ends_in_code_block: bool = False

    def for_page(self, page_index: int) -> list[RenderInstruction]:
        return [i for i in self.instructions if i.page_index == page_index]
