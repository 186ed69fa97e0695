"""
mdpdf/settings.py — konfiguracja przez zmienne środowiskowe.

Zmienne środowiskowe (opcjonalne):
  MDPDF_FOOTER_TEXT   domyślny tekst stopki, gdy nie wykryto ostatniej linii
  MDPDF_WRAP_WIDTH    szerokość łamania prozy w znakach (domyślnie 80)

Opcjonalnie plik .env w katalogu głównym projektu (zmienne środowiska mają
pierwszeństwo).
"""

from __future__ import annotations

import os
import pathlib

from dotenv import load_dotenv

from data_model.layout import DEFAULT_FOOTER_TEXT, LayoutOptions
from md_layout.constants import DEFAULT_WRAP_WIDTH

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env")


def default_wrap_width() -> int:
    raw = os.getenv("MDPDF_WRAP_WIDTH", "")
    try:
        width = int(raw) if raw else DEFAULT_WRAP_WIDTH
    except ValueError:
        raise ValueError(f"MDPDF_WRAP_WIDTH musi być liczbą całkowitą, otrzymano: {raw!r}") from None
    if width < 1:
        raise ValueError(f"MDPDF_WRAP_WIDTH musi być dodatnie, otrzymano: {width}")
    return width


def build_options(
    wrap_width: int | None = None,
    footer: str | None = None,
    detect_footer: bool = True,
) -> LayoutOptions:
    """Łączy argumenty CLI (priorytet) z ustawieniami ze środowiska."""
    return LayoutOptions(
        wrap_width      = wrap_width if wrap_width is not None else default_wrap_width(),
        footer_override = footer,
        detect_footer   = detect_footer,
        default_footer  = os.getenv("MDPDF_FOOTER_TEXT", DEFAULT_FOOTER_TEXT),
    )
