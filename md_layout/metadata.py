"""
md_layout/metadata.py — tytuł, podpis i tekst stopki wyciągane z dokumentu.

Trzy niezależne skany po liniach; żaden nie modyfikuje wejścia, kolejność
wywołań nie ma znaczenia.

Publiczne API:
  extract_title(lines)              -> str | None
  extract_signature(lines)          -> str | None
  extract_footer(lines)             -> str | None
  extract_metadata(lines, options)  -> Metadata
"""

from __future__ import annotations

from collections.abc import Sequence

from data_model.layout import LayoutOptions, Metadata
from md_layout.constants import CHAPTER_MARKER, SIGNATURE_PREFIX


def strip_marker(line: str, marker: str) -> str:
    """Usuwa WSZYSTKIE powtórzenia znacznika z początku linii ("# # A" → "A")."""
    while line.startswith(marker):
        line = line[len(marker):]
    return line


def extract_title(lines: Sequence[str]) -> str | None:
    for line in lines:
        if line.startswith(CHAPTER_MARKER):
            return strip_marker(line, CHAPTER_MARKER)
    return None


def extract_signature(lines: Sequence[str]) -> str | None:
    for line in lines:
        if line.startswith(SIGNATURE_PREFIX):
            return line.replace(SIGNATURE_PREFIX, "").strip()
    return None


def extract_footer(lines: Sequence[str]) -> str | None:
    """
    Ostatnia linia dokumentu (po strip), niezależnie od treści.

    Uwaga: zwykłe zdanie zamykające dokument też zostanie uznane za stopkę
    i zniknie z treści. Wyłącza to LayoutOptions.detect_footer=False.
    """
    if not lines:
        return None
    return lines[-1].strip()


def resolve_footer(lines: Sequence[str], options: LayoutOptions) -> str:
    """Kolejność: jawne nadpisanie → wykryta ostatnia linia → domyślny tekst."""
    if options.footer_override is not None:
        return options.footer_override
    if options.detect_footer:
        detected = extract_footer(lines)
        if detected is not None:
            return detected
    return options.default_footer


def extract_metadata(lines: Sequence[str], options: LayoutOptions | None = None) -> Metadata:
    options = options or LayoutOptions()
    title = extract_title(lines)
    signature = extract_signature(lines)
    return Metadata(
        title       = title if title is not None else options.default_title,
        signature   = signature if signature is not None else options.default_signature,
        footer_text = resolve_footer(lines, options),
    )
