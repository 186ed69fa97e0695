"""
mdpdf/errors.py — błędy na granicy systemu (pliki wejścia / wyjścia).

Silnik układu nie ma stanów błędu: każda linia trafia do dokładnie jednej
gałęzi. Błędy dotyczą wyłącznie odczytu źródła i zapisu wyniku.
"""

from __future__ import annotations

from pathlib import Path


class ConversionError(Exception):
    """Bazowa klasa błędów konwersji zgłaszanych użytkownikowi."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class InputReadError(ConversionError):
    """Plik markdown nie istnieje lub nie da się go odczytać (UTF-8)."""


class OutputWriteError(ConversionError):
    """Nie udało się utworzyć katalogu lub zapisać pliku PDF."""
