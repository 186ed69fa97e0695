"""
md_layout/wrap.py — łamanie linii po słowach do zadanej liczby znaków.

Szerokość liczona w znakach, nie w rzeczywistej szerokości glifów.
"""

from __future__ import annotations

from md_layout.constants import DEFAULT_WRAP_WIDTH


def wrap(line: str, max_width: int = DEFAULT_WRAP_WIDTH) -> list[str]:
    """
    Dzieli linię na segmenty nie dłuższe niż max_width (gdy jest gdzie łamać).

    Słowo dłuższe niż max_width trafia do osobnego segmentu w całości —
    nigdy nie jest cięte. Pusta linia → pusta lista.
    """
    segments: list[str] = []
    current = ""

    for word in line.split():
        if current and len(current) + len(word) + 1 > max_width:
            segments.append(current)
            current = ""
        current = f"{current} {word}" if current else word

    if current:
        segments.append(current)

    return segments
