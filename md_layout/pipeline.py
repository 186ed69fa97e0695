"""
md_layout/pipeline.py — pełny plan dokumentu z tekstu markdown.

  tekst → linie → Metadata
        → layout_body()  (przebieg 1: treść, stopki, wpisy TOC z numerami stron)
        → render_toc()   (przebieg 2: strona spisu treści)
        → cover_instructions()
        → DocumentPlan   (instrukcje w kolejności indeksów stron)

Plan jest czystą funkcją tekstu i opcji: dwa wywołania na tym samym
wejściu dają równe plany.
"""

from __future__ import annotations

from data_model.layout import DocumentPlan, LayoutOptions
from md_layout.cover import cover_instructions
from md_layout.engine import layout_body
from md_layout.metadata import extract_metadata
from md_layout.toc import render_toc


def split_lines(text: str) -> list[str]:
    r"""
    Dzieli tekst wyłącznie po "\n"; końcowe "\r" jest usuwane z każdej linii.

    Końcowy "\n" nie tworzy pustej linii. Inne separatory (\x0c, U+2028, ...)
    zostają w linii jako zwykłe białe znaki.
    """
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines[-1] == "":
        lines.pop()
    return lines


def plan_document(text: str, options: LayoutOptions | None = None) -> DocumentPlan:
    options = options or LayoutOptions()
    lines = split_lines(text)

    metadata = extract_metadata(lines, options)
    body = layout_body(lines, metadata, options)
    toc = render_toc(body.toc_entries)

    return DocumentPlan(
        metadata=metadata,
        page_count=body.page_number,
        instructions=cover_instructions(metadata) + toc + body.instructions,
        toc_entries=list(body.toc_entries),
        ends_in_code_block=body.ends_in_code_block,
    )
