"""
data_model — struktury danych mdpdf.

Użycie:
  from data_model import RenderInstruction, TocEntry, Metadata, ...

Moduły:
  layout — FontStyle, Layer, RenderInstruction, TocEntry, Metadata,
           LayoutOptions, LayoutCursor, LayoutResult, DocumentPlan
"""

from .layout import (
    FontStyle,
    Layer,
    RenderInstruction,
    TocEntry,
    Metadata,
    LayoutOptions,
    LayoutCursor,
    LayoutResult,
    DocumentPlan,
)

__all__ = [
    "FontStyle",
    "Layer",
    "RenderInstruction",
    "TocEntry",
    "Metadata",
    "LayoutOptions",
    "LayoutCursor",
    "LayoutResult",
    "DocumentPlan",
]
