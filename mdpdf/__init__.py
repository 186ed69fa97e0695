"""mdpdf — konwerter markdown → PDF (okładka, spis treści, treść ze stopkami)."""

__version__ = "0.1.0"
