"""
pdf — zapis i odczyt dokumentów PDF (PyMuPDF).

Publiczne API:
  write_pdf(plan, path)   zapis DocumentPlan
  PdfSink                 strony, warstwy i runy tekstu
  read_runs(path)         -> list[TextRun]
  page_texts(path)        -> list[str]
"""

from .writer import PdfSink, write_pdf, mm_to_pt
from .reader import TextRun, read_runs, page_texts

__all__ = [
    "PdfSink",
    "write_pdf",
    "mm_to_pt",
    "TextRun",
    "read_runs",
    "page_texts",
]
