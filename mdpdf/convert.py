"""
mdpdf/convert.py — granica I/O: odczyt markdown, plan, zapis PDF.

Publiczne API:
  read_source(path)                      -> str
  convert_text(text, output, options)    -> DocumentPlan
  convert_file(input, output, options)   -> DocumentPlan
"""

from __future__ import annotations

from pathlib import Path

from data_model.layout import DocumentPlan, LayoutOptions
from md_layout.pipeline import plan_document
from mdpdf.errors import InputReadError, OutputWriteError
from pdf.writer import write_pdf


def read_source(path: str | Path) -> str:
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise InputReadError(path, "plik nie istnieje") from None
    except UnicodeDecodeError as e:
        raise InputReadError(path, f"niepoprawne UTF-8 ({e.reason})") from e
    except OSError as e:
        raise InputReadError(path, e.strerror or str(e)) from e


def convert_text(
    text: str,
    output_path: str | Path,
    options: LayoutOptions | None = None,
) -> DocumentPlan:
    """Układa dokument i zapisuje PDF; przy błędzie zapisu usuwa niepełny plik."""
    output_path = Path(output_path)
    plan = plan_document(text, options)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(output_path.parent, e.strerror or str(e)) from e

    try:
        write_pdf(plan, output_path)
    except Exception as e:
        output_path.unlink(missing_ok=True)
        raise OutputWriteError(output_path, str(e)) from e

    return plan


def convert_file(
    input_path: str | Path,
    output_path: str | Path,
    options: LayoutOptions | None = None,
) -> DocumentPlan:
    text = read_source(input_path)
    return convert_text(text, output_path, options)
