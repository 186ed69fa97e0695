"""Komenda: mdpdf convert — markdown → PDF (okładka, spis treści, treść)."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from mdpdf.commands._layout_args import add_layout_arguments, options_from_args
from mdpdf.commands.toc import show_toc
from mdpdf.convert import convert_text, read_source
from mdpdf.errors import ConversionError, InputReadError

console = Console()
err_console = Console(stderr=True)


def run(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    output_path = Path(args.output)

    try:
        options = options_from_args(args)
    except ValueError as e:
        err_console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    try:
        text = read_source(input_path)
    except InputReadError as e:
        err_console.print(f"[red]Błąd odczytu pliku markdown[/red] '{escape(str(e.path))}': {escape(e.reason)}")
        raise SystemExit(1)

    try:
        plan = convert_text(text, output_path, options)
    except ConversionError as e:
        err_console.print(f"[red]Nie udało się wygenerować PDF:[/red] {escape(str(e))}")
        raise SystemExit(1)

    console.print(
        f"[green]PDF zapisany:[/green] {output_path}  "
        f"([bold]{plan.page_count}[/bold] stron, {len(plan.toc_entries)} wpisów spisu treści)"
    )

    if args.show_toc:
        show_toc(plan)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "convert",
        help="Konwertuje plik markdown do PDF.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Konwertuje plik markdown do PDF: okładka (tytuł z pierwszego "# ", podpis
z linii "Signature:"), spis treści oraz treść ze stopką na każdej stronie.
Ostatnia linia dokumentu staje się tekstem stopki (--no-footer-detect wyłącza).
Katalog wyjściowy jest tworzony, jeśli nie istnieje.

Przykłady:
  mdpdf convert notatki.md out/notatki.pdf
  mdpdf convert notatki.md notatki.pdf --footer "Poufne"
  mdpdf convert notatki.md notatki.pdf --no-footer-detect --show-toc
        """,
    )
    p.add_argument(
        "input",
        metavar="PLIK.md",
        help="Ścieżka do pliku markdown.",
    )
    p.add_argument(
        "output",
        metavar="PLIK.pdf",
        help="Ścieżka do wynikowego pliku PDF.",
    )
    add_layout_arguments(p)
    p.add_argument(
        "--show-toc",
        action="store_true",
        help="Wyświetl spis treści w terminalu po zapisie.",
    )
    p.set_defaults(func=run)
