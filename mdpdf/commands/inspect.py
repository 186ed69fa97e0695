"""Komenda: mdpdf inspect — lista runów tekstu z pliku PDF."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from pdf.reader import read_runs

console = Console()
err_console = Console(stderr=True)


def run(args: argparse.Namespace) -> None:
    pdf_path = Path(args.pdf_file)
    if not pdf_path.exists():
        err_console.print(f"[red]Plik nie istnieje:[/red] {pdf_path}")
        raise SystemExit(1)

    try:
        runs = read_runs(pdf_path)
    except Exception as e:
        err_console.print(f"[red]Błąd odczytu PDF:[/red] {e}")
        raise SystemExit(1)

    if args.page is not None:
        runs = [r for r in runs if r.page == args.page]

    if not runs:
        console.print("[yellow]Brak tekstu.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
    )
    table.add_column("STR.", justify="right", no_wrap=True)
    table.add_column("FONT", no_wrap=True, style="cyan")
    table.add_column("PT",   justify="right", no_wrap=True)
    table.add_column("X mm", justify="right", no_wrap=True)
    table.add_column("Y mm", justify="right", no_wrap=True)
    table.add_column("TEKST", max_width=70)

    for r in runs:
        table.add_row(
            str(r.page), r.font, f"{r.size:g}",
            f"{r.x_mm:.1f}", f"{r.y_mm:.1f}", escape(r.text),
        )

    console.print(table)
    console.print(f"  [dim]{len(runs)} runów[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "inspect",
        help="Wypisuje runy tekstu (font, rozmiar, pozycja) z pliku PDF.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Odczytuje PDF (np. wynik convert) i pokazuje każdy run tekstu: stronę, font,
rozmiar oraz pozycję w mm od lewego dolnego rogu.

Przykłady:
  mdpdf inspect notatki.pdf
  mdpdf inspect notatki.pdf --page 3
        """,
    )
    p.add_argument(
        "pdf_file",
        metavar="PLIK.pdf",
        help="Ścieżka do pliku PDF.",
    )
    p.add_argument(
        "--page", "-p",
        type=int,
        metavar="N",
        help="Pokaż tylko stronę N (1-based).",
    )
    p.set_defaults(func=run)
