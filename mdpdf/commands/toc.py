"""Komenda: mdpdf toc — podgląd metadanych i spisu treści bez zapisu PDF."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from data_model.layout import DocumentPlan
from md_layout.pipeline import plan_document
from mdpdf.commands._layout_args import add_layout_arguments, options_from_args
from mdpdf.convert import read_source
from mdpdf.errors import InputReadError

console = Console()
err_console = Console(stderr=True)


def show_toc(plan: DocumentPlan) -> None:
    meta = plan.metadata
    console.print(
        f"Tytuł: [bold]{escape(meta.title)}[/bold]  "
        f"podpis: [cyan]{escape(meta.signature)}[/cyan]  "
        f"stopka: [dim]{escape(meta.footer_text) or '(pusta)'}[/dim]"
    )

    if not plan.toc_entries:
        console.print("[yellow]Brak nagłówków — spis treści będzie pusty.[/yellow]")
    else:
        table = Table(box=box.SIMPLE_HEAD, show_header=True, header_style="bold white")
        table.add_column("STR.",  justify="right", no_wrap=True, style="dim")
        table.add_column("TYP",   no_wrap=True)
        table.add_column("NAGŁÓWEK", max_width=70)
        for entry in plan.toc_entries:
            kind = "[cyan]rozdział[/cyan]" if entry.is_chapter else "[dim]podrozdział[/dim]"
            indent = "" if entry.is_chapter else "  "
            table.add_row(str(entry.page_number), kind, indent + escape(entry.label))
        console.print(table)

    console.print(f"  [dim]{plan.page_count} stron (okładka + spis treści + {plan.page_count - 2} treści)[/dim]")
    if plan.ends_in_code_block:
        console.print("  [yellow]Dokument kończy się wewnątrz bloku ``` (brak zamknięcia).[/yellow]")


def run(args: argparse.Namespace) -> None:
    try:
        options = options_from_args(args)
    except ValueError as e:
        err_console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    try:
        text = read_source(args.input)
    except InputReadError as e:
        err_console.print(f"[red]Błąd odczytu pliku markdown[/red] '{escape(str(e.path))}': {escape(e.reason)}")
        raise SystemExit(1)

    show_toc(plan_document(text, options))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "toc",
        help="Pokazuje metadane i spis treści (bez zapisu PDF).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Układa dokument tak jak convert, ale niczego nie zapisuje: wypisuje tytuł,
podpis, tekst stopki, spis treści z numerami stron i liczbę stron.

Przykłady:
  mdpdf toc notatki.md
  mdpdf toc notatki.md --wrap-width 60
        """,
    )
    p.add_argument(
        "input",
        metavar="PLIK.md",
        help="Ścieżka do pliku markdown.",
    )
    add_layout_arguments(p)
    p.set_defaults(func=run)
