"""
mdpdf — narzędzie CLI do konwersji markdown → PDF.

Użycie:
  mdpdf <komenda> [opcje]

Komendy:
  convert   Konwertuje plik markdown do PDF (okładka, spis treści, treść).
  toc       Pokazuje metadane i spis treści bez zapisu PDF.
  inspect   Wypisuje runy tekstu z pliku PDF.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8 dla polskich znaków.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from mdpdf import __version__
from mdpdf.commands import convert as cmd_convert
from mdpdf.commands import toc as cmd_toc
from mdpdf.commands import inspect as cmd_inspect


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdpdf",
        description="mdpdf — konwerter markdown → PDF.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"mdpdf {__version__}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_convert.add_parser(subparsers)
    cmd_toc.add_parser(subparsers)
    cmd_inspect.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
