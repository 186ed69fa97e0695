"""Wspólne argumenty układu dla komend convert i toc."""

from __future__ import annotations

import argparse

from data_model.layout import LayoutOptions
from mdpdf.settings import build_options


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"oczekiwano liczby dodatniej, otrzymano: {value}")
    return n


def add_layout_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--footer",
        metavar="TEKST",
        default=None,
        help="Tekst stopki (nadpisuje ostatnią linię dokumentu).",
    )
    p.add_argument(
        "--no-footer-detect",
        action="store_true",
        help="Nie traktuj ostatniej linii dokumentu jako stopki.",
    )
    p.add_argument(
        "--wrap-width", "-w",
        type=_positive_int,
        default=None,
        metavar="N",
        help="Szerokość łamania prozy w znakach (domyślnie: 80 lub MDPDF_WRAP_WIDTH).",
    )


def options_from_args(args: argparse.Namespace) -> LayoutOptions:
    return build_options(
        wrap_width=args.wrap_width,
        footer=args.footer,
        detect_footer=not args.no_footer_detect,
    )
