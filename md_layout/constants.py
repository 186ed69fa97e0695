"""
md_layout/constants.py — stałe układu strony (mm / pt).

Wartości muszą zgadzać się co do bitu, inaczej zmienia się wygląd dokumentu.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Strona
# ---------------------------------------------------------------------------

PAGE_WIDTH_MM  = 210.0
PAGE_HEIGHT_MM = 297.0

COVER_PAGE_INDEX = 0
TOC_PAGE_INDEX   = 1
FIRST_CONTENT_PAGE_NUMBER = 3   # 1 = okładka, 2 = spis treści

# ---------------------------------------------------------------------------
# Okładka
# ---------------------------------------------------------------------------

COVER_TITLE_X_MM, COVER_TITLE_Y_MM, COVER_TITLE_SIZE = 20.0, 250.0, 32.0
SIGNATURE_X_MM,   SIGNATURE_Y_MM,   SIGNATURE_SIZE   = 20.0, 100.0, 16.0

# ---------------------------------------------------------------------------
# Spis treści
# ---------------------------------------------------------------------------

TOC_TITLE = "Table of Contents"
TOC_HEADER_X_MM, TOC_HEADER_Y_MM, TOC_HEADER_SIZE = 15.0, 270.0, 28.0
TOC_START_Y_MM      = 250.0
TOC_STEP_MM         = 14.0
TOC_ENTRY_SIZE      = 14.0
TOC_CHAPTER_X_MM    = 20.0
TOC_SUBCHAPTER_X_MM = 30.0
TOC_LEADER          = " " + "." * 26 + " "

# ---------------------------------------------------------------------------
# Treść
# ---------------------------------------------------------------------------

BODY_LEFT_MM       = 15.0
SUBCHAPTER_LEFT_MM = 25.0
TOP_MARGIN_MM      = 270.0
BOTTOM_MARGIN_MM   = 20.0

# Rozmiar fontu (pt) jest jednocześnie wysokością linii (mm).
CHAPTER_SIZE    = 24.0
SUBCHAPTER_SIZE = 18.0
BODY_SIZE       = 12.0
CODE_SIZE       = 10.0

DEFAULT_WRAP_WIDTH = 80

# ---------------------------------------------------------------------------
# Znaczniki markdown
# ---------------------------------------------------------------------------

FENCE             = "```"
CHAPTER_MARKER    = "# "
SUBCHAPTER_MARKER = "## "
SIGNATURE_PREFIX  = "Signature:"

# ---------------------------------------------------------------------------
# Stopka
# ---------------------------------------------------------------------------

FOOTER_X_MM, FOOTER_Y_MM, FOOTER_SIZE = 10.0, 10.0, 10.0
FOOTER_FORMAT = "Page {page}  |  {text}"
