"""Wspólne fixture'y testów mdpdf."""

from __future__ import annotations

import pytest

SAMPLE = "\n".join([
    "# Title",
    "Signature: J.Doe",
    "Hello world",
    "```",
    "code",
    "```",
    "Footer line",
])


@pytest.fixture
def sample_text() -> str:
    return SAMPLE


@pytest.fixture
def long_prose() -> str:
    """22 linie prozy po 12 mm → jedno przejście na nową stronę."""
    line = " ".join(["word"] * 16)  # 79 znaków, jeden segment
    return "\n".join([line] * 22 + ["Footer"])
