# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Adaptive Text Fitter
Finds the largest font size, and the matching word wrap, at which a
label fits inside a fixed box. Search runs from start_size down to
min_size one pixel at a time:

  - clean fit (no word split mid-way)      → returned immediately
  - first fit that needed a hard break     → kept as fallback
  - nothing fits                           → min_size, hard-broken, fits=False

The fitter never raises: a label must always produce something drawable.
Results are a pure function of (text, box, style) and are memoized per
TextFitter instance.
"""

from __future__ import annotations

from typing import Optional, Protocol

from tierlist.models.layout import FitResult, FontSpec

LINE_HEIGHT = 1.2
MIN_FONT_SIZE = 8
BOLD_START_SIZE = 24
NORMAL_START_SIZE = 16


class TextMeasurer(Protocol):
    def measure_text(self, text: str, font: FontSpec) -> float:
        ...


def _hard_break(
    word: str,
    max_width: float,
    font: FontSpec,
    measurer: TextMeasurer,
) -> list[str]:
    """Split a word into fragments that each stay within max_width."""
    fragments: list[str] = []
    current = ""
    for ch in word:
        candidate = current + ch
        # Always take at least one character per fragment
        if current and measurer.measure_text(candidate, font) > max_width:
            fragments.append(current)
            current = ch
        else:
            current = candidate
    if current:
        fragments.append(current)
    return fragments


def wrap_text(
    text: str,
    max_width: float,
    font: FontSpec,
    measurer: TextMeasurer,
) -> tuple[list[str], bool]:
    """
    Greedy word wrap at a single font size.

    Returns:
        (lines, hard_break) where hard_break is True if any word was
        wider than max_width and had to be split at character level.
    """
    lines: list[str] = []
    current = ""
    hard_break = False

    for word in text.split():
        if measurer.measure_text(word, font) > max_width:
            hard_break = True
            if current:
                lines.append(current)
            fragments = _hard_break(word, max_width, font, measurer)
            lines.extend(fragments[:-1])
            current = fragments[-1]
            continue

        if not current:
            current = word
            continue

        candidate = f"{current} {word}"
        if measurer.measure_text(candidate, font) < max_width:
            current = candidate
        else:
            lines.append(current)
            current = word

    if current:
        lines.append(current)
    return lines, hard_break


def block_height(line_count: int, font_size: int) -> float:
    return line_count * font_size * LINE_HEIGHT


class TextFitter:
    """
    Fits labels against one measurer. Create one per render so the
    memo cache never outlives the surface whose fonts it measured.
    """

    def __init__(self, measurer: TextMeasurer) -> None:
        self._measurer = measurer
        self._cache: dict[tuple, FitResult] = {}

    def fit(
        self,
        text: str,
        max_width: float,
        max_height: float,
        bold: bool = False,
        start_size: Optional[int] = None,
        min_size: int = MIN_FONT_SIZE,
    ) -> FitResult:
        if start_size is None:
            start_size = BOLD_START_SIZE if bold else NORMAL_START_SIZE
        min_size = min(min_size, start_size)

        key = (text, max_width, max_height, bold, start_size, min_size)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        result = self._search(text, max_width, max_height, bold, start_size, min_size)
        self._cache[key] = result
        return result

    def _search(
        self,
        text: str,
        max_width: float,
        max_height: float,
        bold: bool,
        start_size: int,
        min_size: int,
    ) -> FitResult:
        if not text or not text.strip():
            return FitResult(lines=(), font_size=start_size)

        fallback: Optional[FitResult] = None

        for size in range(start_size, min_size - 1, -1):
            font = FontSpec(size=size, bold=bold)
            lines, hard_break = wrap_text(text, max_width, font, self._measurer)
            if block_height(len(lines), size) > max_height:
                continue
            if not hard_break:
                return FitResult(lines=tuple(lines), font_size=size)
            if fallback is None:
                fallback = FitResult(lines=tuple(lines), font_size=size, hard_break=True)

        if fallback is not None:
            return fallback

        font = FontSpec(size=min_size, bold=bold)
        lines, hard_break = wrap_text(text, max_width, font, self._measurer)
        return FitResult(
            lines=tuple(lines),
            font_size=min_size,
            hard_break=hard_break,
            fits=False,
        )
