"""Parsing helpers for free-text questionnaire answers."""

from __future__ import annotations

import re
from typing import Mapping

# Signed ASCII digits within a 32-bit int; anything else reads as 0
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def parse_percentage(text: str) -> int:
    """Parse a whole percentage, or 0 when the text is not a plain integer."""
    if not _INT_PATTERN.fullmatch(text):
        return 0
    value = int(text)
    return value if _INT_MIN <= value <= _INT_MAX else 0


def parse_patrimony_distribution(text: str | None) -> dict[str, int]:
    """Parse 'categoria:valor' pairs separated by commas.

    Items without exactly one ':' or with a blank category are skipped.
    Non-integer values count as 0. Values are not required to sum to 100.

    Args:
        text: e.g. "efectivo:30, renta fija:40, acciones:30"

    Returns:
        Mapping of category to percentage (later duplicates win)
    """
    if not text or not text.strip():
        return {}

    distribution: dict[str, int] = {}
    for item in text.split(","):
        parts = [p.strip() for p in item.split(":")]
        if len(parts) != 2 or not parts[0]:
            continue
        distribution[parts[0]] = parse_percentage(parts[1])
    return distribution


def format_patrimony_distribution(distribution: Mapping[str, int]) -> str:
    """Render a distribution back to the 'k:v, k:v' text form."""
    return ", ".join(f"{key}:{value}" for key, value in distribution.items())


def parse_products_used(text: str | None) -> list[str]:
    """Split a comma-separated product list, dropping empty entries."""
    if not text:
        return []
    return [p.strip() for p in text.split(",") if p.strip()]
