"""Utility helpers."""

from .parsing import (
    format_patrimony_distribution,
    parse_patrimony_distribution,
    parse_percentage,
    parse_products_used,
)

__all__ = [
    "parse_patrimony_distribution",
    "format_patrimony_distribution",
    "parse_products_used",
    "parse_percentage",
]
