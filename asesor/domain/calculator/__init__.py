"""Profile scoring and portfolio suggestion."""

from .scoring import (
    assign_profile_label,
    build_explanation,
    calculate_profile_score,
    combine_factors,
    liquidity_penalty,
    score,
    score_factors,
)
from .suggestions import PORTFOLIO_TEMPLATES, suggestion_for

__all__ = [
    "score",
    "score_factors",
    "combine_factors",
    "calculate_profile_score",
    "assign_profile_label",
    "build_explanation",
    "liquidity_penalty",
    "suggestion_for",
    "PORTFOLIO_TEMPLATES",
]
