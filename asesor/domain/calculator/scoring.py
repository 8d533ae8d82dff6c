"""Risk profile scoring.

Maps questionnaire answers to a 0-100 composite score through five
weighted dimensions, buckets the score into a profile label and builds the
explanation shown to the investor. Every lookup has a default, so scoring
never fails on missing or unrecognized answers.
"""

from __future__ import annotations

from enum import Enum

from asesor.core.scoring_constants import (
    AVERAGED_DIMENSIONS,
    CURRENCY_RISK_DEFAULT,
    CURRENCY_RISK_SCORES,
    DIMENSION_FACTORS,
    DIMENSION_WEIGHTS,
    EMERGENCY_DEFAULT,
    EMERGENCY_SCORES,
    EXPECTED_RETURN_DEFAULT,
    EXPECTED_RETURN_SCORES,
    EXPERIENCE_DEFAULT,
    EXPERIENCE_SCORES,
    HORIZON_DEFAULT,
    HORIZON_SCORES,
    INCOME_DEFAULT,
    INCOME_SCORES,
    LIQUIDITY_PENALTIES,
    LIQUIDITY_PENALTY_DEFAULT,
    MAX_DROP_DEFAULT,
    MAX_DROP_SCORES,
    PROFILE_THRESHOLDS,
    REACTION_DEFAULT,
    REACTION_SCORES,
    SAVINGS_DEFAULT,
    SAVINGS_SCORES,
    SCORE_MAX,
    SCORE_MIN,
)
from asesor.domain.models.answers import QuestionnaireAnswers
from asesor.domain.models.profile import ProfileAssessment, ProfileLabel, round_half_up

EXPLANATION_TEXT = (
    "Horizonte, situación financiera, experiencia y tolerancia "
    "determinan la capacidad y disposición al riesgo."
)

_LABELS_BY_THRESHOLD = (
    ProfileLabel.CONSERVATIVE,
    ProfileLabel.MODERATE,
    ProfileLabel.BALANCED,
)


def _lookup(table: dict[str, float], option: Enum | str | None, default: float) -> float:
    if option is None:
        return default
    key = option.value if isinstance(option, Enum) else option
    return table.get(key, default)


def liquidity_penalty(liquidity_min_percent: int) -> float:
    """Penalty for the minimum share that must stay liquid.

    Args:
        liquidity_min_percent: % redeemable in 1-7 business days (0-100)

    Returns:
        -10 from 50% up, -5 from 20% up, otherwise 0
    """
    for floor, penalty in LIQUIDITY_PENALTIES:
        if liquidity_min_percent >= floor:
            return penalty
    return LIQUIDITY_PENALTY_DEFAULT


def score_factors(answers: QuestionnaireAnswers) -> dict[str, float]:
    """Raw lookup value for each scoring sub-factor."""
    return {
        "horizon": _lookup(HORIZON_SCORES, answers.horizon, HORIZON_DEFAULT),
        "income": _lookup(INCOME_SCORES, answers.income_range, INCOME_DEFAULT),
        "savings": _lookup(SAVINGS_SCORES, answers.savings_percent, SAVINGS_DEFAULT),
        "emergency": _lookup(EMERGENCY_SCORES, answers.emergency_months, EMERGENCY_DEFAULT),
        "experience": _lookup(EXPERIENCE_SCORES, answers.experience_level, EXPERIENCE_DEFAULT),
        "max_drop": _lookup(MAX_DROP_SCORES, answers.max_annual_drop, MAX_DROP_DEFAULT),
        "reaction": _lookup(REACTION_SCORES, answers.reaction_to_drop, REACTION_DEFAULT),
        "expected_return": _lookup(
            EXPECTED_RETURN_SCORES, answers.preference_expected_return, EXPECTED_RETURN_DEFAULT
        ),
        "liquidity_penalty": liquidity_penalty(answers.liquidity_min_percent),
        "currency_risk": _lookup(CURRENCY_RISK_SCORES, answers.currency_risk, CURRENCY_RISK_DEFAULT),
    }


def combine_factors(factors: dict[str, float]) -> dict[str, float]:
    """Weighted contribution of each dimension.

    Financial situation and risk tolerance average their three factors;
    restrictions sums its two. Each dimension value is then multiplied by
    its weight.
    """
    components = {}
    for dimension, names in DIMENSION_FACTORS.items():
        raw = sum(factors[name] for name in names)
        if dimension in AVERAGED_DIMENSIONS:
            raw /= len(names)
        components[dimension] = raw * DIMENSION_WEIGHTS[dimension]
    return components


def calculate_profile_score(answers: QuestionnaireAnswers) -> tuple[float, dict[str, float]]:
    """Calculate the composite risk score.

    Args:
        answers: Questionnaire answers

    Returns:
        Tuple of (score clamped to 0-100, raw factor dict)
    """
    factors = score_factors(answers)
    total = sum(combine_factors(factors).values())
    return max(SCORE_MIN, min(SCORE_MAX, total)), factors


def assign_profile_label(score: float) -> ProfileLabel:
    """Bucket a score: <20 conservative, <40 moderate, <60 balanced, else aggressive."""
    for upper, label in zip(PROFILE_THRESHOLDS, _LABELS_BY_THRESHOLD):
        if score < upper:
            return label
    return ProfileLabel.AGGRESSIVE


def build_explanation(score: float) -> str:
    return f"Score: {round_half_up(score)}. {EXPLANATION_TEXT}"


def score(answers: QuestionnaireAnswers) -> ProfileAssessment:
    """Score answers into a profile assessment.

    Pure and deterministic: the result depends only on the answers.
    """
    final_score, factors = calculate_profile_score(answers)
    return ProfileAssessment(
        score=final_score,
        label=assign_profile_label(final_score),
        explanation=build_explanation(final_score),
        factors=factors,
        components=combine_factors(factors),
    )
