"""Scoring constants - single source of truth for the risk profile score.

Lookup tables are keyed by the literal option strings of the questionnaire.
Each table has a companion default used when an answer is missing or not
one of the options.
"""

from typing import TypedDict


class WeightConfig(TypedDict):
    """Type definition for dimension weights."""
    horizon: float
    financial: float
    experience: float
    risk_tolerance: float
    restrictions: float


# Dimension weights (sum to 1.0)
DIMENSION_WEIGHTS: WeightConfig = {
    "horizon": 0.20,
    "financial": 0.25,         # mean of income, savings, emergency fund
    "experience": 0.10,
    "risk_tolerance": 0.30,    # mean of max drop, reaction, expected return
    "restrictions": 0.15,      # sum of liquidity penalty and currency risk
}

# Sub-factors grouped by dimension, in scoring order
DIMENSION_FACTORS: dict[str, tuple[str, ...]] = {
    "horizon": ("horizon",),
    "financial": ("income", "savings", "emergency"),
    "experience": ("experience",),
    "risk_tolerance": ("max_drop", "reaction", "expected_return"),
    "restrictions": ("liquidity_penalty", "currency_risk"),
}

# Dimensions whose factors are averaged; the others are summed
AVERAGED_DIMENSIONS = frozenset({"financial", "risk_tolerance"})

SCORE_MIN = 0.0
SCORE_MAX = 100.0

# Upper bounds (exclusive) for the first three profiles; anything above is aggressive
PROFILE_THRESHOLDS = (20.0, 40.0, 60.0)

# --- Lookup tables ---

HORIZON_SCORES = {
    "corto": 5.0,
    "medio": 12.0,
    "3-5": 20.0,
    "5-10": 30.0,
    ">10": 40.0,
}
HORIZON_DEFAULT = 15.0

INCOME_SCORES = {
    "≤3M": 5.0,
    "3-6M": 10.0,
    "6-12M": 18.0,
    "12-20M": 26.0,
    ">20M": 35.0,
}
INCOME_DEFAULT = 10.0

SAVINGS_SCORES = {
    "5-10%": 5.0,
    "10-20%": 12.0,
    "20-30%": 22.0,
    ">30%": 30.0,
}
SAVINGS_DEFAULT = 8.0

EMERGENCY_SCORES = {
    "0": 0.0,
    "1-3": 5.0,
    "3-6": 12.0,
    ">6": 20.0,
}
EMERGENCY_DEFAULT = 5.0

EXPERIENCE_SCORES = {
    "básico": 4.0,
    "intermedio": 12.0,
    "avanzado": 25.0,
}
EXPERIENCE_DEFAULT = 8.0

MAX_DROP_SCORES = {
    "-5%": 5.0,
    "-10%": 12.0,
    "-20%": 25.0,
    "-35%": 35.0,
}
MAX_DROP_DEFAULT = 12.0

REACTION_SCORES = {
    "vendes": 2.0,
    "mantienes": 12.0,
    "compras": 30.0,
}
REACTION_DEFAULT = 10.0

EXPECTED_RETURN_SCORES = {
    "6%": 5.0,
    "10%": 18.0,
    "15%": 30.0,
}
EXPECTED_RETURN_DEFAULT = 12.0

CURRENCY_RISK_SCORES = {
    "baja": -2.0,
    "media": 0.0,
    "alta": 4.0,
}
CURRENCY_RISK_DEFAULT = 0.0

# Liquidity penalty: (minimum liquid %, penalty), checked in order
LIQUIDITY_PENALTIES = (
    (50, -10.0),
    (20, -5.0),
)
LIQUIDITY_PENALTY_DEFAULT = 0.0


def validate_weights(weights: dict[str, float]) -> bool:
    """Validate that weights have all required keys and sum to ~1.0.

    Raises:
        ValueError: If keys are missing or the total is off.
    """
    required_keys = set(DIMENSION_WEIGHTS.keys())
    missing = required_keys - set(weights.keys())
    if missing:
        raise ValueError(f"Missing weight keys: {missing}")

    total = sum(weights.values())
    if abs(total - 1.0) > 0.01:
        raise ValueError(f"Weights must sum to 1.0, got {total:.2f}")

    return True
