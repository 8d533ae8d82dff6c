"""Risk profile label and assessment models."""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, Field, computed_field

from asesor.core.exceptions import InvalidParameterError


class ProfileLabel(str, Enum):
    """The four investor profiles, valued by their display names."""

    CONSERVATIVE = "Conservador"
    MODERATE = "Moderado"
    BALANCED = "Balanceado"
    AGGRESSIVE = "Arriesgado / Agresivo"

    @classmethod
    def parse(cls, text: str | ProfileLabel) -> ProfileLabel:
        """Resolve a label from its display name or member name.

        Raises:
            InvalidParameterError: If text names no known profile.
        """
        if isinstance(text, cls):
            return text
        needle = str(text).strip().casefold()
        for label in cls:
            if needle in (label.value.casefold(), label.name.casefold()):
                return label
        raise InvalidParameterError("profile", text, "unknown profile label")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return int(math.floor(value + 0.5))


class ProfileAssessment(BaseModel):
    """Outcome of scoring one set of questionnaire answers."""

    score: float = Field(..., ge=0, le=100, description="Composite score 0-100")
    label: ProfileLabel = Field(..., description="Profile bucket for the score")
    explanation: str = Field(..., description="Human-readable summary")
    factors: dict[str, float] = Field(default_factory=dict, description="Raw lookup value per sub-factor")
    components: dict[str, float] = Field(default_factory=dict, description="Weighted contribution per dimension")

    model_config = {
        "frozen": True,
    }

    @computed_field
    @property
    def rounded_score(self) -> int:
        """Score rounded half up, as shown in the explanation."""
        return round_half_up(self.score)
