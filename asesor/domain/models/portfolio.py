"""Portfolio suggestion model.

A suggestion is a static, label-keyed template: asset allocation
percentages plus liquidity, expected return and advisory notes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

from .fields import ReadOnlyPercentages
from .profile import ProfileLabel


class PortfolioSuggestion(BaseModel):
    """Immutable portfolio template for one profile."""

    profile: ProfileLabel = Field(..., description="Profile this template belongs to")
    allocation: ReadOnlyPercentages = Field(..., description="Asset category -> percentage (read-only)")
    liquidity: str = Field(..., description="Liquidity characteristics")
    expected_return_range: str = Field(..., description="Expected annual return range")
    notes: str = Field(default="", description="Advisory notes")

    model_config = {
        "frozen": True,
    }

    @computed_field
    @property
    def allocation_total(self) -> int:
        """Sum of allocation percentages (100 for every template)."""
        return sum(self.allocation.values())
