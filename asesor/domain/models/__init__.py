"""Data models for asesor."""

from .answers import (
    CurrencyRisk,
    EmergencyMonths,
    ExpectedReturn,
    ExperienceLevel,
    Horizon,
    IncomeRange,
    MaxAnnualDrop,
    QuestionnaireAnswers,
    ReactionToDrop,
    SavingsPercent,
)
from .portfolio import PortfolioSuggestion
from .profile import ProfileAssessment, ProfileLabel

__all__ = [
    "QuestionnaireAnswers",
    "Horizon",
    "IncomeRange",
    "SavingsPercent",
    "EmergencyMonths",
    "ExperienceLevel",
    "MaxAnnualDrop",
    "ReactionToDrop",
    "ExpectedReturn",
    "CurrencyRisk",
    "ProfileLabel",
    "ProfileAssessment",
    "PortfolioSuggestion",
]
