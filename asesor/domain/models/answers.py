"""Questionnaire answer models.

Scored questions use closed enumerations whose values are the literal
option strings shown on the form. Unrecognized options are normalized to
None so scoring falls back to the field default instead of failing.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from .fields import ReadOnlyPercentages


class Horizon(str, Enum):
    CORTO = "corto"
    MEDIO = "medio"
    TRES_A_CINCO = "3-5"
    CINCO_A_DIEZ = "5-10"
    MAS_DE_DIEZ = ">10"


class IncomeRange(str, Enum):
    HASTA_3M = "≤3M"
    DE_3_A_6M = "3-6M"
    DE_6_A_12M = "6-12M"
    DE_12_A_20M = "12-20M"
    MAS_DE_20M = ">20M"


class SavingsPercent(str, Enum):
    DE_5_A_10 = "5-10%"
    DE_10_A_20 = "10-20%"
    DE_20_A_30 = "20-30%"
    MAS_DE_30 = ">30%"


class EmergencyMonths(str, Enum):
    NINGUNO = "0"
    DE_1_A_3 = "1-3"
    DE_3_A_6 = "3-6"
    MAS_DE_6 = ">6"


class ExperienceLevel(str, Enum):
    BASICO = "básico"
    INTERMEDIO = "intermedio"
    AVANZADO = "avanzado"


class MaxAnnualDrop(str, Enum):
    MENOS_5 = "-5%"
    MENOS_10 = "-10%"
    MENOS_20 = "-20%"
    MENOS_35 = "-35%"


class ReactionToDrop(str, Enum):
    VENDES = "vendes"
    MANTIENES = "mantienes"
    COMPRAS = "compras"


class ExpectedReturn(str, Enum):
    SEIS = "6%"
    DIEZ = "10%"
    QUINCE = "15%"


class CurrencyRisk(str, Enum):
    BAJA = "baja"
    MEDIA = "media"
    ALTA = "alta"


SCORED_OPTION_ENUMS: dict[str, type[Enum]] = {
    "horizon": Horizon,
    "income_range": IncomeRange,
    "savings_percent": SavingsPercent,
    "emergency_months": EmergencyMonths,
    "experience_level": ExperienceLevel,
    "max_annual_drop": MaxAnnualDrop,
    "reaction_to_drop": ReactionToDrop,
    "preference_expected_return": ExpectedReturn,
    "currency_risk": CurrencyRisk,
}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class QuestionnaireAnswers(BaseModel):
    """Answers to the risk-profile questionnaire.

    Only horizon, the financial situation trio, experience, the risk
    tolerance trio, liquidity and currency risk feed the score. The other
    fields are carried for display and export.
    """

    # Section 1: objectives and horizon
    objectives: str | None = Field(None, description="Free-text investment purpose")
    horizon: Horizon | None = Field(None, description="Main investment horizon")
    objective_priority: str | None = Field(None, description="Objective priority")
    objective_admit_drop: str | None = Field(None, description="Accepts temporary drops (sí/no/depende)")

    # Section 2: financial situation
    income_range: IncomeRange | None = Field(None, description="Net monthly income range")
    savings_percent: SavingsPercent | None = Field(None, description="Share of income saved/invested")
    emergency_months: EmergencyMonths | None = Field(None, description="Emergency fund in months")
    debt_description: str | None = Field(None, description="Current debts")
    withdraw_next_36: str | None = Field(None, description="Withdrawals expected in 12-36 months")
    initial_investment: str | None = Field(None, description="Initial size and contributions")
    periodic_contribution: str | None = Field(None, description="Periodic contribution")

    # Section 3: experience
    products_used: tuple[str, ...] = Field(default_factory=tuple, description="Products used before")
    experience_level: ExperienceLevel | None = Field(None, description="Fixed/variable income experience")
    invested_intl: str | None = Field(None, description="Has invested internationally")
    prefer_managed: str | None = Field(None, description="Managed vs self-managed preference")

    # Section 4: risk tolerance
    reaction_to_drop: ReactionToDrop | None = Field(None, description="Reaction to a 15% monthly drop")
    max_annual_drop: MaxAnnualDrop | None = Field(None, description="Max tolerable annual drop")
    monthly_volatility_discomfort: str | None = Field(None, description="Monthly volatility discomfort")
    preference_expected_return: ExpectedReturn | None = Field(None, description="Preferred expected return")
    crisis_reaction: str | None = Field(None, description="Reaction during a crisis")
    percent_equity_in_crisis: str | None = Field(None, description="Equity share accepted in a crisis")
    illiquidity_acceptance: str | None = Field(None, description="Acceptance of illiquid positions")

    # Section 5: restrictions and preferences
    liquidity_min_percent: int = Field(default=30, ge=0, le=100, description="% redeemable in 1-7 business days")
    esg_preference: str | None = Field(None, description="ESG preferences / exclusions")
    allowed_currencies: str | None = Field(None, description="Allowed currencies")
    currency_risk: CurrencyRisk | None = Field(None, description="Currency risk tolerance")
    income_preference: str | None = Field(None, description="Income vs growth preference")
    tax_preferences: str | None = Field(None, description="Tax preferences")
    legal_restrictions: str | None = Field(None, description="Legal restrictions")
    sector_preferences: str | None = Field(None, description="Sector preferences")
    interest_in_real_estate: str | None = Field(None, description="Interest in real estate")
    interest_alternatives: str | None = Field(None, description="Interest in alternatives")
    min_ticket_size: str | None = Field(None, description="Minimum ticket size")

    # Section 6: current patrimony
    patrimony_distribution: ReadOnlyPercentages = Field(
        default_factory=dict,
        validate_default=True,
        description="Approximate current distribution (category -> %)",
    )
    intermediaries: str | None = Field(None, description="Current intermediaries")
    total_costs_percent: str | None = Field(None, description="Total costs paid (%)")

    # Section 7: operations and services
    management_preference: str | None = Field(None, description="Passive/active/mixed management")
    involvement_frequency: str | None = Field(None, description="Portfolio review frequency")
    report_format: str | None = Field(None, description="Preferred report format")
    benchmark: str | None = Field(None, description="Reference benchmark")
    milestone_date: str | None = Field(None, description="Milestone date")
    other_notes: str | None = Field(None, description="Other notes")

    model_config = {
        "frozen": True,
        "alias_generator": _camel,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator(*SCORED_OPTION_ENUMS, mode="before")
    @classmethod
    def normalize_option(cls, v: Any, info: ValidationInfo) -> Any:
        """Map unknown option values to None (scored as the default)."""
        if v is None:
            return None
        enum_cls = SCORED_OPTION_ENUMS[info.field_name]
        if isinstance(v, enum_cls):
            return v
        try:
            return enum_cls(v)
        except ValueError:
            return None

    def with_updates(self, **changes: Any) -> QuestionnaireAnswers:
        """Return a new validated record with the given fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)
