"""Pytest fixtures for asesor tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from asesor.core.settings import get_settings  # noqa: E402
from asesor.domain.models.answers import QuestionnaireAnswers  # noqa: E402


@pytest.fixture
def aggressive_answers_data():
    """Most risk-seeking option for every scored question."""
    return {
        "horizon": ">10",
        "income_range": ">20M",
        "savings_percent": ">30%",
        "emergency_months": ">6",
        "experience_level": "avanzado",
        "max_annual_drop": "-35%",
        "reaction_to_drop": "compras",
        "preference_expected_return": "15%",
        "liquidity_min_percent": 0,
        "currency_risk": "alta",
    }


@pytest.fixture
def cautious_answers_data():
    """Most cautious option for every scored question."""
    return {
        "horizon": "corto",
        "income_range": "≤3M",
        "savings_percent": "5-10%",
        "emergency_months": "0",
        "experience_level": "básico",
        "max_annual_drop": "-5%",
        "reaction_to_drop": "vendes",
        "preference_expected_return": "6%",
        "liquidity_min_percent": 80,
        "currency_risk": "baja",
    }


@pytest.fixture
def aggressive_answers(aggressive_answers_data):
    return QuestionnaireAnswers(**aggressive_answers_data)


@pytest.fixture
def default_answers():
    """Nothing answered; liquidity keeps its default of 30%."""
    return QuestionnaireAnswers()


@pytest.fixture
def camel_case_form():
    """Raw form payload using the original camelCase field names."""
    return {
        "objectives": "crecimiento patrimonial",
        "horizon": "5-10",
        "incomeRange": "6-12M",
        "savingsPercent": "10-20%",
        "emergencyMonths": "3-6",
        "experienceLevel": "intermedio",
        "reactionToDrop": "mantienes",
        "maxAnnualDrop": "-20%",
        "preferenceExpectedReturn": "10%",
        "liquidityMinPercent": 20,
        "currencyRisk": "media",
        "productsUsed": "CDT, FIC, , ETFs",
        "patrimonyDistribution": "efectivo:30, renta fija:40, acciones:30",
        "benchmark": "inflación+3%",
    }


@pytest.fixture
def fresh_settings():
    """Clear the cached settings before and after a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
