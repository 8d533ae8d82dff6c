"""Static portfolio templates, one per risk profile."""

from __future__ import annotations

from asesor.domain.models.portfolio import PortfolioSuggestion
from asesor.domain.models.profile import ProfileLabel

PORTFOLIO_TEMPLATES: dict[ProfileLabel, PortfolioSuggestion] = {
    ProfileLabel.CONSERVATIVE: PortfolioSuggestion(
        profile=ProfileLabel.CONSERVATIVE,
        allocation={
            "Efectivo / CDT / liquidez": 50,
            "Renta fija (FIC, TES cortos)": 30,
            "Fondos mixtos conservadores / FVP": 10,
            "Renta variable local/internacional": 5,
            "Alternativos / inmobiliario": 5,
        },
        liquidity="Alta: gran parte en instrumentos rescatables en 1-7 días (≥40%).",
        expected_return_range="2% - 6% anual (esperanza conservadora).",
        notes=(
            "Baja tolerancia a drawdowns. Priorizar fondos con baja volatilidad, "
            "cuentas AFC si hay ventajas fiscales."
        ),
    ),
    ProfileLabel.MODERATE: PortfolioSuggestion(
        profile=ProfileLabel.MODERATE,
        allocation={
            "Efectivo / liquidez": 25,
            "Renta fija (TES, bonos corporativos)": 35,
            "Fondos mixtos / FIC": 20,
            "Renta variable (acciones/ETFs)": 15,
            "Alternativos": 5,
        },
        liquidity="Moderada: parte en instrumentos con 7-30 días de rescate y vencimientos cortos.",
        expected_return_range="4% - 8% anual.",
        notes="Mantener fondo de emergencia 3-6 meses. Balance entre protección y crecimiento.",
    ),
    ProfileLabel.BALANCED: PortfolioSuggestion(
        profile=ProfileLabel.BALANCED,
        allocation={
            "Efectivo": 10,
            "Renta fija": 30,
            "Renta variable (COLCAP y ETFs internacionales)": 40,
            "FIC / FVP": 10,
            "Inmobiliario / alternativos": 10,
        },
        liquidity="Equilibrada: algunas posiciones con lockups (90-365 días) aceptables.",
        expected_return_range="6% - 12% anual.",
        notes=(
            "Diversificación internacional recomendada (ETFs USD). "
            "Considerar cobertura cambiaria según tolerancia."
        ),
    ),
    ProfileLabel.AGGRESSIVE: PortfolioSuggestion(
        profile=ProfileLabel.AGGRESSIVE,
        allocation={
            "Renta variable local e internacional": 60,
            "ETFs y acciones directas": 25,
            "Renta fija (alto rendimiento)": 5,
            "Alternativos / private": 10,
        },
        liquidity="Baja aceptación de reembolsos inmediatos; hay posiciones con lockups largos.",
        expected_return_range="10% - 20%+ anual (alto riesgo).",
        notes=(
            "Alto drawdown posible. Recomendable experiencia previa y uso de "
            "cuentas internacionales si procede."
        ),
    ),
}


def suggestion_for(label: ProfileLabel | str) -> PortfolioSuggestion:
    """Return the portfolio template for a profile.

    Args:
        label: ProfileLabel, or its display/member name

    Raises:
        InvalidParameterError: If a string names no known profile.
    """
    return PORTFOLIO_TEMPLATES[ProfileLabel.parse(label)]
