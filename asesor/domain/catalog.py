"""Questionnaire catalog.

Sections, questions and enumerated options of the risk-profile form.
Options of scored questions are taken from their answer enums so the
catalog and the scorer share one vocabulary.
"""

from __future__ import annotations

from typing import Iterator, TypedDict

from asesor.core.exceptions import InvalidParameterError
from asesor.domain.models.answers import SCORED_OPTION_ENUMS


class QuestionSpec(TypedDict):
    """One question of the form."""
    field: str
    prompt: str
    kind: str  # choice, text, list, slider, mapping
    options: list[str]
    scored: bool


class SectionSpec(TypedDict):
    title: str
    questions: list[QuestionSpec]


def _choice(field: str, prompt: str, options: list[str] | None = None) -> QuestionSpec:
    scored = field in SCORED_OPTION_ENUMS
    if options is None:
        options = [member.value for member in SCORED_OPTION_ENUMS[field]]
    return {"field": field, "prompt": prompt, "kind": "choice", "options": options, "scored": scored}


def _text(field: str, prompt: str, kind: str = "text") -> QuestionSpec:
    return {"field": field, "prompt": prompt, "kind": kind, "options": [], "scored": False}


QUESTIONNAIRE_SECTIONS: list[SectionSpec] = [
    {
        "title": "1) Objetivos y horizonte",
        "questions": [
            _text("objectives", "¿Para qué inviertes? (breve)"),
            _choice("horizon", "Horizonte principal"),
            _choice("objective_admit_drop", "¿Admite caídas temporales?", ["sí", "no", "depende"]),
        ],
    },
    {
        "title": "2) Situación financiera actual (confidencial)",
        "questions": [
            _choice("income_range", "Ingreso mensual neto (rango)"),
            _choice("savings_percent", "Porcentaje que puedes ahorrar/invertir"),
            _choice("emergency_months", "Fondo de emergencia (meses)"),
            _text("withdraw_next_36", "¿Necesitarás retirar en 12–36 meses? (monto/cuándo)"),
            _text("initial_investment", "Tamaño inicial y aportes periódicos"),
        ],
    },
    {
        "title": "3) Experiencia y conocimientos",
        "questions": [
            _text("products_used", "Productos que has usado (separa comas)", kind="list"),
            _choice("experience_level", "Nivel experiencia renta fija/variable"),
            _choice(
                "prefer_managed",
                "¿Prefieres gestionados o autogestionados?",
                ["gestionados", "autogestionados", "mixto"],
            ),
        ],
    },
    {
        "title": "4) Tolerancia al riesgo (psicométrica y práctica)",
        "questions": [
            _choice("reaction_to_drop", "Si $100 cae a $85 en un mes, ¿qué haces?"),
            _choice("max_annual_drop", "Caída máxima tolerable en un año"),
            _choice("preference_expected_return", "¿Cuál prefieres?"),
            _choice(
                "percent_equity_in_crisis",
                "¿Qué porcentaje en renta variable aceptarías durante una crisis?",
                ["0%", "10-30%", "30-60%", ">60%"],
            ),
        ],
    },
    {
        "title": "5) Restricciones y preferencias",
        "questions": [
            {
                "field": "liquidity_min_percent",
                "prompt": "Liquidez mínima (¿% rescatable en 1–7 días hábiles?)",
                "kind": "slider",
                "options": [],
                "scored": True,
            },
            _text("esg_preference", "Preferencias ESG / exclusiones (si aplica)"),
            _choice(
                "allowed_currencies",
                "Monedas permitidas",
                ["COP solo", "COP+USD", "Incluye EUR/otros"],
            ),
            _choice("currency_risk", "Tolerancia al riesgo cambiario"),
        ],
    },
    {
        "title": "6) Estructura actual del patrimonio (si aplica)",
        "questions": [
            _text(
                "patrimony_distribution",
                "Distribución aproximada (%) — pares 'categoria:valor' separados por comas",
                kind="mapping",
            ),
            _text("intermediaries", "Intermediarios actuales"),
        ],
    },
    {
        "title": "7) Operativa y servicios",
        "questions": [
            _choice("management_preference", "Preferencia gestión", ["pasiva", "activa", "mixta"]),
            _choice(
                "involvement_frequency",
                "¿Con qué frecuencia quieres revisar el portafolio?",
                ["trimestral", "semestral", "anual", "solo eventos"],
            ),
            _text("benchmark", "¿Benchmark de referencia?"),
        ],
    },
]


def iter_questions() -> Iterator[QuestionSpec]:
    """Yield every question in form order."""
    for section in QUESTIONNAIRE_SECTIONS:
        yield from section["questions"]


def get_question(field: str) -> QuestionSpec:
    """Look up a question by answer field name.

    Raises:
        InvalidParameterError: If no question fills that field.
    """
    for question in iter_questions():
        if question["field"] == field:
            return question
    raise InvalidParameterError("field", field, "no question for this field")


def options_for(field: str) -> list[str]:
    """Enumerated options of a question (empty for free-text questions)."""
    return list(get_question(field)["options"])


def scored_fields() -> list[str]:
    """Answer fields that feed the risk score, in form order."""
    return [q["field"] for q in iter_questions() if q["scored"]]
