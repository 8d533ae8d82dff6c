"""Risk profiling service.

Thin facade over the pure scoring functions that builds answers from raw
form data, pairs the assessment with its portfolio template and logs each
evaluation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from asesor.core.logging import get_logger
from asesor.domain.calculator.scoring import score
from asesor.domain.calculator.suggestions import suggestion_for
from asesor.domain.models.answers import QuestionnaireAnswers
from asesor.domain.models.portfolio import PortfolioSuggestion
from asesor.domain.models.profile import ProfileAssessment
from asesor.utils.parsing import parse_patrimony_distribution, parse_products_used

log = get_logger(__name__)


class Recommendation(BaseModel):
    """Assessment plus the portfolio template for its label."""

    assessment: ProfileAssessment = Field(..., description="Score, label and explanation")
    suggestion: PortfolioSuggestion = Field(..., description="Suggested portfolio")

    model_config = {
        "frozen": True,
    }


class RiskProfiler:
    """Evaluates questionnaire answers into profiles and portfolio suggestions."""

    @staticmethod
    def from_mapping(data: dict[str, Any]) -> QuestionnaireAnswers:
        """Build answers from raw form data.

        Accepts snake_case or camelCase keys. Free-text patrimony and product
        answers are parsed when given as strings.
        """
        data = dict(data)
        for key in ("patrimony_distribution", "patrimonyDistribution"):
            if isinstance(data.get(key), str):
                data[key] = parse_patrimony_distribution(data[key])
        for key in ("products_used", "productsUsed"):
            if isinstance(data.get(key), str):
                data[key] = parse_products_used(data[key])
        return QuestionnaireAnswers.model_validate(data)

    def assess(self, answers: QuestionnaireAnswers) -> ProfileAssessment:
        """Score answers into a profile assessment."""
        assessment = score(answers)
        log.info(
            "profile_assessed",
            score=round(assessment.score, 2),
            label=assessment.label.value,
        )
        log.debug("profile_factors", factors=assessment.factors, components=assessment.components)
        return assessment

    def recommend(self, answers: QuestionnaireAnswers) -> Recommendation:
        """Assess answers and attach the portfolio template for the label."""
        assessment = self.assess(answers)
        suggestion = suggestion_for(assessment.label)
        log.info(
            "portfolio_suggested",
            label=assessment.label.value,
            categories=len(suggestion.allocation),
        )
        return Recommendation(assessment=assessment, suggestion=suggestion)
