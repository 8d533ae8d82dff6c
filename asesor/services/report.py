"""Report views of a recommendation.

Serializes a recommendation and the answers behind it into a
JSON-compatible payload, and renders the suggested allocation as a table.
Nothing is written to disk; hosting surfaces decide what to do with it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

import pandas as pd

from asesor.domain.models.answers import QuestionnaireAnswers
from asesor.domain.models.portfolio import PortfolioSuggestion
from asesor.services.profiler import Recommendation


def allocation_frame(suggestion: PortfolioSuggestion) -> pd.DataFrame:
    """Allocation as a DataFrame with 'categoria' and 'porcentaje' columns.

    Rows are sorted by percentage, largest first.
    """
    df = pd.DataFrame(
        list(suggestion.allocation.items()),
        columns=["categoria", "porcentaje"],
    )
    return df.sort_values("porcentaje", ascending=False, kind="stable").reset_index(drop=True)


def build_report(
    answers: QuestionnaireAnswers,
    recommendation: Recommendation,
    metadata: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Assemble the JSON-serializable report payload.

    Args:
        answers: Answers that produced the recommendation
        recommendation: Assessment and suggested portfolio
        metadata: Extra keys merged into the metadata block

    Returns:
        Dict with metadata, answers, assessment and suggestion sections
    """
    return {
        "metadata": {
            "timestamp": datetime.now().isoformat(),
            **(metadata or {}),
        },
        "answers": answers.model_dump(mode="json"),
        "assessment": recommendation.assessment.model_dump(mode="json"),
        "suggestion": recommendation.suggestion.model_dump(mode="json"),
    }
