"""Unit tests for asesor.domain.catalog module."""

import pytest

from asesor.core.exceptions import InvalidParameterError
from asesor.domain.catalog import (
    QUESTIONNAIRE_SECTIONS,
    get_question,
    iter_questions,
    options_for,
    scored_fields,
)
from asesor.domain.models.answers import SCORED_OPTION_ENUMS, QuestionnaireAnswers


class TestCatalog:
    """Tests for the questionnaire catalog."""

    def test_seven_sections(self):
        assert len(QUESTIONNAIRE_SECTIONS) == 7
        assert QUESTIONNAIRE_SECTIONS[0]["title"].startswith("1)")
        assert QUESTIONNAIRE_SECTIONS[-1]["title"].startswith("7)")

    def test_fields_exist_on_answers(self):
        """Every question fills a real answer field."""
        fields = set(QuestionnaireAnswers.model_fields)
        for question in iter_questions():
            assert question["field"] in fields

    def test_scored_fields(self):
        assert set(scored_fields()) == set(SCORED_OPTION_ENUMS) | {"liquidity_min_percent"}

    @pytest.mark.parametrize("field", sorted(SCORED_OPTION_ENUMS))
    def test_scored_options_match_enum(self, field):
        expected = [member.value for member in SCORED_OPTION_ENUMS[field]]
        assert options_for(field) == expected

    def test_horizon_order(self):
        assert options_for("horizon") == ["corto", "medio", "3-5", "5-10", ">10"]

    def test_unscored_choice(self):
        question = get_question("objective_admit_drop")
        assert question["kind"] == "choice"
        assert question["scored"] is False
        assert question["options"] == ["sí", "no", "depende"]

    def test_free_text_has_no_options(self):
        assert options_for("benchmark") == []

    def test_options_for_returns_copy(self):
        options = options_for("horizon")
        options.append("nunca")
        assert "nunca" not in options_for("horizon")

    def test_unknown_field(self):
        with pytest.raises(InvalidParameterError):
            get_question("lottery_numbers")
