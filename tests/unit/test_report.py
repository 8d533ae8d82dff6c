"""Unit tests for asesor.services.report module."""

import json

import pytest

from asesor.domain.calculator.suggestions import suggestion_for
from asesor.domain.models.profile import ProfileLabel
from asesor.services.profiler import RiskProfiler
from asesor.services.report import allocation_frame, build_report


@pytest.fixture
def recommendation(aggressive_answers):
    return RiskProfiler().recommend(aggressive_answers)


class TestAllocationFrame:
    """Tests for the allocation table."""

    def test_columns_and_total(self):
        df = allocation_frame(suggestion_for(ProfileLabel.BALANCED))
        assert list(df.columns) == ["categoria", "porcentaje"]
        assert df["porcentaje"].sum() == 100

    def test_sorted_descending(self):
        df = allocation_frame(suggestion_for(ProfileLabel.MODERATE))
        assert df.iloc[0]["categoria"] == "Renta fija (TES, bonos corporativos)"
        assert df["porcentaje"].is_monotonic_decreasing

    def test_frame_edits_do_not_touch_template(self):
        df = allocation_frame(suggestion_for(ProfileLabel.CONSERVATIVE))
        df.loc[0, "porcentaje"] = 99
        assert suggestion_for(ProfileLabel.CONSERVATIVE).allocation_total == 100


class TestBuildReport:
    """Tests for the in-memory report payload."""

    def test_sections(self, aggressive_answers, recommendation):
        report = build_report(aggressive_answers, recommendation, metadata={"source": "test"})
        assert report["metadata"]["source"] == "test"
        assert "timestamp" in report["metadata"]
        assert report["answers"]["horizon"] == ">10"
        assert report["assessment"]["label"] == "Moderado"
        assert report["assessment"]["rounded_score"] == 28
        assert report["suggestion"]["allocation_total"] == 100

    def test_json_serializable(self, aggressive_answers, recommendation):
        payload = json.loads(json.dumps(build_report(aggressive_answers, recommendation), ensure_ascii=False))
        assert payload["answers"]["income_range"] == ">20M"
        assert payload["answers"]["patrimony_distribution"] == {}
        assert payload["suggestion"]["profile"] == "Moderado"

    def test_payload_is_a_copy(self, aggressive_answers, recommendation):
        report = build_report(aggressive_answers, recommendation)
        report["suggestion"]["allocation"]["Alternativos"] = 90
        assert recommendation.suggestion.allocation["Alternativos"] == 5

    def test_nothing_written_to_disk(self, tmp_path, monkeypatch, aggressive_answers, recommendation):
        monkeypatch.chdir(tmp_path)
        build_report(aggressive_answers, recommendation)
        allocation_frame(recommendation.suggestion)
        assert list(tmp_path.iterdir()) == []
