"""Tests for data models and configuration."""

import sys
from pathlib import Path

import pytest

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from humanizex.config import AnalysisOptions, HumanizeXConfig, LLMConfig
from humanizex.models import (
    AiDetectionFinding,
    AnalysisMode,
    AnalysisResult,
    PlagiarismFinding,
    RewriteResult,
    Segment,
)


class TestAnalysisOptions:
    """Tests for AnalysisOptions."""

    def test_defaults(self):
        options = AnalysisOptions()
        assert options.plagiarism_sensitivity == "medium"
        assert options.humanize_style == "default"
        assert options.summary_length == "medium"

    @pytest.mark.parametrize("kwargs", [
        {"plagiarism_sensitivity": "extreme"},
        {"humanize_style": "pirate"},
        {"summary_length": "tiny"},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            AnalysisOptions(**kwargs)

    def test_from_dict_ignores_none(self):
        options = AnalysisOptions.from_dict({"humanize_style": "formal", "summary_length": None})
        assert options.humanize_style == "formal"
        assert options.summary_length == "medium"

    def test_from_empty_dict(self):
        assert AnalysisOptions.from_dict(None) == AnalysisOptions()


class TestHumanizeXConfig:
    """Tests for the aggregate configuration."""

    def test_defaults(self):
        config = HumanizeXConfig()
        assert config.chunking.chunk_size == 2000
        assert config.chunking.max_words == 30000
        assert config.retry.max_attempts == 3
        assert config.retry.initial_delay == 1.0
        assert config.llm.backend == "ollama"

    def test_round_trip_dict(self):
        config = HumanizeXConfig.from_dict({
            "chunking": {"chunk_size": 500},
            "llm": {"backend": "gemini", "model": "gemini-2.5-flash"},
            "verbose": False,
        })

        assert config.chunking.chunk_size == 500
        assert config.llm.backend == "gemini"
        assert config.verbose is False
        assert config.to_dict()["chunking"]["chunk_size"] == 500

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown LLM backend"):
            LLMConfig(backend="other").create_backend()

    def test_creates_ollama_backend(self):
        from humanizex.llm.ollama import OllamaBackend

        backend = LLMConfig(model="llama3:8b").create_backend()

        assert isinstance(backend, OllamaBackend)
        assert backend.model_name == "llama3:8b"


class TestModels:
    """Tests for findings, segments and results."""

    def test_analysis_mode_from_value(self):
        assert AnalysisMode("AI_DETECTION") is AnalysisMode.AI_DETECTION
        assert AnalysisMode.SUMMARIZE == "SUMMARIZE"

    def test_plagiarism_finding_segment(self):
        finding = PlagiarismFinding("copied", "http://a", 0.5)

        assert finding.is_flagged
        assert finding.to_segment() == Segment("copied", True, "http://a", 0.5)

    def test_ai_finding_flag_follows_field(self):
        assert AiDetectionFinding("x", True, 0.9).is_flagged
        assert not AiDetectionFinding("x", False, 0.9).is_flagged

    def test_finding_rejects_non_object(self):
        with pytest.raises(ValueError):
            PlagiarismFinding.from_dict(["not", "an", "object"])

    def test_finding_rejects_boolean_score(self):
        with pytest.raises(ValueError, match="confidence_score"):
            AiDetectionFinding.from_dict(
                {"text_segment": "x", "is_ai_generated": True, "confidence_score": True}
            )

    def test_result_to_dict(self):
        result = AnalysisResult(
            overall_score=50,
            segments=(Segment("ab", True, "http://a", 0.9), Segment("cd")),
        )

        assert result.to_dict() == {
            "overall_score": 50,
            "segments": [
                {"text": "ab", "flagged": True, "source": "http://a", "score": 0.9},
                {"text": "cd", "flagged": False},
            ],
        }
        assert result.text == "abcd"

    def test_rewrite_result(self):
        result = RewriteResult("Hello.", n_chunks=2)
        assert str(result) == "Hello."
        assert result.to_dict() == {"text": "Hello.", "n_chunks": 2}
