"""Tests for per-mode request building and response parsing."""

import json
import sys
from pathlib import Path

import pytest

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from humanizex.config import AnalysisOptions
from humanizex.core.modes import (
    STRATEGIES,
    AiDetectionStrategy,
    HumanizeStrategy,
    PlagiarismStrategy,
    SummarizeStrategy,
    get_strategy,
    parse_json_array,
)
from humanizex.models import (
    AiDetectionFinding,
    AnalysisMode,
    AnalysisResult,
    PlagiarismFinding,
    RewriteResult,
)
from humanizex.prompts import (
    AI_DETECTION_RESPONSE_SCHEMA,
    HUMANIZE_STYLE_PROMPTS,
    PLAGIARISM_PROMPT_INTROS,
    PLAGIARISM_RESPONSE_SCHEMA,
    SUMMARY_LENGTH_PROMPTS,
)


class TestRegistry:
    """Tests for strategy lookup."""

    def test_every_mode_registered(self):
        assert set(STRATEGIES) == set(AnalysisMode)

    def test_lookup_by_enum_and_value(self):
        assert isinstance(get_strategy(AnalysisMode.PLAGIARISM), PlagiarismStrategy)
        assert isinstance(get_strategy("AI_DETECTION"), AiDetectionStrategy)
        assert isinstance(get_strategy("HUMANIZE"), HumanizeStrategy)
        assert isinstance(get_strategy("SUMMARIZE"), SummarizeStrategy)

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown analysis mode"):
            get_strategy("TRANSLATE")


class TestParseJsonArray:
    """Tests for parse_json_array."""

    def test_plain_array(self):
        assert parse_json_array('[{"a": 1}]') == [{"a": 1}]

    def test_empty_response(self):
        assert parse_json_array("  \n") == []

    def test_markdown_code_block(self):
        response = 'Here you go:\n```json\n[{"a": 1}, {"a": 2}]\n```'
        assert parse_json_array(response) == [{"a": 1}, {"a": 2}]

    def test_object_rejected(self):
        with pytest.raises(ValueError):
            parse_json_array('{"a": 1}')

    def test_garbage_rejected(self):
        with pytest.raises(ValueError):
            parse_json_array("I could not find any plagiarism.")


class TestPlagiarismStrategy:
    """Tests for the plagiarism strategy."""

    @pytest.mark.parametrize("sensitivity", ["medium", "high", "strict"])
    def test_prompt_uses_sensitivity(self, sensitivity):
        strategy = PlagiarismStrategy()
        options = AnalysisOptions(plagiarism_sensitivity=sensitivity)

        request = strategy.build_request("chunk text", options)

        assert PLAGIARISM_PROMPT_INTROS[sensitivity] in request.prompt
        assert '"chunk text"' in request.prompt
        assert request.response_schema == PLAGIARISM_RESPONSE_SCHEMA

    def test_parse_findings(self):
        response = json.dumps([
            {"plagiarized_text": "copied", "source_url": "http://a", "confidence_score": 0.7},
        ])

        findings = PlagiarismStrategy().parse_response(response)

        assert findings == [PlagiarismFinding("copied", "http://a", 0.7)]

    def test_missing_field_rejected(self):
        response = json.dumps([{"plagiarized_text": "copied", "confidence_score": 0.7}])
        with pytest.raises(ValueError, match="source_url"):
            PlagiarismStrategy().parse_response(response)

    def test_progress_message(self):
        assert PlagiarismStrategy().progress_message(1, 5) == "Analyzing chunk 2 of 5..."


class TestAiDetectionStrategy:
    """Tests for the AI-detection strategy."""

    def test_request_has_schema(self):
        request = AiDetectionStrategy().build_request("chunk", AnalysisOptions())
        assert request.response_schema == AI_DETECTION_RESPONSE_SCHEMA
        assert '"chunk"' in request.prompt

    def test_parse_findings(self):
        response = json.dumps([
            {"text_segment": "a", "is_ai_generated": True, "confidence_score": 1},
            {"text_segment": "b", "is_ai_generated": False, "confidence_score": 0.2},
        ])

        findings = AiDetectionStrategy().parse_response(response)

        assert findings == [
            AiDetectionFinding("a", True, 1.0),
            AiDetectionFinding("b", False, 0.2),
        ]

    def test_wrong_type_rejected(self):
        response = json.dumps([
            {"text_segment": "a", "is_ai_generated": "yes", "confidence_score": 0.5},
        ])
        with pytest.raises(ValueError, match="is_ai_generated"):
            AiDetectionStrategy().parse_response(response)

    def test_progress_message(self):
        message = AiDetectionStrategy().progress_message(0, 1)
        assert message == "Analyzing chunk 1 of 1 for AI content..."


class TestRewriteStrategies:
    """Tests for the humanize and summarize strategies."""

    @pytest.mark.parametrize("style", list(HUMANIZE_STYLE_PROMPTS))
    def test_humanize_prompt_uses_style(self, style):
        request = HumanizeStrategy().build_request("chunk", AnalysisOptions(humanize_style=style))

        assert HUMANIZE_STYLE_PROMPTS[style] in request.prompt
        assert request.response_schema is None

    @pytest.mark.parametrize("length", list(SUMMARY_LENGTH_PROMPTS))
    def test_summarize_prompt_uses_length(self, length):
        request = SummarizeStrategy().build_request("chunk", AnalysisOptions(summary_length=length))

        assert SUMMARY_LENGTH_PROMPTS[length] in request.prompt
        assert request.response_schema is None

    def test_parse_strips_whitespace(self):
        assert HumanizeStrategy().parse_response("  Rewritten.\n") == "Rewritten."

    def test_prompt_keeps_braces_in_text(self):
        request = HumanizeStrategy().build_request("use {braces} here", AnalysisOptions())
        assert "use {braces} here" in request.prompt


class TestResultAssembly:
    """Tests for collecting chunk outputs into a result."""

    def test_detection_extends_findings(self):
        strategy = PlagiarismStrategy()
        outputs = []

        strategy.accumulate(outputs, [PlagiarismFinding("a", "http://x", 0.5)])
        strategy.accumulate(outputs, [PlagiarismFinding("c", "http://y", 0.7)])

        assert [f.plagiarized_text for f in outputs] == ["a", "c"]

    def test_detection_finalize_reconstructs(self):
        strategy = AiDetectionStrategy()
        outputs = [AiDetectionFinding("b c", True, 0.9)]

        result = strategy.finalize("a b c", outputs, n_chunks=1)

        assert isinstance(result, AnalysisResult)
        assert result.overall_score == 60
        assert result.text == "a b c"

    def test_rewrite_appends_and_joins(self):
        strategy = SummarizeStrategy()
        outputs = []

        strategy.accumulate(outputs, "First.")
        strategy.accumulate(outputs, "Second.")
        result = strategy.finalize("ignored", outputs, n_chunks=2)

        assert result == RewriteResult(text="First. Second.", n_chunks=2)
