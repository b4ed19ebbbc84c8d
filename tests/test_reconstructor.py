"""Tests for mapping findings back onto the original text."""

import sys
from pathlib import Path

import pytest

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from humanizex.core.reconstructor import overall_score, reconstruct
from humanizex.models import AiDetectionFinding, PlagiarismFinding, Segment


def plagiarism(text, url="http://x", score=0.9):
    return PlagiarismFinding(plagiarized_text=text, source_url=url, confidence_score=score)


def ai(text, is_ai=True, score=0.8):
    return AiDetectionFinding(text_segment=text, is_ai_generated=is_ai, confidence_score=score)


class TestReconstruct:
    """Tests for reconstruct."""

    def test_no_findings(self):
        result = reconstruct("Some original text.", [])

        assert result.overall_score == 0
        assert result.segments == (Segment(text="Some original text."),)

    def test_repeated_sentence_example(self):
        text = "The cat sat. The cat sat."
        result = reconstruct(text, [plagiarism("The cat sat.")])

        assert [s.text for s in result.segments] == ["The cat sat.", " ", "The cat sat."]
        assert [s.flagged for s in result.segments] == [True, False, True]
        assert result.segments[0].source == "http://x"
        assert result.segments[0].score == 0.9
        # 24 matched characters out of 25
        assert result.overall_score == 96

    def test_segments_partition_text(self):
        text = "Alpha beta gamma. Delta epsilon. Zeta eta theta. Delta epsilon."
        findings = [
            plagiarism("Delta epsilon."),
            plagiarism("Zeta eta"),
            plagiarism("not present anywhere"),
            plagiarism("Alpha"),
        ]

        result = reconstruct(text, findings)

        assert "".join(s.text for s in result.segments) == text
        assert result.text == text
        assert all(s.text for s in result.segments)

    def test_finding_at_boundaries_drops_empty_pieces(self):
        result = reconstruct("copied", [plagiarism("copied")])

        assert result.segments == (
            Segment(text="copied", flagged=True, source="http://x", score=0.9),
        )
        assert result.overall_score == 100

    def test_first_match_wins(self):
        """A later finding inside an already-flagged span adds no split."""
        text = "Intro. The quick brown fox jumps. Outro."
        findings = [
            plagiarism("The quick brown fox jumps.", url="http://first"),
            plagiarism("brown fox", url="http://second"),
        ]

        result = reconstruct(text, findings)

        flagged = result.flagged_segments
        assert len(flagged) == 1
        assert flagged[0].text == "The quick brown fox jumps."
        assert flagged[0].source == "http://first"

    def test_later_finding_matches_remaining_text(self):
        text = "brown fox. The quick brown fox jumps."
        findings = [
            plagiarism("The quick brown fox jumps.", url="http://first"),
            plagiarism("brown fox", url="http://second"),
        ]

        result = reconstruct(text, findings)

        assert [(s.text, s.source) for s in result.flagged_segments] == [
            ("brown fox", "http://second"),
            ("The quick brown fox jumps.", "http://first"),
        ]

    def test_unmatched_finding_is_dropped(self):
        result = reconstruct("Original wording.", [plagiarism("Paraphrased wording.")])

        assert result.overall_score == 0
        assert result.segments == (Segment(text="Original wording."),)

    def test_empty_finding_text_splits_into_characters(self):
        result = reconstruct("abc", [plagiarism("")])

        assert result.overall_score == 0
        assert [s.text for s in result.segments] == ["a", "", "b", "", "c"]
        assert [s.flagged for s in result.segments] == [False, True, False, True, False]

    def test_empty_finding_text_blocks_later_findings(self):
        result = reconstruct("ab cd", [plagiarism(""), plagiarism("cd")])

        assert result.overall_score == 0
        assert result.text == "ab cd"
        assert all(s.text == "" for s in result.flagged_segments)

    def test_case_sensitive(self):
        result = reconstruct("The Cat", [plagiarism("the cat")])
        assert result.flagged_segments == []

    def test_repeated_finding_does_not_resplit(self):
        """A finding whose text is already fully flagged matches nothing."""
        text = "abab"
        findings = [plagiarism("ab"), plagiarism("ab")]

        result = reconstruct(text, findings)

        assert result.overall_score == 100
        assert len(result.flagged_segments) == 2

    def test_score_clamped_to_100(self):
        text = "aaaa"
        findings = [plagiarism("a"), plagiarism("aa")]

        result = reconstruct(text, findings)

        assert result.overall_score == 100

    def test_empty_original_text(self):
        result = reconstruct("", [plagiarism("x")])

        assert result.overall_score == 0
        assert "".join(s.text for s in result.segments) == ""


class TestAiDetectionReconstruct:
    """Tests for reconstruct with AI-detection findings."""

    def test_only_ai_generated_findings_flag_text(self):
        text = "Written by me. Generated by a model."
        findings = [
            ai("Written by me.", is_ai=False, score=0.1),
            ai("Generated by a model.", is_ai=True, score=0.95),
        ]

        result = reconstruct(text, findings)

        assert [s.text for s in result.flagged_segments] == ["Generated by a model."]
        assert result.flagged_segments[0].score == 0.95
        assert result.flagged_segments[0].source is None
        assert result.overall_score == round(21 / 36 * 100)

    def test_all_human_findings(self):
        text = "Entirely human prose."
        result = reconstruct(text, [ai(text, is_ai=False)])

        assert result.overall_score == 0
        assert result.segments == (Segment(text=text),)


class TestOverallScore:
    """Tests for the score formula."""

    def test_zero_length(self):
        assert overall_score(10, 0) == 0

    def test_half_rounds_up(self):
        assert overall_score(1, 8) == 13  # 12.5

    def test_clamped(self):
        assert overall_score(300, 100) == 100

    @pytest.mark.parametrize("matched,length", [(0, 5), (1, 3), (7, 7), (50, 3)])
    def test_bounds(self, matched, length):
        score = overall_score(matched, length)
        assert isinstance(score, int)
        assert 0 <= score <= 100
