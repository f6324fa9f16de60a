"""Tests for the RFP analyzer."""

import pytest

from smartrfp.analysis.analyzer import RFPAnalyzer, analyze_rfp
from smartrfp.models.analysis import Priority, QuestionType


class TestAnalyzeRFP:
    """End-to-end analyzer behaviour."""

    def test_gdpr_and_cost_questions(self, gdpr_rfp_text):
        """Test two numbered questions are found and classified."""
        analysis = analyze_rfp(gdpr_rfp_text)

        assert analysis.total_questions == 2
        compliance, commercial = analysis.all_questions
        assert compliance.type == QuestionType.COMPLIANCE
        assert compliance.requires_attention is True
        assert commercial.type == QuestionType.COMMERCIAL

    def test_empty_text(self):
        """Test empty input gives one empty section and no questions."""
        analysis = analyze_rfp("")

        assert analysis.total_questions == 0
        assert len(analysis.sections) == 1
        assert analysis.total_pages == 0
        assert "0 identified questions" in analysis.summary

    def test_no_headers_single_section(self):
        """Test text without headers stays in one section."""
        text = "We need a new website.\nWho will host the new website?"
        analysis = analyze_rfp(text)

        assert len(analysis.sections) == 1
        assert analysis.sections[0].content == text

    def test_sample_sections_and_questions(self, sample_rfp_text):
        """Test the sample document is segmented and questions classified."""
        analysis = analyze_rfp(sample_rfp_text)
        by_title = {s.title: s for s in analysis.sections}

        technical = by_title["1. Technical Requirements"]
        commercial = by_title["2. Commercial Terms"]
        experience = by_title["3. Vendor Experience"]

        assert {q.type for q in technical.questions} == {QuestionType.TECHNICAL}
        assert {q.type for q in commercial.questions} == {QuestionType.COMMERCIAL}
        assert [q.type for q in experience.questions] == [QuestionType.EXPERIENCE]
        assert by_title["General Information"].questions == []
        assert analysis.total_questions == 6

    def test_sample_lists(self, sample_rfp_text):
        """Test flat lists are filled from the whole document."""
        analysis = analyze_rfp(sample_rfp_text)

        assert analysis.deadlines == ["no later than 15 March 2025"]
        assert "must include a fixed price quote." in analysis.key_requirements
        assert analysis.technical_requirements

    def test_total_questions_matches_sections(self, sample_rfp_text):
        """Test the total equals the per-section sum."""
        analysis = analyze_rfp(sample_rfp_text)

        assert analysis.total_questions == sum(len(s.questions) for s in analysis.sections)

    def test_question_invariants(self, sample_rfp_text):
        """Test length bounds and per-section uniqueness."""
        analysis = analyze_rfp(sample_rfp_text)

        for section in analysis.sections:
            lowered = [q.question.lower() for q in section.questions]
            assert len(lowered) == len(set(lowered))
            for question in section.questions:
                assert 10 <= len(question.question.strip()) <= 500

    def test_question_ids_unique(self, sample_rfp_text):
        """Test question ids are unique within a run."""
        ids = [q.id for q in analyze_rfp(sample_rfp_text).all_questions]
        assert len(ids) == len(set(ids))

    def test_deterministic(self, sample_rfp_text):
        """Test repeated runs give identical output."""
        first = analyze_rfp(sample_rfp_text)
        second = analyze_rfp(sample_rfp_text)

        assert first.model_dump() == second.model_dump()

    def test_non_string_rejected(self):
        """Test non-string input fails fast."""
        with pytest.raises(TypeError):
            analyze_rfp(None)  # type: ignore[arg-type]


class TestPageCount:
    """Tests for the page count."""

    def test_estimated_from_length(self):
        """Test pages are estimated at 2000 characters each."""
        analysis = analyze_rfp("word " * 900)
        assert analysis.total_pages == 3

    def test_metadata_page_count(self, gdpr_rfp_text):
        """Test a known page count wins over the estimate."""
        assert analyze_rfp(gdpr_rfp_text, {"page_count": 7}).total_pages == 7

    def test_camel_case_metadata(self, gdpr_rfp_text):
        """Test the camel case key is honoured."""
        assert analyze_rfp(gdpr_rfp_text, {"pageCount": 4}).total_pages == 4


class TestSummary:
    """Tests for the summary template."""

    def test_summary_counts(self, sample_rfp_text):
        """Test the summary reports section and question counts."""
        analysis = analyze_rfp(sample_rfp_text)

        assert analysis.summary.startswith(
            f"This RFP contains {len(analysis.sections)} main sections with "
            f"{analysis.total_questions} identified questions"
        )
        assert "- Technical: 3 questions" in analysis.summary
        assert "- Commercial: 2 questions" in analysis.summary
        assert "- Experience: 1 questions" in analysis.summary
        assert "- General: 0 questions" in analysis.summary

    def test_high_priority_count(self):
        """Test high priority questions are counted."""
        analysis = analyze_rfp("1. Vendors must describe their escalation path?")

        high = len(analysis.questions_by_priority(Priority.HIGH))
        assert high == 1
        assert f"{high} questions are marked as high priority" in analysis.summary

    def test_analysis_logged(self, gdpr_rfp_text, captured_logs):
        """Test one summary event is logged per analysis."""
        RFPAnalyzer().analyze(gdpr_rfp_text)

        events = [e for e in captured_logs if e["event"] == "RFP analysis complete"]
        assert len(events) == 1
        assert events[0]["questions"] == 2
