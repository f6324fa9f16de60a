"""Tests for the proposal generator."""

import pytest

from smartrfp.analysis.analyzer import analyze_rfp
from smartrfp.generation.generator import (
    ProposalGenerator,
    generate_proposal_from_rfp,
    group_questions_by_technology,
)
from smartrfp.models.analysis import QuestionType
from smartrfp.models.knowledge import KnowledgeBaseItem, KnowledgeItemType

STANDARD_SECTION_IDS = ["timeline", "team", "risk-management"]


class TestGenerateProposal:
    """Tests for whole proposal generation."""

    def test_section_layout(self, security_analysis, knowledge_items):
        """Test RFP sections come first, then the standard sections."""
        proposal = generate_proposal_from_rfp(
            security_analysis, knowledge_items, "Portal Rebuild", "City of Springfield"
        )

        assert [s.id for s in proposal.sections] == ["section-1", *STANDARD_SECTION_IDS]
        assert [s.confidence for s in proposal.sections[1:]] == [0.8, 0.9, 0.7]
        assert all(s.rfp_questions == [] for s in proposal.sections[1:])

    def test_rfp_section_content(self, security_analysis, knowledge_items):
        """Test a section renders its questions with knowledge backing."""
        proposal = generate_proposal_from_rfp(
            security_analysis, knowledge_items, "Portal Rebuild", "City of Springfield"
        )
        section = proposal.sections[0]

        assert section.title == "Security"
        assert section.content.startswith("# 1. Security\n\n## Overview\n")
        assert "including 1 high-priority items" in section.content
        assert "## Technical Approach" in section.content
        assert "### Security & Compliance" in section.content
        assert "**1. How do you handle security incidents?**" in section.content
        assert "### Our Technical Capabilities" in section.content
        assert section.rfp_questions == ["How do you handle security incidents?"]
        assert section.knowledge_used == ["Cloud Architecture"]
        assert section.confidence == pytest.approx(0.3)

    def test_coverage(self, security_analysis, knowledge_items):
        """Test coverage counts questions in RFP sections."""
        proposal = generate_proposal_from_rfp(security_analysis, knowledge_items, "P", "C")

        assert proposal.total_questions == 1
        assert proposal.questions_addressed == 1
        assert proposal.coverage_percentage == 100.0

    def test_advisories(self, security_analysis, knowledge_items):
        """Test recommendations and gaps for a low-confidence section."""
        proposal = generate_proposal_from_rfp(security_analysis, knowledge_items, "P", "C")

        assert proposal.recommendations == [
            "Consider adding more specific information for: Security",
            "Ensure detailed responses to 1 high-priority requirements",
        ]
        assert proposal.missing_information == []

    def test_executive_summary(self, security_analysis, knowledge_items):
        """Test the summary uses the company overview and client priorities."""
        proposal = generate_proposal_from_rfp(
            security_analysis,
            knowledge_items,
            "Portal Rebuild",
            "City of Springfield",
            additional_context="Data must stay in the EU",
        )
        summary = proposal.executive_summary

        assert summary.startswith("# Executive Summary")
        assert "Portal Rebuild" in summary
        assert "City of Springfield" in summary
        assert "Acme Digital has delivered cloud platform projects" in summary
        assert "## Your Priorities\nData must stay in the EU" in summary
        assert "## Key Requirements Addressed" not in summary

    def test_team_section_uses_team_profile(self, security_analysis, knowledge_items):
        """Test the team section quotes the team profile."""
        proposal = generate_proposal_from_rfp(security_analysis, knowledge_items, "P", "C")
        team = proposal.sections[-2]

        assert team.knowledge_used == ["Delivery Team"]
        assert "Our delivery team includes certified cloud engineers." in team.content

    def test_empty_analysis(self):
        """Test an RFP without questions still gets the standard sections."""
        proposal = generate_proposal_from_rfp(analyze_rfp(""), [], "P", "C")

        assert [s.id for s in proposal.sections] == STANDARD_SECTION_IDS
        assert proposal.questions_addressed == 0
        assert proposal.coverage_percentage == 0.0
        assert proposal.missing_information == [
            "Consider adding knowledge base content for: "
            "company-info, case-study, technical-spec, pricing"
        ]

    def test_sample_rfp(self, sample_rfp_text, knowledge_items):
        """Test a parsed RFP produces one section per questioned RFP section."""
        analysis = analyze_rfp(sample_rfp_text)
        proposal = generate_proposal_from_rfp(analysis, knowledge_items, "P", "C")
        by_title = {s.title: s for s in proposal.sections}

        assert len(proposal.sections) == 3 + len(STANDARD_SECTION_IDS)
        assert "General Information" not in by_title
        assert "### Our Pricing Approach" in by_title["2. Commercial Terms"].content
        assert "## Relevant Experience" in by_title["3. Vendor Experience"].content
        assert proposal.coverage_percentage == 100.0
        assert "Include detailed pricing breakdown and commercial terms" in proposal.recommendations

    def test_full_text(self, security_analysis, knowledge_items):
        """Test the flattened text holds every section."""
        proposal = generate_proposal_from_rfp(security_analysis, knowledge_items, "P", "C")
        text = proposal.full_text

        assert text.startswith(proposal.executive_summary)
        for section in proposal.sections:
            assert section.content in text

    def test_generation_logged(self, security_analysis, knowledge_items, captured_logs):
        """Test one summary event is logged per proposal."""
        generate_proposal_from_rfp(security_analysis, knowledge_items, "P", "C")

        events = [e for e in captured_logs if e["event"] == "Proposal generated"]
        assert len(events) == 1
        assert events[0]["questions_addressed"] == 1


class TestProposalGenerator:
    """Tests for generator helpers."""

    def test_knowledge_snapshot(self, knowledge_items):
        """Test later changes to the input list are not seen."""
        generator = ProposalGenerator(knowledge_items)
        knowledge_items.clear()

        assert len(generator.knowledge_items) == 6

    def test_inactive_items_ignored(self, security_analysis, knowledge_items):
        """Test inactive items never back a section."""
        generator = ProposalGenerator(knowledge_items)
        section = security_analysis.sections[0]

        titles = [k.title for k in generator.find_section_knowledge(section)]
        assert "Archived Price List" not in titles

    def test_fallback_answer(self, question_factory):
        """Test questions without knowledge get boilerplate."""
        generator = ProposalGenerator([])
        question = question_factory(
            "How do you handle security incidents?",
            question_type=QuestionType.TECHNICAL,
            keywords=["security"],
        )

        answer = generator.answer_question(question, [])
        assert answer.startswith("Our technical team brings extensive experience")

    def test_answer_prefers_matching_type(self, question_factory, knowledge_items):
        """Test commercial answers quote pricing knowledge first."""
        generator = ProposalGenerator(knowledge_items)
        question = question_factory(
            "What is your total cost?",
            question_type=QuestionType.COMMERCIAL,
            keywords=["cost"],
        )

        answer = generator.answer_question(question, knowledge_items)
        assert "Fixed price and time-and-materials options" in answer

    def test_confidence_saturates(self, question_factory):
        """Test confidence grows per backing item and caps at 1."""
        items = [
            KnowledgeBaseItem(
                title=f"Control {i}",
                type=KnowledgeItemType.PROCESS,
                content="security policy",
            )
            for i in range(5)
        ]
        generator = ProposalGenerator(items)
        question = question_factory("How is security handled?", keywords=["security"])

        assert generator.calculate_section_confidence([question], items[:2]) == pytest.approx(0.6)
        assert generator.calculate_section_confidence([question], items) == 1.0

    def test_confidence_without_questions(self):
        """Test an empty question list has zero confidence."""
        assert ProposalGenerator([]).calculate_section_confidence([], []) == 0.0

    def test_question_knowledge_capped(self, question_factory):
        """Test at most three items back a single question."""
        items = [
            KnowledgeBaseItem(title=f"Doc {i}", type=KnowledgeItemType.FAQ, content="security")
            for i in range(5)
        ]
        question = question_factory("How is security handled?", keywords=["security"])

        assert len(ProposalGenerator.find_question_knowledge(question, items)) == 3


class TestTechnologyGroups:
    """Tests for technical question grouping."""

    def test_groups(self, question_factory):
        """Test questions land in the first matching group."""
        questions = [
            question_factory("Which design patterns do you apply?"),
            question_factory("How do you protect the audit trail?"),
            question_factory("What load can the platform sustain?"),
            question_factory("Which hosting region do you use?"),
        ]
        groups = group_questions_by_technology(questions)

        assert list(groups) == [
            "Architecture & Design",
            "Security & Compliance",
            "Performance & Scalability",
            "General Technical",
        ]
        assert groups["General Technical"][0].question == "Which hosting region do you use?"
