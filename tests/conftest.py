"""Pytest configuration and fixtures."""

import os

import pytest
from structlog.testing import capture_logs

# Set test environment variables before importing modules
os.environ["ENVIRONMENT"] = "test"

from smartrfp.models.analysis import (  # noqa: E402
    Priority,
    QuestionType,
    RFPAnalysis,
    RFPQuestion,
    RFPSection,
)
from smartrfp.models.knowledge import KnowledgeBaseItem, KnowledgeItemType  # noqa: E402


@pytest.fixture(autouse=True)
def captured_logs():
    """Keep structured log output out of stdout and expose it to tests."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def sample_rfp_text() -> str:
    """Sample RFP document text with three numbered sections."""
    return (
        "Request for Proposal: Cloud Platform Modernization\n"
        "Acme Corp invites proposals from qualified vendors.\n"
        "Responses are due no later than 15 March 2025.\n"
        "1. Technical Requirements\n"
        "What database platform do you recommend for the migration?\n"
        "The vendor must provide a detailed security architecture.\n"
        "2. Commercial Terms\n"
        "What is your total cost and payment schedule?\n"
        "Proposals must include a fixed price quote.\n"
        "3. Vendor Experience\n"
        "Describe three client references from similar projects?"
    )


@pytest.fixture
def gdpr_rfp_text() -> str:
    """Two numbered questions and no section headers."""
    return "1. Do you support GDPR compliance?\n2. What is your total cost?"


@pytest.fixture
def knowledge_items() -> list[KnowledgeBaseItem]:
    """A small knowledge base covering every required item type."""
    return [
        KnowledgeBaseItem(
            id="kb-1",
            title="Company Overview",
            category="Company",
            type=KnowledgeItemType.COMPANY_INFO,
            content="Acme Digital has delivered cloud platform projects for fifteen years.",
            tags=["company", "overview"],
        ),
        KnowledgeBaseItem(
            id="kb-2",
            title="Cloud Architecture",
            category="Technical",
            type=KnowledgeItemType.TECHNICAL_SPEC,
            content=(
                "We design cloud architecture on managed database services "
                "with strong security controls."
            ),
            tags=["technical", "architecture", "cloud"],
            usage_count=5,
        ),
        KnowledgeBaseItem(
            id="kb-3",
            title="Pricing Model",
            category="Commercial",
            type=KnowledgeItemType.PRICING,
            content="Fixed price and time-and-materials options with a clear cost breakdown.",
            tags=["pricing"],
            usage_count=2,
        ),
        KnowledgeBaseItem(
            id="kb-4",
            title="Retail Migration Case Study",
            category="Experience",
            type=KnowledgeItemType.CASE_STUDY,
            content="Migrated a retail client platform to the cloud in six months.",
            tags=["client", "project"],
        ),
        KnowledgeBaseItem(
            id="kb-5",
            title="Delivery Team",
            category="Team",
            type=KnowledgeItemType.TEAM_PROFILE,
            content="Our delivery team includes certified cloud engineers.",
            tags=["team"],
        ),
        KnowledgeBaseItem(
            id="kb-6",
            title="Archived Price List",
            category="Commercial",
            type=KnowledgeItemType.PRICING,
            content="Old cloud price list.",
            tags=["pricing"],
            is_active=False,
            usage_count=9,
        ),
    ]


def make_question(
    text: str,
    question_type: QuestionType = QuestionType.GENERAL,
    priority: Priority = Priority.LOW,
    keywords: list[str] | None = None,
    question_id: str = "section-1-q1",
    section: str = "Scope",
) -> RFPQuestion:
    """Build a question without running the analyzer."""
    return RFPQuestion(
        id=question_id,
        section=section,
        question=text,
        type=question_type,
        priority=priority,
        keywords=keywords or [],
    )


@pytest.fixture
def question_factory():
    """Factory for hand-built questions."""
    return make_question


@pytest.fixture
def security_analysis() -> RFPAnalysis:
    """Hand-built analysis with one technical question about security."""
    question = make_question(
        "How do you handle security incidents?",
        question_type=QuestionType.TECHNICAL,
        priority=Priority.HIGH,
        keywords=["security"],
    )
    section = RFPSection(id="section-1", title="Security", content="", questions=[question])
    return RFPAnalysis(total_pages=1, sections=[section], summary="One security question.")
