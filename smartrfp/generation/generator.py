"""Proposal generator: RFP analysis plus knowledge base in, proposal draft out."""

from collections.abc import Iterable

from smartrfp.generation.advisories import generate_recommendations, identify_missing_information
from smartrfp.generation.relevance import (
    CONFIDENCE_PER_ITEM,
    MAX_QUESTION_KNOWLEDGE,
    MAX_SECTION_KNOWLEDGE,
    extract_text_keywords,
    find_first_match,
    rank_knowledge,
)
from smartrfp.generation.templates import (
    ANSWER_TEMPLATES,
    CAPABILITY_EXCERPT_CHARS,
    CASE_STUDY_EXCERPT_CHARS,
    RISK_SECTION,
    TIMELINE_SECTION,
    excerpt,
    executive_summary,
    team_section,
)
from smartrfp.models.analysis import Priority, QuestionType, RFPAnalysis, RFPQuestion, RFPSection
from smartrfp.models.knowledge import KnowledgeBaseItem, KnowledgeItemType
from smartrfp.models.proposal import GeneratedProposal, ProposalSection
from smartrfp.utils.logging import LoggerMixin

COMPANY_OVERVIEW_KEYWORDS = ("company", "overview", "capabilities")
TEAM_KEYWORDS = ("team", "resource", "expertise")

TECHNICAL_TAGS = frozenset({"technical", "technology", "architecture", "development"})
PRICING_TAG = "pricing"

# Checked in order; the last group catches everything else
TECHNOLOGY_GROUPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Architecture & Design", ("architecture", "design", "pattern")),
    ("Development & Implementation", ("development", "implementation", "coding")),
    ("Security & Compliance", ("security", "compliance", "audit")),
    ("Performance & Scalability", ("performance", "scalability", "load")),
    ("Integration & APIs", ("integration", "api", "interface")),
    ("General Technical", ()),
)

TIMELINE_CONFIDENCE = 0.8
TEAM_CONFIDENCE = 0.9
RISK_CONFIDENCE = 0.7


def group_questions_by_technology(questions: list[RFPQuestion]) -> dict[str, list[RFPQuestion]]:
    """Bucket technical questions into named groups, omitting empty ones."""
    groups: dict[str, list[RFPQuestion]] = {name: [] for name, _ in TECHNOLOGY_GROUPS}
    for question in questions:
        lower_text = question.question.lower()
        for name, terms in TECHNOLOGY_GROUPS:
            if not terms or any(term in lower_text for term in terms):
                groups[name].append(question)
                break
    return {name: members for name, members in groups.items() if members}


class ProposalGenerator(LoggerMixin):
    """Assembles proposal drafts from an RFP analysis.

    The knowledge base is captured when the generator is created and is
    never modified.
    """

    def __init__(self, knowledge_items: Iterable[KnowledgeBaseItem]):
        """Initialize the generator.

        Args:
            knowledge_items: Knowledge base items; inactive ones are ignored
                for matching.
        """
        self._knowledge = tuple(knowledge_items)
        self._active = tuple(item for item in self._knowledge if item.is_active)

    @property
    def knowledge_items(self) -> tuple[KnowledgeBaseItem, ...]:
        """Every knowledge item the generator was given."""
        return self._knowledge

    def generate(
        self,
        analysis: RFPAnalysis,
        project_title: str,
        client_name: str,
        additional_context: str | None = None,
    ) -> GeneratedProposal:
        """Generate a proposal draft.

        Args:
            analysis: Output of the RFP analyzer.
            project_title: Title of the proposal.
            client_name: Issuing organization.
            additional_context: Client priorities to mention in the summary.

        Returns:
            The proposal, including coverage metrics and advisories.
        """
        summary = executive_summary(
            project_title=project_title,
            client_name=client_name,
            total_questions=analysis.total_questions,
            section_count=len(analysis.sections),
            analysis_summary=analysis.summary,
            company_info=find_first_match(self._active, COMPANY_OVERVIEW_KEYWORDS),
            key_requirements=analysis.key_requirements[:3],
            additional_context=additional_context,
        )

        sections = [
            self._generate_section(rfp_section, number)
            for number, rfp_section in enumerate(analysis.sections, start=1)
            if rfp_section.questions
        ]
        sections.extend(self._standard_sections())

        proposal = GeneratedProposal(
            title=project_title,
            executive_summary=summary,
            sections=sections,
            total_questions=analysis.total_questions,
            recommendations=generate_recommendations(analysis, sections),
            missing_information=identify_missing_information(analysis, sections, self._knowledge),
        )

        self.log_info(
            "Proposal generated",
            sections=len(sections),
            questions_addressed=proposal.questions_addressed,
            total_questions=proposal.total_questions,
            coverage=round(proposal.coverage_percentage, 1),
        )
        return proposal

    def _generate_section(self, rfp_section: RFPSection, number: int) -> ProposalSection:
        knowledge = self.find_section_knowledge(rfp_section)
        questions = rfp_section.questions
        high_priority = [q for q in questions if q.priority == Priority.HIGH]
        technical = [q for q in questions if q.type == QuestionType.TECHNICAL]
        commercial = [q for q in questions if q.type == QuestionType.COMMERCIAL]
        other = [
            q for q in questions if q.type not in (QuestionType.TECHNICAL, QuestionType.COMMERCIAL)
        ]

        content = f"# {number}. {rfp_section.title}\n\n"
        content += "## Overview\n"
        content += (
            f"This section addresses {len(questions)} specific requirements from your RFP, "
            f"including {len(high_priority)} high-priority items.\n\n"
        )

        if technical:
            content += "## Technical Approach\n"
            content += self._technical_responses(technical, knowledge)
            content += "\n\n"

        if commercial:
            content += "## Commercial Considerations\n"
            content += self._commercial_responses(commercial, knowledge)
            content += "\n\n"

        if other:
            content += "## Additional Requirements\n"
            content += self._numbered_responses(other, knowledge)
            content += "\n\n"

        case_studies = [k for k in knowledge if k.type == KnowledgeItemType.CASE_STUDY]
        if case_studies:
            content += "## Relevant Experience\n"
            content += excerpt(case_studies[0].content, CASE_STUDY_EXCERPT_CHARS) + "\n\n"

        return ProposalSection(
            id=f"section-{number}",
            title=rfp_section.title,
            content=content,
            rfp_questions=[q.question for q in questions],
            knowledge_used=[k.title for k in knowledge],
            confidence=self.calculate_section_confidence(questions, knowledge),
        )

    def find_section_knowledge(self, rfp_section: RFPSection) -> list[KnowledgeBaseItem]:
        """Active items relevant to a section's title and question keywords."""
        keywords: dict[str, None] = dict.fromkeys(extract_text_keywords(rfp_section.title))
        for question in rfp_section.questions:
            keywords.update(dict.fromkeys(question.keywords))
        return rank_knowledge(self._active, list(keywords), limit=MAX_SECTION_KNOWLEDGE)

    @staticmethod
    def find_question_knowledge(
        question: RFPQuestion,
        knowledge: list[KnowledgeBaseItem],
        limit: int | None = MAX_QUESTION_KNOWLEDGE,
    ) -> list[KnowledgeBaseItem]:
        """Items from ``knowledge`` that back a single question."""
        return rank_knowledge(knowledge, question.keywords, limit=limit)

    def answer_question(self, question: RFPQuestion, knowledge: list[KnowledgeBaseItem]) -> str:
        """Render the answer for one question, falling back to boilerplate."""
        backing = self.find_question_knowledge(question, knowledge)
        template = ANSWER_TEMPLATES.get(question.type, ANSWER_TEMPLATES[QuestionType.GENERAL])
        return template(question, backing)

    def calculate_section_confidence(
        self, questions: list[RFPQuestion], knowledge: list[KnowledgeBaseItem]
    ) -> float:
        """Mean per-question confidence, growing with backing item count."""
        if not questions:
            return 0.0
        total = sum(
            min(len(self.find_question_knowledge(q, knowledge, limit=None)) * CONFIDENCE_PER_ITEM, 1.0)
            for q in questions
        )
        return total / len(questions)

    def _technical_responses(
        self, questions: list[RFPQuestion], knowledge: list[KnowledgeBaseItem]
    ) -> str:
        tech_knowledge = [
            k
            for k in knowledge
            if k.type == KnowledgeItemType.TECHNICAL_SPEC
            or any(tag.lower() in TECHNICAL_TAGS for tag in k.tags)
        ]

        response = ""
        for area, area_questions in group_questions_by_technology(questions).items():
            response += f"### {area}\n"
            response += self._numbered_responses(area_questions, tech_knowledge)

        if tech_knowledge:
            response += "### Our Technical Capabilities\n"
            response += excerpt(tech_knowledge[0].content, CAPABILITY_EXCERPT_CHARS) + "\n\n"

        return response

    def _commercial_responses(
        self, questions: list[RFPQuestion], knowledge: list[KnowledgeBaseItem]
    ) -> str:
        pricing_knowledge = [
            k
            for k in knowledge
            if k.type == KnowledgeItemType.PRICING
            or PRICING_TAG in (tag.lower() for tag in k.tags)
        ]

        response = self._numbered_responses(questions, pricing_knowledge)
        if pricing_knowledge:
            response += "### Our Pricing Approach\n"
            response += excerpt(pricing_knowledge[0].content, CAPABILITY_EXCERPT_CHARS) + "\n\n"
        return response

    def _numbered_responses(
        self, questions: list[RFPQuestion], knowledge: list[KnowledgeBaseItem]
    ) -> str:
        response = ""
        for index, question in enumerate(questions, start=1):
            response += f"**{index}. {question.question}**\n\n"
            response += self.answer_question(question, knowledge)
            response += "\n\n"
        return response

    def _standard_sections(self) -> list[ProposalSection]:
        team_knowledge = find_first_match(self._active, TEAM_KEYWORDS)
        return [
            ProposalSection(
                id="timeline",
                title="Project Timeline & Milestones",
                content=TIMELINE_SECTION,
                confidence=TIMELINE_CONFIDENCE,
            ),
            ProposalSection(
                id="team",
                title="Project Team & Resources",
                content=team_section(team_knowledge),
                knowledge_used=[team_knowledge.title] if team_knowledge else [],
                confidence=TEAM_CONFIDENCE,
            ),
            ProposalSection(
                id="risk-management",
                title="Risk Management & Mitigation",
                content=RISK_SECTION,
                confidence=RISK_CONFIDENCE,
            ),
        ]


def generate_proposal_from_rfp(
    analysis: RFPAnalysis,
    knowledge_items: Iterable[KnowledgeBaseItem],
    project_title: str,
    client_name: str,
    additional_context: str | None = None,
) -> GeneratedProposal:
    """Generate a proposal with a generator bound to ``knowledge_items``."""
    generator = ProposalGenerator(knowledge_items)
    return generator.generate(analysis, project_title, client_name, additional_context)
