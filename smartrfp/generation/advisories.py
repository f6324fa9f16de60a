"""Advisory lists attached to a generated proposal."""

from collections.abc import Sequence

from smartrfp.models.analysis import Priority, QuestionType, RFPAnalysis
from smartrfp.models.knowledge import KnowledgeBaseItem, KnowledgeItemType
from smartrfp.models.proposal import ProposalSection

LOW_CONFIDENCE_THRESHOLD = 0.5
TECHNICAL_DEPTH_THRESHOLD = 10

REQUIRED_KNOWLEDGE_TYPES: tuple[KnowledgeItemType, ...] = (
    KnowledgeItemType.COMPANY_INFO,
    KnowledgeItemType.CASE_STUDY,
    KnowledgeItemType.TECHNICAL_SPEC,
    KnowledgeItemType.PRICING,
)


def generate_recommendations(
    analysis: RFPAnalysis, sections: Sequence[ProposalSection]
) -> list[str]:
    """Suggest where the draft needs more work.

    Args:
        analysis: The analysis the proposal was generated from.
        sections: All generated sections.

    Returns:
        Advisory messages, possibly empty.
    """
    recommendations: list[str] = []

    low_confidence = [s.title for s in sections if s.confidence < LOW_CONFIDENCE_THRESHOLD]
    if low_confidence:
        recommendations.append(
            f"Consider adding more specific information for: {', '.join(low_confidence)}"
        )

    high_priority = analysis.questions_by_priority(Priority.HIGH)
    if high_priority:
        recommendations.append(
            f"Ensure detailed responses to {len(high_priority)} high-priority requirements"
        )

    compliance = analysis.questions_by_type(QuestionType.COMPLIANCE)
    if compliance:
        recommendations.append(
            f"Include compliance documentation and certifications for {len(compliance)} "
            "compliance requirements"
        )

    if len(analysis.questions_by_type(QuestionType.TECHNICAL)) > TECHNICAL_DEPTH_THRESHOLD:
        recommendations.append(
            "Consider adding technical architecture diagrams and detailed specifications"
        )

    if analysis.questions_by_type(QuestionType.COMMERCIAL):
        recommendations.append("Include detailed pricing breakdown and commercial terms")

    return recommendations


def identify_missing_information(
    analysis: RFPAnalysis,
    sections: Sequence[ProposalSection],
    knowledge_items: Sequence[KnowledgeBaseItem],
) -> list[str]:
    """List gaps in coverage and in the knowledge base.

    Unanswered questions are found by exact text membership in the
    sections' ``rfp_questions``; paraphrased answers would not count.
    """
    missing: list[str] = []

    addressed = {text for section in sections for text in section.rfp_questions}
    unanswered = [q for q in analysis.all_questions if q.question not in addressed]
    if unanswered:
        missing.append(f"{len(unanswered)} questions require additional attention")

    available_types = {item.type for item in knowledge_items if item.is_active}
    missing_types = [t.value for t in REQUIRED_KNOWLEDGE_TYPES if t not in available_types]
    if missing_types:
        missing.append(f"Consider adding knowledge base content for: {', '.join(missing_types)}")

    if analysis.technical_requirements and KnowledgeItemType.TECHNICAL_SPEC not in available_types:
        missing.append("Technical specifications and capabilities documentation")

    if analysis.compliance_items:
        missing.append("Compliance certifications and documentation")

    return missing
