"""RFP analyzer: raw document text in, structured analysis out."""

import math
from collections import Counter
from typing import Any

from smartrfp.analysis.extractors import extract_requirement_lists
from smartrfp.analysis.questions import QuestionExtractor
from smartrfp.analysis.rules import CHARS_PER_PAGE
from smartrfp.analysis.sections import SectionExtractor
from smartrfp.analysis.text import normalize_text
from smartrfp.models.analysis import Priority, QuestionType, RFPAnalysis, RFPSection
from smartrfp.utils.logging import LoggerMixin


class RFPAnalyzer(LoggerMixin):
    """Heuristic extractor of sections, questions and requirements.

    The analyzer holds no state between calls; one instance can be shared
    across threads.
    """

    def __init__(self) -> None:
        self._sections = SectionExtractor()
        self._questions = QuestionExtractor()

    def analyze(self, text: str, metadata: dict[str, Any] | None = None) -> RFPAnalysis:
        """Analyze RFP text.

        Args:
            text: Raw document text, pasted or extracted from a PDF.
            metadata: Optional extraction metadata; ``page_count`` (or
                ``pageCount``) overrides the page estimate.

        Returns:
            The complete analysis.

        Raises:
            TypeError: If ``text`` is not a string.
        """
        if not isinstance(text, str):
            raise TypeError(f"RFP text must be a string, got {type(text).__name__}")

        clean_text = normalize_text(text)

        sections = self._sections.extract(clean_text)
        for section in sections:
            section.questions = self._questions.extract(section.content, section.title, section.id)

        lists = extract_requirement_lists(clean_text)

        analysis = RFPAnalysis(
            total_pages=self._page_count(text, metadata),
            sections=sections,
            **lists,
        )
        analysis.summary = self.generate_summary(
            sections, analysis.key_requirements, analysis.technical_requirements
        )

        self.log_info(
            "RFP analysis complete",
            sections=len(sections),
            questions=analysis.total_questions,
            key_requirements=len(analysis.key_requirements),
        )
        return analysis

    @staticmethod
    def _page_count(text: str, metadata: dict[str, Any] | None) -> int:
        if metadata:
            page_count = metadata.get("page_count", metadata.get("pageCount"))
            if page_count:
                return int(page_count)
        return math.ceil(len(text) / CHARS_PER_PAGE)

    @staticmethod
    def generate_summary(
        sections: list[RFPSection],
        key_requirements: list[str],
        technical_requirements: list[str],
    ) -> str:
        """Render the fixed summary template from aggregate counts."""
        questions = [q for section in sections for q in section.questions]
        high_priority = sum(1 for q in questions if q.priority == Priority.HIGH)
        by_type = Counter(q.type for q in questions)

        breakdown = "\n".join(
            f"- {question_type.value.capitalize()}: {by_type[question_type]} questions"
            for question_type in QuestionType
        )

        return (
            f"This RFP contains {len(sections)} main sections with {len(questions)} "
            f"identified questions and requirements.\n"
            f"{high_priority} questions are marked as high priority and require immediate attention.\n"
            f"\n"
            f"Question breakdown:\n"
            f"{breakdown}\n"
            f"\n"
            f"Key areas identified: {len(key_requirements)} key requirements, "
            f"{len(technical_requirements)} technical specifications.\n"
            f"\n"
            f"This comprehensive analysis ensures all RFP requirements are captured and "
            f"addressed in your proposal response."
        )


def analyze_rfp(text: str, metadata: dict[str, Any] | None = None) -> RFPAnalysis:
    """Analyze RFP text with a fresh analyzer."""
    return RFPAnalyzer().analyze(text, metadata)
