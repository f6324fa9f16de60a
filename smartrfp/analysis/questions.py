"""Question extraction and classification."""

from smartrfp.analysis.rules import (
    ATTENTION_TERMS,
    HIGH_PRIORITY_TERMS,
    KEYWORD_CATEGORIES,
    MAX_QUESTION_LENGTH,
    MEDIUM_PRIORITY_TERMS,
    MIN_QUESTION_LENGTH,
    NUMBERED_QUESTION_PATTERN,
    QUESTION_PATTERNS,
)
from smartrfp.models.analysis import Priority, QuestionType, RFPQuestion


def categorize_question(text: str) -> QuestionType:
    """Classify a question by the first keyword vocabulary it hits.

    Vocabularies are checked in the order technical, commercial,
    compliance, experience; no hit means general.
    """
    lower_text = text.lower()
    for question_type, vocabulary in KEYWORD_CATEGORIES.items():
        if any(keyword in lower_text for keyword in vocabulary):
            return question_type
    return QuestionType.GENERAL


def assess_priority(text: str) -> Priority:
    """Derive priority from modal wording."""
    lower_text = text.lower()
    if any(term in lower_text for term in HIGH_PRIORITY_TERMS):
        return Priority.HIGH
    if any(term in lower_text for term in MEDIUM_PRIORITY_TERMS):
        return Priority.MEDIUM
    return Priority.LOW


def extract_question_keywords(text: str) -> list[str]:
    """Every vocabulary keyword occurring in ``text``, deduplicated."""
    lower_text = text.lower()
    found: dict[str, None] = {}
    for vocabulary in KEYWORD_CATEGORIES.values():
        for keyword in vocabulary:
            if keyword in lower_text:
                found.setdefault(keyword)
    return list(found)


def requires_attention(text: str) -> bool:
    """Whether the question touches compliance, legal or security topics."""
    lower_text = text.lower()
    return any(term in lower_text for term in ATTENTION_TERMS)


def is_valid_candidate(text: str) -> bool:
    """Length check applied to trimmed candidates."""
    return MIN_QUESTION_LENGTH <= len(text) <= MAX_QUESTION_LENGTH


class QuestionExtractor:
    """Extracts classified questions from a section's content."""

    def extract(self, content: str, section_title: str, section_id: str) -> list[RFPQuestion]:
        """Extract and classify questions from one section.

        Args:
            content: Section body text.
            section_title: Title recorded on each question.
            section_id: Prefix for question ids.

        Returns:
            Questions in order of first occurrence, unique case-insensitively.
        """
        seen: set[str] = set()
        texts: list[str] = []

        for candidate in self._candidates(content):
            key = candidate.lower()
            if key in seen:
                continue
            seen.add(key)
            texts.append(candidate)

        return [
            self.build_question(text, section_title, f"{section_id}-q{index}")
            for index, text in enumerate(texts, start=1)
        ]

    def _candidates(self, content: str):
        for pattern in QUESTION_PATTERNS:
            for match in pattern.finditer(content):
                text = (match.group(1) or "").strip()
                if is_valid_candidate(text):
                    yield text

        for match in NUMBERED_QUESTION_PATTERN.finditer(content):
            text = match.group(1).strip()
            if is_valid_candidate(text):
                yield text

    @staticmethod
    def build_question(text: str, section_title: str, question_id: str) -> RFPQuestion:
        """Classify ``text`` into an immutable question."""
        return RFPQuestion(
            id=question_id,
            section=section_title,
            question=text,
            type=categorize_question(text),
            priority=assess_priority(text),
            keywords=extract_question_keywords(text),
            requires_attention=requires_attention(text),
        )
