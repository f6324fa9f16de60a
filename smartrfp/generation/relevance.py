"""Keyword relevance scoring between knowledge items and RFP content."""

import re
from collections.abc import Iterable, Sequence

from smartrfp.models.knowledge import KnowledgeBaseItem

# Scoring weights
TITLE_MATCH_BONUS = 2.0
TAG_MATCH_BONUS = 1.5

# Items at or below this score are not considered relevant
RELEVANCE_THRESHOLD = 0.1
MAX_SECTION_KNOWLEDGE = 5
MAX_QUESTION_KNOWLEDGE = 3

# Confidence added per backing item, capped at 1.0
CONFIDENCE_PER_ITEM = 0.3

MIN_KEYWORD_LENGTH = 4

STOP_WORDS = frozenset(
    {
        "this", "that", "with", "from", "they", "been", "have", "were", "said",
        "each", "which", "their", "time", "will", "about", "would", "there",
        "could", "other",
    }
)

_NON_WORD = re.compile(r"[^\w\s]")


def calculate_relevance(item: KnowledgeBaseItem, keywords: Sequence[str]) -> float:
    """Score how well a knowledge item matches a keyword list.

    Each keyword found anywhere in the item's title, content or tags adds 1;
    a keyword inside the title adds ``TITLE_MATCH_BONUS`` and a keyword
    inside any tag adds ``TAG_MATCH_BONUS``. The sum is divided by the
    number of keywords.

    Args:
        item: Knowledge item to score.
        keywords: Keywords to look for, matched case-insensitively.

    Returns:
        Average weighted hit count per keyword.
    """
    item_text = item.searchable_text
    title = item.title.lower()
    tags = [tag.lower() for tag in item.tags]

    score = 0.0
    for keyword in keywords:
        needle = keyword.lower()
        if needle in item_text:
            score += 1
        if needle in title:
            score += TITLE_MATCH_BONUS
        if any(needle in tag for tag in tags):
            score += TAG_MATCH_BONUS

    return score / max(len(keywords), 1)


def extract_text_keywords(text: str) -> list[str]:
    """Split free text into distinct lowercase keywords.

    Punctuation is dropped, and so are words shorter than four characters
    and common stop words.
    """
    words = _NON_WORD.sub(" ", text.lower()).split()
    found: dict[str, None] = {}
    for word in words:
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS:
            found.setdefault(word)
    return list(found)


def rank_knowledge(
    items: Iterable[KnowledgeBaseItem],
    keywords: Sequence[str],
    threshold: float = RELEVANCE_THRESHOLD,
    limit: int | None = None,
) -> list[KnowledgeBaseItem]:
    """Order items by relevance, keeping those scoring above ``threshold``.

    Ties keep their input order.
    """
    scored = [(item, calculate_relevance(item, keywords)) for item in items]
    relevant = [pair for pair in scored if pair[1] > threshold]
    relevant.sort(key=lambda pair: pair[1], reverse=True)
    ranked = [item for item, _ in relevant]
    return ranked if limit is None else ranked[:limit]


def find_first_match(
    items: Iterable[KnowledgeBaseItem], keywords: Sequence[str]
) -> KnowledgeBaseItem | None:
    """First active item mentioning any keyword in its title, tags or content."""
    for item in items:
        if not item.is_active:
            continue
        title = item.title.lower()
        content = item.content.lower()
        tags = [tag.lower() for tag in item.tags]
        for keyword in keywords:
            if keyword in title or keyword in content or any(keyword in tag for tag in tags):
                return item
    return None
