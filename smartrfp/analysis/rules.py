"""Rule tables used by the RFP analyzer.

Every heuristic the analyzer applies lives here as a named constant so each
rule can be tested on its own and the classification order stays explicit.
"""

import re
from dataclasses import dataclass

from smartrfp.models.analysis import QuestionType

# Question candidates outside this band (after trimming) are discarded
MIN_QUESTION_LENGTH = 10
MAX_QUESTION_LENGTH = 500

# Page estimates
LINES_PER_PAGE = 50
CHARS_PER_PAGE = 2000

# Section header lines longer than this are treated as body text
MAX_HEADER_LENGTH = 100

GENERAL_SECTION_TITLE = "General Information"
FALLBACK_SECTION_TITLE = "Complete RFP Document"


# Applied in order; group 1 of each match is the candidate question text
QUESTION_PATTERNS: list[re.Pattern[str]] = [
    # Lines ending in a question mark, optionally numbered
    re.compile(r"(?:^|\n)\s*(?:\d+\.?\s*)?(.{0,200}?\?)", re.MULTILINE),
    re.compile(
        r"\bplease\s+(?:provide|describe|explain|detail|list|specify|include)\s+(.{0,300}?)(?:\.|$)",
        re.IGNORECASE,
    ),
    re.compile(r"\bwe\s+(?:require|need|request|expect)\s+(.{0,300}?)(?:\.|$)", re.IGNORECASE),
    re.compile(
        r"\b(?:must|shall|should)\s+(?:provide|include|demonstrate|show)\s+(.{0,300}?)(?:\.|$)",
        re.IGNORECASE,
    ),
    re.compile(r"\bvendor\s+(?:must|shall|should|will)\s+(.{0,300}?)(?:\.|$)", re.IGNORECASE),
    re.compile(
        r"\bproposal\s+(?:must|shall|should)\s+(?:include|contain|address)\s+(.{0,300}?)(?:\.|$)",
        re.IGNORECASE,
    ),
    re.compile(
        r"\bresponse\s+(?:must|shall|should)\s+(?:include|contain|address)\s+(.{0,300}?)(?:\.|$)",
        re.IGNORECASE,
    ),
    re.compile(r"\bbidder\s+(?:must|shall|should|will)\s+(.{0,300}?)(?:\.|$)", re.IGNORECASE),
    re.compile(r"\bcontractor\s+(?:must|shall|should|will)\s+(.{0,300}?)(?:\.|$)", re.IGNORECASE),
    re.compile(r"\bsupplier\s+(?:must|shall|should|will)\s+(.{0,300}?)(?:\.|$)", re.IGNORECASE),
]

# "12. What is ...?" -- the numbering is left out of the captured text
NUMBERED_QUESTION_PATTERN = re.compile(r"(?:^|\n)\s*\d+\.?\s+(.{10,500}?\?)", re.MULTILINE)


# Header shapes, matched against a single stripped line
EXPLICIT_SECTION_PATTERN = re.compile(
    r"^(?:\d+\.?\s*)?(?i:section|part|chapter)\s+(?:\d+(?:\.\d+)*|[IVXLC]+|[A-Z])\b[.:)\-]?\s*.{0,100}$"
)
NUMBERED_SECTION_PATTERN = re.compile(r"^\d+\.?\s+[A-Z][^.\n]{5,80}$")
LETTERED_SECTION_PATTERN = re.compile(r"^[A-Z]\.?\s+[A-Z][^.\n]{5,80}$")

SECTION_HEADER_PATTERNS: list[re.Pattern[str]] = [
    EXPLICIT_SECTION_PATTERN,
    NUMBERED_SECTION_PATTERN,
    LETTERED_SECTION_PATTERN,
]

CANONICAL_SECTION_NAMES: tuple[str, ...] = (
    "executive summary",
    "scope of work",
    "technical requirements",
    "commercial terms",
    "evaluation criteria",
    "submission requirements",
    "project overview",
    "timeline",
    "deliverables",
    "pricing",
    "terms and conditions",
    "compliance",
    "experience",
    "qualifications",
    "proposal format",
    "contract terms",
    "service level agreement",
)


# Insertion order is the classification priority
KEYWORD_CATEGORIES: dict[QuestionType, tuple[str, ...]] = {
    QuestionType.TECHNICAL: (
        "technology", "architecture", "platform", "framework", "database", "api",
        "integration", "security", "performance", "scalability", "cloud",
        "infrastructure", "development", "programming", "software", "system",
        "application", "solution", "technical", "specification",
    ),
    QuestionType.COMMERCIAL: (
        "price", "cost", "budget", "payment", "commercial", "financial", "pricing",
        "rate", "fee", "invoice", "billing", "contract", "terms", "conditions",
        "warranty",
    ),
    QuestionType.COMPLIANCE: (
        "compliance", "regulation", "standard", "certification", "audit", "policy",
        "procedure", "requirement", "mandatory", "must", "shall", "legal",
        "regulatory", "gdpr", "iso",
    ),
    QuestionType.EXPERIENCE: (
        "experience", "portfolio", "case study", "reference", "client", "project",
        "track record", "qualification", "expertise", "capability", "team",
        "resource", "skill", "background",
    ),
}

HIGH_PRIORITY_TERMS: tuple[str, ...] = (
    "must", "shall", "required", "mandatory", "critical", "essential", "key",
)
MEDIUM_PRIORITY_TERMS: tuple[str, ...] = (
    "should", "preferred", "desired", "important", "significant",
)

ATTENTION_TERMS: tuple[str, ...] = (
    "compliance", "regulation", "legal", "audit", "certification", "security",
    "gdpr", "privacy", "data protection", "iso", "soc", "hipaa",
)


@dataclass(frozen=True)
class ExtractionRule:
    """Whole-document regexes feeding one flat requirement list.

    Matches are kept only when their trimmed length lies strictly between
    ``min_length`` and ``max_length``.
    """

    patterns: tuple[re.Pattern[str], ...]
    min_length: int
    max_length: int


_DATE = r"(?:\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4}|\d{1,2}\s+\w+\s+\d{2,4})"


def _rule(min_length: int, max_length: int, *patterns: str) -> ExtractionRule:
    return ExtractionRule(
        patterns=tuple(re.compile(p, re.IGNORECASE) for p in patterns),
        min_length=min_length,
        max_length=max_length,
    )


LIST_EXTRACTION_RULES: dict[str, ExtractionRule] = {
    "key_requirements": _rule(
        20, 300,
        r"\b(?:key|main|primary)\s+requirements?[\s\S]{0,500}?(?:\n\n|\.\s)",
        r"\bmust\s+(?:have|include|provide|support)[\s\S]{0,200}?(?:\.|$)",
        r"\bshall\s+(?:have|include|provide|support)[\s\S]{0,200}?(?:\.|$)",
    ),
    "technical_requirements": _rule(
        20, 300,
        r"\btechnical\s+(?:requirements?|specifications?)[\s\S]{0,500}?(?:\n\n|\.\s)",
        r"\bsystem\s+(?:requirements?|specifications?)[\s\S]{0,500}?(?:\n\n|\.\s)",
        r"\b(?:platform|technology|framework|database|api|integration)[\s\S]{0,200}?(?:\.|$)",
    ),
    "commercial_terms": _rule(
        20, 300,
        r"\b(?:commercial\s+terms|pricing|payment\s+terms|contract\s+terms)[\s\S]{0,500}?(?:\n\n|\.\s)",
        r"\b(?:price|cost|budget|fee|rate)[\s\S]{0,200}?(?:\.|$)",
    ),
    "compliance_items": _rule(
        20, 300,
        r"\b(?:compliance|regulatory|certification|audit|standard)[\s\S]{0,200}?(?:\.|$)",
        r"\b(?:gdpr|iso|soc|hipaa|pci|sox)[\s\S]{0,200}?(?:\.|$)",
    ),
    "deadlines": _rule(
        10, 200,
        r"\b(?:deadline|due\s+date|submission\s+date|closing\s+date)[\s\S]{0,100}?" + _DATE,
        r"\b(?:by|before|no\s+later\s+than)[\s\S]{0,50}?" + _DATE,
    ),
    "evaluation_criteria": _rule(
        20, 400,
        r"\b(?:evaluation\s+criteria|selection\s+criteria|scoring|weighting)[\s\S]{0,500}?(?:\n\n|\.\s)",
        r"\b(?:will\s+be\s+evaluated|assessment\s+based\s+on)[\s\S]{0,300}?(?:\.|$)",
    ),
    "submission_requirements": _rule(
        20, 400,
        r"\b(?:submission\s+requirements?|proposal\s+format|document\s+requirements?)[\s\S]{0,500}?(?:\n\n|\.\s)",
        r"\b(?:proposals?\s+must\s+include|responses?\s+must\s+contain)[\s\S]{0,300}?(?:\.|$)",
    ),
}
