"""RFP analysis modules."""

from smartrfp.analysis.analyzer import RFPAnalyzer, analyze_rfp
from smartrfp.analysis.questions import QuestionExtractor
from smartrfp.analysis.sections import SectionExtractor
from smartrfp.analysis.text import normalize_text

__all__ = [
    "RFPAnalyzer",
    "analyze_rfp",
    "QuestionExtractor",
    "SectionExtractor",
    "normalize_text",
]
