"""Data models for SmartRFP."""

from smartrfp.models.analysis import (
    Priority,
    QuestionType,
    RFPAnalysis,
    RFPQuestion,
    RFPSection,
)
from smartrfp.models.documents import DocumentMetadata, ParsedDocument
from smartrfp.models.knowledge import KnowledgeBase, KnowledgeBaseItem, KnowledgeItemType
from smartrfp.models.proposal import GeneratedProposal, ProposalSection
from smartrfp.models.requests import (
    AnalyzeTextRequest,
    GenerateProposalRequest,
    KnowledgeSearchRequest,
)

__all__ = [
    "Priority",
    "QuestionType",
    "RFPAnalysis",
    "RFPQuestion",
    "RFPSection",
    "DocumentMetadata",
    "ParsedDocument",
    "KnowledgeBase",
    "KnowledgeBaseItem",
    "KnowledgeItemType",
    "GeneratedProposal",
    "ProposalSection",
    "AnalyzeTextRequest",
    "GenerateProposalRequest",
    "KnowledgeSearchRequest",
]
