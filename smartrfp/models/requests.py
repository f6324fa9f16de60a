"""Request models for the SmartRFP API."""

from pydantic import BaseModel, Field

from smartrfp.models.analysis import RFPAnalysis
from smartrfp.models.knowledge import KnowledgeBaseItem


class AnalyzeTextRequest(BaseModel):
    """Request to analyze pasted RFP text."""

    text: str = Field(..., description="Raw RFP text")
    page_count: int | None = Field(
        default=None,
        ge=0,
        description="Known page count, when the text came from a paginated document",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "text": "1. Do you support GDPR compliance?\n2. What is your total cost?",
                    "page_count": 1,
                },
            ]
        }
    }


class GenerateProposalRequest(BaseModel):
    """Request to assemble a proposal draft from an analysis."""

    analysis: RFPAnalysis = Field(..., description="Output of the analyze endpoint")
    knowledge_items: list[KnowledgeBaseItem] = Field(default_factory=list)
    project_title: str = Field(..., min_length=1, max_length=300)
    client_name: str = Field(..., min_length=1, max_length=300)
    additional_context: str | None = Field(
        default=None,
        max_length=5000,
        description="Client priorities or notes to mention in the executive summary",
    )


class KnowledgeSearchRequest(BaseModel):
    """Request to search a knowledge item collection."""

    query: str = Field(..., min_length=1, max_length=200)
    items: list[KnowledgeBaseItem] = Field(default_factory=list)
