"""Generated proposal models."""

from pydantic import BaseModel, Field, computed_field


class ProposalSection(BaseModel):
    """One assembled section of a proposal draft."""

    id: str
    title: str
    content: str = Field(default="", description="Markdown-like section body")
    rfp_questions: list[str] = Field(
        default_factory=list,
        description="Texts of the RFP questions this section answers",
    )
    knowledge_used: list[str] = Field(
        default_factory=list,
        description="Titles of knowledge items drawn upon",
    )
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)

    model_config = {"frozen": False}


class GeneratedProposal(BaseModel):
    """A complete proposal draft with coverage metrics."""

    title: str
    executive_summary: str = Field(default="")
    sections: list[ProposalSection] = Field(default_factory=list)
    total_questions: int = Field(default=0, ge=0, description="Copied from the analysis")
    recommendations: list[str] = Field(default_factory=list)
    missing_information: list[str] = Field(default_factory=list)

    model_config = {"frozen": False}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def questions_addressed(self) -> int:
        """Number of RFP questions referenced by the sections."""
        return sum(len(section.rfp_questions) for section in self.sections)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def coverage_percentage(self) -> float:
        """Share of RFP questions addressed, 0 when the RFP had none."""
        if self.total_questions == 0:
            return 0.0
        return self.questions_addressed / self.total_questions * 100

    @property
    def full_text(self) -> str:
        """Executive summary followed by every section body."""
        parts = [self.executive_summary, *(section.content for section in self.sections)]
        return "\n\n".join(parts) + "\n\n"
