"""Analysis result models produced by the RFP analyzer."""

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class QuestionType(str, Enum):
    """Mutually exclusive question classification."""

    TECHNICAL = "technical"
    COMMERCIAL = "commercial"
    COMPLIANCE = "compliance"
    EXPERIENCE = "experience"
    GENERAL = "general"


class Priority(str, Enum):
    """Question priority derived from modal wording."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RFPQuestion(BaseModel):
    """A single question or requirement extracted from an RFP."""

    id: str = Field(..., description="Identifier, unique within one analysis run")
    section: str = Field(..., description="Title of the section the question was found in")
    question: str = Field(..., min_length=10, max_length=500, description="Extracted question text")
    type: QuestionType = Field(default=QuestionType.GENERAL)
    priority: Priority = Field(default=Priority.LOW)
    keywords: list[str] = Field(default_factory=list, description="Matched domain keywords")
    requires_attention: bool = Field(
        default=False,
        description="Compliance, legal or security sensitive",
    )

    model_config = {"frozen": True}


class RFPSection(BaseModel):
    """A contiguous span of the normalized RFP text."""

    id: str
    title: str = Field(..., min_length=1)
    content: str = Field(default="")
    questions: list[RFPQuestion] = Field(default_factory=list)
    page_numbers: list[int] = Field(default_factory=list, description="Approximate pages")

    model_config = {"frozen": False}


class RFPAnalysis(BaseModel):
    """Structured analysis of a whole RFP document."""

    total_pages: int = Field(default=0, ge=0)
    sections: list[RFPSection] = Field(default_factory=list)

    key_requirements: list[str] = Field(default_factory=list)
    technical_requirements: list[str] = Field(default_factory=list)
    commercial_terms: list[str] = Field(default_factory=list)
    compliance_items: list[str] = Field(default_factory=list)
    deadlines: list[str] = Field(default_factory=list)
    evaluation_criteria: list[str] = Field(default_factory=list)
    submission_requirements: list[str] = Field(default_factory=list)

    summary: str = Field(default="")

    model_config = {"frozen": False}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_questions(self) -> int:
        """Number of questions across all sections."""
        return sum(len(section.questions) for section in self.sections)

    @property
    def all_questions(self) -> list[RFPQuestion]:
        """Every question in section order."""
        return [question for section in self.sections for question in section.questions]

    def questions_by_type(self, question_type: QuestionType) -> list[RFPQuestion]:
        """Questions of a single type."""
        return [q for q in self.all_questions if q.type == question_type]

    def questions_by_priority(self, priority: Priority) -> list[RFPQuestion]:
        """Questions of a single priority."""
        return [q for q in self.all_questions if q.priority == priority]
