"""Knowledge base models consumed by the proposal generator."""

from enum import Enum

from pydantic import BaseModel, Field


class KnowledgeItemType(str, Enum):
    """Kinds of company knowledge that can back a proposal."""

    COMPANY_INFO = "company-info"
    CASE_STUDY = "case-study"
    TECHNICAL_SPEC = "technical-spec"
    PRICING = "pricing"
    TEAM_PROFILE = "team-profile"
    PROCESS = "process"
    FAQ = "faq"


class KnowledgeBaseItem(BaseModel):
    """A reusable piece of company content."""

    id: str | None = Field(default=None)
    title: str = Field(..., description="Item title")
    category: str = Field(default="", description="Free-form category label")
    type: KnowledgeItemType = Field(..., description="Kind of content")
    content: str = Field(default="")
    tags: list[str] = Field(default_factory=list)
    is_active: bool = Field(default=True, description="Inactive items are ignored")
    usage_count: int = Field(default=0, ge=0)

    model_config = {"frozen": False}

    @property
    def searchable_text(self) -> str:
        """Lowercased title, content and tags joined for substring matching."""
        return f"{self.title} {self.content} {' '.join(self.tags)}".lower()


class KnowledgeBase(BaseModel):
    """A named collection of knowledge base items."""

    id: str = Field(default="default")
    name: str = Field(default="Default Knowledge Base")
    description: str = Field(default="")
    items: list[KnowledgeBaseItem] = Field(default_factory=list)
    is_default: bool = Field(default=False)

    def active_items(self) -> list[KnowledgeBaseItem]:
        """Items that may be used for proposals."""
        return [item for item in self.items if item.is_active]

    def search(self, query: str) -> list[KnowledgeBaseItem]:
        """Find active items whose title, content or tags contain the query.

        Args:
            query: Case-insensitive search text.

        Returns:
            Matching items, most used first.
        """
        needle = query.lower().strip()
        if not needle:
            return []

        matches = [
            item
            for item in self.active_items()
            if needle in item.title.lower()
            or needle in item.content.lower()
            or any(needle in tag.lower() for tag in item.tags)
        ]
        return sorted(matches, key=lambda item: item.usage_count, reverse=True)
