"""Document-related Pydantic models."""

from datetime import datetime

from pydantic import BaseModel, Field


class DocumentMetadata(BaseModel):
    """Metadata reported by the PDF itself."""

    title: str | None = Field(default=None)
    author: str | None = Field(default=None)
    subject: str | None = Field(default=None)
    creator: str | None = Field(default=None)
    producer: str | None = Field(default=None)
    creation_date: datetime | None = Field(default=None)
    modification_date: datetime | None = Field(default=None)

    model_config = {"frozen": False}


class ParsedDocument(BaseModel):
    """Plain text extracted from an uploaded RFP document."""

    text: str = Field(default="", description="Extracted text, pages separated by blank lines")
    page_count: int = Field(default=0, ge=0, description="Total number of pages")
    source_file: str | None = Field(default=None, description="Original file name")
    metadata: DocumentMetadata | None = Field(default=None)

    model_config = {"frozen": False}

    @property
    def is_empty(self) -> bool:
        """Whether no text could be extracted."""
        return not self.text.strip()
