"""Base document loader abstract class."""

from abc import ABC, abstractmethod
from pathlib import Path

from smartrfp.models.documents import DocumentMetadata, ParsedDocument
from smartrfp.utils.logging import LoggerMixin


class BaseDocumentLoader(ABC, LoggerMixin):
    """Abstract base class for document loaders.

    A loader reads either a file on disk or an in-memory upload.
    """

    # Lowercase file suffixes handled by the loader
    supported_extensions: tuple[str, ...] = ()

    def __init__(
        self,
        file_path: Path | str | None = None,
        data: bytes | None = None,
        filename: str | None = None,
    ):
        """Initialize the loader.

        Args:
            file_path: Path to the document file.
            data: Raw document bytes, e.g. from an HTTP upload.
            filename: Display name used for logs and results.

        Raises:
            ValueError: If neither or both of ``file_path`` and ``data`` are given.
        """
        if (file_path is None) == (data is None):
            raise ValueError("Provide exactly one of file_path or data")

        self.file_path = Path(file_path) if file_path is not None else None
        self.data = data
        self.filename = filename or (self.file_path.name if self.file_path else None)

        if self.file_path is not None:
            self._validate_file()

    def _validate_file(self) -> None:
        """Validate that the file exists and is readable."""
        if not self.file_path.exists():
            raise FileNotFoundError(f"File not found: {self.file_path}")
        if not self.file_path.is_file():
            raise ValueError(f"Path is not a file: {self.file_path}")

    @abstractmethod
    def load(self) -> ParsedDocument:
        """Extract the document's text and metadata.

        Returns:
            ParsedDocument: Plain text, page count and metadata.
        """

    @abstractmethod
    def extract_metadata(self) -> DocumentMetadata:
        """Extract metadata embedded in the document."""

    @classmethod
    def supports(cls, path: Path | str) -> bool:
        """Whether the file suffix is one this loader reads."""
        return Path(path).suffix.lower() in cls.supported_extensions
