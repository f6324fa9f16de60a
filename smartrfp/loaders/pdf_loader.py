"""PDF text extraction using PyMuPDF."""

import re
from datetime import datetime, timedelta, timezone
from pathlib import Path

import fitz  # PyMuPDF

from smartrfp.loaders.base import BaseDocumentLoader
from smartrfp.models.documents import DocumentMetadata, ParsedDocument
from smartrfp.utils.exceptions import DocumentLoadError, InvalidUploadError

PDF_CONTENT_TYPES = frozenset({"application/pdf", "application/x-pdf"})
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024

_WHITESPACE = re.compile(r"\s+")
_PDF_DATE = re.compile(
    r"^D:(?P<year>\d{4})(?P<month>\d{2})?(?P<day>\d{2})?(?P<hour>\d{2})?(?P<minute>\d{2})?"
    r"(?P<second>\d{2})?(?P<tz>[Zz]|[+\-]\d{2}'?\d{2}'?)?"
)


def parse_pdf_date(value: str | None) -> datetime | None:
    """Parse a PDF date string such as ``D:20240131093000+01'00'``."""
    if not value:
        return None
    match = _PDF_DATE.match(value.strip())
    if not match:
        return None

    parts = match.groupdict()
    try:
        moment = datetime(
            int(parts["year"]),
            int(parts["month"] or 1),
            int(parts["day"] or 1),
            int(parts["hour"] or 0),
            int(parts["minute"] or 0),
            int(parts["second"] or 0),
        )
    except ValueError:
        return None

    tz = parts["tz"]
    if tz and tz.upper() == "Z":
        return moment.replace(tzinfo=timezone.utc)
    if tz:
        digits = tz[1:].replace("'", "")
        offset = timedelta(hours=int(digits[:2]), minutes=int(digits[2:4] or 0))
        return moment.replace(tzinfo=timezone(offset if tz[0] == "+" else -offset))
    return moment


def validate_pdf_upload(
    filename: str | None,
    content_type: str | None,
    size: int,
    max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
) -> None:
    """Reject uploads that are not PDFs or are too large.

    Raises:
        InvalidUploadError: If the upload is not acceptable.
    """
    is_pdf_type = content_type in PDF_CONTENT_TYPES
    has_pdf_suffix = bool(filename) and PDFLoader.supports(filename)
    if not (is_pdf_type or has_pdf_suffix):
        raise InvalidUploadError("Only PDF files are supported")
    if size == 0:
        raise InvalidUploadError("Uploaded file is empty")
    if size > max_bytes:
        raise InvalidUploadError(
            f"File is {format_file_size(size)}; the limit is {format_file_size(max_bytes)}"
        )


def format_file_size(size: int) -> str:
    """Human readable size, e.g. ``1.5 KB``."""
    if size == 0:
        return "0 Bytes"

    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    return f"{round(value, 2):g} {units[index]}"


class PDFLoader(BaseDocumentLoader):
    """Extracts plain text from PDF documents page by page."""

    supported_extensions = (".pdf",)

    @classmethod
    def from_bytes(cls, data: bytes, filename: str | None = None) -> "PDFLoader":
        """Create a loader for an in-memory PDF."""
        return cls(data=data, filename=filename)

    def _open_document(self) -> fitz.Document:
        try:
            if self.data is not None:
                return fitz.open(stream=self.data, filetype="pdf")
            return fitz.open(self.file_path)
        except Exception as e:
            raise DocumentLoadError(
                "Failed to parse PDF file. Please ensure the file is a valid PDF document."
            ) from e

    def load(self) -> ParsedDocument:
        """Load the PDF and extract its text."""
        self.log_info("Loading PDF document", file=self.filename)

        doc = self._open_document()
        try:
            pages = []
            for page in doc:
                page_text = _WHITESPACE.sub(" ", page.get_text("text")).strip()
                if page_text:
                    pages.append(page_text)

            parsed = ParsedDocument(
                text="\n\n".join(pages),
                page_count=doc.page_count,
                source_file=self.filename,
                metadata=self._metadata_from(doc),
            )
        except Exception as e:
            self.log_error("PDF text extraction failed", file=self.filename, error=str(e))
            raise DocumentLoadError(f"Failed to extract text from {self.filename}") from e
        finally:
            doc.close()

        self.log_info(
            "PDF loaded successfully",
            pages=parsed.page_count,
            characters=len(parsed.text),
        )
        return parsed

    def extract_metadata(self) -> DocumentMetadata:
        """Extract PDF metadata."""
        doc = self._open_document()
        try:
            return self._metadata_from(doc)
        finally:
            doc.close()

    @staticmethod
    def _metadata_from(doc: fitz.Document) -> DocumentMetadata:
        info = doc.metadata or {}
        return DocumentMetadata(
            title=info.get("title") or None,
            author=info.get("author") or None,
            subject=info.get("subject") or None,
            creator=info.get("creator") or None,
            producer=info.get("producer") or None,
            creation_date=parse_pdf_date(info.get("creationDate")),
            modification_date=parse_pdf_date(info.get("modDate")),
        )


def load_pdf(file_path: Path | str) -> ParsedDocument:
    """Extract text from a PDF on disk."""
    return PDFLoader(file_path).load()
