"""Document loader modules."""

from smartrfp.loaders.base import BaseDocumentLoader
from smartrfp.loaders.pdf_loader import (
    PDFLoader,
    format_file_size,
    load_pdf,
    validate_pdf_upload,
)

__all__ = [
    "BaseDocumentLoader",
    "PDFLoader",
    "format_file_size",
    "load_pdf",
    "validate_pdf_upload",
]
