"""PDF parsing utilities for document uploads.

Turns an uploaded PDF into the page-labelled text block that is attached
to the next outgoing question.

Responsibilities:
    - Type and size validation of uploaded bytes
    - Per-page text extraction with pypdf, in page order
    - Metadata extraction (title, author, producer)
"""

from quibly.parsing.pdf_parser import (
    DocumentError,
    ExtractionFailed,
    InvalidDocumentType,
    PDFContent,
    parse_pdf,
)

__all__ = [
    "DocumentError",
    "ExtractionFailed",
    "InvalidDocumentType",
    "PDFContent",
    "parse_pdf",
]
