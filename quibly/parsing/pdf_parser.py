"""PDF parsing module using pypdf.

Extracts page-labelled text and metadata from PDF files with validation.
Pages are decoded one at a time off the event loop, in page order.
"""

import asyncio
import io
import logging

from pydantic import BaseModel, Field
from pypdf import PageObject, PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"
PDF_MIME_TYPE = "application/pdf"


class PDFContent(BaseModel):
    """Extracted content from a PDF file.

    Attributes:
        text: Page-labelled text, one "Page {n}: {text}" line per page.
        pages: Total number of pages in the document.
        metadata: Document metadata (title, author, etc.).
    """

    text: str
    pages: int = Field(ge=1)
    metadata: dict[str, str]


class DocumentError(Exception):
    """Base class for document upload failures."""


class InvalidDocumentType(DocumentError):
    """Raised when the uploaded file is not a PDF."""


class ExtractionFailed(DocumentError):
    """Raised when a PDF cannot be decoded."""


def _validate_pdf_bytes(file_content: bytes, content_type: str | None) -> None:
    """Validate the type marker and size before parsing.

    Args:
        file_content: Raw bytes of the file.
        content_type: Declared MIME type, if the caller knows it.

    Raises:
        InvalidDocumentType: If the file is not a PDF.
        ExtractionFailed: If the file is too large to process.
    """
    if content_type is not None and content_type != PDF_MIME_TYPE:
        raise InvalidDocumentType(f"Expected {PDF_MIME_TYPE}, got {content_type or 'unknown type'}")

    if not file_content:
        raise InvalidDocumentType("Empty file provided")

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise InvalidDocumentType("Invalid PDF: file does not start with PDF header")

    if len(file_content) > MAX_FILE_SIZE:
        size_mb = len(file_content) / (1024 * 1024)
        raise ExtractionFailed(f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)")


def _extract_metadata(reader: PdfReader) -> dict[str, str]:
    """Extract standard metadata fields from a PDF reader."""
    metadata: dict[str, str | None] = {}

    try:
        if reader.metadata:
            metadata["title"] = reader.metadata.get("/Title")
            metadata["author"] = reader.metadata.get("/Author")
            metadata["subject"] = reader.metadata.get("/Subject")
            metadata["creator"] = reader.metadata.get("/Creator")
            metadata["producer"] = reader.metadata.get("/Producer")
    except Exception as e:
        logger.warning(f"Failed to extract some metadata: {e}")

    return {k: str(v) for k, v in metadata.items() if v is not None}


def _page_text(page: PageObject) -> str:
    """Return a page's text items joined by single spaces.

    pypdf reports text line by line; each non-blank line is one item.
    """
    raw = page.extract_text() or ""
    return " ".join(line.strip() for line in raw.splitlines() if line.strip())


async def parse_pdf(file_content: bytes, content_type: str | None = PDF_MIME_TYPE) -> PDFContent:
    """Parse a PDF file and extract its text page by page.

    Args:
        file_content: Raw bytes of the PDF file.
        content_type: Declared MIME type; None skips the MIME check.

    Returns:
        PDFContent whose text is "Page 1: ...\\nPage 2: ...\\n".

    Raises:
        InvalidDocumentType: If the file is not a PDF.
        ExtractionFailed: If the file is too large, corrupt, or unreadable.
    """
    _validate_pdf_bytes(file_content, content_type)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = len(reader.pages)
    except PdfReadError as e:
        raise ExtractionFailed(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise ExtractionFailed(f"Failed to read PDF: {e}") from e

    if pages == 0:
        raise ExtractionFailed("PDF contains no pages")

    page_texts: list[str] = []
    for number in range(1, pages + 1):
        try:
            page_texts.append(await asyncio.to_thread(_page_text, reader.pages[number - 1]))
        except Exception as e:
            raise ExtractionFailed(f"Failed to extract text from page {number}: {e}") from e

    if not any(page_texts):
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    text = "".join(
        f"Page {number}: {page_text}\n" for number, page_text in enumerate(page_texts, start=1)
    )

    return PDFContent(
        text=text,
        pages=pages,
        metadata=_extract_metadata(reader),
    )
