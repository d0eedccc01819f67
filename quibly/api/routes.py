"""PDF upload endpoint.

Handles file upload, validation and extraction. The extracted text becomes
the session's pending document context, sent with the next question.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, HTTPException, UploadFile, status

from quibly.conversation.session import SessionRegistry, get_session_registry
from quibly.models.schemas import PDFUploadResponse
from quibly.parsing.pdf_parser import (
    MAX_FILE_SIZE,
    ExtractionFailed,
    InvalidDocumentType,
    parse_pdf,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])

# 10MB limit matches pdf_parser constant
MAX_UPLOAD_SIZE = MAX_FILE_SIZE

INVALID_TYPE_DETAIL = "Please upload a valid PDF file."


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Args:
        file: The uploaded file.

    Returns:
        File content as bytes.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > MAX_UPLOAD_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    return content


@router.post("/pdf", response_model=PDFUploadResponse)
async def upload_pdf(
    file: UploadFile,
    registry: Annotated[SessionRegistry, Depends(get_session_registry)],
    session_id: Annotated[str | None, Form()] = None,
) -> PDFUploadResponse:
    """Upload a PDF and attach its text to a chat session.

    Args:
        file: The uploaded PDF file (multipart/form-data).
        session_id: Session to attach to; a new one is created if omitted.

    Returns:
        PDFUploadResponse with filename, page count, session id and metadata.

    Raises:
        400: Not a PDF. The session is unchanged.
        413: File exceeds 10MB limit.
        422: PDF could not be decoded. The session is unchanged.
    """
    filename = file.filename or "document.pdf"
    content = await _read_and_validate_size(file)

    # A rejected file must not create a session
    try:
        pdf_content = await parse_pdf(content, file.content_type)
    except InvalidDocumentType as e:
        logger.warning(f"Rejected non-PDF upload {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_TYPE_DETAIL,
        ) from e
    except ExtractionFailed as e:
        logger.warning(f"PDF extraction failed for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail=str(e),
        ) from e

    session = registry.get_or_create(session_id)
    session.attach_pdf(filename, pdf_content)

    title = pdf_content.metadata.get("title")
    logger.info(
        f"Successfully extracted PDF: {filename} ({pdf_content.pages} pages)"
        + (f", title {title!r}" if title else "")
    )

    return PDFUploadResponse(
        filename=filename,
        pages=pdf_content.pages,
        session_id=session.session_id,
        metadata=pdf_content.metadata,
    )
