"""Unit tests for PDF parser module."""

from collections.abc import Callable

import pytest
import pytest_check as check

from quibly.parsing.pdf_parser import (
    MAX_FILE_SIZE,
    ExtractionFailed,
    InvalidDocumentType,
    parse_pdf,
)

MakePdf = Callable[..., bytes]


class TestParsePdfValid:
    """Tests for successful PDF parsing."""

    async def test_two_pages_are_labelled_in_order(self, make_pdf: MakePdf) -> None:
        """Each page becomes one "Page n: text" line, in page order."""
        result = await parse_pdf(make_pdf(["Hello", "World"]))

        check.equal(result.text, "Page 1: Hello\nPage 2: World\n")
        check.equal(result.pages, 2)

    async def test_text_items_joined_with_single_spaces(self, make_pdf: MakePdf) -> None:
        """Words on a page are separated by single spaces."""
        result = await parse_pdf(make_pdf(["Quarterly report summary"]))

        assert result.text == "Page 1: Quarterly report summary\n"

    async def test_blank_page_keeps_its_label(self, make_pdf: MakePdf) -> None:
        """A page without text still appears with an empty body."""
        result = await parse_pdf(make_pdf(["Intro", "", "Outro"]))

        assert result.text == "Page 1: Intro\nPage 2: \nPage 3: Outro\n"

    async def test_same_bytes_give_same_text(self, make_pdf: MakePdf) -> None:
        """Extracting identical bytes twice yields identical text."""
        content = make_pdf(["Alpha", "Beta"])

        first = await parse_pdf(content)
        second = await parse_pdf(content)

        assert first.text == second.text

    async def test_mime_check_can_be_skipped(self, make_pdf: MakePdf) -> None:
        """content_type=None relies on the header check alone."""
        result = await parse_pdf(make_pdf(["Hi"]), content_type=None)

        assert result.pages == 1

    async def test_returns_metadata_dict(self, make_pdf: MakePdf) -> None:
        """A PDF without an info dictionary gives empty metadata."""
        result = await parse_pdf(make_pdf(["Hi"]))

        check.equal(result.metadata, {})

    async def test_reads_document_title(self, make_pdf: MakePdf) -> None:
        result = await parse_pdf(make_pdf(["Hi"], title="Quarterly Report"))

        assert result.metadata == {"title": "Quarterly Report"}


class TestParsePdfRejection:
    """Tests for PDF validation and rejection."""

    async def test_rejects_non_pdf_mime_type(self, make_pdf: MakePdf) -> None:
        """A declared non-PDF type is rejected even if the bytes are a PDF."""
        with pytest.raises(InvalidDocumentType):
            await parse_pdf(make_pdf(["Hello"]), content_type="text/plain")

    async def test_rejects_empty_bytes(self) -> None:
        with pytest.raises(InvalidDocumentType, match="Empty file"):
            await parse_pdf(b"")

    async def test_rejects_missing_pdf_header(self) -> None:
        """Text masquerading as a PDF fails the header check."""
        with pytest.raises(InvalidDocumentType, match="Invalid PDF"):
            await parse_pdf(b"This is not a real PDF file")

    async def test_rejects_oversized_file(self) -> None:
        """File over 10MB raises ExtractionFailed."""
        oversized = b"%PDF-1.4" + b"\x00" * (MAX_FILE_SIZE + 1)

        with pytest.raises(ExtractionFailed, match="exceeds maximum"):
            await parse_pdf(oversized)

    async def test_rejects_truncated_pdf(self) -> None:
        """Truncated PDF raises ExtractionFailed."""
        with pytest.raises(ExtractionFailed):
            await parse_pdf(b"%PDF-1.4\n1 0 obj\n<<")
