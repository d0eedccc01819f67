"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - make_pdf: Builds small text PDFs in memory
    - completion_config: Config with a fake API key
    - upstream: Recording stub of the generateContent endpoint
    - completion_client: CompletionClient wired to the stub
    - registry: SessionRegistry using that client
    - async_client: HTTPX client for API testing, with the registry injected
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from quibly.api import create_app
from quibly.completion.client import CompletionClient
from quibly.completion.config import CompletionConfig
from quibly.conversation.session import SessionRegistry, get_session_registry


def build_pdf(page_texts: list[str], title: str | None = None) -> bytes:
    """Build a minimal PDF with one line of Helvetica text per page.

    Args:
        page_texts: Text for each page, in order. Use "" for a blank page.
        title: Optional /Title for the document info dictionary.

    Returns:
        PDF bytes with a correct xref table.
    """
    page_ids = [4 + 2 * i for i in range(len(page_texts))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)

    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(page_texts)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for page_id, text in zip(page_ids, page_texts, strict=True):
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {page_id + 1} 0 R >>"
            ).encode()
        )
        stream = f"BT /F1 24 Tf 72 720 Td ({text}) Tj ET".encode() if text else b""
        objects.append(
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
        )
    if title is not None:
        objects.append(f"<< /Title ({title}) >>".encode())
    info = f" /Info {len(objects)} 0 R" if title is not None else ""

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_pos = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R{info} >>\n".encode()
    out += b"startxref\n%d\n%%%%EOF\n" % xref_pos
    return bytes(out)


def gemini_body(text: str) -> dict[str, Any]:
    """Return a generateContent response body with one candidate."""
    return {
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": text}]}, "finishReason": "STOP"}
        ]
    }


class UpstreamStub:
    """Stand-in for the generateContent endpoint.

    Records every request and answers with the queued handler result,
    or a fixed reply when nothing is queued.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json=gemini_body("Stub reply")
        )

    def reply_with(self, text: str) -> None:
        self.handler = lambda request: httpx.Response(200, json=gemini_body(text))

    def respond(self, response: httpx.Response) -> None:
        self.handler = lambda request: response

    def fail_with(self, error: Exception) -> None:
        def raise_error(request: httpx.Request) -> httpx.Response:
            raise error

        self.handler = raise_error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def make_pdf() -> Callable[..., bytes]:
    """Return the in-memory PDF builder."""
    return build_pdf


@pytest.fixture
def completion_config() -> CompletionConfig:
    return CompletionConfig(
        api_key="test-key",
        model_name="gemini-2.0-flash",
        base_url="https://gemini.test/v1beta",
        timeout=120.0,
    )


@pytest.fixture
def upstream() -> UpstreamStub:
    return UpstreamStub()


@pytest.fixture
def completion_client(
    completion_config: CompletionConfig, upstream: UpstreamStub
) -> CompletionClient:
    return CompletionClient(config=completion_config, transport=httpx.MockTransport(upstream))


@pytest.fixture
def registry(completion_client: CompletionClient) -> SessionRegistry:
    return SessionRegistry(client=completion_client)


@pytest.fixture
async def async_client(registry: SessionRegistry) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app = create_app()
    app.dependency_overrides[get_session_registry] = lambda: registry
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
