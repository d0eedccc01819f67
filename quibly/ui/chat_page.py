"""NiceGUI chat interface backed by the Quibly HTTP API."""

import logging
import os
from datetime import datetime

import httpx
from nicegui import events, ui

from quibly.completion.client import ERROR_FALLBACK
from quibly.parsing.pdf_parser import PDF_MIME_TYPE

logger = logging.getLogger(__name__)

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")

INVALID_FILE_NOTICE = "Please upload a valid PDF file."

CUSTOM_CSS = """
<style>
    body { background: linear-gradient(135deg, #f3e8ff 0%, #fce7f3 50%, #dbeafe 100%); }

    .app-container {
        background: white;
        border: 2px solid #d8b4fe;
        border-radius: 24px;
        box-shadow: 0 4px 12px rgba(0, 0, 0, 0.08);
        overflow: hidden;
    }

    .message-user {
        background: linear-gradient(90deg, #3b82f6 0%, #9333ea 100%);
        color: white;
        border-radius: 24px 24px 4px 24px;
        white-space: pre-wrap;
    }

    .message-assistant {
        background: linear-gradient(135deg, #e5e7eb 0%, #ffffff 100%);
        color: #111827;
        border-radius: 24px 24px 24px 4px;
        white-space: pre-wrap;
    }

    .input-bar { background: linear-gradient(90deg, #fbcfe8 0%, #e9d5ff 100%); }
</style>
"""


class ChatView:
    """What the page currently shows for one browser tab.

    The server-side session is the source of truth; messages here are
    replaced from each API response.
    """

    def __init__(self) -> None:
        self.session_id: str | None = None
        self.messages: list[dict] = []
        self.file_name: str | None = None
        self.loading: bool = False

    def add_local_message(self, role: str, content: str) -> None:
        self.messages.append({"role": role, "content": content, "created_at": None})


async def post_chat(message: str, session_id: str | None) -> dict:
    """POST a message to /chat and return the decoded body."""
    async with httpx.AsyncClient(timeout=120.0) as client:
        response = await client.post(
            f"{API_BASE_URL}/chat",
            json={"message": message, "session_id": session_id},
        )
        response.raise_for_status()
        return response.json()


async def post_pdf(name: str, content: bytes, session_id: str | None) -> httpx.Response:
    """POST a PDF to /upload/pdf and return the raw response."""
    async with httpx.AsyncClient(timeout=120.0) as client:
        data = {"session_id": session_id} if session_id else {}
        return await client.post(
            f"{API_BASE_URL}/upload/pdf",
            files={"file": (name, content, PDF_MIME_TYPE)},
            data=data,
        )


async def delete_session(
    session_id: str, transport: httpx.AsyncBaseTransport | None = None
) -> None:
    """DELETE /sessions/{session_id}. Failures are logged, not raised."""
    try:
        async with httpx.AsyncClient(timeout=10.0, transport=transport) as client:
            response = await client.delete(f"{API_BASE_URL}/sessions/{session_id}")
    except httpx.RequestError as e:
        logger.warning(f"Could not delete session {session_id}: {e}")
        return
    if response.is_error and response.status_code != 404:
        logger.warning(f"Deleting session {session_id} failed: HTTP {response.status_code}")


def _format_time(created_at: str | None) -> str:
    moment = datetime.fromisoformat(created_at) if created_at else datetime.now()
    return moment.astimezone().strftime("%I:%M %p")


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    view = ChatView()

    async def forget_session() -> None:
        if view.session_id:
            await delete_session(view.session_id)

    ui.context.client.on_delete(forget_session)

    messages_container: ui.column
    input_field: ui.input
    send_btn: ui.button

    def render_message(msg: dict) -> None:
        is_user = msg["role"] == "user"
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align}"):
            with ui.column().classes("max-w-[80%] gap-1"):
                ui.label(msg["content"]).classes(f"px-4 py-2 text-sm shadow-sm {bubble}")
                ui.label(_format_time(msg.get("created_at"))).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for msg in view.messages:
                render_message(msg)
            if view.loading:
                ui.label("Typing...").classes(
                    "message-assistant px-4 py-2 text-sm animate-pulse self-start"
                )

    def set_loading(loading: bool) -> None:
        view.loading = loading
        if loading:
            input_field.disable()
            send_btn.disable()
        else:
            input_field.enable()
            send_btn.enable()
        refresh_messages()

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or view.loading:
            return

        input_field.value = ""
        view.add_local_message("user", text)
        set_loading(True)

        try:
            data = await post_chat(text, view.session_id)
            view.session_id = data["session_id"]
            view.messages = data["messages"]
        except httpx.HTTPError as e:
            logger.warning(f"Chat request to API failed: {e}")
            view.add_local_message("assistant", ERROR_FALLBACK)
        finally:
            set_loading(False)

    async def handle_upload(e: events.UploadEventArguments) -> None:
        upload.reset()
        if e.file.content_type != PDF_MIME_TYPE:
            ui.notify(INVALID_FILE_NOTICE, type="warning")
            return

        content = await e.file.read()
        try:
            response = await post_pdf(e.file.name, content, view.session_id)
        except httpx.RequestError as exc:
            logger.warning(f"Upload request to API failed: {exc}")
            return

        if response.status_code == 400:
            ui.notify(INVALID_FILE_NOTICE, type="warning")
            return
        if response.is_error:
            # Extraction failures keep the previous document and are not shown
            logger.warning(f"Upload of {e.file.name} failed: HTTP {response.status_code}")
            return

        data = response.json()
        view.session_id = data["session_id"]
        view.file_name = data["filename"]
        file_label.set_text(f"📁 File: {view.file_name}")
        file_label.set_visibility(True)

    # === UI Layout ===
    with ui.column().classes("w-full max-w-3xl mx-auto p-4 h-screen"):
        with ui.column().classes("w-full items-center mb-4"):
            ui.label("✨ Quibly").classes("text-5xl font-extrabold text-purple-700")
            ui.label("Ask smart questions from your PDF with style!").classes(
                "text-gray-700 font-medium"
            )
            file_label = ui.label().classes("text-sm text-green-700 font-semibold")
            file_label.set_visibility(False)

        with ui.column().classes("w-full flex-grow app-container gap-0"):
            with ui.scroll_area().classes("flex-grow w-full"):
                messages_container = ui.column().classes("w-full gap-4 p-4")
                refresh_messages()

            with ui.row().classes("w-full p-4 gap-2 items-center input-bar"):
                input_field = (
                    ui.input(placeholder="Ask something about the PDF...")
                    .props("rounded outlined dense")
                    .classes("flex-grow")
                    .on("keydown.enter", send_message)
                )
                send_btn = ui.button("Send", on_click=send_message).props(
                    "rounded color=purple"
                )
                upload = (
                    ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                    .props(f"accept={PDF_MIME_TYPE} flat")
                    .classes("hidden")
                )
                ui.button(
                    "Upload PDF",
                    on_click=lambda: upload.run_method("pickFiles"),
                ).props("rounded color=blue")
