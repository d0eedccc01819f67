"""Main application entry point.

Serves the HTTP API and the NiceGUI chat page from one uvicorn server.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Start the combined API + UI server.

    HOST and PORT choose the bind address. The page reaches the API via
    API_BASE_URL, which defaults to the same server on port 8000.
    """
    import uvicorn
    from nicegui import ui

    from quibly.api.app import create_app
    from quibly.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()
    ui.run_with(
        app,
        title="Quibly",
        favicon="✨",
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Chat UI on http://localhost:{port}/, API docs on http://localhost:{port}/docs")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
