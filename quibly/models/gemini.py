"""Wire models for the Gemini generateContent endpoint.

Only the fields the app reads or writes are modeled. Unknown response
fields are ignored so additions on the provider side do not break parsing.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

TurnRole = Literal["user", "model"]


class Part(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str | None = None


class Content(BaseModel):
    """One role-tagged turn."""

    model_config = ConfigDict(extra="ignore")

    role: TurnRole | None = None
    parts: list[Part] | None = None


class GenerateContentRequest(BaseModel):
    """Request body: the full conversation as turns."""

    contents: list[Content]


class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Content | None = None


class GenerateContentResponse(BaseModel):
    """Response body. Only the first candidate's first part is consumed."""

    model_config = ConfigDict(extra="ignore")

    candidates: list[Candidate] | None = None

    def first_text(self) -> str | None:
        """Return candidates[0].content.parts[0].text, or None if absent."""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text
