"""Tool result payload returned to callers."""

import json
from typing import Any

from pydantic import BaseModel, Field


class ToolResult(BaseModel):
    """A rendered tool answer plus an error flag.

    Every tool returns one of these, failures included, so callers never
    need a separate crash path.
    """

    text: str = Field(description="Rendered payload (prose or a JSON document).")
    is_error: bool = Field(default=False, description="True when the tool failed.")

    @property
    def content(self) -> list[dict[str, str]]:
        """Text-content block list, the shape tool-calling clients expect."""
        return [{"type": "text", "text": self.text}]

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(text=message, is_error=True)


def to_json(data: Any) -> str:
    """Pretty JSON used by every JSON-rendering presenter."""
    return json.dumps(data, indent=2, ensure_ascii=False)
