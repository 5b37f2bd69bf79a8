"""Renderers turning domain records into ToolResult payloads."""

from .result import ToolResult, to_json

__all__ = ["ToolResult", "to_json"]
