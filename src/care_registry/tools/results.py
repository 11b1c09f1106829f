"""
Tool result envelopes.

Every tool call returns a ToolResult: the JSON payload as text content,
the same payload as structured content, and an error flag. Failures
carry an empty payload of the tool's output shape.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List

from pydantic import BaseModel, Field

from care_registry.validation.criteria_validator import ValidationError

logger = logging.getLogger(__name__)

Payload = Dict[str, Any]


class ToolSpec(BaseModel):
    """Name, title and description under which a tool is registered."""

    name: str
    title: str
    description: str

    model_config = {"frozen": True}


class ToolResult(BaseModel):
    """Envelope returned by every tool handler."""

    content: List[Dict[str, str]] = Field(default_factory=list)
    structured_content: Payload = Field(default_factory=dict)
    is_error: bool = False

    @property
    def text(self) -> str:
        return "\n".join(block["text"] for block in self.content)


def success_result(payload: Payload) -> ToolResult:
    return ToolResult(
        content=[{"type": "text", "text": json.dumps(payload, indent=2)}],
        structured_content=payload,
        is_error=False,
    )


def failure_result(message: str, empty_payload: Payload) -> ToolResult:
    return ToolResult(
        content=[{"type": "text", "text": f"Tool execution failed: {message}"}],
        structured_content=empty_payload,
        is_error=True,
    )


def run_tool(
    tool_name: str,
    handler: Callable[[], Payload],
    empty_payload: Payload,
) -> ToolResult:
    """
    Run a handler at the host boundary.

    Validation failures and unexpected errors become failure envelopes;
    nothing propagates to the transport.
    """
    try:
        return success_result(handler())
    except ValidationError as exc:
        logger.warning(f"{tool_name} rejected input: {exc.message}")
        return failure_result(exc.message, empty_payload)
    except Exception as exc:
        logger.exception(f"{tool_name} failed")
        return failure_result(str(exc), empty_payload)
