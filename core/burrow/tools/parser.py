"""
Tool call parsing for Burrow.
Decodes an extracted JSON candidate into exactly one tool intent.
"""

from pydantic import TypeAdapter, ValidationError

from burrow.tools.base import ToolIntent
from burrow.utils.logging import logger

_INTENT_ADAPTER: TypeAdapter[ToolIntent] = TypeAdapter(ToolIntent)


class ToolParseError(ValueError):
    """The candidate text is not a recognized tool call."""


def parse_tool_call(candidate: str) -> ToolIntent:
    """
    Parse a tool call from extracted model output.

    Args:
        candidate: Text produced by the protocol extractor

    Returns:
        ListDir, ReadFile or WriteFile

    Raises:
        ToolParseError: On malformed JSON, an unknown "tool" value,
                        or a missing/mistyped field
    """
    try:
        intent = _INTENT_ADAPTER.validate_json(candidate)
    except ValidationError as e:
        logger.debug(f"Not a tool call ({e.error_count()} errors): {candidate[:80]!r}")
        raise ToolParseError(str(e)) from e

    logger.info(f"Parsed tool call: {intent.tool} with path: {intent.path}")
    return intent
