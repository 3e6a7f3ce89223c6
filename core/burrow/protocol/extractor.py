"""
Extraction of JSON payloads from model replies.
Models often wrap tool calls in markdown code fences; this strips them.
"""

JSON_FENCE = "```json"
FENCE = "```"


def _strip_closing_fence(inner: str) -> str:
    return inner.strip().rstrip("`").strip()


def _drop_line_break(inner: str) -> str:
    if inner[:1] in ("\n", "\r"):
        return inner[1:]
    return inner


def extract_json_candidate(reply: str) -> str:
    """
    Extract the JSON part of a reply that may be wrapped in code fences.

    Never fails: text without a leading fence is returned trimmed, on the
    assumption it already is raw JSON.

    Examples:
        '```json\\n{"a":1}\\n```'  -> '{"a":1}'
        '```\\n{"a":1}\\n```'      -> '{"a":1}'
        '  {"a":1}  '             -> '{"a":1}'
    """
    trimmed = reply.strip()

    if trimmed.startswith(JSON_FENCE):
        inner = _drop_line_break(trimmed[len(JSON_FENCE):])
        return _strip_closing_fence(inner)

    if trimmed.startswith(FENCE):
        inner = trimmed[len(FENCE):]

        # Skip an optional language tag up to the first newline
        newline = inner.find("\n")
        if newline != -1:
            inner = inner[newline:]

        return _strip_closing_fence(_drop_line_break(inner))

    return trimmed
