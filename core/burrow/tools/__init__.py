"""
Burrow Tools - sandboxed filesystem access for the model.
"""

from burrow.tools.base import ListDir, ReadFile, ToolIntent, ToolOutcome, WriteFile
from burrow.tools.executor import ToolExecutor
from burrow.tools.parser import ToolParseError, parse_tool_call
from burrow.tools.sandbox import SandboxViolation, WorkspaceSandbox

__all__ = [
    "ListDir",
    "ReadFile",
    "WriteFile",
    "ToolIntent",
    "ToolOutcome",
    "ToolExecutor",
    "ToolParseError",
    "parse_tool_call",
    "SandboxViolation",
    "WorkspaceSandbox",
]
