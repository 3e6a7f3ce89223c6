"""
Base types for Burrow tools.
Defines the tool intents the model may request and the outcome fed back to it.
"""

import json
from dataclasses import dataclass
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Intent(BaseModel):
    """Shared config: strict decoding, immutable, unknown keys ignored."""

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")


class ListDir(_Intent):
    """List the direct children of a directory."""

    tool: Literal["list_dir"] = "list_dir"
    path: str


class ReadFile(_Intent):
    """Read a whole file as UTF-8 text."""

    tool: Literal["read_file"] = "read_file"
    path: str


class WriteFile(_Intent):
    """Create or overwrite a file with the given content."""

    tool: Literal["write_file"] = "write_file"
    path: str
    content: str


ToolIntent = Annotated[Union[ListDir, ReadFile, WriteFile], Field(discriminator="tool")]


@dataclass(frozen=True)
class ToolOutcome:
    """
    Result of a tool execution.

    status: "ok" | "error"
    result: tool-specific payload when status is "ok"
    message: failure description when status is "error"
    """

    status: Literal["ok", "error"]
    result: Any = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, result: Any) -> "ToolOutcome":
        return cls(status="ok", result=result)

    @classmethod
    def error(cls, message: str) -> "ToolOutcome":
        return cls(status="error", message=message)

    @property
    def success(self) -> bool:
        return self.status == "ok"

    def to_dict(self) -> dict:
        if self.success:
            return {"status": "ok", "result": self.result}
        return {"status": "error", "message": self.message}

    def to_json(self) -> str:
        """Serialize to the compact wire shape sent back to the model."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))
