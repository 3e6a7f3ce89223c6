"""Pydantic models for API request/response schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


class RunRequest(BaseModel):
    """Agent task request."""

    task: str


class ToolCallSummary(BaseModel):
    """One tool call made during a run."""

    tool: str
    path: str
    status: str
    message: str | None = None


class RunResponse(BaseModel):
    """Agent run response."""

    id: str
    answer: str
    iterations: int
    tool_calls: list[ToolCallSummary]


class WorkspaceResponse(BaseModel):
    """Configured workspace and model."""

    workspace_root: str
    model: str
    base_url: str
    max_iterations: int | None = None
