"""Agent API routes."""

import uuid

from fastapi import APIRouter, Depends, HTTPException

from burrow.api.schemas import RunRequest, RunResponse, ToolCallSummary, WorkspaceResponse
from burrow.api.settings_store import get_settings
from burrow.config import AgentSettings
from burrow.engine import AgentOrchestrator, ChatClient, IterationLimitExceeded, TransportError
from burrow.tools import ToolExecutor, WorkspaceSandbox
from burrow.utils.logging import logger

router = APIRouter(tags=["agent"])


@router.post("/run", response_model=RunResponse)
async def run_task(request: RunRequest, settings: AgentSettings = Depends(get_settings)):
    """
    Run one task to completion inside the configured workspace.
    Each request gets a fresh conversation.
    """
    logger.info(f"Received task: {request.task[:50]}...")

    executor = ToolExecutor(WorkspaceSandbox(settings.workspace_root))

    async with ChatClient(
        base_url=settings.base_url, model=settings.model, timeout=settings.timeout
    ) as client:
        orchestrator = AgentOrchestrator(
            client, executor, max_iterations=settings.max_iterations
        )
        try:
            result = await orchestrator.run(request.task)
        except TransportError as e:
            logger.error(f"Model backend error: {e}")
            raise HTTPException(status_code=502, detail=str(e))
        except IterationLimitExceeded as e:
            logger.error(f"Run aborted: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    return RunResponse(
        id=str(uuid.uuid4()),
        answer=result.answer,
        iterations=result.iterations,
        tool_calls=[
            ToolCallSummary(
                tool=call.intent.tool,
                path=call.intent.path,
                status=call.outcome.status,
                message=call.outcome.message,
            )
            for call in result.tool_calls
        ],
    )


@router.get("/workspace", response_model=WorkspaceResponse)
async def get_workspace(settings: AgentSettings = Depends(get_settings)) -> WorkspaceResponse:
    """Show the configured workspace root and model."""
    return WorkspaceResponse(
        workspace_root=str(settings.workspace_root),
        model=settings.model,
        base_url=settings.base_url,
        max_iterations=settings.max_iterations,
    )
