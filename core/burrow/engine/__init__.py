"""Engine module - agent loop and model backend access."""

from burrow.engine.client import ChatClient, Message, Role
from burrow.engine.errors import AgentError, IterationLimitExceeded, TransportError
from burrow.engine.orchestrator import AgentOrchestrator, AgentRunResult, ToolCallRecord

__all__ = [
    "AgentOrchestrator",
    "AgentRunResult",
    "ToolCallRecord",
    "ChatClient",
    "Message",
    "Role",
    "AgentError",
    "IterationLimitExceeded",
    "TransportError",
]
