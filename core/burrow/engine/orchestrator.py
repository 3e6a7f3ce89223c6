"""
Main agent loop.

The model drives the run: each reply is either a JSON tool call, which is
executed against the workspace and fed back as a TOOL_RESULT message, or
plain prose, which ends the run as the final answer.
"""

from dataclasses import dataclass, field
from typing import Optional

from burrow.config import DEFAULT_MAX_ITERATIONS
from burrow.engine.client import ChatClient, Message, Role
from burrow.engine.errors import IterationLimitExceeded
from burrow.protocol import extract_json_candidate
from burrow.tools.base import ToolIntent, ToolOutcome
from burrow.tools.executor import ToolExecutor
from burrow.tools.parser import ToolParseError, parse_tool_call
from burrow.utils.logging import logger

TOOL_CALL_MARKER = "TOOL CALL"
TOOL_RESULT_PREFIX = "TOOL_RESULT: "


@dataclass
class ToolCallRecord:
    """One executed tool call and its outcome."""

    intent: ToolIntent
    outcome: ToolOutcome


@dataclass
class AgentRunResult:
    """Outcome of a completed run."""

    answer: str
    iterations: int
    tool_calls: list[ToolCallRecord] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)


class AgentOrchestrator:
    """
    Drives the call -> extract -> parse -> execute -> feedback cycle.

    One orchestrator owns one conversation. History is append-only and is
    sent in full on every model call.
    """

    SYSTEM_PROMPT = """\
You are a coding agent operating inside a local filesystem workspace.

Workspace root (you MUST NOT leave this directory): `{root}`.

You cannot run shell commands or access the real OS directly.
Instead, you use the following TOOLS by emitting **pure JSON** (no surrounding text):

1) List directory contents:
   {{"tool": "list_dir", "path": "relative/path"}}

2) Read a file as UTF-8 text:
   {{"tool": "read_file", "path": "relative/path"}}

3) Write (create/overwrite) a file with UTF-8 content:
   {{"tool": "write_file", "path": "relative/path", "content": "..."}}

Rules:
- `path` is ALWAYS RELATIVE to the workspace root `{root}`.
- NEVER include `..` in paths.
- When you want to use a tool, respond with ONLY the JSON object, nothing else.
- I (the system) will reply with a tool result in the form:
  TOOL_RESULT: <json>

  where the JSON has the shape:
    {{"status":"ok","result":{{...}}}} or
    {{"status":"error","message":"..."}}

- After seeing a TOOL_RESULT, you may call another tool (again, with pure JSON),
  or continue with normal reasoning and natural-language explanation.

- When you are FINISHED with the task, respond with a normal natural-language answer,
  describing what you did and showing the important code snippets.
"""

    def __init__(
        self,
        client: ChatClient,
        executor: ToolExecutor,
        max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS,
    ):
        """
        Initialize the orchestrator.

        Args:
            client: Model backend
            executor: Tool executor bound to the workspace sandbox
            max_iterations: Maximum model calls per run; None for no bound
        """
        self.client = client
        self.executor = executor
        self.max_iterations = max_iterations
        self.messages: list[Message] = []
        self.tool_calls: list[ToolCallRecord] = []

    def _append(self, role: Role, content: str) -> None:
        self.messages.append(Message(role=role, content=content))

    def build_system_prompt(self) -> str:
        return self.SYSTEM_PROMPT.format(root=self.executor.sandbox.root)

    async def run(self, task: str) -> AgentRunResult:
        """
        Run the agent until the model produces a final answer.

        Args:
            task: The user's request

        Returns:
            AgentRunResult with the final answer and the run history

        Raises:
            TransportError: If the model backend fails
            IterationLimitExceeded: If max_iterations calls produce no answer
        """
        if self.messages:
            raise RuntimeError("AgentOrchestrator instances run a single task")

        self._append(Role.SYSTEM, self.build_system_prompt())
        self._append(Role.USER, task)
        logger.info(f"Starting run in {self.executor.sandbox.root}: {task[:50]}")

        iterations = 0
        while True:
            if self.max_iterations is not None and iterations >= self.max_iterations:
                logger.error(f"Iteration limit reached ({self.max_iterations})")
                raise IterationLimitExceeded(self.max_iterations)

            reply = await self.client.complete(list(self.messages))
            iterations += 1
            logger.debug(f"LLM raw reply:\n{reply}")

            try:
                intent = parse_tool_call(extract_json_candidate(reply))
            except ToolParseError:
                logger.info(f"Final answer after {iterations} iteration(s)")
                return AgentRunResult(
                    answer=reply,
                    iterations=iterations,
                    tool_calls=list(self.tool_calls),
                    messages=list(self.messages),
                )

            self._append(Role.ASSISTANT, TOOL_CALL_MARKER)
            self._append(Role.ASSISTANT, reply)

            outcome = self.executor.execute(intent)
            self.tool_calls.append(ToolCallRecord(intent=intent, outcome=outcome))

            self._append(Role.USER, f"{TOOL_RESULT_PREFIX}{outcome.to_json()}")
