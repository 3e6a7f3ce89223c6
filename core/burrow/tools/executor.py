"""
Tool executor for Burrow.
Runs parsed tool intents against the workspace sandbox and reports outcomes.
"""

import os
from pathlib import Path

from burrow.tools.base import ListDir, ReadFile, ToolIntent, ToolOutcome, WriteFile
from burrow.tools.sandbox import SandboxViolation, WorkspaceSandbox
from burrow.utils.logging import logger


class ToolExecutor:
    """
    Executes tool intents requested by the model.

    All paths go through the sandbox. Failures never raise: they come back
    as error outcomes so the model can correct itself.
    """

    def __init__(self, sandbox: WorkspaceSandbox):
        self.sandbox = sandbox

    def execute(self, intent: ToolIntent) -> ToolOutcome:
        """
        Execute a tool intent exactly once.

        Args:
            intent: The parsed tool call

        Returns:
            ToolOutcome with the tool payload or an error message
        """
        try:
            path = self.sandbox.resolve(intent.path)
        except SandboxViolation as e:
            logger.warning(f"Rejected {intent.tool} path: {e}")
            return ToolOutcome.error(str(e))

        logger.info(f"Executing tool: {intent.tool} on {path}")

        if isinstance(intent, ListDir):
            outcome = self._list_dir(path)
        elif isinstance(intent, ReadFile):
            outcome = self._read_file(path)
        elif isinstance(intent, WriteFile):
            outcome = self._write_file(path, intent.content)
        else:
            outcome = ToolOutcome.error(f"Unknown tool: {intent.tool}")

        if not outcome.success:
            logger.warning(f"Tool {intent.tool} failed: {outcome.message}")
        return outcome

    def _list_dir(self, path: Path) -> ToolOutcome:
        try:
            with os.scandir(path) as entries:
                items = [
                    {
                        "name": entry.name,
                        "is_dir": entry.is_dir(follow_symlinks=False),
                        "is_file": entry.is_file(follow_symlinks=False),
                    }
                    for entry in entries
                ]
        except OSError as e:
            return ToolOutcome.error(f"read_dir failed on {path}: {e}")

        items.sort(key=lambda item: item["name"])
        return ToolOutcome.ok(items)

    def _read_file(self, path: Path) -> ToolOutcome:
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            return ToolOutcome.error(f"Failed to read {path}: {e}")

        return ToolOutcome.ok({"content": content})

    def _write_file(self, path: Path, content: str) -> ToolOutcome:
        if path == self.sandbox.root:
            return ToolOutcome.error(f"Cannot write to the workspace root itself: {path}")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return ToolOutcome.error(f"Failed to create dirs {path.parent}: {e}")

        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except (OSError, UnicodeEncodeError) as e:
            return ToolOutcome.error(f"Failed to write {path}: {e}")

        logger.info(f"Wrote file: {path} ({len(content)} chars)")
        return ToolOutcome.ok({"written": True})
