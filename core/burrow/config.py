"""Configuration settings for Burrow."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Server
HOST = "127.0.0.1"
PORT = 7879

# API
API_PREFIX = "/api"
API_VERSION = "0.1.0"

# Agent defaults
DEFAULT_WORKSPACE_ROOT = Path.home() / "ai_workspace"
DEFAULT_BASE_URL = "http://127.0.0.1:8080"
DEFAULT_MODEL = "qwen2.5-coder-7b"  # must match --alias passed to llama-server
DEFAULT_TIMEOUT = 300.0
DEFAULT_MAX_ITERATIONS = 25


@dataclass
class AgentSettings:
    """Settings for a single agent run."""

    workspace_root: Path = field(default_factory=lambda: DEFAULT_WORKSPACE_ROOT)
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    timeout: float = DEFAULT_TIMEOUT
    max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS  # None = unbounded

    @classmethod
    def from_env(cls) -> "AgentSettings":
        """
        Build settings from BURROW_* environment variables.

        BURROW_MAX_ITERATIONS=0 disables the iteration bound.
        """
        max_iterations: Optional[int] = int(
            os.environ.get("BURROW_MAX_ITERATIONS", DEFAULT_MAX_ITERATIONS)
        )
        if max_iterations <= 0:
            max_iterations = None

        return cls(
            workspace_root=Path(
                os.environ.get("BURROW_WORKSPACE_ROOT", str(DEFAULT_WORKSPACE_ROOT))
            ).expanduser(),
            base_url=os.environ.get("BURROW_BASE_URL", DEFAULT_BASE_URL),
            model=os.environ.get("BURROW_MODEL", DEFAULT_MODEL),
            timeout=float(os.environ.get("BURROW_TIMEOUT", DEFAULT_TIMEOUT)),
            max_iterations=max_iterations,
        )
