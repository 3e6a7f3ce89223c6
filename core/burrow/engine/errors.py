"""Fatal errors that abort an agent run."""


class AgentError(RuntimeError):
    """Base class for errors that end a run."""


class TransportError(AgentError):
    """The model backend could not produce a completion."""


class IterationLimitExceeded(AgentError):
    """The model kept calling tools past the configured iteration bound."""

    def __init__(self, max_iterations: int):
        super().__init__(
            f"No final answer after {max_iterations} iterations"
        )
        self.max_iterations = max_iterations
