"""Orchestration-specific error definitions."""


class OrchestratorError(Exception):
    """Base exception for orchestration errors."""
    pass


class ConfigurationError(OrchestratorError):
    """The orchestrator has no usable adapter or configuration."""
    pass


class ToolNotFound(OrchestratorError):
    """A provider requested a tool that is not registered."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Tool '{tool_name}' is not registered")


class ToolExecutionError(OrchestratorError):
    """A tool raised or rejected its input."""

    def __init__(self, tool_name: str, original_error: Exception):
        self.tool_name = tool_name
        self.original_error = original_error
        super().__init__(f"Tool '{tool_name}' failed: {original_error}")


class LoopLimitExceeded(OrchestratorError):
    """The provider still wanted tools when the round bound ran out."""

    def __init__(self, max_rounds: int):
        self.max_rounds = max_rounds
        super().__init__(f"Tool loop limit reached after {max_rounds} follow-up rounds")


class GenerationCancelled(OrchestratorError):
    """A cancellation token fired while a generate call was in progress."""
    pass
