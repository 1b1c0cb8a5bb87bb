"""Exceptions raised by the orchestrator.

None of these are caught inside the graph: a node or the router raising one
aborts the run and the error surfaces to whoever invoked it.
"""


class AgentError(Exception):
    """Base class for orchestrator failures."""


class ModelOutputError(AgentError):
    """The model's response could not be read as the expected shape."""


class ToolNotFoundError(AgentError):
    """A tool call names a tool that is not in the registry."""

    def __init__(self, tool_name: str):
        super().__init__(f"No tool named '{tool_name}' is registered.")
        self.tool_name = tool_name


class GraphConfigurationError(AgentError):
    """The graph topology is inconsistent; raised while building the graph."""
