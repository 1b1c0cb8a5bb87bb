"""Static graph topology: node identities, fixed edges and routing labels.

The whole shape of a run is declared here as data. ``build_graph`` checks
these tables before compiling, so a routing label without a target node is
rejected when the graph is built, never halfway through a run.
"""

from enum import Enum
from typing import Mapping, Optional


class NodeName(str, Enum):
    INVOKE_MODEL = "invoke-model"
    INVOKE_TOOL = "invoke-tool"
    USE_FALLBACK_MODEL = "use-fallback-model"
    NO_TOOLS = "no-tools"


class Route(str, Enum):
    """Labels the post-model router can return."""

    INVOKE_TOOL = "invoke-tool"
    USE_FALLBACK_MODEL = "use-fallback-model"
    NO_TOOLS = "no-tools"


START_NODE = NodeName.INVOKE_MODEL

# The one node whose successor is chosen by the router.
ROUTER_SOURCE = NodeName.INVOKE_MODEL

# Unconditional edges. ``None`` is the terminal marker.
EDGES: Mapping[NodeName, Optional[NodeName]] = {
    NodeName.INVOKE_TOOL: None,
    NodeName.USE_FALLBACK_MODEL: None,
    NodeName.NO_TOOLS: None,
}

ROUTES: Mapping[Route, NodeName] = {
    Route.INVOKE_TOOL: NodeName.INVOKE_TOOL,
    Route.USE_FALLBACK_MODEL: NodeName.USE_FALLBACK_MODEL,
    Route.NO_TOOLS: NodeName.NO_TOOLS,
}
