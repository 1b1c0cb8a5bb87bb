"""LangGraph graph construction and the run entry points.

Builds a single-pass tool-routing graph:

    START ──▶ [invoke-model]
                   │ route_after_model
                   ├─ registered tool ──────────────▶ [invoke-tool] ──────────▶ END
                   ├─ operator says yes ────────────▶ [use-fallback-model] ───▶ END
                   └─ operator says no / nothing ───▶ [no-tools] ─────────────▶ END

Exactly one branch node runs after the model, so a finished run holds the
question, the model's tool choice and one answer message.
"""

from typing import Callable, Mapping, Optional

from langgraph.graph import END, START, StateGraph

from toolbox.registry import ToolRegistry
from toolgraph.audit import ToolUsageLogger
from toolgraph.errors import GraphConfigurationError
from toolgraph.gateway import ModelGateway
from toolgraph.human import Operator
from toolgraph.nodes import (
    call_model,
    invoke_tool,
    no_tools,
    route_after_model,
    use_fallback_model,
)
from toolgraph.state import AgentState, initial_state
from toolgraph.topology import (
    EDGES,
    ROUTER_SOURCE,
    ROUTES,
    START_NODE,
    NodeName,
    Route,
)


def _validate_topology(
    edges: Mapping[NodeName, Optional[NodeName]],
    routes: Mapping[Route, NodeName],
) -> None:
    """Reject inconsistent edge and route tables before anything runs."""
    unknown_labels = [label for label in routes if not isinstance(label, Route)]
    if unknown_labels:
        raise GraphConfigurationError(f"Unknown route label(s): {unknown_labels}")

    missing = [route.value for route in Route if route not in routes]
    if missing:
        raise GraphConfigurationError(f"Route label(s) without a target node: {missing}")

    bad_targets = [target for target in routes.values() if not isinstance(target, NodeName)]
    if bad_targets:
        raise GraphConfigurationError(f"Route target(s) are not graph nodes: {bad_targets}")

    if ROUTER_SOURCE in edges:
        raise GraphConfigurationError(
            f"'{ROUTER_SOURCE.value}' is routed conditionally and cannot have a fixed edge."
        )

    for node in NodeName:
        if node is ROUTER_SOURCE:
            continue
        if node not in edges:
            raise GraphConfigurationError(f"Node '{node.value}' has no outgoing edge.")
        target = edges[node]
        if target is not None and not isinstance(target, NodeName):
            raise GraphConfigurationError(f"Edge from '{node.value}' targets unknown node {target!r}.")
        # Branches end the run; any other target would chain branches or re-enter the model.
        if target is not None:
            raise GraphConfigurationError(
                f"Branch '{node.value}' must end the run, not continue to '{target.value}'."
            )


def _bind(fn: Callable[..., dict], **deps) -> Callable[[AgentState], dict]:
    def _node(state: AgentState) -> dict:
        return fn(state, **deps)

    _node.__name__ = fn.__name__
    return _node


def build_graph(
    registry: ToolRegistry,
    gateway: ModelGateway,
    operator: Operator,
    *,
    tool_logger: Optional[ToolUsageLogger] = None,
    edges: Mapping[NodeName, Optional[NodeName]] = EDGES,
    routes: Mapping[Route, NodeName] = ROUTES,
):
    """Construct and compile the orchestration graph.

    Raises:
        GraphConfigurationError: If the edge or route tables are inconsistent.
    """
    _validate_topology(edges, routes)

    actions = {
        NodeName.INVOKE_MODEL: _bind(call_model, registry=registry, gateway=gateway),
        NodeName.INVOKE_TOOL: _bind(invoke_tool, registry=registry, tool_logger=tool_logger),
        NodeName.USE_FALLBACK_MODEL: _bind(use_fallback_model, gateway=gateway),
        NodeName.NO_TOOLS: _bind(no_tools, registry=registry),
    }

    def _route(state: AgentState) -> str:
        return route_after_model(state, registry=registry, operator=operator).value

    workflow = StateGraph(AgentState)

    # ── Nodes ──────────────────────────────────────────────────────────────
    for node, action in actions.items():
        workflow.add_node(node.value, action)

    # ── Edges ──────────────────────────────────────────────────────────────
    workflow.add_edge(START, START_NODE.value)

    workflow.add_conditional_edges(
        ROUTER_SOURCE.value,
        _route,
        {route.value: target.value for route, target in routes.items()},
    )

    for source, target in edges.items():
        workflow.add_edge(source.value, END if target is None else target.value)

    # No checkpointer: nothing outlives a run.
    return workflow.compile()


def run(graph, question: str) -> AgentState:
    """Run one question through *graph* and return the final state."""
    return graph.invoke(initial_state(question))


def answer(graph, question: str) -> str:
    """Run one question and return the content of the last message."""
    final_state = run(graph, question)
    return final_state["messages"][-1].content
