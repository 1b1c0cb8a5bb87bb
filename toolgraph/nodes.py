"""Graph node functions and the post-model router.

Each node takes the current AgentState plus its injected collaborators and
returns a partial state update. LangGraph appends the returned messages to
the shared history.
"""

import json
import uuid
from typing import Optional

from langchain_core.agents import AgentAction
from langchain_core.messages import AIMessage, ToolMessage

from toolbox.registry import ToolRegistry
from toolgraph import config
from toolgraph.audit import ToolUsageLogger
from toolgraph.errors import ModelOutputError
from toolgraph.gateway import ModelGateway
from toolgraph.human import Operator, is_affirmative
from toolgraph.observability import get_logger
from toolgraph.state import AgentState, proposed_tool_call
from toolgraph.topology import Route

log = get_logger(__name__)


def _question(state: AgentState) -> str:
    """The run's question is always the seed message."""
    return state["messages"][0].content


# ── Model invocation ─────────────────────────────────────────────────────────


def call_model(state: AgentState, *, registry: ToolRegistry, gateway: ModelGateway) -> dict:
    """Ask the model which tool answers the question.

    The reply becomes an assistant message. Unless the model returned the
    no-tool sentinel, that message carries the proposed call in
    ``tool_calls`` so the router and the tool node can pick it up.
    """
    log.info("node.invoke_model", tools=list(registry.names))
    choice = gateway.choose_tool(_question(state), registry.render())

    content = json.dumps({"name": choice.name, "arguments": choice.arguments})
    if choice.is_no_tool:
        return {"messages": [AIMessage(content=content)]}

    tool_call = {
        "name": choice.name,
        "args": choice.arguments,
        "id": f"call_{uuid.uuid4().hex[:12]}",
    }
    return {"messages": [AIMessage(content=content, tool_calls=[tool_call])]}


# ── Routing ──────────────────────────────────────────────────────────────────


def route_after_model(
    state: AgentState,
    *,
    registry: ToolRegistry,
    operator: Operator,
) -> Route:
    """Pick the branch to take once the model has answered.

    A proposed call to a registered tool goes straight to the tool node.
    Anything else needs a human: ``y``/``yes`` sends the question to the
    model directly, any other reply (or none) ends with the no-tools message.
    """
    last_message = state["messages"][-1]
    tool_call = proposed_tool_call(last_message)

    if tool_call and tool_call["name"] in registry:
        log.info("router.decision", route=Route.INVOKE_TOOL.value, tool=tool_call["name"])
        return Route.INVOKE_TOOL

    reply = operator(config.OPERATOR_PROMPT)
    if not reply:
        log.info("router.operator_silent")
        route = Route.NO_TOOLS
    elif is_affirmative(reply):
        route = Route.USE_FALLBACK_MODEL
    else:
        route = Route.NO_TOOLS

    log.info("router.decision", route=route.value, operator_reply=reply)
    return route


# ── Branch nodes ─────────────────────────────────────────────────────────────


def _determine_action(state: AgentState) -> AgentAction:
    """Rebuild the proposed tool call from the last message."""
    last_message = state["messages"][-1]
    tool_call = proposed_tool_call(last_message)
    if tool_call is None:
        raise ModelOutputError("Last message does not propose a tool call.")
    return AgentAction(
        tool=tool_call["name"],
        tool_input=json.dumps(tool_call["args"]),
        log=f"Invoking tool '{tool_call['name']}'",
    )


def invoke_tool(
    state: AgentState,
    *,
    registry: ToolRegistry,
    tool_logger: Optional[ToolUsageLogger] = None,
) -> dict:
    """Run the proposed tool with the first two argument values, in order."""
    action = _determine_action(state)
    descriptor = registry.get(action.tool)

    arguments = list(json.loads(action.tool_input).values())
    if len(arguments) < 2:
        raise ModelOutputError(
            f"Tool '{action.tool}' takes two arguments, model supplied {len(arguments)}."
        )
    a, b = arguments[0], arguments[1]

    result = descriptor.invoke(a, b)
    log.info("tool.invoked", tool=action.tool, a=a, b=b, result=result)

    if tool_logger is not None:
        tool_logger.record(_question(state), action.tool, a, b, result)

    tool_call_id = proposed_tool_call(state["messages"][-1])["id"]
    return {
        "messages": [
            ToolMessage(content=str(result), name=action.tool, tool_call_id=tool_call_id)
        ]
    }


def use_fallback_model(state: AgentState, *, gateway: ModelGateway) -> dict:
    """Answer the question with the model alone, after the operator agreed."""
    response = gateway.answer(_question(state))
    return {"messages": [AIMessage(content=response)]}


def no_tools(state: AgentState, *, registry: ToolRegistry) -> dict:
    """Explain that none of the registered tools can help."""
    return {
        "messages": [
            AIMessage(
                content=(
                    "Sorry, your question cannot be answered using the available tools. "
                    f"I only have {', '.join(registry.names)} tools in my list."
                )
            )
        ]
    }
