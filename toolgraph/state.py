"""Agent state definition.

The state is the shared data structure that flows through every node in the
graph. Its only channel is the conversation history, merged by plain list
concatenation so each node's delta lands after everything already there.
"""

import operator
from enum import Enum
from typing import Annotated, Optional, TypedDict

from langchain_core.messages import (
    AIMessage,
    BaseMessage,
    HumanMessage,
    ToolMessage,
)


class AgentState(TypedDict):
    """Shared state for the orchestration graph.

    Attributes:
        messages: Conversation history. Seeded with the user's question;
                  every node returns a list that is appended to it.
    """

    messages: Annotated[list[BaseMessage], operator.add]


class Origin(str, Enum):
    """Who produced a message."""

    USER = "user"
    ASSISTANT = "assistant"
    TOOL_RESULT = "tool-result"


def origin_of(message: BaseMessage) -> Origin:
    if isinstance(message, HumanMessage):
        return Origin.USER
    if isinstance(message, ToolMessage):
        return Origin.TOOL_RESULT
    if isinstance(message, AIMessage):
        return Origin.ASSISTANT
    raise ValueError(f"Unsupported message type: {type(message).__name__}")


def proposed_tool_call(message: BaseMessage) -> Optional[dict]:
    """Return the tool call carried by *message*, or None.

    Only assistant messages propose tool calls, and the model node never
    attaches more than one.
    """
    tool_calls = getattr(message, "tool_calls", None)
    if not tool_calls:
        return None
    return tool_calls[0]


def initial_state(question: str) -> AgentState:
    """Seed a fresh run with the user's question."""
    return {"messages": [HumanMessage(content=question)]}
