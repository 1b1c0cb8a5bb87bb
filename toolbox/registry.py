"""Immutable tool registry.

Maps each tool name to a :class:`ToolDescriptor` holding its description,
ordered argument schema and the callable that runs it. The registry is
built once, explicitly, and handed to the graph; it never changes after
construction.

Usage::

    from toolbox.registry import ToolRegistry
    registry = ToolRegistry([adder, multiply])
    registry.get("adder").invoke(2, 2)
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Iterator

from langchain_core.tools import BaseTool
from langchain_core.tools.render import render_text_description

from toolgraph.errors import ToolNotFoundError


@dataclass(frozen=True)
class ToolDescriptor:
    """A registered tool and the metadata rendered into model prompts."""

    name: str
    description: str
    argument_schema: tuple[tuple[str, str], ...]
    tool: BaseTool = field(repr=False, compare=False)

    @classmethod
    def from_tool(cls, tool: BaseTool) -> "ToolDescriptor":
        return cls(
            name=tool.name,
            description=tool.description,
            argument_schema=_argument_schema(tool),
            tool=tool,
        )

    def invoke(self, a: Any, b: Any) -> Any:
        """Run the tool with its two positional operands."""
        return self.tool.invoke({"a": a, "b": b})


class ToolRegistry:
    """Read-only name → descriptor mapping, in registration order."""

    def __init__(self, tools: Iterable[BaseTool]) -> None:
        tools = list(tools)
        descriptors: dict[str, ToolDescriptor] = {}
        for tool in tools:
            if tool.name in descriptors:
                raise ValueError(f"Duplicate tool name: '{tool.name}'")
            descriptors[tool.name] = ToolDescriptor.from_tool(tool)

        self._tools = tuple(tools)
        self._descriptors = MappingProxyType(descriptors)

    # ── Public API ────────────────────────────────────────────────────────

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._descriptors.values())

    def __len__(self) -> int:
        return len(self._descriptors)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._descriptors)

    def get(self, name: str) -> ToolDescriptor:
        """Return the descriptor for *name*.

        Raises:
            ToolNotFoundError: If no tool with that name is registered.
        """
        try:
            return self._descriptors[name]
        except KeyError:
            raise ToolNotFoundError(name) from None

    def describe(self) -> list[tuple[str, str, tuple[tuple[str, str], ...]]]:
        """Return ``(name, description, schema)`` for every tool, in order."""
        return [(d.name, d.description, d.argument_schema) for d in self]

    def render(self) -> str:
        """Render the tools as the plain-text block placed in the model prompt."""
        return render_text_description(list(self._tools))


def _argument_schema(tool: BaseTool) -> tuple[tuple[str, str], ...]:
    """Extract ``(parameter, type)`` pairs from the tool's args schema."""
    pairs: list[tuple[str, str]] = []
    for arg_name, arg_info in tool.args.items():
        if "type" in arg_info:
            arg_type = arg_info["type"]
        elif "anyOf" in arg_info:
            arg_type = " | ".join(
                option.get("type", "any") for option in arg_info["anyOf"]
            )
        else:
            arg_type = "any"
        pairs.append((arg_name, arg_type))
    return tuple(pairs)
