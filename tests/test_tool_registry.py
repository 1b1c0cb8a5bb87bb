"""Tests for the tool registry and the built-in arithmetic tools.

These tests verify that:
- ToolRegistry holds every provided tool, in order, under a unique name
- describe() and render() expose what the model prompt needs
- Unknown names raise ToolNotFoundError
- The arithmetic tools are pure functions of their two operands
"""

import pytest


@pytest.fixture()
def all_tools():
    """Return the full set of auto-discovered tools."""
    from toolbox import get_all_tools
    return get_all_tools()


@pytest.fixture()
def registry(all_tools):
    """Build a ToolRegistry with all discovered tools."""
    from toolbox.registry import ToolRegistry
    return ToolRegistry(all_tools)


# ── Registry ─────────────────────────────────────────────────────────────────


def test_tools_are_discovered(all_tools):
    """Tool auto-discovery finds the built-in tools."""
    tool_names = [t.name for t in all_tools]

    assert "adder" in tool_names
    assert "multiply" in tool_names


def test_registry_indexes_all_tools(registry, all_tools):
    """Every discovered tool is registered under its own name."""
    assert len(registry) == len(all_tools)
    assert set(registry.names) == {t.name for t in all_tools}
    for t in all_tools:
        assert t.name in registry


def test_registry_preserves_registration_order():
    """names follows the order the tools were given in."""
    from toolbox.arithmetic import adder, multiply
    from toolbox.registry import ToolRegistry

    assert ToolRegistry([multiply, adder]).names == ("multiply", "adder")


def test_registry_rejects_duplicate_names():
    """Two tools with the same name cannot share a registry."""
    from toolbox.arithmetic import adder
    from toolbox.registry import ToolRegistry

    with pytest.raises(ValueError, match="adder"):
        ToolRegistry([adder, adder])


def test_registry_unaffected_by_later_changes_to_input():
    """Mutating the list the registry was built from changes nothing."""
    from toolbox.arithmetic import adder, multiply
    from toolbox.registry import ToolRegistry

    tools = [adder]
    registry = ToolRegistry(tools)
    tools.append(multiply)

    assert registry.names == ("adder",)
    assert "multiply" not in registry


def test_registry_get_unknown_raises(registry):
    """get() raises ToolNotFoundError naming the missing tool."""
    from toolgraph.errors import ToolNotFoundError

    with pytest.raises(ToolNotFoundError) as exc_info:
        registry.get("divide")
    assert exc_info.value.tool_name == "divide"


def test_registry_describe(registry):
    """describe() lists name, description and the ordered (a, b) schema."""
    described = {name: (description, schema) for name, description, schema in registry.describe()}

    description, schema = described["adder"]
    assert "add" in description
    assert [param for param, _ in schema] == ["a", "b"]
    assert all("number" in arg_type for _, arg_type in schema)


def test_registry_render_mentions_every_tool(registry):
    """The rendered prompt block names and describes each tool."""
    rendered = registry.render()
    for name, description, _ in registry.describe():
        assert name in rendered
        assert description in rendered


# ── Arithmetic tools ─────────────────────────────────────────────────────────


def test_adder_tool(registry):
    """adder produces the sentence the answer is built from."""
    assert registry.get("adder").invoke(2, 2) == "The sum of 2 and 2 is 4"


def test_adder_whole_floats_render_as_integers(registry):
    assert registry.get("adder").invoke(2.5, 1.5) == "The sum of 2.5 and 1.5 is 4"


def test_multiply_tool(registry):
    assert registry.get("multiply").invoke(3, 4) == "12"
    assert registry.get("multiply").invoke(2.0, 3) == "6"
    assert registry.get("multiply").invoke(0.5, 3) == "1.5"


@pytest.mark.parametrize("name", ["adder", "multiply"])
def test_tools_are_idempotent(registry, name):
    """Calling a tool twice with the same operands gives the same output."""
    descriptor = registry.get(name)
    assert descriptor.invoke(7, 5) == descriptor.invoke(7, 5)


def test_default_registry():
    """default_registry() wraps the discovered tools."""
    from toolbox import default_registry

    assert {"adder", "multiply"} <= set(default_registry().names)
