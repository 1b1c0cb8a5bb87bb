"""Tests for the model gateway's parsing of model replies."""

import pytest


def _gateway(*responses):
    from langchain_core.language_models.fake_chat_models import FakeListChatModel

    from toolgraph.gateway import ModelGateway

    return ModelGateway(FakeListChatModel(responses=list(responses)))


def test_choose_tool_parses_json():
    choice = _gateway('{"name": "adder", "arguments": {"a": 2, "b": 2}}').choose_tool("what is 2 plus 2", "adder")

    assert choice.name == "adder"
    assert choice.arguments == {"a": 2, "b": 2}
    assert not choice.is_no_tool


def test_choose_tool_accepts_fenced_json():
    """Models often wrap JSON in a markdown code fence."""
    reply = '```json\n{"name": "multiply", "arguments": {"a": 3, "b": 4}}\n```'

    choice = _gateway(reply).choose_tool("what is 3 times 4", "multiply")

    assert choice.name == "multiply"


def test_choose_tool_sentinel():
    choice = _gateway('{"name": "NA", "arguments": {}}').choose_tool("what colour is the moon", "adder")

    assert choice.is_no_tool
    assert choice.arguments == {}


def test_choose_tool_null_arguments_are_empty():
    choice = _gateway('{"name": "NA", "arguments": null}').choose_tool("q", "adder")

    assert choice.arguments == {}


@pytest.mark.parametrize(
    "reply",
    [
        "use the adder please",
        '{"name": "adder"}',
        '{"arguments": {"a": 1, "b": 2}}',
        '{"name": "adder", "arguments": [1, 2]}',
        "[1, 2]",
    ],
)
def test_choose_tool_rejects_malformed_output(reply):
    """Anything other than {name, arguments} is a ModelOutputError."""
    from toolgraph.errors import ModelOutputError

    with pytest.raises(ModelOutputError):
        _gateway(reply).choose_tool("what is 1 plus 2", "adder")


def test_tool_choice_is_immutable():
    from pydantic import ValidationError

    from toolgraph.gateway import ToolChoice

    choice = ToolChoice(name="adder", arguments={"a": 1, "b": 2})
    with pytest.raises(ValidationError):
        choice.name = "multiply"


def test_answer_returns_text():
    assert _gateway("Mostly grey.").answer("what colour is the moon") == "Mostly grey."


def test_tool_choice_prompt_includes_tools_and_question():
    from toolgraph.prompts import tool_choice_prompt

    messages = tool_choice_prompt.format_messages(
        question="what is 2 plus 2", rendered_tools="adder(a, b) - adds"
    )

    assert "adder(a, b) - adds" in messages[0].content
    assert messages[-1].content == "what is 2 plus 2"
