"""Chat prompt templates for the two kinds of model call."""

from langchain_core.prompts import ChatPromptTemplate

from toolgraph import config

# Expects ``rendered_tools`` and ``question``.
tool_choice_prompt = ChatPromptTemplate.from_messages(
    [
        ("system", config.TOOL_CHOICE_PROMPT),
        ("user", "{question}"),
    ]
)

# Expects ``question``.
answer_prompt = ChatPromptTemplate.from_messages(
    [
        ("system", config.ANSWER_PROMPT),
        ("user", "{question}"),
    ]
)
