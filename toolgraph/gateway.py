"""Model gateway: the single place the backing language model is called.

Two calls are exposed:

* :meth:`ModelGateway.choose_tool` asks the model which registered tool
  answers the question and parses the reply into a :class:`ToolChoice`.
* :meth:`ModelGateway.answer` asks the model the question directly and
  returns its text.

Any model that implements LangChain's chat model interface works; the
default is Gemini, configured from :mod:`toolgraph.config`.
"""

from typing import Any

from langchain_core.exceptions import OutputParserException
from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import JsonOutputParser, StrOutputParser
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from toolgraph import config
from toolgraph.errors import ModelOutputError
from toolgraph.observability import get_logger
from toolgraph.prompts import answer_prompt, tool_choice_prompt

log = get_logger(__name__)


class ToolChoice(BaseModel):
    """The model's pick of tool and arguments for a question."""

    model_config = ConfigDict(frozen=True)

    name: str
    arguments: dict[str, Any]

    @field_validator("arguments", mode="before")
    @classmethod
    def _null_arguments_are_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def is_no_tool(self) -> bool:
        """True when the model reported that no tool applies."""
        return self.name == config.NO_TOOL_SENTINEL


class ModelGateway:
    """Wraps a chat model with a JSON tool-choice chain and a free-text chain."""

    def __init__(self, model: BaseChatModel) -> None:
        self._tool_chain = tool_choice_prompt | model | JsonOutputParser()
        self._answer_chain = answer_prompt | model | StrOutputParser()

    def choose_tool(self, question: str, rendered_tools: str) -> ToolChoice:
        """Ask the model which tool answers *question*.

        Raises:
            ModelOutputError: If the reply is not a JSON object with
                ``name`` and ``arguments`` keys.
        """
        try:
            raw = self._tool_chain.invoke(
                {"question": question, "rendered_tools": rendered_tools}
            )
        except OutputParserException as exc:
            raise ModelOutputError(f"Model reply is not valid JSON: {exc}") from exc

        try:
            choice = ToolChoice.model_validate(raw)
        except ValidationError as exc:
            raise ModelOutputError(
                f"Model reply {raw!r} is not a tool choice with 'name' and 'arguments'"
            ) from exc

        log.info("model.tool_choice", tool=choice.name, arguments=choice.arguments)
        return choice

    def answer(self, question: str) -> str:
        """Ask the model *question* directly, with no tools involved."""
        response = self._answer_chain.invoke({"question": question})
        log.info("model.free_answer", chars=len(response))
        return response


def build_gemini_model() -> BaseChatModel:
    """Build the Gemini chat model described by the environment."""
    from langchain_google_genai import ChatGoogleGenerativeAI

    return ChatGoogleGenerativeAI(
        model=config.MODEL_NAME,
        temperature=config.TEMPERATURE,
        google_api_key=config.GOOGLE_API_KEY or None,
    )


def default_gateway() -> ModelGateway:
    return ModelGateway(build_gemini_model())
