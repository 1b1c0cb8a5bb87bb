"""Centralized agent configuration.

Reads from environment variables with sensible defaults so that the
orchestrator works out of the box while remaining fully customizable.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# ── LLM Settings ──────────────────────────────────────────────────────────────
MODEL_NAME: str = os.getenv("AGENT_MODEL", "gemini-2.0-flash")
TEMPERATURE: float = float(os.getenv("AGENT_TEMPERATURE", "0.0"))

# Tool name the model returns when none of the registered tools applies.
NO_TOOL_SENTINEL: str = os.getenv("AGENT_NO_TOOL_SENTINEL", "NA")

# ── API Keys ──────────────────────────────────────────────────────────────────
GOOGLE_API_KEY: str = os.getenv("GOOGLE_API_KEY", "")

# ── Tool audit log ────────────────────────────────────────────────────────────
TOOL_LOG_ENABLED: bool = _env_flag("AGENT_TOOL_LOG_ENABLED", "true")
TOOL_LOG_DIR: str = os.path.abspath(
    os.getenv("AGENT_TOOL_LOG_DIR", os.path.join("workspace", ".tool_logs"))
)

# ── Diagnostic logging ────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("AGENT_LOG_LEVEL", "INFO")
LOG_FORMAT: str = os.getenv("AGENT_LOG_FORMAT", "console")  # console | json

# ── Prompts ───────────────────────────────────────────────────────────────────
TOOL_CHOICE_PROMPT: str = os.getenv(
    "AGENT_TOOL_CHOICE_PROMPT",
    (
        "You are a helpful assistant that has access to the following set of tools "
        "to answer the user's question.\n"
        "Here are the names and descriptions for each tool:\n"
        "{rendered_tools}\n\n"
        "Given the user's input, return the name and input of the tool that can be "
        "used to accurately and correctly answer the user's question without any "
        "further clarification or assumption. The name must be an exact match for "
        "one of the tools provided.\n"
        "If the user's input cannot be answered correctly using the provided tools "
        "and would need more clarification or data, do not make any assumptions: "
        f'return "{NO_TOOL_SENTINEL}" as the tool name with empty arguments.\n'
        "Return your response as a JSON blob with 'name' and 'arguments' keys. "
        "The value associated with the 'arguments' key should be a dictionary of "
        "parameters."
    ),
)

ANSWER_PROMPT: str = os.getenv(
    "AGENT_ANSWER_PROMPT",
    (
        "You are a helpful assistant that answers the user's question. "
        "Keep the answer short and precise. No extra summary or explanation needed."
    ),
)

OPERATOR_PROMPT: str = os.getenv(
    "AGENT_OPERATOR_PROMPT",
    (
        "Sorry, your question cannot be answered with the available tools. "
        "Ask the model directly instead? Type Y or N: "
    ),
)
