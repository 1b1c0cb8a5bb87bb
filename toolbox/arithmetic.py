"""Arithmetic tools: two-operand numeric computations.

Every tool here takes exactly two numbers, ``a`` and ``b``, which is the
argument contract the orchestrator's tool node relies on.
"""

from typing import Union

from langchain_core.tools import tool
from pydantic import BaseModel, Field

Number = Union[int, float]


class Operands(BaseModel):
    a: Number = Field(description="the first number")
    b: Number = Field(description="the second number")


def _format_number(value: Number) -> str:
    """Render whole-valued floats without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@tool("adder", args_schema=Operands)
def adder(a: Number, b: Number) -> str:
    """This tool is used to add (plus) two numbers together."""
    return f"The sum of {_format_number(a)} and {_format_number(b)} is {_format_number(a + b)}"


@tool("multiply", args_schema=Operands)
def multiply(a: Number, b: Number) -> str:
    """This tool is used to multiply (times) two numbers together."""
    return _format_number(a * b)
