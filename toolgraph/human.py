"""Human-in-the-loop decision capability.

The router consults an *operator* when no registered tool can answer the
question. An operator is any callable that takes the prompt text and returns
the human's raw reply (``None`` or ``""`` when nothing was typed). The router
only ever interprets the reply through :func:`is_affirmative`.
"""

import re
import sys
from typing import Callable, Optional, TextIO

Operator = Callable[[str], Optional[str]]

_AFFIRMATIVE = re.compile(r"^y(es)?$", re.IGNORECASE)


def is_affirmative(reply: Optional[str]) -> bool:
    """True for ``y`` or ``yes`` in any case; everything else means no."""
    if not reply:
        return False
    return bool(_AFFIRMATIVE.match(reply.strip()))


class ConsoleOperator:
    """Ask the question on a terminal and read a single line back.

    The input stream is closed once the reply has been read, whatever the
    answer, so the process is not left waiting on input after the run ends.
    With the default ``close_after=True`` an instance is therefore single-use:
    a second call reads from a closed stream and raises ``ValueError``. Build a
    new operator per run, or pass ``close_after=False`` to ask repeatedly.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
        close_after: bool = True,
    ) -> None:
        self._stream = stream
        self._output = output
        self._close_after = close_after

    def __call__(self, prompt: str) -> str:
        stream = self._stream if self._stream is not None else sys.stdin
        output = self._output if self._output is not None else sys.stdout
        try:
            output.write(prompt)
            output.flush()
            reply = stream.readline()
        finally:
            if self._close_after:
                stream.close()
        return reply.strip()


def scripted_operator(*replies: Optional[str]) -> Operator:
    """Operator that answers from a fixed list of replies, in order.

    Once the list is exhausted it behaves like an operator who typed nothing.
    """
    pending = list(replies)

    def _answer(prompt: str) -> Optional[str]:
        return pending.pop(0) if pending else None

    return _answer
