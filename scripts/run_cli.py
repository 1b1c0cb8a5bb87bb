"""Answer one question from the command line.

Usage:
    python scripts/run_cli.py what is 2 plus 2
    python scripts/run_cli.py --reply y what colour is the moon
    python scripts/run_cli.py --mermaid
"""

import argparse
import os
import sys

# Ensure the project root is on the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from toolbox import default_registry  # noqa: E402
from toolgraph import config  # noqa: E402
from toolgraph.audit import ToolUsageLogger  # noqa: E402
from toolgraph.errors import AgentError  # noqa: E402
from toolgraph.gateway import default_gateway  # noqa: E402
from toolgraph.graph import answer, build_graph  # noqa: E402
from toolgraph.human import ConsoleOperator, scripted_operator  # noqa: E402
from toolgraph.observability import configure_logging  # noqa: E402

DEFAULT_QUESTION = "what is 2 plus 2"


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Route a question to a tool or the model.")
    parser.add_argument("question", nargs="*", help=f"defaults to '{DEFAULT_QUESTION}'")
    parser.add_argument(
        "--reply",
        help="answer the 'ask the model directly?' prompt up front instead of on stdin",
    )
    parser.add_argument(
        "--mermaid",
        action="store_true",
        help="print the graph as a Mermaid diagram and exit",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    configure_logging()

    registry = default_registry()
    operator = scripted_operator(args.reply) if args.reply is not None else ConsoleOperator()
    tool_logger = ToolUsageLogger() if config.TOOL_LOG_ENABLED else None

    try:
        graph = build_graph(registry, default_gateway(), operator, tool_logger=tool_logger)
    except AgentError as e:
        print(f"\033[1;31mError:\033[0m {e}")
        return 1

    if args.mermaid:
        print(graph.get_graph().draw_mermaid())
        return 0

    question = " ".join(args.question) or DEFAULT_QUESTION
    print("=" * 60)
    print("  Tool Graph: tools, fallback model, human in the loop")
    print("=" * 60)
    print(f"\033[1;36mQuestion:\033[0m {question}")

    try:
        result = answer(graph, question)
    except AgentError as e:
        print(f"\033[1;31mError:\033[0m {e}")
        return 1

    print(f"\033[1;35mAnswer:\033[0m {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
