"""Tool auto-registration.

Automatically discovers and collects all `@tool`-decorated functions
from sibling modules. To add a new tool, simply create a new .py file
in this directory with functions decorated with `@langchain_core.tools.tool`.
Tools must accept exactly two numeric arguments, ``a`` and ``b``.
"""

import importlib
import pkgutil

from langchain_core.tools import BaseTool

from toolbox.registry import ToolRegistry


def get_all_tools() -> list[BaseTool]:
    """Scan the toolbox package and return all tool instances."""
    tool_list: list[BaseTool] = []

    package_path = __path__  # type: ignore[name-defined]
    for _, module_name, _ in pkgutil.iter_modules(package_path):
        if module_name.startswith("_") or module_name == "registry":
            continue
        module = importlib.import_module(f"{__name__}.{module_name}")

        # Collect anything that is a BaseTool or list of BaseTools
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if isinstance(attr, BaseTool):
                tool_list.append(attr)
            elif isinstance(attr, list) and attr and all(isinstance(t, BaseTool) for t in attr):
                tool_list.extend(attr)

    return tool_list


def default_registry() -> ToolRegistry:
    """Build a registry holding every discovered tool."""
    return ToolRegistry(get_all_tools())
