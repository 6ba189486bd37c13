"""Convert snake_case handler names to TypeScript identifiers.

Examples:
  hot_reload       -> handleHotReload      (method)
  get_root_widget  -> handleGetRootWidget  (method)
  get_root_widget  -> GetRootWidgetParams  (params interface)
"""

from __future__ import annotations

import re

METHOD_PREFIX = "handle"
PARAMS_SUFFIX = "Params"


def _to_pascal_case(name: str) -> str:
    """Uppercase the first letter of each underscore-separated segment."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


def build_method_name(name: str) -> str:
    """Build the generated method name for a handler.

    Returns a name like 'handleHotReload' for 'hot_reload'.
    """
    return f"{METHOD_PREFIX}{_to_pascal_case(name)}"


def build_params_type_name(name: str) -> str:
    """Build the name of the generated params interface for a handler."""
    return f"{_to_pascal_case(name)}{PARAMS_SUFFIX}"


def format_doc_comment(description: str) -> list[str]:
    """Split a description into lines for a /** ... */ block."""
    text = description.replace("\r\n", "\n").replace("\r", "\n")
    # A literal */ would end the generated comment early
    text = text.replace("*/", "*\\/")
    lines = [re.sub(r"\s+$", "", line) for line in text.split("\n")]
    while lines and not lines[-1]:
        lines.pop()
    return lines
