"""Build Jinja2 template context from loaded handler descriptors.

Derives method names, params types, doc comment lines and the RPC params
expression for each descriptor, and assembles the context dict shared by
both templates.
"""

from __future__ import annotations

import sys
from collections import Counter
from typing import Any

from .descriptor import HandlerDescriptor
from .errors import MappingRuleError
from .naming import build_method_name, build_params_type_name, format_doc_comment
from .param_builder import build_params_expression, param_fields

# RpcUtilities methods used for each call path
_INVOKE_DART_VM = "callDartVm"
_INVOKE_FLUTTER_EXTENSION = "callFlutterExtension"


def _build_handler(descriptor: HandlerDescriptor) -> dict[str, Any]:
    """Build the template entry for a single descriptor."""
    try:
        params_expression = build_params_expression(descriptor.parameters)
        fields = param_fields(descriptor.parameters)
    except MappingRuleError as e:
        raise MappingRuleError(
            f"{descriptor.source}: handler '{descriptor.name}': {e}"
        ) from e

    invoke = (
        _INVOKE_FLUTTER_EXTENSION
        if descriptor.needs_dart_service_extension_proxy
        else _INVOKE_DART_VM
    )

    return {
        "name": descriptor.name,
        "method_name": build_method_name(descriptor.name),
        "params_type": build_params_type_name(descriptor.name),
        "param_fields": fields,
        "doc_lines": format_doc_comment(descriptor.description),
        "rpc_method": descriptor.rpc_method,
        "needs_debug_verification": descriptor.needs_debug_verification,
        "invoke": invoke,
        "params_expression": params_expression,
        "response_wrapper": descriptor.response_wrapper,
        "has_params": bool(descriptor.parameters),
    }


def find_duplicates(handlers: list[HandlerDescriptor]) -> list[str]:
    """Return handler names that occur more than once, in first-seen order."""
    counts = Counter(h.name for h in handlers)
    return [name for name, count in counts.items() if count > 1]


def build_context(handlers: list[HandlerDescriptor]) -> dict[str, Any]:
    """Build the full template context from the loaded descriptors."""
    entries = [_build_handler(h) for h in handlers]

    duplicates = find_duplicates(handlers)
    for name in duplicates:
        print(
            f"Warning: handler '{name}' is defined more than once;"
            " the last definition wins in the dispatch map",
            file=sys.stderr,
        )

    sources: list[str] = []
    for h in handlers:
        if h.source and h.source not in sources:
            sources.append(h.source)

    return {
        "handlers": entries,
        "handler_count": len(entries),
        "duplicates": duplicates,
        "sources": sources,
    }
