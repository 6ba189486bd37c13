"""Handler descriptor model.

One HandlerDescriptor per entry in a handler YAML file. YAML keys are
camelCase (rpcMethod, needsDebugVerification, ...); attributes are snake_case.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from .errors import ConfigError

_SNAKE_CASE = re.compile(r"^[a-z][a-z0-9]*(_[a-z][a-z0-9]*)*$")
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# YAML key -> (attribute, default)
_FLAGS: dict[str, tuple[str, bool]] = {
    "needsDebugVerification": ("needs_debug_verification", False),
    "needsDartServiceExtensionProxy": ("needs_dart_service_extension_proxy", False),
    "responseWrapper": ("response_wrapper", True),
}


@dataclass(frozen=True)
class HandlerDescriptor:
    """A single RPC handler to generate."""
    name: str
    description: str
    rpc_method: str
    needs_debug_verification: bool = False
    needs_dart_service_extension_proxy: bool = False
    response_wrapper: bool = True
    parameters: dict[str, str] = field(default_factory=dict)
    source: str = ""


def is_identifier(name: str) -> bool:
    """Check that a name can be used as a TypeScript property access."""
    return bool(_IDENTIFIER.match(name))


def _require_str(raw: dict, key: str, context: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{context}: '{key}' must be a non-empty string")
    return value


def _parse_parameters(raw: Any, context: str) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{context}: 'parameters' must be a mapping")

    parameters: dict[str, str] = {}
    for param_name, rule in raw.items():
        if not isinstance(param_name, str) or not is_identifier(param_name):
            raise ConfigError(f"{context}: invalid parameter name {param_name!r}")
        # `objectGroup:` with no value loads as None
        if rule is None:
            rule = ""
        if not isinstance(rule, str):
            raise ConfigError(
                f"{context}: mapping rule for '{param_name}' must be a string,"
                f" got {type(rule).__name__}"
            )
        parameters[param_name] = rule
    return parameters


def parse_descriptor(raw: Any, source: str, index: int = 0) -> HandlerDescriptor:
    """Build a HandlerDescriptor from one raw YAML record.

    Args:
        raw: The decoded YAML entry.
        source: File name the entry came from (used in error messages).
        index: Position of the entry in the file's handlers list.

    Raises:
        ConfigError: If the entry does not have the expected shape.
    """
    context = f"{source}: handlers[{index}]"
    if not isinstance(raw, dict):
        raise ConfigError(f"{context} must be a mapping")

    name = _require_str(raw, "name", context)
    context = f"{source}: handler '{name}'"
    if not _SNAKE_CASE.match(name):
        raise ConfigError(f"{context}: name must be snake_case")

    flags: dict[str, bool] = {}
    for key, (attr, default) in _FLAGS.items():
        value = raw.get(key, default)
        if value is None:
            value = default
        if not isinstance(value, bool):
            raise ConfigError(f"{context}: '{key}' must be true or false")
        flags[attr] = value

    return HandlerDescriptor(
        name=name,
        description=_require_str(raw, "description", context),
        rpc_method=_require_str(raw, "rpcMethod", context),
        parameters=_parse_parameters(raw.get("parameters"), context),
        source=source,
        **flags,
    )
