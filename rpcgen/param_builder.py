"""Build the RPC params object literal for a handler.

Each entry in a descriptor's `parameters` mapping carries a rule:
- ""            -> name: params?.name
- "port"        -> name: port
- "arg"         -> arg: params?.name
- "arg.<field>" -> collected into arg: { field: params?.name, ... },
                   emitted once after all top-level entries
"""

from __future__ import annotations

from .descriptor import is_identifier
from .errors import MappingRuleError

PASSTHROUGH = "passthrough"
PORT = "port"
ARG = "arg"
ARG_FIELD = "arg_field"

_ARG_PREFIX = "arg."


def classify_rule(param_name: str, rule: str) -> tuple[str, str | None]:
    """Classify a mapping rule, returning (kind, field).

    `field` is only set for "arg.<field>" rules.

    Raises:
        MappingRuleError: If the rule is not one of the known forms.
    """
    if rule == "":
        return PASSTHROUGH, None
    if rule == "port":
        return PORT, None
    if rule == "arg":
        return ARG, None
    if rule.startswith(_ARG_PREFIX):
        field = rule[len(_ARG_PREFIX):]
        if not is_identifier(field):
            raise MappingRuleError(
                f"Parameter '{param_name}': invalid argument field in rule {rule!r}"
            )
        return ARG_FIELD, field
    raise MappingRuleError(
        f"Parameter '{param_name}': unrecognized mapping rule {rule!r}"
        " (expected '', 'port', 'arg' or 'arg.<field>')"
    )


def build_params_expression(parameters: dict[str, str]) -> str:
    """Build the object literal passed as the RPC params.

    Returns '{}' when there are no parameters.
    """
    if not parameters:
        return "{}"

    entries: list[str] = []
    arg_properties: list[str] = []
    # parameter that already owns the top-level `arg` key
    arg_owner: str | None = None

    for param_name, rule in parameters.items():
        kind, field = classify_rule(param_name, rule)
        if kind == ARG or (param_name == "arg" and kind != ARG_FIELD):
            if arg_owner is not None or arg_properties:
                other = f"'{arg_owner}'" if arg_owner else "an 'arg.<field>' rule"
                raise MappingRuleError(
                    f"Parameter '{param_name}': top-level 'arg' key cannot be"
                    f" combined with {other}"
                )
            arg_owner = param_name

        if kind == PASSTHROUGH:
            entries.append(f"{param_name}: params?.{param_name}")
        elif kind == PORT:
            entries.append(f"{param_name}: port")
        elif kind == ARG:
            entries.append(f"arg: params?.{param_name}")
        else:
            if arg_owner is not None:
                raise MappingRuleError(
                    f"Parameter '{param_name}': 'arg.{field}' cannot be combined"
                    f" with the top-level 'arg' key from '{arg_owner}'"
                )
            arg_properties.append(f"{field}: params?.{param_name}")

    if arg_properties:
        entries.append(f"arg: {{ {', '.join(arg_properties)} }}")

    return f"{{ {', '.join(entries)} }}"


def param_fields(parameters: dict[str, str]) -> list[str]:
    """Return the parameter names read from the incoming params bag."""
    return [
        name for name, rule in parameters.items()
        if classify_rule(name, rule)[0] != PORT
    ]
