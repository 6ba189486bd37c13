"""Exceptions raised while generating RPC handlers."""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for anything that aborts a generation run."""


class ConfigError(GenerationError):
    """Raised when a handler YAML file is missing, malformed or has a bad entry."""


class MappingRuleError(ConfigError):
    """Raised when a parameter mapping rule is not one of the known forms."""
