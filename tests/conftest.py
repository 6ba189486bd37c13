"""Shared fixtures for rpcgen tests.

Handler YAML files are written into tmp_path so each test controls its
own input; the real spec/*.yaml files are only read by tests that say so.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
import yaml


# ---------------------------------------------------------------------------
# Handler YAML writer
# ---------------------------------------------------------------------------

@pytest.fixture
def write_handlers(tmp_path) -> Callable[..., Path]:
    """Return a callable that writes a handlers YAML file and returns its path.

    Usage in tests::

        path = write_handlers("ext.dart.handler.yaml", [{"name": "get_vm", ...}])
    """
    def _write(filename: str, handlers: list[dict[str, Any]]) -> Path:
        path = tmp_path / filename
        path.write_text(yaml.safe_dump({"handlers": handlers}, sort_keys=False))
        return path
    return _write


# ---------------------------------------------------------------------------
# Sample descriptors
# ---------------------------------------------------------------------------

@pytest.fixture
def root_widget_entry() -> dict[str, Any]:
    """The get_root_widget descriptor as it appears in ext.flutter.handler.yaml."""
    return {
        "name": "get_root_widget",
        "description": "Utility to get the root widget of the Flutter app.",
        "rpcMethod": "ext.flutter.inspector.getRootWidget",
        "needsDebugVerification": True,
        "responseWrapper": True,
        "parameters": {"objectGroup": "arg.objectGroup"},
    }


@pytest.fixture
def vm_entry() -> dict[str, Any]:
    """A minimal Dart VM descriptor with no parameters."""
    return {
        "name": "get_version",
        "description": "Utility to get the Dart VM service protocol version.",
        "rpcMethod": "getVersion",
    }


@pytest.fixture
def handler_files(write_handlers, vm_entry, root_widget_entry) -> tuple[Path, Path]:
    """A Dart file and a Flutter file with one handler each."""
    return (
        write_handlers("ext.dart.handler.yaml", [vm_entry]),
        write_handlers("ext.flutter.handler.yaml", [root_widget_entry]),
    )
