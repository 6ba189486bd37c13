"""Load handler descriptors from the YAML handler files.

Reads spec/ext.dart.handler.yaml and spec/ext.flutter.handler.yaml and
concatenates their handlers lists, Dart VM entries first.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import yaml

from .descriptor import HandlerDescriptor, parse_descriptor
from .errors import ConfigError

SPEC_DIR = Path(__file__).parent.parent / "spec"
DART_HANDLERS_PATH = SPEC_DIR / "ext.dart.handler.yaml"
FLUTTER_HANDLERS_PATH = SPEC_DIR / "ext.flutter.handler.yaml"
HANDLER_FILES = (DART_HANDLERS_PATH, FLUTTER_HANDLERS_PATH)


def load_handler_file(path: Path) -> list[HandlerDescriptor]:
    """Load and validate a single handler YAML file."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Handler file not found: {path}")
    except OSError as e:
        raise ConfigError(f"Cannot read handler file {path}: {e}")
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path} is not valid UTF-8: {e}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"{path.name}: YAML root must be a mapping")

    handlers = data.get("handlers")
    if not isinstance(handlers, list):
        raise ConfigError(f"{path.name}: 'handlers' must be a list")

    return [parse_descriptor(raw, path.name, i) for i, raw in enumerate(handlers)]


def load_handlers(paths: Iterable[Path] | None = None) -> list[HandlerDescriptor]:
    """Load every handler file and concatenate the descriptors in file order.

    Duplicate names are kept; the generated dispatch map resolves them
    last-wins.
    """
    handlers: list[HandlerDescriptor] = []
    for path in HANDLER_FILES if paths is None else paths:
        handlers.extend(load_handler_file(path))
    return handlers
