"""Render templates and write generated output.

Takes the context from context_builder and produces
generated/flutter_rpc_handlers.generated.ts and
generated/create_rpc_handler_map.generated.ts.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2

TEMPLATE_DIR = Path(__file__).parent / "templates"
OUTPUT_DIR = Path(__file__).parent.parent / "generated"

HANDLERS_TEMPLATE = "flutter_rpc_handlers.ts.j2"
HANDLER_MAP_TEMPLATE = "create_rpc_handler_map.ts.j2"
HANDLERS_FILENAME = "flutter_rpc_handlers.generated.ts"
HANDLER_MAP_FILENAME = "create_rpc_handler_map.generated.ts"


@dataclass(frozen=True)
class GeneratedArtifact:
    """Rendered source for both output files."""
    handlers_source: str
    handler_map_source: str


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def _finish(text: str) -> str:
    return text.strip() + "\n"


def render(context: dict[str, Any]) -> GeneratedArtifact:
    """Render both templates. Nothing is written to disk."""
    env = _environment()
    return GeneratedArtifact(
        handlers_source=_finish(env.get_template(HANDLERS_TEMPLATE).render(**context)),
        handler_map_source=_finish(env.get_template(HANDLER_MAP_TEMPLATE).render(**context)),
    )


def write(artifact: GeneratedArtifact, output_dir: Path | None = None) -> tuple[Path, Path]:
    """Write both rendered files, overwriting any existing content."""
    output_dir = Path(output_dir or OUTPUT_DIR)
    output_dir.mkdir(parents=True, exist_ok=True)

    handlers_path = output_dir / HANDLERS_FILENAME
    handler_map_path = output_dir / HANDLER_MAP_FILENAME
    handlers_path.write_text(artifact.handlers_source, encoding="utf-8")
    handler_map_path.write_text(artifact.handler_map_source, encoding="utf-8")

    print(f"Generated FlutterRpcHandlers class at: {handlers_path}")
    print(f"Generated createRpcHandlerMap function at: {handler_map_path}")
    return handlers_path, handler_map_path


def generate(context: dict[str, Any], output_dir: Path | None = None) -> tuple[Path, Path]:
    """Render both templates, then write them to output_dir."""
    artifact = render(context)
    return write(artifact, output_dir)
