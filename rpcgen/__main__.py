"""Entry point: python -m rpcgen

Reads spec/ext.dart.handler.yaml and spec/ext.flutter.handler.yaml,
generates generated/flutter_rpc_handlers.generated.ts and
generated/create_rpc_handler_map.generated.ts.
"""

from __future__ import annotations

import sys

import jinja2

from .codegen import generate
from .context_builder import build_context
from .errors import GenerationError
from .loader import load_handlers


def main() -> int:
    try:
        handlers = load_handlers()
        context = build_context(handlers)
        generate(context)
    except (GenerationError, OSError, jinja2.TemplateError) as e:
        print(f"Error generating RPC handlers: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
