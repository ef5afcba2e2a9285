#!/usr/bin/env python3
"""
Export the OpenAPI document of the farm API to a file.

Usage:
  python backend/scripts/export_openapi.py --output docs/openapi.json

The document is generated from the route table in api/farms.py, so it stays
in step with the handlers without any documentation metadata in their bodies.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

# Allow running as a plain script from the repository root
BACKEND_DIR = Path(__file__).resolve().parent.parent
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


def build_openapi() -> dict:
    """Return the OpenAPI schema of the application."""
    from main import app
    return app.openapi()


def export_openapi(output: Path, indent: int = 2) -> Path:
    """
    Write the OpenAPI schema as JSON.

    Args:
        output: Destination file (parent directories are created)
        indent: JSON indentation

    Returns:
        The path written
    """
    output.parent.mkdir(parents=True, exist_ok=True)
    schema = build_openapi()
    output.write_text(json.dumps(schema, indent=indent, sort_keys=True) + "\n", encoding="utf-8")
    return output


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Export the farm API OpenAPI schema")
    parser.add_argument("--output", "-o", type=Path, default=Path("docs/openapi.json"),
                        help="Output file (default: docs/openapi.json)")
    parser.add_argument("--indent", type=int, default=2)
    args = parser.parse_args(argv)

    path = export_openapi(args.output, indent=args.indent)
    print(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
