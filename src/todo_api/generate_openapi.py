"""
Utility script to generate and write the OpenAPI schema for the FastAPI app.

Serializes the app's OpenAPI document so API clients and documentation tools can
consume a stable schema without running the server.

Usage:
    python -m todo_api.generate_openapi [output_path]

The default output path is interfaces/openapi.json relative to the current directory.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from .main import create_app, openapi_tags

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = os.path.join("interfaces", "openapi.json")


def _ensure_tags(schema: Dict[str, Any]) -> None:
    """
    Ensure the schema carries every tag declared in openapi_tags. Existing tag
    definitions are not overridden.
    """
    existing_tags: List[Dict[str, Any]] = schema.get("tags", []) or []
    existing_names = {t.get("name") for t in existing_tags if isinstance(t, dict)}
    for tag in openapi_tags:
        if tag.get("name") not in existing_names:
            existing_tags.append(tag)
    if existing_tags:
        schema["tags"] = existing_tags


# PUBLIC_INTERFACE
def generate_openapi(out_path: str = DEFAULT_OUTPUT) -> str:
    """Write the OpenAPI schema to out_path, creating directories as needed, and return the path."""
    schema = create_app().openapi()
    _ensure_tags(schema)

    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    logger.info("Wrote OpenAPI schema to %s", out_path)
    return out_path


def main(argv: Optional[List[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = generate_openapi(args[0] if args else DEFAULT_OUTPUT)
    print(f"Wrote OpenAPI schema to: {path}")


if __name__ == "__main__":
    main()
