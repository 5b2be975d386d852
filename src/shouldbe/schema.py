"""Generate JSON Schema and docs for the shouldbe YAML config."""

from __future__ import annotations

import json
from pathlib import Path

from shouldbe.config import ShouldbeConfig


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    return ShouldbeConfig.model_json_schema()


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def generate_schema_doc() -> str:
    schema = generate_json_schema()

    lines: list[str] = []
    lines.append("# shouldbe YAML Config")
    lines.append("")
    lines.append("This doc is generated from the Pydantic model.")
    lines.append("")
    lines.append("## Keys")
    for key, prop in schema.get("properties", {}).items():
        kind = prop.get("type", "object")
        default = json.dumps(prop.get("default"))
        lines.append(f"- `{key}`: {kind} (default: `{default}`)")
    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
