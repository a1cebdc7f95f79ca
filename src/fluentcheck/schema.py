"""Generate JSON Schema and docs for the assertion config YAML format."""

from __future__ import annotations

import json
from pathlib import Path

from fluentcheck.config import AssertionConfig


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    return AssertionConfig.model_json_schema()


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def _describe(name: str, prop: dict) -> str:
    kind = prop.get("type", "object")
    default = prop.get("default")
    if default is None or isinstance(default, dict):
        return f"- `{name}`: {kind}"
    return f"- `{name}`: {kind} (default: `{json.dumps(default)}`)"


def generate_schema_doc() -> str:
    schema = generate_json_schema()
    defs = schema.get("$defs", {})

    lines: list[str] = []
    lines.append("# fluentcheck config schema")
    lines.append("")
    lines.append("This doc is generated from the Pydantic models.")
    lines.append("")
    lines.append("## Top-level keys")
    for name, prop in schema.get("properties", {}).items():
        lines.append(_describe(name, prop))
    lines.append("")
    lines.append("## Formatting")
    for name, prop in defs.get("FormattingConfig", {}).get("properties", {}).items():
        lines.append(_describe(name, prop))

    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
