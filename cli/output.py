"""Render the identifiers of a provisioning run."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

FORMATS = ("json", "md", "table")


def render(identifiers: Mapping[str, Any], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(dict(identifiers), indent=2)
    rows = [(key, _cell(value)) for key, value in identifiers.items()]
    if fmt == "md":
        return "\n".join(["| Key | Value |", "| --- | --- |", *(f"| {key} | {value} |" for key, value in rows)])
    if fmt == "table":
        width = max((len(key) for key, _ in rows), default=0)
        return "\n".join(f"{key.ljust(width)} : {value}" for key, value in rows)
    raise ValueError(f"Unsupported format: {fmt}")


def emit(identifiers: Mapping[str, Any], fmt: str, output_path: Path | None = None) -> None:
    """Print the rendered identifiers, or write them to ``output_path``."""
    rendered = render(identifiers, fmt)
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered + "\n", encoding="utf-8")
    else:
        print(rendered)


def _cell(value: Any) -> str:
    # the subscription payload is the only nested value
    if value is None:
        return ""
    if isinstance(value, Mapping):
        return json.dumps(dict(value), sort_keys=True)
    return str(value)


__all__ = ["FORMATS", "emit", "render"]
