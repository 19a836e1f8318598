"""JSON helpers for writing decoded feed entities and reading fixtures."""

import dataclasses
import json
from pathlib import Path
from typing import Any


def to_jsonable(data: Any) -> Any:
    """Turn a decoded entity (a dataclass tree) into plain dicts and lists."""
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return dataclasses.asdict(data)
    return data


def to_json(data: Any, indent: int = 2) -> str:
    """Render an entity or plain data as JSON, keeping non-ASCII text readable."""
    return json.dumps(to_jsonable(data), indent=indent, ensure_ascii=False)


def save_json(data: Any, filepath: Path | str, indent: int = 2) -> Path:
    """Write an entity or plain data to a JSON file, creating parent directories."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(to_json(data, indent=indent), encoding="utf-8")
    return filepath


def load_json(filepath: Path | str) -> Any:
    """Load a JSON file, e.g. a saved feed page or a canned response."""
    with open(filepath, "r", encoding="utf-8") as f:
        return json.load(f)
