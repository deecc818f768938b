"""Read suite, snippet and environment documents from disk."""

import json
from pathlib import Path
from typing import Any

from suitegen.core.models import SnippetLibrary, Suite
from suitegen.utils.exceptions import ModelError, ProjectLoadError


def load_json(path: str | Path) -> dict[str, Any]:
    """Load a JSON object from a file.

    Raises:
        ProjectLoadError: If the file is missing, unreadable, not UTF-8 JSON,
            or does not hold an object.
    """
    path = Path(path)
    if not path.is_file():
        raise ProjectLoadError(str(path), "file not found")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except UnicodeDecodeError as e:
        raise ProjectLoadError(str(path), f"not valid UTF-8 ({e})") from e
    except json.JSONDecodeError as e:
        raise ProjectLoadError(str(path), f"invalid JSON ({e})") from e
    except OSError as e:
        raise ProjectLoadError(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ProjectLoadError(str(path), "expected a JSON object")
    return data


def load_suite(path: str | Path) -> Suite:
    """Load a suite document.

    Raises:
        ProjectLoadError: If the file cannot be read.
        ModelError: If the document is not a valid suite.
    """
    data = load_json(path)
    try:
        return Suite.from_dict(data)
    except ModelError as e:
        raise ModelError(f"{path}: {e}") from e


def load_snippets(path: str | Path | None) -> SnippetLibrary:
    """Load a snippet library, or an empty one when no path is given."""
    if path is None:
        return SnippetLibrary()
    data = load_json(path)
    try:
        return SnippetLibrary.from_dict(data)
    except ModelError as e:
        raise ModelError(f"{path}: {e}") from e
