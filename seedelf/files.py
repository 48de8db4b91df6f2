# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import json

from pathlib import Path
from typing import Any

from seedelf.constants import DATA_DIR


def artifact_path(name: str) -> str:
    """
    Default location of a named json artifact, e.g. `../data/register.json`.
    """
    return f"{DATA_DIR}/{name}.json"


def save_string(path: str | Path, string: str) -> None:
    """
    Write a UTF-8 string to a file, creating parent directories if needed.

    Overwrites the file if it already exists.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(string)


def save_json(path: str | Path, data: Any) -> None:
    """
    Serialize data as pretty-printed JSON and write it to a file.

    The JSON is written with `indent=2` and `sort_keys=True` so artifacts are
    deterministic and diff cleanly.

    Args:
        path: Destination file path (string or `Path`).
        data: Any JSON-serializable Python object.

    Raises:
        TypeError: If `data` contains non-JSON-serializable objects.
        OSError: If the file cannot be created or written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True)


def load_json(path: str | Path) -> Any:
    """
    Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)
