import json
from pathlib import Path
from typing import Any, Dict, List

from recordstore.exceptions import StorageReadError


def read_collection(path: Path) -> List[Dict[str, Any]]:
    """
    Load a collection (JSON array of objects) from disk.

    A missing file is an empty collection. A file that exists but cannot
    be read or does not hold an array of objects raises StorageReadError.
    """
    p = Path(path)
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise StorageReadError("Could not read collection", p, e) from e

    if not isinstance(data, list):
        raise StorageReadError(
            "Collection file does not hold an array", p,
            TypeError(f"top-level {type(data).__name__}"),
        )
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise StorageReadError(
                "Collection file holds a non-object record", p,
                TypeError(f"index {i} is {type(item).__name__}"),
            )
    return data
