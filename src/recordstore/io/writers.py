import json
import os
import uuid
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from recordstore.exceptions import StorageWriteError


def dumps_collection(records: List[Dict[str, Any]]) -> str:
    """Serialize a collection the way it is kept on disk."""
    return json.dumps(records, indent=2, ensure_ascii=False) + "\n"


def _tmp_path(out: Path) -> Path:
    # unique per write so concurrent writers never share a temp file
    return out.with_name(f".{out.name}.{uuid.uuid4().hex}.tmp")


def atomic_write_json(records: List[Dict[str, Any]], out: Path) -> None:
    """
    Write the full collection to ``out`` atomically.

    Readers either see the previous file or the new one, never a partial
    write. On failure the temporary file is removed and the target is
    left untouched.
    """
    out = Path(out)
    tmp = _tmp_path(out)
    try:
        payload = dumps_collection(records)
        out.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        tmp.replace(out)             # atomic replace on same filesystem
    except (OSError, TypeError, ValueError) as e:
        tmp.unlink(missing_ok=True)
        raise StorageWriteError("Could not write collection", out, e) from e


def atomic_write_csv(df: pd.DataFrame, out: Path) -> None:
    out = Path(out)
    tmp = _tmp_path(out)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(tmp, index=False, encoding="utf-8")
        tmp.replace(out)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise StorageWriteError("Could not write export", out, e) from e
