"""JSON file helpers shared by the repositories (graceful read, atomic write)."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def read_json(path: Path, default: Any):
    """Read JSON from path; missing or broken files degrade to ``default``."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Data file not found: {path}. Using empty data.")
        return default
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        return default
    if data is None or not isinstance(data, type(default)):
        logger.error(f"Unexpected content in {path}: expected {type(default).__name__}")
        return default
    return data


def write_json(path: Path, data: Any) -> None:
    """Write JSON atomically (temp file in the same directory, then move)."""
    path = Path(path)
    os.makedirs(path.parent, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}_", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(data, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
