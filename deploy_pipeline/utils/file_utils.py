# deploy_pipeline/utils/file_utils.py
"""File operation utilities"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Union


def ensure_parent_dir(file_path: Path) -> Path:
    """
    Ensure parent directory exists

    Args:
        file_path: File path

    Returns:
        Parent directory path
    """
    parent = file_path.parent
    parent.mkdir(parents=True, exist_ok=True)
    return parent


def atomic_write(file_path: Path,
                 content: Union[str, bytes],
                 mode: str = 'w') -> None:
    """
    Write file atomically

    Args:
        file_path: Target file path
        content: Content to write
        mode: Write mode ('w' or 'wb')
    """
    ensure_parent_dir(file_path)

    # Write to temporary file first
    temp_fd, temp_path = tempfile.mkstemp(dir=file_path.parent)

    try:
        with os.fdopen(temp_fd, mode) as f:
            f.write(content)

        # Atomic rename
        os.replace(temp_path, file_path)

    except Exception:
        # Clean up temp file on error
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise


def read_json(file_path: Path, default: Any = None) -> Any:
    """
    Read JSON file

    Args:
        file_path: Path to JSON file
        default: Value returned when the file does not exist

    Returns:
        Parsed content
    """
    if not file_path.exists():
        return default

    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def write_json(file_path: Path, data: Any) -> None:
    """Write JSON file atomically"""
    atomic_write(file_path, json.dumps(data, indent=2, ensure_ascii=False) + "\n")
