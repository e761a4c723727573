"""
YAML document I/O shared by the config loader and the file store.
"""
from pathlib import Path
from typing import Any, Dict
import logging
import os
import tempfile

import yaml

logger = logging.getLogger(__name__)


def atomic_write_yaml(filepath: Path, data: Dict[str, Any]) -> None:
    """
    Replace a YAML document in one step.

    The document is dumped to a sibling temp file first and swapped in with
    os.replace(), so readers see either the old or the new document.

    Raises:
        IOError: If the document cannot be written
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(dir=filepath.parent, prefix=f".{filepath.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
        os.replace(temp_name, filepath)
    except (OSError, yaml.YAMLError) as e:
        Path(temp_name).unlink(missing_ok=True)
        logger.error(f"Could not write {filepath}: {e}")
        raise IOError(f"Atomic write of {filepath} failed: {e}") from e

    logger.debug(f"Wrote {filepath}")


def load_yaml(filepath: Path) -> Dict[str, Any]:
    """
    Read a YAML document; an empty file reads as {}.

    Raises:
        FileNotFoundError: If the file is missing
        yaml.YAMLError: If the document does not parse
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise FileNotFoundError(f"YAML file not found: {filepath}")

    with filepath.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
