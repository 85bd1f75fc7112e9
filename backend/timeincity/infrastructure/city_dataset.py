"""City Dataset Loader — reads the raw JSON city list from disk.

Invariants:
    - Returns a list of dicts; non-object entries are skipped with a warning
    - Missing file, invalid JSON or a non-array root → DatasetLoadError
    - Performs no normalization (core/normalize_cities.py owns that)

Design Decisions:
    - Read once at startup by the lifespan; nothing in core/ touches the filesystem
"""

import json
import logging
from pathlib import Path
from typing import Any

from timeincity.core.errors import DatasetLoadError

logger = logging.getLogger(__name__)


def load_raw_cities(path: Path | str) -> list[dict[str, Any]]:
    """Load raw city entries from a JSON array file."""
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError as e:
        raise DatasetLoadError("file not found", str(path)) from e
    except json.JSONDecodeError as e:
        raise DatasetLoadError(f"invalid JSON ({e.msg})", str(path)) from e
    except OSError as e:
        raise DatasetLoadError(str(e), str(path)) from e

    if not isinstance(data, list):
        raise DatasetLoadError("root element must be an array", str(path))

    entries = [entry for entry in data if isinstance(entry, dict)]
    skipped = len(data) - len(entries)
    if skipped:
        logger.warning(
            f"Skipped {skipped} non-object dataset entries",
            extra={"dataset_path": str(path)},
        )
    logger.info(
        f"Loaded {len(entries)} raw cities",
        extra={"dataset_path": str(path), "city_count": len(entries)},
    )
    return entries
