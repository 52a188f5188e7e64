"""Loading level packs from JSON.

A pack file looks like { "levels": [ {level}, {level}, ... ] }. Only the
file-level shape is checked here; missing fields inside a level are
defaulted later by LevelConfig.from_dict.
"""

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

BUNDLED_LEVELS = "levels.json"


class LevelFileError(Exception):
    """Raised when a level pack cannot be read or has no levels."""


def load_level_pack(path: Union[str, Path, None] = None) -> List[Dict[str, Any]]:
    """Read a level pack.

    Args:
        path: JSON file to read. None loads the pack shipped with the package.

    Returns:
        List of raw level dicts, in file order.
    """
    try:
        if path is None:
            text = resources.files(__package__).joinpath(BUNDLED_LEVELS).read_text(encoding="utf-8")
            source = f"<bundled {BUNDLED_LEVELS}>"
        else:
            text = Path(path).read_text(encoding="utf-8")
            source = str(path)
    except OSError as e:
        raise LevelFileError(f"Cannot read level pack {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LevelFileError(f"Invalid JSON in {source}: {e}") from e

    return parse_level_pack(data, source=source)


def parse_level_pack(data: Any, source: str = "<data>") -> List[Dict[str, Any]]:
    """Extract the level list from already-decoded JSON.

    Accepts either the { "levels": [...] } wrapper or a bare list.
    """
    levels: Optional[Any]
    if isinstance(data, dict):
        levels = data.get("levels")
    else:
        levels = data

    if not isinstance(levels, list):
        raise LevelFileError(f"{source}: expected a 'levels' list")
    if not levels:
        raise LevelFileError(f"{source}: level pack is empty")

    for i, level in enumerate(levels):
        if not isinstance(level, dict):
            raise LevelFileError(f"{source}: levels[{i}] must be an object")

    logger.info("Loaded %d level(s) from %s", len(levels), source)
    return levels
