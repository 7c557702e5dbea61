"""JSON config file loading."""

import json
from pathlib import Path
from typing import Any

from critters.constants import CONFIG_DIR


def load_config(name: str, config_dir: Path = CONFIG_DIR) -> dict[str, Any]:
    """Parse ``config_dir / name``; the top level must be a JSON object."""
    path = Path(config_dir) / name
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return data
