"""Load restaurant records from JSON exports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from RestaurantSearch.utils.log import log


def load_records(path: Path) -> list[dict[str, Any]]:
    """Read restaurant records from a JSON file.

    The file holds either a list of objects or an object with a
    `restaurants` list.

    Args:
        path: JSON file path.

    Returns:
        Records in file order.

    Raises:
        ValueError: If the JSON does not have one of the accepted shapes.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("restaurants")
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a list of restaurants or a 'restaurants' list")

    records: list[dict[str, Any]] = []
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"{path}: restaurants[{idx}] must be an object")
        records.append(item)
    log.debug("Loaded %d restaurant records from %s", len(records), path)
    return records
