"""Read the raw card list from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jsonschema import ValidationError, validate

# Only the outer shape is checked; field values are normalized leniently.
SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "required": ["name"],
        "properties": {
            "name": {"type": "string", "minLength": 1},
            "regions": {"type": ["array", "string", "null"]},
            "features": {"type": ["array", "null"]},
            "perks": {"type": ["array", "null"]},
        },
    },
}


class CardDataError(ValueError):
    """Raised when the card file cannot be read or has the wrong shape."""


def load_cards(path: str | Path) -> list[dict[str, Any]]:
    """Load raw card records from a JSON file.

    The file holds either a bare array of records or an object with a
    ``cards`` array.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        raise CardDataError(f"{path} cannot be read: {e}") from e

    if isinstance(data, dict) and "cards" in data:
        data = data["cards"]

    try:
        validate(instance=data, schema=SCHEMA)
    except ValidationError as e:
        raise CardDataError(f"{path} failed schema validation: {e.message}") from e
    return data
