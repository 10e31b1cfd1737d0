"""Load source records from JSON or YAML files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml
from dateutil.parser import isoparse

from MultiSearch.utils.log import log

_YAML_SUFFIXES = {".yml", ".yaml"}


def load_records(path: Path, date_fields: Iterable[str] = ()) -> list[dict[str, Any]]:
    """Read a list of records from a JSON or YAML file.

    Args:
        path: File holding a list of objects. `.yml`/`.yaml` files are read as
            YAML, everything else as JSON.
        date_fields: Fields whose ISO string values are converted to datetime.

    Returns:
        Records in file order.

    Raises:
        ValueError: If the file is not a list of objects.
    """
    text = path.read_text(encoding="utf-8")
    data = yaml.safe_load(text) if path.suffix.lower() in _YAML_SUFFIXES else json.loads(text)
    records = parse_records(data, source=str(path))
    return coerce_dates(records, date_fields)


def parse_records(data: Any, *, source: str = "records") -> list[dict[str, Any]]:
    """Validate decoded data as a list of records."""
    if not isinstance(data, list):
        raise ValueError(f"{source} must contain a list of records")
    records: list[dict[str, Any]] = []
    for idx, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise ValueError(f"{source}[{idx}] must be an object")
        records.append(dict(item))
    return records


def coerce_dates(records: list[dict[str, Any]], date_fields: Iterable[str]) -> list[dict[str, Any]]:
    """Convert ISO date strings of `date_fields` to datetime objects in place.

    Values that are not ISO dates are kept unchanged.
    """
    fields = tuple(date_fields)
    if not fields:
        return records

    skipped = 0
    for record in records:
        for name in fields:
            value = record.get(name)
            if not isinstance(value, str):
                continue
            try:
                record[name] = isoparse(value.strip())
            except (ValueError, OverflowError):
                skipped += 1
    if skipped:
        log.warning("Kept %d values that are not ISO dates as text (fields=%s)", skipped, ", ".join(fields))
    return records
