from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import List

from .errors import InvalidProcessError
from .models import Process


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix == ".csv":
        return _load_csv(path)

    raise InvalidProcessError(f"Unsupported workload format: {suffix} (use .json or .csv)")


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidProcessError(f"Invalid JSON workload {path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise InvalidProcessError(f"Workload {path} is not valid UTF-8 text") from exc

    if not isinstance(raw, list):
        raise InvalidProcessError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry, position) for position, entry in enumerate(raw, start=1)]


def _load_csv(path: Path) -> List[Process]:
    processes: List[Process] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        try:
            rows = list(csv.DictReader(f))
        except UnicodeDecodeError as exc:
            raise InvalidProcessError(f"Workload {path} is not valid UTF-8 text") from exc
    for position, row in enumerate(rows, start=1):
        processes.append(_process_from_mapping(row, position))
    return processes


def _process_from_mapping(mapping, position: int) -> Process:
    try:
        arrival = _strict_int(mapping["arrival"])
        burst = _strict_int(mapping["burst"])
        id_val = mapping.get("id")
        process_id = _strict_int(id_val) if id_val not in (None, "") else position
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise InvalidProcessError(f"Invalid process entry: {mapping!r}") from exc

    name = str(mapping.get("name") or "").strip() or f"P{position}"

    return Process(id=process_id, name=name, arrival=arrival, burst=burst)


def _strict_int(value) -> int:
    # JSON gives real ints; CSV gives text. Floats and booleans are rejected.
    if isinstance(value, bool):
        raise ValueError(f"not an integer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value.strip(), 10)
    raise TypeError(f"not an integer: {value!r}")
