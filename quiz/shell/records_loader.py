"""Family Records Loader - Imperative Shell.

Reads family records from YAML or JSON files and hands the raw data
to the pure parser in quiz/core/family.py.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from quiz.core.family import Family, parse_families


logger = logging.getLogger(__name__)


YAML_SUFFIXES = (".yaml", ".yml")


def _read_records(path: Path) -> Any:
    """Read raw data from a YAML or JSON file."""
    with open(path, "r") as f:
        if path.suffix.lower() in YAML_SUFFIXES:
            return yaml.safe_load(f)
        return json.load(f)


def load_families(records_path: str | Path) -> list[Family]:
    """Load family records from a file.

    This method performs file I/O.

    The file holds either a list of family mappings or a mapping with
    a "families" key containing that list.

    Args:
        records_path: Path to a .yaml/.yml or JSON file

    Returns:
        Parsed families, invalid entries skipped

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file content is not a list of families
    """
    path = Path(records_path)

    if not path.exists():
        raise FileNotFoundError(f"Records file not found: {path}")

    logger.info("Loading family records from %s", path)

    data = _read_records(path)

    if data is None:
        logger.warning("Records file is empty: %s", path)
        return []

    if isinstance(data, dict):
        data = data.get("families", [])

    if not isinstance(data, list):
        raise ValueError(f"Expected a list of families in {path}")

    families = parse_families(data)

    skipped = len(data) - len(families)
    if skipped:
        logger.warning("Skipped %d invalid family records", skipped)

    logger.info("Loaded %d families", len(families))

    return families
