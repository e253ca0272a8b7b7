"""Load catalog snapshots from JSON or YAML files."""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from castscore.catalog.models import CatalogSnapshot
from castscore.utils.errors import SnapshotLoadError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def load_snapshot(path: Path) -> CatalogSnapshot:
    """Read a snapshot file exported by the persistence layer.

    The file holds two top-level lists, ``channels`` and ``episodes``.

    Args:
        path: JSON or YAML file (chosen by suffix)

    Returns:
        Validated CatalogSnapshot

    Raises:
        SnapshotLoadError: If the file is missing, unparseable or invalid
    """
    if not path.exists():
        raise SnapshotLoadError(f"Snapshot file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text) or {}
        else:
            data = json.loads(text)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise SnapshotLoadError(f"Could not read snapshot {path}: {e}") from e

    try:
        snapshot = CatalogSnapshot.model_validate(data)
    except PydanticValidationError as e:
        raise SnapshotLoadError(f"Invalid snapshot {path}: {e}") from e

    logger.debug(
        "Loaded snapshot %s: %d channels, %d episodes",
        path,
        len(snapshot.channels),
        len(snapshot.episodes),
    )
    return snapshot
