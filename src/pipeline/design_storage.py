"""
Design persistence layer.

Stores one JSON file per design in the designs directory from
ShowroomSettings (default ~/.config/tile_showroom/designs/). Files are
written to a temporary sibling first and moved into place, so a failed
save never leaves a truncated design behind.

Usage:
    store = DesignStore()
    design_id = store.save_design(Design(name="Smith kitchen", room_type="kitchen",
                                         mesh_mappings=registry.mappings))
    design = store.load_design(design_id)
"""

from __future__ import annotations

import json
import logging
import re
import uuid
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from tile_showroom.generators.tiles.tile import utc_now
from tile_showroom.generators.tiles.tile_storage import write_json_atomic
from tile_showroom.validation import NotFound, ShowroomError, StorageError
from .design import Design

logger = logging.getLogger(__name__)

_DESIGN_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")

# Fields update_design() is allowed to change
UPDATABLE_FIELDS = (
    "name",
    "customer_name",
    "room_type",
    "mesh_mappings",
    "lighting_preset",
    "screenshot_url",
)


def get_designs_dir(designs_dir: Optional[Path] = None) -> Path:
    """
    Get the directory for storing designs.

    Args:
        designs_dir: Explicit directory; defaults to the configured one

    Returns:
        The directory, created if it doesn't exist.
    """
    if designs_dir is None:
        from tile_showroom.generators.textures.texture_settings import SHOWROOM_SETTINGS
        designs_dir = SHOWROOM_SETTINGS.get_designs_dir()
    designs_dir = Path(designs_dir)
    designs_dir.mkdir(parents=True, exist_ok=True)
    return designs_dir


class DesignStore:
    """Save, load, list, update and delete designs."""

    def __init__(self, designs_dir: Optional[Path] = None):
        self._designs_dir = Path(designs_dir) if designs_dir is not None else None

    @property
    def designs_dir(self) -> Path:
        return get_designs_dir(self._designs_dir)

    def _path_for(self, design_id: str) -> Path:
        if not design_id or not _DESIGN_ID_RE.match(design_id):
            raise NotFound("Design", design_id)
        return self.designs_dir / (design_id + ".json")

    def _write(self, design: Design) -> None:
        file_path = self._path_for(design.id)
        try:
            write_json_atomic(file_path, design.to_dict())
        except OSError as e:
            raise StorageError(f"Could not write design '{design.id}': {e}") from e

    def save_design(self, design: Design) -> str:
        """
        Save a design as a new record.

        The passed Design is not modified; the stored copy gets an id (when
        it has none) and fresh timestamps.

        Returns:
            The design id

        Raises:
            StorageError: If the file cannot be written
        """
        stored = design.stamped(design.id or uuid.uuid4().hex)
        self._write(stored)
        logger.info(f"Saved design '{stored.name}' ({stored.id})")
        return stored.id

    def load_design(self, design_id: str) -> Design:
        """
        Load a design by id.

        Raises:
            NotFound: If no design has this id
            StorageError: If the file exists but cannot be read or parsed
        """
        file_path = self._path_for(design_id)
        if not file_path.exists():
            raise NotFound("Design", design_id)
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Design.from_dict(data)
        except OSError as e:
            raise StorageError(f"Could not read design '{design_id}': {e}") from e
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, ShowroomError) as e:
            raise StorageError(f"Design file '{file_path.name}' is corrupt: {e}") from e

    def list_designs(self) -> List[Design]:
        """
        Load all saved designs.

        Unreadable files are skipped with a warning.

        Returns:
            Designs ordered by creation time
        """
        designs = []
        for file_path in self.designs_dir.glob("*.json"):
            try:
                designs.append(self.load_design(file_path.stem))
            except (StorageError, NotFound) as e:
                logger.warning(f"Skipping design file {file_path.name}: {e}")
        return sorted(designs, key=lambda d: (d.created_at or "", d.id))

    def update_design(self, design_id: str, **changes) -> Design:
        """
        Change fields of a saved design.

        Args:
            design_id: Design to update
            **changes: New values for fields in UPDATABLE_FIELDS

        Returns:
            The updated Design

        Raises:
            ValueError: If a field cannot be updated
            NotFound: If no design has this id
            StorageError: If the file cannot be written
        """
        invalid = sorted(set(changes) - set(UPDATABLE_FIELDS))
        if invalid:
            raise ValueError(f"Cannot update design field(s): {', '.join(invalid)}")
        current = self.load_design(design_id)
        updated = replace(current, updated_at=utc_now(), **changes)
        self._write(updated)
        logger.info(f"Updated design '{updated.name}' ({design_id})")
        return updated

    def delete_design(self, design_id: str) -> bool:
        """
        Delete a saved design.

        Returns:
            True if deleted, False if not found

        Raises:
            StorageError: If the file exists but cannot be removed
        """
        try:
            file_path = self._path_for(design_id)
        except NotFound:
            return False
        if not file_path.exists():
            return False
        try:
            file_path.unlink()
        except OSError as e:
            raise StorageError(f"Could not delete design '{design_id}': {e}") from e
        logger.info(f"Deleted design {design_id}")
        return True
