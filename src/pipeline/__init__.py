"""
Showroom state and session pipeline.

Provides the observable showroom state, the validated surface registry,
design persistence, image uploads and the session facade tying them together.
"""

from .showroom_state import ShowroomState, MeshMapping
from .surface_registry import SurfaceRegistry, SurfaceSelection
from .design import Design, serialize_mappings, deserialize_mappings
from .design_storage import DesignStore, get_designs_dir
from .uploads import UploadStore, MAX_UPLOAD_BYTES, ACCEPTED_TYPES
from .session import ShowroomSession

__all__ = [
    # State
    'ShowroomState',
    'MeshMapping',
    'SurfaceRegistry',
    'SurfaceSelection',
    # Persistence
    'Design',
    'serialize_mappings',
    'deserialize_mappings',
    'DesignStore',
    'get_designs_dir',
    'UploadStore',
    'MAX_UPLOAD_BYTES',
    'ACCEPTED_TYPES',
    # Session
    'ShowroomSession',
]
