"""
Tile Showroom - interactive tile visualization core.

Maps catalog tiles onto the surfaces of a procedural room, keeps the
selection and mapping state, and builds cached materials for a renderer.
"""

__version__ = "0.1.0"
