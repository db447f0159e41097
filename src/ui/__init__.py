"""
Tile Showroom - UI Module

Viewport-side components: texture and material caches, pointer
interaction and per-surface material resolution.
"""
