"""
Generators for showroom content: rooms, tiles, textures and lighting.
"""
