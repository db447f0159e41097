"""
Procedural swatch textures for stock tiles.

Stock tiles ship without uploaded images; their image reference is
"swatch://<key>" and the texture loader renders the swatch on demand.
Every swatch is seeded from its key, so the same key always produces the
same pixels and rendered PNG bytes can be cached indefinitely.

Unknown keys render the grey ceramic fallback.
"""

from __future__ import annotations

import functools
import io
import math
import random
import zlib
from typing import Dict, List, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFilter

SWATCH_SCHEME = "swatch://"
SWATCH_SIZE = 512

# key -> (style, colors)
SWATCH_STYLES: Dict[str, Tuple[str, Tuple[str, ...]]] = {
    # Marble
    "marble-white": ("marble", ("#f5f5f5", "#e0e0e0", "#d0d0d0")),
    "marble-gold": ("marble", ("#f5f0e0", "#e8d4a0", "#d4b070")),
    "marble-dark": ("marble", ("#4a3c32", "#5c4a3a", "#3a2e26")),
    # Wood
    "wood-oak": ("wood", ("#c4a77d", "#a88a5b")),
    "wood-walnut": ("wood", ("#5c4033", "#3d2817")),
    "wood-grey": ("wood", ("#8a8a8a", "#6a6a6a")),
    # Concrete
    "concrete-grey": ("concrete", ("#808080", "#707070")),
    "concrete-charcoal": ("concrete", ("#4a4a4a", "#3a3a3a")),
    # Ceramic
    "ceramic-white": ("solid", ("#ffffff", "#f0f0f0")),
    "ceramic-black": ("solid", ("#1a1a1a", "#2a2a2a")),
    "ceramic-green": ("solid", ("#7fa87f", "#6a956a")),
    "ceramic-blue": ("solid", ("#2c4a6e", "#1e3a5e")),
    # Mosaic
    "mosaic-hex-white": ("hex", ("#ffffff", "#e8e8e8")),
    "mosaic-penny-black": ("penny", ("#2a2a2a", "#1a1a1a")),
    # Large format slabs
    "slab-statuario": ("marble", ("#fafafa", "#e8e8e8", "#d8d8d8")),
    "slab-onyx": ("marble", ("#f0e8d8", "#e0d0b8", "#d0c0a0")),
}

FALLBACK_STYLE: Tuple[str, Tuple[str, ...]] = ("solid", ("#808080", "#707070"))


def swatch_ref(key: str) -> str:
    """Image reference for a procedural swatch."""
    return f"{SWATCH_SCHEME}{key}"


def is_swatch_ref(image_ref: str) -> bool:
    return image_ref.startswith(SWATCH_SCHEME)


def swatch_key(image_ref: str) -> str:
    """Extract the swatch key from a swatch:// reference."""
    return image_ref[len(SWATCH_SCHEME):].strip("/")


def list_swatch_keys() -> List[str]:
    return sorted(SWATCH_STYLES.keys())


def _rgba(color: str, alpha: float = 1.0) -> Tuple[int, int, int, int]:
    r, g, b = ImageColor.getrgb(color)[:3]
    return r, g, b, int(round(alpha * 255))


def _draw_marble(rng: random.Random, size: int, base: str, vein1: str, vein2: str) -> Image.Image:
    image = Image.new("RGBA", (size, size), _rgba(base))
    veins = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(veins)
    for y0, width in ((100, 8), (250, 6), (400, 10)):
        y_scale = size / 512.0
        points = []
        phase = rng.uniform(0, 2 * math.pi)
        for step in range(33):
            x = step * size / 32.0
            wobble = 20 * math.sin(phase + step / 4.0) + rng.uniform(-6, 6)
            points.append((x, y0 * y_scale + wobble))
        draw.line(points, fill=_rgba(vein1, 0.3), width=width + 4)
        draw.line(points, fill=_rgba(vein2, 0.5), width=width)
    veins = veins.filter(ImageFilter.GaussianBlur(radius=3))
    return Image.alpha_composite(image, veins)


def _draw_wood(rng: random.Random, size: int, base: str, grain: str) -> Image.Image:
    image = Image.new("RGBA", (size, size), _rgba(base))
    layer = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(layer)
    for i in range(20):
        y = i * 25 + rng.random() * 10
        draw.line(
            [(0, y), (size, y + rng.random() * 5)],
            fill=_rgba(grain, 0.3 + rng.random() * 0.4),
            width=1 + int(rng.random() * 2),
        )
    return Image.alpha_composite(image, layer)


def _draw_concrete(rng: random.Random, size: int, base: str, speckle: str) -> Image.Image:
    image = Image.new("RGBA", (size, size), _rgba(base))
    layer = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(layer)
    for _ in range(100):
        x = rng.random() * size
        y = rng.random() * size
        r = 1 + rng.random() * 3
        draw.ellipse([x - r, y - r, x + r, y + r], fill=_rgba(speckle, 0.2 + rng.random() * 0.3))
    return Image.alpha_composite(image, layer)


def _draw_solid(rng: random.Random, size: int, base: str, edge: str) -> Image.Image:
    image = Image.new("RGBA", (size, size), _rgba(base))
    draw = ImageDraw.Draw(image)
    draw.rectangle([2, 2, size - 3, size - 3], outline=_rgba(edge), width=4)
    return image


def _draw_hex(rng: random.Random, size: int, base: str, grout: str) -> Image.Image:
    image = Image.new("RGBA", (size, size), _rgba(grout))
    draw = ImageDraw.Draw(image)
    hex_size = 40
    hex_height = hex_size * math.sqrt(3)
    for row in range(15):
        for col in range(10):
            x = col * hex_size * 1.5 + (row % 2) * hex_size * 0.75
            y = row * hex_height * 0.5
            draw.polygon([
                (x, y + hex_size * 0.5),
                (x + hex_size * 0.25, y),
                (x + hex_size * 0.75, y),
                (x + hex_size, y + hex_size * 0.5),
                (x + hex_size * 0.75, y + hex_size),
                (x + hex_size * 0.25, y + hex_size),
            ], fill=_rgba(base), outline=_rgba(grout), width=3)
    return image


def _draw_penny(rng: random.Random, size: int, base: str, grout: str) -> Image.Image:
    image = Image.new("RGBA", (size, size), _rgba(grout))
    draw = ImageDraw.Draw(image)
    circle_size = 24
    radius = circle_size * 0.4
    for row in range(22):
        for col in range(22):
            x = col * circle_size + (row % 2) * circle_size * 0.5
            y = row * circle_size * 0.866
            draw.ellipse([x - radius, y - radius, x + radius, y + radius], fill=_rgba(base))
    return image


_PAINTERS = {
    "marble": _draw_marble,
    "wood": _draw_wood,
    "concrete": _draw_concrete,
    "solid": _draw_solid,
    "hex": _draw_hex,
    "penny": _draw_penny,
}


def generate_swatch(key: str, size: int = SWATCH_SIZE) -> Image.Image:
    """Render the swatch for a texture key.

    Args:
        key: Swatch key (e.g. "marble-white"); unknown keys use the fallback
        size: Edge length in pixels

    Returns:
        RGBA PIL image of size x size
    """
    style, colors = SWATCH_STYLES.get(key, FALLBACK_STYLE)
    rng = random.Random(zlib.crc32(key.encode("utf-8")))
    return _PAINTERS[style](rng, size, *colors)


@functools.lru_cache(maxsize=64)
def render_swatch_png(key: str, size: int = SWATCH_SIZE) -> bytes:
    """Render a swatch as PNG bytes (content is immutable per key/size)."""
    buffer = io.BytesIO()
    generate_swatch(key, size).save(buffer, format="PNG")
    return buffer.getvalue()
