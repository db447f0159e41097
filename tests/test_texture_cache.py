"""Tests for texture loading and the deduplicating texture cache."""

import base64
import io
import threading
from concurrent.futures import wait

import numpy as np
import pytest
from PIL import Image

from tile_showroom.generators.textures import swatch_ref
from tile_showroom.ui.preview import ColorSpace, TextureCache, TextureState, WrapMode, load_image
from tile_showroom.validation import TextureLoadError


def test_same_reference_loads_once(texture_cache, loader):
    first = texture_cache.resolve_texture("memory://a")
    second = texture_cache.resolve_texture("memory://a")
    assert first is second
    first.wait(timeout=5)
    assert texture_cache.resolve_texture("memory://a") is first
    assert loader.count("memory://a") == 1
    assert texture_cache.load_count == 1


def test_concurrent_resolves_share_one_load(texture_cache, loader):
    gate = loader.gate("memory://slow")
    results = []

    def resolve():
        results.append(texture_cache.resolve_texture("memory://slow"))

    threads = [threading.Thread(target=resolve) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)
    gate.set()
    results[0].wait(timeout=5)

    assert len(results) == 16
    assert all(r is results[0] for r in results)
    assert loader.count("memory://slow") == 1


def test_pending_then_ready(texture_cache, loader):
    gate = loader.gate("memory://a")
    texture = texture_cache.resolve_texture("memory://a")
    assert texture.is_pending
    assert texture.pixels is None
    assert texture.size is None

    gate.set()
    texture.wait(timeout=5)
    assert texture.state is TextureState.READY
    assert texture.pixels.shape == (8, 16, 4)
    assert texture.size == (16, 8)


def test_failed_load_is_cached_and_not_retried(texture_cache, loader):
    loader.failing.add("memory://broken")
    texture = texture_cache.resolve_texture("memory://broken")
    wait([texture.future], timeout=5)

    assert texture.failed
    assert isinstance(texture.error, TextureLoadError)
    assert texture.error.image_ref == "memory://broken"
    with pytest.raises(TextureLoadError):
        texture.wait(timeout=5)

    assert texture_cache.resolve_texture("memory://broken") is texture
    assert loader.count("memory://broken") == 1


def test_invalidate_disposes_and_allows_reload(texture_cache, loader):
    texture = texture_cache.resolve_texture("memory://a")
    texture.wait(timeout=5)
    released = []
    texture.add_release_hook(released.append)

    assert texture_cache.invalidate("memory://a") == 1
    assert texture.disposed
    assert texture.state is TextureState.DISPOSED
    assert released == [texture]
    assert "memory://a" not in texture_cache

    reloaded = texture_cache.resolve_texture("memory://a")
    assert reloaded is not texture
    reloaded.wait(timeout=5)
    assert loader.count("memory://a") == 2


def test_invalidate_one_reference_keeps_others(texture_cache):
    a = texture_cache.resolve_texture("memory://a")
    b = texture_cache.resolve_texture("memory://b")
    texture_cache.invalidate("memory://a")
    assert a.disposed
    assert not b.disposed
    assert texture_cache.get_cached("memory://b") is b
    assert texture_cache.invalidate("memory://missing") == 0


def test_clear_all(texture_cache):
    textures = [texture_cache.resolve_texture(f"memory://{i}") for i in range(3)]
    assert len(texture_cache) == 3
    assert texture_cache.clear_all() == 3
    assert len(texture_cache) == 0
    assert all(t.disposed for t in textures)


def test_preload_returns_shared_future(texture_cache, loader):
    future = texture_cache.preload_texture("memory://a")
    assert texture_cache.resolve_texture("memory://a").future is future
    future.result(timeout=5)
    assert loader.count("memory://a") == 1


def test_sampler_settings(texture_cache):
    texture = texture_cache.resolve_texture("memory://a")
    assert texture.wrap_s is WrapMode.REPEAT
    assert texture.wrap_t is WrapMode.REPEAT
    assert texture.color_space is ColorSpace.SRGB
    assert texture.anisotropy == 16
    assert texture.generate_mipmaps


def _two_row_png():
    image = Image.new("RGB", (3, 2), (0, 0, 255))
    image.putpixel((0, 0), (255, 0, 0))
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def test_load_image_from_path_flips_rows(tmp_path):
    path = tmp_path / "tile.png"
    path.write_bytes(_two_row_png())

    pixels = load_image(str(path))
    assert pixels.shape == (2, 3, 4)
    assert pixels.dtype == np.uint8
    # Top-left pixel of the file ends up in the last row
    assert list(pixels[1, 0]) == [255, 0, 0, 255]
    assert list(pixels[0, 0]) == [0, 0, 255, 255]

    unflipped = load_image(path.as_uri(), flip_y=False)
    assert list(unflipped[0, 0]) == [255, 0, 0, 255]


def test_load_image_from_data_uri():
    uri = "data:image/png;base64," + base64.b64encode(_two_row_png()).decode("ascii")
    assert load_image(uri).shape == (2, 3, 4)


def test_load_image_from_swatch():
    pixels = load_image(swatch_ref("ceramic-blue"))
    assert pixels.shape == (512, 512, 4)


@pytest.mark.parametrize("ref", [
    "/nonexistent/tile.png",
    "https://example.com/tile.png",
    "data:image/png,notbase64",
    "data:image/png;base64,!!!!",
])
def test_load_image_errors(ref):
    with pytest.raises(TextureLoadError) as excinfo:
        load_image(ref)
    assert excinfo.value.image_ref == ref


def test_load_image_rejects_non_image(tmp_path):
    path = tmp_path / "notes.png"
    path.write_text("not an image")
    with pytest.raises(TextureLoadError):
        load_image(str(path))


def test_cache_with_default_loader_decodes_swatches():
    cache = TextureCache(max_workers=1)
    try:
        texture = cache.resolve_texture(swatch_ref("marble-white"))
        texture.wait(timeout=30)
        assert texture.size == (512, 512)
    finally:
        cache.shutdown()
