"""
Texture manager for loading and caching tile textures.

Uses PIL/Pillow for image decoding and supports file paths, file:// and
data: URIs, and swatch:// references to procedural stock swatches.

Loading is asynchronous: resolve_texture() returns a Texture handle at once
and decodes the image on a background thread. The handle wraps a Future, so
concurrent and repeated requests for the same image reference share one
load. The cache owns every Texture it hands out; renderers borrow them and
register release hooks for their GPU copies instead of disposing directly.
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
import os
import threading
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple
from urllib.parse import unquote, urlparse

import numpy as np
from PIL import Image, UnidentifiedImageError

from tile_showroom.generators.textures.swatches import generate_swatch, is_swatch_ref, swatch_key
from tile_showroom.validation import TextureLoadError

logger = logging.getLogger(__name__)

DEFAULT_ANISOTROPY = 16

ImageLoader = Callable[[str], np.ndarray]


class WrapMode(Enum):
    """Texture coordinate wrapping."""
    REPEAT = "repeat"
    CLAMP_TO_EDGE = "clamp_to_edge"
    MIRRORED_REPEAT = "mirrored_repeat"


class ColorSpace(Enum):
    """How texel values are interpreted."""
    SRGB = "srgb"        # display-referred color (tile photos)
    LINEAR = "linear"    # data textures


class TextureState(Enum):
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"
    DISPOSED = "disposed"


def _open_image(image_ref: str) -> Image.Image:
    if is_swatch_ref(image_ref):
        return generate_swatch(swatch_key(image_ref))

    if image_ref.startswith("data:"):
        header, _, payload = image_ref.partition(",")
        if ";base64" not in header:
            raise TextureLoadError(image_ref, "only base64 data URIs are supported")
        try:
            raw = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise TextureLoadError(image_ref, f"invalid base64 payload: {e}") from e
        return Image.open(io.BytesIO(raw))

    path = image_ref
    if image_ref.startswith("file://"):
        path = unquote(urlparse(image_ref).path)
    elif "://" in image_ref:
        scheme = image_ref.split("://", 1)[0]
        raise TextureLoadError(image_ref, f"unsupported scheme '{scheme}'")

    if not os.path.isfile(path):
        raise TextureLoadError(image_ref, "file not found")
    return Image.open(path)


def load_image(image_ref: str, flip_y: bool = True) -> np.ndarray:
    """Load and decode an image reference into RGBA pixels.

    Args:
        image_ref: File path, file:// URI, base64 data: URI or swatch:// key
        flip_y: Flip vertically for bottom-left texture origin

    Returns:
        uint8 array of shape (height, width, 4)

    Raises:
        TextureLoadError: If the reference cannot be read or decoded
    """
    try:
        image = _open_image(image_ref)
        image.load()
        if image.mode != 'RGBA':
            image = image.convert('RGBA')
        if flip_y:
            image = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        return np.asarray(image, dtype=np.uint8).copy()
    except TextureLoadError:
        raise
    except (OSError, UnidentifiedImageError, ValueError) as e:
        raise TextureLoadError(image_ref, str(e)) from e


class Texture:
    """A cached texture: decoded pixels plus sampler settings.

    Pixels become available once the background load finishes. Sampler
    settings are fixed at creation; a different configuration is a
    different cache entry, never a mutation of this one.
    """

    def __init__(self, image_ref: str, future: Future,
                 wrap_s: WrapMode = WrapMode.REPEAT,
                 wrap_t: WrapMode = WrapMode.REPEAT,
                 color_space: ColorSpace = ColorSpace.SRGB,
                 anisotropy: int = DEFAULT_ANISOTROPY):
        self.image_ref = image_ref
        self.future = future
        self.wrap_s = wrap_s
        self.wrap_t = wrap_t
        self.color_space = color_space
        self.anisotropy = anisotropy
        self.mag_filter = "linear"
        self.min_filter = "linear_mipmap_linear"
        self.generate_mipmaps = True
        self._release_hooks: List[Callable[['Texture'], None]] = []
        self._disposed = False

    def __repr__(self) -> str:
        return f"Texture({self.image_ref!r}, state={self.state.value})"

    @property
    def state(self) -> TextureState:
        if self._disposed:
            return TextureState.DISPOSED
        if not self.future.done():
            return TextureState.PENDING
        if self.future.cancelled() or self.future.exception() is not None:
            return TextureState.FAILED
        return TextureState.READY

    @property
    def is_ready(self) -> bool:
        return self.state is TextureState.READY

    @property
    def is_pending(self) -> bool:
        return self.state is TextureState.PENDING

    @property
    def failed(self) -> bool:
        return self.state is TextureState.FAILED

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def error(self) -> Optional[TextureLoadError]:
        """The load error, if the load finished unsuccessfully."""
        if not self.future.done():
            return None
        if self.future.cancelled():
            return TextureLoadError(self.image_ref, "load cancelled")
        exc = self.future.exception()
        if exc is None:
            return None
        if isinstance(exc, TextureLoadError):
            return exc
        return TextureLoadError(self.image_ref, str(exc))

    @property
    def pixels(self) -> Optional[np.ndarray]:
        """Decoded RGBA pixels, or None unless the texture is ready."""
        if not self.is_ready:
            return None
        return self.future.result()

    @property
    def size(self) -> Optional[Tuple[int, int]]:
        """(width, height) in pixels once loaded."""
        pixels = self.pixels
        if pixels is None:
            return None
        return int(pixels.shape[1]), int(pixels.shape[0])

    def wait(self, timeout: Optional[float] = None) -> np.ndarray:
        """Block until loaded; intended for tools and tests, not the render loop.

        Raises:
            TextureLoadError: If the load failed or was cancelled
            TimeoutError: If the load is still running after timeout seconds
        """
        try:
            return self.future.result(timeout=timeout)
        except CancelledError as e:
            raise TextureLoadError(self.image_ref, "load cancelled") from e

    def add_release_hook(self, hook: Callable[['Texture'], None]) -> None:
        """Register a callback run on disposal (e.g. deleting a GPU copy)."""
        if self._disposed:
            hook(self)
            return
        self._release_hooks.append(hook)

    def dispose(self) -> None:
        """Release this texture. Only the owning cache should call this."""
        if self._disposed:
            return
        self._disposed = True
        if self.future.cancel():
            logger.debug(f"Cancelled queued load of '{self.image_ref}'")
        elif not self.future.done():
            logger.warning(f"Disposing texture '{self.image_ref}' while its load is in flight")
        hooks, self._release_hooks = self._release_hooks, []
        for hook in hooks:
            try:
                hook(self)
            except Exception as e:
                # Renderer context may already be destroyed
                logger.warning(f"Release hook failed for '{self.image_ref}': {e}")


class TextureCache:
    """Load, cache, and dispose tile textures, keyed by image reference.

    At most one load is ever started per image reference until the entry is
    invalidated. Failed loads stay cached as failed entries so a broken image
    is not retried on every frame.
    """

    def __init__(self, loader: Optional[ImageLoader] = None,
                 max_workers: Optional[int] = None,
                 executor: Optional[ThreadPoolExecutor] = None):
        """
        Args:
            loader: Callable decoding an image reference to RGBA pixels
                (default: load_image)
            max_workers: Loader threads when the cache creates its executor
                (default: from ShowroomSettings)
            executor: Externally owned executor to submit loads to
        """
        self._loader = loader or load_image
        self._max_workers = max_workers
        self._executor = executor
        self._owns_executor = executor is None
        self._textures: Dict[str, Texture] = {}
        self._lock = threading.Lock()
        self._load_count = 0

    def __contains__(self, image_ref: str) -> bool:
        with self._lock:
            return image_ref in self._textures

    def __len__(self) -> int:
        with self._lock:
            return len(self._textures)

    @property
    def load_count(self) -> int:
        """Number of loads started since creation."""
        return self._load_count

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            workers = self._max_workers
            if workers is None:
                from tile_showroom.generators.textures.texture_settings import SHOWROOM_SETTINGS
                workers = SHOWROOM_SETTINGS.get_loader_workers()
            self._executor = ThreadPoolExecutor(max_workers=workers,
                                                thread_name_prefix="texture-loader")
        return self._executor

    def _load(self, image_ref: str) -> np.ndarray:
        logger.debug(f"Loading texture '{image_ref}'")
        try:
            pixels = self._loader(image_ref)
        except TextureLoadError:
            raise
        except Exception as e:
            raise TextureLoadError(image_ref, str(e)) from e
        logger.debug(f"Loaded texture '{image_ref}'")
        return pixels

    def resolve_texture(self, image_ref: str) -> Texture:
        """Get a cached texture or start loading it.

        Args:
            image_ref: Image reference

        Returns:
            The Texture for this reference (possibly still loading)
        """
        with self._lock:
            texture = self._textures.get(image_ref)
            if texture is not None:
                return texture
            future = self._get_executor().submit(self._load, image_ref)
            texture = Texture(image_ref, future)
            self._textures[image_ref] = texture
            self._load_count += 1
        return texture

    def preload_texture(self, image_ref: str) -> Future:
        """Start loading a texture ahead of use; returns the shared future."""
        return self.resolve_texture(image_ref).future

    def get_cached(self, image_ref: str) -> Optional[Texture]:
        """Cached texture for a reference without starting a load."""
        with self._lock:
            return self._textures.get(image_ref)

    def invalidate(self, image_ref: Optional[str] = None) -> int:
        """Dispose and forget cached textures.

        Args:
            image_ref: Only this reference; None clears everything

        Returns:
            Number of textures disposed
        """
        with self._lock:
            if image_ref is None:
                removed = list(self._textures.values())
                self._textures.clear()
            else:
                texture = self._textures.pop(image_ref, None)
                removed = [texture] if texture is not None else []
        for texture in removed:
            texture.dispose()
        if removed:
            logger.debug(f"Disposed {len(removed)} texture(s)")
        return len(removed)

    def clear_all(self) -> int:
        """Dispose every cached texture."""
        return self.invalidate(None)

    def shutdown(self, wait: bool = True) -> None:
        """Dispose all textures and stop the loader threads."""
        self.clear_all()
        if self._executor is not None and self._owns_executor:
            self._executor.shutdown(wait=wait)
            self._executor = None
