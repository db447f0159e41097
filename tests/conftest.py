"""Shared fixtures for the showroom tests."""

import threading
import uuid

import numpy as np
import pytest
from PyQt5.QtCore import QSettings, QStandardPaths

from tile_showroom.generators.textures.texture_settings import ShowroomSettings
from tile_showroom.generators.tiles import Tile, create_default_catalog
from tile_showroom.pipeline import ShowroomState, SurfaceRegistry
from tile_showroom.ui.preview import MaterialCache, TextureCache


class FakeLoader:
    """Image loader double: counts calls, can block or fail per reference."""

    def __init__(self):
        self.calls = []
        self.gates = {}
        self.failing = set()
        self._lock = threading.Lock()

    def gate(self, image_ref):
        """Hold loads of image_ref until the returned event is set."""
        event = threading.Event()
        self.gates[image_ref] = event
        return event

    def release_all(self):
        for event in self.gates.values():
            event.set()

    def count(self, image_ref):
        with self._lock:
            return self.calls.count(image_ref)

    def __call__(self, image_ref):
        with self._lock:
            self.calls.append(image_ref)
        gate = self.gates.get(image_ref)
        if gate is not None:
            gate.wait(timeout=5)
        if image_ref in self.failing:
            raise OSError(f"cannot decode {image_ref}")
        return np.full((8, 16, 4), 200, dtype=np.uint8)


@pytest.fixture
def loader():
    fake = FakeLoader()
    yield fake
    fake.release_all()


@pytest.fixture
def texture_cache(loader):
    cache = TextureCache(loader=loader, max_workers=2)
    yield cache
    loader.release_all()
    cache.shutdown(wait=True)


@pytest.fixture
def material_cache(texture_cache):
    return MaterialCache(texture_cache)


@pytest.fixture
def catalog():
    catalog = create_default_catalog()
    catalog.register(Tile(id="t1", name="Test Tile", category="floor", width_mm=300,
                          height_mm=300, finish="matte", image_url="memory://t1"))
    catalog.register(Tile(id="t2", name="Second Tile", category="wall", width_mm=100,
                          height_mm=200, finish="glossy", image_url="memory://t2"))
    return catalog


@pytest.fixture
def state():
    return ShowroomState()


@pytest.fixture
def registry(state, catalog):
    return SurfaceRegistry(state, catalog, "kitchen")


@pytest.fixture
def settings(tmp_path, monkeypatch):
    """Preferences stored under tmp_path instead of the user's config directory."""
    config_dir = tmp_path / "config"
    original = QStandardPaths.writableLocation(QStandardPaths.GenericConfigLocation)
    monkeypatch.setenv("HOME", str(tmp_path))
    for fmt in (QSettings.NativeFormat, QSettings.IniFormat):
        QSettings.setPath(fmt, QSettings.UserScope, str(config_dir))
    settings = ShowroomSettings("TileShowroomTests", f"tests-{uuid.uuid4().hex}")
    yield settings
    settings.reset_to_defaults()
    for fmt in (QSettings.NativeFormat, QSettings.IniFormat):
        QSettings.setPath(fmt, QSettings.UserScope, original)
