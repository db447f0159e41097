"""Tests for tile image uploads."""

import io
import os
import re
from pathlib import Path

import pytest
from PIL import Image, features

from tile_showroom.pipeline import MAX_UPLOAD_BYTES, UploadStore
from tile_showroom.validation import FileTooLarge, InvalidFileType, StorageError


def _image_bytes(fmt, size=(16, 16)):
    buffer = io.BytesIO()
    Image.new("RGB", size, (120, 80, 40)).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def uploads(tmp_path):
    return UploadStore(tmp_path / "uploads")


@pytest.mark.parametrize("content_type, fmt, ext", [
    ("image/png", "PNG", "png"),
    ("image/jpeg", "JPEG", "jpg"),
])
def test_store_accepted_types(uploads, content_type, fmt, ext):
    data = _image_bytes(fmt)
    ref = uploads.store(data, content_type)
    path = Path(ref)
    assert path.parent == uploads.uploads_dir
    assert re.fullmatch(rf"tile-\d+-[0-9a-f]{{8}}\.{ext}", path.name)
    assert path.read_bytes() == data


@pytest.mark.skipif(not features.check("webp"), reason="Pillow built without WebP")
def test_store_webp(uploads):
    assert uploads.store(_image_bytes("WEBP"), "image/webp").endswith(".webp")


def test_unique_names(uploads):
    data = _image_bytes("PNG")
    assert uploads.store(data, "image/png") != uploads.store(data, "image/png")


def test_rejects_other_types(uploads):
    with pytest.raises(InvalidFileType) as excinfo:
        uploads.store(_image_bytes("GIF"), "image/gif")
    assert excinfo.value.content_type == "image/gif"
    assert list(uploads.uploads_dir.iterdir()) == []


def test_rejects_mismatched_payload(uploads):
    with pytest.raises(InvalidFileType):
        uploads.store(_image_bytes("PNG"), "image/jpeg")
    with pytest.raises(InvalidFileType):
        uploads.store(b"definitely not an image", "image/png")


def test_rejects_large_payload(tmp_path):
    uploads = UploadStore(tmp_path / "uploads", max_bytes=32)
    data = _image_bytes("PNG", size=(64, 64))
    with pytest.raises(FileTooLarge) as excinfo:
        uploads.store(data, "image/png")
    assert excinfo.value.size == len(data)
    assert excinfo.value.limit == 32
    assert list(uploads.uploads_dir.iterdir()) == []


def test_default_limit_is_ten_mib():
    assert MAX_UPLOAD_BYTES == 10 * 1024 * 1024
    assert UploadStore().max_bytes == MAX_UPLOAD_BYTES


def test_write_failure_leaves_no_file(uploads, monkeypatch):
    def refuse(src, dst):
        raise OSError("read-only")

    monkeypatch.setattr(os, "replace", refuse)
    with pytest.raises(StorageError):
        uploads.store(_image_bytes("PNG"), "image/png")
    assert list(uploads.uploads_dir.iterdir()) == []


def test_store_file_guesses_type(uploads, tmp_path):
    source = tmp_path / "photo.png"
    source.write_bytes(_image_bytes("PNG"))
    assert uploads.store_file(source).endswith(".png")

    text = tmp_path / "notes.txt"
    text.write_text("hello")
    with pytest.raises(InvalidFileType):
        uploads.store_file(text)


def test_store_file_normalizes_declared_type(uploads, tmp_path):
    source = tmp_path / "photo.bin"
    source.write_bytes(_image_bytes("PNG"))
    assert uploads.store_file(source, "IMAGE/PNG").endswith(".png")
    assert uploads.store_file(source, "image/png; charset=binary").endswith(".png")
