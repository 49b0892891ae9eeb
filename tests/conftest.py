import io
import threading
from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

from image_filter.services.image_service import ImageService


def _encode(image: Image.Image, fmt: str = "PNG") -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def make_image_bytes() -> Callable[..., bytes]:
    """Factory for small in-memory images: make_image_bytes(size=(8, 6), color=..., fmt="PNG")."""

    def factory(size=(8, 6), color=(200, 120, 40), mode="RGB", fmt="PNG") -> bytes:
        if mode == "RGBA" and len(color) == 3:
            color = (*color, 255)
        return _encode(Image.new(mode, size, color), fmt)

    return factory


@pytest.fixture
def png_bytes(make_image_bytes) -> bytes:
    return make_image_bytes()


@pytest.fixture
def gradient_png() -> bytes:
    """A 16x16 image with hard edges, useful for filters that react to contrast."""
    image = Image.new("RGB", (16, 16), (240, 240, 240))
    for x in range(8):
        for y in range(16):
            image.putpixel((x, y), (20, 60, 160))
    return _encode(image)


@pytest.fixture
def png_file(tmp_path: Path, make_image_bytes) -> Path:
    path = tmp_path / "photo.png"
    path.write_bytes(make_image_bytes(size=(80, 60)))
    return path


@pytest.fixture
def jpg_file(tmp_path: Path, make_image_bytes) -> Path:
    path = tmp_path / "photo.jpg"
    path.write_bytes(make_image_bytes(size=(40, 20), fmt="JPEG"))
    return path


class GatedImageService(ImageService):
    """Holds every resize until the test opens the gate."""

    def __init__(self) -> None:
        super().__init__()
        self.gate = threading.Event()

    def resize(self, data, new_size, fmt=None):
        self.gate.wait(timeout=5)
        return super().resize(data, new_size, fmt)


@pytest.fixture
def gated_image_service() -> GatedImageService:
    return GatedImageService()


@pytest.fixture
def second_png_file(tmp_path: Path, make_image_bytes) -> Path:
    path = tmp_path / "other.png"
    path.write_bytes(make_image_bytes(size=(30, 30)))
    return path
