"""Чтение, декодирование, изменение размера и запись изображений.

Принципы:
- SRP: класс отвечает только за ввод-вывод и кодеки (через Pillow).
- LSP/ISP: работает с байтами, чтобы модель не зависела от `PIL.Image`.
"""
from __future__ import annotations

import io
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from image_filter.errors import ImageLoadError
from image_filter.models.size_model import Size
from image_filter.utils.logging import logger

# Pillow знает "JPEG", а не "JPG"
_FORMAT_ALIASES = {"JPG": "JPEG", "TIF": "TIFF"}


def normalize_format(fmt: Optional[str], default: str = "PNG") -> str:
    """Приводит расширение или имя формата к имени формата Pillow ("jpg" -> "JPEG")."""
    if not fmt:
        return default
    name = fmt.lstrip(".").upper()
    return _FORMAT_ALIASES.get(name, name)


class ImageService:
    def read_bytes(self, file_path: str | Path) -> bytes:
        """Читает файл изображения целиком.

        Raises:
            ImageLoadError: если путь не существует, не указывает на файл,
                не читается или не является изображением.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise ImageLoadError(path, "Файл не найден")
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise ImageLoadError(path, "Не удалось прочитать файл", exc) from exc
        if self.image_size(data) is None:
            raise ImageLoadError(path, "Файл не является изображением")
        return data

    def write_bytes(self, data: bytes, file_path: str | Path) -> bool:
        """Записывает байты в файл. Возвращает `False` при ошибке записи."""
        path = Path(file_path)
        try:
            path.write_bytes(data)
        except OSError as exc:
            logger.error("Failed to save image to %s: %s", path, exc)
            return False
        logger.info("Saved image to %s (%d bytes)", path, len(data))
        return True

    def decode(self, data: bytes) -> Optional[Image.Image]:
        """Декодирует байты в `PIL.Image.Image` или возвращает `None`."""
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
        except (UnidentifiedImageError, OSError) as exc:
            logger.warning("Cannot decode image data: %s", exc)
            return None
        return image

    def encode(self, image: Image.Image, fmt: Optional[str] = None) -> bytes:
        """Сериализует изображение в формат `fmt` (по умолчанию PNG)."""
        pil_format = normalize_format(fmt)
        if pil_format == "JPEG" and image.mode not in ("RGB", "L"):
            image = image.convert("RGB")
        buffer = io.BytesIO()
        image.save(buffer, format=pil_format)
        return buffer.getvalue()

    def image_size(self, data: bytes) -> Optional[Size]:
        """Размер изображения без полного декодирования пикселей."""
        try:
            with Image.open(io.BytesIO(data)) as image:
                width, height = image.size
        except (UnidentifiedImageError, OSError):
            return None
        return Size(float(width), float(height))

    def resize(self, data: bytes, new_size: Size, fmt: Optional[str] = None) -> Optional[bytes]:
        """Перерисовывает изображение в новый размер.

        Размер усекается до целых пикселей, но не меньше 1x1.

        Returns:
            Байты изменённого изображения или `None`, если исходные данные не декодируются.
        """
        image = self.decode(data)
        if image is None:
            return None
        width, height = new_size.truncated()
        target = (max(1, width), max(1, height))
        resized = image.resize(target, Image.Resampling.LANCZOS)
        logger.debug("Resized image %s -> %s", image.size, target)
        return self.encode(resized, fmt or image.format)
