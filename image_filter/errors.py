"""Иерархия исключений приложения.

Отсутствие исходного размера и нулевая высота исключениями не являются:
калькулятор размеров в этих случаях просто возвращает ``None``.
Выход параметра фильтра за диапазон также не исключение, а ``False`` из ``validate``.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class ImageFilterError(Exception):
    """Базовое исключение приложения."""


class UnknownFilterError(ImageFilterError, LookupError):
    """Идентификатор фильтра не входит в закрытый набор `ImageFilter`.

    Это ошибка вызывающего кода, а не пользовательская ситуация.
    """

    def __init__(self, name: object) -> None:
        super().__init__(f"Неизвестный фильтр: {name!r}")
        self.name = name


class ImageLoadError(ImageFilterError):
    """Файл не найден, не читается или не является изображением."""

    def __init__(self, path: Path, reason: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason
        self.cause = cause
