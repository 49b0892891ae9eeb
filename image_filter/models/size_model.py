"""Модели размеров изображения.

Принципы:
- SRP: только хранение значений, без вычислений пропорций.
- Чистый код: `Size` неизменяемый, изменения через `with_width`/`with_height`.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple


@dataclass(frozen=True)
class Size:
    """Пара размеров (ширина, высота) с полной точностью.

    Для отображения значения усекаются к нулю до целых.
    """
    width: float
    height: float

    def with_width(self, width: float) -> Size:
        return replace(self, width=width)

    def with_height(self, height: float) -> Size:
        return replace(self, height=height)

    def truncated(self) -> Tuple[int, int]:
        """Возвращает (ширина, высота), усечённые к нулю."""
        return int(self.width), int(self.height)

    def display(self) -> str:
        """Строка вида ``"800 x 600"``."""
        width, height = self.truncated()
        return f"{width} x {height}"


@dataclass
class SizeModel:
    """Исходный и редактируемый размеры одной сессии изменения размера.

    Fields:
        original_size: Размер изображения на момент открытия диалога.
        edited_size: Текущий целевой размер; имеет смысл только при заданном `original_size`.
    """
    original_size: Optional[Size] = None
    edited_size: Optional[Size] = None
