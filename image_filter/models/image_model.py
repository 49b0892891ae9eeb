"""Модель открытого изображения.

Принципы:
- SRP: только структура данных, без логики обработки.
- Исходные байты хранятся отдельно от отображаемых: фильтры всегда
  применяются к оригиналу, изменение размера применяется к отображаемому.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class ImageInfo:
    """Открытое изображение и его текущее отображаемое состояние.

    Fields:
        path: Путь к исходному файлу.
        original_data: Байты файла в том виде, в котором он был прочитан.
        displayed_data: Байты показываемого (отфильтрованного/изменённого) изображения.
    """
    path: Optional[Path] = None
    original_data: Optional[bytes] = None
    displayed_data: Optional[bytes] = None

    @property
    def name(self) -> Optional[str]:
        """Имя файла с расширением."""
        return self.path.name if self.path is not None else None

    @property
    def extension(self) -> Optional[str]:
        """Расширение без точки, в нижнем регистре ("png")."""
        if self.path is None:
            return None
        return self.path.suffix.lstrip(".").lower() or None
