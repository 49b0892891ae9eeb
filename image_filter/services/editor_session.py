"""Состояние редактора: открытое изображение, выбранный фильтр, сохранение.

Принципы:
- SRP: сессия не знает о виджетах; контроллер читает её свойства и обновляет UI.
- DIP: сервисы передаются в конструктор, по умолчанию используются реализации на Pillow.
"""
from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from image_filter.models.filters import AppliedFilterState, ImageFilter
from image_filter.models.image_model import ImageInfo
from image_filter.models.size_model import Size
from image_filter.services.filter_selector import FilterSelector
from image_filter.services.filter_service import FilterService
from image_filter.services.image_service import ImageService
from image_filter.utils.logging import logger

DEFAULT_SUPPORTED_FORMATS: Tuple[str, ...] = ("png", "jpg", "jpeg")


class ResizeOutcome(str, Enum):
    APPLIED = "applied"
    FAILED = "failed"
    STALE = "stale"


class EditorSession:
    """Модель представления главного окна.

    Исходные байты (`original_data`) не меняются до открытия другого файла;
    фильтры всегда применяются к ним, а изменение размера применяется к отображаемым байтам.
    """

    def __init__(
        self,
        image_service: Optional[ImageService] = None,
        filter_service: Optional[FilterService] = None,
        selector: Optional[FilterSelector] = None,
        supported_formats: Sequence[str] = DEFAULT_SUPPORTED_FORMATS,
    ) -> None:
        self._image_service = image_service or ImageService()
        self._filter_service = filter_service or FilterService(self._image_service)
        self._selector = selector or FilterSelector()
        self._supported_formats = list(supported_formats)
        self._image: Optional[ImageInfo] = None
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="image-resize")
        self._resize_sources: Dict[Future, ImageInfo] = {}

        self.applied_filter = AppliedFilterState()
        self.show_no_image_alert = True

    # ---- Properties ----
    @property
    def supported_formats(self) -> List[str]:
        return list(self._supported_formats)

    @property
    def available_filters(self) -> List[str]:
        return self._selector.available_filters()

    @property
    def original_data(self) -> Optional[bytes]:
        return self._image.original_data if self._image else None

    @property
    def displayed_data(self) -> Optional[bytes]:
        return self._image.displayed_data if self._image else None

    @property
    def has_image(self) -> bool:
        return self.displayed_data is not None

    @property
    def displayed_size(self) -> Optional[Size]:
        data = self.displayed_data
        if data is None:
            return None
        return self._image_service.image_size(data)

    @property
    def displayed_size_string(self) -> str:
        """Размер отображаемого изображения ("W x H") или пустая строка."""
        size = self.displayed_size
        return size.display() if size is not None else ""

    @property
    def image_name(self) -> Optional[str]:
        return self._image.name if self._image else None

    @property
    def image_extension(self) -> Optional[str]:
        return self._image.extension if self._image else None

    # ---- Image lifecycle ----
    def load(self, file_path: str | Path) -> bytes:
        """Открывает новое изображение, заменяя предыдущее.

        Returns:
            Прочитанные байты (они же исходные и отображаемые).

        Raises:
            ImageLoadError: если файл не удаётся прочитать как изображение.
        """
        path = Path(file_path)
        self._image = None
        data = self._image_service.read_bytes(path)
        self._image = ImageInfo(path=path, original_data=data, displayed_data=data)
        self.applied_filter.selected_filter = ImageFilter.NONE
        logger.info("Loaded %s (%s)", path, self.displayed_size_string)
        return data

    def update_displayed(self, data: bytes) -> None:
        if self._image is not None:
            self._image.displayed_data = data

    def clear(self) -> None:
        """Забывает открытое изображение и сбрасывает выбранный фильтр."""
        self._image = None
        self.applied_filter.selected_filter = ImageFilter.NONE

    # ---- Filters ----
    def select_filter(self, name: str | ImageFilter) -> ImageFilter:
        """Делает фильтр активным. Для неизвестного имени: `UnknownFilterError`."""
        image_filter = name if isinstance(name, ImageFilter) else self._selector.from_string(name)
        self.applied_filter.selected_filter = image_filter
        return image_filter

    def should_set_filter_value(self) -> bool:
        """Нужно ли спросить у пользователя значение параметра активного фильтра."""
        return self._selector.requires_parameter(self.applied_filter.selected_filter)

    def alert_values(self) -> Optional[Tuple[str, str, str]]:
        return self._selector.alert_values(self.applied_filter.selected_filter)

    def is_valid(self, value: float) -> bool:
        return self._selector.validate(self.applied_filter.selected_filter, value)

    def parameters_for(self, value: float) -> Optional[Dict[str, float]]:
        return self._selector.parameters_for(self.applied_filter.selected_filter, value)

    def apply_filter(self, parameters: Optional[Mapping[str, float]] = None) -> Optional[bytes]:
        """Применяет активный фильтр к исходному изображению.

        Если фильтр `none` или рендеринг не удался, отображается оригинал.

        Returns:
            Новые отображаемые байты или `None`, если изображение не открыто.
        """
        original = self.original_data
        if original is None:
            return None
        image_filter = self.applied_filter.selected_filter
        rendered = self._filter_service.render(original, image_filter, parameters, self.image_extension)
        if rendered is None:
            if image_filter is not ImageFilter.NONE:
                logger.warning("Filter %s failed, showing the original image", image_filter.value)
            rendered = original
        self.update_displayed(rendered)
        return rendered

    # ---- Resize / save ----
    def resize(self, new_size: Size) -> Optional[Future]:
        """Запускает изменение размера отображаемого изображения в фоновом потоке.

        Фоновый поток только считает новые байты. Состояние сессии меняет
        `complete_resize`, который вызывается из главного потока (см. `AppController`).

        Returns:
            `Future` с новыми байтами (или `None` при ошибке), либо `None`, если изображения нет.
        """
        image = self._image
        if image is None:
            return None
        future = self._executor.submit(self._resize_job, image.displayed_data, new_size, image.extension)
        self._resize_sources[future] = image
        return future

    def complete_resize(self, future: Future) -> ResizeOutcome:
        """Применяет результат завершённого `resize` к отображаемым байтам.

        Результат отбрасывается, если за время работы открыли другое изображение
        или закрыли текущее.
        """
        source = self._resize_sources.pop(future, None)
        error = future.exception()
        if error is not None:
            logger.error("Resize failed: %s", error)
            return ResizeOutcome.FAILED
        resized = future.result()
        if resized is None:
            return ResizeOutcome.FAILED
        if source is None or source is not self._image:
            logger.info("Discarding resize result of an image that is no longer open")
            return ResizeOutcome.STALE
        self.update_displayed(resized)
        return ResizeOutcome.APPLIED

    def save(self, file_path: str | Path) -> bool:
        data = self.displayed_data
        if data is None:
            return False
        return self._image_service.write_bytes(data, file_path)

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False)

    def _resize_job(self, data: bytes, new_size: Size, fmt: Optional[str]) -> Optional[bytes]:
        return self._image_service.resize(data, new_size, fmt)
