from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional, Tuple

import numpy as np
from PIL import Image, ImageChops, ImageFilter as PILImageFilter, ImageOps

from image_filter.models.filters import ImageFilter, filter_spec
from image_filter.services.image_service import ImageService
from image_filter.utils.logging import logger

# Классическая матрица сепии (строки: R, G, B выходного пикселя)
_SEPIA_MATRIX = np.array(
    [
        [0.393, 0.769, 0.189],
        [0.349, 0.686, 0.168],
        [0.272, 0.534, 0.131],
    ],
    dtype=np.float32,
)

Renderer = Callable[[Image.Image, Optional[float]], Image.Image]


class FilterService:
    """Применение встроенных фильтров поверх примитивов Pillow.

    Рендерер работает с байтами: на вход исходный файл, на выход закодированный
    результат в том же формате (или в `fmt`, если он указан).
    """

    def __init__(self, image_service: Optional[ImageService] = None) -> None:
        self._image_service = image_service or ImageService()
        self._renderers: Dict[ImageFilter, Renderer] = {
            ImageFilter.SEPIA: self.sepia,
            ImageFilter.MONO: lambda image, _value: self.mono(image),
            ImageFilter.BLUR: self.blur,
            ImageFilter.COMIC: lambda image, _value: self.comic(image),
        }

    def render(
        self,
        data: bytes,
        image_filter: ImageFilter,
        parameters: Optional[Mapping[str, float]] = None,
        fmt: Optional[str] = None,
    ) -> Optional[bytes]:
        """Применяет фильтр к закодированному изображению.

        Args:
            data: Байты исходного изображения.
            image_filter: Фильтр из закрытого набора.
            parameters: `{имя_параметра: значение}`; если не задан, берётся значение по умолчанию.
            fmt: Формат результата; по умолчанию формат исходника.

        Returns:
            Байты результата или `None` для `ImageFilter.NONE` и недекодируемых данных.
        """
        renderer = self._renderers.get(image_filter)
        if renderer is None:
            return None
        source = self._image_service.decode(data)
        if source is None:
            return None

        value = self._parameter_value(image_filter, parameters)
        logger.debug("Rendering filter %s (value=%s)", image_filter.value, value)
        rendered = renderer(source, value)
        return self._image_service.encode(rendered, fmt or source.format)

    # ---------- Фильтры ----------
    def sepia(self, image: Image.Image, intensity: Optional[float] = None) -> Image.Image:
        """
        Тонирование в сепию, смешанное с оригиналом с весом `intensity` (0..1).
        """
        amount = 1.0 if intensity is None else float(np.clip(intensity, 0.0, 1.0))
        rgb, alpha = self._split_alpha(image)
        arr = np.asarray(rgb, dtype=np.float32)
        toned = np.clip(arr @ _SEPIA_MATRIX.T, 0, 255)
        out = arr + (toned - arr) * amount
        result = Image.fromarray(np.rint(out).astype(np.uint8))
        return self._merge_alpha(result, alpha)

    def mono(self, image: Image.Image) -> Image.Image:
        rgb, alpha = self._split_alpha(image)
        gray = ImageOps.grayscale(rgb).convert("RGB")
        return self._merge_alpha(gray, alpha)

    def blur(self, image: Image.Image, radius: Optional[float] = None) -> Image.Image:
        radius = filter_spec(ImageFilter.BLUR).default_value if radius is None else radius
        rgb, alpha = self._split_alpha(image)
        blurred = rgb.filter(PILImageFilter.GaussianBlur(radius=radius))
        return self._merge_alpha(blurred, alpha)

    def comic(self, image: Image.Image) -> Image.Image:
        """
        «Комикс»: сглаживание + постеризация цветов и тёмные контуры поверх.
        """
        rgb, alpha = self._split_alpha(image)
        flat = ImageOps.posterize(rgb.filter(PILImageFilter.SMOOTH_MORE), 3)

        edges = ImageOps.grayscale(rgb).filter(PILImageFilter.FIND_EDGES)
        edges_arr = np.asarray(edges, dtype=np.uint8)
        # контур = 0 (чёрный), остальное = 255
        ink = np.where(edges_arr > 32, 0, 255).astype(np.uint8)
        ink_img = Image.fromarray(ink).convert("RGB")

        result = ImageChops.multiply(flat, ink_img)
        return self._merge_alpha(result, alpha)

    # ---------- Вспомогательные функции ----------
    def _parameter_value(
        self, image_filter: ImageFilter, parameters: Optional[Mapping[str, float]]
    ) -> Optional[float]:
        spec = filter_spec(image_filter)
        if not spec.requires_parameter:
            return None
        if parameters and spec.parameter_name in parameters:
            return float(parameters[spec.parameter_name])
        return spec.default_value

    def _split_alpha(self, image: Image.Image) -> Tuple[Image.Image, Optional[Image.Image]]:
        if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
            rgba = image.convert("RGBA")
            return rgba.convert("RGB"), rgba.getchannel("A")
        return image.convert("RGB"), None

    def _merge_alpha(self, image: Image.Image, alpha: Optional[Image.Image]) -> Image.Image:
        if alpha is None:
            return image
        out = image.convert("RGBA")
        out.putalpha(alpha)
        return out
