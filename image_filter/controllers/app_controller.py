"""Контроллер приложения: оркестрация UI и сессии редактора.

SOLID:
- SRP: класс связывает UI с `EditorSession`, сам не считает размеры и не рендерит фильтры.
- DIP: сессия и сервисы подставляются через поля dataclass (в тестах их заменяют заглушки).
Clean Code:
- Обработчики компактны; модальные окна вынесены в методы `_ask_*`.
"""
from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass, field
from pathlib import Path
from tkinter import filedialog, TclError
from typing import Mapping, Optional, Tuple

import customtkinter as ctk

from image_filter.config import AppSettings
from image_filter.errors import ImageLoadError
from image_filter.models.size_model import Size
from image_filter.services.editor_session import EditorSession, ResizeOutcome
from image_filter.services.image_service import ImageService
from image_filter.services.resize_calculator import ResizeCalculator
from image_filter.ui.bottom_bar import BottomBar
from image_filter.ui.dialogs import (
    FilterParameterDialog,
    MissingImageAlert,
    ParameterChoice,
    ResizeDialog,
    show_error,
)
from image_filter.ui.image_viewer import ImageViewer
from image_filter.ui.sidebar import Sidebar
from image_filter.utils.logging import logger

RESIZE_POLL_MS = 50


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Бинд событий боковой панели (UI -> контроллер).
    - Открытие/сохранение/закрытие изображения через `EditorSession`.
    - Выбор фильтра и запрос его параметра.
    - Изменение размера: окно с `ResizeCalculator`, фоновый рендер, обновление UI в главном потоке.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    settings: AppSettings = field(default_factory=AppSettings)

    session: Optional[EditorSession] = None
    _image_service: ImageService = field(default_factory=ImageService)
    _pending_resize: Optional[Future] = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = EditorSession(
                image_service=self._image_service,
                supported_formats=self.settings.supported_formats,
            )

    def bind_events(self) -> None:
        """Регистрирует обработчики событий боковой панели."""
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_save_file = self._handle_save_file
        self.sidebar.on_clear_image = self._handle_clear_image
        self.sidebar.on_filter_change = self._handle_filter_change
        self.sidebar.on_resize = self._handle_resize

    def shutdown(self) -> None:
        """Останавливает фоновый поток изменения размера."""
        self.session.shutdown()

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        file_path = self._ask_open_path()
        if not file_path:
            return
        self.open_image(file_path)

    def open_image(self, file_path: str | Path) -> bool:
        """Загружает изображение и обновляет все виджеты. Возвращает успех."""
        try:
            self.session.load(file_path)
        except ImageLoadError as exc:
            logger.warning("Cannot open %s: %s", file_path, exc.reason)
            self._show_error("Не удалось открыть изображение", str(exc))
            self._reset_views()
            return False

        self.sidebar.reset_filter()
        self.sidebar.set_image_actions_enabled(True)
        self._refresh_displayed()
        return True

    def _handle_save_file(self) -> None:
        session = self.session
        if not session.has_image or session.image_extension is None:
            return
        file_path = self._ask_save_path()
        if not file_path:
            return
        if session.save(file_path):
            self.bottom.set_message(f"Сохранено: {Path(file_path).name}")
        else:
            self._show_error("Ошибка сохранения", f"Не удалось сохранить файл: {file_path}")

    def _handle_clear_image(self) -> None:
        self.session.clear()
        self._reset_views()

    def _handle_filter_change(self, name: str) -> None:
        session = self.session
        if not session.has_image:
            self._show_no_image_alert()
            self.sidebar.reset_filter()
            return

        session.select_filter(name)
        if not session.should_set_filter_value():
            self._apply_filter(None)
            return

        alert_values = session.alert_values()
        if alert_values is None:
            return
        choice, value = self._ask_parameter(alert_values)
        if choice is ParameterChoice.CANCEL:
            return
        parameters = None
        if choice is ParameterChoice.OK and value is not None:
            # out-of-range values fall back to the filter default
            parameters = session.parameters_for(value)
        self._apply_filter(parameters)

    def _handle_resize(self) -> None:
        session = self.session
        displayed_size = session.displayed_size
        if displayed_size is None or self._pending_resize is not None:
            return
        calculator = ResizeCalculator(lock_aspect_ratio=session.applied_filter.lock_aspect_ratio)
        calculator.set_original(displayed_size)
        new_size = self._ask_new_size(calculator)
        session.applied_filter.lock_aspect_ratio = calculator.lock_aspect_ratio
        if new_size is None:
            return
        self.start_resize(new_size)

    # ---- Resize (background) ----
    def start_resize(self, new_size: Size) -> None:
        future = self.session.resize(new_size)
        if future is None:
            return
        self._pending_resize = future
        self.bottom.set_busy(True)
        self.bottom.set_message("Изменение размера…")
        self.window.after(RESIZE_POLL_MS, self._poll_resize, future)

    def _poll_resize(self, future: Future) -> None:
        # Tk widgets are touched only here, on the main loop thread
        if not future.done():
            self.window.after(RESIZE_POLL_MS, self._poll_resize, future)
            return
        self._pending_resize = None
        self.bottom.set_busy(False)
        outcome = self.session.complete_resize(future)
        if outcome is ResizeOutcome.FAILED:
            self.bottom.set_message("Ошибка изменения размера")
            return
        self.bottom.set_message("")
        if outcome is ResizeOutcome.APPLIED:
            # a stale result leaves the views on the image opened after the resize started
            self._refresh_displayed()

    # ---- Helpers ----
    def _apply_filter(self, parameters: Optional[Mapping[str, float]]) -> None:
        self.session.apply_filter(parameters)
        self._refresh_displayed()

    def _refresh_displayed(self) -> None:
        session = self.session
        data = session.displayed_data
        image = self._image_service.decode(data) if data is not None else None
        self.viewer.set_image(image)
        name = session.image_name or ""
        size_text = session.displayed_size_string
        self.sidebar.set_image_info(name, size_text)
        self.bottom.set_image(name, size_text)

    def _reset_views(self) -> None:
        self.viewer.clear()
        self.sidebar.clear_image_info()
        self.sidebar.reset_filter()
        self.sidebar.set_image_actions_enabled(False)
        self.bottom.clear()

    def _show_no_image_alert(self) -> None:
        if not self.session.show_no_image_alert:
            return
        if MissingImageAlert(self.window).show():
            self.session.show_no_image_alert = False

    def _show_error(self, title: str, message: str) -> None:
        try:
            show_error(self.window, title, message)
        except TclError:
            # Silent fail if dialog cannot open
            pass

    # ---- Dialogs ----
    def _ask_open_path(self) -> str:
        try:
            return filedialog.askopenfilename(
                parent=self.window,
                title="Выберите изображение",
                filetypes=self.settings.open_dialog_filetypes,
            )
        except TclError:
            return ""

    def _ask_save_path(self) -> str:
        extension = self.session.image_extension or "png"
        try:
            return filedialog.asksaveasfilename(
                parent=self.window,
                title="Сохранить изображение",
                initialfile=self.session.image_name or "untitled",
                defaultextension=f".{extension}",
                filetypes=((extension.upper(), f"*.{extension}"),),
            )
        except TclError:
            return ""

    def _ask_parameter(self, alert_values: Tuple[str, str, str]) -> Tuple[ParameterChoice, Optional[float]]:
        return FilterParameterDialog(self.window, alert_values).show()

    def _ask_new_size(self, calculator: ResizeCalculator) -> Optional[Size]:
        return ResizeDialog(self.window, calculator).show()
