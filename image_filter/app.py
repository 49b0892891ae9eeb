import customtkinter as ctk

from image_filter.config import AppSettings
from image_filter.controllers.app_controller import AppController
from image_filter.services.filter_selector import FilterSelector
from image_filter.ui.bottom_bar import BottomBar
from image_filter.ui.image_viewer import ImageViewer
from image_filter.ui.sidebar import Sidebar


class ImageFilterApp(ctk.CTk):
    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        ctk.set_appearance_mode(self._settings.appearance_mode)
        ctk.set_default_color_theme(self._settings.color_theme)

        self.title(self._settings.title)
        self.minsize(*self._settings.min_size)

        # root layout: left viewer, right sidebar, status bar below
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._viewer = ImageViewer(self)
        self._viewer.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self, filters=FilterSelector().available_filters())
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(
            viewer=self._viewer, sidebar=self._sidebar, bottom=self._bottom, window=self, settings=self._settings
        )
        self._controller.bind_events()
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def _on_close(self) -> None:
        self._controller.shutdown()
        self.destroy()
