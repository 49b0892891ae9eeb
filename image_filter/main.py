"""Точка входа в приложение."""
from image_filter.app import ImageFilterApp
from image_filter.config import AppSettings
from image_filter.utils.logging import get_logger


def main() -> None:
    """Читает настройки, настраивает логирование и запускает главное окно."""
    settings = AppSettings.from_env()
    get_logger(settings.log_level)
    app = ImageFilterApp(settings)
    app.mainloop()


if __name__ == "__main__":
    main()
