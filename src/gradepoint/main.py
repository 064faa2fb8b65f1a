import flet as ft

from gradepoint.config.settings import settings
from gradepoint.core.logging import setup_logging
from gradepoint.ui.app import main


def run() -> None:
    setup_logging()
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
