import logging

import flet as ft

from gradepoint.config.settings import settings
from gradepoint.state.app_state import AppState
from gradepoint.ui.views.calculator_view import build_calculator_view

logger = logging.getLogger("gradepoint.ui")


def main(page: ft.Page) -> None:
    page.title = settings.app_title
    page.scroll = ft.ScrollMode.AUTO

    # One state per page so browser tabs never share rows.
    app_state = AppState()

    page.views.clear()
    page.views.append(build_calculator_view(page, app_state))
    page.update()
    logger.info("Calculator session started")
