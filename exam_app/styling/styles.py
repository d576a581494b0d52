"""Qt stylesheets for the exam window and its panels."""

from exam_app.core.models import QuestionStatus

from .color_palette import ColorPalette, Theme

_HEADING = "font-size: 16pt; font-weight: bold;"


class Styles:
    """Builds stylesheet strings for a theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        text = ColorPalette.TEXT_PRIMARY.get(theme)
        border = ColorPalette.PANEL_BORDER.get(theme)
        return f"""
            QMainWindow {{ background-color: {ColorPalette.WINDOW_BG.get(theme)}; }}
            QWidget {{ color: {text}; font-family: 'Segoe UI', 'Roboto', sans-serif; font-size: 14px; }}
            QPushButton {{
                background-color: {ColorPalette.NAV_BG.get(theme)};
                border: 1px solid {border};
                border-radius: 4px;
                padding: 6px 14px;
            }}
            QPushButton:hover {{ background-color: {ColorPalette.NAV_HOVER_BG.get(theme)}; }}
            QPushButton:disabled {{ color: {border}; }}
            QRadioButton {{ padding: 6px 2px; spacing: 10px; }}
            QGroupBox {{
                border: 1px solid {border};
                border-radius: 6px;
                margin-top: 8px;
                padding-top: 12px;
            }}
            QGroupBox::title {{ subcontrol-origin: margin; left: 10px; padding: 0 4px; }}
        """

    @staticmethod
    def get_primary_button_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.ACTION_BG.get(theme)};"
            f" color: {ColorPalette.ACTION_TEXT.get(theme)};"
            " border: none; border-radius: 5px; padding: 10px 20px;"
        )

    @staticmethod
    def get_matrix_button_style(
        status: QuestionStatus,
        is_current: bool,
        theme: Theme = Theme.LIGHT,
    ) -> str:
        if is_current:
            color = ColorPalette.STATUS_CURRENT.get(theme)
        else:
            color = ColorPalette.status_color(status).get(theme)
        return (
            f"background-color: {color}; color: {ColorPalette.TEXT_ON_STATUS.get(theme)};"
            " border: none; border-radius: 4px; min-width: 36px; min-height: 36px;"
        )

    @staticmethod
    def get_legend_dot_style(status: QuestionStatus, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.status_color(status).get(theme)
        return (
            f"background-color: {color}; border-radius: 7px;"
            " min-width: 14px; max-width: 14px; min-height: 14px; max-height: 14px;"
        )

    @staticmethod
    def get_timer_style(warning: bool, theme: Theme = Theme.LIGHT) -> str:
        # Last minutes: white on red.
        if warning:
            return (
                f"{_HEADING} padding: 2px 6px; border-radius: 4px;"
                f" color: #fff; background-color: {ColorPalette.ERROR.get(theme)};"
            )
        return f"{_HEADING} padding: 2px 6px;"

    @staticmethod
    def get_large_label_style() -> str:
        return _HEADING

    @staticmethod
    def get_error_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.ERROR.get(theme)};"
