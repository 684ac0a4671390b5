"""Centralized Qt stylesheets for the learner window."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QProgressBar {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_headline_style(passed: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SUCCESS if passed else ColorPalette.ERROR
        return f"font-size: 18pt; font-weight: bold; color: {color.get(theme)};"

    @staticmethod
    def get_timer_style(warning: bool, theme: Theme = Theme.LIGHT) -> str:
        base = "padding: 2px 6px; border-radius: 4px; font-weight: bold;"
        if not warning:
            return base
        return base + f" color: #fff; background-color: {ColorPalette.ERROR.get(theme)};"

    @staticmethod
    def get_dot_style(state_name: str, theme: Theme = Theme.LIGHT) -> str:
        if state_name == "CURRENT":
            return (
                f"background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};"
                f" color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};"
            )
        if state_name == "ANSWERED":
            return (
                f"background-color: {ColorPalette.SUCCESS_BG.get(theme)};"
                f" color: {ColorPalette.SUCCESS.get(theme)};"
            )
        return ""
