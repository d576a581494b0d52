"""Light and dark colours used by the exam screens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from exam_app.core.models import QuestionStatus


class Theme(Enum):
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """One colour expressed for both themes."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Named colours; question matrix colours follow the status legend."""

    TEXT_PRIMARY = ThemeColors(light="#1B1B1B", dark="#F5F5F5")
    TEXT_ON_STATUS = ThemeColors(light="#FFFFFF", dark="#000000")
    WINDOW_BG = ThemeColors(light="#F4F6F8", dark="#2D2D2D")
    PANEL_BORDER = ThemeColors(light="#CED4DA", dark="#555555")

    ACTION_BG = ThemeColors(light="#007BFF", dark="#4A9EFF")
    ACTION_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    NAV_BG = ThemeColors(light="#E9ECEF", dark="#3A3A3A")
    NAV_HOVER_BG = ThemeColors(light="#DDE2E6", dark="#505050")

    ERROR = ThemeColors(light="#D13438", dark="#FF6B6B")

    STATUS_CURRENT = ThemeColors(light="#0000FF", dark="#4A9EFF")
    STATUS_ANSWERED = ThemeColors(light="#008000", dark="#6FCF6F")
    STATUS_NOT_ANSWERED = ThemeColors(light="#FFD700", dark="#FFC83D")
    STATUS_NOT_ATTEMPTED = ThemeColors(light="#FF0000", dark="#FF6B6B")
    STATUS_REVIEW = ThemeColors(light="#808080", dark="#AAAAAA")

    @classmethod
    def status_color(cls, status: QuestionStatus) -> ThemeColors:
        return {
            QuestionStatus.ANSWERED: cls.STATUS_ANSWERED,
            QuestionStatus.NOT_ANSWERED: cls.STATUS_NOT_ANSWERED,
            QuestionStatus.NOT_ATTEMPTED: cls.STATUS_NOT_ATTEMPTED,
            QuestionStatus.REVIEW: cls.STATUS_REVIEW,
        }[status]
