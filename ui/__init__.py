"""Minicloze UI Module - terminal rendering for the cloze drill."""

from ui.app import DrillUI
from ui.components import (
    PromptPanel,
    GradePanel,
    WelcomeScreen,
    BatchSummary,
)
from ui.styles import (
    ACCENT_RED,
    HIGHLIGHT_GOLD,
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
)

__all__ = [
    "DrillUI",
    "PromptPanel",
    "GradePanel",
    "WelcomeScreen",
    "BatchSummary",
    "ACCENT_RED",
    "HIGHLIGHT_GOLD",
    "SUCCESS_GREEN",
    "ERROR_RED",
    "INFO_BLUE",
    "MUTED_GRAY",
]
