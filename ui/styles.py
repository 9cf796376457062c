from rich.theme import Theme
from rich.style import Style
from rich.text import Text

from models import Grade

ACCENT_RED = "#E74C3C"
HIGHLIGHT_GOLD = "#F1C40F"
SUCCESS_GREEN = "#27AE60"
ERROR_RED = "#C0392B"
INFO_BLUE = "#3498DB"
MUTED_GRAY = "#7F8C8D"
TEXT_WHITE = "#FFFFFF"

DEFAULT_THEME = Theme(
    {
        "primary": Style(color=ACCENT_RED, bold=True),
        "secondary": Style(color=HIGHLIGHT_GOLD, bold=True),
        "success": Style(color=SUCCESS_GREEN),
        "error": Style(color=ERROR_RED, bold=True),
        "info": Style(color=INFO_BLUE),
        "muted": Style(color=MUTED_GRAY),
        "label": Style(color=ACCENT_RED, bold=True),
        "gap": Style(color=HIGHLIGHT_GOLD, bold=True),
        "sentence": Style(color=TEXT_WHITE),
        "grade_correct": Style(color=SUCCESS_GREEN, bold=True),
        "grade_close": Style(color=HIGHLIGHT_GOLD, bold=True),
        "grade_wrong": Style(color=ERROR_RED, bold=True),
        "title": Style(color=ACCENT_RED, bold=True),
        "subtitle": Style(color=MUTED_GRAY),
    }
)


def get_grade_style(grade: Grade) -> Style:
    """Get style for a grade."""
    styles = {
        Grade.CORRECT: Style(color=SUCCESS_GREEN, bold=True),
        Grade.CLOSE: Style(color=HIGHLIGHT_GOLD, bold=True),
        Grade.WRONG: Style(color=ERROR_RED, bold=True),
    }
    return styles.get(grade, Style())


def get_grade_border(grade: Grade) -> str:
    """Get the panel border color for a grade."""
    if grade == Grade.CORRECT:
        return SUCCESS_GREEN
    elif grade == Grade.CLOSE:
        return HIGHLIGHT_GOLD
    else:
        return ERROR_RED


def create_grade_header(grade: Grade) -> Text:
    """Create the header line for a graded answer."""
    symbols = {Grade.CORRECT: "✓ ", Grade.CLOSE: "~ ", Grade.WRONG: "✗ "}
    header = Text()
    header.append(symbols.get(grade, ""), get_grade_style(grade))
    header.append(grade.value.capitalize(), get_grade_style(grade))
    return header
