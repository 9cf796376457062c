import re
import string
from typing import Callable, Optional

from rich.text import Text
from rich.panel import Panel
from rich.table import Table
from rich.style import Style
from rich.align import Align
from rich.columns import Columns
from rich import box

from cloze import PUNCTUATION
from models import Grade, Prompt, SessionScore
from ui.styles import (
    ACCENT_RED,
    HIGHLIGHT_GOLD,
    SUCCESS_GREEN,
    ERROR_RED,
    MUTED_GRAY,
    TEXT_WHITE,
    create_grade_header,
    get_grade_border,
    get_grade_style,
)

LinkBuilder = Callable[[str], str]

_LINK_TRIM = string.punctuation + PUNCTUATION
_SPACES = re.compile(r"( +)")


def append_linked(content: Text, text: str, link_for: Optional[LinkBuilder], style: Style) -> None:
    """Append text, hyperlinking each space-separated word when link_for is set."""
    if link_for is None:
        content.append(text, style)
        return

    for piece in _SPACES.split(text):
        word = piece.strip(_LINK_TRIM)
        if not piece.strip() or not word:
            content.append(piece, style)
        else:
            content.append(piece, style + Style(link=link_for(word)))


class PromptPanel:
    """A styled panel showing a sentence with its gap and the reference text."""

    def __init__(
        self,
        prompt: Prompt,
        masked_label: str,
        reference_label: str,
        reference_text: str,
        gap: str,
        reference_first: bool = False,
        link_for: Optional[LinkBuilder] = None,
        sentence_number: int = 0,
        total_sentences: int = 0,
    ):
        self.prompt = prompt
        self.masked_label = masked_label
        self.reference_label = reference_label
        self.reference_text = reference_text
        self.gap = gap
        self.reference_first = reference_first
        self.link_for = link_for
        self.sentence_number = sentence_number
        self.total_sentences = total_sentences

    def _masked_line(self) -> Text:
        line = Text()
        line.append(f"{self.masked_label.upper()}: ", Style(color=ACCENT_RED, bold=True))
        sentence_style = Style(color=TEXT_WHITE)
        append_linked(line, self.prompt.first_half, self.link_for, sentence_style)
        line.append(self.gap, Style(color=HIGHLIGHT_GOLD, bold=True))
        append_linked(line, self.prompt.second_half, self.link_for, sentence_style)
        return line

    def _reference_line(self) -> Text:
        line = Text()
        line.append(f"{self.reference_label.upper()}: ", Style(color=ACCENT_RED, bold=True))
        line.append(self.reference_text, Style(color=MUTED_GRAY))
        return line

    def render(self) -> Panel:
        content = Text()

        if self.total_sentences > 0:
            content.append(
                f"Sentence {self.sentence_number}/{self.total_sentences}\n\n",
                Style(color=MUTED_GRAY),
            )

        lines = [self._masked_line(), self._reference_line()]
        if self.reference_first:
            lines.reverse()
        content.append(lines[0])
        content.append("\n")
        content.append(lines[1])

        return Panel(
            Align.left(content),
            title="Minicloze",
            subtitle="Type the missing word",
            border_style=ACCENT_RED,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class GradePanel:
    """A styled panel for the grade of a guess."""

    def __init__(
        self,
        grade: Grade,
        answer: str,
        user_answer: str = "",
        answer_url: Optional[str] = None,
    ):
        self.grade = grade
        self.answer = answer
        self.user_answer = user_answer
        self.answer_url = answer_url

    def render(self) -> Panel:
        content = create_grade_header(self.grade)
        content.append("\n")

        if self.grade != Grade.CORRECT and self.user_answer:
            content.append(f"You answered: {self.user_answer}\n", Style(color=MUTED_GRAY))

        content.append("\n")
        content.append("Answer: ", Style(color=MUTED_GRAY))
        answer_style = get_grade_style(self.grade)
        if self.answer_url:
            answer_style += Style(link=self.answer_url)
        content.append(self.answer, answer_style)

        return Panel(
            Align.left(content),
            title="Result",
            border_style=get_grade_border(self.grade),
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class WelcomeScreen:
    """Welcome screen with the chosen language and direction."""

    def __init__(self, language_name: str, language_code: str, inverse: bool = False):
        self.language_name = language_name
        self.language_code = language_code
        self.inverse = inverse

    def render(self) -> Panel:
        banner = Text()
        banner.append("Minicloze\n", Style(color=ACCENT_RED, bold=True))
        banner.append(
            "Fill in the missing word of each sentence.\n\n", Style(color=TEXT_WHITE)
        )
        banner.append("Press Ctrl+C at any time to quit.", Style(color=MUTED_GRAY))

        stats = Table(
            show_header=False,
            border_style=MUTED_GRAY,
            box=box.ROUNDED,
        )
        stats.add_column("Label", justify="center")
        stats.add_column("Value", justify="center")

        stats.add_row(
            Text("Language", style=Style(color=MUTED_GRAY)),
            Text(
                f"{self.language_name.title()} ({self.language_code})",
                style=Style(color=HIGHLIGHT_GOLD, bold=True),
            ),
        )
        stats.add_row(
            Text("Gap in", style=Style(color=MUTED_GRAY)),
            Text(
                "English" if self.inverse else self.language_name.title(),
                style=Style(color=HIGHLIGHT_GOLD, bold=True),
            ),
        )

        return Panel(
            Columns(
                [Align.center(banner), Align.center(stats)],
                align="center",
                padding=(1, 3),
            ),
            border_style=ACCENT_RED,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class BatchSummary:
    """Score summary shown at the end of a batch."""

    def __init__(self, score: SessionScore):
        self.score = score

    def summary_line(self) -> str:
        score = self.score
        line = f"{score.batch_correct}/{score.batch_size} sentences correct"
        if score.has_history:
            line += (
                f" locally, {score.overall_correct}/{score.overall_total}"
                " sentences correct overall"
            )
        return line + "."

    def render(self) -> Panel:
        score = self.score
        accuracy = (
            score.overall_correct / score.overall_total * 100
            if score.overall_total > 0
            else 0
        )

        stats = Table(
            show_header=False,
            border_style=MUTED_GRAY,
            box=box.SIMPLE,
        )
        stats.add_column("Label", style=Style(color=MUTED_GRAY))
        stats.add_column("Value", justify="right")

        stats.add_row(
            "This batch",
            Text(f"{score.batch_correct}/{score.batch_size}", style=Style(color=SUCCESS_GREEN)),
        )
        stats.add_row("Overall", f"{score.overall_correct}/{score.overall_total}")
        stats.add_row(
            "Accuracy",
            Text(f"{accuracy:.0f}%", style=Style(color=HIGHLIGHT_GOLD, bold=True)),
        )

        content = Text()
        content.append(self.summary_line(), Style(color=TEXT_WHITE, bold=True))

        return Panel(
            Columns(
                [Align.center(content), Align.center(stats)],
                align="center",
                padding=(0, 1),
            ),
            title="Batch Complete",
            border_style=HIGHLIGHT_GOLD if score.batch_correct else ERROR_RED,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()
