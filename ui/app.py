from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console
from rich.text import Text
from rich.panel import Panel

from models import Grade, Prompt, SessionScore
from ui.components import (
    BatchSummary,
    GradePanel,
    LinkBuilder,
    PromptPanel,
    WelcomeScreen,
)
from ui.styles import (
    DEFAULT_THEME,
    ERROR_RED,
    HIGHLIGHT_GOLD,
    INFO_BLUE,
    MUTED_GRAY,
)


class DrillUI:
    """Main UI orchestrator for the cloze drill."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(theme=DEFAULT_THEME)

    def ask_language(self) -> str:
        """Ask which language to study."""
        return self.console.input(
            Text("What language do you want to study? ", style=f"bold {MUTED_GRAY}")
        ).strip()

    def show_welcome(self, language_name: str, language_code: str, inverse: bool) -> None:
        self.console.print(WelcomeScreen(language_name, language_code, inverse))
        self.console.print()

    @contextmanager
    def fetching(self) -> Iterator[None]:
        """Show a spinner while sentences are being fetched."""
        with self.console.status(
            Text("Fetching sentences for you...", style=HIGHLIGHT_GOLD)
        ):
            yield

    def show_fetch_summary(self, count: int, seconds: float) -> None:
        self.console.print(
            Text(
                f"Processing complete in {seconds:.2f}s, {count} sentences parsed.",
                style=INFO_BLUE,
            )
        )

    def show_prompt(
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
    ) -> str:
        """Display a prompt and read the learner's guess.

        Returns:
            The raw line typed by the learner.
        """
        panel = PromptPanel(
            prompt=prompt,
            masked_label=masked_label,
            reference_label=reference_label,
            reference_text=reference_text,
            gap=gap,
            reference_first=reference_first,
            link_for=link_for,
            sentence_number=sentence_number,
            total_sentences=total_sentences,
        )
        self.console.print(panel)
        return self.console.input(Text("> ", style=f"bold {MUTED_GRAY}"))

    def show_grade(
        self,
        grade: Grade,
        answer: str,
        user_answer: str = "",
        answer_url: Optional[str] = None,
    ) -> None:
        """Display the grade for the learner's guess."""
        self.console.print(
            GradePanel(
                grade=grade,
                answer=answer,
                user_answer=user_answer.strip(),
                answer_url=answer_url,
            )
        )
        self.console.print()

    def show_batch_summary(self, score: SessionScore) -> bool:
        """Display the batch score and ask whether to play again.

        Returns:
            True if the learner wants another batch.
        """
        self.console.print(BatchSummary(score))
        reply = self.console.input(
            Text("Play again? [y/n] ", style=f"bold {MUTED_GRAY}")
        )
        return reply.strip().lower().startswith("y")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(
            Panel(
                Text(f"Error: {message}", style=ERROR_RED),
                title="Error",
                border_style=ERROR_RED,
            )
        )

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self.console.print(Text(message, style=INFO_BLUE))

    def show_goodbye(self) -> None:
        self.console.print()
        self.console.print(Text("Goodbye!", style=MUTED_GRAY))

    def clear_screen(self) -> None:
        """Clear the terminal screen."""
        self.console.clear()

    def wait_for_exit(self) -> None:
        """Wait for the learner to press Enter before exiting."""
        self.console.input(Text("Press Enter to exit...", style=f"bold {MUTED_GRAY}"))
