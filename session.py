"""Drill session: present each sentence of a batch, grade it, offer a replay."""

import logging
import random
import time
from enum import Enum

from cloze import DrillConfig, build_prompt, grade
from corpus import CorpusClient, fetch_batch
from languages import LanguageTable
from models import Direction, Grade, Language, Prompt, Sentence, SessionScore
from ui import DrillUI

logger = logging.getLogger(__name__)


class DrillState(str, Enum):
    PRESENTING = "presenting"
    AWAITING_GUESS = "awaiting_guess"
    GRADED = "graded"
    BATCH_COMPLETE = "batch_complete"


class DrillSession:
    """Sequences fetching, prompting and grading for one language.

    Scores carry over between batches for the lifetime of the session and
    are never persisted.
    """

    def __init__(
        self,
        client: CorpusClient,
        language: Language,
        languages: LanguageTable,
        ui: DrillUI,
        config: DrillConfig | None = None,
        direction: Direction = Direction.NORMAL,
        rng: random.Random | None = None,
    ):
        self.client = client
        self.language = language
        self.languages = languages
        self.ui = ui
        self.config = config or DrillConfig()
        self.direction = direction
        self.rng = rng
        self.score = SessionScore()
        self.state = DrillState.BATCH_COMPLETE

    @property
    def inverse(self) -> bool:
        return self.direction == Direction.INVERSE

    def fetch(self) -> list[Sentence]:
        """Fetch the next batch, showing a spinner and a timing summary."""
        started = time.perf_counter()
        with self.ui.fetching():
            sentences = fetch_batch(self.client, self.language.code, self.config.batch_size)
        self.ui.show_fetch_summary(len(sentences), time.perf_counter() - started)
        return sentences

    def _gap_for(self, prompt: Prompt) -> str:
        if self.inverse:
            return self.config.inverse_gap
        return self.config.gap_char * len(prompt.word)

    def _link_for(self, word: str) -> str:
        return self.languages.wiktionary_url(word, self.language.code)

    def _answer_url(self, answer: str) -> str:
        code = "eng" if self.inverse else self.language.code
        return self.languages.wiktionary_url(answer, code)

    def play_sentence(self, sentence: Sentence, number: int, total: int) -> Grade | None:
        """Present one sentence, read a guess and grade it.

        Returns:
            The grade, or None when no gap could be cut from the sentence.
            Such a sentence is left out of the score.
        """
        self.state = DrillState.PRESENTING
        prompt = build_prompt(
            sentence, self.language, self.direction, self.config, self.rng
        )

        if prompt.is_degenerate:
            self.ui.show_info(
                f"Sentence {number}/{total} has no word to fill in, skipping it: "
                f"{prompt.first_half}"
            )
            self.score.skip()
            self.state = DrillState.GRADED
            return None

        reference_label = self.language.code if self.inverse else "eng"
        self.state = DrillState.AWAITING_GUESS
        guess = self.ui.show_prompt(
            prompt=prompt,
            masked_label=self.language.label_for(self.direction),
            reference_label=reference_label,
            reference_text=sentence.reference_text(self.direction) or "",
            gap=self._gap_for(prompt),
            reference_first=self.inverse,
            link_for=None if self.inverse else self._link_for,
            sentence_number=number,
            total_sentences=total,
        )

        result = grade(guess, prompt.word, self.config.close_threshold)
        self.state = DrillState.GRADED
        logger.debug("Graded %r against %r: %s", guess, prompt.word, result.value)

        answer = prompt.word.lower().strip()
        self.ui.show_grade(result, answer, guess, self._answer_url(answer))
        self.score.record(result)
        return result

    def play_batch(self, sentences: list[Sentence]) -> None:
        """Play every sentence of a batch in order."""
        self.ui.clear_screen()
        self.score.start_batch(len(sentences))
        for number, sentence in enumerate(sentences, start=1):
            self.play_sentence(sentence, number, len(sentences))
        self.score.finish_batch()
        self.state = DrillState.BATCH_COMPLETE

    def run(self, sentences: list[Sentence] | None = None) -> SessionScore:
        """Play batches until the learner declines a replay.

        Args:
            sentences: An already fetched first batch. Fetched if omitted.

        Returns:
            The final score.
        """
        if sentences is None:
            sentences = self.fetch()

        while True:
            self.play_batch(sentences)
            if not self.ui.show_batch_summary(self.score):
                return self.score
            sentences = self.fetch()
