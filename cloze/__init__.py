"""Cloze generation and grading engine.

Turns a corpus sentence pair into a prompt with one unit removed, and grades
the learner's guess for that unit.

Pipeline:
- segment(): split the masked text into units (per word or per character)
- generate_prompt(): choose a unit and cut it out, keeping the answer key
- grade(): compare a guess with the answer key by edit distance

build_prompt() runs the first two steps for a sentence and is where a
missing translation becomes an error.
"""

import random

from cloze.config import DrillConfig, SplitStrategy
from cloze.grader import CLOSE_THRESHOLD, grade, levenshtein, normalize
from cloze.prompt import PUNCTUATION, generate_prompt, strip_answer, strip_punctuation
from cloze.segmenter import segment
from errors import MissingTranslation
from models import Direction, Language, Prompt, Sentence


def build_prompt(
    sentence: Sentence,
    language: Language,
    direction: Direction = Direction.NORMAL,
    config: DrillConfig | None = None,
    rng: random.Random | None = None,
) -> Prompt:
    """Build the prompt for one sentence.

    Raises:
        MissingTranslation: If the sentence has no translation to work with.
    """
    config = config or DrillConfig()
    text = sentence.cloze_text(direction)
    if text is None or sentence.reference_text(direction) is None:
        raise MissingTranslation(sentence.id)

    units = segment(text, language.script_for(direction))
    return generate_prompt(units, strategy=config.split_strategy, rng=rng)


__all__ = [
    # Pipeline
    "build_prompt",
    "segment",
    "generate_prompt",
    "grade",
    # Text helpers
    "PUNCTUATION",
    "strip_punctuation",
    "strip_answer",
    "normalize",
    "levenshtein",
    "CLOSE_THRESHOLD",
    # Configuration
    "DrillConfig",
    "SplitStrategy",
]
