"""Prompt generation: pick a unit, cut it out, and keep the answer key."""

import logging
import random

from cloze.config import SplitStrategy
from errors import SegmentationDegenerate
from models import Prompt

logger = logging.getLogger(__name__)

# ASCII and common non-English marks, including the inverted Spanish marks,
# guillemets and the ideographic full stop.
PUNCTUATION = "(),.;:?¿!¡\"«»。"

_PUNCTUATION_TABLE = str.maketrans("", "", PUNCTUATION)


def strip_punctuation(text: str) -> str:
    """Remove punctuation marks, keeping spaces."""
    return text.translate(_PUNCTUATION_TABLE)


def strip_answer(text: str) -> str:
    """Remove punctuation marks and all whitespace, giving the form used for grading.

    Any Unicode whitespace counts, including no-break spaces.
    """
    return "".join(char for char in strip_punctuation(text) if not char.isspace())


def _is_trimmable(char: str) -> bool:
    return char in PUNCTUATION or char.isspace()


def _has_text(unit: str) -> bool:
    return not all(_is_trimmable(char) for char in unit)


def _split_at_index(units: list[str], index: int) -> tuple[str, str, str]:
    """Cut units[index] out of the sentence at its own position.

    Punctuation and spacing around the unit's text stay with the halves, so
    first + gap + second always equals the joined units.
    """
    raw = units[index]
    start = 0
    end = len(raw)
    while start < end and _is_trimmable(raw[start]):
        start += 1
    while end > start and _is_trimmable(raw[end - 1]):
        end -= 1
    if start == end:
        raise SegmentationDegenerate(f"unit {index} ({raw!r}) holds no text")

    first_half = "".join(units[:index]) + raw[:start]
    second_half = raw[end:] + "".join(units[index + 1 :])
    return first_half, raw[start:end], second_half


def _split_first_occurrence(units: list[str], index: int) -> tuple[str, str, str]:
    """Cut the first occurrence of units[index]'s text out of the sentence.

    If the same text appears earlier in the sentence, that earlier occurrence
    is the one removed.
    """
    gap = strip_punctuation(units[index]).strip()
    if not gap:
        raise SegmentationDegenerate(f"unit {index} ({units[index]!r}) holds no text")

    joined = "".join(units)
    first_half, found, second_half = joined.partition(gap)
    if not found:
        raise SegmentationDegenerate(f"{gap!r} does not occur in {joined!r}")
    return first_half, gap, second_half


_SPLITTERS = {
    SplitStrategy.INDEX: _split_at_index,
    SplitStrategy.FIRST_OCCURRENCE: _split_first_occurrence,
}


def generate_prompt(
    units: list[str],
    strategy: SplitStrategy = SplitStrategy.INDEX,
    rng: random.Random | None = None,
) -> Prompt:
    """Generate a cloze prompt from a sentence's units.

    A unit is drawn uniformly from those that still hold text once
    punctuation is removed. When the sentence has no such unit, or the gap
    cannot be located, the whole sentence becomes the first half and the
    answer key is empty.

    Args:
        units: Output of segment() for the sentence.
        strategy: How the chosen unit is cut out of the sentence.
        rng: Random source, the module-level generator if omitted.

    Returns:
        The prompt with its answer key.
    """
    rng = rng or random
    joined = "".join(units)

    candidates = [i for i, unit in enumerate(units) if _has_text(unit)]
    if not candidates:
        logger.warning("No unit with text in %r, showing the sentence without a gap", joined)
        return Prompt(first_half=joined, word="", second_half="")

    index = rng.choice(candidates)
    logger.debug("Chose unit %d of %d: %r", index, len(units), units[index])

    try:
        first_half, gap, second_half = _SPLITTERS[strategy](units, index)
    except SegmentationDegenerate as e:
        logger.warning("Could not cut gap out of sentence: %s", e)
        return Prompt(first_half=joined, word="", second_half="")

    return Prompt(
        first_half=first_half,
        word=strip_answer(gap),
        second_half=second_half,
    )
