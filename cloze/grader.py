"""Grade typed guesses against the answer key by edit distance."""

from rapidfuzz.distance import Levenshtein

from cloze.prompt import strip_answer
from models import Grade

CLOSE_THRESHOLD = 3


def normalize(text: str) -> str:
    """Lowercase, trim, and drop punctuation and spaces."""
    return strip_answer(text.strip().lower())


def levenshtein(a: str, b: str) -> int:
    """Edit distance counted in characters (code points), not bytes."""
    return Levenshtein.distance(a, b)


def grade(raw_guess: str, answer_key: str, close_threshold: int = CLOSE_THRESHOLD) -> Grade:
    """Classify a guess.

    Args:
        raw_guess: The line the learner typed.
        answer_key: The prompt's answer key.
        close_threshold: Distances from 1 up to (but excluding) this value
            count as close.

    Returns:
        CORRECT for an exact match after normalization, CLOSE for a small
        distance, WRONG otherwise.
    """
    distance = levenshtein(normalize(raw_guess), normalize(answer_key))
    if distance == 0:
        return Grade.CORRECT
    if distance < close_threshold:
        return Grade.CLOSE
    return Grade.WRONG
