"""Split sentences into the units a gap can be cut from."""

from models import ScriptKind


def segment(text: str, script: ScriptKind) -> list[str]:
    """Split text into units that join back into the trimmed text.

    Space-delimited scripts are split on the space character with each unit
    keeping its trailing space, so "a  b" gives ["a ", " ", "b"]. Other
    scripts give one unit per character.

    Args:
        text: The sentence text. Surrounding whitespace is trimmed first.
        script: The script classification of the sentence's language.

    Returns:
        Ordered units. Empty for empty or all-whitespace text.
    """
    trimmed = text.strip()
    if not trimmed:
        return []

    if script == ScriptKind.UNIT_PER_CHARACTER:
        return list(trimmed)

    parts = trimmed.split(" ")
    return [part + " " for part in parts[:-1]] + [parts[-1]]
