from enum import Enum

from pydantic import BaseModel, ConfigDict


class ScriptKind(str, Enum):
    """How a language's script separates words."""

    SPACE_DELIMITED = "space_delimited"
    UNIT_PER_CHARACTER = "unit_per_character"


class Direction(str, Enum):
    """Which side of a sentence pair is masked."""

    NORMAL = "normal"
    INVERSE = "inverse"


class Grade(str, Enum):
    CORRECT = "correct"
    CLOSE = "close"
    WRONG = "wrong"


# ============================================================================
# Corpus Records
# ============================================================================


class Translation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    text: str


class Sentence(BaseModel):
    """An English sentence and its translation groups, as returned by the corpus.

    The id is the corpus id of the English sentence. It is not used anywhere
    downstream but is kept for diagnostics.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    translations: tuple[tuple[Translation, ...], ...] = ()

    def get_translation(self) -> Translation | None:
        """Get the sentence's translation.

        The corpus sometimes leaves the first group (direct translations)
        empty and puts the translation in the second group (indirect ones).
        Returns None when neither group holds a translation.
        """
        for group in self.translations[:2]:
            if group:
                return group[0]
        return None

    def cloze_text(self, direction: Direction) -> str | None:
        """Text that gets segmented and masked for the given direction."""
        if direction == Direction.INVERSE:
            return self.text
        translation = self.get_translation()
        return translation.text if translation else None

    def reference_text(self, direction: Direction) -> str | None:
        """Text shown alongside the prompt as the reference."""
        if direction == Direction.INVERSE:
            translation = self.get_translation()
            return translation.text if translation else None
        return self.text


class CorpusResponse(BaseModel):
    """The part of a corpus search response we use. Paging info is ignored."""

    results: list[Sentence]


# ============================================================================
# Drill Models
# ============================================================================


class Language(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    code: str
    script: ScriptKind = ScriptKind.SPACE_DELIMITED

    def script_for(self, direction: Direction) -> ScriptKind:
        """Script of the text being masked. English is always space delimited."""
        if direction == Direction.INVERSE:
            return ScriptKind.SPACE_DELIMITED
        return self.script

    def label_for(self, direction: Direction) -> str:
        """Code shown in front of the masked line."""
        if direction == Direction.INVERSE:
            return "eng"
        return self.code


class Prompt(BaseModel):
    """A sentence split around its gap.

    word is the answer key: the excised unit with punctuation and spaces
    removed. first_half and second_half keep the original spacing and any
    punctuation that surrounded the excised unit.
    """

    model_config = ConfigDict(frozen=True)

    first_half: str
    word: str
    second_half: str

    @property
    def is_degenerate(self) -> bool:
        return not self.word


class SessionScore(BaseModel):
    """Correct counts for the current batch and for the whole process."""

    batch_correct: int = 0
    batch_size: int = 0
    overall_correct: int = 0
    overall_total: int = 0
    batches_played: int = 0

    def start_batch(self, size: int) -> None:
        self.batch_correct = 0
        self.batch_size = size

    def skip(self) -> None:
        """Leave one sentence of the current batch out of the totals."""
        self.batch_size -= 1

    def record(self, grade: Grade) -> None:
        """Count one graded answer."""
        if grade == Grade.CORRECT:
            self.batch_correct += 1
            self.overall_correct += 1

    def finish_batch(self) -> None:
        self.overall_total += self.batch_size
        self.batches_played += 1

    @property
    def has_history(self) -> bool:
        """True once more than one batch has been played in this process."""
        return self.batches_played > 1
