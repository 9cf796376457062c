"""Error definitions for the cloze drill."""


class ClozeError(Exception):
    """Base exception for all custom errors."""


class NetworkError(ClozeError):
    """Raised when the sentence corpus cannot be reached."""


class DecodeError(ClozeError):
    """Raised when a corpus response does not have the expected shape.

    Attributes:
        position: Where decoding failed. "line X column Y" for malformed
            JSON, or a dotted field path for records of the wrong shape.
        detail: The underlying parser message.
    """

    def __init__(self, position: str, detail: str):
        self.position = position
        self.detail = detail
        super().__init__(f"Could not decode corpus response at {position}: {detail}")


class SegmentationDegenerate(ClozeError):
    """Raised when the gap token cannot be located in the joined sentence."""


class InvalidLanguage(ClozeError):
    """Raised when a language name has no corpus code."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"'{name}' is not a supported language")


class MissingTranslation(ClozeError):
    """Raised when a sentence has no translation in either leading group."""

    def __init__(self, sentence_id: int):
        self.sentence_id = sentence_id
        super().__init__(f"Sentence {sentence_id} has no translation to practise")
