"""Abstract interface for the sentence corpus."""

from abc import ABC, abstractmethod

from models import Sentence


class CorpusClient(ABC):
    """Abstract interface for a source of sentence pairs."""

    @abstractmethod
    def search(self, language_code: str) -> list[Sentence]:
        """Request a page of random English sentences translated into a language.

        Args:
            language_code: Corpus code of the target language (e.g. 'fra').

        Returns:
            The sentences returned, possibly fewer than a full page.

        Raises:
            NetworkError: If the corpus could not be reached.
            DecodeError: If the response does not have the expected shape.
        """
        pass

    def close(self) -> None:
        """Release any connections held by the client."""
        pass
