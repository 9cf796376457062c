"""Shared pytest fixtures for the Minicloze test suite."""

import random
from typing import Any

import pytest

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from corpus import CorpusClient
from languages import LanguageTable
from models import Language, Sentence, Translation


def make_sentence(sentence_id: int, english: str, *groups: list[str]) -> Sentence:
    """Build a sentence whose translation groups hold the given texts."""
    next_id = sentence_id * 100
    translation_groups = []
    for group in groups:
        translations = []
        for text in group:
            next_id += 1
            translations.append(Translation(id=next_id, text=text))
        translation_groups.append(tuple(translations))
    return Sentence(id=sentence_id, text=english, translations=tuple(translation_groups))


def make_page(size: int, start: int = 1, prefix: str = "s") -> list[Sentence]:
    """Build a page of distinct French sentences."""
    return [
        make_sentence(i, f"{prefix}{i} is a cat.", [f"{prefix}{i} est un chat."], [])
        for i in range(start, start + size)
    ]


class ScriptedCorpus(CorpusClient):
    """Corpus client that replays queued pages or raises queued errors."""

    def __init__(self, responses: list[Any]):
        self.responses = list(responses)
        self.calls: list[str] = []
        self.closed = False

    def search(self, language_code: str) -> list[Sentence]:
        self.calls.append(language_code)
        if not self.responses:
            return []
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return list(response)

    def close(self) -> None:
        self.closed = True


class InputSequence:
    """Callable providing sequential inputs for mocked Console.input().

    Tracks all prompts received for debugging failed tests.
    """

    def __init__(self, inputs: list[str]):
        self.inputs = inputs
        self.index = 0
        self.call_history: list[tuple[int, Any]] = []

    def __call__(self, *args: Any, **kwargs: Any) -> str:
        prompt = args[-1] if args else ""
        self.call_history.append((self.index, prompt))
        if self.index >= len(self.inputs):
            history = "\n".join(f"  {i}: {p}" for i, p in self.call_history)
            raise StopIteration(
                f"Ran out of inputs at call {self.index}.\n"
                f"Prompt: {prompt}\n"
                f"History:\n{history}"
            )
        result = self.inputs[self.index]
        self.index += 1
        return result

    @property
    def remaining(self) -> int:
        """Number of unused inputs remaining."""
        return len(self.inputs) - self.index


@pytest.fixture
def language_table() -> LanguageTable:
    return LanguageTable.default()


@pytest.fixture
def french(language_table) -> Language:
    return language_table.resolve("french")


@pytest.fixture
def japanese(language_table) -> Language:
    return language_table.resolve("japanese")


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for deterministic unit selection."""
    return random.Random(42)


@pytest.fixture
def french_sentence() -> Sentence:
    return make_sentence(1, "The cat is black.", ["Le chat est noir."], [])


@pytest.fixture
def indirect_sentence() -> Sentence:
    """A sentence whose only translation is in the second group."""
    return make_sentence(2, "Hello", [], ["Hola"])


@pytest.fixture
def untranslated_sentence() -> Sentence:
    return make_sentence(3, "Nobody translated me.", [], [])


@pytest.fixture
def sample_response_body() -> str:
    """A trimmed Tatoeba search response."""
    return """{
  "paging": {"Sentences": {"page": 1, "count": 2, "perPage": 10}},
  "results": [
    {
      "id": 1276,
      "text": "Let's try something.",
      "lang": "eng",
      "translations": [
        [{"id": 2481, "text": "Essayons quelque chose !", "lang": "fra"}],
        []
      ]
    },
    {
      "id": 1277,
      "text": "I have to go to sleep.",
      "lang": "eng",
      "translations": [
        [],
        [{"id": 4705, "text": "Je dois aller dormir.", "lang": "fra"}]
      ]
    }
  ]
}"""


class PickIndex:
    """Stands in for random.Random, always choosing the same unit index."""

    def __init__(self, index: int):
        self.index = index
        self.offered: list[int] = []

    def choice(self, candidates):
        self.offered = list(candidates)
        assert self.index in candidates
        return self.index
