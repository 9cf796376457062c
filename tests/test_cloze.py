"""Unit tests for building prompts from corpus sentences."""

import pytest

from cloze import DrillConfig, SplitStrategy, build_prompt
from conftest import PickIndex, make_sentence
from errors import MissingTranslation
from models import Direction


class TestBuildPrompt:
    """Tests for the sentence-to-prompt pipeline."""

    def test_gap_comes_from_translation(self, french_sentence, french, rng):
        prompt = build_prompt(french_sentence, french, rng=rng)

        assert prompt.word in {"Le", "chat", "est", "noir"}

    def test_inverse_gap_comes_from_english(self, french_sentence, french, rng):
        prompt = build_prompt(french_sentence, french, Direction.INVERSE, rng=rng)

        assert prompt.word in {"The", "cat", "is", "black"}

    def test_translation_from_second_group(self, indirect_sentence, french, rng):
        prompt = build_prompt(indirect_sentence, french, rng=rng)

        assert prompt.word == "Hola"
        assert prompt.first_half == ""
        assert prompt.second_half == ""

    def test_missing_translation_raises(self, untranslated_sentence, french):
        with pytest.raises(MissingTranslation) as exc_info:
            build_prompt(untranslated_sentence, french)

        assert exc_info.value.sentence_id == 3

    def test_missing_translation_raises_in_inverse(self, untranslated_sentence, french):
        with pytest.raises(MissingTranslation):
            build_prompt(untranslated_sentence, french, Direction.INVERSE)

    def test_japanese_gap_is_one_character(self, japanese, rng):
        sentence = make_sentence(5, "I am a cat.", ["私は猫です。"], [])

        prompt = build_prompt(sentence, japanese, rng=rng)

        assert len(prompt.word) == 1
        assert prompt.first_half + prompt.word + prompt.second_half == "私は猫です。"

    def test_japanese_inverse_splits_english_on_spaces(self, japanese, rng):
        sentence = make_sentence(5, "I am a cat.", ["私は猫です。"], [])

        prompt = build_prompt(sentence, japanese, Direction.INVERSE, rng=rng)

        assert prompt.word in {"I", "am", "a", "cat"}

    def test_split_strategy_comes_from_config(self, french):
        sentence = make_sentence(6, "the cat saw the dog", ["le chat a vu le chien"], [])
        config = DrillConfig(split_strategy=SplitStrategy.FIRST_OCCURRENCE)

        prompt = build_prompt(sentence, french, config=config, rng=PickIndex(4))

        assert prompt.word == "le"
        assert prompt.first_half == ""
        assert prompt.second_half == " chat a vu le chien"

    def test_index_strategy_is_the_default(self, french):
        sentence = make_sentence(6, "the cat saw the dog", ["le chat a vu le chien"], [])

        prompt = build_prompt(sentence, french, rng=PickIndex(4))

        assert prompt.first_half == "le chat a vu "
        assert prompt.second_half == " chien"
