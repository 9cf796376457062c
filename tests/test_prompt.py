"""Unit tests for prompt generation and punctuation stripping."""

import random

import pytest

from cloze import (
    SplitStrategy,
    generate_prompt,
    segment,
    strip_answer,
    strip_punctuation,
)
from conftest import PickIndex
from models import ScriptKind


def words(text: str) -> list[str]:
    return segment(text, ScriptKind.SPACE_DELIMITED)


class TestStripPunctuation:
    """Tests for the punctuation stripping primitives."""

    def test_removes_marks_and_keeps_spaces(self):
        assert strip_punctuation("¿Qué pasa, amigo?") == "Qué pasa amigo"

    def test_removes_guillemets_and_full_width_period(self):
        assert strip_punctuation("«Oui»。") == "Oui"

    def test_answer_variant_also_removes_spaces(self):
        assert strip_answer("(por favor) ") == "porfavor"

    def test_leaves_other_characters(self):
        assert strip_punctuation("l'homme-orchestre") == "l'homme-orchestre"

    @pytest.mark.parametrize(
        "text",
        ["", "...", "¡Hola!", "a, b; c: d", "«»()\"", "私は猫です。", "plain"],
    )
    def test_stripping_is_idempotent(self, text):
        once = strip_punctuation(text)
        assert strip_punctuation(once) == once
        assert strip_answer(strip_answer(text)) == strip_answer(text)


class TestIndexStrategy:
    """Tests for cutting the gap at the chosen unit's position."""

    def test_last_word_keeps_its_period_in_second_half(self):
        prompt = generate_prompt(words("Le chat est noir."), rng=PickIndex(3))

        assert prompt.first_half == "Le chat est "
        assert prompt.word == "noir"
        assert prompt.second_half == "."

    def test_middle_word(self):
        prompt = generate_prompt(words("Le chat est noir."), rng=PickIndex(1))

        assert prompt.first_half == "Le "
        assert prompt.word == "chat"
        assert prompt.second_half == " est noir."

    def test_leading_punctuation_stays_in_first_half(self):
        prompt = generate_prompt(words("¿Dónde está?"), rng=PickIndex(0))

        assert prompt.first_half == "¿"
        assert prompt.word == "Dónde"
        assert prompt.second_half == " está?"

    def test_repeated_word_is_cut_at_chosen_position(self):
        prompt = generate_prompt(words("the cat saw the dog"), rng=PickIndex(3))

        assert prompt.first_half == "the cat saw "
        assert prompt.word == "the"
        assert prompt.second_half == " dog"

    def test_internal_punctuation_removed_from_answer_key(self):
        prompt = generate_prompt(words("Il est 8 h."), rng=PickIndex(0))

        assert prompt.word == "Il"
        prompt = generate_prompt(words("Voir p.ex. ceci"), rng=PickIndex(1))
        assert prompt.word == "pex"

    @pytest.mark.parametrize("seed", range(20))
    def test_halves_surround_the_removed_text(self, seed):
        """first_half + gap + second_half should rebuild the joined sentence."""
        units = words("«Je pense, donc je suis», a dit Descartes.")
        joined = "".join(units)

        prompt = generate_prompt(units, rng=random.Random(seed))

        assert joined.startswith(prompt.first_half)
        assert joined.endswith(prompt.second_half)
        gap = joined[len(prompt.first_half) : len(joined) - len(prompt.second_half)]
        assert gap
        assert strip_answer(gap) == prompt.word

    @pytest.mark.parametrize("seed", range(10))
    def test_per_character_units(self, seed):
        units = segment("私は猫です。", ScriptKind.UNIT_PER_CHARACTER)

        prompt = generate_prompt(units, rng=random.Random(seed))

        assert len(prompt.word) == 1
        assert prompt.first_half + prompt.word + prompt.second_half == "私は猫です。"


class TestUnitSelection:
    """Tests for which units may become the gap."""

    def test_punctuation_only_units_are_never_offered(self):
        picker = PickIndex(0)
        prompt = generate_prompt(words("Quoi ?"), rng=picker)

        assert picker.offered == [0]
        assert prompt.word == "Quoi"
        assert prompt.second_half == " ?"

    def test_space_units_are_never_offered(self):
        picker = PickIndex(0)
        generate_prompt(words("a  b"), rng=picker)

        assert picker.offered == [0, 2]

    def test_no_break_space_is_removed_from_answer_key(self):
        prompt = generate_prompt(words("Il a 10\u00a0000 euros."), rng=PickIndex(2))

        assert prompt.word == "10000"
        assert prompt.first_half == "Il a "
        assert prompt.second_half == " euros."

    def test_sentence_without_text_falls_back_to_no_gap(self):
        prompt = generate_prompt(["?", "!"])

        assert prompt.first_half == "?!"
        assert prompt.word == ""
        assert prompt.second_half == ""
        assert prompt.is_degenerate

    def test_empty_sentence_falls_back_to_no_gap(self):
        prompt = generate_prompt([])

        assert prompt.first_half == ""
        assert prompt.word == ""
        assert prompt.second_half == ""


class TestFirstOccurrenceStrategy:
    """Tests for the historical first-occurrence split."""

    def test_unique_word(self):
        prompt = generate_prompt(
            words("Le chat est noir."),
            strategy=SplitStrategy.FIRST_OCCURRENCE,
            rng=PickIndex(3),
        )

        assert prompt.first_half == "Le chat est "
        assert prompt.word == "noir"
        assert prompt.second_half == "."

    def test_repeated_word_cuts_earlier_occurrence(self):
        """Known limitation: choosing the second 'the' removes the first one."""
        prompt = generate_prompt(
            words("the cat saw the dog"),
            strategy=SplitStrategy.FIRST_OCCURRENCE,
            rng=PickIndex(3),
        )

        assert prompt.first_half == ""
        assert prompt.word == "the"
        assert prompt.second_half == " cat saw the dog"

    def test_substring_match_cuts_inside_another_word(self):
        """Known limitation: the gap text may match inside an earlier word."""
        prompt = generate_prompt(
            words("cats eat at night"),
            strategy=SplitStrategy.FIRST_OCCURRENCE,
            rng=PickIndex(2),
        )

        assert prompt.first_half == "c"
        assert prompt.word == "at"
        assert prompt.second_half == "s eat at night"

    def test_unlocatable_gap_falls_back_to_no_gap(self):
        """Internal punctuation means the stripped text never occurs verbatim."""
        prompt = generate_prompt(
            words("Voir p.ex. ceci"),
            strategy=SplitStrategy.FIRST_OCCURRENCE,
            rng=PickIndex(1),
        )

        assert prompt.first_half == "Voir p.ex. ceci"
        assert prompt.word == ""
        assert prompt.second_half == ""
