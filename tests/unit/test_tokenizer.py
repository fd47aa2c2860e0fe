"""Unit tests for format tokenization."""

from __future__ import annotations

from datetime import datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st

from clocktui.core.tokenizer import (
    CLASSIC_FORMAT,
    REPRESENTATIVE_MAX,
    REPRESENTATIVE_MIN,
    classify_fragment,
    split_format,
    tokenize,
)

pytestmark = pytest.mark.unit

NOON = datetime(2024, 5, 17, 12, 34, 56)

format_text = st.text(
    alphabet=st.sampled_from(list("HMSIpdmyYjaAbB%:-/ ,.T")),
    max_size=24,
)


class TestSplitFormat:
    """Tests for splitting a format into fragments."""

    def test_directives_and_literals(self):
        assert split_format("%H:%M:%S") == ["%H", ":", "%M", ":", "%S"]

    def test_literal_runs_are_merged(self):
        assert split_format("at %H o'clock") == ["at ", "%H", " o'clock"]

    def test_escaped_percent_is_its_own_fragment(self):
        assert split_format("100%%") == ["100", "%%"]

    def test_flags_width_and_modifiers_belong_to_the_directive(self):
        assert split_format("%-H%_5M%Ey%Od") == ["%-H", "%_5M", "%Ey", "%Od"]

    def test_trailing_lone_percent_becomes_literal(self):
        """An incomplete directive at the end is kept as an escaped literal."""
        assert split_format("%H %") == ["%H", " %%"]

    def test_empty_format(self):
        assert split_format("") == []


class TestClassifyFragment:
    """Tests for constant/variable block classification."""

    def test_two_digit_field_gives_two_variable_blocks(self):
        token = classify_fragment("%S", 500)

        assert [(b.is_constant, b.size) for b in token.blocks] == [(False, 1), (False, 1)]
        assert all(b.threshold == 500 for b in token.blocks)

    def test_literal_gives_constant_blocks(self):
        token = classify_fragment(":", 500)

        assert len(token.blocks) == 1
        assert token.blocks[0].is_constant

    @pytest.mark.parametrize("fragment", ["%H", "%I", "%M", "%S", "%d", "%m", "%y"])
    def test_every_numeric_digit_is_variable(self, fragment):
        """Representative instants differ in every digit of the numeric fields."""
        low = REPRESENTATIVE_MIN.strftime(fragment)
        high = REPRESENTATIVE_MAX.strftime(fragment)
        assert all(a != b for a, b in zip(low, high, strict=True))

        token = classify_fragment(fragment, 0)
        assert not any(block.is_constant for block in token.blocks)

    def test_year_and_day_of_year_are_fully_variable(self):
        assert [b.is_constant for b in classify_fragment("%Y", 0).blocks] == [False] * 4
        assert [b.is_constant for b in classify_fragment("%j", 0).blocks] == [False] * 3

    def test_variable_length_names_collapse_to_one_block(self):
        """Weekday names differ in length, so the whole name is one block."""
        token = classify_fragment("%A", 500)

        assert len(token.blocks) == 1
        block = token.blocks[0]
        assert not block.is_constant
        assert block.size == max(
            len(REPRESENTATIVE_MIN.strftime("%A")), len(REPRESENTATIVE_MAX.strftime("%A"))
        )

    def test_unrenderable_fragment_gives_empty_token(self, mocker):
        mocker.patch("clocktui.core.tokenizer.render_fragment", return_value=None)

        token = classify_fragment("%Q", 500)

        assert token.blocks == []


class TestTokenize:
    """Tests for building a complete spec."""

    def test_clock_partition(self):
        spec = tokenize("%H:%M:%S", 500, now=NOON)

        assert spec.partition() == [
            ("%H", [(False, 1), (False, 1)]),
            (":", [(True, 1)]),
            ("%M", [(False, 1), (False, 1)]),
            (":", [(True, 1)]),
            ("%S", [(False, 1), (False, 1)]),
        ]

    def test_blocks_start_settled(self):
        spec = tokenize("%H:%M:%S", 500, now=NOON)

        assert spec.current_text() == "12:34:56"
        assert spec.target_text() == "12:34:56"
        assert not spec.is_animating
        assert all(block.progress == 0 for block in spec.iter_blocks())

    def test_classic_format_is_six_single_digit_blocks(self):
        spec = tokenize(CLASSIC_FORMAT, 500, now=NOON)

        assert len(spec.tokens) == 3
        blocks = list(spec.iter_blocks())
        assert len(blocks) == 6
        assert all(not b.is_constant and b.size == 1 for b in blocks)
        assert spec.current_text() == "123456"

    def test_timing_is_carried_into_every_block(self):
        spec = tokenize("%H:%M", 1234, now=NOON)

        assert spec.timing == 1234
        assert {block.threshold for block in spec.iter_blocks()} == {1234}

    def test_empty_format_has_no_tokens(self):
        spec = tokenize("", 500, now=NOON)

        assert spec.tokens == []
        assert spec.current_text() == ""

    @given(format_spec=format_text)
    def test_tokenizing_is_deterministic(self, format_spec):
        first = tokenize(format_spec, 500, now=NOON)
        second = tokenize(format_spec, 500, now=datetime(1999, 1, 1))

        assert first.partition() == second.partition()
