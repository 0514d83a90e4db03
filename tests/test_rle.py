"""Tests for run-length encoding of character sequences."""

from __future__ import annotations

import random

import pytest

from charseq.rle import (
    DIGITS,
    MAX_RUN_COUNT,
    RLEDecodeError,
    Run,
    decode,
    encode,
    frequency_encode,
    generate_run_sequence,
    iter_runs,
    parse_runs,
)


class TestEncode:
    """Tests for encode function."""

    def test_runs_in_scan_order(self):
        assert encode("aaabbcaaddb") == "a3b2c1a2d2b1"

    def test_trailing_run(self):
        assert encode("aaabbcaaddbbb") == "a3b2c1a2d2b3"

    def test_single_character(self):
        assert encode("z") == "z1"

    def test_empty(self):
        assert encode("") == ""

    def test_no_repeats(self):
        assert encode("abc") == "a1b1c1"

    def test_multi_digit_count(self):
        assert encode("x" * 12) == "x12"

    def test_list_input(self):
        assert encode(["(", "(", ")"]) == "(2)1"

    def test_not_idempotent(self):
        assert encode(encode("aab")) != "aab"


class TestIterRuns:
    """Tests for iter_runs function."""

    def test_runs(self):
        assert list(iter_runs("aab")) == [Run("a", 2), Run("b", 1)]

    def test_empty(self):
        assert list(iter_runs("")) == []

    def test_run_str(self):
        assert str(Run("q", 7)) == "q7"


class TestDecode:
    """Tests for decode and parse_runs functions."""

    def test_decode(self):
        assert decode("a3b2c1a2d2b3") == "aaabbcaaddbbb"

    def test_multi_digit(self):
        assert decode("x1y10") == "x" + "y" * 10

    def test_empty(self):
        assert decode("") == ""

    def test_parse_runs(self):
        assert parse_runs("a3b12") == [Run("a", 3), Run("b", 12)]

    def test_roundtrip_random(self):
        rng = random.Random(11)
        for _ in range(100):
            text = "".join(generate_run_sequence(rng.randint(1, 40), rng))
            assert decode(encode(text)) == text

    def test_leading_digit_raises(self):
        with pytest.raises(RLEDecodeError):
            decode("3a")

    def test_missing_count_raises(self):
        with pytest.raises(RLEDecodeError, match="Missing run count"):
            decode("ab2")

    def test_missing_final_count_raises(self):
        with pytest.raises(RLEDecodeError):
            decode("a2b")

    def test_zero_count_raises(self):
        with pytest.raises(RLEDecodeError, match="Zero run count"):
            decode("a0")

    def test_oversized_count_raises(self):
        with pytest.raises(RLEDecodeError, match="too large"):
            decode("a" + "9" * 5000)

    def test_count_just_past_index_range_raises(self):
        with pytest.raises(RLEDecodeError, match="too large"):
            parse_runs(f"a{MAX_RUN_COUNT + 1}")

    def test_leading_zeros_are_not_oversized(self):
        assert parse_runs("a" + "0" * 30 + "3") == [Run("a", 3)]

    def test_all_zero_count_raises(self):
        with pytest.raises(RLEDecodeError, match="Zero run count"):
            decode("a000")

    def test_digit_data_is_not_decodable(self):
        assert encode("112") == "1221"
        with pytest.raises(RLEDecodeError):
            decode(encode("112"))

    def test_decode_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode("1")


class TestFrequencyEncode:
    """Tests for frequency_encode function."""

    def test_merges_runs(self):
        assert frequency_encode("aaabbcaaddb") == "a5b3c1d2"

    def test_differs_from_encode(self):
        assert frequency_encode("aba") != encode("aba")

    def test_empty(self):
        assert frequency_encode("") == ""


class TestGenerateRunSequence:
    """Tests for generate_run_sequence function."""

    def test_length_and_alphabet(self):
        symbols = generate_run_sequence(25, random.Random(42), alphabet="xy")
        assert len(symbols) == 25
        assert set(symbols) <= {"x", "y"}

    def test_digit_free(self):
        symbols = generate_run_sequence(50, random.Random(3))
        assert not any(ch in DIGITS for ch in symbols)

    def test_max_run_one_gives_short_runs(self):
        symbols = generate_run_sequence(10, random.Random(8), alphabet="a", max_run=1)
        assert symbols == ["a"] * 10

    def test_reproducible(self):
        s1 = generate_run_sequence(12, random.Random(99))
        s2 = generate_run_sequence(12, random.Random(99))
        assert s1 == s2

    def test_length_0_raises(self):
        with pytest.raises(ValueError):
            generate_run_sequence(0)

    def test_digit_alphabet_raises(self):
        with pytest.raises(ValueError):
            generate_run_sequence(5, alphabet="a1")

    def test_bad_max_run_raises(self):
        with pytest.raises(ValueError):
            generate_run_sequence(5, max_run=0)
