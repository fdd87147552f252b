"""Tests for MinMaxD / MinMaxI intervals."""

import random

import pytest

from pysortie.classes.intervals import MinMaxD, MinMaxI, split_interval_text


class TestParse:
    def test_parse_real_interval(self):
        interval = MinMaxD.parse(" 10.5 , 20 ")
        assert interval == MinMaxD(10.5, 20.0)

    def test_parse_int_interval(self):
        assert MinMaxI.parse("1,3") == MinMaxI(1, 3)

    def test_int_interval_rejects_reals(self):
        with pytest.raises(ValueError):
            MinMaxI.parse("1.5,3")

    @pytest.mark.parametrize("text", ["10", "10,20,30", ",20", "a,b", ""])
    def test_parse_rejects_malformed_text(self, text):
        with pytest.raises(ValueError):
            MinMaxD.parse(text)

    def test_split_does_not_check_order(self):
        assert split_interval_text("20,10") == (20.0, 10.0)


class TestOrdering:
    def test_min_greater_than_max_rejected(self):
        with pytest.raises(ValueError, match="exceeds maximum"):
            MinMaxD(5.0, 1.0)

    def test_degenerate_interval_allowed(self):
        interval = MinMaxI(4, 4)
        assert interval.span == 0
        assert interval.contains(4)


class TestRandom:
    def test_random_values_stay_in_bounds(self):
        rng = random.Random(42)
        interval = MinMaxD(10.0, 20.0)
        assert all(interval.contains(interval.get_random(rng)) for _ in range(100))

    def test_random_int_is_inclusive(self):
        rng = random.Random(7)
        values = {MinMaxI(1, 2).get_random(rng) for _ in range(100)}
        assert values == {1, 2}

    def test_str_uses_document_format(self):
        assert str(MinMaxD(10, 20)) == "10,20"
        assert MinMaxD.parse(str(MinMaxD(0.5, 2))) == MinMaxD(0.5, 2)
