"""Tests for the single-or-empty sequence view."""

from collections.abc import Sequence

import pytest

from optbox import wrap


class TestToSequence:
    def test_absent_is_empty(self):
        seq = wrap(None).to_sequence()
        assert list(seq) == []
        assert len(seq) == 0

    def test_present_has_one_element(self):
        seq = wrap("value").to_sequence()
        assert list(seq) == ["value"]
        assert len(seq) == 1
        assert seq[0] == "value"
        assert seq[-1] == "value"

    def test_is_a_sequence(self):
        seq = wrap(3).to_sequence()
        assert isinstance(seq, Sequence)
        assert 3 in seq
        assert seq.index(3) == 0
        assert list(reversed(seq)) == [3]

    def test_restartable(self):
        box = wrap(42)
        seq = box.to_sequence()
        assert list(seq) == [42]
        assert list(seq) == [42]
        assert list(box.to_sequence()) == list(box.to_sequence())
        assert box.unwrap() == 42

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            wrap(None).to_sequence()[0]
        with pytest.raises(IndexError):
            wrap(1).to_sequence()[1]

    def test_slicing(self):
        assert wrap(1).to_sequence()[:] == (1,)
        assert wrap(None).to_sequence()[:] == ()

    def test_box_is_iterable(self):
        assert [x * 2 for x in wrap(21)] == [42]
        assert list(wrap(None)) == []

    def test_chains_with_builtins(self):
        boxes = [wrap(1), wrap(None), wrap(3)]
        assert [v for box in boxes for v in box] == [1, 3]
