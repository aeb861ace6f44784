"""
Tests for core pitch primitives.

Tests cover:
- PitchClass, Note, Interval and predicates (pitch.py)
- encode / decode on the line of fifths (encoding.py)
"""

from dataclasses import FrozenInstanceError

import pytest

from chuk_mcp_pitch.constants import PitchKind
from chuk_mcp_pitch.core import (
    DecodedPitch,
    Interval,
    Note,
    PitchClass,
    decode,
    encode,
    has_octave,
    is_interval,
    is_note,
    is_pitch,
    is_pitch_class,
)
from chuk_mcp_pitch.core.encoding import (
    FIFTH_OCTAVES,
    FIFTHS,
    STEPS,
    decode_coordinates,
    fifths_span,
)


class TestPitchValues:
    """Tests for the three pitch value kinds."""

    def test_kinds(self) -> None:
        """Each value carries its kind."""
        assert PitchClass(0).kind == PitchKind.PITCH_CLASS
        assert Note(0, 4).kind == PitchKind.NOTE
        assert Interval(1, 0, 1).kind == PitchKind.INTERVAL

    def test_default_direction(self) -> None:
        """Intervals are ascending by default."""
        assert Interval(1, 0).direction == 1

    def test_invalid_direction(self) -> None:
        """Direction must be 1 or -1."""
        with pytest.raises(ValueError):
            Interval(1, 0, 0)
        with pytest.raises(ValueError):
            Interval(1, 0, 2)

    def test_immutable(self) -> None:
        """Pitch values cannot be mutated."""
        note = Note(0, 4)
        with pytest.raises(FrozenInstanceError):
            note.fifths = 1  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        """Values compare by coordinates and kind."""
        assert Note(0, 4) == Note(0, 4)
        assert Note(0, 4) != Interval(0, 4, 1)
        assert PitchClass(7) != PitchClass(-5)  # C# is not Db
        assert len({PitchClass(0), PitchClass(0), Note(0, 4)}) == 2


class TestPredicates:
    """Tests for structural predicates."""

    def test_is_pitch(self) -> None:
        """Any of the three kinds is a pitch."""
        assert is_pitch(PitchClass(0))
        assert is_pitch(Note(0, 4))
        assert is_pitch(Interval(1, 0, 1))

    def test_non_pitches(self) -> None:
        """Strings, tuples, numbers and None are never pitches."""
        for value in ("C4", ("tnl", 0), [0, 4], 60, None):
            assert not is_pitch(value)
            assert not is_pitch_class(value)
            assert not is_note(value)
            assert not is_interval(value)
            assert not has_octave(value)

    def test_kinds_are_exclusive(self) -> None:
        """A value matches exactly one kind predicate."""
        pc, note, ivl = PitchClass(0), Note(0, 4), Interval(1, 0, 1)
        assert [is_pitch_class(pc), is_note(pc), is_interval(pc)] == [True, False, False]
        assert [is_pitch_class(note), is_note(note), is_interval(note)] == [False, True, False]
        assert [is_pitch_class(ivl), is_note(ivl), is_interval(ivl)] == [False, False, True]

    def test_has_octave(self) -> None:
        """Notes and intervals carry an octave, pitch classes do not."""
        assert has_octave(Note(0, 4))
        assert has_octave(Interval(1, 0, 1))
        assert not has_octave(PitchClass(0))


class TestEncodingTables:
    """Tests for the line-of-fifths tables."""

    def test_fifths(self) -> None:
        """Natural steps sit at F=-1 C=0 G=1 D=2 A=3 E=4 B=5."""
        assert FIFTHS == (0, 2, 4, -1, 1, 3, 5)

    def test_steps_invert_fifths(self) -> None:
        """STEPS maps (fifths + 1) back to the step."""
        for step, fifths in enumerate(FIFTHS):
            assert STEPS[fifths + 1] == step

    def test_fifth_octaves(self) -> None:
        """Octaves spanned by each natural step."""
        assert FIFTH_OCTAVES == (0, 1, 2, -1, 0, 1, 2)
        assert fifths_span(12) == 7


class TestEncode:
    """Tests for encode."""

    def test_pitch_classes(self) -> None:
        """No octave gives a pitch class."""
        assert encode(0) == PitchClass(0)  # C
        assert encode(1, 1) == PitchClass(9)  # D#
        assert encode(6, -1) == PitchClass(-2)  # Bb
        assert encode(3, 0) == PitchClass(-1)  # F

    def test_notes(self) -> None:
        """An octave without direction gives a note."""
        assert encode(0, 0, 4) == Note(0, 4)  # C4
        assert encode(5, 0, 4) == Note(3, 3)  # A4
        assert encode(6, -1, 3) == Note(-2, 5)  # Bb3

    def test_intervals(self) -> None:
        """A direction gives an interval with pre-multiplied coordinates."""
        assert encode(4, 0, 0, 1) == Interval(1, 0, 1)  # P5
        assert encode(4, 0, 0, -1) == Interval(-1, 0, -1)  # -P5
        assert encode(2, 0, 0, -1) == Interval(-4, 2, -1)  # -M3

    def test_direction_normalized(self) -> None:
        """Any negative direction means descending, anything else ascending."""
        assert encode(4, 0, 0, -7) == Interval(-1, 0, -1)
        assert encode(4, 0, 0, 3) == Interval(1, 0, 1)

    def test_invalid_step(self) -> None:
        """Steps outside 0-6 give None."""
        assert encode(7) is None
        assert encode(-1, 0, 4) is None

    def test_missing_alteration(self) -> None:
        """A None alteration means natural."""
        assert encode(0, None, 4) == Note(0, 4)  # type: ignore[arg-type]


class TestDecode:
    """Tests for decode and the encode/decode round trip."""

    def test_decode_note(self) -> None:
        """Notes decode to step, alteration and octave."""
        assert decode(Note(-2, 5)) == DecodedPitch(6, -1, 3)

    def test_decode_pitch_class(self) -> None:
        """Pitch classes decode without octave."""
        assert decode(PitchClass(7)) == DecodedPitch(0, 1)

    def test_decode_descending_interval(self) -> None:
        """Descending intervals decode to their own step, not the inversion."""
        assert decode(Interval(-4, 2, -1)) == DecodedPitch(2, 0, 0, -1)

    def test_decode_raw_coordinates(self) -> None:
        """Raw coordinates of -P5 describe the inversion below the octave."""
        assert decode_coordinates(-1, 0) == DecodedPitch(3, 0, -1)

    def test_decode_non_pitch(self) -> None:
        """Decoding something that is not a pitch is a usage error."""
        with pytest.raises(TypeError):
            decode("C4")  # type: ignore[arg-type]

    def test_round_trip_notes(self) -> None:
        """decode(encode(...)) recovers every step, alteration and octave."""
        for step in range(7):
            for alteration in range(-4, 5):
                for octave in range(-2, 10):
                    pitch = encode(step, alteration, octave)
                    assert decode(pitch) == DecodedPitch(step, alteration, octave)

    def test_round_trip_intervals(self) -> None:
        """The round trip holds in both directions."""
        for step in range(7):
            for alteration in range(-4, 5):
                for octave in range(0, 4):
                    for direction in (1, -1):
                        pitch = encode(step, alteration, octave, direction)
                        assert decode(pitch) == DecodedPitch(step, alteration, octave, direction)

    def test_round_trip_pitch_classes(self) -> None:
        """Pitch classes round trip too."""
        for step in range(7):
            for alteration in range(-4, 5):
                assert decode(encode(step, alteration)) == DecodedPitch(step, alteration)
