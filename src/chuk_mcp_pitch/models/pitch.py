"""
Pitch report models - what the tools return about a pitch.

A PitchInfo is a flat, JSON-friendly view of a pitch value: its name,
its line-of-fifths coordinates, and whatever derived facts apply to
its kind (MIDI and frequency for notes, number and quality for intervals).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_pitch.constants import DEFAULT_REFERENCE_FREQUENCY, PitchKind
from chuk_mcp_pitch.core import (
    Interval,
    Note,
    Pitch,
    chroma,
    decode,
    format_pitch,
    frequency,
    midi,
    number,
    quality,
    semitones,
    simplify,
)
from chuk_mcp_pitch.core.formatting import to_accidentals, to_letter


class PitchInfo(BaseModel):
    """Everything known about a single pitch value."""

    name: str = Field(description="Canonical name, e.g. 'C#4' or '-M3'")
    kind: PitchKind
    fifths: int = Field(description="Line-of-fifths coordinate")
    octaves: int | None = Field(default=None, description="Internal octave coordinate")
    step: int = Field(ge=0, le=6, description="0 = C (or unison) .. 6 = B (or seventh)")
    alteration: int = Field(description="Sharps (positive) or flats (negative)")
    letter: str | None = None
    accidentals: str | None = None
    octave: int | None = None
    direction: int | None = None

    # Notes and pitch classes
    chroma: int | None = Field(default=None, ge=0, le=11)
    midi: int | None = None
    frequency: float | None = Field(default=None, description="Hz, equal temperament")

    # Intervals
    number: int | None = None
    quality: str | None = None
    semitones: int | None = None
    simple: str | None = Field(default=None, description="Interval reduced to one octave")

    model_config = {"frozen": True}

    @classmethod
    def from_pitch(
        cls,
        pitch: Pitch,
        reference_frequency: float = DEFAULT_REFERENCE_FREQUENCY,
    ) -> PitchInfo:
        """Create a report for a pitch value."""
        p = decode(pitch)
        info: dict[str, object] = {
            "name": format_pitch(pitch),
            "kind": pitch.kind,
            "fifths": pitch.fifths,
            "octaves": getattr(pitch, "octaves", None),
            "step": p.step,
            "alteration": p.alteration,
            "octave": p.octave,
            "direction": p.direction,
        }

        if isinstance(pitch, Interval):
            simple = simplify(pitch)
            info.update(
                number=number(pitch),
                quality=quality(pitch),
                semitones=semitones(pitch),
                simple=format_pitch(simple),
            )
        else:
            info.update(
                letter=to_letter(p.step),
                accidentals=to_accidentals(p.alteration),
                chroma=chroma(pitch),
            )
            if isinstance(pitch, Note):
                info.update(
                    midi=midi(pitch),
                    frequency=frequency(reference_frequency)(pitch),
                )

        return cls(**info)  # type: ignore[arg-type]
