"""Pitch arithmetic: pitch name, octave and accidental to absolute pitch numbers."""

from enum import Enum

# ── MIDI constants ──────────────────────────────────────────────────────────
SEMITONES_PER_OCTAVE = 12
MIDDLE_C_MIDI = 60  # C4 in Scientific Pitch Notation

# Chromatic pitch class names (index 0 = C)
NOTE_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


class PitchName(Enum):
    """Diatonic pitch names, spelled as in the MEI ``pname`` attribute."""

    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    A = "a"
    B = "b"
    NONE = ""


class Accidental(Enum):
    """Written accidentals that may appear on a course tuning."""

    SHARP = "s"
    FLAT = "f"
    NATURAL = "n"
    NONE = ""


#: Distance in semitones from the octave's starting C to each pitch name.
PITCH_NAME_SEMITONES: dict[PitchName, int] = {
    PitchName.C: 0,
    PitchName.D: 2,
    PitchName.E: 4,
    PitchName.F: 5,
    PitchName.G: 7,
    PitchName.A: 9,
    PitchName.B: 11,
    PitchName.NONE: 0,
}

#: Tuning data is not historical notation, so only sharp and flat alter.
ACCIDENTAL_ALTER: dict[Accidental, int] = {
    Accidental.SHARP: 1,
    Accidental.FLAT: -1,
    Accidental.NATURAL: 0,
    Accidental.NONE: 0,
}


def compute_pitch(pname: PitchName, octave: int, accidental: Accidental, fret: int = 0) -> int:
    """
    Convert a spelled pitch plus a fret offset to an absolute pitch number.

    MIDI octave numbering: C-1 = 0, C0 = 12, C1 = 24, ... C4 (Middle C) = 60.

    Args:
        pname:      Diatonic pitch name; ``PitchName.NONE`` counts as C.
        octave:     Scientific octave number (e.g. 4 for Middle C octave).
        accidental: Written accidental of the open course.
        fret:       Semitones added on top of the open pitch. Not range checked.

    Returns:
        Pitch number.
    """
    base = PITCH_NAME_SEMITONES[pname]
    alter = ACCIDENTAL_ALTER[accidental]
    return (octave + 1) * SEMITONES_PER_OCTAVE + base + alter + fret


def pitch_number_to_name(pitch: int) -> str:
    """Human-readable name of a pitch number, e.g. 64 -> 'E4', 61 -> 'C#4'."""
    octave, pitch_class = divmod(pitch, SEMITONES_PER_OCTAVE)
    return f"{NOTE_NAMES[pitch_class]}{octave - 1}"
