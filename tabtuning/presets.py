"""Notation types, tuning standards and their fixed open-course pitch tables."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final

_LOG = logging.getLogger(__name__)

#: Returned for a course that does not exist in the selected preset.
INVALID_PITCH: Final[int] = 0


class NotationType(Enum):
    """Tablature convention in use on the staff (MEI ``notationtype``)."""

    TAB_LUTE_FRENCH = "tab.lute.french"
    TAB_LUTE_ITALIAN = "tab.lute.italian"
    TAB_LUTE_GERMAN = "tab.lute.german"
    TAB_GUITAR = "tab.guitar"
    OTHER = "other"

    @property
    def is_lute(self) -> bool:
        return self in (
            NotationType.TAB_LUTE_FRENCH,
            NotationType.TAB_LUTE_ITALIAN,
            NotationType.TAB_LUTE_GERMAN,
        )


class TuningStandard(Enum):
    """Named course tunings (MEI ``tuning.standard``)."""

    NONE = ""
    GUITAR_STANDARD = "guitar.standard"
    GUITAR_DROP_D = "guitar.drop.D"
    GUITAR_OPEN_D = "guitar.open.D"
    GUITAR_OPEN_G = "guitar.open.G"
    GUITAR_OPEN_A = "guitar.open.A"
    LUTE_RENAISSANCE_6 = "lute.renaissance.6"
    LUTE_BAROQUE_D_MAJOR = "lute.baroque.d.major"
    LUTE_BAROQUE_D_MINOR = "lute.baroque.d.minor"

    @classmethod
    def parse(cls, text: str | None) -> TuningStandard:
        """Map an attribute value to a standard; unknown values become NONE."""
        if not text:
            return cls.NONE
        try:
            return cls(text.strip())
        except ValueError:
            _LOG.warning("Unknown tuning standard %r, treating as unset", text)
            return cls.NONE


# ── Preset tables (course 1 = highest course) ───────────────────────────────

#: Modern guitar: E4 B3 G3 D3 A2 E2
GUITAR_PITCHES: Final[tuple[int, int, int, int, int, int]] = (64, 59, 55, 50, 45, 40)

#: Modern guitar, drop D: E4 B3 G3 D3 A2 D2
GUITAR_DROP_D_PITCHES: Final[tuple[int, int, int, int, int, int]] = (64, 59, 55, 50, 45, 38)

#: Six-course renaissance lute: G4 D4 A3 F3 C3 G2
LUTE_RENAISSANCE_6_PITCHES: Final[tuple[int, int, int, int, int, int]] = (67, 62, 57, 53, 48, 43)

_STANDARD_PRESETS: Final[dict[TuningStandard, tuple[int, ...]]] = {
    TuningStandard.GUITAR_DROP_D: GUITAR_DROP_D_PITCHES,
    TuningStandard.LUTE_RENAISSANCE_6: LUTE_RENAISSANCE_6_PITCHES,
}


def preset_for_standard(standard: TuningStandard) -> tuple[int, ...] | None:
    """Return the preset for a tuning standard, or None if it has none."""
    return _STANDARD_PRESETS.get(standard)


def preset_for_notation(notation_type: NotationType) -> tuple[int, ...]:
    """Assume a renaissance lute for lute tablature and a modern guitar otherwise."""
    if notation_type.is_lute:
        return LUTE_RENAISSANCE_6_PITCHES
    return GUITAR_PITCHES


def open_course_pitch(preset: tuple[int, ...], course: int, fret: int = 0) -> int:
    """Pitch of ``course`` stopped at ``fret``, or INVALID_PITCH if out of range."""
    if 1 <= course <= len(preset):
        return preset[course - 1] + fret
    return INVALID_PITCH
