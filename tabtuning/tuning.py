"""Tuning: resolves the open pitch of each course of a tablature instrument."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Union, cast

from tabtuning.pitch import Accidental, PitchName, compute_pitch
from tabtuning.position import calc_pitch_pos
from tabtuning.presets import (
    NotationType,
    TuningStandard,
    open_course_pitch,
    preset_for_notation,
    preset_for_standard,
)

_LOG = logging.getLogger(__name__)

#: Courses listed by ``open_pitches`` when the tuning does not number more.
DEFAULT_COURSE_COUNT = 6


@dataclass(frozen=True)
class Course:
    """
    Explicit tuning of one course.

    Attributes:
        n:      1-based course number, None when missing.
        pname:  Pitch name of the open course.
        octave: Octave of the open course, None when missing.
        accid:  Written accidental of the open course.
    """

    n: int | None = None
    pname: PitchName = PitchName.NONE
    octave: int | None = None
    accid: Accidental = Accidental.NONE

    def has_pname(self) -> bool:
        return self.pname is not PitchName.NONE

    def has_octave(self) -> bool:
        return self.octave is not None

    def has_accid(self) -> bool:
        return self.accid is not Accidental.NONE


@dataclass
class EditorialElement:
    """Editorial container (``app``, ``choice``, ``supplied``...) around course data."""

    name: str
    children: list[TuningChild] = field(default_factory=list)


TuningChild = Union[Course, EditorialElement]


def find_descendant_course(children: Iterable[TuningChild], n: int) -> Course | None:
    """Depth-first search for the first course numbered ``n``."""
    for child in children:
        if isinstance(child, Course):
            if child.n == n:
                return child
        else:
            found = find_descendant_course(child.children, n)
            if found is not None:
                return found
    return None


def _iter_courses(children: Iterable[TuningChild]) -> Iterable[Course]:
    for child in children:
        if isinstance(child, Course):
            yield child
        else:
            yield from _iter_courses(child.children)


class Tuning:
    """
    Tuning context of a tablature staff.

    Pitch resolution
    ----------------
    ``calc_pitch_number`` picks the first source that applies:

    1. **Explicit course** – a descendant ``Course`` with the requested number
       and both a pitch name and an octave. Notation type and tuning standard
       are ignored.

    2. **Tuning standard** – the preset of ``tuning_standard`` when it has one
       (drop-D guitar, six-course renaissance lute).

    3. **Notation type** – lute tablature assumes a renaissance lute, any
       other notation a modern guitar.

    Presets only cover their own courses; any other course resolves to 0.
    Resolution never raises, so layout code always gets an integer back.
    """

    def __init__(
        self,
        tuning_standard: TuningStandard = TuningStandard.NONE,
        children: Sequence[TuningChild] = (),
    ) -> None:
        """
        Args:
            tuning_standard: Named tuning used when a course is not spelled out.
            children:        Course definitions, possibly in editorial containers.
        """
        self.tuning_standard = tuning_standard
        self.children: list[TuningChild] = list(children)

    def __repr__(self) -> str:
        return f"Tuning(tuning_standard={self.tuning_standard!r}, children={self.children!r})"

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _select_preset(self, notation_type: NotationType) -> tuple[int, ...]:
        preset = preset_for_standard(self.tuning_standard)
        if preset is not None:
            return preset
        return preset_for_notation(notation_type)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def find_course(self, n: int) -> Course | None:
        """Return the first course numbered ``n`` anywhere below this tuning."""
        return find_descendant_course(self.children, n)

    def calc_pitch_number(self, course: int, fret: int, notation_type: NotationType) -> int:
        """
        Resolve the pitch sounded by ``course`` stopped at ``fret``.

        Returns:
            Pitch number (C4 = 60), or 0 if the course is outside the preset.
        """
        course_tuning = self.find_course(course)
        if course_tuning is not None and course_tuning.has_pname() and course_tuning.has_octave():
            octave = cast(int, course_tuning.octave)
            return compute_pitch(course_tuning.pname, octave, course_tuning.accid, fret)

        if course_tuning is not None:
            _LOG.debug("Course %d lacks pitch name or octave, using presets", course)

        preset = self._select_preset(notation_type)
        return open_course_pitch(preset, course, fret)

    @staticmethod
    def calc_pitch_pos(course: int, notation_type: NotationType, lines: int) -> int:
        """Staff position of ``course``; see ``tabtuning.position.calc_pitch_pos``."""
        return calc_pitch_pos(course, notation_type, lines)

    def open_pitches(self, notation_type: NotationType, courses: int | None = None) -> list[int]:
        """
        Open pitches of courses 1..``courses``.

        When ``courses`` is None, lists six courses or up to the highest
        explicitly numbered course, whichever is larger.
        """
        if courses is None:
            numbered = [c.n for c in _iter_courses(self.children) if c.n is not None]
            courses = max([DEFAULT_COURSE_COUNT, *numbered])
        return [self.calc_pitch_number(n, 0, notation_type) for n in range(1, courses + 1)]
