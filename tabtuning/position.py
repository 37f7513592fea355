"""Vertical placement of tablature courses on the staff."""

from tabtuning.presets import NotationType

#: French tablature draws every course from the 7th down at the same offset.
FRENCH_MAX_COURSE = 7


def calc_pitch_pos(course: int, notation_type: NotationType, lines: int) -> int:
    """
    Return the staff position of a course in half-line steps.

    The result may be negative for courses that fall outside the staff
    lines; the caller decides where such courses are drawn.

    Args:
        course:        1-based course number.
        notation_type: Tablature convention of the staff.
        lines:         Number of lines on the staff.
    """
    match notation_type:
        case NotationType.TAB_LUTE_FRENCH:
            # letters sit in the space above their line
            return (lines - min(course, FRENCH_MAX_COURSE)) * 2 + 1
        case NotationType.TAB_LUTE_ITALIAN:
            return (course - 1) * 2
        case _:
            return abs(course - lines) * 2
