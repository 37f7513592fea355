"""tabtuning CLI entry point."""

import logging
import sys
from typing import NoReturn

import click

from tabtuning import __version__
from tabtuning.mei_reader import read_tuning
from tabtuning.midi_exporter import MidiExporter
from tabtuning.pitch import pitch_number_to_name
from tabtuning.presets import INVALID_PITCH, NotationType, TuningStandard
from tabtuning.tuning import Tuning

DEFAULT_LINES = 6

NOTATION_CHOICES = [notation.value for notation in NotationType]
STANDARD_CHOICES = [standard.value for standard in TuningStandard if standard.value]


def _fail(message: str) -> NoReturn:
    click.echo(f"  ERROR: {message}", err=True)
    sys.exit(1)


def _load_tuning(tuning_file: str | None, standard: str | None) -> Tuning:
    """Build the tuning context from an MEI file and/or a named standard.

    An explicit --standard overrides the file's @tuning.standard.
    """
    if tuning_file is not None:
        try:
            tuning = read_tuning(tuning_file)
        except (OSError, ValueError) as exc:
            _fail(f"Could not read tuning file — {exc}")
    else:
        tuning = Tuning()

    if standard is not None:
        tuning.tuning_standard = TuningStandard(standard)
    return tuning


def _describe(pitch: int) -> str:
    if pitch == INVALID_PITCH:
        return "invalid course"
    return pitch_number_to_name(pitch)


# ── shared options ─────────────────────────────────────────────────────────────

notation_option = click.option(
    "--notation",
    "-n",
    type=click.Choice(NOTATION_CHOICES),
    default=NotationType.TAB_GUITAR.value,
    show_default=True,
    help="Tablature notation type of the staff.",
)
standard_option = click.option(
    "--standard",
    "-s",
    type=click.Choice(STANDARD_CHOICES),
    default=None,
    help="Named tuning standard. Overrides @tuning.standard from --tuning-file.",
)
tuning_file_option = click.option(
    "--tuning-file",
    "-t",
    type=click.Path(exists=True, dir_okay=False, readable=True),
    default=None,
    metavar="PATH",
    help="MEI file whose first <tuning> element spells out the courses.",
)
lines_option = click.option(
    "--lines",
    "-l",
    type=int,
    default=DEFAULT_LINES,
    show_default=True,
    help="Number of lines on the tablature staff.",
)


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="tabtuning")
@click.option("--verbose", "-v", is_flag=True, help="Log tuning resolution details.")
def main(verbose: bool) -> None:
    """tabtuning — tablature course pitches and staff positions."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ── pitch subcommand ───────────────────────────────────────────────────────────

@main.command()
@click.argument("course", type=click.IntRange(min=1))
@click.option("--fret", "-f", type=int, default=0, show_default=True, help="Fret stopped on the course.")
@notation_option
@standard_option
@tuning_file_option
def pitch(course: int, fret: int, notation: str, standard: str | None, tuning_file: str | None) -> None:
    """
    Print the pitch number sounded by COURSE at a fret.

    \b
    Examples:
      tabtuning pitch 6
      tabtuning pitch 6 --fret 3 --standard guitar.drop.D
      tabtuning pitch 2 -n tab.lute.french -t tuning.mei
    """
    tuning = _load_tuning(tuning_file, standard)
    number = tuning.calc_pitch_number(course, fret, NotationType(notation))
    click.echo(f"{number}  {_describe(number)}")


# ── position subcommand ────────────────────────────────────────────────────────

@main.command()
@click.argument("course", type=click.IntRange(min=1))
@notation_option
@lines_option
def position(course: int, notation: str, lines: int) -> None:
    """
    Print the staff position of COURSE in half-line steps.

    \b
    Examples:
      tabtuning position 3 -n tab.lute.french --lines 5
    """
    click.echo(str(Tuning.calc_pitch_pos(course, NotationType(notation), lines)))


# ── table subcommand ───────────────────────────────────────────────────────────

@main.command()
@notation_option
@standard_option
@tuning_file_option
@lines_option
@click.option("--courses", "-c", type=click.IntRange(min=1), default=None,
              help="Number of courses to list. Defaults to the tuning's course count.")
def table(
    notation: str,
    standard: str | None,
    tuning_file: str | None,
    lines: int,
    courses: int | None,
) -> None:
    """Print the open pitch and staff position of every course."""
    tuning = _load_tuning(tuning_file, standard)
    notation_type = NotationType(notation)
    open_pitches = tuning.open_pitches(notation_type, courses)

    click.echo(f"{'Course':>6}  {'Pitch':>5}  {'Name':<14}  {'Pos':>4}")
    for course, number in enumerate(open_pitches, start=1):
        pos = tuning.calc_pitch_pos(course, notation_type, lines)
        click.echo(f"{course:>6}  {number:>5}  {_describe(number):<14}  {pos:>4}")


# ── midi subcommand ────────────────────────────────────────────────────────────

@main.command()
@click.argument("output", type=click.Path(dir_okay=False, writable=True))
@notation_option
@standard_option
@tuning_file_option
@click.option(
    "--tempo",
    type=click.IntRange(20, 300),
    default=MidiExporter.DEFAULT_TEMPO,
    show_default=True,
    help="Playback tempo in BPM.",
)
def midi(
    output: str,
    notation: str,
    standard: str | None,
    tuning_file: str | None,
    tempo: int,
) -> None:
    """
    Write a MIDI file that plays every open course, lowest first.

    OUTPUT is the destination .mid file.
    """
    tuning = _load_tuning(tuning_file, standard)
    open_pitches = tuning.open_pitches(NotationType(notation))

    exporter = MidiExporter(tempo=tempo)
    try:
        exporter.export(open_pitches, output)
    except ValueError as exc:
        _fail(str(exc))
    except OSError as exc:
        _fail(f"Could not write MIDI file — {exc}")

    names = " ".join(_describe(p) for p in reversed(open_pitches) if p != INVALID_PITCH)
    click.echo(f"Wrote {output}: {names}")
