"""MidiExporter: writes the open courses of a tuning as a reference MIDI file."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from midiutil import MIDIFile

from tabtuning.presets import INVALID_PITCH

_LOG = logging.getLogger(__name__)

# In midiutil Format 1 MIDI, track 0 is the conductor/tempo track.
TRACK_CONDUCTOR = 0  # Tempo only, never receives notes
TRACK_COURSES = 1    # Open courses, then the strummed chord

CHANNEL_COURSES = 0
MIDI_MAX_PITCH = 127

GM_PROGRAM_NYLON_GUITAR = 24  # General MIDI 25, zero-based


class MidiExporter:
    """
    Writes a reference MIDI file for tuning an instrument by ear.

    Track layout (Format 1, 2 internal tracks)
    ------------------------------------------
    Track 0 — conductor track (tempo only, no notes)

    Track 1 — "Open Courses"
        Every open course, lowest course first, one beat each, followed by
        all courses struck together and held for ``CHORD_BEATS`` beats.

    Pitches of 0 mark courses the tuning could not resolve; they are skipped
    along with anything above the MIDI range.
    """

    DEFAULT_TEMPO = 60     # BPM
    DEFAULT_VELOCITY = 80  # MIDI velocity (0-127)
    STRUM_GAP_BEATS = 0.05
    CHORD_BEATS = 4.0

    def __init__(
        self,
        tempo: int = DEFAULT_TEMPO,
        velocity: int = DEFAULT_VELOCITY,
    ) -> None:
        """
        Args:
            tempo:    Playback tempo in beats per minute.
            velocity: MIDI note-on velocity.
        """
        self.tempo = tempo
        self.velocity = velocity

    def export(self, open_pitches: Sequence[int], output_path: str) -> None:
        """
        Render open-course pitches (course 1 first) to a Standard MIDI File.

        Args:
            open_pitches: Pitch per course, as returned by ``Tuning.open_pitches``.
            output_path:  Destination file path (e.g. "tuning.mid").

        Raises:
            ValueError: If no course has a valid pitch.
            OSError: If the output file cannot be opened for writing.
        """
        pitches = [
            pitch for pitch in reversed(open_pitches) if INVALID_PITCH < pitch <= MIDI_MAX_PITCH
        ]
        if not pitches:
            raise ValueError("No course has a valid pitch to export.")
        if len(pitches) < len(open_pitches):
            skipped = len(open_pitches) - len(pitches)
            _LOG.debug("Skipping %d unresolved or out-of-range course(s)", skipped)

        midi = MIDIFile(numTracks=2, removeDuplicates=False, deinterleave=False)
        midi.addTempo(TRACK_CONDUCTOR, 0, self.tempo)
        midi.addTrackName(TRACK_COURSES, 0, "Open Courses")
        midi.addProgramChange(TRACK_COURSES, CHANNEL_COURSES, 0, GM_PROGRAM_NYLON_GUITAR)

        for beat, pitch in enumerate(pitches):
            midi.addNote(
                track=TRACK_COURSES,
                channel=CHANNEL_COURSES,
                pitch=pitch,
                time=beat,
                duration=1,
                volume=self.velocity,
            )

        chord_start = float(len(pitches))
        for index, pitch in enumerate(pitches):
            offset = index * self.STRUM_GAP_BEATS
            midi.addNote(
                track=TRACK_COURSES,
                channel=CHANNEL_COURSES,
                pitch=pitch,
                time=chord_start + offset,
                duration=self.CHORD_BEATS - offset,
                volume=self.velocity,
            )

        with open(output_path, "wb") as f:
            midi.writeFile(f)
