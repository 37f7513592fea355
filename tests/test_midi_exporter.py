"""Unit tests for the tuning reference MidiExporter."""

from pathlib import Path

import pytest

from tabtuning.midi_exporter import MidiExporter


def test_export_writes_standard_midi_file(tmp_path: Path) -> None:
    out = tmp_path / "guitar.mid"
    MidiExporter().export([64, 59, 55, 50, 45, 40], str(out))

    data = out.read_bytes()
    assert data.startswith(b"MThd")
    assert data.count(b"MTrk") >= 2
    assert b"Open Courses" in data


def test_export_skips_invalid_courses(tmp_path: Path) -> None:
    full = tmp_path / "full.mid"
    partial = tmp_path / "partial.mid"
    MidiExporter().export([67, 62], str(full))
    MidiExporter().export([67, 0, 62, 0], str(partial))

    assert full.read_bytes() == partial.read_bytes()


def test_export_without_valid_pitches_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="No course"):
        MidiExporter().export([0, 0, 200], str(tmp_path / "empty.mid"))


def test_export_to_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        MidiExporter().export([64], str(tmp_path / "missing" / "out.mid"))


def test_default_settings() -> None:
    exporter = MidiExporter()
    assert exporter.tempo == MidiExporter.DEFAULT_TEMPO
    assert exporter.velocity == MidiExporter.DEFAULT_VELOCITY
