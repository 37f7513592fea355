"""Unit tests for reading <tuning> elements from MEI."""

import logging
from pathlib import Path

import pytest

from tabtuning.mei_reader import parse_tuning, read_tuning
from tabtuning.pitch import Accidental, PitchName
from tabtuning.presets import NotationType, TuningStandard
from tabtuning.tuning import Course, EditorialElement

MEI_DOCUMENT = """<?xml version="1.0" encoding="UTF-8"?>
<mei xmlns="http://www.music-encoding.org/ns/mei" meiversion="5.0">
  <music><body><mdiv><score><scoreDef><staffGrp>
    <staffDef n="1" lines="6" notationtype="tab.lute.french">
      <tuning tuning.standard="lute.renaissance.6">
        <course n="1" pname="g" oct="4"/>
        <course n="2" pname="d" oct="4"/>
        <app>
          <lem><course n="7" pname="f" oct="2" accid="s"/></lem>
          <rdg><course n="7" pname="d" oct="2"/></rdg>
        </app>
      </tuning>
    </staffDef>
  </staffGrp></scoreDef></score></mdiv></body></music>
</mei>
"""


def test_reads_standard_and_courses() -> None:
    tuning = parse_tuning(MEI_DOCUMENT)
    assert tuning.tuning_standard is TuningStandard.LUTE_RENAISSANCE_6
    assert tuning.children[0] == Course(n=1, pname=PitchName.G, octave=4)
    assert tuning.find_course(7) == Course(n=7, pname=PitchName.F, octave=2, accid=Accidental.SHARP)


def test_editorial_structure_is_kept() -> None:
    tuning = parse_tuning(MEI_DOCUMENT)
    app = tuning.children[2]
    assert isinstance(app, EditorialElement)
    assert app.name == "app"
    assert [child.name for child in app.children if isinstance(child, EditorialElement)] == ["lem", "rdg"]


def test_resolves_pitches_from_document() -> None:
    tuning = parse_tuning(MEI_DOCUMENT)
    pitches = tuning.open_pitches(NotationType.TAB_LUTE_FRENCH)
    assert pitches == [67, 62, 57, 53, 48, 43, 42]


def test_tuning_without_namespace_as_root() -> None:
    tuning = parse_tuning('<tuning><course n="6" pname="d" oct="2"/></tuning>')
    assert tuning.tuning_standard is TuningStandard.NONE
    assert tuning.calc_pitch_number(6, 0, NotationType.TAB_GUITAR) == 38


def test_malformed_values_fall_through(caplog: pytest.LogCaptureFixture) -> None:
    xml = """<tuning tuning.standard="guitar.drop.D">
      <course n="1" pname="h" oct="4"/>
      <course n="2" pname="b" oct="three"/>
      <course n="x" pname="c" oct="3"/>
      <course n="3" pname="g" oct="3" accid="ss"/>
    </tuning>"""
    with caplog.at_level(logging.WARNING, logger="tabtuning.mei_reader"):
        tuning = parse_tuning(xml)

    assert tuning.calc_pitch_number(1, 0, NotationType.TAB_GUITAR) == 64
    assert tuning.calc_pitch_number(2, 0, NotationType.TAB_GUITAR) == 59
    assert tuning.calc_pitch_number(3, 0, NotationType.TAB_GUITAR) == 55
    assert "'h'" in caplog.text
    assert "'three'" in caplog.text
    assert "'ss'" in caplog.text


def test_unknown_children_are_skipped() -> None:
    tuning = parse_tuning('<tuning><annot>six courses</annot><course n="1" pname="a" oct="4"/></tuning>')
    assert tuning.children == [Course(n=1, pname=PitchName.A, octave=4)]


def test_missing_tuning_raises() -> None:
    with pytest.raises(ValueError, match="No <tuning>"):
        parse_tuning("<mei><music/></mei>")


def test_invalid_xml_raises() -> None:
    with pytest.raises(ValueError, match="Could not parse MEI"):
        parse_tuning("<tuning><course></tuning>")


def test_read_tuning_from_file(tmp_path: Path) -> None:
    path = tmp_path / "lute.mei"
    path.write_text(MEI_DOCUMENT, encoding="utf-8")
    tuning = read_tuning(path)
    assert tuning.calc_pitch_number(2, 2, NotationType.TAB_LUTE_ITALIAN) == 64


def test_read_tuning_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_tuning(tmp_path / "missing.mei")
