"""Read a ``<tuning>`` element from an MEI document into a Tuning."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Final

from tabtuning.pitch import Accidental, PitchName
from tabtuning.presets import TuningStandard
from tabtuning.tuning import Course, EditorialElement, Tuning, TuningChild

_LOG = logging.getLogger(__name__)

MEI_NAMESPACE: Final[str] = "http://www.music-encoding.org/ns/mei"

#: Elements that may wrap course definitions without changing their meaning.
EDITORIAL_ELEMENTS: Final[frozenset[str]] = frozenset(
    {"app", "lem", "rdg", "choice", "corr", "sic", "orig", "reg", "add", "del", "supplied", "unclear"}
)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _parse_int(element: ET.Element, attr: str) -> int | None:
    raw = element.get(attr)
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        _LOG.warning("Ignoring non-integer @%s=%r on <%s>", attr, raw, _local_name(element.tag))
        return None


def _parse_pname(element: ET.Element) -> PitchName:
    raw = element.get("pname")
    if not raw:
        return PitchName.NONE
    try:
        return PitchName(raw.strip().lower())
    except ValueError:
        _LOG.warning("Ignoring unknown @pname=%r on <course>", raw)
        return PitchName.NONE


def _parse_accid(element: ET.Element) -> Accidental:
    raw = element.get("accid")
    if not raw:
        return Accidental.NONE
    try:
        return Accidental(raw.strip())
    except ValueError:
        _LOG.warning("Ignoring unsupported @accid=%r on <course>", raw)
        return Accidental.NONE


def _read_course(element: ET.Element) -> Course:
    return Course(
        n=_parse_int(element, "n"),
        pname=_parse_pname(element),
        octave=_parse_int(element, "oct"),
        accid=_parse_accid(element),
    )


def _read_children(element: ET.Element) -> list[TuningChild]:
    children: list[TuningChild] = []
    for child in element:
        name = _local_name(child.tag)
        if name == "course":
            children.append(_read_course(child))
        elif name in EDITORIAL_ELEMENTS:
            children.append(EditorialElement(name=name, children=_read_children(child)))
        else:
            _LOG.debug("Skipping <%s> inside <%s>", name, _local_name(element.tag))
    return children


def _find_tuning_element(root: ET.Element) -> ET.Element | None:
    for element in root.iter():
        if _local_name(element.tag) == "tuning":
            return element
    return None


def tuning_from_element(element: ET.Element) -> Tuning:
    """Build a Tuning from a parsed ``<tuning>`` element."""
    return Tuning(
        tuning_standard=TuningStandard.parse(element.get("tuning.standard")),
        children=_read_children(element),
    )


def parse_tuning(xml_text: str) -> Tuning:
    """
    Parse MEI text and return the first ``<tuning>`` it contains.

    Raises:
        ValueError: If the text is not well-formed XML or has no ``<tuning>``.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise ValueError(f"Could not parse MEI: {exc}") from exc

    element = _find_tuning_element(root)
    if element is None:
        raise ValueError("No <tuning> element found in MEI document.")

    tuning = tuning_from_element(element)
    _LOG.debug("Read %r", tuning)
    return tuning


def read_tuning(path: str | Path) -> Tuning:
    """
    Read the first ``<tuning>`` of an MEI file.

    Raises:
        ValueError: If the file is not well-formed XML or has no ``<tuning>``.
        OSError: If the file cannot be read.
    """
    return parse_tuning(Path(path).read_text(encoding="utf-8"))
