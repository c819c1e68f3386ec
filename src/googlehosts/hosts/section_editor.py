# src/googlehosts/hosts/section_editor.py
"""Locate and rewrite marker-delimited sections in a list of lines.

A section is the run of lines between a start marker line and its end
marker line. Markers match whole lines exactly. Every function here is
pure: the input list is never modified, a new list is returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class MarkerPair:
    start: str
    end: str

    def __post_init__(self) -> None:
        if self.start == self.end:
            raise ValueError(f"Start and end markers must differ: {self.start!r}")


class MalformedSectionError(ValueError):
    """Raised when the end marker only appears before the start marker."""

    def __init__(self, markers: MarkerPair, start_index: int, end_index: int):
        self.markers = markers
        self.start_index = start_index
        self.end_index = end_index
        super().__init__(
            f"Malformed section: {markers.end!r} (line {end_index + 1}) "
            f"precedes {markers.start!r} (line {start_index + 1})"
        )


def _index_of(lines: Sequence[str], marker: str, begin: int = 0) -> Optional[int]:
    for i in range(begin, len(lines)):
        if lines[i] == marker:
            return i
    return None


def locate(lines: Sequence[str], markers: MarkerPair) -> Optional[Tuple[int, int]]:
    """Return ``(start_index, end_index)`` of the section, or ``None``.

    The end marker is searched after the start marker first. If none follows
    it, the first end marker anywhere is reported, so a reversed pair comes
    back with ``start_index > end_index`` for the caller to reject.
    """
    start = _index_of(lines, markers.start)
    if start is None:
        return None
    end = _index_of(lines, markers.end, start + 1)
    if end is None:
        end = _index_of(lines, markers.end)
    if end is None:
        return None
    return start, end


def _checked_locate(lines: Sequence[str], markers: MarkerPair) -> Optional[Tuple[int, int]]:
    found = locate(lines, markers)
    if found is not None and found[0] >= found[1]:
        raise MalformedSectionError(markers, *found)
    return found


def upsert(lines: Sequence[str], markers: MarkerPair, replacement: Sequence[str]) -> List[str]:
    """Replace the section body with ``replacement``, or append a new section.

    Raises:
        MalformedSectionError: the markers are present but reversed.
    """
    found = _checked_locate(lines, markers)
    if found is None:
        return [*lines, markers.start, *replacement, markers.end]
    start, end = found
    return [*lines[: start + 1], *replacement, *lines[end:]]


def remove(lines: Sequence[str], markers: MarkerPair) -> List[str]:
    """Delete the section including both marker lines; no-op when absent."""
    found = _checked_locate(lines, markers)
    if found is None:
        return list(lines)
    start, end = found
    return [*lines[:start], *lines[end + 1 :]]
