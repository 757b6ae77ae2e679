"""
Match model and claimed-range bookkeeping for the release-name parser.
"""

from dataclasses import dataclass
from typing import Tuple

from ReleaseHub.utils.parser.torrent_info import FieldType


@dataclass(frozen=True)
class Match:
    """
    One accepted extraction.

    ``start``/``end`` are half-open offsets into the text the matcher ran on,
    ``raw`` is the consumed substring and ``content`` the trimmed value.
    """
    field_type: FieldType
    start: int
    end: int
    raw: str
    content: str

    def shifted(self, offset: int) -> 'Match':
        """Copy of this match moved ``offset`` characters to the right."""
        return Match(self.field_type, self.start + offset, self.end + offset, self.raw, self.content)

    def overlaps(self, other: 'Match') -> bool:
        return self.start < other.end and other.start < self.end


class Matches(list):
    """
    Insertion-ordered list of matches.

    Order is detector priority, not position in the input. The same list
    serves as the set of claimed ranges for detectors that run later.
    """

    def get_available(self, start: int, end: int) -> Tuple[int, int, bool]:
        """
        Shrink ``[start, end)`` so it does not cover any claimed range.

        Claims are applied greedily in list order against the already
        shrunk window. Returns the window and whether it is non-empty.
        """
        for m in self:
            if m.start <= start and m.end >= end:
                return start, end, False
            if start < m.end <= end and m.start <= start:
                start = m.end
            elif start < m.start <= end:
                end = m.start
        return start, end, start < end
