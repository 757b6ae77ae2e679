import re
from typing import List, Optional, Pattern

from ReleaseHub.utils.parser.match import Match, Matches
from ReleaseHub.utils.parser.torrent_info import FieldType


class PatternError(ValueError):
    """A matcher pattern does not define exactly two capture groups."""


class RegexpMatcher:
    """
    Finds one field value using alternative regular expressions.

    Every pattern must define two groups: group 1 is the span consumed
    from the input (context included), group 2 the value to extract.
    Alternatives are tried in order and the first one producing any usable
    occurrence wins. By default the left-most occurrence is returned; with
    ``last=True`` the right-most one is.
    """

    def __init__(self, *patterns: str, last: bool = False):
        compiled = []
        for pattern in patterns:
            regex = re.compile(pattern, re.ASCII)
            if regex.groups != 2:
                raise PatternError(
                    f"Pattern {pattern!r} does not have the right number of capture groups: "
                    f"want 2, got {regex.groups}"
                )
            compiled.append(regex)
        self.patterns = tuple(compiled)
        self.last = last

    @classmethod
    def last_match(cls, *patterns: str) -> 'RegexpMatcher':
        return cls(*patterns, last=True)

    def _match_pattern(self, field_type: FieldType, regex: Pattern, text: str,
                       matches: Matches) -> Optional[Match]:
        found: List[Match] = []
        for m in regex.finditer(text):
            if m.start(2) < 0:
                continue
            start, end = m.span(1)
            new_start, new_end, ok = matches.get_available(start, end)
            if not ok:
                continue

            # Value bounds relative to group 1, clipped to the available window
            content_start = max(m.start(2) - start, new_start - start)
            content_end = min(m.end(2) - start, new_end - start)
            content = m.group(1)[content_start:content_end].strip('.').strip()
            if not content:
                continue

            found.append(Match(field_type, new_start, new_end, text[new_start:new_end], content))

        if not found:
            return None
        return found[-1] if self.last else found[0]

    def match(self, field_type: FieldType, text: str, matches: Matches) -> Optional[Match]:
        for regex in self.patterns:
            m = self._match_pattern(field_type, regex, text, matches)
            if m is not None:
                return m
        return None

    def __repr__(self):
        return f"RegexpMatcher({', '.join(repr(p.pattern) for p in self.patterns)}, last={self.last})"
