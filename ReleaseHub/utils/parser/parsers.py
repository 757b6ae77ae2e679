"""
Composable parsers used to assemble the release-name grammar.

Every parser takes the text to scan plus the matches already claimed and
returns the new matches it produced. Parsers hold no state between calls,
so one grammar instance can be shared freely.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ReleaseHub.utils.parser.match import Match, Matches
from ReleaseHub.utils.parser.matcher import RegexpMatcher
from ReleaseHub.utils.parser.torrent_info import FieldType
from ReleaseHub.utils.parser.transformer import ReplaceTransformer


class Parser(ABC):
    @abstractmethod
    def parse(self, text: str, matches: Matches) -> Matches:
        """Return the matches found in text that do not overlap matches."""


class FieldParser(Parser):
    """Extracts a single field with one matcher and an optional transformer."""

    def __init__(self, field_type: FieldType, matcher: RegexpMatcher,
                 transformer: Optional[ReplaceTransformer] = None):
        self.field_type = field_type
        self.matcher = matcher
        self.transformer = transformer

    def parse(self, text: str, matches: Matches) -> Matches:
        m = self.matcher.match(self.field_type, text, matches)
        if m is None:
            return Matches()
        if self.transformer is not None:
            value = self.transformer.transform(m.content)
            if not value:
                return Matches()
            m = Match(m.field_type, m.start, m.end, m.raw, value)
        return Matches([m])

    def __repr__(self):
        return f"FieldParser({self.field_type.value})"


class CompoundParser(Parser):
    """
    Runs sub-parsers in order. Each one sees the external matches plus
    everything claimed earlier in this compound.
    """

    def __init__(self, parsers: Iterable[Parser]):
        self.parsers = tuple(parsers)

    def parse(self, text: str, matches: Matches) -> Matches:
        local_matches = Matches()
        for parser in self.parsers:
            claimed = Matches(matches)
            claimed.extend(local_matches)
            local_matches.extend(parser.parse(text, claimed))
        return local_matches


class ScopeParser(Parser):
    """
    Isolates a span of the input with ``matcher`` and parses only that span
    with ``parser``. Nested matches are shifted back to input offsets and the
    delimiting match is appended last.
    """

    def __init__(self, matcher: RegexpMatcher, parser: Parser):
        self.matcher = matcher
        self.parser = parser

    def parse(self, text: str, matches: Matches) -> Matches:
        scope = self.matcher.match(FieldType.UNKNOWN, text, matches)
        if scope is None:
            return Matches()
        result = Matches(m.shifted(scope.start) for m in self.parser.parse(scope.content, Matches()))
        result.append(scope)
        return result
