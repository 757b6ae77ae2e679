"""
Release-name parser: decomposes a torrent or file name into structured
attributes using priority-ordered regex detectors that never claim
overlapping spans of the input.
"""

from ReleaseHub.utils.parser.torrent_info import FieldType, TorrentInfo
from ReleaseHub.utils.parser.match import Match, Matches
from ReleaseHub.utils.parser.matcher import PatternError, RegexpMatcher
from ReleaseHub.utils.parser.transformer import ReplaceTransformer, TITLE_TRANSFORMER
from ReleaseHub.utils.parser.parsers import CompoundParser, FieldParser, Parser, ScopeParser
from ReleaseHub.utils.parser.grammar import build_parser, build_field_parsers, get_field_parser

__all__ = [
    'FieldType',
    'TorrentInfo',
    'Match',
    'Matches',
    'PatternError',
    'RegexpMatcher',
    'ReplaceTransformer',
    'TITLE_TRANSFORMER',
    'CompoundParser',
    'FieldParser',
    'Parser',
    'ScopeParser',
    'build_parser',
    'build_field_parsers',
    'get_field_parser',
]
