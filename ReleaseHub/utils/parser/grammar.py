"""
Assembly of the release-name grammar.

The grammar runs in three stages that each see the spans claimed by the
stages before them:

1. attribute detectors in priority order (flags, technical attributes,
   numbering, year, origin),
2. the title scope: whatever is left before the first claimed span is parsed
   for a bracketed alternate title and the free-form title,
3. a trailing ``-GROUP`` release group.

Detector order is significant: an earlier detector claims its span first,
so e.g. a four-digit resolution can never be read as a year.
"""

from typing import Iterable, Optional, Tuple

from ReleaseHub.utils.parser.matcher import RegexpMatcher
from ReleaseHub.utils.parser.parsers import CompoundParser, FieldParser, Parser, ScopeParser
from ReleaseHub.utils.parser.patterns import (
    EXTRA_TITLE_PATTERN, FIELD_PATTERNS, GROUP_PATTERN, SCOPE_PATTERN, TITLE_PATTERN,
)
from ReleaseHub.utils.parser.torrent_info import FieldType
from ReleaseHub.utils.parser.transformer import TITLE_TRANSFORMER

DETECTOR_ORDER = (
    FieldType.EXTENDED,
    FieldType.HARDCODED,
    FieldType.PROPER,
    FieldType.REPACK,
    FieldType.WIDESCREEN,
    FieldType.UNRATED,
    FieldType.THREED,
    FieldType.AVC,
    FieldType.DUBBING,
    FieldType.SPLIT_SCENES,
    FieldType.PORN,
    FieldType.SIZE,
    FieldType.QUALITY,
    FieldType.RESOLUTION,
    FieldType.BITRATE,
    FieldType.COLOR_DEPTH,
    FieldType.CODEC,
    FieldType.AUDIO,
    FieldType.SEASON,
    FieldType.SCENE,
    FieldType.EPISODE,
    FieldType.YEAR,
    FieldType.REGION,
    FieldType.WEBSITE,
    FieldType.LANGUAGE,
    FieldType.SBS,
    FieldType.CONTAINER,
    FieldType.STUDIO,
)

# Prefer the right-most candidate when several are present
LAST_MATCH_FIELDS = frozenset({FieldType.YEAR})

TRANSFORMED_FIELDS = frozenset({FieldType.STUDIO})


def build_field_parser(field_type: FieldType) -> FieldParser:
    """Build the attribute detector for one field type."""
    patterns = FIELD_PATTERNS.get(field_type)
    if patterns is None:
        raise ValueError(f"No field parser defined for {field_type.value!r}")
    matcher = RegexpMatcher(*patterns, last=field_type in LAST_MATCH_FIELDS)
    transformer = TITLE_TRANSFORMER if field_type in TRANSFORMED_FIELDS else None
    return FieldParser(field_type, matcher, transformer)


def build_field_parsers() -> Tuple[FieldParser, ...]:
    """Build the attribute detectors in priority order."""
    return tuple(build_field_parser(field_type) for field_type in DETECTOR_ORDER)


def build_title_parser() -> ScopeParser:
    return ScopeParser(RegexpMatcher(SCOPE_PATTERN), CompoundParser([
        FieldParser(FieldType.EXTRA_TITLE, RegexpMatcher(EXTRA_TITLE_PATTERN), TITLE_TRANSFORMER),
        FieldParser(FieldType.TITLE, RegexpMatcher(TITLE_PATTERN), TITLE_TRANSFORMER),
    ]))


def build_group_parser() -> FieldParser:
    return FieldParser(FieldType.GROUP, RegexpMatcher(GROUP_PATTERN))


def build_parser() -> Parser:
    """
    Build the complete release-name grammar.

    Call once at startup and pass the result to whatever needs to parse;
    the returned parser is read-only and safe to share between threads.
    """
    return CompoundParser([
        CompoundParser(build_field_parsers()),
        build_title_parser(),
        build_group_parser(),
    ])


def get_field_parser(field_type: FieldType,
                     field_parsers: Optional[Iterable[FieldParser]] = None) -> FieldParser:
    """
    Return the attribute detector for ``field_type``, for callers that only
    need a narrow parser (e.g. resolution only).
    """
    if field_parsers is None:
        return build_field_parser(field_type)
    for field_parser in field_parsers:
        if field_parser.field_type == field_type:
            return field_parser
    raise ValueError(f"No field parser defined for {field_type.value!r}")
