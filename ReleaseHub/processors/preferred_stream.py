from typing import Dict, List, Sequence

from ReleaseHub.utils.parser.grammar import get_field_parser
from ReleaseHub.utils.parser.match import Matches
from ReleaseHub.utils.parser.parsers import CompoundParser, Parser
from ReleaseHub.utils.parser.torrent_info import FieldType, TorrentInfo

OTHER_RESOLUTION = 'other'

# Resolution labels as they appear in user preferences
RESOLUTION_ALIASES = {
    '2160p': '4k',
}


def build_resolution_parser() -> Parser:
    """Narrow parser that only looks for the resolution."""
    return CompoundParser([get_field_parser(FieldType.RESOLUTION)])


def get_resolution_group(parser: Parser, name: str) -> str:
    info = TorrentInfo().map(parser.parse(name, Matches()))
    resolution = info.resolution or OTHER_RESOLUTION
    return RESOLUTION_ALIASES.get(resolution, resolution)


def group_by_resolution(names: Sequence[str], preferred_resolutions: Sequence[str],
                        parser: Parser) -> List[str]:
    """
    Order stream names by preferred resolution.

    Names are bucketed by their detected resolution; buckets are emitted in
    the order of ``preferred_resolutions`` and names whose resolution is not
    preferred are dropped. Input order is kept inside each bucket.
    """
    groups: Dict[str, List[str]] = {resolution: [] for resolution in preferred_resolutions}
    for name in names:
        resolution = get_resolution_group(parser, name)
        if resolution in groups:
            groups[resolution].append(name)

    streams = []
    for resolution in groups:
        streams.extend(groups[resolution])
    return streams
