from enum import Enum
from typing import Sequence

from ReleaseHub.utils.parse_filename import parse, split_path
from ReleaseHub.utils.parser.parsers import Parser
from ReleaseHub.utils.parser.torrent_info import TorrentInfo

# Resources with this many files or more are never treated as a single movie
MOVIE_MAX_FILES = 4


class MediaType(str, Enum):
    MOVIE_SINGLE = 'movie_single'
    SERIES_MULTIPLE_SEASONS = 'series_multiple_seasons'
    SERIES_SINGLE_SEASON = 'series_single_season'
    SERIES_SPLIT_SCENES = 'series_split_scenes'
    SERIES_COMPILATION = 'series_compilation'


def get_media_type(infos: Sequence[TorrentInfo]) -> MediaType:
    """
    Classify the video files of one resource.

    Args:
        infos: Parsed records, one per video file of the resource

    Returns:
        MediaType describing how the files relate to each other
    """
    has_seasons = has_different_seasons = has_episodes = has_scenes = False
    same_title = True
    title = ''
    season = 0

    for info in infos:
        if info.season and season and info.season != season:
            has_different_seasons = True
        if info.season:
            season = info.season
            has_seasons = True
        if info.episode:
            has_episodes = True
        if info.scene:
            has_scenes = True
        if title and info.title != title:
            same_title = False
        title = info.title

    if len(infos) < MOVIE_MAX_FILES and same_title and not (has_episodes or has_scenes or has_seasons):
        return MediaType.MOVIE_SINGLE
    elif has_seasons and has_episodes and has_different_seasons:
        return MediaType.SERIES_MULTIPLE_SEASONS
    elif has_episodes and not has_different_seasons:
        return MediaType.SERIES_SINGLE_SEASON
    elif has_scenes and not has_different_seasons:
        return MediaType.SERIES_SPLIT_SCENES
    return MediaType.SERIES_COMPILATION


def get_episode_info(infos: Sequence[TorrentInfo]) -> TorrentInfo:
    """First record carrying an episode number; represents a standard series."""
    for info in infos:
        if info.episode:
            return info
    raise ValueError("No episode info in torrent list")


def get_compilation_info(parser: Parser, path: str) -> TorrentInfo:
    """A compilation is described by the top-level directory name alone."""
    parts = split_path(path)
    if not parts:
        raise ValueError(f"Empty path: {path!r}")
    return parse(parser, parts[0])
