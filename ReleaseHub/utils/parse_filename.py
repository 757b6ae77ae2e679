"""
Parse release names into TorrentInfo records.

A grammar built with ``build_parser()`` is passed in by the caller; this
module keeps no parser of its own.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Sequence

from ReleaseHub.config.config import get_max_processes
from ReleaseHub.utils.logging_utils import log_message
from ReleaseHub.utils.parser.match import Matches
from ReleaseHub.utils.parser.parsers import Parser
from ReleaseHub.utils.parser.torrent_info import TorrentInfo


def clean_name(filename: str) -> str:
    """Normalize a path segment before any detector runs."""
    return filename.replace('_', ' ')


def parse(parser: Parser, filename: str, info: Optional[TorrentInfo] = None) -> TorrentInfo:
    """
    Parse one path segment onto ``info``.

    Fields detected here overwrite whatever ``info`` already holds; fields
    not detected are left untouched. A fresh record is used when ``info``
    is None.
    """
    if info is None:
        info = TorrentInfo()

    matches = parser.parse(clean_name(filename), Matches())
    info.map(matches)

    log_message(f"Parsed '{filename}': {len(matches)} matches", level="DEBUG")
    return info


def split_path(path: str) -> List[str]:
    return [part for part in path.split('/') if part]


def parse_path(parser: Parser, path: str, info: Optional[TorrentInfo] = None) -> TorrentInfo:
    """
    Parse every segment of a '/'-separated path into one record.
    Later segments override fields found in earlier ones.
    """
    if info is None:
        info = TorrentInfo()
    for part in split_path(path):
        info = parse(parser, part, info)
    return info


def parse_multiple_files(parser: Parser, filenames: Sequence[str], as_paths: bool = False,
                         max_workers: Optional[int] = None) -> List[TorrentInfo]:
    """Parse independent names in parallel. Results keep the input order."""
    if max_workers is None:
        max_workers = get_max_processes()

    parse_one = parse_path if as_paths else parse

    if len(filenames) <= 1:
        return [parse_one(parser, filename) for filename in filenames]

    results: List[Optional[TorrentInfo]] = [None] * len(filenames)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_to_index = {
            executor.submit(parse_one, parser, filename): index
            for index, filename in enumerate(filenames)
        }
        for future in as_completed(future_to_index):
            results[future_to_index[future]] = future.result()

    log_message(f"Parsed {len(filenames)} names with {max_workers} workers", level="DEBUG")
    return results
