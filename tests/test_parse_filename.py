"""Tests for the parsing API used by the enrichment workflow."""

from ReleaseHub.utils.parse_filename import parse, parse_multiple_files, parse_path, split_path
from ReleaseHub.utils.parser.torrent_info import TorrentInfo

SHOW_PATH = "Show Name 2019 1080p/Show Name S01E02 720p HDTV.mkv"


def test_parse_returns_new_record(grammar):
    info = parse(grammar, "Lucy 2014 720p")
    assert isinstance(info, TorrentInfo)
    assert info.year == 2014


def test_parse_overwrites_only_detected_fields(grammar):
    info = TorrentInfo(year=1999, group="OLD")
    result = parse(grammar, "Show Name S01E02 720p HDTV.mkv", info)
    assert result is info
    assert info.year == 1999
    assert info.group == "OLD"
    assert info.resolution == "720p"
    assert (info.season, info.episode) == (1, 2)


def test_split_path_drops_empty_segments():
    assert split_path("/a//b/") == ["a", "b"]
    assert split_path("") == []


def test_parse_path_merges_segments(grammar):
    info = parse_path(grammar, SHOW_PATH)
    assert info.title == "Show Name"
    assert info.year == 2019
    assert info.resolution == "720p"
    assert (info.season, info.episode) == (1, 2)
    assert info.quality == "HDTV"
    assert info.container == "mkv"


def test_parse_path_with_leading_slash(grammar):
    assert parse_path(grammar, "/" + SHOW_PATH) == parse_path(grammar, SHOW_PATH)


def test_parse_multiple_files_keeps_input_order(grammar, release_names):
    expected = [parse(grammar, name) for name in release_names]
    assert parse_multiple_files(grammar, release_names, max_workers=4) == expected


def test_parse_multiple_files_as_paths(grammar):
    results = parse_multiple_files(grammar, [SHOW_PATH, "Lucy 2014 720p"], as_paths=True, max_workers=2)
    assert results[0] == parse_path(grammar, SHOW_PATH)
    assert results[1].title == "Lucy"


def test_parse_multiple_files_single_and_empty(grammar):
    assert parse_multiple_files(grammar, ["Lucy 2014 720p"], max_workers=1)[0].year == 2014
    assert parse_multiple_files(grammar, [], max_workers=1) == []


def test_parse_multiple_files_uses_configured_workers(grammar, monkeypatch, capsys):
    monkeypatch.setenv("MAX_PROCESSES", "2")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_TO_FILE", "false")
    results = parse_multiple_files(grammar, ["Lucy 2014 720p", "Brave 2012 1080p"])
    assert [r.year for r in results] == [2014, 2012]
    assert "Parsed 2 names with 2 workers" in capsys.readouterr().err
