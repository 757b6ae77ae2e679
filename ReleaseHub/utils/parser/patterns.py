"""
Regular expressions for the release-name grammar.

Each pattern defines exactly two capture groups: the outer one is the span
claimed in the input, the inner one the value that gets extracted.
"""

from ReleaseHub.utils.parser.torrent_info import FieldType

# Release flags
FLAG_PATTERNS = {
    FieldType.EXTENDED: [r'(?i)\b((EXTENDED(?:.CUT)?))\b'],
    FieldType.HARDCODED: [r'(?i)\b((HC))\b'],
    FieldType.PROPER: [r'(?i)\b((PROPER))\b'],
    FieldType.REPACK: [r'(?i)\b((REPACK))\b'],
    FieldType.WIDESCREEN: [r'(?i)\b((WS))\b'],
    FieldType.UNRATED: [r'(?i)\b((UNRATED))\b'],
    FieldType.THREED: [r'(?i)\b((3D))\b'],
    FieldType.AVC: [r'(?i)\b((AVC))\b'],
    FieldType.DUBBING: [r'(?i)\b(([ADM]?VO|DUB))\b'],
    FieldType.SPLIT_SCENES: [r'(?i)\b((SPLIT.?SCENES))\b'],
    FieldType.PORN: [r'(?i)\b((X{3}))\b'],
}

# Technical attributes
TECHNICAL_PATTERNS = {
    FieldType.SIZE: [r'(?i)\b((\d+(?:\.\d+)?(?:GB|MB)))\b'],
    FieldType.QUALITY: [
        r'(?i)\b(((?:PPV\.)?[HP]DTV|(?:HD)?CAM|B[DR]Rip|(?:HD-?)?TS|(?:PPV )?WEB-?DL(?:Rip)?|HDRip|DVDRip|DVDRIP'
        r'|CamRip|W[EB]BRip|BluRay|DvDScr|telesync))\b'
    ],
    FieldType.RESOLUTION: [r'\b(([0-9]{3,4}p|[248]K))\b'],
    FieldType.BITRATE: [r'(?i)\b(([0-9]+[KMGT]bps))\b'],
    FieldType.COLOR_DEPTH: [r'(?i)(([HS]DR(?:[0-9]{0,2})?\+?))'],
    FieldType.CODEC: [r'(?i)\b((xvid|[hx]\.?26[45]))\b'],
    FieldType.AUDIO: [
        r'(?i)\b((MP3|DD5\.?1|Dual[\- ]Audio|LiNE|DTS|AAC[.-]LC|AAC(?:\.?2\.0)?|AC3(?:(?:[\s-]+)?\.?5\.1)?))\b'
    ],
}

# Numbering. A bare number in the " - 10 " position belongs to the episode.
NUMBERING_PATTERNS = {
    FieldType.SEASON: [r'(?i)(?<![0-9])(s?([0-9]{1,2}))(?:[ex]|(?<!-\s[0-9])(?<!-\s[0-9]{2})\s)'],
    FieldType.SCENE: [r'(?i)(^S([0-9]{2}))', r'(?i)(Scene([0-9]{2}))'],
    FieldType.EPISODE: [r'(-\s+([0-9]{1,})(?:[^0-9]|$))', r'(?i)([ex]([0-9]{2})(?:[^0-9]|$))'],
    FieldType.YEAR: [r'\b(((?:19[0-9]|20[0-9])[0-9]))\b'],
}

# Origin and packaging
ORIGIN_PATTERNS = {
    FieldType.REGION: [r'(?i)\b(R([0-9]))\b'],
    FieldType.WEBSITE: [
        r'^((www\.[a-zA-Z0-9][a-zA-Z0-9-]{1,61}[a-zA-Z0-9]\.[a-zA-Z]{2,}))',
        r'^(\[ ?([^\]]+?) ?\])',
    ],
    FieldType.LANGUAGE: [r'(?i)\b((rus\.eng|ita\.eng))\b'],
    FieldType.SBS: [r'(?i)\b(((?:Half-)?SBS))\b'],
    FieldType.CONTAINER: [r'(?i)\b((MKV|AVI|MP4|WEBM))\b'],
    FieldType.STUDIO: [r'(?i)\b((AMZN|NF))\b', r'(\[ ?([^\]]+?)[\s.]?[0-9]{4}\])'],
}

FIELD_PATTERNS = {
    **FLAG_PATTERNS,
    **TECHNICAL_PATTERNS,
    **NUMBERING_PATTERNS,
    **ORIGIN_PATTERNS,
}

# Everything left over once the attribute detectors have claimed their spans
SCOPE_PATTERN = r'((.*))'
EXTRA_TITLE_PATTERN = r'(\[([^\)]+)\])'
TITLE_PATTERN = r'(([^\[\(\{]*))'
GROUP_PATTERN = r'\b(- ?([^-]+(?:-=\{[^-]+-?$)?))$'
