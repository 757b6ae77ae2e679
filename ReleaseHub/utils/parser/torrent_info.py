import re
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Iterable


class FieldType(str, Enum):
    TITLE = 'title'
    EXTRA_TITLE = 'extra_title'
    SEASON = 'season'
    EPISODE = 'episode'
    YEAR = 'year'
    SCENE = 'scene'
    RESOLUTION = 'resolution'
    BITRATE = 'bitrate'
    QUALITY = 'quality'
    COLOR_DEPTH = 'color_depth'
    CODEC = 'codec'
    AUDIO = 'audio'
    GROUP = 'group'
    STUDIO = 'studio'
    REGION = 'region'
    WEBSITE = 'website'
    LANGUAGE = 'language'
    SBS = 'sbs'
    CONTAINER = 'container'
    DUBBING = 'dubbing'
    SIZE = 'size'
    EXTENDED = 'extended'
    HARDCODED = 'hardcoded'
    PROPER = 'proper'
    REPACK = 'repack'
    WIDESCREEN = 'widescreen'
    UNRATED = 'unrated'
    THREED = 'threed'
    PORN = 'porn'
    AVC = 'avc'
    SPLIT_SCENES = 'split_scenes'
    # Scope delimiters only, never mapped
    UNKNOWN = 'unknown'


KIND_STRING = 'string'
KIND_INT = 'int'
KIND_BOOL = 'bool'

# Target attribute and coercion for every mappable field type
FIELD_SETTERS = {
    FieldType.TITLE: ('title', KIND_STRING),
    FieldType.EXTRA_TITLE: ('extra_title', KIND_STRING),
    FieldType.SEASON: ('season', KIND_INT),
    FieldType.EPISODE: ('episode', KIND_INT),
    FieldType.YEAR: ('year', KIND_INT),
    FieldType.SCENE: ('scene', KIND_INT),
    FieldType.RESOLUTION: ('resolution', KIND_STRING),
    FieldType.BITRATE: ('bitrate', KIND_STRING),
    FieldType.QUALITY: ('quality', KIND_STRING),
    FieldType.COLOR_DEPTH: ('color_depth', KIND_STRING),
    FieldType.CODEC: ('codec', KIND_STRING),
    FieldType.AUDIO: ('audio', KIND_STRING),
    FieldType.GROUP: ('group', KIND_STRING),
    FieldType.STUDIO: ('studio', KIND_STRING),
    FieldType.REGION: ('region', KIND_STRING),
    FieldType.WEBSITE: ('website', KIND_STRING),
    FieldType.LANGUAGE: ('language', KIND_STRING),
    FieldType.SBS: ('sbs', KIND_STRING),
    FieldType.CONTAINER: ('container', KIND_STRING),
    FieldType.DUBBING: ('dubbing', KIND_STRING),
    FieldType.SIZE: ('size', KIND_STRING),
    FieldType.EXTENDED: ('extended', KIND_BOOL),
    FieldType.HARDCODED: ('hardcoded', KIND_BOOL),
    FieldType.PROPER: ('proper', KIND_BOOL),
    FieldType.REPACK: ('repack', KIND_BOOL),
    FieldType.WIDESCREEN: ('widescreen', KIND_BOOL),
    FieldType.UNRATED: ('unrated', KIND_BOOL),
    FieldType.THREED: ('threed', KIND_BOOL),
    FieldType.PORN: ('porn', KIND_BOOL),
    FieldType.AVC: ('avc', KIND_BOOL),
    FieldType.SPLIT_SCENES: ('split_scenes', KIND_BOOL),
}

# Serialized key differs from the attribute name for stored records
JSON_KEYS = {'threed': '3d'}

_INT_RE = re.compile(r'[+-]?[0-9]+', re.ASCII)

# Integer fields are stored as signed 64-bit columns
INT_MIN = -2 ** 63
INT_MAX = 2 ** 63 - 1


def parse_int(value: str) -> int:
    """Base-10 parse; anything that is not a plain signed 64-bit integer yields 0."""
    if not _INT_RE.fullmatch(value):
        return 0
    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        return 0
    return number


@dataclass
class TorrentInfo:
    """Attributes decomposed from a release name. Zero values mean absent."""
    title: str = ''
    extra_title: str = ''
    season: int = 0
    episode: int = 0
    year: int = 0
    resolution: str = ''
    bitrate: str = ''
    quality: str = ''
    color_depth: str = ''
    codec: str = ''
    audio: str = ''
    group: str = ''
    studio: str = ''
    region: str = ''
    extended: bool = False
    hardcoded: bool = False
    proper: bool = False
    repack: bool = False
    container: str = ''
    widescreen: bool = False
    website: str = ''
    language: str = ''
    sbs: str = ''
    unrated: bool = False
    size: str = ''
    threed: bool = False
    porn: bool = False
    avc: bool = False
    split_scenes: bool = False
    scene: int = 0
    dubbing: str = ''

    def map_field(self, field_type: FieldType, value: str) -> None:
        """Apply one extracted value onto its slot; unknown types are ignored."""
        setter = FIELD_SETTERS.get(field_type)
        if setter is None:
            return
        attr, kind = setter
        if kind == KIND_BOOL:
            setattr(self, attr, True)
        elif kind == KIND_INT:
            setattr(self, attr, parse_int(value))
        else:
            setattr(self, attr, value)

    def map(self, matches: Iterable) -> 'TorrentInfo':
        for m in matches:
            self.map_field(m.field_type, m.content)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization, omitting unset fields."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value:
                result[JSON_KEYS.get(f.name, f.name)] = value
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TorrentInfo':
        """Build a record from stored data, accepting serialized or attribute keys."""
        attr_names = {f.name for f in fields(cls)}
        reverse_keys = {v: k for k, v in JSON_KEYS.items()}
        kwargs = {}
        for key, value in data.items():
            name = reverse_keys.get(key, key)
            if name in attr_names:
                kwargs[name] = value
        return cls(**kwargs)
