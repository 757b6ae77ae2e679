from typing import Sequence, Tuple


class ReplaceTransformer:
    """
    Cleans an extracted value: literal replacements first, then one pass of
    suffix trims, one pass of prefix trims and a final whitespace strip.
    """

    def __init__(self, replacements: Sequence[Tuple[str, str]] = (),
                 trim_suffixes: Sequence[str] = (), trim_prefixes: Sequence[str] = ()):
        self.replacements = tuple(replacements)
        self.trim_suffixes = tuple(trim_suffixes)
        self.trim_prefixes = tuple(trim_prefixes)

    def transform(self, value: str) -> str:
        for old, new in self.replacements:
            value = value.replace(old, new)
        for suffix in self.trim_suffixes:
            if suffix and value.endswith(suffix):
                value = value[:-len(suffix)]
        for prefix in self.trim_prefixes:
            if value.startswith(prefix):
                value = value[len(prefix):]
        return value.strip()


# Used for titles, alternate titles and studio names
TITLE_TRANSFORMER = ReplaceTransformer(
    replacements=[('_', ' '), ('.', ' ')],
    trim_suffixes=['(', '[', '-', '--', '---'],
    trim_prefixes=[')', ']', '-', '--', '---'],
)
