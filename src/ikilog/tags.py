"""
Tag definitions for ikilog.

A tag is the color category attached to a log call. It decides two
things: the glyph shown in colored output, and whether the date cutoff
applies. Only CRITICAL bypasses the cutoff, which makes it the right
tag for reporting caught exceptions.

Xcode-style color plugins are gone, so each color is rendered as an
emoji glyph:

    tag              color    glyph
    none             none     ⬜️
    critical         red      ‼️   (always logged)
    important        orange   ✴️
    highlighted      yellow   💛
    reviewed         green    ✅
    valuable         blue     💙
    to_be_reviewed   purple   💜
    not_important    gray     ❔
"""

from enum import Enum


class Tag(Enum):
    """Color tag for a log call. The value is the color name."""
    NONE = 'none'
    CRITICAL = 'red'
    IMPORTANT = 'orange'
    HIGHLIGHTED = 'yellow'
    REVIEWED = 'green'
    VALUABLE = 'blue'
    TO_BE_REVIEWED = 'purple'
    NOT_IMPORTANT = 'gray'

    @property
    def color(self) -> str:
        return self.value

    @property
    def glyph(self) -> str:
        return TAG_GLYPHS[self]

    @property
    def description(self) -> str:
        return TAG_DESCRIPTIONS[self]

    @property
    def bypasses_date_cutoff(self) -> bool:
        """True when events with this tag ignore the suppression date."""
        return self is Tag.CRITICAL


TAG_GLYPHS = {
    Tag.NONE:           '⬜️',
    Tag.CRITICAL:       '‼️',   # Messages using this tag are always logged
    Tag.IMPORTANT:      '✴️',   # Eight point star
    Tag.HIGHLIGHTED:    '💛',
    Tag.REVIEWED:       '✅',
    Tag.VALUABLE:       '💙',
    Tag.TO_BE_REVIEWED: '💜',
    Tag.NOT_IMPORTANT:  '❔',
}

TAG_DESCRIPTIONS = {
    Tag.NONE:           'Plain debug output',
    Tag.CRITICAL:       'Errors; never suppressed by the date cutoff',
    Tag.IMPORTANT:      'Important state changes',
    Tag.HIGHLIGHTED:    'Output worth spotting quickly',
    Tag.REVIEWED:       'Code paths already reviewed',
    Tag.VALUABLE:       'Valuable data points',
    Tag.TO_BE_REVIEWED: 'Code paths that still need review',
    Tag.NOT_IMPORTANT:  'Background noise',
}


def _normalize(name: str) -> str:
    """Fold 'toBeReviewed', 'to-be-reviewed' and 'TO_BE_REVIEWED' together."""
    return ''.join(ch for ch in name.lower() if ch.isalnum())


_LOOKUP = {}
for _tag in Tag:
    _LOOKUP[_normalize(_tag.name)] = _tag
    _LOOKUP[_tag.value] = _tag
del _tag
# 'notImportant' is spelled 'gray' in the function names
_LOOKUP['grey'] = Tag.NOT_IMPORTANT


def parse_tag(name: str) -> Tag:
    """Resolve a tag from its name or color alias.

    Args:
        name: Tag name in any case or separator style ('critical',
              'toBeReviewed', 'to-be-reviewed') or a color ('red', 'gray').

    Returns:
        The matching Tag.

    Raises:
        ValueError: if the name matches no tag.
    """
    tag = _LOOKUP.get(_normalize(name or ''))
    if tag is None:
        raise ValueError(f"Unknown tag: {name!r}")
    return tag


def format_tag_list() -> str:
    """Format the tags for --list-tags display."""
    lines = ["Available tags:"]
    max_name = max(len(tag.name) for tag in Tag)
    for tag in Tag:
        name = tag.name.lower()
        lines.append(f"  {tag.glyph}  {name:<{max_name}}  "
                     f"{tag.color:<6}  {tag.description}")
    return "\n".join(lines)
