"""
Build catalog records from the Unicode ``emoji-test.txt`` data file.

The format is::

    # group: Smileys & Emotion
    # subgroup: face-smiling
    1F600 ; fully-qualified # 😀 E1.0 grinning face

Only fully-qualified lines are used. Toned variants are folded into their
base emoji, which is flagged as supporting skin tones.
"""
import logging
import re
from typing import Any, Dict, List, Optional, Set

from .models import EmojiCategory
from .skin_tones import VARIATION_SELECTOR_16, has_skin_tone, strip_skin_tones

logger = logging.getLogger(__name__)

EMOJI_TEST_URL = "https://unicode.org/Public/emoji/latest/emoji-test.txt"

GROUP_PATTERN = re.compile(r'^#\s*group:\s*(.+?)\s*$')
SUBGROUP_PATTERN = re.compile(r'^#\s*subgroup:\s*(.+?)\s*$')
# Example: 1F44D ; fully-qualified # 👍 E0.6 thumbs up
EMOJI_LINE_PATTERN = re.compile(
    r'^([0-9A-F ]+?)\s*;\s*fully-qualified\s*#\s*\S+\s+E(\d+\.\d+)\s+(.+?)\s*$'
)


def codepoints_to_glyph(codepoints: str) -> str:
    """Convert a space separated list of hex code points into a string."""
    return ''.join(chr(int(cp, 16)) for cp in codepoints.split())


def make_aliases(name: str) -> List[str]:
    """Derive a snake_case alias from an emoji name."""
    alias = re.sub(r'[^a-z0-9]+', '_', name.lower()).strip('_')
    return [alias] if alias else []


def make_tags(subgroup: Optional[str]) -> List[str]:
    if not subgroup:
        return []
    return [part for part in subgroup.lower().split('-') if part]


def _tone_key(glyph: str) -> str:
    return strip_skin_tones(glyph).replace(VARIATION_SELECTOR_16, '')


def parse_emoji_test(text: str) -> List[Dict[str, Any]]:
    """
    Parse emoji-test.txt content into catalog records.

    Args:
        text: Full file content

    Returns:
        List of catalog dictionaries in file order
    """
    entries = []
    toned_keys: Set[str] = set()
    category: Optional[EmojiCategory] = None
    subgroup: Optional[str] = None
    unknown_groups: Set[str] = set()

    for line in text.splitlines():
        group_match = GROUP_PATTERN.match(line)
        if group_match:
            group = group_match.group(1)
            subgroup = None
            try:
                category = EmojiCategory.from_name(group)
            except ValueError:
                # Component (modifiers and hair styles) is not pickable
                category = None
                unknown_groups.add(group)
            continue

        subgroup_match = SUBGROUP_PATTERN.match(line)
        if subgroup_match:
            subgroup = subgroup_match.group(1)
            continue

        emoji_match = EMOJI_LINE_PATTERN.match(line)
        if not emoji_match or category is None:
            continue

        glyph = codepoints_to_glyph(emoji_match.group(1))
        if has_skin_tone(glyph):
            toned_keys.add(_tone_key(glyph))
            continue

        name = emoji_match.group(3)
        entries.append({
            'emoji': glyph,
            'description': name,
            'category': category.value,
            'aliases': make_aliases(name),
            'tags': make_tags(subgroup),
            'unicode_version': emoji_match.group(2),
        })

    for entry in entries:
        entry['skin_tones'] = _tone_key(entry['emoji']) in toned_keys

    if unknown_groups:
        logger.info(f"Skipped emoji groups: {sorted(unknown_groups)}")
    logger.info(f"Parsed {len(entries)} emoji, {sum(e['skin_tones'] for e in entries)} with skin tones")
    return entries


def merge_catalog_metadata(records: List[Dict[str, Any]],
                           existing: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Carry curated fields from an existing catalog into freshly parsed records.

    emoji-test.txt has no platform versions and only derived aliases, so
    ``aliases``, ``tags`` and ``ios_version`` of emoji already in the catalog
    are kept. Emoji new to the catalog get no ``ios_version``.

    Args:
        records: Output of parse_emoji_test
        existing: Records of the current catalog

    Returns:
        New list of merged records, in ``records`` order
    """
    curated = {}
    for record in existing:
        if isinstance(record, dict) and record.get('emoji'):
            curated.setdefault(_tone_key(record['emoji']), record)

    merged = []
    kept = 0
    for record in records:
        record = dict(record)
        previous = curated.get(_tone_key(record['emoji']))
        if previous is not None:
            kept += 1
            for key in ('aliases', 'tags', 'ios_version'):
                if key in previous:
                    record[key] = previous[key]
        merged.append(record)

    logger.info(f"Kept curated metadata for {kept} of {len(records)} emoji")
    return merged
