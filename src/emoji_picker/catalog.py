"""Emoji catalog loading and sectioning."""

import json
import logging
import os
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .models import (
    ALL_CATEGORIES,
    Emoji,
    EmojiCategory,
    EmojiSection,
    PickerLocalization,
)
from .skin_tones import strip_skin_tones, VARIATION_SELECTOR_16
from .utils import ValidationError, validate_field_types, validate_required_fields
from .version import validate_version_format

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = os.path.join(os.path.dirname(__file__), 'assets', 'emoji.json')

REQUIRED_FIELDS = ['emoji', 'description', 'category', 'aliases', 'tags']

FIELD_TYPES = {
    'emoji': str,
    'description': str,
    'category': str,
    'aliases': list,
    'tags': list,
    'skin_tones': bool,
    'ios_version': str,
}


class CatalogError(Exception):
    """Raised when a catalog file cannot be used and strict loading was requested."""
    pass


# ============================================================================
# LOADER
# ============================================================================

def validate_record(record: Any) -> List[str]:
    """
    Validate one raw catalog record.

    Args:
        record: Decoded JSON value for one emoji

    Returns:
        List of error messages, empty if the record is usable
    """
    if not isinstance(record, dict):
        return [f"Record is not an object: {type(record).__name__}"]

    errors = []
    try:
        validate_required_fields(record, REQUIRED_FIELDS)
        validate_field_types(record, FIELD_TYPES)
    except ValidationError as e:
        errors.append(str(e))
        return errors

    if not record['emoji']:
        errors.append("Field 'emoji' is empty")

    try:
        EmojiCategory.from_name(record['category'])
    except ValueError as e:
        errors.append(str(e))

    for key in ('aliases', 'tags'):
        if not all(isinstance(item, str) for item in record[key]):
            errors.append(f"Field '{key}' must contain only strings")

    return errors


def parse_catalog(data: Any, strict: bool = False) -> Tuple[Emoji, ...]:
    """
    Turn decoded catalog JSON into Emoji records, skipping bad entries.

    Args:
        data: Decoded JSON, expected to be a list of records
        strict: Raise CatalogError instead of degrading to an empty catalog

    Returns:
        Tuple of Emoji in catalog order
    """
    if not isinstance(data, list):
        message = f"Catalog must be a JSON list, got {type(data).__name__}"
        if strict:
            raise CatalogError(message)
        logger.warning(f"{message}. Emoji catalog will be empty.")
        return ()

    emojis = []
    skipped = 0
    for index, record in enumerate(data):
        errors = validate_record(record)
        if errors:
            skipped += 1
            logger.warning(f"Skipping catalog record {index}: {errors}")
            continue

        version = record.get('ios_version')
        if version and not validate_version_format(version):
            logger.warning(f"Catalog record {index} has unexpected ios_version {version!r}")

        emojis.append(Emoji.from_dict(record))

    if skipped:
        logger.info(f"Loaded {len(emojis)} emoji, skipped {skipped} malformed records")
    return tuple(emojis)


def load_catalog(path: Optional[str] = None, strict: bool = False) -> Tuple[Emoji, ...]:
    """
    Load the emoji catalog from a JSON file.

    Args:
        path: Catalog file; the bundled catalog when None
        strict: Raise CatalogError on missing or undecodable files

    Returns:
        Tuple of Emoji, empty when the file is unavailable
    """
    if path is None:
        return _load_bundled_catalog()
    return _read_catalog(path, strict)


@lru_cache(maxsize=1)
def _load_bundled_catalog() -> Tuple[Emoji, ...]:
    """Load the bundled catalog with caching."""
    return _read_catalog(DEFAULT_CATALOG_PATH, strict=False)


def _read_catalog(path: str, strict: bool) -> Tuple[Emoji, ...]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        if strict:
            raise CatalogError(f"Cannot load emoji catalog {path}: {e}") from e
        # Graceful fallback: the picker shows no emoji but keeps working
        logger.warning(f"Emoji catalog not available: {e}. Emoji catalog will be empty.")
        return ()

    return parse_catalog(data, strict=strict)


# ============================================================================
# SECTIONS
# ============================================================================

def build_sections(emojis: Iterable[Emoji],
                   categories: Optional[Sequence[EmojiCategory]] = None,
                   localization: Optional[PickerLocalization] = None) -> List[EmojiSection]:
    """
    Group emoji into one section per category, in the requested category order.

    Args:
        emojis: Catalog emoji
        categories: Categories to show; all nine when None
        localization: Source of section titles

    Returns:
        List of EmojiSection, including empty ones for categories with no emoji
    """
    categories = ALL_CATEGORIES if categories is None else categories
    localization = localization or PickerLocalization()

    by_category: Dict[EmojiCategory, List[Emoji]] = {category: [] for category in categories}
    for emoji in emojis:
        if emoji.category in by_category:
            by_category[emoji.category].append(emoji)

    return [
        EmojiSection(
            title=localization.category_title(category),
            icon=category.icon,
            emojis=tuple(by_category[category]),
        )
        for category in categories
    ]


def all_emojis(sections: Iterable[EmojiSection]) -> List[Emoji]:
    """Flatten sections into a single list."""
    return [emoji for section in sections for emoji in section.emojis]


def find_emoji(emojis: Iterable[Emoji], glyph: str) -> Optional[Emoji]:
    """
    Find a catalog emoji by glyph.

    A toned glyph matches its base emoji; U+FE0F is ignored when comparing.
    """
    if not glyph:
        return None

    wanted = _match_key(glyph)
    fallback = None
    for emoji in emojis:
        if emoji.glyph == glyph:
            return emoji
        if fallback is None and _match_key(emoji.glyph) == wanted:
            fallback = emoji
    return fallback


def _match_key(glyph: str) -> str:
    return strip_skin_tones(glyph).replace(VARIATION_SELECTOR_16, '')
