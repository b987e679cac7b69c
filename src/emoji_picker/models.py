"""Data shapes shared by the synthesizer, catalog, search and picker."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class SkinTone(Enum):
    """Fitzpatrick skin tone modifiers (U+1F3FB .. U+1F3FF)."""

    LIGHT = "\U0001F3FB"
    MEDIUM_LIGHT = "\U0001F3FC"
    MEDIUM = "\U0001F3FD"
    MEDIUM_DARK = "\U0001F3FE"
    DARK = "\U0001F3FF"

    @property
    def scalar(self) -> str:
        """The modifier as a one-scalar string."""
        return self.value

    @property
    def codepoint(self) -> int:
        return ord(self.value)

    @property
    def identifier(self) -> str:
        """Stable identifier used when persisting a preference."""
        return self.name.lower()

    @property
    def display_name(self) -> str:
        return self.name.replace('_', ' ').title()

    @classmethod
    def from_identifier(cls, value: str) -> "SkinTone":
        """
        Parse a tone from its identifier, member name, display name or raw modifier.

        Raises:
            ValueError: If the value names no tone
        """
        if not isinstance(value, str):
            raise ValueError(f"Unknown skin tone: {value!r}")

        for tone in cls:
            if value == tone.value:
                return tone

        normalized = value.strip().lower().replace('-', '_').replace(' ', '_')
        for tone in cls:
            if normalized == tone.identifier:
                return tone

        raise ValueError(f"Unknown skin tone: {value!r}")


MODIFIER_SCALARS = frozenset(tone.value for tone in SkinTone)


class EmojiCategory(Enum):
    """The nine Unicode emoji groups shown by the picker."""

    SMILEYS_AND_EMOTION = "Smileys & Emotion"
    PEOPLE_AND_BODY = "People & Body"
    ANIMALS_AND_NATURE = "Animals & Nature"
    FOOD_AND_DRINK = "Food & Drink"
    TRAVEL_AND_PLACES = "Travel & Places"
    ACTIVITIES = "Activities"
    OBJECTS = "Objects"
    SYMBOLS = "Symbols"
    FLAGS = "Flags"

    @property
    def icon(self) -> str:
        return CATEGORY_ICONS[self]

    @classmethod
    def from_name(cls, value: str) -> "EmojiCategory":
        """Look up a category by group name or member name, case-insensitively."""
        if isinstance(value, str):
            normalized = value.strip().lower()
            for category in cls:
                if normalized in (category.value.lower(), category.name.lower()):
                    return category
        raise ValueError(f"Unknown emoji category: {value!r}")


CATEGORY_ICONS = {
    EmojiCategory.SMILEYS_AND_EMOTION: 'face.smiling',
    EmojiCategory.PEOPLE_AND_BODY: 'person',
    EmojiCategory.ANIMALS_AND_NATURE: 'leaf',
    EmojiCategory.FOOD_AND_DRINK: 'fork.knife',
    EmojiCategory.TRAVEL_AND_PLACES: 'car',
    EmojiCategory.ACTIVITIES: 'basketball',
    EmojiCategory.OBJECTS: 'lightbulb',
    EmojiCategory.SYMBOLS: 'heart',
    EmojiCategory.FLAGS: 'flag',
}


@dataclass(frozen=True)
class Emoji:
    """A single catalog emoji in its default (tone-less) presentation."""
    glyph: str
    description: str
    category: EmojiCategory
    aliases: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    supports_skin_tones: bool = False
    version: str = ''

    @property
    def id(self) -> str:
        return self.glyph

    def with_tone(self, tone: Optional[SkinTone]) -> "Emoji":
        """Return a copy of this emoji with ``tone`` applied to its glyph."""
        from .skin_tones import with_tone
        return with_tone(self, tone)

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "Emoji":
        """
        Decode one catalog record.

        Args:
            record: Dictionary with emoji, description, category, aliases,
                tags, skin_tones (optional) and ios_version keys

        Returns:
            Emoji instance

        Raises:
            KeyError: If a required key is missing
            ValueError: If the category is unknown
        """
        return cls(
            glyph=record['emoji'],
            description=record['description'],
            category=EmojiCategory.from_name(record['category']),
            aliases=tuple(record.get('aliases') or ()),
            tags=tuple(record.get('tags') or ()),
            supports_skin_tones=bool(record.get('skin_tones', False)),
            version=str(record.get('ios_version') or ''),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'emoji': self.glyph,
            'description': self.description,
            'category': self.category.value,
            'aliases': list(self.aliases),
            'tags': list(self.tags),
            'skin_tones': self.supports_skin_tones,
            'ios_version': self.version,
        }


@dataclass(frozen=True)
class EmojiSection:
    """A titled group of emoji, one per category."""
    title: str
    icon: str
    emojis: Tuple[Emoji, ...] = ()

    @property
    def id(self) -> str:
        return self.title


ALL_CATEGORIES: Tuple[EmojiCategory, ...] = tuple(EmojiCategory)


@dataclass(frozen=True)
class PickerConfiguration:
    """Feature switches for an emoji picker session."""
    show_search: bool = True
    show_random: bool = True
    show_reset: bool = True
    show_close: bool = True
    supports_preview: bool = True
    categories: Tuple[EmojiCategory, ...] = ALL_CATEGORIES
    supports_skin_tones: bool = True
    persist_skin_tones: bool = True
    default_skin_tone: Optional[SkinTone] = None


@dataclass(frozen=True)
class PickerLocalization:
    """User-facing strings; category titles fall back to the Unicode group name."""
    search_field_placeholder: str = 'Search'
    search_results_title: str = 'Search results'
    search_results_empty_title: str = 'No results'
    searching_text: str = 'Searching...'
    random_button_title: str = 'Random'
    reset_button_title: str = 'Reset'
    close_button_title: str = 'Close'
    category_titles: Dict[EmojiCategory, str] = field(default_factory=dict)

    def category_title(self, category: EmojiCategory) -> str:
        return self.category_titles.get(category, category.value)
