"""Pytest configuration and shared fixtures."""
import sys
import os
import pytest

# Add repo root and src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from emoji_picker.models import Emoji, EmojiCategory


# ============================================================================
# Common test fixtures
# ============================================================================

THUMBS_UP = '\U0001F44D'
VICTORY_HAND = '\u270c\ufe0f'
TECHNOLOGIST = '\U0001F9D1\u200d\U0001F4BB'
WOMAN_SHRUGGING = '\U0001F937\u200d\u2640\ufe0f'
FAMILY = '\U0001F468\u200d\U0001F469\u200d\U0001F467'
RED_HEART = '\u2764\ufe0f'
DOG_FACE = '\U0001F436'


@pytest.fixture
def thumbs_up():
    """Single scalar emoji that accepts skin tones."""
    return Emoji(
        glyph=THUMBS_UP,
        description='thumbs up',
        category=EmojiCategory.PEOPLE_AND_BODY,
        aliases=('+1', 'thumbsup'),
        tags=('approve', 'ok'),
        supports_skin_tones=True,
        version='6.0',
    )


@pytest.fixture
def victory_hand():
    """Emoji with a presentation selector that accepts skin tones."""
    return Emoji(
        glyph=VICTORY_HAND,
        description='victory hand',
        category=EmojiCategory.PEOPLE_AND_BODY,
        aliases=('v',),
        tags=('victory', 'peace'),
        supports_skin_tones=True,
        version='6.0',
    )


@pytest.fixture
def technologist():
    """ZWJ sequence that accepts skin tones."""
    return Emoji(
        glyph=TECHNOLOGIST,
        description='technologist',
        category=EmojiCategory.PEOPLE_AND_BODY,
        aliases=('technologist',),
        tags=('coder',),
        supports_skin_tones=True,
        version='14.2',
    )


@pytest.fixture
def red_heart():
    """Emoji that does not accept skin tones."""
    return Emoji(
        glyph=RED_HEART,
        description='red heart',
        category=EmojiCategory.SMILEYS_AND_EMOTION,
        aliases=('heart',),
        tags=('love',),
        supports_skin_tones=False,
        version='6.0',
    )


@pytest.fixture
def dog_face():
    return Emoji(
        glyph=DOG_FACE,
        description='dog face',
        category=EmojiCategory.ANIMALS_AND_NATURE,
        aliases=('dog',),
        tags=('pet',),
        supports_skin_tones=False,
        version='6.0',
    )


@pytest.fixture
def sample_emojis(thumbs_up, victory_hand, technologist, red_heart, dog_face):
    """Small catalog spanning three categories."""
    return [red_heart, thumbs_up, victory_hand, technologist, dog_face]


@pytest.fixture
def sample_records(sample_emojis):
    """Raw catalog records as stored in the JSON catalog."""
    return [emoji.to_dict() for emoji in sample_emojis]
