"""Emoji catalog, search and skin tone variant synthesis."""
from .models import (
    Emoji,
    EmojiCategory,
    EmojiSection,
    PickerConfiguration,
    PickerLocalization,
    SkinTone,
)
from .skin_tones import synthesize, with_tone
from .version import __version__

__all__ = [
    'Emoji',
    'EmojiCategory',
    'EmojiSection',
    'PickerConfiguration',
    'PickerLocalization',
    'SkinTone',
    'synthesize',
    'with_tone',
    '__version__',
]
