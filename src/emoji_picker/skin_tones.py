"""
Skin tone variant synthesis.

A skin tone modifier sits immediately after the base character and before
any presentation or joining markup. For a glyph's scalar sequence that means:

- the first VARIATION SELECTOR-16 (U+FE0F) is replaced by the modifier;
- otherwise the modifier goes right before the first ZERO WIDTH JOINER (U+200D);
- otherwise the modifier is appended.

Only the first marker counts, so a joined multi-person sequence receives a
single modifier on its first person.

All functions here are pure and safe to call from any thread.
"""
import dataclasses
from typing import Iterable, List, Optional, Union

from .models import MODIFIER_SCALARS, Emoji, SkinTone

VARIATION_SELECTOR_16 = '\ufe0f'
ZERO_WIDTH_JOINER = '\u200d'

GlyphInput = Union[str, Iterable[Union[str, int]]]


def scalars(glyph: GlyphInput) -> List[str]:
    """
    Normalize a glyph to a list of one-scalar strings.

    Args:
        glyph: A string, or an iterable of code points (ints) or scalar strings

    Returns:
        List of single code point strings
    """
    if isinstance(glyph, str):
        return list(glyph)

    result = []
    for item in glyph:
        if isinstance(item, int):
            result.append(chr(item))
        else:
            # A multi-scalar string item is split so every entry is one scalar
            result.extend(item)
    return result


def render(glyph: GlyphInput) -> str:
    """Render a scalar sequence back to its string form."""
    return ''.join(scalars(glyph))


def default_presentation(glyph: GlyphInput) -> str:
    """
    Return the tone-less default presentation of a glyph.

    The first scalar alone is used when there is one; an empty glyph is
    returned unchanged.
    """
    sequence = scalars(glyph)
    if not sequence:
        return ''
    return sequence[0]


def synthesize(base_glyph: GlyphInput,
               requested_tone: Optional[SkinTone],
               supports_skin_tones: bool) -> str:
    """
    Apply a skin tone to a glyph.

    Args:
        base_glyph: The emoji's canonical scalar sequence
        requested_tone: Tone to apply; None reverts to the default presentation
        supports_skin_tones: Whether the emoji accepts a tone modifier at all

    Returns:
        The modified glyph. Ineligible emoji and empty glyphs come back unchanged.
    """
    sequence = scalars(base_glyph)

    if not supports_skin_tones:
        return ''.join(sequence)

    if requested_tone is None:
        return default_presentation(sequence)

    if not sequence:
        return ''

    tone_scalar = requested_tone.scalar
    output = []
    inserted = False

    for scalar in sequence:
        if inserted:
            output.append(scalar)
        elif scalar == VARIATION_SELECTOR_16:
            output.append(tone_scalar)
            inserted = True
        elif scalar == ZERO_WIDTH_JOINER:
            output.append(tone_scalar)
            output.append(scalar)
            inserted = True
        else:
            output.append(scalar)

    if not inserted:
        output.append(tone_scalar)

    return ''.join(output)


def with_tone(emoji: Emoji, tone: Optional[SkinTone]) -> Emoji:
    """Return a new Emoji whose glyph carries ``tone``; every other field is copied."""
    glyph = synthesize(emoji.glyph, tone, emoji.supports_skin_tones)
    return dataclasses.replace(emoji, glyph=glyph)


def has_skin_tone(glyph: GlyphInput) -> bool:
    """True if any scalar of the glyph is a skin tone modifier."""
    return any(scalar in MODIFIER_SCALARS for scalar in scalars(glyph))


def strip_skin_tones(glyph: GlyphInput) -> str:
    """Remove every skin tone modifier from a glyph."""
    return ''.join(scalar for scalar in scalars(glyph) if scalar not in MODIFIER_SCALARS)


def detect_skin_tone(glyph: GlyphInput) -> Optional[SkinTone]:
    """Return the first skin tone found in a glyph, if any."""
    for scalar in scalars(glyph):
        if scalar in MODIFIER_SCALARS:
            return SkinTone(scalar)
    return None
