"""Unit tests for skin tone variant synthesis."""
import pytest

from emoji_picker.models import SkinTone
from emoji_picker.skin_tones import (
    synthesize,
    with_tone,
    scalars,
    render,
    default_presentation,
    has_skin_tone,
    strip_skin_tones,
    detect_skin_tone,
    VARIATION_SELECTOR_16,
    ZERO_WIDTH_JOINER,
)
from conftest import THUMBS_UP, VICTORY_HAND, TECHNOLOGIST, WOMAN_SHRUGGING, FAMILY, RED_HEART

ALL_TONES = list(SkinTone) + [None]


class TestScalars:
    """Tests for glyph normalization."""

    def test_string_input(self):
        """Strings should split into code points."""
        assert scalars(TECHNOLOGIST) == ['\U0001F9D1', '\u200d', '\U0001F4BB']

    def test_int_input(self):
        """Integer code points should become one-scalar strings."""
        assert scalars([0x1F44D, 0xFE0F]) == ['\U0001F44D', '\ufe0f']

    def test_mixed_input(self):
        """Mixed ints and strings should be flattened to scalars."""
        assert scalars([0x270C, '\ufe0f']) == ['\u270c', '\ufe0f']

    def test_render_round_trips(self):
        """Rendering the scalar list should give back the string."""
        assert render(scalars(WOMAN_SHRUGGING)) == WOMAN_SHRUGGING


class TestIneligibleEmoji:
    """Emoji without skin tone support are never modified."""

    @pytest.mark.parametrize('tone', ALL_TONES)
    def test_returns_glyph_unchanged(self, tone):
        """Every tone, including None, should return the glyph as is."""
        assert synthesize(RED_HEART, tone, False) == RED_HEART

    @pytest.mark.parametrize('tone', ALL_TONES)
    def test_multi_scalar_glyph_unchanged(self, tone):
        """Joined sequences should not be stripped to a single scalar."""
        assert synthesize(FAMILY, tone, False) == FAMILY

    def test_scalar_input_rendered(self):
        """A scalar sequence input should come back as a string."""
        assert synthesize([0x2764, 0xFE0F], SkinTone.DARK, False) == RED_HEART


class TestToneInsertion:
    """Tests for modifier placement."""

    def test_appends_without_markers(self):
        """Thumbs up with medium dark tone should append U+1F3FE."""
        assert synthesize(THUMBS_UP, SkinTone.MEDIUM_DARK, True) == '\U0001F44D\U0001F3FE'

    def test_replaces_variation_selector(self):
        """FE0F should be replaced by the modifier."""
        result = synthesize('\U0001F44D\ufe0f', SkinTone.LIGHT, True)
        assert result == '\U0001F44D\U0001F3FB'
        assert VARIATION_SELECTOR_16 not in result

    def test_victory_hand(self):
        """Text-default base characters should get the modifier in place of FE0F."""
        assert synthesize(VICTORY_HAND, SkinTone.MEDIUM, True) == '\u270c\U0001F3FD'

    def test_inserts_before_zwj(self):
        """The modifier should go immediately before the first ZWJ."""
        result = synthesize(TECHNOLOGIST, SkinTone.DARK, True)
        assert result == '\U0001F9D1\U0001F3FF\u200d\U0001F4BB'

    def test_zwj_sequence_with_trailing_selector(self):
        """ZWJ before FE0F: insertion at the ZWJ, the later FE0F is kept."""
        result = synthesize(WOMAN_SHRUGGING, SkinTone.MEDIUM_LIGHT, True)
        assert result == '\U0001F937\U0001F3FC\u200d\u2640\ufe0f'

    def test_selector_before_zwj_is_replaced(self):
        """FE0F before a ZWJ wins; the ZWJ is copied unchanged."""
        rainbow_flag = '\U0001F3F3\ufe0f\u200d\U0001F308'
        result = synthesize(rainbow_flag, SkinTone.LIGHT, True)
        assert result == '\U0001F3F3\U0001F3FB\u200d\U0001F308'

    def test_only_first_person_in_family_toned(self):
        """Multi-person sequences receive a single modifier on the first person."""
        result = synthesize(FAMILY, SkinTone.MEDIUM, True)
        assert result == '\U0001F468\U0001F3FD\u200d\U0001F469\u200d\U0001F467'
        assert result.count(SkinTone.MEDIUM.scalar) == 1

    def test_later_markers_copied(self):
        """Second FE0F and ZWJ after insertion should be copied verbatim."""
        glyph = '\u261d\ufe0f\u200d\ufe0f'
        result = synthesize(glyph, SkinTone.DARK, True)
        assert result == '\u261d\U0001F3FF\u200d\ufe0f'

    @pytest.mark.parametrize('tone', list(SkinTone))
    def test_every_tone_uses_its_modifier(self, tone):
        """Each tone should insert its own Fitzpatrick scalar."""
        assert synthesize(THUMBS_UP, tone, True) == THUMBS_UP + tone.scalar

    def test_scalar_sequence_input(self):
        """Code point sequences should be accepted."""
        assert synthesize([0x1F44D, 0xFE0F], SkinTone.LIGHT, True) == '\U0001F44D\U0001F3FB'

    def test_preserves_relative_order(self):
        """All non-marker scalars should keep their order."""
        glyph = '\U0001F3C3\u200d\u2642\ufe0f'
        result = synthesize(glyph, SkinTone.MEDIUM_DARK, True)
        assert strip_skin_tones(result) == glyph


class TestDefaultPresentation:
    """Tests for reverting to the tone-less presentation."""

    def test_single_scalar_unchanged(self):
        """A single scalar glyph is already minimal."""
        assert synthesize(THUMBS_UP, None, True) == THUMBS_UP

    def test_strips_to_first_scalar(self):
        """Multi scalar glyphs revert to their first scalar."""
        assert synthesize(VICTORY_HAND, None, True) == '\u270c'

    @pytest.mark.parametrize('tone', list(SkinTone))
    def test_revert_after_tone(self, tone):
        """Toning then reverting should give the first scalar."""
        toned = synthesize(THUMBS_UP, tone, True)
        assert synthesize(toned, None, True) == THUMBS_UP

    def test_revert_zwj_after_tone(self):
        """A toned ZWJ sequence reverts to its first person."""
        toned = synthesize(TECHNOLOGIST, SkinTone.LIGHT, True)
        assert synthesize(toned, None, True) == '\U0001F9D1'

    def test_default_presentation_helper(self):
        """Helper should agree with synthesize."""
        assert default_presentation(TECHNOLOGIST) == '\U0001F9D1'
        assert default_presentation('') == ''


class TestEmptyGlyph:
    """Degenerate input never raises."""

    @pytest.mark.parametrize('tone', ALL_TONES)
    @pytest.mark.parametrize('supported', [True, False])
    def test_empty_stays_empty(self, tone, supported):
        """Empty glyphs should produce empty output."""
        assert synthesize('', tone, supported) == ''

    def test_empty_sequence(self):
        """Empty scalar sequences should produce empty output."""
        assert synthesize([], SkinTone.DARK, True) == ''


class TestWithTone:
    """Tests for derived Emoji construction."""

    def test_replaces_only_glyph(self, thumbs_up):
        """Every field except glyph should be copied."""
        toned = with_tone(thumbs_up, SkinTone.MEDIUM_DARK)
        assert toned.glyph == '\U0001F44D\U0001F3FE'
        assert toned.description == thumbs_up.description
        assert toned.aliases == thumbs_up.aliases
        assert toned.tags == thumbs_up.tags
        assert toned.category == thumbs_up.category
        assert toned.supports_skin_tones is True
        assert toned.version == thumbs_up.version

    def test_does_not_mutate_input(self, technologist):
        """The original record should be untouched."""
        with_tone(technologist, SkinTone.DARK)
        assert technologist.glyph == TECHNOLOGIST

    def test_returns_new_record(self, thumbs_up):
        """A new instance should be returned."""
        assert with_tone(thumbs_up, SkinTone.LIGHT) is not thumbs_up

    def test_unsupported_keeps_glyph(self, red_heart):
        """Ineligible emoji keep their glyph."""
        assert with_tone(red_heart, SkinTone.DARK).glyph == RED_HEART
        assert with_tone(red_heart, None).glyph == RED_HEART

    def test_method_matches_function(self, victory_hand):
        """Emoji.with_tone should delegate to with_tone."""
        assert victory_hand.with_tone(SkinTone.DARK) == with_tone(victory_hand, SkinTone.DARK)


class TestToneInspection:
    """Tests for modifier inspection helpers."""

    def test_has_skin_tone(self):
        assert has_skin_tone('\U0001F44D\U0001F3FB') is True
        assert has_skin_tone(THUMBS_UP) is False

    def test_strip_skin_tones(self):
        """All modifiers should be removed."""
        glyph = '\U0001F468\U0001F3FB\u200d\U0001F469\U0001F3FF'
        assert strip_skin_tones(glyph) == '\U0001F468\u200d\U0001F469'

    def test_detect_skin_tone(self):
        assert detect_skin_tone(synthesize(TECHNOLOGIST, SkinTone.MEDIUM, True)) is SkinTone.MEDIUM
        assert detect_skin_tone(TECHNOLOGIST) is None

    def test_markers(self):
        assert ord(VARIATION_SELECTOR_16) == 0xFE0F
        assert ord(ZERO_WIDTH_JOINER) == 0x200D
