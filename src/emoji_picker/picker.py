"""Emoji picker session: selection, preview and skin tone preference."""
import logging
import random
from typing import Callable, List, Optional, Sequence

from .catalog import all_emojis, build_sections, load_catalog
from .models import (
    Emoji,
    EmojiSection,
    PickerConfiguration,
    PickerLocalization,
    SkinTone,
)
from .preferences import InMemoryPreferenceStore, PreferenceStore, load_skin_tone, save_skin_tone
from .search import search_emojis

logger = logging.getLogger(__name__)


class EmojiPicker:
    """
    Selection state for one picker session.

    Every action returns its outcome; ``on_select`` is called in addition
    whenever the selection changes.
    """

    def __init__(self,
                 configuration: Optional[PickerConfiguration] = None,
                 localization: Optional[PickerLocalization] = None,
                 sections: Optional[Sequence[EmojiSection]] = None,
                 store: Optional[PreferenceStore] = None,
                 on_select: Optional[Callable[[Optional[Emoji]], None]] = None,
                 rng: Optional[random.Random] = None):
        self.configuration = configuration or PickerConfiguration()
        self.localization = localization or PickerLocalization()
        self.store = store if store is not None else InMemoryPreferenceStore()
        self.on_select = on_select
        self._rng = rng or random.Random()

        if sections is None:
            sections = build_sections(load_catalog(), self.configuration.categories, self.localization)
        self.sections: List[EmojiSection] = list(sections)

        self.selected: Optional[Emoji] = None
        self.previewing: Optional[Emoji] = None
        self._preview_base: Optional[Emoji] = None
        self.current_skin_tone: Optional[SkinTone] = self.configuration.default_skin_tone
        self.showing_skin_tone_selector = False
        self.results: List[Emoji] = []

    @property
    def emojis(self) -> List[Emoji]:
        return all_emojis(self.sections)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select(self, emoji: Emoji) -> Emoji:
        self.selected = emoji
        self._notify(emoji)
        return emoji

    def reset(self) -> None:
        self.selected = None
        self._notify(None)

    def select_random(self) -> Optional[Emoji]:
        """Select a random emoji from all sections; None when there are none."""
        emojis = self.emojis
        if not emojis:
            logger.info("No emoji available for random selection")
            return None
        return self.select(self._rng.choice(emojis))

    def _notify(self, emoji: Optional[Emoji]) -> None:
        if self.on_select is not None:
            self.on_select(emoji)

    # ------------------------------------------------------------------
    # Preview and skin tones
    # ------------------------------------------------------------------

    def start_preview(self, emoji: Emoji) -> Emoji:
        """Preview an emoji with its remembered tone and open the tone selector if it applies."""
        tone_enabled = emoji.supports_skin_tones and self.configuration.supports_skin_tones
        tone = self.preferred_tone(emoji) if tone_enabled else None
        # No remembered tone: show the catalog glyph as is
        self.previewing = emoji.with_tone(tone) if tone is not None else emoji
        self._preview_base = emoji
        self.showing_skin_tone_selector = tone_enabled
        return self.previewing

    def end_preview(self) -> None:
        self.previewing = None
        self._preview_base = None
        self.showing_skin_tone_selector = False

    def apply_skin_tone(self, tone: Optional[SkinTone]) -> Optional[Emoji]:
        """
        Apply ``tone`` to the previewed emoji.

        The tone becomes the session's current tone and, when persistence is
        enabled, the stored preference for the previewed emoji.

        Returns:
            The re-toned preview, or None when nothing is being previewed
        """
        self.current_skin_tone = tone

        base = self._preview_base
        if base is None:
            return None

        if self.configuration.persist_skin_tones and base.supports_skin_tones:
            save_skin_tone(self.store, base, tone)

        self.previewing = base.with_tone(tone)
        return self.previewing

    def preferred_tone(self, emoji: Emoji) -> Optional[SkinTone]:
        """Stored tone for ``emoji``, or the configured default."""
        return load_skin_tone(self.store, emoji, self.configuration.default_skin_tone)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, query: str) -> List[Emoji]:
        self.results = search_emojis(self.emojis, query)
        return self.results
