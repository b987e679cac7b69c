"""Skin tone preference persistence behind a small key-value interface."""
import json
import logging
import os
from typing import Dict, Optional

from .models import Emoji, SkinTone

logger = logging.getLogger(__name__)

KEY_PREFIX = 'emoji_skintone_'


def preference_key(glyph: str) -> str:
    """Storage key for an emoji's tone preference."""
    return f"{KEY_PREFIX}{glyph}"


class PreferenceStore:
    """Key-value store interface for string preferences."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class InMemoryPreferenceStore(PreferenceStore):
    """Dictionary backed store, lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)


class JsonFilePreferenceStore(PreferenceStore):
    """
    Store preferences as a JSON object on disk.

    The file is read once and rewritten on every change. A missing or
    corrupt file reads as empty; write failures are logged and the
    in-memory value is kept.
    """

    def __init__(self, path: str):
        self.path = path
        self._values = self._read()

    def _read(self) -> Dict[str, str]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning(f"Preferences file {self.path} unreadable: {e}. Starting with no preferences.")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Preferences file {self.path} is not a JSON object. Starting with no preferences.")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write(self) -> None:
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(self._values, f, ensure_ascii=False, indent=2, sort_keys=True)
        except OSError as e:
            logger.error(f"Failed to write preferences to {self.path}: {e}")

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
        self._write()

    def remove(self, key: str) -> None:
        if key in self._values:
            del self._values[key]
            self._write()


def save_skin_tone(store: PreferenceStore, emoji: Emoji, tone: Optional[SkinTone]) -> None:
    """Remember ``tone`` for ``emoji``; None forgets the preference."""
    key = preference_key(emoji.glyph)
    if tone is None:
        store.remove(key)
    else:
        store.set(key, tone.identifier)


def load_skin_tone(store: PreferenceStore, emoji: Emoji,
                   default: Optional[SkinTone] = None) -> Optional[SkinTone]:
    """
    Read the stored tone for ``emoji``.

    Args:
        store: Preference store
        emoji: Emoji whose preference to read
        default: Returned when nothing usable is stored

    Returns:
        Stored SkinTone, or ``default``
    """
    value = store.get(preference_key(emoji.glyph))
    if value is None:
        return default

    try:
        return SkinTone.from_identifier(value)
    except ValueError:
        logger.warning(f"Ignoring unknown stored skin tone {value!r} for {emoji.description}")
        return default


def open_preference_store(path: Optional[str] = None) -> PreferenceStore:
    """JSON file store at ``path``, or an in-memory store when no path is configured."""
    if path:
        logger.info(f"Using skin tone preferences from {path}")
        return JsonFilePreferenceStore(path)
    return InMemoryPreferenceStore()
