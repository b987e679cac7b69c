"""Beam transforms that validate catalog records and expand skin tone variants."""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Generator

import apache_beam as beam
from apache_beam.pvalue import TaggedOutput

from ..catalog import validate_record
from ..models import Emoji, SkinTone
from ..skin_tones import synthesize
from ..version import CATALOG_VERSION

logger = logging.getLogger(__name__)


def create_dead_letter_record(record: Any, errors: list) -> Dict[str, Any]:
    """Wrap an unusable record with its errors for the dead letter output."""
    return {
        'emoji': record.get('emoji', '') if isinstance(record, dict) else '',
        '_validation_timestamp': datetime.now(timezone.utc).isoformat(),
        '_error_details': errors,
        '_original_payload': str(record),
        '_catalog_version': CATALOG_VERSION,
    }


class ValidateEmojiRecord(beam.DoFn):
    """Route raw catalog records to 'valid' (as Emoji) or 'invalid' (dead letter dicts)."""

    def process(self, element):
        try:
            errors = validate_record(element)
            if errors:
                logger.warning(f"Invalid catalog record {element!r}: {errors}")
                yield TaggedOutput('invalid', create_dead_letter_record(element, errors))
                return

            yield TaggedOutput('valid', Emoji.from_dict(element))

        except Exception as e:
            logger.error(f"Unexpected error during record validation: {e}")
            yield TaggedOutput('invalid', create_dead_letter_record(element, [f"Unexpected validation error: {e}"]))


class ExpandSkinTones(beam.DoFn):
    """Emit the default presentation of an emoji plus one row per skin tone it supports."""

    def process(self, element: Emoji) -> Generator[Dict[str, Any], None, None]:
        """
        Expand one emoji into variant rows.

        Args:
            element: Catalog Emoji

        Yields:
            Dictionaries with base, glyph, tone, description and category
        """
        yield self._row(element, element.glyph, None)

        if not element.supports_skin_tones:
            return

        for tone in SkinTone:
            glyph = synthesize(element.glyph, tone, element.supports_skin_tones)
            yield self._row(element, glyph, tone)

    @staticmethod
    def _row(emoji: Emoji, glyph: str, tone) -> Dict[str, Any]:
        return {
            'base': emoji.glyph,
            'glyph': glyph,
            'tone': tone.identifier if tone else None,
            'description': emoji.description,
            'category': emoji.category.value,
        }
