"""Emoji picker command line entry point."""
import argparse
import sys

from emoji_picker.catalog import build_sections, find_emoji, load_catalog
from emoji_picker.models import PickerLocalization
from emoji_picker.preferences import load_skin_tone, open_preference_store, save_skin_tone
from emoji_picker.search import search_emojis
from emoji_picker.skin_tones import synthesize
from emoji_picker.utils import (
    validate_config,
    configuration_from_config,
    parse_skin_tone,
    ConfigError,
    setup_logging,
    get_logger,
)

logger = get_logger(__name__)


def run_tone_mode(emojis, glyph: str, tone_name: str = None, supports_skin_tones: bool = None,
                  store=None, default_tone=None, persist: bool = False) -> str:
    """
    Print ``glyph`` with a tone applied.

    Eligibility comes from the catalog unless given. Without ``tone_name``
    the stored preference for the glyph is used, then ``default_tone``.
    With ``persist`` an explicit tone is remembered for catalog emoji.
    """
    emoji = find_emoji(emojis, glyph)
    if supports_skin_tones is None:
        supports_skin_tones = emoji.supports_skin_tones if emoji else True
        if emoji is None:
            logger.info(f"{glyph!r} not in catalog, assuming it accepts skin tones")

    if tone_name is None:
        tone = default_tone
        if emoji is not None and store is not None:
            tone = load_skin_tone(store, emoji, default_tone)
    else:
        tone = parse_skin_tone(tone_name)
        if persist and store is not None and emoji is not None and emoji.supports_skin_tones:
            save_skin_tone(store, emoji, tone)

    # Catalog emoji are re-toned from their base so modifiers never stack
    base_glyph = emoji.glyph if emoji is not None and supports_skin_tones else glyph
    result = synthesize(base_glyph, tone, supports_skin_tones)
    print(result)
    return result


def run_search_mode(emojis, query: str) -> list:
    results = search_emojis(emojis, query)
    for emoji in results:
        print(f"{emoji.glyph}  {emoji.description}")
    logger.info(f"🔎 {len(results)} result(s) for {query!r}")
    return results


def run_sections_mode(emojis, configuration) -> list:
    sections = build_sections(emojis, configuration.categories, PickerLocalization())
    for section in sections:
        print(f"{section.title} ({section.icon}): {len(section.emojis)}")
    return sections


def main():
    """Entry point with mode selection."""
    parser = argparse.ArgumentParser(description='Emoji Picker')
    parser.add_argument('mode', nargs='?', default='sections', choices=['tone', 'search', 'sections', 'variants'],
                        help='tone (apply skin tone), search (query catalog), sections (list categories), '
                             'variants (export all tone variants). Default: sections')
    parser.add_argument('--glyph', help='Emoji glyph for tone mode')
    parser.add_argument('--tone', help='Skin tone: light, medium_light, medium, medium_dark, dark or none. '
                                       'Omit to use the stored preference')
    parser.add_argument('--no-skin-tones', action='store_true', help='Treat the glyph as not accepting skin tones')
    parser.add_argument('--query', help='Search query for search mode')
    parser.add_argument('--catalog', help='Path to an emoji catalog JSON file')
    parser.add_argument('--output', default='output/emoji_variants', help='Output prefix for variants mode')

    args = parser.parse_args()

    setup_logging(level="INFO", structured=True)

    try:
        config = validate_config()
        if config.get('log_level', 'INFO') != 'INFO':
            setup_logging(level=config['log_level'], structured=True)

        if args.catalog:
            config['catalog_path'] = args.catalog

        configuration = configuration_from_config(config)
        logger.info(f"🚀 Running emoji picker in {args.mode} mode")

        if args.mode == 'variants':
            from pipeline import read_catalog_records, run_variants_pipeline
            run_variants_pipeline(read_catalog_records(config.get('catalog_path')), args.output)
            return

        emojis = load_catalog(config.get('catalog_path'))

        if args.mode == 'tone':
            if not args.glyph:
                parser.error('tone mode requires --glyph')
            run_tone_mode(emojis, args.glyph, args.tone, False if args.no_skin_tones else None,
                          store=open_preference_store(config.get('preferences_path')),
                          default_tone=configuration.default_skin_tone,
                          persist=configuration.persist_skin_tones)
        elif args.mode == 'search':
            if not args.query:
                parser.error('search mode requires --query')
            run_search_mode(emojis, args.query)
        elif args.mode == 'sections':
            run_sections_mode(emojis, configuration)

    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid argument: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Emoji picker failed: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
