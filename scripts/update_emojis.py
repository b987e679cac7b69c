#!/usr/bin/env python3
"""
Download and parse Unicode emoji data to regenerate the bundled emoji catalog.

This script fetches the official Unicode emoji test file and writes every
fully-qualified emoji (with category, aliases, tags and skin tone support)
to src/emoji_picker/assets/emoji.json.
"""

import json
import urllib.request
from pathlib import Path
from typing import Any, Dict, List

from emoji_picker.unicode_data import EMOJI_TEST_URL, merge_catalog_metadata, parse_emoji_test


def download_emoji_data() -> str:
    """Download the official Unicode emoji test file."""
    print(f"Downloading emoji data from {EMOJI_TEST_URL}...")
    with urllib.request.urlopen(EMOJI_TEST_URL) as response:
        return response.read().decode('utf-8')


def load_existing_catalog(path: Path) -> List[Dict[str, Any]]:
    """Read the current catalog so curated aliases and iOS versions survive a refresh."""
    if not path.exists():
        return []
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return data if isinstance(data, list) else []


def save_catalog(records: List[Dict[str, Any]], output_path: Path) -> None:
    """Save catalog records to JSON file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(records, f, ensure_ascii=False, indent=2)

    print(f"✓ Saved {len(records)} emojis to {output_path}")


def main():
    """Main entry point."""
    script_dir = Path(__file__).parent
    repo_root = script_dir.parent
    output_path = repo_root / "src" / "emoji_picker" / "assets" / "emoji.json"

    print("Unicode Emoji Catalog Updater")
    print("=" * 50)

    try:
        data = download_emoji_data()
        records = merge_catalog_metadata(parse_emoji_test(data), load_existing_catalog(output_path))

        save_catalog(records, output_path)

        toned = sum(1 for record in records if record['skin_tones'])
        print("\n✓ Emoji catalog updated successfully!")
        print(f"  Total emojis: {len(records)}")
        print(f"  With skin tones: {toned}")
        print(f"  Output: {output_path}")
        print("  Remember to bump CATALOG_VERSION in src/emoji_picker/version.py")

    except Exception as e:
        print(f"\n✗ Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
