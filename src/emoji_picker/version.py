"""
Single source of truth for the package and bundled catalog versions.

The catalog version identifies the content of the bundled
``assets/emoji.json``; bump it whenever that file changes.
"""

import re
from typing import Dict

__version__ = "1.0.0"

CATALOG_VERSION = "1.0"

CATALOG_CHANGELOG: Dict[str, Dict[str, str]] = {
    "1.0": {
        "date": "2026-10-17",
        "changes": "Hand-picked sample of 46 emoji across all nine categories, with gemoji-style aliases "
                   "and the earliest iOS version per emoji"
    }
}


def get_version() -> str:
    """Get current catalog version."""
    return CATALOG_VERSION


def get_changelog(version: str = None) -> str:
    """
    Get changelog for a specific catalog version or all versions.

    Args:
        version: Specific version to get changelog for. If None, returns all.

    Returns:
        Formatted changelog string
    """
    if version:
        if version not in CATALOG_CHANGELOG:
            return f"No changelog found for version {version}"
        entry = CATALOG_CHANGELOG[version]
        return f"v{version} ({entry['date']}): {entry['changes']}"

    lines = ["Emoji Catalog Changelog", "=" * 50]
    for ver in sorted(CATALOG_CHANGELOG.keys(), key=_version_key, reverse=True):
        entry = CATALOG_CHANGELOG[ver]
        lines.append(f"\nv{ver} ({entry['date']}):")
        lines.append(f"  {entry['changes']}")
    return "\n".join(lines)


def validate_version_format(version: str) -> bool:
    """
    Validate a version string of the form X.Y or X.Y.Z.

    Args:
        version: Version string to validate

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(version, str):
        return False
    return bool(re.match(r'^\d+\.\d+(\.\d+)?$', version))


def _version_key(version: str):
    return tuple(int(part) for part in version.split('.'))
