"""Case-insensitive emoji search over description, aliases and tags."""
import logging
from typing import Iterable, List

from .models import Emoji

logger = logging.getLogger(__name__)


def matches(emoji: Emoji, query: str) -> bool:
    """
    Check whether an emoji matches a search query.

    The whole query must appear in the description, or any whitespace
    separated term of the query must appear in an alias or a tag.
    """
    query_lower = query.strip().lower()
    if not query_lower:
        return False

    if query_lower in emoji.description.lower():
        return True

    terms = query_lower.split()
    keywords = [keyword.lower() for keyword in emoji.aliases + emoji.tags]
    return any(term in keyword for keyword in keywords for term in terms)


def search_emojis(emojis: Iterable[Emoji], query: str) -> List[Emoji]:
    """Return the emoji matching ``query`` in input order; an empty query matches nothing."""
    if not query or not query.strip():
        return []

    results = [emoji for emoji in emojis if matches(emoji, query)]
    logger.debug(f"Search {query!r} matched {len(results)} emoji")
    return results
